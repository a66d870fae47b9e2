"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.routers import query as query_router
from app.config import settings, ConfigurationError, MISSING_TOKENS_MESSAGE
from app.models.schemas import ErrorResponse, HealthResponse
from app.utils.tracing import init_langfuse

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"
INVALID_QUERY_MESSAGE = "Invalid query parameter"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Check model tokens and set up tracing on startup; flush traces on shutdown."""
    missing = [slot for slot, ok in settings.token_status().items() if not ok]
    if missing:
        if settings.REQUIRE_TOKENS_AT_STARTUP:
            raise ConfigurationError(f"{MISSING_TOKENS_MESSAGE}: {', '.join(missing)}")
        logger.warning(f"Tokens not configured for {', '.join(missing)}; queries will fail until they are set")

    langfuse = init_langfuse(settings)

    logger.info(f"AI Query Gateway ready (fan-out mode: {settings.FANOUT_MODE})")
    yield
    logger.info("AI Query Gateway shutting down")
    if langfuse is not None:
        langfuse.flush()


app = FastAPI(
    title="AI Query Gateway",
    description="Fans a text query out to three AI models and returns one answer",
    version=VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount query router
app.include_router(query_router.router, prefix="/api", tags=["Query"])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed query bodies with a fixed 400 message."""
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=INVALID_QUERY_MESSAGE).model_dump()
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler for errors that escape the routes."""
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump()
    )


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint."""
    return "Server is running"


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    models = settings.token_status()
    return HealthResponse(
        status="healthy" if all(models.values()) else "degraded",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        models=models
    )


def run() -> None:
    """Serve the app; uvicorn drains in-flight requests on SIGTERM."""
    logger.info(f"Starting server at http://{settings.API_HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
    )


if __name__ == "__main__":
    run()
