"""
Query Router: validates input, fans the query out to three AI models and
returns the combined answer.
"""

import asyncio
import logging
from typing import List, Sequence

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.config import settings, ConfigurationError
from app.models.schemas import QueryRequest, ApiResponse
from app.utils.response_combiner import combine_responses

from ai_clients import (
    AiModelClient,
    AiResponse,
    OpenAIModelClient,
    AnthropicModelClient,
    HttpModelClient,
)


logger = logging.getLogger(__name__)
router = APIRouter()

INTERNAL_ERROR_MESSAGE = "Internal server error"

# ---- Initialize shared components (module-level singletons) ----
model_1_client = OpenAIModelClient(
    model=settings.AI_MODEL_1_NAME,
    max_tokens=settings.AI_MAX_TOKENS,
    timeout=settings.AI_REQUEST_TIMEOUT,
)

model_2_client = AnthropicModelClient(
    model=settings.AI_MODEL_2_NAME,
    max_tokens=settings.AI_MAX_TOKENS,
    timeout=settings.AI_REQUEST_TIMEOUT,
)

model_3_client = HttpModelClient(
    url=settings.AI_MODEL_3_URL,
    model=settings.AI_MODEL_3_NAME,
    timeout=settings.AI_REQUEST_TIMEOUT,
)


def _error_response(message: str) -> JSONResponse:
    body = ApiResponse(response="", error=message or INTERNAL_ERROR_MESSAGE)
    return JSONResponse(status_code=500, content=body.model_dump())


async def _gather_best_effort(clients: Sequence[AiModelClient], calls) -> List[AiResponse]:
    """Await every call, keep the successes in model order.

    Raises the first failure when no call succeeded.
    """
    outcomes = await asyncio.gather(*calls, return_exceptions=True)

    responses: List[AiResponse] = []
    failures: List[BaseException] = []
    for client, outcome in zip(clients, outcomes):
        if isinstance(outcome, BaseException):
            logger.warning(f"Model '{client.name}' failed, continuing without it: {outcome}")
            failures.append(outcome)
        else:
            responses.append(outcome)

    if not responses and failures:
        raise failures[0]
    return responses


async def fan_out(query: str, tokens: Sequence[str]) -> List[AiResponse]:
    """Invoke all three models concurrently.

    In ``all_or_nothing`` mode the first failure fails the whole call; the
    remaining calls are left to finish on their own and their results are
    dropped.
    """
    clients = (model_1_client, model_2_client, model_3_client)
    calls = [client.invoke(query, token) for client, token in zip(clients, tokens)]

    if settings.FANOUT_MODE == "best_effort":
        return await _gather_best_effort(clients, calls)

    return list(await asyncio.gather(*calls))


@router.post("/query", response_model=ApiResponse, response_model_exclude_none=True)
async def run_query(request: QueryRequest):
    """
    Main query endpoint.
    """
    query = request.query
    logger.info(f"Received query: {query[:120]}...")

    try:
        # Step 1: Tokens
        tokens = settings.resolve_tokens()

        # Step 2: Fan out to all models
        responses = await fan_out(query, tokens)

        # Step 3: Pick the answer
        combined = combine_responses(responses)
        return ApiResponse(response=combined)

    except ConfigurationError as e:
        logger.error(f"Configuration error while processing query: {e}")
        return _error_response(str(e))
    except Exception as e:
        logger.exception(f"Error while processing query: {e}")
        return _error_response(str(e))
