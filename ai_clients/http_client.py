"""AI model client for a generic JSON-over-HTTP inference endpoint."""

import logging
from typing import Any, Dict

import httpx
from langfuse import observe
from pydantic import ValidationError

from .base import AiModelClient, AiModelError, AiResponse

logger = logging.getLogger(__name__)

# Keys tried in order when reading the answer text from the endpoint's JSON body.
TEXT_KEYS = ("response_text", "text", "response")


class HttpModelClient(AiModelClient):
    """Query a model served behind a plain HTTP endpoint.

    The endpoint receives ``{"query": ...}`` with a bearer token and is
    expected to answer with a JSON object holding the text under one of
    ``TEXT_KEYS``, optionally alongside ``confidence`` and ``model_name``.
    """

    name = "http"

    def __init__(self, url: str, model: str = "generic-model", timeout: float = 60.0):
        self.url = url
        self.model = model
        self.timeout = timeout
        logger.info(f"HttpModelClient initialized for {url}")

    def _normalize(self, payload: Any) -> AiResponse:
        """Map the endpoint's JSON body onto AiResponse."""
        if not isinstance(payload, dict):
            raise AiModelError(f"HTTP model returned non-object payload ({type(payload).__name__})")

        text = None
        for key in TEXT_KEYS:
            if payload.get(key):
                text = str(payload[key])
                break

        confidence = payload.get("confidence")
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            confidence = None

        try:
            return AiResponse(
                response_text=text,
                confidence=confidence,
                model_name=payload.get("model_name") or self.model,
            )
        except ValidationError as e:
            raise AiModelError(f"HTTP model returned malformed payload: {e}") from e

    # Arguments include the API token, so inputs are never traced
    @observe(name="http_model", capture_input=False)
    async def invoke(self, query: str, token: str) -> AiResponse:
        """POST the query to the endpoint and normalize its reply."""
        logger.info(f"Querying HTTP model at {self.url}: {query[:100]}...")
        headers: Dict[str, str] = {"Authorization": f"Bearer {token}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, headers=headers, json={"query": query})
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"HTTP model error: {e}")
            raise AiModelError(f"HTTP model request failed: {e}") from e

        return self._normalize(payload)
