"""AI model client backed by the OpenAI chat completions API."""

import logging

from langfuse import observe
from openai import AsyncOpenAI

from .base import AiModelClient, AiModelError, AiResponse
from .prompts import ASSISTANT_SYSTEM_PROMPT, USER_QUERY_TEMPLATE

logger = logging.getLogger(__name__)


class OpenAIModelClient(AiModelClient):
    """Query an OpenAI chat model."""

    name = "openai"

    def __init__(self, model: str = "gpt-4o", max_tokens: int = 1000, timeout: float = 60.0):
        """Initialize OpenAI model client.

        Args:
            model: OpenAI model to use
            max_tokens: Maximum tokens in response
            timeout: Request timeout in seconds
        """
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        logger.info(f"OpenAIModelClient initialized with model: {model}")

    # Arguments include the API token, so inputs are never traced
    @observe(name="openai_model", capture_input=False)
    async def invoke(self, query: str, token: str) -> AiResponse:
        """Ask the OpenAI model and normalize its reply."""
        logger.info(f"Querying OpenAI model {self.model}: {query[:100]}...")

        try:
            async with AsyncOpenAI(api_key=token, timeout=self.timeout) as client:
                response = await client.chat.completions.create(     # type: ignore[call-overload]
                    model=self.model,
                    messages=[
                        {"role": "system", "content": ASSISTANT_SYSTEM_PROMPT},
                        {"role": "user", "content": USER_QUERY_TEMPLATE.format(query=query)}
                    ],
                    max_tokens=self.max_tokens,
                )
        except Exception as e:
            logger.error(f"OpenAI model error: {e}")
            raise AiModelError(f"OpenAI model request failed: {e}") from e

        if not response.choices:
            raise AiModelError("OpenAI model returned no choices")

        return AiResponse(
            response_text=response.choices[0].message.content or "",
            model_name=response.model or self.model,
        )
