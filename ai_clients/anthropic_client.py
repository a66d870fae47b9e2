"""AI model client backed by the Anthropic messages API."""

import logging

from anthropic import AsyncAnthropic
from langfuse import observe

from .base import AiModelClient, AiModelError, AiResponse
from .prompts import ASSISTANT_SYSTEM_PROMPT, USER_QUERY_TEMPLATE

logger = logging.getLogger(__name__)


class AnthropicModelClient(AiModelClient):
    """Query an Anthropic Claude model."""

    name = "anthropic"

    def __init__(
        self,
        model: str = "claude-3-5-haiku-20241022",
        max_tokens: int = 1000,
        timeout: float = 60.0
    ):
        """Initialize Anthropic model client.

        Args:
            model: Anthropic model to use
            max_tokens: Maximum tokens in response
            timeout: Request timeout in seconds
        """
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        logger.info(f"AnthropicModelClient initialized with model: {model}")

    # Arguments include the API token, so inputs are never traced
    @observe(name="anthropic_model", capture_input=False)
    async def invoke(self, query: str, token: str) -> AiResponse:
        """Ask the Claude model and normalize its reply."""
        logger.info(f"Querying Anthropic model {self.model}: {query[:100]}...")

        try:
            async with AsyncAnthropic(api_key=token, timeout=self.timeout) as client:
                response = await client.messages.create(
                    model=self.model,
                    max_tokens=self.max_tokens,
                    system=ASSISTANT_SYSTEM_PROMPT,
                    messages=[
                        {"role": "user", "content": USER_QUERY_TEMPLATE.format(query=query)}
                    ],
                )
        except Exception as e:
            logger.error(f"Anthropic model error: {e}")
            raise AiModelError(f"Anthropic model request failed: {e}") from e

        # Only text blocks carry the answer
        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

        return AiResponse(
            response_text=text,
            model_name=response.model or self.model,
        )
