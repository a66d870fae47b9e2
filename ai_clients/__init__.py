"""AI model clients - one adapter per upstream model."""

from .base import AiModelClient, AiModelError, AiResponse
from .openai_client import OpenAIModelClient
from .anthropic_client import AnthropicModelClient
from .http_client import HttpModelClient

__all__ = [
    "AiModelClient",
    "AiModelError",
    "AiResponse",
    "OpenAIModelClient",
    "AnthropicModelClient",
    "HttpModelClient",
]
