"""Common types for the AI model clients."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class AiModelError(RuntimeError):
    """Raised when an upstream AI model call fails."""


class AiResponse(BaseModel):
    """Normalized response produced by every AI model client."""
    response_text: Optional[str] = None
    confidence: Optional[float] = None
    model_name: Optional[str] = None


class AiModelClient(ABC):
    """An upstream AI model reachable with a per-call token."""

    name: str = "ai_model"

    @abstractmethod
    async def invoke(self, query: str, token: str) -> AiResponse:
        """Send ``query`` upstream, authenticating with ``token``."""
        raise NotImplementedError
