"""Combine the answers of several AI models into one display string."""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ai_clients.base import AiResponse

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response from AI models."
NO_VALID_RESPONSE_MESSAGE = "No valid responses from AI models."

ResponseLike = Union[AiResponse, Mapping[str, Any], None]


def _response_text(response: ResponseLike) -> Optional[str]:
    if response is None:
        return None
    if isinstance(response, Mapping):
        return response.get("response_text")
    return response.response_text


def combine_responses(responses: Optional[Sequence[ResponseLike]]) -> str:
    """Pick the first response with non-empty text, in model order.

    Confidence and model name are not used for selection.
    """
    if not responses:
        return NO_RESPONSE_MESSAGE

    valid = [r for r in responses if _response_text(r)]
    if not valid:
        logger.warning(f"None of the {len(responses)} model responses had text")
        return NO_VALID_RESPONSE_MESSAGE

    return _response_text(valid[0])  # type: ignore[return-value]
