"""Utility modules."""

from .response_combiner import combine_responses
from .tracing import init_langfuse

__all__ = ["combine_responses", "init_langfuse"]
