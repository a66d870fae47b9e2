"""Langfuse client setup for tracing the model calls."""

import logging
from typing import Optional

from langfuse import Langfuse

logger = logging.getLogger(__name__)


def init_langfuse(settings) -> Optional[Langfuse]:
    """Create the Langfuse client that ``@observe`` reports to.

    Args:
        settings: Application settings holding the Langfuse keys and host

    Returns:
        Langfuse client, or None when the keys are not configured
    """
    if not (settings.LANGFUSE_PUBLIC_KEY and settings.LANGFUSE_SECRET_KEY):
        logger.info("Langfuse keys not configured; tracing disabled")
        return None

    client = Langfuse(
        public_key=settings.LANGFUSE_PUBLIC_KEY,
        secret_key=settings.LANGFUSE_SECRET_KEY,
        host=settings.LANGFUSE_HOST
    )
    logger.info(f"Langfuse tracing enabled ({settings.LANGFUSE_HOST})")
    return client
