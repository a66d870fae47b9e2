"""Shared pytest fixtures for AI Query Gateway tests."""

import os
import sys
import pytest
from unittest.mock import MagicMock, AsyncMock, patch

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app modules
os.environ["AI_MODEL_1_TOKEN"] = "test-token-1"
os.environ["AI_MODEL_2_TOKEN"] = "test-token-2"
os.environ["AI_MODEL_3_TOKEN"] = "test-token-3"
os.environ["LANGFUSE_TRACING_ENABLED"] = "false"

from ai_clients.base import AiResponse


# ---------------------------------------------------------------------------
# Settings Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_settings():
    """Build a Settings instance from explicit values only (no env, no .env)."""
    from app.config import Settings

    def _make(**overrides):
        with patch.dict(os.environ, {}, clear=True):
            return Settings(_env_file=None, **overrides)
    return _make


@pytest.fixture
def full_settings(make_settings):
    """Settings with all three model tokens configured."""
    return make_settings(
        AI_MODEL_1_TOKEN="token-1",
        AI_MODEL_2_TOKEN="token-2",
        AI_MODEL_3_TOKEN="token-3",
    )


# ---------------------------------------------------------------------------
# AI Response Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_ai_responses():
    """Three valid responses, one per model, in model order."""
    return [
        AiResponse(response_text="Answer from GPT", confidence=0.4, model_name="gpt-4o"),
        AiResponse(response_text="Answer from Claude", confidence=0.9, model_name="claude"),
        AiResponse(response_text="Answer from HTTP model", confidence=0.7, model_name="generic-model"),
    ]


# ---------------------------------------------------------------------------
# AI Client Mock Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_model_clients(sample_ai_responses):
    """Patch the three module-level model clients used in query.py."""
    patches = [
        patch("app.routers.query.model_1_client"),
        patch("app.routers.query.model_2_client"),
        patch("app.routers.query.model_3_client"),
    ]
    mocks = []
    for p, response in zip(patches, sample_ai_responses):
        client = p.start()
        client.invoke = AsyncMock(return_value=response)
        mocks.append(client)

    yield mocks

    for p in patches:
        p.stop()


# ---------------------------------------------------------------------------
# Provider SDK Mock Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_openai_completion():
    """Mock OpenAI chat completion response."""
    response = MagicMock()
    choice = MagicMock()
    choice.message.content = "Paris is the capital of France."
    response.choices = [choice]
    response.model = "gpt-4o-2024-08-06"
    return response


@pytest.fixture
def mock_anthropic_message():
    """Mock Anthropic messages response with two text blocks."""
    first = MagicMock()
    first.type = "text"
    first.text = "Paris is the capital "
    second = MagicMock()
    second.type = "text"
    second.text = "of France."
    response = MagicMock()
    response.content = [first, second]
    response.model = "claude-3-5-haiku-20241022"
    return response
