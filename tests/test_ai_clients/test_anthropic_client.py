"""Tests for the Anthropic model client."""

import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from ai_clients.base import AiModelError


class TestAnthropicModelClient:
    """Test cases for AnthropicModelClient."""

    @pytest.fixture
    def mock_sdk(self):
        """Patch AsyncAnthropic so `async with AsyncAnthropic(...)` yields a mock client."""
        with patch("ai_clients.anthropic_client.AsyncAnthropic") as mock_anthropic:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock()
            mock_anthropic.return_value.__aenter__.return_value = mock_client
            yield mock_anthropic, mock_client

    def test_invoke_joins_text_blocks(self, mock_sdk, mock_anthropic_message):
        """Test that all text blocks are concatenated."""
        from ai_clients.anthropic_client import AnthropicModelClient

        mock_anthropic, mock_client = mock_sdk
        mock_client.messages.create.return_value = mock_anthropic_message

        result = asyncio.run(AnthropicModelClient().invoke("Capital of France?", "sk-ant-test"))

        assert result.response_text == "Paris is the capital of France."
        assert result.model_name == "claude-3-5-haiku-20241022"
        mock_anthropic.assert_called_once_with(api_key="sk-ant-test", timeout=60.0)

    def test_invoke_skips_non_text_blocks(self, mock_sdk, mock_anthropic_message):
        """Test that tool-use and other blocks are ignored."""
        from ai_clients.anthropic_client import AnthropicModelClient

        _, mock_client = mock_sdk
        tool_block = MagicMock()
        tool_block.type = "tool_use"
        mock_anthropic_message.content.insert(0, tool_block)
        mock_client.messages.create.return_value = mock_anthropic_message

        result = asyncio.run(AnthropicModelClient().invoke("hi", "sk-ant-test"))

        assert result.response_text == "Paris is the capital of France."

    def test_invoke_sends_system_prompt(self, mock_sdk, mock_anthropic_message):
        """Test the request sent to the messages API."""
        from ai_clients.anthropic_client import AnthropicModelClient
        from ai_clients.prompts import ASSISTANT_SYSTEM_PROMPT

        _, mock_client = mock_sdk
        mock_client.messages.create.return_value = mock_anthropic_message

        asyncio.run(AnthropicModelClient(model="claude-x", max_tokens=300).invoke("hi", "sk-ant-test"))

        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-x"
        assert kwargs["max_tokens"] == 300
        assert kwargs["system"] == ASSISTANT_SYSTEM_PROMPT
        assert "hi" in kwargs["messages"][0]["content"]

    def test_invoke_wraps_api_errors(self, mock_sdk):
        """Test that SDK errors are re-raised as AiModelError."""
        from ai_clients.anthropic_client import AnthropicModelClient

        _, mock_client = mock_sdk
        mock_client.messages.create.side_effect = Exception("Invalid API key")

        with pytest.raises(AiModelError, match="Invalid API key"):
            asyncio.run(AnthropicModelClient().invoke("hi", "bad"))

    def test_invoke_keeps_text_unchanged(self, mock_sdk):
        """Test that whitespace in the reply is passed through as-is."""
        from ai_clients.anthropic_client import AnthropicModelClient

        _, mock_client = mock_sdk
        block = MagicMock()
        block.type = "text"
        block.text = "  \n"
        message = MagicMock()
        message.content = [block]
        message.model = "claude-3-5-haiku-20241022"
        mock_client.messages.create.return_value = message

        result = asyncio.run(AnthropicModelClient().invoke("hi", "sk-ant-test"))

        assert result.response_text == "  \n"
