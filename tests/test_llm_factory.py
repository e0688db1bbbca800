# tests/test_llm_factory.py
from unittest.mock import patch

import pytest

from agentsmith.core.config import LLMConfig
from agentsmith.llm import ChatCompletionClient, MockLLMClient, create_llm_client


class TestCreateLLMClient:
    """Tests for create_llm_client factory function."""

    def test_creates_mock_client(self):
        """Test factory creates MockLLMClient for 'mock' provider."""
        config = LLMConfig(provider="mock", model="mistral-medium", timeout=None)

        client = create_llm_client(config)

        assert isinstance(client, MockLLMClient)

    def test_creates_mock_client_case_insensitive(self):
        """Test factory handles provider name case-insensitively."""
        config = LLMConfig(provider="MOCK", model="mistral-medium", timeout=None)

        client = create_llm_client(config)

        assert isinstance(client, MockLLMClient)

    def test_creates_http_client(self):
        """Test factory creates ChatCompletionClient for 'http' provider."""
        config = LLMConfig(provider="http", model="gpt-4o", timeout=30.0)

        client = create_llm_client(config)

        assert isinstance(client, ChatCompletionClient)
        assert client.timeout == 30.0

    def test_http_client_without_timeout(self):
        config = LLMConfig(provider="http", model="mistral-medium", timeout=None)

        client = create_llm_client(config)

        assert client.timeout is None

    def test_raises_for_unsupported_provider(self):
        """Test factory raises ValueError for unsupported provider."""
        config = LLMConfig(provider="anthropic", model="claude-3", timeout=None)

        with pytest.raises(ValueError, match="Unsupported LLM provider"):
            create_llm_client(config)

    @patch("agentsmith.llm.factory.get_config")
    def test_uses_global_config_when_none_provided(self, mock_get_config):
        """Test factory uses global config when no config provided."""
        mock_get_config.return_value.llm = LLMConfig(
            provider="mock", model="mistral-medium", timeout=None
        )

        client = create_llm_client()

        mock_get_config.assert_called_once()
        assert isinstance(client, MockLLMClient)
