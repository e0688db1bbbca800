import pytest

from agentsmith.llm import (
    CompletionResponse,
    LLMClient,
    Message,
    MockLLMClient,
    Role,
)


class TestLLMClient:
    """Tests for the abstract LLMClient interface."""

    def test_llm_client_is_abstract(self):
        with pytest.raises(TypeError):
            LLMClient()  # type: ignore

    def test_llm_client_subclass_must_implement_complete(self):
        class IncompleteLLMClient(LLMClient):
            pass

        with pytest.raises(TypeError):
            IncompleteLLMClient()  # type: ignore

    def test_llm_client_subclass_with_complete_works(self, response_factory):
        class CompleteLLMClient(LLMClient):
            def complete(self, model, messages, api_key):
                return response_factory("test")

        client = CompleteLLMClient()
        result = client.complete("mistral-tiny", [], "k")
        assert isinstance(result, CompletionResponse)
        assert result.choices[0].message.content == "test"


class TestMockLLMClient:
    """Tests for the MockLLMClient implementation."""

    def test_initialization(self):
        client = MockLLMClient()
        assert client.response_prefix == "Mock response:"

    def test_initialization_with_custom_prefix(self):
        client = MockLLMClient(response_prefix="Custom:")
        assert client.response_prefix == "Custom:"

    def test_complete_with_empty_messages(self):
        client = MockLLMClient()
        response = client.complete("mistral-medium", [], "k")
        assert "No messages provided" in response.choices[0].message.content

    def test_complete_returns_assistant_message(self):
        client = MockLLMClient()
        messages = [Message(role=Role.USER, content="What is the weather today?")]
        response = client.complete("mistral-medium", messages, "k")

        assert len(response.choices) == 1
        reply = response.choices[0].message
        assert reply.role == Role.ASSISTANT
        assert "What is the weather today?" in reply.content
        assert response.choices[0].finish_reason == "stop"

    def test_complete_counts_messages(self):
        client = MockLLMClient()
        messages = [
            Message(role=Role.SYSTEM, content="You are a helpful assistant"),
            Message(role=Role.USER, content="Hello"),
            Message(role=Role.ASSISTANT, content="Hi there"),
            Message(role=Role.USER, content="Tell me something"),
        ]
        response = client.complete("gpt-4o", messages, "k")

        assert "4 message(s)" in response.choices[0].message.content
        assert response.model == "gpt-4o"

    def test_usage_is_consistent(self):
        client = MockLLMClient()
        messages = [Message(role=Role.USER, content="one two three")]
        response = client.complete("mistral-medium", messages, "k")

        usage = response.usage
        assert usage.prompt_tokens == 3
        assert usage.total_tokens == usage.prompt_tokens + usage.completion_tokens
        assert usage.total_tokens > 0

    def test_complete_respects_custom_prefix(self):
        client = MockLLMClient(response_prefix="TEST:")
        messages = [Message(role=Role.USER, content="Generic request")]
        response = client.complete("mistral-medium", messages, "k")

        assert response.choices[0].message.content.startswith("TEST:")
