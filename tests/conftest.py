# tests/conftest.py
"""Pytest configuration and shared fixtures."""

import logging

import pytest

from agentsmith.llm import Choice, CompletionResponse, LLMClient, Message, Role, Usage


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's shell settings out of the tests."""
    monkeypatch.delenv("API_KEY", raising=False)
    for name in (
        "AGENTSMITH_LLM_PROVIDER",
        "AGENTSMITH_LLM_MODEL",
        "AGENTSMITH_LLM_TIMEOUT",
        "AGENTSMITH_PROMPT",
        "AGENTSMITH_SENTINEL",
        "AGENTSMITH_LOG_LEVEL",
        "AGENTSMITH_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


def make_response(content: str = "hello", total_tokens: int = 7) -> CompletionResponse:
    return CompletionResponse(
        id="cmpl-test",
        object="chat.completion",
        created=1700000000,
        model="mistral-medium",
        choices=[
            Choice(
                index=0,
                message=Message(role=Role.ASSISTANT, content=content),
                finish_reason="stop",
            )
        ],
        usage=Usage(prompt_tokens=total_tokens - 1, completion_tokens=1, total_tokens=total_tokens),
    )


class ScriptedClient(LLMClient):
    """Returns (or raises) queued outcomes and records every call."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def complete(self, model, messages, api_key):
        self.calls.append({"model": model, "messages": list(messages), "api_key": api_key})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def client_factory():
    return ScriptedClient


@pytest.fixture(autouse=True)
def restore_logging():
    """setup_logging replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
