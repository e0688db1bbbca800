import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

import requests
from pydantic import ValidationError

from agentsmith.errors import (
    APIStatusError,
    DecodeError,
    EmptyChoicesError,
    TransportError,
)
from agentsmith.llm.endpoints import resolve_endpoint
from agentsmith.llm.schemas import (
    Choice,
    CompletionRequest,
    CompletionResponse,
    Message,
    Role,
    Usage,
)

logger = logging.getLogger(__name__)


class LLMClient(ABC):
    """
    Abstract base class for chat-completion clients.

    Provides a common interface for the HTTP client and the offline mock.
    """

    @abstractmethod
    def complete(
        self, model: str, messages: Sequence[Message], api_key: str
    ) -> CompletionResponse:
        """
        Generate a completion for the given transcript.

        Args:
            model: Model identifier to request
            messages: Conversation transcript, oldest first
            api_key: Credential for the completion service

        Returns:
            CompletionResponse with at least one choice

        Raises:
            CompletionError: If the call fails for any reason
        """
        pass


class MockLLMClient(LLMClient):
    """
    Mock LLM client for testing and development.

    Answers without touching the network. Token usage is estimated from
    whitespace-separated words.
    """

    def __init__(self, response_prefix: str = "Mock response:"):
        """
        Initialize the mock client.

        Args:
            response_prefix: Prefix to add to all mock responses
        """
        self.response_prefix = response_prefix
        logger.info("Initialized MockLLMClient")

    def complete(
        self, model: str, messages: Sequence[Message], api_key: str
    ) -> CompletionResponse:
        if not messages:
            logger.warning("Empty messages list provided to MockLLMClient")
            response_text = f"{self.response_prefix} No messages provided."
        else:
            last_message = messages[-1]
            response_text = (
                f"{self.response_prefix} I understand your request about "
                f"'{last_message.content[:50]}'. This reply is based on "
                f"{len(messages)} message(s) in the conversation."
            )

        prompt_tokens = sum(len(m.content.split()) for m in messages)
        completion_tokens = len(response_text.split())

        logger.debug(f"MockLLMClient generated response of length {len(response_text)}")

        return CompletionResponse(
            model=model,
            choices=[
                Choice(
                    index=0,
                    message=Message(role=Role.ASSISTANT, content=response_text),
                    finish_reason="stop",
                )
            ],
            usage=Usage(
                prompt_tokens=prompt_tokens,
                completion_tokens=completion_tokens,
                total_tokens=prompt_tokens + completion_tokens,
            ),
        )


class ChatCompletionClient(LLMClient):
    """
    HTTP client for OpenAI-compatible chat-completions endpoints.

    The endpoint is picked from the model identifier (Mistral or OpenAI).
    Every call is a single blocking POST: no retries, no backoff, no caching.
    """

    def __init__(self, timeout: float | None = None):
        """
        Initialize the client.

        Args:
            timeout: Seconds to wait for the service. None waits indefinitely.
        """
        self.timeout = timeout
        logger.info(f"Initialized ChatCompletionClient (timeout={timeout})")

    def complete(
        self, model: str, messages: Sequence[Message], api_key: str
    ) -> CompletionResponse:
        """
        Generate a completion via the model's chat-completions endpoint.

        Args:
            model: Model identifier; its prefix selects the endpoint
            messages: Conversation transcript, oldest first
            api_key: Bearer token for the service

        Returns:
            CompletionResponse with at least one choice

        Raises:
            EndpointResolutionError: If the model prefix is unknown
            TransportError: If the HTTP exchange fails
            APIStatusError: If the service answers with an error status
            DecodeError: If the body is not a valid completion response
            EmptyChoicesError: If the response carries no choices
        """
        url = resolve_endpoint(model)

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        payload = CompletionRequest(model=model, messages=list(messages)).model_dump(mode="json")

        logger.debug(f"Requesting completion from {url} for {model} ({len(messages)} messages)")

        try:
            response = requests.post(url, headers=headers, json=payload, timeout=self.timeout)
        except (requests.exceptions.RequestException, UnicodeError) as e:
            # UnicodeError: header values (the API key) must encode as latin-1
            logger.error(f"Completion request to {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            logger.error(f"Completion service returned HTTP {response.status_code}")
            raise APIStatusError(response.status_code, response.text)

        try:
            data = response.json()
            completion = CompletionResponse.model_validate(data)
        except (ValueError, ValidationError) as e:
            logger.error(f"Failed to parse completion response: {e}")
            raise DecodeError(f"Malformed completion response: {e}") from e

        if not completion.choices:
            raise EmptyChoicesError("No choices returned in completion response")

        logger.info(f"Completion successful. Tokens: {completion.usage.total_tokens}")

        return completion
