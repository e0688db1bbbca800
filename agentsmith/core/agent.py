import logging
from collections.abc import Iterable

from agentsmith.core.transcript import Transcript
from agentsmith.errors import EmptyChoicesError, MissingCredentialsError
from agentsmith.llm.client import ChatCompletionClient, LLMClient
from agentsmith.llm.schemas import Message, Role
from agentsmith.utils import default_prompt

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "mistral-medium"


class Agent:
    """
    Conversation state plus the request/response cycle around it.

    Owns the API key, the model id, a cumulative token counter and the
    transcript. Each successful turn appends exactly one assistant message
    and adds the reported ``total_tokens``; a failed turn changes nothing.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        prompt: str | None = None,
        messages: Iterable[Message] = (),
        client: LLMClient | None = None,
    ):
        """
        Initialize the agent.

        Args:
            api_key: Credential for the completion service (required)
            model: Model identifier, e.g. 'mistral-medium' or 'gpt-4o'
            prompt: System persona. If None, a leading system message in
                ``messages`` is used, falling back to the built-in persona
            messages: Seed messages appended in order after the persona
            client: Completion client; defaults to ChatCompletionClient

        Raises:
            MissingCredentialsError: If api_key is empty
        """
        if not api_key:
            raise MissingCredentialsError(
                "API key not set (use --api-key or the API_KEY environment variable)"
            )

        self.api_key = api_key
        self.model = model
        self.token_count = 0
        self.client = client or ChatCompletionClient()

        seeds = list(messages)
        if prompt is None:
            if seeds and seeds[0].role == Role.SYSTEM:
                prompt = seeds.pop(0).content
            else:
                prompt = default_prompt()

        self.transcript = Transcript(prompt)
        for message in seeds:
            self.transcript.append(message)

        logger.info(f"Initialized Agent with model: {model}")

    def set_prompt(self, text: str) -> None:
        """Replace the whole transcript with a single system message."""
        self.transcript.reset(text)
        logger.debug("Transcript reset to new system prompt")

    def add_message(self, role: Role | str, content: str) -> Message:
        message = Message(role=Role(role), content=content)
        self.transcript.append(message)
        return message

    def take_turn(self) -> Message:
        """
        Send the transcript to the model and fold the reply back in.

        Returns:
            The assistant message that was appended

        Raises:
            CompletionError: If the call fails; transcript and token_count
                are left exactly as they were
            EndpointResolutionError: If the model maps to no known endpoint
        """
        response = self.client.complete(self.model, self.transcript.messages, self.api_key)
        if not response.choices:
            raise EmptyChoicesError("No choices returned in completion response")

        reply = response.choices[0].message
        self.transcript.append(reply)
        self.token_count += response.usage.total_tokens

        logger.info(
            f"Turn complete: {len(self.transcript)} messages, "
            f"{response.usage.total_tokens} tokens (total {self.token_count})"
        )
        return reply
