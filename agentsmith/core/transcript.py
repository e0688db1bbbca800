from collections.abc import Iterator

from agentsmith.llm.schemas import Message, Role


class Transcript:
    """Append-only conversation history, oldest message first.

    The message order is sent verbatim to the model, so nothing is ever
    removed or reordered. ``reset`` is the only way to start over.
    """

    def __init__(self, prompt: str | None = None):
        self._messages: list[Message] = []
        if prompt is not None:
            self._messages.append(Message(role=Role.SYSTEM, content=prompt))

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def reset(self, prompt: str) -> None:
        """Discard the history and start again from a single system message."""
        self._messages = [Message(role=Role.SYSTEM, content=prompt)]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __repr__(self) -> str:
        return f"Transcript(messages={len(self._messages)})"
