from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a message in the transcript."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """Represents a single turn of the conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Role of the message sender ('system', 'user', 'assistant')")
    content: str = Field(..., description="Content of the message")


class CompletionRequest(BaseModel):
    """Request body for a chat-completions call."""

    model: str = Field(..., description="Model identifier, e.g. 'mistral-medium' or 'gpt-4'")
    messages: list[Message] = Field(..., description="Full transcript, oldest first")


class Choice(BaseModel):
    index: int = 0
    message: Message
    finish_reason: str | None = None


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = Field(..., ge=0)


class CompletionResponse(BaseModel):
    """Represents the response from a chat-completions request.

    Only ``choices[0]`` and ``usage.total_tokens`` are consumed by the agent.
    """

    id: str | None = None
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[Choice] = Field(..., description="Generated candidates, first one is used")
    usage: Usage = Field(..., description="Token accounting reported by the service")
