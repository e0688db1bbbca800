from agentsmith.llm.client import ChatCompletionClient, LLMClient, MockLLMClient
from agentsmith.llm.endpoints import resolve_endpoint
from agentsmith.llm.factory import create_llm_client
from agentsmith.llm.schemas import (
    Choice,
    CompletionRequest,
    CompletionResponse,
    Message,
    Role,
    Usage,
)

__all__ = [
    "LLMClient",
    "MockLLMClient",
    "ChatCompletionClient",
    "Choice",
    "CompletionRequest",
    "CompletionResponse",
    "Message",
    "Role",
    "Usage",
    "create_llm_client",
    "resolve_endpoint",
]
