"""Factory for creating LLM clients from configuration."""

from agentsmith.core.config import LLMConfig, get_config
from agentsmith.llm.client import ChatCompletionClient, LLMClient, MockLLMClient


def create_llm_client(config: LLMConfig | None = None) -> LLMClient:
    """Create an LLM client based on configuration.

    Args:
        config: LLMConfig to use. If None, loads from global config.

    Returns:
        LLMClient instance for the configured provider.

    Raises:
        ValueError: If provider is not supported.
    """
    if config is None:
        config = get_config().llm

    provider = config.provider.lower()

    if provider == "mock":
        return MockLLMClient()
    elif provider == "http":
        return ChatCompletionClient(timeout=config.timeout)
    else:
        raise ValueError(
            f"Unsupported LLM provider: {config.provider}. "
            f"Supported providers: http, mock"
        )
