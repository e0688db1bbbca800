"""Map model identifiers to chat-completions endpoints."""

from agentsmith.errors import EndpointResolutionError

MISTRAL_URL = "https://api.mistral.ai/v1/chat/completions"
OPENAI_URL = "https://api.openai.com/v1/chat/completions"

# Checked in order; first matching prefix wins.
ENDPOINTS: tuple[tuple[str, str], ...] = (
    ("mistral", MISTRAL_URL),
    ("gpt", OPENAI_URL),
)


def resolve_endpoint(model: str) -> str:
    """Return the completion URL serving ``model``.

    Args:
        model: Model identifier such as 'mistral-medium' or 'gpt-4o'

    Returns:
        The chat-completions URL for the model's provider

    Raises:
        EndpointResolutionError: If no known prefix matches
    """
    for prefix, url in ENDPOINTS:
        if model.startswith(prefix):
            return url
    raise EndpointResolutionError(model)
