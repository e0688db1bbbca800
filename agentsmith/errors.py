"""Exception hierarchy for agentsmith.

Library code raises these; only the CLI turns them into exit codes.
"""


class AgentSmithError(Exception):
    """Base class for all agentsmith errors."""


class ConfigurationError(AgentSmithError):
    """The agent cannot be built or pointed at a service as configured."""


class MissingCredentialsError(ConfigurationError):
    """No API key was supplied."""


class EndpointResolutionError(ConfigurationError):
    """The model identifier does not map to a known completion service."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(
            f"No completion endpoint known for model '{model}'. "
            "Supported model prefixes: mistral, gpt"
        )


class CompletionError(AgentSmithError):
    """A single completion call failed. The transcript is left untouched."""


class TransportError(CompletionError):
    """The HTTP exchange itself failed (DNS, connection, TLS, ...)."""


class APIStatusError(CompletionError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        detail = f": {body[:200]}" if body else ""
        super().__init__(f"Completion service returned HTTP {status_code}{detail}")


class DecodeError(CompletionError):
    """The response body was not JSON or did not match the expected schema."""


class EmptyChoicesError(CompletionError):
    """The response was well-formed but contained no choices."""
