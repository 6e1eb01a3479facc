"""
Application errors for clean API error handling.

Each RelayError carries the HTTP status the API layer should answer with.
An unreachable RPC endpoint is not an error here: the balance lookup folds it
into a warning string and the request carries on.
"""


class RelayError(Exception):
    """Base for failures that end a relay request with an error response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidMethodError(RelayError):
    """Raised when the analyze endpoint is called with anything but POST."""

    status_code = 405

    def __init__(self, message: str = "Method Not Allowed") -> None:
        super().__init__(message)


class MissingQueryError(RelayError):
    """Raised when the request body has no usable query text."""

    status_code = 400

    def __init__(self, message: str = "Missing query parameter.") -> None:
        super().__init__(message)


class ProviderError(RelayError):
    """Raised when the generation API reports an error."""

    def __init__(self, provider_message: str) -> None:
        self.provider_message = provider_message
        super().__init__(f"Gemini API Error: {provider_message}")


class NetworkFailureError(RelayError):
    """Raised when an outbound call to the generation API fails at transport level."""
