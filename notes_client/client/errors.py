"""Error taxonomy for remote RAG operations."""


class ClientError(Exception):
    """Base class for every failure surfaced by the controller."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.__class__.__name__)


class ValidationError(ClientError):
    """Raised before dispatch when the request is locally invalid."""

    pass


class TransportError(ClientError):
    """Raised when the remote service cannot be reached."""

    pass


class RemoteError(ClientError):
    """Raised on a non-success HTTP status.

    The message is the raw response body text.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code


class MalformedResponseError(ClientError):
    """Raised when a success response does not have the expected shape."""

    pass
