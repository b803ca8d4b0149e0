"""Custom exceptions for the CompactifAI client library."""

from typing import Literal

ErrorKind = Literal["service", "decode"]


class CompactifAIError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ApiError(CompactifAIError):
    """Raised when the API returns an error or a response that cannot be decoded.

    A service error carries the HTTP status code and the raw response body.
    A decode error (a 2xx response whose body could not be turned into the
    expected shape) has no status code.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int, response_body: str) -> "ApiError":
        """Build a service error from a non-success HTTP response."""
        return cls(
            f"API request failed with status {status_code}: {response_body}",
            status_code=status_code,
            response_body=response_body,
        )

    @classmethod
    def decode_failed(
        cls,
        message: str = "Failed to deserialize API response",
        response_body: str | None = None,
    ) -> "ApiError":
        """Build a decode error for an unusable success response."""
        return cls(message, response_body=response_body)

    @property
    def kind(self) -> ErrorKind:
        return "service" if self.status_code is not None else "decode"

    @property
    def is_service_error(self) -> bool:
        return self.kind == "service"

    @property
    def is_decode_error(self) -> bool:
        return self.kind == "decode"


class TransportError(CompactifAIError):
    """Base class for failures that never reached the service."""

    def __init__(self, message: str, base_url: str | None = None):
        self.base_url = base_url
        super().__init__(message)


class ServiceUnreachableError(TransportError):
    """Raised when the API host cannot be reached."""

    pass


class ServiceTimeoutError(TransportError):
    """Raised when a request to the API times out."""

    pass


class ConfigurationError(CompactifAIError):
    """Raised when there is a configuration problem."""

    pass
