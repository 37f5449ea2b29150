"""Exception hierarchy for strapi-fluent.

All errors raised by the SDK derive from StrapiError so callers can catch
them in one place, while the subclasses let them react to specific failures:

- InvalidOperationError: a bulk operation has the wrong shape, or an auth
  call was made on a resource other than "users". Raised before any request.
- RemoteError and its subclasses: the server answered with a non-2xx status.
- NetworkError (ConnectionError, TimeoutError): no usable answer arrived.
- RollbackError: compensating an atomic batch failed part way through.
"""

from typing import Any


class StrapiError(Exception):
    """Base exception for all strapi-fluent errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(StrapiError):
    """Invalid client configuration."""


class InvalidOperationError(StrapiError):
    """An operation does not match any accepted shape."""


class FormatError(StrapiError):
    """A successful response carried a body that is not JSON."""


# Remote errors


class RemoteError(StrapiError):
    """The server rejected a request with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body


class ValidationError(RemoteError):
    """HTTP 400: request payload or query was rejected."""


class AuthenticationError(RemoteError):
    """HTTP 401: missing or invalid credentials."""


class AuthorizationError(RemoteError):
    """HTTP 403: credentials lack permission."""


class NotFoundError(RemoteError):
    """HTTP 404: resource or record does not exist."""


class ConflictError(RemoteError):
    """HTTP 409: request conflicts with current state."""


class RateLimitError(RemoteError):
    """HTTP 429: too many requests."""

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        status_code: int | None = 429,
        body: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body, details=details)
        self.retry_after = retry_after


class ServerError(RemoteError):
    """HTTP 5xx: server side failure."""


# Network errors


class NetworkError(StrapiError):
    """The request never produced an HTTP response."""


class ConnectionError(NetworkError):  # noqa: A001
    """Could not connect to the server."""


class TimeoutError(NetworkError):  # noqa: A001
    """The request timed out."""


# Atomic batches


class RollbackError(StrapiError):
    """A compensating operation failed during rollback of an atomic batch.

    The remote data may be left partially compensated; no further recovery
    is attempted.

    Attributes:
        original_error: The failure that triggered the rollback
        correlation_id: Correlation id of the operation whose compensation failed
    """

    def __init__(
        self,
        message: str,
        original_error: BaseException | None = None,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.original_error = original_error
        self.correlation_id = correlation_id
