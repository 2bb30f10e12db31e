"""Exception taxonomy for API calls.

Every failure surfaced by an operation is one of three kinds:

- ``TransportError``: the request never produced a response (connect, timeout, TLS).
- ``DecodeError``: a response arrived but could not be turned into the expected type.
  Non-2xx responses land here too; ``error`` carries the parsed error envelope.
- ``PreconditionError``: the operation was rejected locally before any request.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from payup.errors.models import ApiErrorDetail


class PayupError(Exception):
    """Base exception for all payup errors."""

    pass


class TransportError(PayupError):
    """Connection failure, timeout or TLS failure. Never retried."""

    def __init__(self, message: str, request: "httpx.Request | None" = None):
        super().__init__(message)
        self.request = request


class DecodeError(PayupError):
    """Response body does not match the expected shape."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error: "ApiErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error = error


class PreconditionError(PayupError, ValueError):
    """Local, synchronous failure such as updating a resource without an id."""

    pass
