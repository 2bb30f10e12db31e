"""Error envelope returned by the API on failed requests."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ApiErrorDetail:
    """Parsed ``{"error": {...}}`` envelope.

    See: https://docs.stripe.com/api/errors
    """

    type: str | None = None  # api_error, card_error, invalid_request_error, ...
    code: str | None = None  # Short machine-readable code
    message: str | None = None  # Human-readable explanation
    param: str | None = None  # Parameter the error relates to
    decline_code: str | None = None  # Card issuer decline reason
    doc_url: str | None = None

    # Any other members of the envelope
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ApiErrorDetail | None":
        """Build from an already-parsed JSON body, or None if it has no error envelope."""
        if not isinstance(payload, dict):
            return None
        error = payload.get("error")
        if not isinstance(error, dict):
            return None

        known = {"type", "code", "message", "param", "decline_code", "doc_url"}
        extensions = {k: v for k, v in error.items() if k not in known}

        return cls(
            type=error.get("type"),
            code=error.get("code"),
            message=error.get("message"),
            param=error.get("param"),
            decline_code=error.get("decline_code"),
            doc_url=error.get("doc_url"),
            extensions=extensions if extensions else None,
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiErrorDetail | None":
        """Parse the error envelope from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ApiErrorDetail or None if the body is not JSON or has no envelope
        """
        try:
            payload = response.json()
        except (ValueError, TypeError, AttributeError):
            return None
        return cls.from_payload(payload)

    def to_exception_message(self) -> str:
        """Convert the envelope to an exception message."""
        lines = []

        if self.message:
            lines.append(self.message)

        if self.type:
            lines.append(f"Error Type: {self.type}")

        if self.code:
            lines.append(f"Code: {self.code}")

        if self.decline_code:
            lines.append(f"Decline Code: {self.decline_code}")

        if self.param:
            lines.append(f"Param: {self.param}")

        return "\n".join(lines) if lines else "Unknown API error"
