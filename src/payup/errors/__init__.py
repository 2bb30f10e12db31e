"""Error taxonomy and response decoding."""

from payup.errors.exceptions import (
    DecodeError,
    PayupError,
    PreconditionError,
    TransportError,
)
from payup.errors.handler import decode_json, decode_model, decode_response, raise_for_status
from payup.errors.models import ApiErrorDetail

__all__ = [
    "ApiErrorDetail",
    "DecodeError",
    "PayupError",
    "PreconditionError",
    "TransportError",
    "decode_json",
    "decode_model",
    "decode_response",
    "raise_for_status",
]
