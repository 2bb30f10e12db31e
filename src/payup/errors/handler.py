"""Turning HTTP responses into decoded models or errors."""

import logging
from typing import Any, TypeVar

import httpx
import pydantic

from payup.errors.exceptions import DecodeError
from payup.errors.models import ApiErrorDetail

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)

# Validation context flag read by resource validators; only set on server payloads.
DECODING_CONTEXT = {"decoding": True}


def raise_for_status(response: httpx.Response) -> None:
    """Raise DecodeError for non-2xx responses.

    The API's error envelope is parsed for the message and attached to the
    exception, but no finer classification is made.

    Args:
        response: HTTP response object

    Raises:
        DecodeError: if the response is not a success
    """
    if response.is_success:
        return

    error = ApiErrorDetail.from_response(response)
    status_code = response.status_code

    if error:
        message = f"HTTP {status_code}: {error.to_exception_message()}"
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    raise DecodeError(message, status_code=status_code, response=response, error=error)


def decode_json(response: httpx.Response) -> Any:
    """Return the parsed JSON body of a successful response."""
    raise_for_status(response)
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(
            f"Malformed JSON in HTTP {response.status_code} response: {e}",
            status_code=response.status_code,
            response=response,
        ) from e


def decode_model(model: type[ModelT], payload: Any, response: httpx.Response | None = None) -> ModelT:
    """Validate a parsed JSON payload into ``model``.

    Unknown fields are ignored by the models themselves; anything that fails
    validation becomes a DecodeError.
    """
    try:
        return model.model_validate(payload, context=DECODING_CONTEXT)
    except pydantic.ValidationError as e:
        status_code = response.status_code if response is not None else None
        logger.debug(f"Response did not match {model.__name__}: {e.error_count()} error(s)")
        raise DecodeError(
            f"Response does not match {model.__name__}: {e}",
            status_code=status_code,
            response=response,
            error=ApiErrorDetail.from_payload(payload),
        ) from e


def decode_response(model: type[ModelT], response: httpx.Response) -> ModelT:
    """Check status, parse JSON and validate into ``model``."""
    return decode_model(model, decode_json(response), response)
