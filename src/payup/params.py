"""Sparse wire-parameter encoding.

Turns a partially populated model into the flat, bracket-notation form body
the API expects. Only populated fields are emitted: the API treats an omitted
field ("leave unchanged" / "use the server default") differently from a field
sent as an empty string, so ``None`` never reaches the wire.

Rules:
- scalar ``name=value``; booleans as ``true``/``false``
- embedded object ``card[number]=...``
- mapping ``metadata[key]=...``
- list ``items[0][price]=...``, at most ``MAX_LIST_ITEMS`` entries; the rest are dropped
- a field holding another resource (something with an ``id``) is sent as that id

Example:
    ```python
    card = Card(number="4242424242424242", cvc="123")
    encode_params(card, prefix="card")
    # [("card[number]", "4242424242424242"), ("card[cvc]", "123")]
    ```
"""

from collections.abc import Mapping
from typing import Any

import pydantic

WireParams = list[tuple[str, str]]

# Entries past this index are not sent.
MAX_LIST_ITEMS = 20


def _key(prefix: str | None, name: str) -> str:
    return f"{prefix}[{name}]" if prefix else name


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _wire_fields(obj: pydantic.BaseModel) -> tuple[str, ...]:
    declared = getattr(type(obj), "wire_fields", None)
    if declared is None:
        return tuple(type(obj).model_fields)
    return declared


def _wire_name(obj: pydantic.BaseModel, name: str) -> str:
    field = type(obj).model_fields.get(name)
    if field is not None and field.alias:
        return field.alias
    return name


def _encode_value(params: WireParams, key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, pydantic.BaseModel):
        if getattr(type(value), "has_identity", False):
            # Reference to another resource: send its id only.
            if value.id is not None:
                params.append((key, value.id))
            return
        params.extend(encode_params(value, prefix=key))
    elif isinstance(value, Mapping):
        for name, item in value.items():
            _encode_value(params, f"{key}[{name}]", item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value[:MAX_LIST_ITEMS]):
            _encode_value(params, f"{key}[{index}]", item)
    else:
        params.append((key, _scalar(value)))


def encode_params(
    obj: pydantic.BaseModel, prefix: str | None = None, fields: tuple[str, ...] | None = None
) -> WireParams:
    """Encode the populated write fields of ``obj`` as ordered (key, value) pairs.

    Fields are visited in the model's ``wire_fields`` order when declared,
    otherwise in field declaration order. Never raises for a valid model.

    Args:
        obj: Model instance to encode.
        prefix: Bracket prefix for nested objects (``"card"`` → ``card[number]``).
        fields: Fields to send, overriding ``wire_fields``.

    Returns:
        List of (key, value) string pairs.
    """
    params: WireParams = []
    for name in fields if fields is not None else _wire_fields(obj):
        _encode_value(params, _key(prefix, _wire_name(obj, name)), getattr(obj, name))
    return params


def encode_mapping(values: Mapping[str, Any]) -> WireParams:
    """Encode loose keyword arguments (action parameters, list filters) by the same rules."""
    params: WireParams = []
    for name, value in values.items():
        _encode_value(params, name, value)
    return params
