"""Base models and the operation contract shared by every resource.

A resource type opts into operations by mixing in ``Retrievable``,
``Listable``, ``Creatable``, ``Updatable`` and ``Deletable``; a missing mixin
means the API does not offer that operation for the type.

Every public operation takes a client (``Client`` or ``AsyncClient``) and
hands it a flow. With a ``Client`` the call returns the result; with an
``AsyncClient`` it returns an awaitable of the same result.

Writes never modify the instance they are called on; they return a new
instance built from the server's response.
"""

from typing import Any, ClassVar
from urllib.parse import quote

import pydantic

from payup.errors.exceptions import PreconditionError
from payup.flows import Flow, single
from payup.pagination import Page, paginate
from payup.params import encode_mapping, encode_params
from payup.transport.request import ApiRequest


def unwrap_list(value: Any) -> Any:
    """Accept an embedded list envelope (``{"object": "list", "data": [...]}``) as a plain list."""
    if isinstance(value, dict) and "data" in value:
        return value["data"]
    return value


class StripeObject(pydantic.BaseModel):
    """Any object the API sends or accepts.

    ``wire_fields`` lists, in order, the fields sent when the object is
    encoded for a write. ``None`` means every declared field.
    """

    model_config = pydantic.ConfigDict(extra="ignore", populate_by_name=True)

    wire_fields: ClassVar[tuple[str, ...] | None] = None
    has_identity: ClassVar[bool] = False


class Resource(StripeObject):
    """An object with its own identity and URL."""

    has_identity: ClassVar[bool] = True
    resource_path: ClassVar[str] = ""
    update_fields: ClassVar[tuple[str, ...] | None] = None

    id: str | None = None
    object: str | None = None
    deleted: bool | None = None

    @pydantic.model_validator(mode="after")
    def _check_server_id(self, info: pydantic.ValidationInfo):
        # Locally built resources may lack an id; decoded ones may not.
        if info.context and info.context.get("decoding") and self.id is None:
            raise ValueError(f"{type(self).__name__} payload has no id")
        return self

    @classmethod
    def instance_path(cls, id: str | None) -> str:
        if not id:
            raise PreconditionError(f"{cls.__name__} id is required")
        return f"{cls.resource_path}/{quote(id, safe='')}"

    @classmethod
    def list_request(cls, cursor: str | None, filters: dict[str, Any], path: str | None = None) -> ApiRequest:
        """Request for one page of this type, filters first, then the ``starting_after`` cursor."""
        params = encode_mapping(filters)
        if cursor is not None:
            params.append(("starting_after", cursor))
        return ApiRequest("GET", path or cls.resource_path, model=Page[cls], params=params)

    def require_id(self, operation: str) -> str:
        """Return ``self.id`` or raise PreconditionError naming ``operation``."""
        if not self.id:
            raise PreconditionError(f"Cannot {operation} a {type(self).__name__} without an id")
        return self.id

    def _action_flow(self, action: str, **params: Any) -> Flow:
        path = f"{self.instance_path(self.require_id(action))}/{action}"
        return (yield ApiRequest("POST", path, model=type(self), data=encode_mapping(params)))


# Relationship field: an id string, or a resource (only its id is sent).
Reference = str | Resource


class Retrievable:
    @classmethod
    def get(cls, client, id: str):
        """Fetch one resource by id.

        Raises:
            PreconditionError: ``id`` is empty; no request is made
            TransportError: no response was received
            DecodeError: the response is not a valid representation of ``cls``
        """
        return client.run(cls._get_flow(id))

    @classmethod
    def _get_flow(cls, id: str) -> Flow:
        return (yield ApiRequest("GET", cls.instance_path(id), model=cls))


class Listable:
    @classmethod
    def list_chunk(cls, client, cursor: str | None = None, **filters: Any):
        """Fetch one page, starting after ``cursor`` when given."""
        return client.run(single(cls.list_request(cursor, filters)))

    @classmethod
    def list_all(cls, client, **filters: Any):
        """Fetch every item of the collection, following the cursor until ``has_more`` is false."""
        return client.run(paginate(lambda cursor: cls.list_request(cursor, filters)))


class Creatable:
    def create(self, client):
        """POST the populated fields; return the server's representation."""
        return client.run(self._create_flow())

    def _create_flow(self) -> Flow:
        return (yield ApiRequest("POST", self.resource_path, model=type(self), data=encode_params(self)))


class Updatable:
    def update(self, client):
        """POST the populated fields to this resource's URL. Requires ``id``."""
        return client.run(self._update_flow())

    def _update_flow(self) -> Flow:
        path = self.instance_path(self.require_id("update"))
        data = encode_params(self, fields=self.update_fields)
        return (yield ApiRequest("POST", path, model=type(self), data=data))


class Deletable:
    @classmethod
    def delete(cls, client, id: str):
        """Delete by id; returns the final state the server reports.

        An empty ``id`` raises PreconditionError before any request.
        """
        return client.run(cls._delete_flow(id))

    @classmethod
    def _delete_flow(cls, id: str) -> Flow:
        return (yield ApiRequest("DELETE", cls.instance_path(id), model=cls))
