"""Cursor pagination over list endpoints.

List endpoints accept ``starting_after=<id>`` and answer with an envelope::

    {"object": "list", "url": "/v1/customers", "has_more": true, "data": [...]}

``paginate`` keeps requesting the next chunk, using the id of the last item
received as the cursor, until the server reports ``has_more: false``.
Chunks are requested strictly one after another since each cursor depends
on the previous response.
"""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

import pydantic

from payup.flows import Flow
from payup.transport.request import ApiRequest

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


class Page(pydantic.BaseModel, Generic[ItemT]):
    """One list response. ``data`` and ``has_more`` are required."""

    model_config = pydantic.ConfigDict(extra="ignore")

    object: str | None = None
    url: str | None = None
    has_more: bool
    data: list[ItemT]


def paginate(chunk_request: Callable[[str | None], ApiRequest]) -> Flow[list]:
    """Collect every item of a paginated collection, in server order.

    Args:
        chunk_request: Builds the request for one chunk given the cursor
            (``None`` for the first chunk). Its model must be a ``Page``.

    Returns:
        Flow whose result is the list of all items.

    A page that reports ``has_more`` but carries no items ends the traversal:
    there is no item to take a cursor from, and asking again with the same
    cursor would loop.
    """
    items: list = []
    cursor: str | None = None
    while True:
        page = yield chunk_request(cursor)
        items.extend(page.data)
        logger.debug(f"Fetched page of {len(page.data)} item(s), has_more={page.has_more}, total={len(items)}")

        if not page.has_more:
            return items
        if not page.data:
            logger.warning(f"Page after cursor {cursor!r} reported has_more with no items; stopping")
            return items
        cursor = page.data[-1].id
