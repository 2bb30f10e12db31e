"""Tests for cursor pagination."""

import logging

import pytest

from payup import Customer
from payup.errors import DecodeError
from payup.pagination import Page, paginate
from payup.testing import list_envelope


def customers(*ids: str) -> list[dict]:
    return [{"id": id, "object": "customer"} for id in ids]


class TestListAll:
    """Test list_all against the paginating stub."""

    @pytest.mark.unit
    def test_follows_cursor_across_pages(self, client, api):
        """Five items at two per page take three requests, each cursor the last id seen."""
        api.add_collection("customers", customers("cus_1", "cus_2", "cus_3", "cus_4", "cus_5"))

        result = Customer.list_all(client)

        assert [c.id for c in result] == ["cus_1", "cus_2", "cus_3", "cus_4", "cus_5"]
        assert len(api.requests) == 3
        cursors = [request.url.params.get("starting_after") for request in api.requests]
        assert cursors == [None, "cus_2", "cus_4"]

    @pytest.mark.unit
    def test_single_page(self, client, api):
        """A collection that fits in one page takes one request."""
        api.add_collection("customers", customers("cus_1"))

        assert [c.id for c in Customer.list_all(client)] == ["cus_1"]
        assert len(api.requests) == 1

    @pytest.mark.unit
    def test_empty_collection(self, client, api):
        """An empty collection yields an empty list after one request."""
        api.add_collection("customers", [])

        assert Customer.list_all(client) == []
        assert len(api.requests) == 1

    @pytest.mark.unit
    def test_filters_sent_with_every_page(self, client, api):
        """Filters go on every chunk, ahead of the cursor."""
        api.add_collection("customers", customers("cus_1", "cus_2", "cus_3"))

        Customer.list_all(client, email="ada@example.com")

        assert [request.url.params.get("email") for request in api.requests] == ["ada@example.com"] * 2
        assert list(api.requests[1].url.params.keys()) == ["email", "starting_after"]

    @pytest.mark.unit
    def test_empty_page_with_has_more_stops(self, client, api, caplog):
        """A page that claims more but has no items ends the traversal."""
        api.respond("GET", "customers", json=list_envelope([], has_more=True, url="/v1/customers"))

        with caplog.at_level(logging.WARNING, logger="payup.pagination"):
            result = Customer.list_all(client)

        assert result == []
        assert len(api.requests) == 1
        assert "has_more" in caplog.text

    @pytest.mark.unit
    def test_malformed_page_raises(self, client, api):
        """A list response without has_more aborts the listing."""
        api.respond("GET", "customers", json={"object": "list", "data": customers("cus_1")})

        with pytest.raises(DecodeError):
            Customer.list_all(client)

    @pytest.mark.unit
    async def test_async_matches_sync(self, client, async_client, api):
        """Suspending mode returns the same items from the same requests."""
        api.add_collection("customers", customers("cus_1", "cus_2", "cus_3", "cus_4", "cus_5"))

        blocking = Customer.list_all(client)
        blocking_urls = [str(request.url) for request in api.requests]
        api.requests.clear()
        suspending = await Customer.list_all(async_client)

        assert suspending == blocking
        assert [str(request.url) for request in api.requests] == blocking_urls


class TestListChunk:
    """Test fetching a single page."""

    @pytest.mark.unit
    def test_first_chunk(self, client, api):
        """Without a cursor the first page is returned as a Page."""
        api.add_collection("customers", customers("cus_1", "cus_2", "cus_3"))

        page = Customer.list_chunk(client)

        assert isinstance(page, Page)
        assert [c.id for c in page.data] == ["cus_1", "cus_2"]
        assert page.has_more is True
        assert "starting_after" not in api.requests[0].url.params

    @pytest.mark.unit
    def test_chunk_after_cursor(self, client, api):
        """The cursor is sent as starting_after."""
        api.add_collection("customers", customers("cus_1", "cus_2", "cus_3"))

        page = Customer.list_chunk(client, cursor="cus_2")

        assert [c.id for c in page.data] == ["cus_3"]
        assert page.has_more is False
        assert api.requests[0].url.params["starting_after"] == "cus_2"


class TestPaginateFlow:
    """Test the paginate generator directly, without any transport."""

    @pytest.mark.unit
    def test_requests_are_built_from_cursor(self):
        """Each request after the first is built from the last id of the previous page."""
        seen = []

        def chunk_request(cursor):
            seen.append(cursor)
            return Customer.list_request(cursor, {})

        flow = paginate(chunk_request)
        next(flow)
        flow.send(Page[Customer](has_more=True, data=[Customer(id="a"), Customer(id="b")]))
        with pytest.raises(StopIteration) as stop:
            flow.send(Page[Customer](has_more=False, data=[Customer(id="c")]))

        assert seen == [None, "b"]
        assert [c.id for c in stop.value.value] == ["a", "b", "c"]
