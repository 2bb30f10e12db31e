"""Blocking and suspending clients must behave identically."""

import pytest

from payup import Charge, Customer, File, Invoice, Subscription
from payup.errors import DecodeError, PreconditionError


@pytest.mark.unit
async def test_get_same_request_and_result(client, async_client, api):
    """Both modes issue the same request and decode the same object."""
    api.add_collection("customers", [{"id": "cus_1", "name": "Ada"}])

    blocking = Customer.get(client, "cus_1")
    suspending = await Customer.get(async_client, "cus_1")

    assert blocking == suspending
    assert [str(r.url) for r in api.requests] == ["https://api.stripe.com/v1/customers/cus_1"] * 2


@pytest.mark.unit
async def test_create_same_body(client, async_client, api):
    """Both modes send the same form body."""
    api.respond("POST", "customers", json={"id": "cus_1"})
    draft = Customer(name="Ada", metadata={"k": "v"})

    draft.create(client)
    await draft.create(async_client)

    assert api.form(0) == api.form(1)


@pytest.mark.unit
async def test_action(client, async_client, api):
    """Actions run the same way in both modes."""
    api.respond("POST", "invoices/in_1/pay", json={"id": "in_1", "status": "paid"})

    assert Invoice(id="in_1").pay(client) == await Invoice(id="in_1").pay(async_client)


@pytest.mark.unit
async def test_delete(client, async_client, api):
    """Deletes run the same way in both modes."""
    api.respond("DELETE", "subscriptions/sub_1", json={"id": "sub_1", "status": "canceled"})

    assert Subscription.cancel(client, "sub_1") == await Subscription.cancel(async_client, "sub_1")


@pytest.mark.unit
async def test_upload(client, async_client, api):
    """Uploads run the same way in both modes."""
    api.respond("POST", "files", json={"id": "file_1"})

    blocking = File.upload(client, "dispute_evidence", b"abc")
    suspending = await File.upload(async_client, "dispute_evidence", b"abc")

    assert blocking == suspending
    assert api.requests[1].url.host == "files.stripe.com"


@pytest.mark.unit
async def test_precondition_raised_on_await(async_client, api):
    """In suspending mode the precondition error surfaces when awaited, with no request made."""
    pending = Customer(name="Ada").update(async_client)

    with pytest.raises(PreconditionError):
        await pending

    assert api.requests == []


@pytest.mark.unit
async def test_decode_error_in_both_modes(client, async_client, api):
    """Server errors raise the same exception type in both modes."""
    api.add_collection("charges", [])

    with pytest.raises(DecodeError) as blocking:
        Charge.get(client, "ch_missing")
    with pytest.raises(DecodeError) as suspending:
        await Charge.get(async_client, "ch_missing")

    assert blocking.value.status_code == suspending.value.status_code == 404


@pytest.mark.unit
def test_round_trip_through_wire(client, api):
    """A resource decoded from the server can be re-sent; read-only fields stay behind."""
    api.add_collection(
        "customers",
        [{"id": "cus_1", "name": "Ada", "email": "ada@example.com", "balance": 0, "livemode": False}],
    )
    api.respond("POST", "customers/cus_1", json={"id": "cus_1", "name": "Ada Lovelace"})

    customer = Customer.get(client, "cus_1")
    updated = customer.model_copy(update={"name": "Ada Lovelace"}).update(client)

    assert api.form() == [("email", "ada@example.com"), ("name", "Ada Lovelace")]
    assert updated.name == "Ada Lovelace"
    assert customer.name == "Ada"
