"""Tests for payment methods."""

import pytest

from payup import BillingDetails, Card, Customer, PaymentMethod
from payup.errors import PreconditionError


@pytest.mark.unit
def test_create_card(client, api):
    """Only populated card fields are sent; the response fills in the rest."""
    api.respond(
        "POST",
        "payment_methods",
        json={"id": "pm_1", "type": "card", "card": {"brand": "visa", "last4": "4242", "exp_month": 12}},
    )

    method = PaymentMethod(
        type="card",
        card=Card(number="4242424242424242", exp_month=12, exp_year=2030, cvc="123"),
    ).create(client)

    assert api.form() == [
        ("type", "card"),
        ("card[number]", "4242424242424242"),
        ("card[exp_month]", "12"),
        ("card[exp_year]", "2030"),
        ("card[cvc]", "123"),
    ]
    assert method.card.last4 == "4242"
    assert method.card.number is None


@pytest.mark.unit
def test_card_server_fields_never_sent(client, api):
    """Card fields reported by the server are not echoed back on update."""
    api.respond("POST", "payment_methods/pm_1", json={"id": "pm_1"})

    PaymentMethod(
        id="pm_1",
        type="card",
        card=Card(exp_month=1, brand="visa", last4="4242"),
        billing_details=BillingDetails(name="Ada"),
    ).update(client)

    assert api.form() == [("card[exp_month]", "1"), ("billing_details[name]", "Ada")]


@pytest.mark.unit
def test_attach_to_customer_object(client, api):
    """attach sends the customer's id."""
    api.respond("POST", "payment_methods/pm_1/attach", json={"id": "pm_1", "customer": "cus_1"})

    PaymentMethod(id="pm_1").attach(client, Customer(id="cus_1", email="ada@example.com"))

    assert api.form() == [("customer", "cus_1")]


@pytest.mark.unit
def test_detach(client, api):
    """detach posts to payment_methods/{id}/detach with no body."""
    api.respond("POST", "payment_methods/pm_1/detach", json={"id": "pm_1", "customer": None})

    detached = PaymentMethod(id="pm_1", customer="cus_1").detach(client)

    assert detached.customer is None
    assert api.form() == []


@pytest.mark.unit
def test_detach_without_id(client, api):
    """detach needs an id."""
    with pytest.raises(PreconditionError):
        PaymentMethod(type="card").detach(client)

    assert api.requests == []


@pytest.mark.unit
def test_no_list_or_delete():
    """Payment methods are listed per customer and detached rather than deleted."""
    assert not hasattr(PaymentMethod, "list_all")
    assert not hasattr(PaymentMethod, "delete")
