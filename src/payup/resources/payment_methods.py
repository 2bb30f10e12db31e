"""Payment methods and the card/address structures embedded in them."""

from typing import Any, ClassVar

from payup.flows import Flow
from payup.resources.base import Creatable, Reference, Resource, Retrievable, StripeObject, Updatable


class Address(StripeObject):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class BillingDetails(StripeObject):
    address: Address | None = None
    email: str | None = None
    name: str | None = None
    phone: str | None = None


class Card(StripeObject):
    """Card details. Only number, expiry and CVC are ever sent; the rest comes back from the server."""

    wire_fields: ClassVar[tuple[str, ...]] = ("number", "exp_month", "exp_year", "cvc")

    number: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    cvc: str | None = None
    brand: str | None = None
    country: str | None = None
    fingerprint: str | None = None
    funding: str | None = None
    last4: str | None = None
    network: str | None = None


class PaymentMethod(Retrievable, Creatable, Updatable, Resource):
    resource_path: ClassVar[str] = "payment_methods"
    wire_fields: ClassVar[tuple[str, ...]] = ("type", "card", "billing_details", "metadata")
    update_fields: ClassVar[tuple[str, ...]] = ("card", "billing_details", "metadata")

    type: str | None = None
    billing_details: BillingDetails | None = None
    card: Card | None = None
    created: int | None = None
    customer: Reference | None = None
    livemode: bool | None = None
    metadata: dict[str, str] | None = None

    def attach(self, client, customer: Any):
        """Attach this payment method to ``customer`` (a Customer or its id)."""
        return client.run(self._attach_flow(customer))

    def detach(self, client):
        """Detach this payment method from whichever customer holds it."""
        return client.run(self._action_flow("detach"))

    def _attach_flow(self, customer: Any) -> Flow:
        return (yield from self._action_flow("attach", customer=customer))
