"""Charges and the disputes raised against them."""

from typing import ClassVar

import pydantic

from payup.resources.base import Creatable, Listable, Resource, Retrievable, StripeObject, Updatable
from payup.resources.customers import Customer


class Charge(Retrievable, Listable, Creatable, Updatable, Resource):
    resource_path: ClassVar[str] = "charges"
    wire_fields: ClassVar[tuple[str, ...]] = (
        "amount",
        "currency",
        "customer",
        "source",
        "description",
        "receipt_email",
        "statement_descriptor",
        "capture_now",
        "metadata",
    )
    update_fields: ClassVar[tuple[str, ...]] = ("customer", "description", "receipt_email", "metadata")

    amount: int | None = None
    currency: str | None = None
    customer: str | Customer | None = None
    # Write-only: card or token to charge, and whether to capture immediately.
    source: str | None = None
    capture_now: bool | None = pydantic.Field(default=None, alias="capture")
    description: str | None = None
    receipt_email: str | None = None
    statement_descriptor: str | None = None
    amount_captured: int | None = None
    amount_refunded: int | None = None
    balance_transaction: str | None = None
    captured: bool | None = None
    created: int | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    livemode: bool | None = None
    paid: bool | None = None
    payment_intent: str | None = None
    payment_method: str | None = None
    refunded: bool | None = None
    status: str | None = None
    metadata: dict[str, str] | None = None

    def capture(self, client, amount: int | None = None):
        """Capture an uncaptured charge, optionally for less than the authorized amount."""
        return client.run(self._action_flow("capture", amount=amount))


class DisputeEvidence(StripeObject):
    """Evidence submitted for a dispute. File fields hold uploaded file ids."""

    access_activity_log: str | None = None
    billing_address: str | None = None
    cancellation_policy: str | None = None
    customer_communication: str | None = None
    customer_email_address: str | None = None
    customer_name: str | None = None
    product_description: str | None = None
    receipt: str | None = None
    refund_policy: str | None = None
    shipping_carrier: str | None = None
    shipping_tracking_number: str | None = None
    uncategorized_text: str | None = None


class Dispute(Retrievable, Listable, Updatable, Resource):
    resource_path: ClassVar[str] = "disputes"
    wire_fields: ClassVar[tuple[str, ...]] = ("evidence", "submit", "metadata")

    evidence: DisputeEvidence | None = None
    # Write-only: submit evidence now instead of staging it.
    submit: bool | None = None
    amount: int | None = None
    charge: str | Charge | None = None
    created: int | None = None
    currency: str | None = None
    is_charge_refundable: bool | None = None
    livemode: bool | None = None
    reason: str | None = None
    status: str | None = None
    metadata: dict[str, str] | None = None

    def close(self, client):
        """Accept the dispute as lost."""
        return client.run(self._action_flow("close"))
