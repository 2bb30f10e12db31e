"""Recurring billing: products, prices, plans, subscriptions and invoices."""

from typing import Annotated, ClassVar

import pydantic

from payup.resources.base import (
    Creatable,
    Deletable,
    Listable,
    Reference,
    Resource,
    Retrievable,
    StripeObject,
    Updatable,
    unwrap_list,
)
from payup.resources.payment_methods import PaymentMethod


class Product(Retrievable, Listable, Creatable, Updatable, Deletable, Resource):
    resource_path: ClassVar[str] = "products"
    wire_fields: ClassVar[tuple[str, ...]] = ("name", "active", "description", "images", "url", "metadata")

    name: str | None = None
    active: bool | None = None
    description: str | None = None
    images: list[str] | None = None
    url: str | None = None
    created: int | None = None
    updated: int | None = None
    livemode: bool | None = None
    metadata: dict[str, str] | None = None


class Recurring(StripeObject):
    wire_fields: ClassVar[tuple[str, ...]] = ("interval", "interval_count", "usage_type")

    interval: str | None = None
    interval_count: int | None = None
    usage_type: str | None = None


class Price(Retrievable, Listable, Creatable, Updatable, Resource):
    resource_path: ClassVar[str] = "prices"
    wire_fields: ClassVar[tuple[str, ...]] = (
        "currency",
        "unit_amount",
        "product",
        "recurring",
        "nickname",
        "lookup_key",
        "tax_behavior",
        "active",
        "metadata",
    )
    update_fields: ClassVar[tuple[str, ...]] = ("active", "nickname", "lookup_key", "tax_behavior", "metadata")

    currency: str | None = None
    unit_amount: int | None = None
    unit_amount_decimal: str | None = None
    product: str | Product | None = None
    recurring: Recurring | None = None
    nickname: str | None = None
    lookup_key: str | None = None
    tax_behavior: str | None = None
    active: bool | None = None
    billing_scheme: str | None = None
    created: int | None = None
    livemode: bool | None = None
    type: str | None = None
    metadata: dict[str, str] | None = None


class Plan(Retrievable, Listable, Creatable, Updatable, Deletable, Resource):
    resource_path: ClassVar[str] = "plans"
    wire_fields: ClassVar[tuple[str, ...]] = (
        "amount",
        "currency",
        "interval",
        "interval_count",
        "product",
        "active",
        "nickname",
        "metadata",
    )
    update_fields: ClassVar[tuple[str, ...]] = ("active", "nickname", "product", "metadata")

    amount: int | None = None
    amount_decimal: str | None = None
    currency: str | None = None
    interval: str | None = None
    interval_count: int | None = None
    product: str | Product | None = None
    active: bool | None = None
    nickname: str | None = None
    billing_scheme: str | None = None
    created: int | None = None
    livemode: bool | None = None
    usage_type: str | None = None
    metadata: dict[str, str] | None = None


class SubscriptionItem(StripeObject):
    """One line of a subscription. ``id`` is sent so updates modify existing lines."""

    wire_fields: ClassVar[tuple[str, ...]] = ("id", "price", "quantity")

    id: str | None = None
    price: str | Price | None = None
    quantity: int | None = None
    created: int | None = None
    subscription: str | None = None


class Subscription(Retrievable, Listable, Creatable, Updatable, Deletable, Resource):
    resource_path: ClassVar[str] = "subscriptions"
    wire_fields: ClassVar[tuple[str, ...]] = (
        "customer",
        "default_payment_method",
        "items",
        "cancel_at_period_end",
        "collection_method",
        "days_until_due",
        "metadata",
    )
    update_fields: ClassVar[tuple[str, ...]] = (
        "default_payment_method",
        "items",
        "cancel_at_period_end",
        "collection_method",
        "days_until_due",
        "metadata",
    )

    customer: Reference | None = None
    default_payment_method: str | PaymentMethod | None = None
    items: Annotated[list[SubscriptionItem] | None, pydantic.BeforeValidator(unwrap_list)] = None
    billing_cycle_anchor: int | None = None
    cancel_at: int | None = None
    cancel_at_period_end: bool | None = None
    canceled_at: int | None = None
    collection_method: str | None = None
    created: int | None = None
    current_period_end: int | None = None
    current_period_start: int | None = None
    days_until_due: int | None = None
    ended_at: int | None = None
    latest_invoice: Reference | None = None
    livemode: bool | None = None
    quantity: int | None = None
    start_date: int | None = None
    status: str | None = None
    metadata: dict[str, str] | None = None

    @classmethod
    def cancel(cls, client, id: str):
        """Cancel immediately. The API returns the canceled subscription."""
        return cls.delete(client, id)


class Invoice(Retrievable, Listable, Creatable, Updatable, Deletable, Resource):
    """Invoices. Only drafts can be deleted; ``void`` is the equivalent for finalized ones."""

    resource_path: ClassVar[str] = "invoices"
    wire_fields: ClassVar[tuple[str, ...]] = (
        "customer",
        "subscription",
        "auto_advance",
        "collection_method",
        "days_until_due",
        "description",
        "metadata",
    )
    update_fields: ClassVar[tuple[str, ...]] = (
        "auto_advance",
        "collection_method",
        "days_until_due",
        "description",
        "metadata",
    )

    customer: Reference | None = None
    subscription: str | Subscription | None = None
    auto_advance: bool | None = None
    collection_method: str | None = None
    days_until_due: int | None = None
    description: str | None = None
    account_country: str | None = None
    amount_due: int | None = None
    amount_paid: int | None = None
    amount_remaining: int | None = None
    attempt_count: int | None = None
    attempted: bool | None = None
    billing_reason: str | None = None
    charge: str | None = None
    created: int | None = None
    currency: str | None = None
    customer_email: str | None = None
    customer_name: str | None = None
    due_date: int | None = None
    hosted_invoice_url: str | None = None
    invoice_pdf: str | None = None
    livemode: bool | None = None
    number: str | None = None
    paid: bool | None = None
    period_end: int | None = None
    period_start: int | None = None
    status: str | None = None
    subtotal: int | None = None
    total: int | None = None
    metadata: dict[str, str] | None = None

    def finalize(self, client):
        return client.run(self._action_flow("finalize"))

    def pay(self, client):
        return client.run(self._action_flow("pay"))

    def void(self, client):
        return client.run(self._action_flow("void"))
