"""Customers, plus the per-customer invoice and payment-method listings."""

from typing import ClassVar

from payup.flows import Flow
from payup.pagination import paginate
from payup.resources.base import Creatable, Deletable, Listable, Resource, Retrievable, Updatable
from payup.resources.billing import Invoice
from payup.resources.payment_methods import Address, PaymentMethod


class Customer(Retrievable, Listable, Creatable, Updatable, Deletable, Resource):
    resource_path: ClassVar[str] = "customers"
    wire_fields: ClassVar[tuple[str, ...]] = (
        "payment_method",
        "description",
        "email",
        "name",
        "phone",
        "address",
        "metadata",
    )

    # Only sent on create; the API never returns it.
    payment_method: str | None = None
    description: str | None = None
    email: str | None = None
    name: str | None = None
    phone: str | None = None
    address: Address | None = None
    balance: int | None = None
    created: int | None = None
    currency: str | None = None
    delinquent: bool | None = None
    invoice_prefix: str | None = None
    livemode: bool | None = None
    metadata: dict[str, str] | None = None

    @classmethod
    def invoices(cls, client, customer_id: str):
        """All invoices belonging to ``customer_id``."""
        return client.run(paginate(lambda cursor: Invoice.list_request(cursor, {"customer": customer_id})))

    @classmethod
    def payment_methods(cls, client, customer_id: str, type: str = "card"):
        """All payment methods of ``type`` attached to ``customer_id``."""
        return client.run(cls._payment_methods_flow(customer_id, type))

    def attach_payment_method(self, client, payment_method: PaymentMethod | str):
        """Attach a payment method (instance or id) to this customer."""
        return client.run(self._attach_payment_method_flow(payment_method))

    @classmethod
    def _payment_methods_flow(cls, customer_id: str, type: str) -> Flow:
        path = f"{cls.instance_path(customer_id)}/payment_methods"
        return (yield from paginate(lambda cursor: PaymentMethod.list_request(cursor, {"type": type}, path=path)))

    def _attach_payment_method_flow(self, payment_method: PaymentMethod | str) -> Flow:
        customer_id = self.require_id("attach a payment method to")
        if isinstance(payment_method, str):
            payment_method = PaymentMethod(id=payment_method)
        return (yield from payment_method._attach_flow(customer_id))
