"""Resource models and their operations."""

from payup.resources.balance import Balance, BalanceAmount, BalanceTransaction
from payup.resources.base import (
    Creatable,
    Deletable,
    Listable,
    Reference,
    Resource,
    Retrievable,
    StripeObject,
    Updatable,
)
from payup.resources.billing import Invoice, Plan, Price, Product, Recurring, Subscription, SubscriptionItem
from payup.resources.charges import Charge, Dispute, DisputeEvidence
from payup.resources.customers import Customer
from payup.resources.files import File
from payup.resources.payment_methods import Address, BillingDetails, Card, PaymentMethod

__all__ = [
    "Address",
    "Balance",
    "BalanceAmount",
    "BalanceTransaction",
    "BillingDetails",
    "Card",
    "Charge",
    "Creatable",
    "Customer",
    "Deletable",
    "Dispute",
    "DisputeEvidence",
    "File",
    "Invoice",
    "Listable",
    "PaymentMethod",
    "Plan",
    "Price",
    "Product",
    "Recurring",
    "Reference",
    "Resource",
    "Retrievable",
    "StripeObject",
    "Subscription",
    "SubscriptionItem",
    "Updatable",
]
