"""payup - blocking and asyncio client for a cursor-paginated payments REST API.

Every operation is written once and runs under either client:

- ``Client``: blocking, over ``httpx.Client``
- ``AsyncClient``: suspending, over ``httpx.AsyncClient``

Example:
    ```python
    from payup import Client, Credential, Customer

    credential = Credential("sk_test_123", "")

    with Client(credential) as client:
        draft = Customer(name="Ada", email="ada@example.com")
        customer = draft.create(client)
        everyone = Customer.list_all(client)
    ```
"""

from payup.auth import Credential, CredentialResolver
from payup.client import AsyncClient, Client
from payup.config import ClientSettings
from payup.errors import DecodeError, PayupError, PreconditionError, TransportError
from payup.resources import (
    Address,
    Balance,
    BalanceTransaction,
    BillingDetails,
    Card,
    Charge,
    Customer,
    Dispute,
    DisputeEvidence,
    File,
    Invoice,
    PaymentMethod,
    Plan,
    Price,
    Product,
    Recurring,
    Subscription,
    SubscriptionItem,
)

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AsyncClient",
    "Balance",
    "BalanceTransaction",
    "BillingDetails",
    "Card",
    "Charge",
    "Client",
    "ClientSettings",
    "Credential",
    "CredentialResolver",
    "Customer",
    "DecodeError",
    "Dispute",
    "DisputeEvidence",
    "File",
    "Invoice",
    "PaymentMethod",
    "PayupError",
    "Plan",
    "PreconditionError",
    "Price",
    "Product",
    "Recurring",
    "Subscription",
    "SubscriptionItem",
    "TransportError",
    "__version__",
]
