"""Account balance and the transactions that move it."""

from typing import ClassVar

from payup.flows import Flow
from payup.resources.base import Listable, Resource, Retrievable, StripeObject
from payup.transport.request import ApiRequest


class BalanceAmount(StripeObject):
    amount: int | None = None
    currency: str | None = None


class Balance(StripeObject):
    """Singleton: one per account, no id."""

    resource_path: ClassVar[str] = "balance"

    object: str | None = None
    available: list[BalanceAmount] | None = None
    pending: list[BalanceAmount] | None = None
    livemode: bool | None = None

    @classmethod
    def get(cls, client):
        return client.run(cls._get_flow())

    @classmethod
    def _get_flow(cls) -> Flow:
        return (yield ApiRequest("GET", cls.resource_path, model=cls))


class BalanceTransaction(Retrievable, Listable, Resource):
    resource_path: ClassVar[str] = "balance_transactions"

    amount: int | None = None
    available_on: int | None = None
    created: int | None = None
    currency: str | None = None
    description: str | None = None
    fee: int | None = None
    net: int | None = None
    reporting_category: str | None = None
    source: str | None = None
    status: str | None = None
    type: str | None = None
