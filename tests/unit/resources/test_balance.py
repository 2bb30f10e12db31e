"""Tests for the account balance."""

import pytest

from payup import Balance, BalanceTransaction


@pytest.mark.unit
def test_get_balance(client, api):
    """The balance is a singleton fetched without an id."""
    api.respond(
        "GET",
        "balance",
        json={
            "object": "balance",
            "available": [{"amount": 1200, "currency": "usd"}],
            "pending": [{"amount": 300, "currency": "usd"}],
            "livemode": False,
        },
    )

    balance = Balance.get(client)

    assert balance.available[0].amount == 1200
    assert balance.pending[0].currency == "usd"
    assert api.requests[0].url.path == "/v1/balance"


@pytest.mark.unit
def test_list_balance_transactions_with_filter(client, api):
    """Balance transactions list with filters."""
    api.add_collection("balance_transactions", [{"id": "txn_1", "amount": 100}, {"id": "txn_2", "amount": -30}])

    transactions = BalanceTransaction.list_all(client, type="charge")

    assert [t.amount for t in transactions] == [100, -30]
    assert api.requests[0].url.params["type"] == "charge"
