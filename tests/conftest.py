"""Pytest configuration and shared fixtures for payup tests."""

import pytest

from payup import AsyncClient, Client, Credential
from payup.testing import StubApi


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear configuration-related environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    test_prefixes = ("TEST_", "STRIPE_", "PAYUP_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def credential():
    return Credential("sk_test_client", "secret_value")


@pytest.fixture
def api():
    return StubApi(page_size=2)


@pytest.fixture
def client(credential, api):
    with Client(credential, transport=api.transport()) as client:
        yield client


@pytest.fixture
async def async_client(credential, api):
    async with AsyncClient(credential, transport=api.transport()) as client:
        yield client
