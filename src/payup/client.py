"""Clients: a credential bound to an executor, in blocking or suspending mode.

Resource operations take a client as their first argument and hand it an
operation flow. ``Client.run`` returns the flow's result directly;
``AsyncClient.run`` is a coroutine returning the same result. Everything
else (URLs, parameters, decoding, errors) is identical.

Example:
    ```python
    from payup import Client, AsyncClient, Credential, Customer

    credential = Credential("sk_test_123", "")

    with Client(credential) as client:
        customers = Customer.list_all(client)

    async with AsyncClient(credential) as client:
        customers = await Customer.list_all(client)
    ```
"""

from typing import Any, TypeVar

import httpx

from payup.auth.credentials import Credential
from payup.config import ClientSettings
from payup.flows import Flow, drive_async, drive_sync, single
from payup.transport.executor import AsyncExecutor, SyncExecutor
from payup.transport.request import ApiRequest

T = TypeVar("T")


class BaseClient:
    """State shared by both client flavours.

    Attributes:
        credential: Credential sent with every request.
        settings: API hosts and timeout.
    """

    def __init__(self, credential: Credential, settings: ClientSettings | None = None) -> None:
        self.credential = credential
        self.settings = settings or ClientSettings()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_base={self.settings.api_base!r})"


class Client(BaseClient):
    """Blocking client. Each operation occupies the calling thread for its round trips."""

    def __init__(
        self,
        credential: Credential,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(credential, settings)
        self.executor = SyncExecutor(credential, self.settings, http_client=http_client, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.executor.close()

    def run(self, flow: Flow[T]) -> T:
        return drive_sync(flow, self.executor.execute)

    def request(self, request: ApiRequest) -> Any:
        return self.run(single(request))


class AsyncClient(BaseClient):
    """Suspending client. Each operation yields to the event loop while waiting on the network."""

    def __init__(
        self,
        credential: Credential,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(credential, settings)
        self.executor = AsyncExecutor(credential, self.settings, http_client=http_client, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.executor.aclose()

    async def run(self, flow: Flow[T]) -> T:
        return await drive_async(flow, self.executor.execute)

    async def request(self, request: ApiRequest) -> Any:
        return await self.run(single(request))
