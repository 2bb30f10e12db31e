"""Blocking and suspending executors for a single API request.

Both executors share request construction and response decoding; they
differ only in whether the network round-trip blocks the calling thread
(``SyncExecutor`` over ``httpx.Client``) or suspends the calling coroutine
(``AsyncExecutor`` over ``httpx.AsyncClient``).

Every ``execute`` call issues exactly one HTTP request with HTTP Basic auth.
There are no retries and no caching.

Example:
    ```python
    from payup.auth import Credential
    from payup.transport import ApiRequest, SyncExecutor

    with SyncExecutor(Credential("sk_test_123")) as executor:
        customer = executor.execute(ApiRequest("GET", "customers/cus_1", model=Customer))
    ```
"""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx
import pydantic

from payup.auth.credentials import Credential
from payup.config import ClientSettings
from payup.errors.exceptions import DecodeError, TransportError
from payup.errors.handler import decode_response
from payup.transport.request import ApiRequest

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class _BaseExecutor:
    """Request construction and decoding shared by both execution modes."""

    def __init__(self, credential: Credential, settings: ClientSettings | None = None) -> None:
        self.credential = credential
        self.settings = settings or ClientSettings()

    def _build_kwargs(self, request: ApiRequest) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "method": request.method,
            "url": request.url(self.settings.api_base, self.settings.files_base),
            "auth": self.credential.basic_auth,
        }
        if request.params:
            kwargs["params"] = request.params
        if request.files is not None:
            kwargs["files"] = request.files
            if request.data:
                kwargs["data"] = dict(request.data)
        elif request.data:
            kwargs["content"] = urlencode(request.data)
            kwargs["headers"] = {"Content-Type": FORM_CONTENT_TYPE}
        return kwargs

    def _transport_error(self, request: ApiRequest, kwargs: dict[str, Any], error: httpx.TransportError) -> TransportError:
        logger.debug(f"Request {request.method} {kwargs['url']} failed at the transport layer: {error!r}")
        try:
            http_request = error.request
        except RuntimeError:
            http_request = None
        return TransportError(f"{request.method} {kwargs['url']} failed: {error}", request=http_request)

    def _decoding_error(self, request: ApiRequest, kwargs: dict[str, Any], error: httpx.DecodingError) -> DecodeError:
        # Raised while reading the body, before a Response is handed back.
        logger.debug(f"Response body for {request.method} {kwargs['url']} could not be decoded: {error!r}")
        return DecodeError(f"Undecodable response body for {request.method} {kwargs['url']}: {error}")

    def _decode(self, request: ApiRequest, response: httpx.Response) -> pydantic.BaseModel:
        logger.debug(f"Response {response.status_code} for {request.method} {response.request.url}")
        return decode_response(request.model, response)


class SyncExecutor(_BaseExecutor):
    """Executes requests on the calling thread.

    Args:
        credential: Basic-auth credential sent with every request.
        settings: API hosts and timeout.
        http_client: Existing ``httpx.Client`` to use. Not closed by this executor.
        transport: Transport for an executor-owned client (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        credential: Credential,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(credential, settings)
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=self.settings.timeout, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def execute(self, request: ApiRequest) -> pydantic.BaseModel:
        """Perform ``request`` and return the decoded model.

        Raises:
            TransportError: connection, timeout or TLS failure
            DecodeError: non-2xx status, undecodable body, malformed JSON or schema mismatch
        """
        kwargs = self._build_kwargs(request)
        logger.debug(f"Request {request.method} {kwargs['url']}")
        try:
            response = self._http.request(**kwargs)
        except httpx.DecodingError as e:
            raise self._decoding_error(request, kwargs, e) from e
        except httpx.TransportError as e:
            raise self._transport_error(request, kwargs, e) from e
        return self._decode(request, response)


class AsyncExecutor(_BaseExecutor):
    """Executes requests from a coroutine, suspending during network I/O.

    Args:
        credential: Basic-auth credential sent with every request.
        settings: API hosts and timeout.
        http_client: Existing ``httpx.AsyncClient`` to use. Not closed by this executor.
        transport: Transport for an executor-owned client (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        credential: Credential,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(credential, settings)
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.settings.timeout, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def execute(self, request: ApiRequest) -> pydantic.BaseModel:
        """Perform ``request`` and return the decoded model.

        Raises:
            TransportError: connection, timeout or TLS failure
            DecodeError: non-2xx status, undecodable body, malformed JSON or schema mismatch
        """
        kwargs = self._build_kwargs(request)
        logger.debug(f"Request {request.method} {kwargs['url']}")
        try:
            response = await self._http.request(**kwargs)
        except httpx.DecodingError as e:
            raise self._decoding_error(request, kwargs, e) from e
        except httpx.TransportError as e:
            raise self._transport_error(request, kwargs, e) from e
        return self._decode(request, response)
