"""Operation flows: request logic written once, executed in either mode.

An operation is a generator that yields ``ApiRequest`` objects and receives
each decoded response back from ``yield``. Its return value is the result of
the operation. The generator never touches the network itself, so the same
flow runs unchanged under ``drive_sync`` (blocking) and ``drive_async``
(suspending). httpx drives its ``Auth.auth_flow`` generators the same way.

Example:
    ```python
    def get_customer(customer_id: str) -> Flow[Customer]:
        customer = yield ApiRequest("GET", f"customers/{customer_id}", model=Customer)
        return customer
    ```
"""

from collections.abc import Awaitable, Callable, Generator
from typing import Any, TypeVar

from payup.transport.request import ApiRequest

T = TypeVar("T")

Flow = Generator[ApiRequest, Any, T]


def single(request: ApiRequest) -> Flow[Any]:
    """Flow for an operation that is exactly one request."""
    return (yield request)


def drive_sync(flow: Flow[T], execute: Callable[[ApiRequest], Any]) -> T:
    """Run ``flow`` to completion, blocking on each request."""
    try:
        request = next(flow)
        while True:
            request = flow.send(execute(request))
    except StopIteration as stop:
        return stop.value
    finally:
        flow.close()


async def drive_async(flow: Flow[T], execute: Callable[[ApiRequest], Awaitable[Any]]) -> T:
    """Run ``flow`` to completion, suspending on each request."""
    try:
        request = next(flow)
        while True:
            request = flow.send(await execute(request))
    except StopIteration as stop:
        return stop.value
    finally:
        flow.close()
