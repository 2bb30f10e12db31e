"""Transport layer: request descriptions and the executors that perform them.

Modules:
    request: ``ApiRequest``, a single call independent of execution mode
    executor: ``SyncExecutor`` (blocking) and ``AsyncExecutor`` (suspending)

Example:
    ```python
    import httpx

    from payup.transport import AsyncExecutor

    executor = AsyncExecutor(credential, transport=httpx.MockTransport(handler))
    ```
"""

from payup.transport.executor import AsyncExecutor, SyncExecutor
from payup.transport.request import ApiRequest

__all__ = ["ApiRequest", "AsyncExecutor", "SyncExecutor"]
