"""Uploaded files (dispute evidence, identity documents, ...)."""

from typing import IO, ClassVar

from payup.flows import Flow
from payup.resources.base import Listable, Resource, Retrievable
from payup.transport.request import ApiRequest


class File(Retrievable, Listable, Resource):
    resource_path: ClassVar[str] = "files"

    purpose: str | None = None
    filename: str | None = None
    created: int | None = None
    expires_at: int | None = None
    size: int | None = None
    title: str | None = None
    type: str | None = None
    url: str | None = None

    @classmethod
    def upload(cls, client, purpose: str, content: bytes | IO[bytes], filename: str = "upload"):
        """Upload ``content`` as a multipart body to the files host.

        Args:
            client: Client or AsyncClient.
            purpose: What the file is for, e.g. ``dispute_evidence``.
            content: Raw bytes or a binary file object.
            filename: Name reported to the API.
        """
        return client.run(cls._upload_flow(purpose, content, filename))

    @classmethod
    def _upload_flow(cls, purpose: str, content: bytes | IO[bytes], filename: str) -> Flow:
        request = ApiRequest(
            "POST",
            cls.resource_path,
            model=cls,
            data=[("purpose", purpose)],
            files={"file": (filename, content)},
            upload=True,
        )
        return (yield request)
