"""Description of one API call, independent of how it is executed."""

from dataclasses import dataclass, field
from typing import Any

import pydantic

from payup.params import WireParams


@dataclass
class ApiRequest:
    """Everything an executor needs to perform a single request and decode it.

    ``path`` is relative to the configured API base (or the files base when
    ``upload`` is set). ``params`` go in the query string, ``data`` in an
    ``application/x-www-form-urlencoded`` body, ``files`` in a
    ``multipart/form-data`` body alongside ``data``.
    """

    method: str
    path: str
    model: type[pydantic.BaseModel]
    params: WireParams = field(default_factory=list)
    data: WireParams = field(default_factory=list)
    files: dict[str, Any] | None = None
    upload: bool = False

    def url(self, api_base: str, files_base: str) -> str:
        base = files_base if self.upload else api_base
        return f"{base.rstrip('/')}/{self.path.lstrip('/')}"
