"""Endpoint descriptions used by the resource clients."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.url import url


class Placement(str, Enum):
    """Where caller parameters travel in a request."""

    NONE = "none"
    QUERY = "query"
    BODY = "body"


@dataclass(frozen=True)
class Endpoint:
    """One REST operation: HTTP method, path template and parameter placement."""

    method: str
    path: str
    placement: Placement = Placement.NONE
    json_body: bool = False

    def path_for(self, *ids: Any) -> str:
        return url(self.path, *ids)
