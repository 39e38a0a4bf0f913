from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from ..core.request import query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "name")


def query(client: MondayClient, *, select: Sequence[Any] = DEFAULT_SELECT) -> Response:
    return client.make_request(build_query("me", None, select))
