from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from ..core.request import query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "name", "type")


def query(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Views (table, kanban, ...) of the boards matched by ``args``."""
    return client.make_request(build_query("boards", args, [{"views": select}]))
