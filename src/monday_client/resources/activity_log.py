from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Union

from ..core.graphql import field_call
from ..core.request import query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "event", "data")

Id = Union[int, str]


def query(
    client: MondayClient,
    board_ids: Union[Id, List[Id]],
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """
    Activity logs of the given boards.
    ``args`` filters the logs (from, to, user_ids, column_ids, limit, page).
    """
    ids = list(board_ids) if isinstance(board_ids, (list, tuple)) else [board_ids]
    logs = {field_call("activity_logs", args): select}
    return client.make_request(build_query("boards", {"ids": ids}, [logs]))
