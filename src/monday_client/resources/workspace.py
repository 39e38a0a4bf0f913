from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

from ..core.request import mutation, query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "name", "description")


def query(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    return client.make_request(build_query("workspaces", args, select))


def create(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Create a workspace; ``kind`` is an enum (EnumToken("open"))."""
    return client.make_request(mutation("create_workspace", args, select))


def delete(
    client: MondayClient,
    workspace_id: Union[int, str],
    *,
    select: Sequence[Any] = ("id",),
) -> Response:
    return client.make_request(
        mutation("delete_workspace", {"workspace_id": workspace_id}, select)
    )
