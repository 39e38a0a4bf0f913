from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

from ..core.request import mutation, query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "name")


def query(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Folders, optionally filtered by ``workspace_ids`` or ``ids``."""
    return client.make_request(build_query("folders", args, select))


def create(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    return client.make_request(mutation("create_folder", args, select))


def update(
    client: MondayClient, *, args: Optional[Mapping[str, Any]] = None
) -> Response:
    return client.make_request(mutation("update_folder", args))


def delete(
    client: MondayClient,
    folder_id: Union[int, str],
    *,
    select: Sequence[Any] = ("id",),
) -> Response:
    return client.make_request(
        mutation("delete_folder", {"folder_id": folder_id}, select)
    )
