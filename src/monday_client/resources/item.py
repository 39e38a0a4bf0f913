from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

from ..core.request import mutation, query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "name", "created_at")

Id = Union[int, str]


def query(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Retrieve items, usually filtered by ``ids``."""
    return client.make_request(build_query("items", args, select))


def create(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """
    Create an item.

    ``column_values`` may be a dict (JSON-encoded for you) or a JSON string:

        create(client, args={"board_id": 123, "item_name": "Task",
                             "column_values": {"status": {"label": "Done"}}})
    """
    return client.make_request(mutation("create_item", args, select))


def duplicate(
    client: MondayClient,
    board_id: Id,
    item_id: Id,
    with_updates: bool = False,
    *,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    args = {"board_id": board_id, "item_id": item_id, "with_updates": with_updates}
    return client.make_request(mutation("duplicate_item", args, select))


def archive(
    client: MondayClient, item_id: Id, *, select: Sequence[Any] = ("id",)
) -> Response:
    return client.make_request(mutation("archive_item", {"item_id": item_id}, select))


def delete(
    client: MondayClient, item_id: Id, *, select: Sequence[Any] = ("id",)
) -> Response:
    return client.make_request(mutation("delete_item", {"item_id": item_id}, select))
