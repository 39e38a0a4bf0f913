from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from ..core.request import mutation, query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "body", "created_at")


def query(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Retrieve updates (the comments posted on items)."""
    return client.make_request(build_query("updates", args, select))


def create(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    return client.make_request(mutation("create_update", args, select))


def like(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = ("id",),
) -> Response:
    return client.make_request(mutation("like_update", args, select))


def clear_item_updates(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = ("id",),
) -> Response:
    """Remove every update from the item given by ``item_id``."""
    return client.make_request(mutation("clear_item_updates", args, select))


def delete(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = ("id",),
) -> Response:
    return client.make_request(mutation("delete_update", args, select))
