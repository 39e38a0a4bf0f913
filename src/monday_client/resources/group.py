from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from ..core.request import mutation, query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "title")


def query(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Groups of the boards matched by ``args``."""
    return client.make_request(build_query("boards", args, [{"groups": select}]))


def create(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    return client.make_request(mutation("create_group", args, select))


def update(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = ("id",),
) -> Response:
    """``group_attribute`` is an enum: pass EnumToken("title") or similar."""
    return client.make_request(mutation("update_group", args, select))


def delete(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = ("id",),
) -> Response:
    return client.make_request(mutation("delete_group", args, select))


def archive(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = ("id",),
) -> Response:
    return client.make_request(mutation("archive_group", args, select))


def duplicate(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    return client.make_request(mutation("duplicate_group", args, select))


def move_item(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = ("id",),
) -> Response:
    """Move an item (``item_id``) into a group (``group_id``)."""
    return client.make_request(mutation("move_item_to_group", args, select))
