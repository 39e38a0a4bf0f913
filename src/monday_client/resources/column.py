from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

from ..core.deprecation import warn_deprecated
from ..core.graphql import field_call
from ..core.request import mutation, query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "title", "description")
DEFAULT_VALUE_SELECT = ("id", "name")

Id = Union[int, str]


def query(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Columns of the boards matched by ``args``."""
    return client.make_request(build_query("boards", args, [{"columns": select}]))


def column_values(
    client: MondayClient,
    board_ids: Sequence[Id] = (),
    item_ids: Sequence[Id] = (),
    *,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    warn_deprecated("column_values", "2.0.0", alternative="item.query")

    items_field = field_call("items", {"ids": list(item_ids)} if item_ids else None)
    board_args = {"ids": list(board_ids)} if board_ids else None
    return client.make_request(
        build_query("boards", board_args, [{items_field: [{"column_values": select}]}])
    )


def create(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """
    Create a column. ``column_type`` is an enum (EnumToken("status")) and
    ``defaults`` is sent as a JSON string.
    """
    return client.make_request(mutation("create_column", args, select))


def change_title(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    return client.make_request(mutation("change_column_title", args, select))


def change_metadata(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    return client.make_request(mutation("change_column_metadata", args, select))


def change_value(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_VALUE_SELECT,
) -> Response:
    """Set one column of an item. ``value`` is JSON: a dict or a JSON string."""
    return client.make_request(mutation("change_column_value", args, select))


def change_simple_value(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_VALUE_SELECT,
) -> Response:
    """Set one column of an item from a plain string ``value``."""
    return client.make_request(mutation("change_simple_column_value", args, select))


def change_multiple_values(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_VALUE_SELECT,
) -> Response:
    return client.make_request(mutation("change_multiple_column_values", args, select))


def delete(
    client: MondayClient,
    board_id: Id,
    column_id: str,
    *,
    select: Sequence[Any] = ("id",),
) -> Response:
    args = {"board_id": board_id, "column_id": column_id}
    return client.make_request(mutation("delete_column", args, select))
