from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Union

from ..core.deprecation import warn_deprecated
from ..core.graphql import field_call
from ..core.request import mutation, query as build_query
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id", "name", "description")
DEFAULT_PAGINATED_SELECT = ("id", "name")

MAX_PAGE_LIMIT = 500

Id = Union[int, str]


def query(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Retrieve boards, filtered with ``args`` (ids, board_kind, limit, page, ...)."""
    return client.make_request(build_query("boards", args, select))


def create(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """
    Create a board. ``board_kind`` is an enum, pass EnumToken("public") or
    an enum.Enum member so it is sent unquoted.
    """
    return client.make_request(mutation("create_board", args, select))


def duplicate(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    return client.make_request(mutation("duplicate_board", args, [{"board": select}]))


def update(
    client: MondayClient, *, args: Optional[Mapping[str, Any]] = None
) -> Response:
    """
    Update a board attribute. The API answers with a JSON-encoded string
    rather than an object, so there is nothing to select.
    """
    return client.make_request(mutation("update_board", args))


def archive(
    client: MondayClient, board_id: Id, *, select: Sequence[Any] = ("id",)
) -> Response:
    return client.make_request(
        mutation("archive_board", {"board_id": board_id}, select)
    )


def delete(
    client: MondayClient, board_id: Id, *, select: Sequence[Any] = ("id",)
) -> Response:
    return client.make_request(
        mutation("delete_board", {"board_id": board_id}, select)
    )


def delete_subscribers(
    client: MondayClient,
    board_id: Id,
    user_ids: List[Id],
    *,
    select: Sequence[Any] = ("id",),
) -> Response:
    warn_deprecated(
        "delete_subscribers", "2.0.0", alternative="user.delete_from_board"
    )
    return client.make_request(
        mutation(
            "delete_subscribers_from_board",
            {"board_id": board_id, "user_ids": list(user_ids)},
            select,
        )
    )


def items_page(
    client: MondayClient,
    board_ids: Union[Id, List[Id]],
    *,
    limit: int = 25,
    cursor: Optional[str] = None,
    query_params: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_PAGINATED_SELECT,
) -> Response:
    """
    Fetch one page of items with cursor-based pagination.

    Pass the ``cursor`` from the previous page to continue; it is None on the
    last page. ``query_params`` filters items with rules and an operator and is
    sent as a GraphQL input object:

        {"rules": [{"column_id": "status", "compare_value": [1]}],
         "operator": EnumToken("and")}

    Use models.ItemsPage.from_response() to read the result.
    """
    if not 1 <= limit <= MAX_PAGE_LIMIT:
        raise ValueError(f"limit must be between 1 and {MAX_PAGE_LIMIT}")

    page_field = field_call(
        "items_page",
        {"limit": limit, "cursor": cursor, "query_params": query_params or None},
    )
    ids = list(board_ids) if isinstance(board_ids, (list, tuple)) else [board_ids]
    select_spec = ["id", {page_field: ["cursor", {"items": select}]}]
    return client.make_request(build_query("boards", {"ids": ids}, select_spec))
