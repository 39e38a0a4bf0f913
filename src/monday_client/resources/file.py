"""
File assets. Uploads go to the files endpoint as multipart requests where
the file travels as the ``$file`` variable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from ..core.graphql import Variable
from ..core.request import mutation
from ..core.response import Response

if TYPE_CHECKING:
    from ..client import MondayClient

DEFAULT_SELECT = ("id",)

FILE_VARIABLES = {"file": "File!"}


def _split_file(args: Optional[Mapping[str, Any]]):
    remaining = dict(args or {})
    upload = remaining.pop("file", None)
    if upload is None:
        raise ValueError("args must include 'file' (a path or a binary file object)")
    remaining["file"] = Variable("file")
    return remaining, {"file": upload}


def add_file_to_column(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """
    Upload a file into a file column of an item.
    ``args`` needs item_id, column_id and file.
    """
    gql_args, files = _split_file(args)
    request = mutation("add_file_to_column", gql_args, select, variables=FILE_VARIABLES)
    return client.make_file_request(request, files)


def add_file_to_update(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Attach a file to an update; ``args`` needs update_id and file."""
    gql_args, files = _split_file(args)
    request = mutation("add_file_to_update", gql_args, select, variables=FILE_VARIABLES)
    return client.make_file_request(request, files)


def clear_file_column(
    client: MondayClient,
    *,
    args: Optional[Mapping[str, Any]] = None,
    select: Sequence[Any] = DEFAULT_SELECT,
) -> Response:
    """Remove every file from a file column (board_id, item_id, column_id)."""
    merged = {**(args or {}), "value": {"clear_all": True}}
    return client.make_request(mutation("change_column_value", merged, select))
