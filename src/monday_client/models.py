from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .core.payload import dig, get_list
from .core.response import Response


class GraphQLErrorLocation(BaseModel):
    line: int
    column: int


class GraphQLErrorEntry(BaseModel):
    """One element of a GraphQL ``errors`` array."""

    message: str = "Unknown error"
    locations: Optional[List[GraphQLErrorLocation]] = None
    path: Optional[List[str | int]] = None
    extensions: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")

    @property
    def code(self) -> Optional[str]:
        code = self.extensions.get("code") or self.extensions.get("error_code")
        return str(code) if code is not None else None

    @classmethod
    def list_from(cls, body: Dict[str, Any]) -> List["GraphQLErrorEntry"]:
        return [cls.model_validate(e) for e in get_list(body, "errors")]


# --- Lightweight reference models --- #


class ItemRef(BaseModel):
    """An item as returned by items_page; unselected fields are simply absent."""

    id: str
    name: Optional[str] = None

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class ItemsPage(BaseModel):
    """
    One page of a board's items.
    ``cursor`` is None on the last page; cursors expire after 60 minutes.
    """

    board_id: Optional[str] = None
    cursor: Optional[str] = None
    items: List[ItemRef] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @property
    def has_more(self) -> bool:
        return self.cursor is not None

    @classmethod
    def from_response(cls, response: Response, board_index: int = 0) -> "ItemsPage":
        """Parse ``data.boards[board_index].items_page`` from a board items_page call."""
        board = dig(response.body, "data", "boards", board_index) or {}
        page = board.get("items_page") or {}
        return cls.model_validate({"board_id": board.get("id"), **page})


__all__ = ["GraphQLErrorEntry", "GraphQLErrorLocation", "ItemRef", "ItemsPage"]
