from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, Mapping, Optional, Sequence

from .errors import QueryBuildError
from .graphql import DEFAULT_JSON_FIELDS, render_args, render_select

OPERATIONS = frozenset({"query", "mutation"})

_FIELD_RE = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


@dataclass(frozen=True)
class GraphQLRequest:
    """A composed operation, ready to be posted as ``{"query": text}``."""

    text: str
    operation: str
    field: str

    def to_body(self) -> Dict[str, str]:
        return {"query": self.text}

    def __str__(self) -> str:
        return self.text


def _render_variables(variables: Optional[Mapping[str, str]]) -> str:
    if not variables:
        return ""
    parts = []
    for name, gql_type in variables.items():
        name = name.lstrip("$")
        if not _FIELD_RE.match(name):
            raise QueryBuildError(f"Invalid variable name: {name!r}")
        if not gql_type:
            raise QueryBuildError(f"Variable ${name} needs a GraphQL type")
        parts.append(f"${name}: {gql_type}")
    return "(" + ", ".join(parts) + ")"


def build_request(
    operation: str,
    field: str,
    args: Optional[Mapping[str, Any]] = None,
    select: Optional[Sequence[Any]] = None,
    *,
    variables: Optional[Mapping[str, str]] = None,
    json_fields: AbstractSet[str] = DEFAULT_JSON_FIELDS,
) -> GraphQLRequest:
    """
    Compose ``operation{field(args){select}}``.

    select=None builds the select-less form used by mutations that return a
    scalar (``mutation{update_board(...)}``). ``variables`` maps variable
    names to GraphQL types and is rendered in the operation header:
    ``mutation($file: File!){...}``.
    """
    if operation not in OPERATIONS:
        raise QueryBuildError(
            f"operation must be one of {sorted(OPERATIONS)}, got {operation!r}"
        )
    if not isinstance(field, str) or not _FIELD_RE.match(field):
        raise QueryBuildError(f"Invalid field name: {field!r}")

    body = field + render_args(args, json_fields=json_fields)
    if select is not None:
        body += "{" + render_select(select) + "}"

    text = f"{operation}{_render_variables(variables)}{{{body}}}"
    return GraphQLRequest(text=text, operation=operation, field=field)


def query(field: str, args=None, select=None, **kwargs: Any) -> GraphQLRequest:
    return build_request("query", field, args, select, **kwargs)


def mutation(field: str, args=None, select=None, **kwargs: Any) -> GraphQLRequest:
    return build_request("mutation", field, args, select, **kwargs)


__all__ = ["GraphQLRequest", "OPERATIONS", "build_request", "query", "mutation"]
