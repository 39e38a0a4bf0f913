"""
Render Python values as GraphQL argument and selection text.

Argument values form a small closed set of shapes:

- ``None``           key omitted (``null`` inside lists)
- ``NULL``           literal ``null``, for clearing a field explicitly
- ``bool``/numbers   verbatim (``true``, ``42``, ``1.5``)
- ``EnumToken``      unquoted token (``board_kind: private``); ``enum.Enum``
                     members render the same way using their value
- ``Variable``       operation variable reference (``$file``)
- ``str``            double-quoted, JSON-escaped literal
- ``RawJson``        value JSON-encoded and then quoted
- mappings           GraphQL input object ``{k: v}``
- lists/tuples       GraphQL list ``[v1, v2]``

Some monday.com arguments (``column_values`` and friends) take a JSON
string rather than an input object. Those names are listed in
``DEFAULT_JSON_FIELDS``; a mapping or list passed for one of them is
JSON-encoded instead of rendered natively. A ``str`` passed for them is
assumed to be JSON already and is only quoted.

The renderer has no schema awareness. Pass ``int`` IDs to send numeric
literals and ``str`` IDs to send quoted ones.
"""

from __future__ import annotations

import enum
import json
import math
import re
from dataclasses import dataclass
from typing import AbstractSet, Any, Iterable, List, Mapping, Optional, Sequence

from .errors import QueryBuildError

_NAME_RE = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

DEFAULT_JSON_FIELDS: frozenset[str] = frozenset({"column_values", "value", "defaults"})


class _Null:
    _instance: Optional["_Null"] = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False


NULL = _Null()


@dataclass(frozen=True)
class EnumToken:
    name: str

    def __post_init__(self) -> None:
        if not _NAME_RE.match(self.name or ""):
            raise QueryBuildError(f"Invalid enum token: {self.name!r}")


@dataclass(frozen=True)
class Variable:
    name: str

    def __post_init__(self) -> None:
        if not _NAME_RE.match(self.name.lstrip("$") if self.name else ""):
            raise QueryBuildError(f"Invalid variable name: {self.name!r}")

    @property
    def reference(self) -> str:
        return "$" + self.name.lstrip("$")


@dataclass(frozen=True)
class RawJson:
    """Force JSON-string rendering for any value, whatever the field name."""

    value: Any


def _check_name(name: Any) -> str:
    if not isinstance(name, str) or not _NAME_RE.match(name):
        raise QueryBuildError(f"Invalid argument name: {name!r}")
    return name


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _to_json(value: Any) -> str:
    try:
        return json.dumps(
            value, ensure_ascii=False, separators=(",", ":"), default=_json_default
        )
    except (TypeError, ValueError) as exc:
        raise QueryBuildError(f"Value is not JSON serializable: {exc}") from exc


def _json_default(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, EnumToken):
        return value.name
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render_value(value: Any, *, as_json: bool = False) -> str:
    """Render a single argument value. ``as_json`` applies the JSON-string policy."""
    if isinstance(value, RawJson):
        return _quote(_to_json(value.value))
    if value is None or value is NULL:
        return "null"
    if as_json and isinstance(value, (Mapping, list, tuple)):
        return _quote(_to_json(value))
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise QueryBuildError(f"Cannot render non-finite number {value!r}")
        return repr(value)
    if isinstance(value, EnumToken):
        return value.name
    if isinstance(value, enum.Enum):
        return EnumToken(str(value.value)).name
    if isinstance(value, Variable):
        return value.reference
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, Mapping):
        return render_object(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(render_value(v) for v in value) + "]"
    raise QueryBuildError(
        f"Unsupported argument value of type {type(value).__name__}: {value!r}"
    )


def _render_pairs(
    args: Mapping[str, Any], json_fields: AbstractSet[str]
) -> List[str]:
    return [
        f"{_check_name(key)}: {render_value(value, as_json=key in json_fields)}"
        for key, value in args.items()
        if value is not None
    ]


def render_object(obj: Mapping[str, Any]) -> str:
    """Render a mapping as a GraphQL input object literal, e.g. ``{rules: [...]}``."""
    return "{" + ", ".join(_render_pairs(obj, frozenset())) + "}"


def render_args(
    args: Optional[Mapping[str, Any]],
    *,
    json_fields: AbstractSet[str] = DEFAULT_JSON_FIELDS,
) -> str:
    """
    Render an argument map as ``(k1: v1, k2: v2)``.
    Returns "" (no parentheses) when there is nothing to render.
    """
    if not args:
        return ""
    if not isinstance(args, Mapping):
        raise QueryBuildError("args must be a mapping of argument names to values")
    pairs = _render_pairs(args, json_fields)
    return "(" + ", ".join(pairs) + ")" if pairs else ""


def field_call(
    name: str,
    args: Optional[Mapping[str, Any]] = None,
    *,
    json_fields: AbstractSet[str] = DEFAULT_JSON_FIELDS,
) -> str:
    """``name`` followed by its rendered arguments, for use as a selection key."""
    return name + render_args(args, json_fields=json_fields)


def _render_entries(entries: Iterable[Any]) -> Iterable[str]:
    for entry in entries:
        if isinstance(entry, str):
            if not entry.strip():
                raise QueryBuildError("Empty field name in selection")
            yield entry
        elif isinstance(entry, Mapping):
            if not entry:
                raise QueryBuildError("Empty mapping in selection")
            for field, sub in entry.items():
                if isinstance(sub, str):
                    if not sub.strip():
                        raise QueryBuildError(f"Empty sub-selection for {field!r}")
                    yield f"{field}{{{sub}}}"
                else:
                    yield f"{field}{{{render_select(sub)}}}"
        else:
            raise QueryBuildError(
                f"Selection entries must be strings or mappings, got {entry!r}"
            )


def render_select(spec: Sequence[Any]) -> str:
    """
    Render a selection list.

    ["id", {"columns": ["id", "title"]}] -> "id columns{id title}"
    """
    if isinstance(spec, (str, bytes)) or not isinstance(spec, Sequence):
        raise QueryBuildError("select must be a list of fields")
    if not spec:
        raise QueryBuildError("select must contain at least one field")
    return " ".join(_render_entries(spec))


__all__ = [
    "DEFAULT_JSON_FIELDS",
    "NULL",
    "EnumToken",
    "Variable",
    "RawJson",
    "render_value",
    "render_object",
    "render_args",
    "field_call",
    "render_select",
]
