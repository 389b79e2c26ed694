"""Clause-level fragment renderers.

Each function renders exactly one SQL fragment.  Nothing is quoted, escaped
or validated: names, values and conditions are emitted verbatim.

Functions
---------
build_select   — ``SELECT <fields | *> FROM <table>``
build_insert   — ``INSERT INTO <table> [(<fields>)]``
build_update   — ``UPDATE <table>``
build_delete   — ``DELETE FROM <table>``
build_values   — ``VALUES (<v1, v2, ...>)``
build_set      — ``SET <k1 = v1, k2 = v2, ...>``
build_where    — ``WHERE <condition>``
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Union

from chainql.schema.model import Model

#: Input accepted by :func:`build_set`: a mapping (iterated in insertion
#: order) or an iterable of ``(column, value)`` pairs.
Assignments = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def _join(items: Iterable[Any]) -> str:
    return ", ".join(str(item) for item in items)


def build_select(model: Model) -> str:
    columns = _join(model.fields) if model.fields is not None else "*"
    return f"SELECT {columns} FROM {model.name}"


def build_insert(model: Model) -> str:
    if model.fields is None:
        return f"INSERT INTO {model.name}"
    return f"INSERT INTO {model.name} ({_join(model.fields)})"


def build_update(model: Model) -> str:
    return f"UPDATE {model.name}"


def build_delete(model: Model) -> str:
    return f"DELETE FROM {model.name}"


def build_values(values: Iterable[Any]) -> str:
    return f"VALUES ({_join(values)})"


def build_set(arguments: Assignments) -> str:
    """Render a ``SET`` fragment in the caller's order.

    Args:
        arguments: Column → value mapping, or ``(column, value)`` pairs.

    Returns:
        ``"SET a = 1, b = 2"``.  An empty input renders ``"SET "``.
    """
    pairs = arguments.items() if isinstance(arguments, Mapping) else arguments
    assignments = ", ".join(f"{key} = {value}" for key, value in pairs)
    return f"SET {assignments}"


def build_where(condition: str) -> str:
    return f"WHERE {condition}"
