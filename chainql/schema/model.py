"""Pydantic models for the table reference a statement is built against.

A ``Model`` is produced by the caller (by hand, or via
:mod:`chainql.schema.converters`) and is read-only to the statement factory.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StatementKind(str, Enum):
    """The kind of SQL statement a clause chain represents."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Model(BaseModel):
    """Logical reference to a single table.

    Attributes:
        name: Table name, emitted verbatim (no quoting).
        fields: Ordered column names, or ``None``.  ``None`` means "all
            columns" for SELECT and "no explicit column list" for INSERT.
            UPDATE requires it to be present.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    fields: tuple[str, ...] | None = None
