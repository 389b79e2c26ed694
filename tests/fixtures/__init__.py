"""Test fixtures: sample table models and SQLite DDL."""

from __future__ import annotations

from chainql.schema.model import Model

USERS_DDL = """
CREATE TABLE users (
    id    INTEGER PRIMARY KEY,
    name  TEXT    NOT NULL,
    email TEXT
)
"""


def users_model(*fields: str) -> Model:
    """Return a ``users`` Model, with ``fields`` when any are given."""
    return Model(name="users", fields=list(fields) if fields else None)
