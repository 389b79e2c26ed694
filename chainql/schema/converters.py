"""Utilities for building a Model from SQLAlchemy table metadata.

Install the optional dependency before using this module::

    pip install "chainql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from chainql.schema.converters import model_from_sqlalchemy

    engine = create_engine("sqlite:///mydb.db")
    users = model_from_sqlalchemy(engine, "users", all_columns=True)
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from chainql.schema.model import Model

if TYPE_CHECKING:
    from sqlalchemy import Engine, Table


def model_from_table(
    table: Table,
    *,
    fields: Sequence[str] | None = None,
    all_columns: bool = False,
) -> Model:
    """Build a :class:`Model` from a SQLAlchemy :class:`~sqlalchemy.Table`.

    The model name is the table name, qualified as ``schema.name`` when the
    table belongs to an explicit schema.

    Args:
        table: A declared or reflected table.
        fields: Explicit column list.  Names are taken as given; they are not
            checked against the table.
        all_columns: When ``True``, use every column of the table in
            declaration order.  Mutually exclusive with ``fields``.

    Returns:
        A :class:`Model`.  ``fields`` is ``None`` unless one of the two
        options above was used.

    Raises:
        ValueError: If both ``fields`` and ``all_columns`` are given.
    """
    if fields is not None and all_columns:
        raise ValueError("Pass either fields or all_columns=True, not both.")

    name = f"{table.schema}.{table.name}" if table.schema else table.name
    if all_columns:
        fields = [col.name for col in table.columns]
    return Model(name=name, fields=fields)


def model_from_sqlalchemy(
    engine: Engine,
    table_name: str,
    *,
    schema: str | None = None,
    fields: Sequence[str] | None = None,
    all_columns: bool = False,
) -> Model:
    """Reflect ``table_name`` from a live engine and build a :class:`Model`.

    Args:
        engine: A connected :class:`sqlalchemy.engine.Engine` instance.
        table_name: The table to reflect.
        schema: Optional database schema name (e.g. ``"public"``).
        fields: Explicit column list, see :func:`model_from_table`.
        all_columns: Use every reflected column, see :func:`model_from_table`.

    Returns:
        A :class:`Model` for the reflected table.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
        sqlalchemy.exc.NoSuchTableError: If the table does not exist.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
        from sqlalchemy import Table as _Table
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for model_from_sqlalchemy(). "
            'Install it with: pip install "chainql[sqlalchemy]"'
        ) from exc

    with engine.connect() as conn:
        table = _Table(table_name, _MetaData(), schema=schema, autoload_with=conn)
    return model_from_table(table, fields=fields, all_columns=all_columns)
