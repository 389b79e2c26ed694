"""chainQL – a minimal SQL statement assembler.

Describe a table, pick a statement kind, chain clauses, compile to text.
chainQL never executes, quotes, escapes or validates anything it renders.

Public API
----------
``select`` / ``insert`` / ``update`` / ``delete``
    Start a one-node :class:`ClauseChain` for a :class:`Model`.

``ClauseChain.values`` / ``.set`` / ``.where_clause``
    Append a clause and return the chain for further chaining.

``compile_statement``
    Flatten a chain into its statement string.

``build_statement``
    One-shot helper combining the three steps above.

Example::

    from chainql import Model, update

    users = Model(name="users", fields=["id", "name"])
    sql = update(users).set({"name": "John"}).where_clause("id = 1").compile()
    # 'UPDATE users SET name = John WHERE id = 1'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Union

from chainql.compile.chain import ClauseChain, ClauseNode
from chainql.compile.clause_builders import Assignments
from chainql.compile.compiler import (
    CompiledStatement,
    StatementCompiler,
    compile_statement,
)
from chainql.compile.factory import (
    StatementFactory,
    delete,
    insert,
    select,
    update,
)
from chainql.errors import (
    ChainQLError,
    InvalidModelForStatementError,
    UnsupportedStatementError,
)
from chainql.schema.converters import model_from_sqlalchemy, model_from_table
from chainql.schema.model import Model, StatementKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core pipeline
    "select",
    "insert",
    "update",
    "delete",
    "compile_statement",
    "build_statement",
    # Schema types
    "Model",
    "StatementKind",
    # Converters
    "model_from_table",
    "model_from_sqlalchemy",
    # Chain
    "ClauseChain",
    "ClauseNode",
    # Compilation
    "CompiledStatement",
    "StatementCompiler",
    "StatementFactory",
    # Errors
    "ChainQLError",
    "InvalidModelForStatementError",
    "UnsupportedStatementError",
]


def build_statement(
    model: Model,
    kind: Union[StatementKind, str],
    *,
    values: Iterable[Any] | None = None,
    assignments: Assignments | None = None,
    where: str | None = None,
) -> str:
    """Create, extend and compile a statement in one call.

    Clauses are appended in SQL order: ``SET``, then ``VALUES``, then
    ``WHERE``.  Each is skipped when its argument is ``None``::

        sql = chainql.build_statement(
            users, "update", assignments={"name": "John"}, where="id = 1"
        )

    Args:
        model: The table reference.
        kind: Statement kind, as accepted by :meth:`StatementFactory.create`.
        values: Items for a ``VALUES (...)`` clause.
        assignments: Column → value pairs for a ``SET`` clause.
        where: Condition for a ``WHERE`` clause.

    Returns:
        The compiled statement string.

    Raises:
        UnsupportedStatementError: If ``kind`` is not a known statement kind.
        InvalidModelForStatementError: If ``model`` cannot back ``kind``.
    """
    chain = StatementFactory.create(model, kind)
    if assignments is not None:
        chain.set(assignments)
    if values is not None:
        chain.values(values)
    if where is not None:
        chain.where_clause(where)
    return chain.compile()
