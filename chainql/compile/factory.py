"""Statement factory: Model + statement kind → one-node clause chain.

The four built-in builders (:func:`select`, :func:`insert`, :func:`update`,
:func:`delete`) are registered with :class:`StatementFactory` under their
:class:`~chainql.schema.model.StatementKind`, so callers holding a kind at
runtime can dispatch without an if-chain::

    chain = StatementFactory.create(users, "update")

A builder registered again for the same kind replaces the previous one.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar, Union

from chainql.compile.chain import ClauseChain, ClauseNode
from chainql.compile.clause_builders import (
    build_delete,
    build_insert,
    build_select,
    build_update,
)
from chainql.errors import InvalidModelForStatementError, UnsupportedStatementError
from chainql.schema.model import Model, StatementKind

logger = logging.getLogger(__name__)

#: A statement builder: ``(model) -> ClauseChain``.
StatementBuilder = Callable[[Model], ClauseChain]


class StatementFactory:
    """Registry mapping :class:`StatementKind` to statement builders.

    Example::

        @StatementFactory.register(StatementKind.DELETE)
        def soft_delete(model: Model) -> ClauseChain:
            ...

        chain = StatementFactory.create(model, StatementKind.DELETE)
    """

    _builders: ClassVar[dict[StatementKind, StatementBuilder]] = {}

    @classmethod
    def register(
        cls, kind: StatementKind
    ) -> Callable[[StatementBuilder], StatementBuilder]:
        """Decorator that registers a builder for ``kind``.

        Args:
            kind: The statement kind the builder produces.

        Returns:
            A decorator that registers and returns the builder.
        """

        def decorator(builder: StatementBuilder) -> StatementBuilder:
            cls._builders[kind] = builder
            return builder

        return decorator

    @classmethod
    def register_builder(cls, kind: StatementKind, builder: StatementBuilder) -> None:
        """Register a builder without using the decorator form."""
        cls._builders[kind] = builder

    @classmethod
    def create(cls, model: Model, kind: Union[StatementKind, str]) -> ClauseChain:
        """Build the initial chain for ``model``.

        Args:
            model: The table reference.
            kind: A :class:`StatementKind` or its name, case-insensitive
                (``"select"``, ``"UPDATE"``, ...).

        Returns:
            A one-node :class:`ClauseChain`.

        Raises:
            UnsupportedStatementError: If ``kind`` names no registered builder.
            InvalidModelForStatementError: If ``model`` cannot back ``kind``.
        """
        builder = cls._builders.get(cls._coerce(kind))
        if builder is None:
            raise UnsupportedStatementError(str(kind), cls.registered_kinds())
        return builder(model)

    @classmethod
    def registered_kinds(cls) -> list[str]:
        """Return the sorted names of kinds that have a builder."""
        return sorted(kind.value for kind in cls._builders)

    @staticmethod
    def _coerce(kind: Union[StatementKind, str]) -> StatementKind | None:
        if isinstance(kind, StatementKind):
            return kind
        try:
            return StatementKind(kind.upper())
        except (AttributeError, ValueError):
            return None


def _start(kind: StatementKind, text: str, model: Model) -> ClauseChain:
    logger.debug("Started %s statement on %s", kind.value, model.name)
    return ClauseChain(ClauseNode(text=text, kind=kind))


@StatementFactory.register(StatementKind.SELECT)
def select(model: Model) -> ClauseChain:
    """``SELECT <fields> FROM <name>``; ``*`` when ``fields`` is ``None``."""
    return _start(StatementKind.SELECT, build_select(model), model)


@StatementFactory.register(StatementKind.INSERT)
def insert(model: Model) -> ClauseChain:
    """``INSERT INTO <name> [(<fields>)]``."""
    return _start(StatementKind.INSERT, build_insert(model), model)


@StatementFactory.register(StatementKind.UPDATE)
def update(model: Model) -> ClauseChain:
    """``UPDATE <name>``.

    Raises:
        InvalidModelForStatementError: If ``model.fields`` is ``None``.
    """
    if model.fields is None:
        raise InvalidModelForStatementError(
            f"UPDATE on '{model.name}' requires the model to declare fields.",
            model_name=model.name,
            kind=StatementKind.UPDATE.value,
        )
    return _start(StatementKind.UPDATE, build_update(model), model)


@StatementFactory.register(StatementKind.DELETE)
def delete(model: Model) -> ClauseChain:
    """``DELETE FROM <name>``.  ``fields`` is ignored."""
    return _start(StatementKind.DELETE, build_delete(model), model)
