"""Clause chain: the linked statement representation built by the factory.

A chain is a singly-linked list of :class:`ClauseNode` objects owned by a
:class:`ClauseChain` handle.  The factory creates a one-node chain; every
append operation links exactly one new node after the current tail and
returns the same handle, so calls compose::

    sql = update(users).set({"name": "John"}).where_clause("id = 1").compile()

Existing nodes are never rewritten; only the tail's ``next`` link changes.
The handle caches its tail, so appends do not re-walk the chain from the
head.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from chainql.compile.clause_builders import (
    Assignments,
    build_set,
    build_values,
    build_where,
)
from chainql.compile.compiler import compile_statement
from chainql.schema.model import StatementKind

logger = logging.getLogger(__name__)


@dataclass
class ClauseNode:
    """One rendered fragment of a statement.

    Attributes:
        text: The literal fragment, e.g. ``'WHERE id = 1'``.
        kind: Statement kind of the owning chain (informational).
        next: The following node, or ``None`` for the tail.
    """

    text: str
    kind: StatementKind
    next: ClauseNode | None = field(default=None, repr=False)


def _find_tail(node: ClauseNode) -> ClauseNode:
    while node.next is not None:
        node = node.next
    return node


class ClauseChain:
    """Handle owning a chain of :class:`ClauseNode` objects.

    Args:
        head: First node of the chain.  It may already be linked to
            successors; the tail is located by walking ``next`` links.
    """

    def __init__(self, head: ClauseNode) -> None:
        self._head = head
        self._tail = _find_tail(head)

    @classmethod
    def from_fragments(
        cls, kind: StatementKind, fragments: Iterable[str]
    ) -> ClauseChain:
        """Build a pre-linked chain from already-rendered fragments.

        Raises:
            ValueError: If ``fragments`` is empty; a chain always has a head.
        """
        nodes = [ClauseNode(text=text, kind=kind) for text in fragments]
        if not nodes:
            raise ValueError("A clause chain needs at least one fragment.")
        for node, successor in zip(nodes, nodes[1:]):
            node.next = successor
        return cls(nodes[0])

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def head(self) -> ClauseNode:
        return self._head

    @property
    def tail(self) -> ClauseNode:
        return self._tail

    @property
    def kind(self) -> StatementKind:
        return self._head.kind

    def __iter__(self) -> Iterator[ClauseNode]:
        node: ClauseNode | None = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def fragments(self) -> list[str]:
        """Returns the text of every node, head first."""
        return [node.text for node in self]

    # ------------------------------------------------------------------
    # Append operations
    # ------------------------------------------------------------------

    def values(self, values: Iterable[Any]) -> ClauseChain:
        """Append ``VALUES (v1, v2, ...)``.  Values are joined verbatim."""
        return self._append(build_values(values))

    def set(self, arguments: Assignments) -> ClauseChain:
        """Append ``SET k1 = v1, ...`` in the order ``arguments`` yields.

        Args:
            arguments: Column → value mapping, or ``(column, value)`` pairs.
        """
        return self._append(build_set(arguments))

    def where_clause(self, condition: str) -> ClauseChain:
        """Append ``WHERE <condition>``.  The condition is not parsed."""
        return self._append(build_where(condition))

    def _append(self, text: str) -> ClauseChain:
        node = ClauseNode(text=text, kind=self.kind)
        # Nodes linked onto the tail from outside the handle are honoured.
        tail = _find_tail(self._tail)
        tail.next = node
        self._tail = node
        logger.debug("Appended %r to %s chain", text, self.kind.value)
        return self

    # ------------------------------------------------------------------
    # Compilation
    # ------------------------------------------------------------------

    def compile(self) -> str:
        """Flatten the chain into a statement string."""
        return compile_statement(self)

    def __str__(self) -> str:
        return self.compile()

    def __repr__(self) -> str:
        return f"ClauseChain(kind={self.kind.value}, fragments={self.fragments()!r})"
