"""Chain → SQL string compilation.

``compile_statement`` is the whole algorithm: visit nodes head to tail and
join their fragments with exactly one space.  Fragments are not trimmed or
normalised, and a one-node chain compiles to that node's text unchanged.

``StatementCompiler`` is the object form, returning a
:class:`CompiledStatement` that also records the statement kind.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chainql.schema.model import StatementKind

if TYPE_CHECKING:
    from chainql.compile.chain import ClauseChain

logger = logging.getLogger(__name__)

#: Separator placed between consecutive fragments.
SEPARATOR = " "


@dataclass(frozen=True)
class CompiledStatement:
    """The output of a compilation.

    Attributes:
        sql: The statement text.
        kind: The statement kind of the compiled chain.
    """

    sql: str
    kind: StatementKind

    def __str__(self) -> str:
        return self.sql


def compile_statement(chain: ClauseChain) -> str:
    """Join every fragment of ``chain`` with a single space.

    Args:
        chain: The chain to flatten.  It is not modified.

    Returns:
        ``text[0] + " " + ... + " " + text[n-1]``.
    """
    return StatementCompiler().compile(chain).sql


class StatementCompiler:
    """Compiles clause chains to statement text.

    Args:
        separator: String placed between fragments.  Defaults to a single
            space.
    """

    def __init__(self, separator: str = SEPARATOR) -> None:
        self.separator = separator

    def compile(self, chain: ClauseChain) -> CompiledStatement:
        parts: list[str] = []
        node = chain.head
        while node is not None:
            parts.append(node.text)
            node = node.next
        sql = self.separator.join(parts)
        logger.debug("Compiled %d clause(s): %s", len(parts), sql)
        return CompiledStatement(sql=sql, kind=chain.kind)
