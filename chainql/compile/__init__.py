"""chainQL compilation layer: Model → clause chain → SQL text."""
from chainql.compile.chain import ClauseChain, ClauseNode
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

__all__ = [
    "ClauseChain",
    "ClauseNode",
    "CompiledStatement",
    "StatementCompiler",
    "StatementFactory",
    "compile_statement",
    "delete",
    "insert",
    "select",
    "update",
]
