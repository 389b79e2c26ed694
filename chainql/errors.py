"""Custom exception hierarchy for chainQL.

All public errors inherit from ChainQLError so callers can catch the base
class for any chainQL-specific failure.
"""
from __future__ import annotations

from typing import Any


class ChainQLError(Exception):
    """Base exception for all chainQL errors."""


class InvalidModelForStatementError(ChainQLError):
    """Raised when a Model cannot back the requested statement kind.

    This is a caller-contract violation: the statement is never partially
    built, so no chain exists after it is raised.

    Args:
        message: Human-readable description.
        model_name: Name of the offending Model.
        kind: The statement kind that was requested (e.g. ``'UPDATE'``).
    """

    code = "INVALID_MODEL_FOR_STATEMENT"

    def __init__(self, message: str, model_name: str, kind: str) -> None:
        super().__init__(message)
        self.model_name = model_name
        self.kind = kind

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response."""
        return {
            "error": self.code,
            "message": str(self),
            "details": {"model": self.model_name, "kind": self.kind},
        }


class UnsupportedStatementError(ChainQLError):
    """Raised when the StatementFactory has no builder for a statement kind.

    Args:
        kind: The requested kind, as given by the caller.
        registered: The kinds that do have a builder.
    """

    def __init__(self, kind: str, registered: list[str]) -> None:
        super().__init__(
            f"Unsupported statement kind: '{kind}'. Registered kinds: {registered}."
        )
        self.kind = kind
        self.registered = registered
