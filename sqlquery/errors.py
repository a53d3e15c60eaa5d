"""Custom exception hierarchy for sqlquery.

All public errors inherit from SQLQueryError so callers can catch the base
class for any sqlquery-specific failure.

The default compile path never raises for malformed filter entries; they are
skipped.  :class:`InvalidFilterError` is only raised when an options record
opts into strict mode.
"""
from __future__ import annotations

from typing import Any


class SQLQueryError(Exception):
    """Base exception for all sqlquery errors."""


class InvalidFilterError(SQLQueryError):
    """Raised in strict mode when one or more filter entries were skipped.

    Args:
        keys: The raw filter keys that could not be compiled.
        reasons: Per-key explanation of why the entry was dropped.
    """

    def __init__(self, keys: list[str], reasons: dict[str, str] | None = None) -> None:
        super().__init__(f"Invalid filter entries: {', '.join(keys)}.")
        self.keys = keys
        self.reasons: dict[str, str] = reasons or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for API layers."""
        return {
            "error": "INVALID_FILTER",
            "message": str(self),
            "details": {"keys": self.keys, "reasons": self.reasons},
        }


class CompilationError(SQLQueryError):
    """Raised when a statement cannot be compiled.

    Args:
        message: Human-readable description.
        clause: The clause being compiled when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class ExtractionError(SQLQueryError):
    """Raised when columns cannot be extracted from a record.

    Args:
        message: Human-readable description.
        record_type: Name of the offending record's type.
    """

    def __init__(self, message: str, record_type: str | None = None) -> None:
        super().__init__(message)
        self.record_type = record_type
