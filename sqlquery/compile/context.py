"""Compilation context value objects.

``CompilationContext`` packages the static configuration of one compile run
(dialect compiler + strictness).  ``RuntimeContext`` accumulates the
positional arguments and skipped filter keys as clauses are rendered.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlquery.compile.base import SQLCompiler


@dataclass(frozen=True)
class CompilationContext:
    """Immutable context for a single compilation run.

    Attributes:
        compiler: Dialect-specific SQL compiler instance.
        strict: Raise instead of skipping malformed filter entries.
    """

    compiler: SQLCompiler
    strict: bool = False


@dataclass
class RuntimeContext:
    """Accumulates positional arguments during a single compilation run.

    Clauses must be rendered in the order they appear in the final SQL
    text: each call to :meth:`add_value` claims the next position, so the
    argument list and the placeholders stay aligned left to right.
    """

    args: list[Any] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)

    def add_value(self, value: Any) -> int:
        """Store an argument and return its 1-based position."""
        self.args.append(value)
        return len(self.args)

    def skip(self, key: str, reason: str) -> None:
        """Record a filter entry that produced no predicate."""
        self.skipped[key] = reason
