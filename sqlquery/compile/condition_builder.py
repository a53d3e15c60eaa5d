"""WHERE condition compilers.

``ConditionBuilder`` is the condition sink shared by SELECT, UPDATE and
DELETE statements: every statement kind exposes the same predicate
vocabulary, so one class serves all three.  ``FilterCompiler`` turns a filter
mapping (see :mod:`sqlquery.schema.filters`) into predicates on that sink.

Both classes receive a :class:`~sqlquery.compile.context.CompilationContext`
(static config) and a :class:`~sqlquery.compile.context.RuntimeContext`
(per-statement argument state).
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from sqlquery.compile.context import CompilationContext, RuntimeContext
from sqlquery.schema.filters import (
    COMPARISON_OPERATORS,
    MEMBERSHIP_OPERATORS,
    FilterKey,
    FilterOperator,
    parse_filter_key,
    parse_in,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Condition sink
# ---------------------------------------------------------------------------


class ConditionBuilder:
    """Collects AND-ed predicates for a WHERE clause.

    Every method appends one predicate and binds its values through the
    shared runtime context, so placeholders are numbered in the order the
    predicates are added.

    Args:
        ctx: Static compilation context.
        runtime: Shared argument accumulator for this statement.
    """

    def __init__(self, ctx: CompilationContext, runtime: RuntimeContext) -> None:
        self._ctx = ctx
        self._runtime = runtime
        self._conditions: list[str] = []

    # ------------------------------------------------------------------
    # Predicate vocabulary
    # ------------------------------------------------------------------

    def equal(self, column: str, value: Any) -> None:
        self._binary(column, "=", value)

    def not_equal(self, column: str, value: Any) -> None:
        self._binary(column, "<>", value)

    def greater_than(self, column: str, value: Any) -> None:
        self._binary(column, ">", value)

    def greater_equal_than(self, column: str, value: Any) -> None:
        self._binary(column, ">=", value)

    def less_than(self, column: str, value: Any) -> None:
        self._binary(column, "<", value)

    def less_equal_than(self, column: str, value: Any) -> None:
        self._binary(column, "<=", value)

    def like(self, column: str, value: Any) -> None:
        self._binary(column, "LIKE", value)

    def in_(self, column: str, values: list[Any]) -> None:
        self._conditions.append(f"{column} IN ({self._placeholders(values)})")

    def not_in(self, column: str, values: list[Any]) -> None:
        self._conditions.append(f"{column} NOT IN ({self._placeholders(values)})")

    def is_null(self, column: str) -> None:
        self._conditions.append(f"{column} IS NULL")

    def is_not_null(self, column: str) -> None:
        self._conditions.append(f"{column} IS NOT NULL")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def conditions(self) -> list[str]:
        """The predicates added so far, in order."""
        return list(self._conditions)

    def build(self) -> str:
        """Return the ``WHERE`` clause, or an empty string when no predicate was added."""
        if not self._conditions:
            return ""
        return f"WHERE {' AND '.join(self._conditions)}"

    def _binary(self, column: str, op: str, value: Any) -> None:
        self._conditions.append(f"{column} {op} {self._placeholder(value)}")

    def _placeholder(self, value: Any) -> str:
        position = self._runtime.add_value(value)
        return self._ctx.compiler.param_placeholder(position)

    def _placeholders(self, values: list[Any]) -> str:
        return ", ".join(self._placeholder(v) for v in values)


# ---------------------------------------------------------------------------
# Filter compiler
# ---------------------------------------------------------------------------


class FilterCompiler:
    """Applies a filter mapping to a :class:`ConditionBuilder`.

    Entries are compiled in ascending order of their raw key, which makes the
    emitted SQL deterministic regardless of the mapping's insertion order.
    Entries with an unknown operator or a value of the wrong shape are
    skipped and recorded on the runtime context; nothing is raised here.

    Every :class:`~sqlquery.schema.filters.FilterOperator` member has exactly
    one handler in ``handlers``.

    Args:
        sink: The condition sink for the statement being compiled.
        runtime: Shared argument accumulator (receives skipped keys).
    """

    _COMPARISONS: dict[FilterOperator, Callable[[ConditionBuilder, str, Any], None]] = {
        FilterOperator.NOT: ConditionBuilder.not_equal,
        FilterOperator.GT: ConditionBuilder.greater_than,
        FilterOperator.GTE: ConditionBuilder.greater_equal_than,
        FilterOperator.LT: ConditionBuilder.less_than,
        FilterOperator.LTE: ConditionBuilder.less_equal_than,
        FilterOperator.LIKE: ConditionBuilder.like,
    }

    def __init__(self, sink: ConditionBuilder, runtime: RuntimeContext) -> None:
        self._sink = sink
        self._runtime = runtime
        self.handlers: dict[FilterOperator, Callable[[FilterKey, Any], bool]] = {
            FilterOperator.EQ: self._equal,
            FilterOperator.NULL: self._null,
            **{op: self._comparison for op in COMPARISON_OPERATORS},
            **{op: self._membership for op in MEMBERSHIP_OPERATORS},
        }

    def compile(self, filters: Mapping[str, Any]) -> None:
        """Compile every entry of ``filters`` onto the sink."""
        for key in sorted(filters):
            self.apply(parse_filter_key(key), filters[key])

    def apply(self, key: FilterKey, value: Any) -> bool:
        """Compile one filter entry.

        Returns:
            ``True`` when a predicate was added, ``False`` when the entry was
            skipped.
        """
        if key.operator is None:
            return self._skip(key, f"unknown operator '{key.suffix}'")
        return self.handlers[key.operator](key, value)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _equal(self, key: FilterKey, value: Any) -> bool:
        if value is None:
            self._sink.is_null(key.column)
        else:
            self._sink.equal(key.column, value)
        return True

    def _comparison(self, key: FilterKey, value: Any) -> bool:
        self._COMPARISONS[key.operator](self._sink, key.column, value)
        return True

    def _membership(self, key: FilterKey, value: Any) -> bool:
        if not isinstance(value, str):
            return self._skip(
                key,
                f"'{key.suffix}' expects a comma-separated string, got {type(value).__name__}",
            )
        values = parse_in(value)
        if key.operator is FilterOperator.IN:
            self._sink.in_(key.column, values)
        else:
            self._sink.not_in(key.column, values)
        return True

    def _null(self, key: FilterKey, value: Any) -> bool:
        if not isinstance(value, bool):
            return self._skip(key, f"'null' expects a bool, got {type(value).__name__}")
        # Rendered against the raw key, suffix included.
        if value:
            self._sink.is_null(key.raw)
        else:
            self._sink.is_not_null(key.raw)
        return True

    def _skip(self, key: FilterKey, reason: str) -> bool:
        logger.debug("Skipping filter %r: %s", key.raw, reason)
        self._runtime.skip(key.raw, reason)
        return False
