"""Clause-level SQL builders.

Each class handles exactly one SQL clause.  Builders that bind values share
the statement's :class:`~sqlquery.compile.context.RuntimeContext`, and the
statement builder calls them in the order their clauses appear in the SQL
text, which keeps placeholder numbering aligned with the argument list.

Classes
-------
SelectClauseBuilder     — ``SELECT <fields> FROM <table>``
OrderByClauseBuilder    — ``ORDER BY <raw expression>``
PaginationClauseBuilder — ``[LIMIT ?] [OFFSET ?]``
LockingClauseBuilder    — ``FOR UPDATE [mode]``
AssignmentClauseBuilder — ``SET <col> = ?, …``
InsertClauseBuilder     — ``INSERT INTO <table> (…) VALUES (…)``
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlquery.compile.context import CompilationContext, RuntimeContext
from sqlquery.errors import CompilationError

logger = logging.getLogger(__name__)


class _BindingClauseBuilder:
    """Base for clause builders that bind positional arguments."""

    def __init__(self, ctx: CompilationContext, runtime: RuntimeContext) -> None:
        self._ctx = ctx
        self._runtime = runtime

    def _placeholder(self, value: Any) -> str:
        position = self._runtime.add_value(value)
        return self._ctx.compiler.param_placeholder(position)


class SelectClauseBuilder:
    """Builds the ``SELECT … FROM …`` prefix.  An empty field list selects ``*``."""

    def build(self, table: str, fields: Sequence[str]) -> str:
        columns = ", ".join(fields) if fields else "*"
        return f"SELECT {columns} FROM {table}"


class OrderByClauseBuilder:
    """Builds ``ORDER BY`` from a raw expression.

    The expression is emitted verbatim; callers must not forward untrusted
    input here.
    """

    def build(self, order_by: str) -> str:
        return f"ORDER BY {order_by}" if order_by else ""


class PaginationClauseBuilder(_BindingClauseBuilder):
    """Builds ``LIMIT ? OFFSET ?``.

    Zero is bound like any other value; a negative value omits its clause.
    Dialects whose ``OFFSET`` needs a preceding ``LIMIT`` (MySQL, SQLite)
    drop the offset along with the limit.
    """

    def build(self, limit: int, offset: int) -> str:
        parts: list[str] = []
        if limit >= 0:
            parts.append(f"LIMIT {self._placeholder(limit)}")
        if offset >= 0 and (parts or not self._ctx.compiler.offset_requires_limit):
            parts.append(f"OFFSET {self._placeholder(offset)}")
        return " ".join(parts)


class LockingClauseBuilder:
    """Builds the ``FOR UPDATE`` row-locking suffix.

    ``mode`` (e.g. ``NOWAIT``, ``SKIP LOCKED``) is appended verbatim.  On
    dialects without row locking the clause is dropped.
    """

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx

    def build(self, for_update: bool, mode: str = "") -> str:
        if not for_update:
            return ""
        if not self._ctx.compiler.supports_row_locking:
            logger.warning(
                "Dropping FOR UPDATE clause: %s has no row-level locking.",
                self._ctx.compiler.flavor.value,
            )
            return ""
        return f"FOR UPDATE {mode}" if mode else "FOR UPDATE"


class AssignmentClauseBuilder(_BindingClauseBuilder):
    """Builds the ``SET`` list of an UPDATE statement."""

    def build(self, assignments: Sequence[tuple[str, Any]]) -> str:
        if not assignments:
            raise CompilationError("UPDATE requires at least one assignment.", clause="SET")
        parts = [f"{column} = {self._placeholder(value)}" for column, value in assignments]
        return f"SET {', '.join(parts)}"

    @staticmethod
    def sort_key(assignment: tuple[str, Any]) -> str:
        """Sort assignments by their rendered text, placeholder excluded."""
        column, _ = assignment
        return f"{column} = "


class InsertClauseBuilder(_BindingClauseBuilder):
    """Builds ``INSERT INTO <table> (<cols>) VALUES (<placeholders>)``."""

    def build(self, table: str, columns: Sequence[tuple[str, Any]]) -> str:
        if not columns:
            raise CompilationError(
                f"INSERT INTO {table} requires at least one column.", clause="VALUES"
            )
        names = ", ".join(column for column, _ in columns)
        values = ", ".join(self._placeholder(value) for _, value in columns)
        return f"INSERT INTO {table} ({names}) VALUES ({values})"
