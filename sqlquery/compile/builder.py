"""Core statement compilation logic.

``StatementBuilder`` is the top-level orchestrator.  For each statement kind
it wires a fresh :class:`~sqlquery.compile.context.RuntimeContext` through the
clause-level builders and the filter compiler, then joins the rendered
clauses.  All dialect-specific behaviour is delegated to the injected
``SQLCompiler``.

Clause order
------------
Clauses are rendered in the order they appear in the SQL text.  This is
what keeps the Nth placeholder bound to the Nth argument::

    SELECT  → [WHERE] → [ORDER BY] → [LIMIT] → [OFFSET] → [FOR UPDATE]
    UPDATE  → SET → [WHERE]
    DELETE  → [WHERE]
    INSERT  → VALUES
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlquery.compile.base import CompiledSQL, SQLCompiler
from sqlquery.compile.clause_builders import (
    AssignmentClauseBuilder,
    InsertClauseBuilder,
    LockingClauseBuilder,
    OrderByClauseBuilder,
    PaginationClauseBuilder,
    SelectClauseBuilder,
)
from sqlquery.compile.condition_builder import ConditionBuilder, FilterCompiler
from sqlquery.compile.context import CompilationContext, RuntimeContext
from sqlquery.errors import InvalidFilterError
from sqlquery.schema.options import (
    DeleteOptions,
    FindAllOptions,
    FindOptions,
    UpdateOptions,
)

logger = logging.getLogger(__name__)


class StatementBuilder:
    """Compiles options records and extracted columns to parameterized SQL.

    Args:
        compiler: Dialect-specific compiler instance.
    """

    def __init__(self, compiler: SQLCompiler) -> None:
        self._compiler = compiler

    # ------------------------------------------------------------------
    # SELECT
    # ------------------------------------------------------------------

    def find(self, table: str, options: FindOptions) -> CompiledSQL:
        """Compile ``SELECT <fields> FROM <table> [WHERE …] [FOR UPDATE]``."""
        ctx, runtime = self._start(options.strict)
        parts = [
            SelectClauseBuilder().build(table, options.fields),
            self._where(ctx, runtime, options.filters),
            LockingClauseBuilder(ctx).build(options.for_update, options.for_update_mode),
        ]
        return self._finish(ctx, runtime, parts)

    def find_all(self, table: str, options: FindAllOptions) -> CompiledSQL:
        """Compile a paginated SELECT.

        ``LIMIT`` and ``OFFSET`` are bound even when zero; a negative value
        omits the clause.
        """
        ctx, runtime = self._start(options.strict)
        parts = [
            SelectClauseBuilder().build(table, options.fields),
            self._where(ctx, runtime, options.filters),
            OrderByClauseBuilder().build(options.order_by),
            PaginationClauseBuilder(ctx, runtime).build(options.limit, options.offset),
            LockingClauseBuilder(ctx).build(options.for_update, options.for_update_mode),
        ]
        return self._finish(ctx, runtime, parts)

    # ------------------------------------------------------------------
    # INSERT / UPDATE / DELETE
    # ------------------------------------------------------------------

    def insert(self, table: str, columns: Sequence[tuple[str, Any]]) -> CompiledSQL:
        """Compile an INSERT of one row from ``(column, value)`` pairs."""
        ctx, runtime = self._start()
        parts = [InsertClauseBuilder(ctx, runtime).build(table, columns)]
        return self._finish(ctx, runtime, parts)

    def update_by_id(
        self,
        table: str,
        columns: Sequence[tuple[str, Any]],
        id: Any,
    ) -> CompiledSQL:
        """Compile ``UPDATE <table> SET … WHERE id = ?``.

        ``columns`` keep their given order; no other filter applies.
        """
        ctx, runtime = self._start()
        set_sql = AssignmentClauseBuilder(ctx, runtime).build(columns)
        where = ConditionBuilder(ctx, runtime)
        where.equal("id", id)
        return self._finish(ctx, runtime, [f"UPDATE {table}", set_sql, where.build()])

    def delete_by_id(self, table: str, id: Any) -> CompiledSQL:
        """Compile ``DELETE FROM <table> WHERE id = ?``."""
        ctx, runtime = self._start()
        where = ConditionBuilder(ctx, runtime)
        where.equal("id", id)
        return self._finish(ctx, runtime, [f"DELETE FROM {table}", where.build()])

    def update_with_options(self, table: str, options: UpdateOptions) -> CompiledSQL:
        """Compile an UPDATE from an assignment mapping and filters.

        Assignments are sorted by their rendered text so the ``SET`` list is
        deterministic.
        """
        ctx, runtime = self._start(options.strict)
        assignments = sorted(options.assignments.items(), key=AssignmentClauseBuilder.sort_key)
        parts = [
            f"UPDATE {table}",
            AssignmentClauseBuilder(ctx, runtime).build(assignments),
            self._where(ctx, runtime, options.filters),
        ]
        return self._finish(ctx, runtime, parts)

    def delete_with_options(self, table: str, options: DeleteOptions) -> CompiledSQL:
        """Compile a DELETE driven purely by filters."""
        ctx, runtime = self._start(options.strict)
        parts = [f"DELETE FROM {table}", self._where(ctx, runtime, options.filters)]
        return self._finish(ctx, runtime, parts)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _start(self, strict: bool = False) -> tuple[CompilationContext, RuntimeContext]:
        return CompilationContext(compiler=self._compiler, strict=strict), RuntimeContext()

    @staticmethod
    def _where(
        ctx: CompilationContext,
        runtime: RuntimeContext,
        filters: Mapping[str, Any],
    ) -> str:
        sink = ConditionBuilder(ctx, runtime)
        FilterCompiler(sink, runtime).compile(filters)
        if ctx.strict and runtime.skipped:
            raise InvalidFilterError(sorted(runtime.skipped), dict(runtime.skipped))
        return sink.build()

    @staticmethod
    def _finish(
        ctx: CompilationContext,
        runtime: RuntimeContext,
        parts: list[str],
    ) -> CompiledSQL:
        sql = " ".join(p for p in parts if p)
        logger.debug(
            "Compiled %s statement (%d args): %s",
            ctx.compiler.flavor.value,
            len(runtime.args),
            sql,
        )
        return CompiledSQL(
            sql=sql,
            args=runtime.args,
            flavor=ctx.compiler.flavor,
            skipped=tuple(sorted(runtime.skipped)),
        )
