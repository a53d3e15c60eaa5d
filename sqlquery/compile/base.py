"""Compiler abstractions: CompiledSQL and the SQLCompiler ABC.

The Template Method pattern (GoF) is used:
- ``SQLCompiler`` defines the dialect-specific rendering steps.
- ``MySQLCompiler``, ``PostgresCompiler`` and ``SQLiteCompiler`` override
  them (placeholder style, row-locking support).

The statement skeleton itself lives in
:class:`~sqlquery.compile.builder.StatementBuilder`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from sqlquery.schema.flavor import Flavor


@dataclass(frozen=True)
class CompiledSQL:
    """The output of a successful compilation.

    Attributes:
        sql: The compiled SQL string with positional placeholders.
        args: Values for the placeholders; the Nth element binds the Nth
            placeholder in ``sql``.
        flavor: The dialect the statement was compiled for.
        skipped: Raw filter keys that were dropped because their operator
            or value shape was not recognised.

    A ``CompiledSQL`` unpacks like a ``(sql, args)`` pair::

        sql, args = find_query("users", options)
        cursor.execute(sql, args)
    """

    sql: str
    args: list[Any]
    flavor: Flavor
    skipped: tuple[str, ...] = field(default=())

    def __iter__(self) -> Iterator[Any]:
        yield self.sql
        yield self.args


class SQLCompiler(ABC):
    """Abstract base for dialect-specific SQL compilers.

    Subclasses implement the dialect-specific methods; the
    ``StatementBuilder`` uses this interface via the Strategy / Template
    Method patterns.
    """

    @abstractmethod
    def param_placeholder(self, position: int) -> str:
        """Return the SQL placeholder for a positional argument.

        Args:
            position: 1-based index of the argument within the statement.

        Returns:
            Dialect-specific placeholder string.
        """

    @property
    @abstractmethod
    def flavor(self) -> Flavor:
        """Return the flavor this compiler renders."""

    @property
    def supports_row_locking(self) -> bool:
        """Whether ``SELECT ... FOR UPDATE`` is valid for this dialect."""
        return True

    @property
    def offset_requires_limit(self) -> bool:
        """Whether ``OFFSET`` may only follow a ``LIMIT`` clause."""
        return True
