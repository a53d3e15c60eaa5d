"""SQLite dialect compiler."""
from __future__ import annotations

from sqlquery.compile.base import SQLCompiler
from sqlquery.schema.flavor import Flavor


class SQLiteCompiler(SQLCompiler):
    """Compiles statements to SQLite-flavoured parameterized SQL.

    Parameter style: ``?`` – compatible with Python's built-in ``sqlite3``
    positional execution (``cursor.execute(sql, args)``).

    Note: SQLite has no row-level locking; ``FOR UPDATE`` is not emitted.
    """

    @property
    def flavor(self) -> Flavor:
        return Flavor.SQLITE

    def param_placeholder(self, position: int) -> str:
        return "?"

    @property
    def supports_row_locking(self) -> bool:
        return False
