"""MySQL dialect compiler."""

from __future__ import annotations

from sqlquery.compile.base import SQLCompiler
from sqlquery.schema.flavor import Flavor


class MySQLCompiler(SQLCompiler):
    """Compiles statements to MySQL-flavoured parameterized SQL.

    Parameter style: ``?`` positional markers.  ``FOR UPDATE`` with
    ``NOWAIT`` / ``SKIP LOCKED`` is supported from MySQL 8.0.
    """

    @property
    def flavor(self) -> Flavor:
        return Flavor.MYSQL

    def param_placeholder(self, position: int) -> str:
        return "?"
