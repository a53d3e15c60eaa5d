"""PostgreSQL dialect compiler."""

from __future__ import annotations

from sqlquery.compile.base import SQLCompiler
from sqlquery.schema.flavor import Flavor


class PostgresCompiler(SQLCompiler):
    """Compiles statements to PostgreSQL-flavoured parameterized SQL.

    Parameter style: ``$1, $2, ...`` numbered across the whole statement,
    compatible with ``asyncpg`` and server-side prepared statements.
    """

    @property
    def flavor(self) -> Flavor:
        return Flavor.POSTGRESQL

    def param_placeholder(self, position: int) -> str:
        return f"${position}"

    @property
    def offset_requires_limit(self) -> bool:
        return False
