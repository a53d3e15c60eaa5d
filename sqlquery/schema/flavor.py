"""Supported SQL flavors.

The flavor only selects how the compiled statement is rendered (placeholder
style and dialect-specific clause support).  It carries no other logic; the
matching compiler is looked up through
:class:`~sqlquery.compile.registry.CompilerFactory`.
"""
from __future__ import annotations

from enum import Enum


class Flavor(str, Enum):
    """The SQL dialect used for query compilation."""

    MYSQL = "mysql"
    POSTGRESQL = "postgres"
    SQLITE = "sqlite"


#: Flavor aliases kept for readability at call sites.
MySQLFlavor = Flavor.MYSQL
PostgreSQLFlavor = Flavor.POSTGRESQL
SQLiteFlavor = Flavor.SQLITE
