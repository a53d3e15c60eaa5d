"""sqlquery – Parameterized SQL statements for MySQL, PostgreSQL and SQLite.

Build statements from declarative options; execution stays with your driver.

Public API
----------
``find_query`` / ``find_all_query``
    SELECT with filters, field list, pagination, ordering and row locking.

``insert_query`` / ``update_query`` / ``delete_query``
    Single-row statements from a record (columns picked by a role tag) or
    an id.

``update_with_options_query`` / ``delete_with_options_query``
    UPDATE / DELETE driven by filters and an assignment mapping.

Every function returns a :class:`CompiledSQL` that unpacks into
``(sql, args)``::

    options = (
        FindAllOptions(flavor=Flavor.MYSQL)
        .with_filter("status", "active")
        .with_filter("age.gte", 18)
        .with_limit(10)
        .with_order_by("created_at DESC")
    )
    sql, args = find_all_query("users", options)
    # SELECT * FROM users WHERE age >= ? AND status = ? ORDER BY created_at DESC LIMIT ? OFFSET ?
    # [18, 'active', 10, 0]

Filter syntax
-------------
See :mod:`sqlquery.schema.filters`.  Filters are compiled in ascending key
order; entries with an unknown operator or a value of the wrong shape are
skipped (listed in ``CompiledSQL.skipped``), or rejected with
:class:`InvalidFilterError` when the options are built ``with_strict()``.

Raw fragments
-------------
``with_order_by`` and ``with_for_update`` modes are emitted verbatim.  Never
pass untrusted input to them.
"""

from __future__ import annotations

from typing import Any

from sqlquery.compile.base import CompiledSQL, SQLCompiler
from sqlquery.compile.builder import StatementBuilder
from sqlquery.compile.mysql import MySQLCompiler
from sqlquery.compile.postgres import PostgresCompiler
from sqlquery.compile.registry import CompilerFactory
from sqlquery.compile.sqlite import SQLiteCompiler
from sqlquery.errors import (
    CompilationError,
    ExtractionError,
    InvalidFilterError,
    SQLQueryError,
)
from sqlquery.record.columns import ColumnExtractor, extract_columns
from sqlquery.record.converters import columns_from_sqlalchemy
from sqlquery.schema.filters import FilterKey, FilterOperator, parse_filter_key
from sqlquery.schema.flavor import Flavor, MySQLFlavor, PostgreSQLFlavor, SQLiteFlavor
from sqlquery.schema.options import (
    DeleteOptions,
    FindAllOptions,
    FindOptions,
    UpdateOptions,
)

# ---------------------------------------------------------------------------
# Register built-in compilers with CompilerFactory
# ---------------------------------------------------------------------------

CompilerFactory.register_class(Flavor.MYSQL, MySQLCompiler)
CompilerFactory.register_class(Flavor.POSTGRESQL, PostgresCompiler)
CompilerFactory.register_class(Flavor.SQLITE, SQLiteCompiler)

__all__ = [
    # Statements
    "find_query",
    "find_all_query",
    "insert_query",
    "update_query",
    "delete_query",
    "update_with_options_query",
    "delete_with_options_query",
    # Options
    "Flavor",
    "MySQLFlavor",
    "PostgreSQLFlavor",
    "SQLiteFlavor",
    "FindOptions",
    "FindAllOptions",
    "UpdateOptions",
    "DeleteOptions",
    # Filters
    "FilterKey",
    "FilterOperator",
    "parse_filter_key",
    # Records
    "ColumnExtractor",
    "extract_columns",
    "columns_from_sqlalchemy",
    # Compilation
    "CompiledSQL",
    "SQLCompiler",
    "CompilerFactory",
    "StatementBuilder",
    "MySQLCompiler",
    "PostgresCompiler",
    "SQLiteCompiler",
    # Errors
    "SQLQueryError",
    "InvalidFilterError",
    "CompilationError",
    "ExtractionError",
]


def _builder(flavor: Flavor) -> StatementBuilder:
    return StatementBuilder(CompilerFactory.create(flavor))


def find_query(table_name: str, options: FindOptions) -> CompiledSQL:
    """Build a SELECT statement.

    Example::

        options = (
            FindOptions(flavor=Flavor.MYSQL)
            .with_fields(["id", "name", "email"])
            .with_filter("status", "active")
            .with_filter("age.gte", 18)
        )
        sql, args = find_query("users", options)
        # SELECT id, name, email FROM users WHERE age >= ? AND status = ?

    Args:
        table_name: The table to query.
        options: Flavor, fields, filters and ``FOR UPDATE`` settings.

    Returns:
        The compiled statement.

    Raises:
        InvalidFilterError: If ``options.strict`` is set and a filter entry
            could not be compiled.
    """
    return _builder(options.flavor).find(table_name, options)


def find_all_query(table_name: str, options: FindAllOptions) -> CompiledSQL:
    """Build a paginated SELECT statement.

    Extends :func:`find_query` with ``ORDER BY``, ``LIMIT`` and ``OFFSET``.
    ``LIMIT`` and ``OFFSET`` are always emitted as bound arguments::

        options = (
            FindAllOptions(flavor=Flavor.POSTGRESQL)
            .with_filter("id", 1)
            .with_limit(50)
            .with_offset(10)
            .with_order_by("id asc")
            .with_for_update("SKIP LOCKED")
        )
        sql, args = find_all_query("test_table", options)
        # SELECT * FROM test_table WHERE id = $1 ORDER BY id asc LIMIT $2 OFFSET $3 FOR UPDATE SKIP LOCKED
        # [1, 50, 10]
    """
    return _builder(options.flavor).find_all(table_name, options)


def insert_query(
    flavor: Flavor,
    tag: str,
    table_name: str,
    record: Any,
    extractor: ColumnExtractor | None = None,
) -> CompiledSQL:
    """Build an INSERT statement from a record.

    Example::

        @dataclass
        class Player:
            id: int = field(metadata={"tags": ("insert",)})
            name: str = field(metadata={"tags": ("insert", "update")})

        sql, args = insert_query(Flavor.POSTGRESQL, "insert", "players", Player(1, "R10"))
        # INSERT INTO players (id, name) VALUES ($1, $2)

    Args:
        flavor: The SQL dialect.
        tag: Role tag selecting the record's fields (e.g. ``"insert"``).
        table_name: The table to insert into.
        record: The record holding the values.
        extractor: Column extractor; defaults to
            :func:`~sqlquery.record.columns.extract_columns`.

    Raises:
        ExtractionError: If the extractor cannot handle ``record``.
        CompilationError: If no column is selected by ``tag``.
    """
    columns = (extractor or extract_columns)(record, tag)
    return _builder(flavor).insert(table_name, columns)


def update_query(
    flavor: Flavor,
    tag: str,
    table_name: str,
    id: Any,
    record: Any,
    extractor: ColumnExtractor | None = None,
) -> CompiledSQL:
    """Build ``UPDATE <table> SET … WHERE id = ?`` from a record.

    The ``SET`` list follows the record's field order, restricted to fields
    carrying ``tag``.
    """
    columns = (extractor or extract_columns)(record, tag)
    return _builder(flavor).update_by_id(table_name, columns, id)


def delete_query(flavor: Flavor, table_name: str, id: Any) -> CompiledSQL:
    """Build ``DELETE FROM <table> WHERE id = ?``."""
    return _builder(flavor).delete_by_id(table_name, id)


def update_with_options_query(table_name: str, options: UpdateOptions) -> CompiledSQL:
    """Build an UPDATE from arbitrary assignments and filters.

    Example::

        options = (
            UpdateOptions(flavor=Flavor.POSTGRESQL)
            .with_assignment("name", "Ronaldinho Bruxo")
            .with_assignment("age", 43)
            .with_filter("id", 1)
        )
        sql, args = update_with_options_query("players", options)
        # UPDATE players SET age = $1, name = $2 WHERE id = $3
        # [43, 'Ronaldinho Bruxo', 1]
    """
    return _builder(options.flavor).update_with_options(table_name, options)


def delete_with_options_query(table_name: str, options: DeleteOptions) -> CompiledSQL:
    """Build a DELETE matching every filter in ``options``."""
    return _builder(options.flavor).delete_with_options(table_name, options)
