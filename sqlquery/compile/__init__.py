"""sqlquery compilation layer: options → parameterized SQL."""
from sqlquery.compile.base import CompiledSQL, SQLCompiler
from sqlquery.compile.builder import StatementBuilder
from sqlquery.compile.mysql import MySQLCompiler
from sqlquery.compile.postgres import PostgresCompiler
from sqlquery.compile.sqlite import SQLiteCompiler

__all__ = [
    "CompiledSQL",
    "SQLCompiler",
    "StatementBuilder",
    "MySQLCompiler",
    "PostgresCompiler",
    "SQLiteCompiler",
]
