"""Column extraction for SQLAlchemy ORM-mapped instances.

:func:`columns_from_sqlalchemy` is a :class:`~sqlquery.record.columns.ColumnExtractor`
that reads column names from the mapper and role tags from each column's
``info`` dict.

Install the optional dependency before using this module::

    pip install "sqlquery[sqlalchemy]"

Example::

    class Player(Base):
        __tablename__ = "players"

        id: Mapped[int] = mapped_column(primary_key=True, info={"tags": ["insert"]})
        name: Mapped[str] = mapped_column(info={"tags": ["insert", "update"]})

    compiled = insert_query(Flavor.POSTGRESQL, "insert", "players", player,
                            extractor=columns_from_sqlalchemy)
"""

from __future__ import annotations

from typing import Any

from sqlquery.errors import ExtractionError
from sqlquery.record.columns import COLUMN_KEY, TAGS_KEY, select_columns


def columns_from_sqlalchemy(record: Any, tag: str | None = None) -> list[tuple[str, Any]]:
    """Extract tag-selected ``(column, value)`` pairs from a mapped instance.

    The column name is the table column's name (which may differ from the
    mapped attribute name).  ``info={"db": "-"}`` excludes a column, and
    ``info={"tags": [...]}`` lists the roles it takes part in.

    Args:
        record: An instance of a SQLAlchemy declaratively-mapped class.
        tag: Role tag to select columns by; ``None`` or ``""`` selects all.

    Returns:
        Ordered list of ``(column, value)`` pairs, in mapper order.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
        ExtractionError: If ``record`` is not a mapped instance.
    """
    try:
        from sqlalchemy import inspect as _inspect
        from sqlalchemy.exc import NoInspectionAvailable
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for columns_from_sqlalchemy(). "
            'Install it with: pip install "sqlquery[sqlalchemy]"'
        ) from exc

    if isinstance(record, type):
        raise ExtractionError(
            f"Expected a mapped instance, got the class {record.__name__}.",
            record_type=record.__name__,
        )
    try:
        mapper = _inspect(record).mapper
    except NoInspectionAvailable as exc:
        raise ExtractionError(
            f"{type(record).__name__} is not a SQLAlchemy mapped instance.",
            record_type=type(record).__name__,
        ) from exc

    entries = []
    for prop in mapper.column_attrs:
        column = prop.columns[0]
        metadata = {
            COLUMN_KEY: column.info.get(COLUMN_KEY, column.name),
            TAGS_KEY: column.info.get(TAGS_KEY),
        }
        entries.append((prop.key, metadata, getattr(record, prop.key)))
    return select_columns(entries, tag)
