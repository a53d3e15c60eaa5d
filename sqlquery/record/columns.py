"""Column extraction from records.

The statement builder never inspects records itself.  It asks a
``ColumnExtractor`` for an ordered list of ``(column, value)`` pairs,
selected by a role tag such as ``"insert"`` or ``"update"``.

The default extractor understands dataclasses and pydantic models.  Column
names and role tags are declared on each field::

    @dataclass
    class Player:
        id: int = field(metadata={"db": "id", "tags": ("insert",)})
        name: str = field(metadata={"db": "name", "tags": ("insert", "update")})

    class Player(BaseModel):
        id: int = Field(json_schema_extra={"tags": ["insert"]})
        name: str = Field(json_schema_extra={"tags": ["insert", "update"]})

Rules:

* the column name defaults to the field name; ``"db": "-"`` excludes the
  field entirely;
* an empty tag selects every field, otherwise only fields listing the tag;
* fields are returned in declaration order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import fields, is_dataclass
from typing import Any, Protocol

from pydantic import BaseModel

from sqlquery.errors import ExtractionError

#: Field-metadata key naming the column.
COLUMN_KEY = "db"
#: Field-metadata key listing the role tags.
TAGS_KEY = "tags"
#: Column name that excludes a field.
SKIP_COLUMN = "-"


class ColumnExtractor(Protocol):
    """Maps a record to ordered ``(column, value)`` pairs for a role tag."""

    def __call__(self, record: Any, tag: str | None) -> list[tuple[str, Any]]: ...


def extract_columns(record: Any, tag: str | None = None) -> list[tuple[str, Any]]:
    """Extract tag-selected ``(column, value)`` pairs from ``record``.

    Args:
        record: A dataclass instance or a pydantic model instance.
        tag: Role tag to select fields by; ``None`` or ``""`` selects all.

    Returns:
        Ordered list of ``(column, value)`` pairs.

    Raises:
        ExtractionError: If ``record`` is neither a dataclass instance nor a
            pydantic model.
    """
    if is_dataclass(record) and not isinstance(record, type):
        entries = (
            (f.name, f.metadata, getattr(record, f.name)) for f in fields(record)
        )
    elif isinstance(record, BaseModel):
        entries = (
            (name, _pydantic_extra(info.json_schema_extra), getattr(record, name))
            for name, info in type(record).model_fields.items()
        )
    else:
        raise ExtractionError(
            f"Cannot extract columns from {type(record).__name__}; "
            "expected a dataclass or pydantic model instance.",
            record_type=type(record).__name__,
        )
    return select_columns(entries, tag)


def select_columns(
    entries: Iterable[tuple[str, Mapping[str, Any], Any]],
    tag: str | None,
) -> list[tuple[str, Any]]:
    """Apply the column-naming and tag rules to ``(name, metadata, value)`` triples."""
    columns: list[tuple[str, Any]] = []
    for name, metadata, value in entries:
        column = metadata.get(COLUMN_KEY) or name
        if column == SKIP_COLUMN:
            continue
        if tag and tag not in _tags(metadata.get(TAGS_KEY)):
            continue
        columns.append((column, value))
    return columns


def _pydantic_extra(extra: Any) -> Mapping[str, Any]:
    # Callable json_schema_extra hooks carry no column metadata.
    return extra if isinstance(extra, Mapping) else {}


def _tags(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return tuple(t.strip() for t in raw.split(",") if t.strip())
    return tuple(raw)
