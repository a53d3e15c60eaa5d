"""Test fixtures: sample records, DDL and placeholder helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from sqlquery.schema.flavor import Flavor

_NUMBERED = re.compile(r"\$(\d+)")

PLAYERS_DDL = """
CREATE TABLE players (
    id     INTEGER PRIMARY KEY,
    name   TEXT    NOT NULL,
    age    INTEGER,
    status TEXT,
    email  TEXT
);
"""


@dataclass
class Player:
    """Mirrors a row of ``players``; ``id`` is only written on insert."""

    id: int = field(metadata={"db": "id", "tags": ("insert",)})
    name: str = field(metadata={"db": "name", "tags": ("insert", "update")})


@dataclass
class AuditedPlayer:
    id: int = field(metadata={"tags": "insert"})
    full_name: str = field(metadata={"db": "name", "tags": "insert,update"})
    age: int | None = field(default=None, metadata={"tags": ("update",)})
    cache_key: str = field(default="", metadata={"db": "-"})


class PlayerModel(BaseModel):
    id: int = Field(json_schema_extra={"tags": ["insert"]})
    name: str = Field(json_schema_extra={"db": "name", "tags": ["insert", "update"]})
    nickname: str | None = None


def placeholders(sql: str, flavor: Flavor) -> list[str]:
    """Return the placeholders of ``sql`` in left-to-right order."""
    if flavor is Flavor.POSTGRESQL:
        return _NUMBERED.findall(sql)
    return re.findall(r"\?", sql)


def assert_aligned(sql: str, args: list, flavor: Flavor) -> None:
    """Assert the placeholder count matches ``args`` and ``$N`` runs 1..N."""
    found = placeholders(sql, flavor)
    assert len(found) == len(args), (sql, args)
    if flavor is Flavor.POSTGRESQL:
        assert [int(n) for n in found] == list(range(1, len(args) + 1)), sql
