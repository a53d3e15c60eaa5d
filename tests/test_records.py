"""Unit tests for record column extraction and record-driven statements."""

from __future__ import annotations

import pytest

from sqlquery import (
    CompilationError,
    ExtractionError,
    Flavor,
    extract_columns,
    insert_query,
    update_query,
)
from tests.fixtures import AuditedPlayer, Player, PlayerModel

PG = Flavor.POSTGRESQL


def test_dataclass_insert_tag():
    assert extract_columns(Player(id=1, name="R10"), "insert") == [("id", 1), ("name", "R10")]


def test_dataclass_update_tag():
    assert extract_columns(Player(id=1, name="R10"), "update") == [("name", "R10")]


def test_empty_tag_selects_every_field():
    record = AuditedPlayer(id=1, full_name="R10", age=43)
    assert extract_columns(record, None) == [("id", 1), ("name", "R10"), ("age", 43)]
    assert extract_columns(record, "") == extract_columns(record, None)


def test_db_name_override_and_exclusion():
    record = AuditedPlayer(id=1, full_name="R10", age=43, cache_key="k")
    assert extract_columns(record, "update") == [("name", "R10"), ("age", 43)]


def test_comma_separated_tags():
    record = AuditedPlayer(id=7, full_name="X")
    assert extract_columns(record, "insert") == [("id", 7), ("name", "X")]


def test_pydantic_model():
    record = PlayerModel(id=1, name="R10", nickname="Bruxo")
    assert extract_columns(record, "insert") == [("id", 1), ("name", "R10")]
    assert extract_columns(record, None) == [("id", 1), ("name", "R10"), ("nickname", "Bruxo")]


def test_unsupported_record_raises():
    with pytest.raises(ExtractionError) as exc_info:
        extract_columns({"id": 1}, "insert")
    assert exc_info.value.record_type == "dict"


def test_dataclass_type_is_not_a_record():
    with pytest.raises(ExtractionError):
        extract_columns(Player, "insert")


def test_insert_query():
    sql, args = insert_query(PG, "insert", "players", Player(id=1, name="Ronaldinho 10"))
    assert sql == "INSERT INTO players (id, name) VALUES ($1, $2)"
    assert args == [1, "Ronaldinho 10"]


def test_insert_query_mysql():
    r = insert_query(Flavor.MYSQL, "insert", "players", PlayerModel(id=2, name="Kaka"))
    assert r.sql == "INSERT INTO players (id, name) VALUES (?, ?)"
    assert r.args == [2, "Kaka"]


def test_update_query():
    record = Player(id=1, name="Ronaldinho Bruxo")
    sql, args = update_query(PG, "update", "players", record.id, record)
    assert sql == "UPDATE players SET name = $1 WHERE id = $2"
    assert args == ["Ronaldinho Bruxo", 1]


def test_update_query_keeps_field_order():
    record = AuditedPlayer(id=3, full_name="Z", age=20)
    r = update_query(Flavor.SQLITE, "update", "players", 3, record)
    assert r.sql == "UPDATE players SET name = ?, age = ? WHERE id = ?"
    assert r.args == ["Z", 20, 3]


def test_custom_extractor():
    def extractor(record, tag):
        return sorted(record.items())

    r = insert_query(PG, "ignored", "t", {"b": 2, "a": 1}, extractor=extractor)
    assert r.sql == "INSERT INTO t (a, b) VALUES ($1, $2)"
    assert r.args == [1, 2]


def test_tag_selecting_nothing_raises():
    with pytest.raises(CompilationError):
        insert_query(PG, "archive", "players", Player(id=1, name="x"))
    with pytest.raises(CompilationError):
        update_query(PG, "archive", "players", 1, Player(id=1, name="x"))
