"""Unit tests for sqlquery.record.converters.columns_from_sqlalchemy."""

from __future__ import annotations

import pytest
from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from sqlquery import ExtractionError, Flavor, insert_query, update_query
from sqlquery.record.converters import columns_from_sqlalchemy


class Base(DeclarativeBase):
    pass


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(primary_key=True, info={"tags": ["insert"]})
    name: Mapped[str] = mapped_column(String(80), info={"tags": ["insert", "update"]})
    shirt: Mapped[int | None] = mapped_column("shirt_number", info={"tags": ["update"]})
    secret: Mapped[str | None] = mapped_column(info={"db": "-"})


def _player() -> Player:
    return Player(id=10, name="Ronaldinho", shirt=10, secret="x")


def test_insert_tag():
    assert columns_from_sqlalchemy(_player(), "insert") == [("id", 10), ("name", "Ronaldinho")]


def test_update_tag_uses_table_column_name():
    assert columns_from_sqlalchemy(_player(), "update") == [
        ("name", "Ronaldinho"),
        ("shirt_number", 10),
    ]


def test_no_tag_selects_all_but_excluded():
    assert columns_from_sqlalchemy(_player(), None) == [
        ("id", 10),
        ("name", "Ronaldinho"),
        ("shirt_number", 10),
    ]


def test_unmapped_instance_raises():
    with pytest.raises(ExtractionError):
        columns_from_sqlalchemy(object(), "insert")


def test_mapped_class_raises():
    with pytest.raises(ExtractionError):
        columns_from_sqlalchemy(Player, "insert")


def test_insert_and_update_queries():
    player = _player()
    r = insert_query(
        Flavor.POSTGRESQL, "insert", "players", player, extractor=columns_from_sqlalchemy
    )
    assert r.sql == "INSERT INTO players (id, name) VALUES ($1, $2)"
    assert r.args == [10, "Ronaldinho"]

    r = update_query(
        Flavor.MYSQL, "update", "players", player.id, player, extractor=columns_from_sqlalchemy
    )
    assert r.sql == "UPDATE players SET name = ?, shirt_number = ? WHERE id = ?"
    assert r.args == ["Ronaldinho", 10, 10]
