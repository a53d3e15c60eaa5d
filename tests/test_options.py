"""Unit tests for the options records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sqlquery import (
    DeleteOptions,
    FindAllOptions,
    FindOptions,
    Flavor,
    UpdateOptions,
    find_query,
)


def test_defaults():
    options = FindAllOptions(flavor=Flavor.POSTGRESQL)
    assert options.fields == ["*"]
    assert options.filters == {}
    assert options.limit == 0
    assert options.offset == 0
    assert options.order_by == ""
    assert options.for_update is False
    assert options.for_update_mode == ""
    assert options.strict is False


def test_with_filter_does_not_touch_receiver():
    base = FindOptions(flavor=Flavor.MYSQL).with_filter("status", "active")
    derived = base.with_filter("age.gte", 18)
    assert base.filters == {"status": "active"}
    assert derived.filters == {"status": "active", "age.gte": 18}


def test_diverging_branches_are_independent():
    root = DeleteOptions(flavor=Flavor.POSTGRESQL)
    left = root.with_filter("a", 1)
    right = root.with_filter("b", 2)
    assert root.filters == {}
    assert left.filters == {"a": 1}
    assert right.filters == {"b": 2}


def test_mappings_are_read_only():
    options = UpdateOptions(flavor=Flavor.POSTGRESQL).with_assignment("name", "x")
    options = options.with_filter("a", 1)
    with pytest.raises(TypeError):
        options.assignments["leak"] = True
    with pytest.raises(TypeError):
        options.filters["c"] = 3
    assert options.filters == {"a": 1}
    assert options.assignments == {"name": "x"}


def test_default_mappings_are_read_only():
    options = UpdateOptions(flavor=Flavor.MYSQL)
    with pytest.raises(TypeError):
        options.filters["a"] = 1
    with pytest.raises(TypeError):
        options.assignments["a"] = 1


def test_constructor_copies_its_input():
    filters = {"a": 1}
    options = DeleteOptions(flavor=Flavor.SQLITE, filters=filters)
    filters["b"] = 2
    assert options.filters == {"a": 1}


def test_model_dump_returns_plain_dicts():
    options = UpdateOptions(flavor=Flavor.MYSQL).with_assignment("a", 1).with_filter("id", 2)
    dumped = options.model_dump()
    assert dumped["assignments"] == {"a": 1}
    assert dumped["filters"] == {"id": 2}
    assert type(dumped["filters"]) is dict


def test_with_fields_copies_the_list():
    fields = ["id", "name"]
    options = FindOptions(flavor=Flavor.MYSQL).with_fields(fields)
    fields.append("email")
    assert options.fields == ["id", "name"]


def test_with_filter_replaces_existing_key():
    options = FindOptions(flavor=Flavor.MYSQL).with_filter("id", 1).with_filter("id", 2)
    assert options.filters == {"id": 2}


def test_flavor_is_kept_across_copies():
    options = FindAllOptions(flavor=Flavor.SQLITE).with_limit(3).with_offset(4).with_order_by("id")
    assert options.flavor is Flavor.SQLITE
    assert (options.limit, options.offset, options.order_by) == (3, 4, "id")


def test_with_for_update():
    options = FindOptions(flavor=Flavor.MYSQL).with_for_update("NOWAIT")
    assert options.for_update is True
    assert options.for_update_mode == "NOWAIT"


def test_with_strict_returns_a_copy():
    base = FindOptions(flavor=Flavor.MYSQL)
    assert base.with_strict().strict is True
    assert base.strict is False


def test_options_are_frozen():
    options = FindOptions(flavor=Flavor.MYSQL)
    with pytest.raises(ValidationError):
        options.flavor = Flavor.SQLITE


def test_unknown_option_is_rejected():
    with pytest.raises(ValidationError):
        FindOptions(flavor=Flavor.MYSQL, limit=10)


def test_unknown_flavor_is_rejected():
    with pytest.raises(ValidationError):
        DeleteOptions(flavor="oracle")


def test_limit_must_be_an_integer():
    with pytest.raises(ValidationError):
        FindAllOptions(flavor=Flavor.MYSQL).with_limit("ten")


def test_derived_options_compile_independently():
    root = FindOptions(flavor=Flavor.POSTGRESQL).with_filter("status", "active")
    adults = root.with_filter("age.gte", 18)
    minors = root.with_filter("age.lt", 18)
    assert find_query("users", adults).sql == "SELECT * FROM users WHERE age >= $1 AND status = $2"
    assert find_query("users", minors).sql == "SELECT * FROM users WHERE age < $1 AND status = $2"
    assert find_query("users", root).sql == "SELECT * FROM users WHERE status = $1"
