"""Shared pytest fixtures for sqlquery unit and integration tests."""
from __future__ import annotations

import pytest

from sqlquery import CompilerFactory, Flavor, StatementBuilder

ALL_FLAVORS = [Flavor.MYSQL, Flavor.POSTGRESQL, Flavor.SQLITE]


@pytest.fixture(params=ALL_FLAVORS, ids=lambda f: f.value)
def flavor(request: pytest.FixtureRequest) -> Flavor:
    """Every supported flavor, one test run each."""
    return request.param


@pytest.fixture()
def pg() -> StatementBuilder:
    return StatementBuilder(CompilerFactory.create(Flavor.POSTGRESQL))


@pytest.fixture()
def mysql() -> StatementBuilder:
    return StatementBuilder(CompilerFactory.create(Flavor.MYSQL))


@pytest.fixture()
def sqlite() -> StatementBuilder:
    return StatementBuilder(CompilerFactory.create(Flavor.SQLITE))
