"""Pydantic models for the options consumed by the statement assemblers.

Every options record is an immutable value: its filter and assignment
mappings are read-only views.  The ``with_*`` methods never modify the
receiver; they return a new record holding fresh copies of those mappings,
so handles derived from a shared origin can be extended independently::

    from sqlquery import FindAllOptions, Flavor

    base = FindAllOptions(flavor=Flavor.POSTGRESQL).with_filter("status", "active")
    adults = base.with_filter("age.gte", 18).with_limit(10)
    minors = base.with_filter("age.lt", 18)
    # ``base`` still only filters on status.

Filter keys follow the mini-language documented in
:mod:`sqlquery.schema.filters`.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from sqlquery.schema.flavor import Flavor

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class _BaseOptions(BaseModel):
    """Fields and copy helpers shared by every options record.

    Attributes:
        flavor: The SQL dialect the statement is compiled for.
        filters: WHERE conditions keyed by filter key (see
            :mod:`sqlquery.schema.filters`).
        strict: When ``True``, filter entries that would otherwise be
            skipped raise :class:`~sqlquery.errors.InvalidFilterError`.
    """

    model_config = _FROZEN

    flavor: Flavor
    filters: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    strict: bool = False

    @field_validator("filters")
    @classmethod
    def freeze_filters(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("filters")
    def dump_filters(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def _replace(self, **changes: Any) -> Self:
        # Re-run validation so the copy gets its own containers.
        return type(self)(**{**dict(self), **changes})

    def with_filter(self, field: str, value: Any) -> Self:
        """Return a copy with an additional filter condition.

        Supports operators via dot notation (e.g. ``"age.gte"``,
        ``"status.in"``).  Setting an existing key replaces its value.
        """
        return self._replace(filters={**self.filters, field: value})

    def with_strict(self, strict: bool = True) -> Self:
        """Return a copy that raises on malformed filter entries."""
        return self._replace(strict=strict)


class FindOptions(_BaseOptions):
    """Configures :func:`~sqlquery.find_query`.

    Attributes:
        fields: Column names to select (defaults to ``["*"]``).
        for_update: Whether to append a ``FOR UPDATE`` row-locking clause.
        for_update_mode: Optional raw text appended after ``FOR UPDATE``
            (e.g. ``"NOWAIT"``, ``"SKIP LOCKED"``).  It is emitted verbatim,
            so it must never carry untrusted input.
    """

    fields: list[str] = Field(default_factory=lambda: ["*"])
    for_update: bool = False
    for_update_mode: str = ""

    def with_fields(self, fields: list[str]) -> Self:
        """Return a copy selecting ``fields`` instead of ``*``."""
        return self._replace(fields=list(fields))

    def with_for_update(self, mode: str = "") -> Self:
        """Return a copy with ``FOR UPDATE`` enabled.

        Pass an empty ``mode`` for the default locking behaviour.
        """
        return self._replace(for_update=True, for_update_mode=mode)


class FindAllOptions(FindOptions):
    """Configures :func:`~sqlquery.find_all_query`.

    Attributes:
        limit: Maximum number of rows to return.  Negative omits ``LIMIT``.
        offset: Number of rows to skip.  Negative omits ``OFFSET``.
        order_by: Raw ``ORDER BY`` expression (e.g. ``"created_at DESC"``).
            It is emitted verbatim, so it must never carry untrusted input.
    """

    limit: int = 0
    offset: int = 0
    order_by: str = ""

    def with_limit(self, limit: int) -> Self:
        return self._replace(limit=limit)

    def with_offset(self, offset: int) -> Self:
        return self._replace(offset=offset)

    def with_order_by(self, order_by: str) -> Self:
        """Return a copy with the given raw ``ORDER BY`` expression."""
        return self._replace(order_by=order_by)


class UpdateOptions(_BaseOptions):
    """Configures :func:`~sqlquery.update_with_options_query`.

    Attributes:
        assignments: Column/value pairs for the ``SET`` list.
    """

    assignments: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("assignments")
    @classmethod
    def freeze_assignments(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("assignments")
    def dump_assignments(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def with_assignment(self, field: str, value: Any) -> Self:
        """Return a copy with an additional ``SET`` assignment."""
        return self._replace(assignments={**self.assignments, field: value})


class DeleteOptions(_BaseOptions):
    """Configures :func:`~sqlquery.delete_with_options_query`."""
