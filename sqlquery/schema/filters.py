"""Filter key mini-language.

A filter mapping is keyed by strings of the form ``field`` or
``field.operator``::

    "field"          - Equality (field = value, or IS NULL when value is None)
    "field.in"       - IN clause (value must be a comma-separated string)
    "field.notin"    - NOT IN clause (value must be a comma-separated string)
    "field.not"      - Not equal (field <> value)
    "field.gt"       - Greater than (field > value)
    "field.gte"      - Greater or equal (field >= value)
    "field.lt"       - Less than (field < value)
    "field.lte"      - Less or equal (field <= value)
    "field.like"     - LIKE pattern matching
    "field.null"     - IS NULL / IS NOT NULL (value must be a bool)

Only the segment right after the first dot is read as the operator name;
any further dot-separated segments are ignored.  Operator names outside the
set above parse to ``operator=None`` and the entry is skipped by the
compiler.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

#: Separator between the column name and the operator suffix.
SEPARATOR = "."


class FilterOperator(str, Enum):
    """Closed set of filter operators.

    ``EQ`` has no suffix in the key; every other member's value is the suffix
    that selects it.
    """

    EQ = ""
    IN = "in"
    NOT_IN = "notin"
    NOT = "not"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"
    NULL = "null"


#: Operators that take a single bound value and map to a binary comparison.
COMPARISON_OPERATORS: frozenset[FilterOperator] = frozenset(
    {
        FilterOperator.NOT,
        FilterOperator.GT,
        FilterOperator.GTE,
        FilterOperator.LT,
        FilterOperator.LTE,
        FilterOperator.LIKE,
    }
)

#: Operators whose value is a comma-separated list of tokens.
MEMBERSHIP_OPERATORS: frozenset[FilterOperator] = frozenset(
    {FilterOperator.IN, FilterOperator.NOT_IN}
)

_SUFFIXES: dict[str, FilterOperator] = {
    op.value: op for op in FilterOperator if op is not FilterOperator.EQ
}


@dataclass(frozen=True)
class FilterKey:
    """A parsed filter key.

    Attributes:
        raw: The key exactly as it appeared in the filter mapping.
        column: The column name (the segment before the first dot).
        operator: The parsed operator, or ``None`` when the suffix is not
            a recognised operator name.
        suffix: The raw operator suffix (empty for a bare key).
    """

    raw: str
    column: str
    operator: FilterOperator | None
    suffix: str = ""


def parse_filter_key(key: str) -> FilterKey:
    """Split a filter key into its column and operator.

    Args:
        key: A filter key such as ``"age"`` or ``"age.gte"``.

    Returns:
        The parsed :class:`FilterKey`.  ``operator`` is ``None`` when the
        suffix names no known operator.
    """
    if SEPARATOR not in key:
        return FilterKey(raw=key, column=key, operator=FilterOperator.EQ)

    segments = key.split(SEPARATOR)
    column, suffix = segments[0], segments[1]
    return FilterKey(raw=key, column=column, operator=_SUFFIXES.get(suffix), suffix=suffix)


def parse_in(value: str) -> list[str]:
    """Split a comma-separated value into IN-list tokens.

    ``"1,2,3"`` becomes ``["1", "2", "3"]``.  Tokens are kept as untyped
    strings, in order, without trimming.
    """
    return value.split(",")
