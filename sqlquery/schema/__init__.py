"""sqlquery schema layer: flavors, filter keys and options records."""
from sqlquery.schema.filters import FilterKey, FilterOperator, parse_filter_key
from sqlquery.schema.flavor import Flavor
from sqlquery.schema.options import (
    DeleteOptions,
    FindAllOptions,
    FindOptions,
    UpdateOptions,
)

__all__ = [
    "Flavor",
    "FilterKey",
    "FilterOperator",
    "parse_filter_key",
    "FindOptions",
    "FindAllOptions",
    "UpdateOptions",
    "DeleteOptions",
]
