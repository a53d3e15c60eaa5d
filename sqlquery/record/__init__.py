"""sqlquery record layer: records → ordered ``(column, value)`` pairs."""
from sqlquery.record.columns import ColumnExtractor, extract_columns
from sqlquery.record.converters import columns_from_sqlalchemy

__all__ = [
    "ColumnExtractor",
    "extract_columns",
    "columns_from_sqlalchemy",
]
