"""Request builders for search and aggregation commands."""

from search_wire.query import reducers
from search_wire.query.aggregation import (
    AggregateRequest,
    Apply,
    CursorOptions,
    FilterStage,
    GroupBy,
    LimitStage,
    SortBy,
    SortField,
    Stage,
    asc,
    desc,
)
from search_wire.query.fields import FieldName, HighlightTags, Paging, format_number, validate_dialect
from search_wire.query.filters import Filter, GeoFilter, NumericFilter, format_bound
from search_wire.query.query import Query
from search_wire.query.reducers import Reducer

__all__ = [
    "AggregateRequest",
    "Apply",
    "CursorOptions",
    "FieldName",
    "Filter",
    "FilterStage",
    "GeoFilter",
    "GroupBy",
    "HighlightTags",
    "LimitStage",
    "NumericFilter",
    "Paging",
    "Query",
    "Reducer",
    "SortBy",
    "SortField",
    "Stage",
    "asc",
    "desc",
    "format_bound",
    "format_number",
    "reducers",
    "validate_dialect",
]
