"""Domain contracts for search-wire."""

from search_wire.domain.contracts import AggregationResult, CommandArg, Document, InfoResult, SearchResult
from search_wire.domain.enums import (
    CommandName,
    CursorAction,
    GeoUnit,
    ReplyShape,
    parse_geo_unit,
    reply_shape_from_options,
    search_reply_stride,
)

__all__ = [
    "AggregationResult",
    "CommandArg",
    "CommandName",
    "CursorAction",
    "Document",
    "GeoUnit",
    "InfoResult",
    "ReplyShape",
    "SearchResult",
    "parse_geo_unit",
    "reply_shape_from_options",
    "search_reply_stride",
]
