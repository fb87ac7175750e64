"""Query compiler and reply decoder for a RediSearch-style wire protocol."""

from search_wire.config import SearchSettings, settings_from_env
from search_wire.domain import AggregationResult, Document, GeoUnit, InfoResult, ReplyShape, SearchResult
from search_wire.errors import InvalidArgumentError, ProtocolError, SearchWireError
from search_wire.query import (
    AggregateRequest,
    FieldName,
    GeoFilter,
    HighlightTags,
    NumericFilter,
    Query,
    asc,
    desc,
    reducers,
)
from search_wire.search import SearchCommands, build_search_commands, build_transport

__all__ = [
    "AggregateRequest",
    "AggregationResult",
    "Document",
    "FieldName",
    "GeoFilter",
    "GeoUnit",
    "HighlightTags",
    "InfoResult",
    "InvalidArgumentError",
    "NumericFilter",
    "ProtocolError",
    "Query",
    "ReplyShape",
    "SearchCommands",
    "SearchResult",
    "SearchSettings",
    "SearchWireError",
    "asc",
    "build_search_commands",
    "build_transport",
    "desc",
    "reducers",
    "settings_from_env",
]
