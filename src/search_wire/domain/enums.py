"""Typed enumerations and conversions for wire-level choices."""

from __future__ import annotations

from enum import IntFlag, StrEnum, auto

from search_wire.errors import UnsupportedGeoUnitError


class CommandName(StrEnum):
    """Represent the engine commands this package compiles."""

    SEARCH = "FT.SEARCH"
    AGGREGATE = "FT.AGGREGATE"
    CURSOR = "FT.CURSOR"
    INFO = "FT.INFO"
    EXPLAIN = "FT.EXPLAIN"
    EXPLAIN_CLI = "FT.EXPLAINCLI"


class CursorAction(StrEnum):
    """Represent sub-commands of the cursor command."""

    READ = "READ"
    DEL = "DEL"


class GeoUnit(StrEnum):
    """Represent distance units accepted by geo filters."""

    KILOMETERS = "km"
    METERS = "m"
    FEET = "ft"
    MILES = "mi"


class ReplyShape(IntFlag):
    """Represent the request options that change the shape of a reply.

    The engine does not describe its replies, so the decoder relies on
    these flags to know how many elements each document or batch spans.
    """

    NONE = 0
    NO_CONTENT = auto()
    WITH_SCORES = auto()
    WITH_PAYLOADS = auto()
    WITH_CURSOR = auto()


def parse_geo_unit(value: GeoUnit | str) -> GeoUnit:
    """Parse one geo distance unit.

    Args:
        value (GeoUnit | str): Raw unit value.

    Raises:
        UnsupportedGeoUnitError: If the unit is not supported.

    Returns:
        GeoUnit: Parsed unit enum value.

    """
    if isinstance(value, GeoUnit):
        return value
    normalized = value.strip().lower()
    try:
        return GeoUnit(normalized)
    except ValueError as exc:
        supported = ", ".join(item.value for item in GeoUnit)
        raise UnsupportedGeoUnitError(unit=value, supported=supported) from exc


def reply_shape_from_options(
    *,
    no_content: bool = False,
    with_scores: bool = False,
    with_payloads: bool = False,
    with_cursor: bool = False,
) -> ReplyShape:
    """Combine request options into a reply shape flag.

    Args:
        no_content (bool): Whether document fields were suppressed.
        with_scores (bool): Whether per-document scores were requested.
        with_payloads (bool): Whether per-document payloads were requested.
        with_cursor (bool): Whether an aggregation cursor was requested.

    Returns:
        ReplyShape: Combined reply shape flag.

    """
    shape = ReplyShape.NONE
    if no_content:
        shape |= ReplyShape.NO_CONTENT
    if with_scores:
        shape |= ReplyShape.WITH_SCORES
    if with_payloads:
        shape |= ReplyShape.WITH_PAYLOADS
    if with_cursor:
        shape |= ReplyShape.WITH_CURSOR
    return shape


def search_reply_stride(shape: ReplyShape) -> int:
    """Return how many reply elements one search document spans.

    Args:
        shape (ReplyShape): Reply shape flag of the originating query.

    Returns:
        int: Number of elements per document, the id included.

    """
    stride = 1
    if shape & ReplyShape.WITH_SCORES:
        stride += 1
    if shape & ReplyShape.WITH_PAYLOADS:
        stride += 1
    if not shape & ReplyShape.NO_CONTENT:
        stride += 1
    return stride
