from __future__ import annotations

import pytest

from search_wire.domain import (
    CommandName,
    GeoUnit,
    ReplyShape,
    parse_geo_unit,
    reply_shape_from_options,
    search_reply_stride,
)
from search_wire.errors import UnsupportedGeoUnitError


def test_parse_geo_unit_returns_enum_value() -> None:
    assert parse_geo_unit("ft") == GeoUnit.FEET
    assert parse_geo_unit(GeoUnit.METERS) is GeoUnit.METERS


def test_parse_geo_unit_raises_for_unknown_value() -> None:
    with pytest.raises(UnsupportedGeoUnitError, match="Supported values: km, m, ft, mi"):
        parse_geo_unit("furlong")


def test_command_names_are_engine_spelling() -> None:
    assert CommandName.SEARCH == "FT.SEARCH"
    assert CommandName.AGGREGATE == "FT.AGGREGATE"
    assert CommandName.EXPLAIN_CLI == "FT.EXPLAINCLI"


def test_reply_shape_from_options_combines_flags() -> None:
    shape = reply_shape_from_options(no_content=True, with_scores=True)

    assert shape & ReplyShape.NO_CONTENT
    assert shape & ReplyShape.WITH_SCORES
    assert not shape & ReplyShape.WITH_PAYLOADS
    assert not shape & ReplyShape.WITH_CURSOR


def test_reply_shape_from_options_defaults_to_none() -> None:
    assert reply_shape_from_options() == ReplyShape.NONE


@pytest.mark.parametrize(
    ("shape", "expected"),
    [
        (ReplyShape.NONE, 2),
        (ReplyShape.NO_CONTENT, 1),
        (ReplyShape.WITH_SCORES, 3),
        (ReplyShape.WITH_SCORES | ReplyShape.WITH_PAYLOADS, 4),
        (ReplyShape.NO_CONTENT | ReplyShape.WITH_SCORES | ReplyShape.WITH_PAYLOADS, 3),
    ],
)
def test_search_reply_stride_counts_requested_elements(shape: ReplyShape, expected: int) -> None:
    assert search_reply_stride(shape) == expected
