from __future__ import annotations

import math

import pytest

from search_wire.domain import GeoUnit
from search_wire.errors import InvalidArgumentError, UnsupportedGeoUnitError
from search_wire.query import GeoFilter, NumericFilter, format_bound, format_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (0.0, "0"),
        (100, "100"),
        (-7.0, "-7"),
        (1.5, "1.5"),
        (0.1, "0.1"),
        (1e20, "1e+20"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
    ],
)
def test_format_number_renders_round_trip_decimal(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_format_number_keeps_full_precision() -> None:
    value = 0.1 + 0.2

    assert float(format_number(value)) == value


def test_format_bound_prefixes_exclusive_finite_bounds() -> None:
    assert format_bound(0, exclusive=True) == "(0"
    assert format_bound(2.25, exclusive=True) == "(2.25"
    assert format_bound(2.25, exclusive=False) == "2.25"


def test_format_bound_accepts_integers_beyond_float_range() -> None:
    huge = 10**400

    assert format_bound(huge, exclusive=True) == f"({huge}"
    assert format_bound(-huge, exclusive=False) == str(-huge)


def test_format_bound_keeps_infinite_bounds_inclusive() -> None:
    assert format_bound(math.inf, exclusive=True) == "inf"
    assert format_bound(-math.inf, exclusive=True) == "-inf"


def test_numeric_filter_appends_filter_clause() -> None:
    args: list[object] = ["*"]

    NumericFilter("price", 0, 100, exclusive_min=True).append_args(args)

    assert args == ["*", "FILTER", "price", "(0", "100"]


def test_numeric_filter_does_not_check_bound_order() -> None:
    args: list[object] = []

    NumericFilter("price", 10, 1, exclusive_max=True).append_args(args)

    assert args == ["FILTER", "price", "10", "(1"]


def test_numeric_filter_with_open_range() -> None:
    args: list[object] = []

    NumericFilter("age", -math.inf, math.inf, exclusive_min=True, exclusive_max=True).append_args(args)

    assert args == ["FILTER", "age", "-inf", "inf"]


def test_geo_filter_appends_all_five_values_in_order() -> None:
    args: list[object] = []

    GeoFilter("location", -122.41, 37.77, 5, "mi").append_args(args)

    assert args == ["GEOFILTER", "location", -122.41, 37.77, 5, "mi"]


def test_geo_filter_normalizes_unit() -> None:
    geo = GeoFilter("location", 1.0, 2.0, 3.0, " KM ")

    assert geo.unit is GeoUnit.KILOMETERS


def test_geo_filter_rejects_unknown_unit() -> None:
    with pytest.raises(UnsupportedGeoUnitError, match="Unsupported geo unit 'yd'"):
        GeoFilter("location", 1.0, 2.0, 3.0, "yd")

    with pytest.raises(InvalidArgumentError):
        GeoFilter("location", 1.0, 2.0, 3.0, "parsec")
