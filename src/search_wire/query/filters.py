"""Numeric and geo filters appended to search queries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from search_wire.domain import GeoUnit, parse_geo_unit
from search_wire.query.fields import format_number

if TYPE_CHECKING:
    from search_wire.domain import CommandArg


def format_bound(value: float, *, exclusive: bool) -> str:
    """Render one numeric range bound.

    Infinite bounds are always inclusive, whatever ``exclusive`` says.

    Args:
        value (float): Bound value.
        exclusive (bool): Whether the bound excludes ``value`` itself.

    Returns:
        str: Bound token, prefixed with ``(`` when exclusive.

    """
    rendered = format_number(value)
    if not exclusive or (isinstance(value, float) and math.isinf(value)):
        return rendered
    return f"({rendered}"


@dataclass(frozen=True, slots=True)
class NumericFilter:
    """Range filter on a numeric field.

    ``minimum <= maximum`` is the caller's responsibility.
    """

    property: str
    minimum: float
    maximum: float
    exclusive_min: bool = False
    exclusive_max: bool = False

    def append_args(self, args: list[CommandArg]) -> None:
        """Append ``FILTER property min max`` to ``args``."""
        args.extend(
            (
                "FILTER",
                self.property,
                format_bound(self.minimum, exclusive=self.exclusive_min),
                format_bound(self.maximum, exclusive=self.exclusive_max),
            ),
        )


@dataclass(frozen=True, slots=True)
class GeoFilter:
    """Radius filter on a geo field."""

    property: str
    longitude: float
    latitude: float
    radius: float
    unit: GeoUnit = GeoUnit.KILOMETERS

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", parse_geo_unit(self.unit))

    def append_args(self, args: list[CommandArg]) -> None:
        """Append ``GEOFILTER property lon lat radius unit`` to ``args``."""
        args.extend(
            (
                "GEOFILTER",
                self.property,
                self.longitude,
                self.latitude,
                self.radius,
                self.unit.value,
            ),
        )


Filter: TypeAlias = NumericFilter | GeoFilter
