"""Reducers used by ``GROUPBY`` stages of an aggregation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from search_wire.domain import CommandArg


@dataclass(frozen=True, slots=True)
class Reducer:
    """One ``REDUCE`` clause: a function, its arguments and an output alias."""

    function: str
    args: tuple[CommandArg, ...] = ()
    alias: str | None = None

    def alias_as(self, alias: str) -> Reducer:
        """Return a copy of the reducer writing its result to ``alias``."""
        return replace(self, alias=alias)

    def append_args(self, args: list[CommandArg]) -> None:
        args.extend(("REDUCE", self.function, len(self.args), *self.args))
        if self.alias is not None:
            args.extend(("AS", self.alias))


def count() -> Reducer:
    return Reducer("COUNT")


def count_distinct(field: str) -> Reducer:
    return Reducer("COUNT_DISTINCT", (field,))


def count_distinctish(field: str) -> Reducer:
    """Approximate distinct count, cheaper than :func:`count_distinct`."""
    return Reducer("COUNT_DISTINCTISH", (field,))


def sum(field: str) -> Reducer:  # noqa: A001
    return Reducer("SUM", (field,))


def min(field: str) -> Reducer:  # noqa: A001
    return Reducer("MIN", (field,))


def max(field: str) -> Reducer:  # noqa: A001
    return Reducer("MAX", (field,))


def avg(field: str) -> Reducer:
    return Reducer("AVG", (field,))


def tolist(field: str) -> Reducer:
    """Collect every distinct value of ``field`` in the group."""
    return Reducer("TOLIST", (field,))


def quantile(field: str, pct: float) -> Reducer:
    return Reducer("QUANTILE", (field, pct))


def stddev(field: str) -> Reducer:
    return Reducer("STDDEV", (field,))


def first_value(field: str, by: str | None = None, *, ascending: bool = True) -> Reducer:
    """Return the first value of ``field``, optionally ordered by another field.

    Args:
        field (str): Field whose value is returned.
        by (str | None): Field used to order the group.
        ascending (bool): Order direction when ``by`` is given.

    Returns:
        Reducer: Configured reducer.

    """
    if by is None:
        return Reducer("FIRST_VALUE", (field,))
    return Reducer("FIRST_VALUE", (field, "BY", by, "ASC" if ascending else "DESC"))


def random_sample(field: str, size: int) -> Reducer:
    return Reducer("RANDOM_SAMPLE", (field, size))
