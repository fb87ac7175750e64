"""Small value types shared by query and aggregation builders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from search_wire.errors import InvalidDialectError

if TYPE_CHECKING:
    from search_wire.domain import CommandArg

_EXACT_INTEGER_LIMIT = 2**53
_DEFAULT_OFFSET = 0
_DEFAULT_COUNT = 10


def format_number(value: float) -> str:
    """Render a number with full round-trip precision.

    Integral values are rendered without a fractional part and infinities
    use the engine spelling ``inf`` / ``-inf``.

    Args:
        value (float): Number to render.

    Returns:
        str: Decimal representation that parses back to the same float.

    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    number = float(value)
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number.is_integer() and abs(number) < _EXACT_INTEGER_LIMIT:
        return str(int(number))
    return repr(number)


def validate_dialect(dialect: int) -> int:
    """Reject the one dialect value the engine refuses.

    Args:
        dialect (int): Requested dialect.

    Raises:
        InvalidDialectError: If ``dialect`` is zero.

    Returns:
        int: The dialect, unchanged.

    """
    if dialect == 0:
        raise InvalidDialectError(dialect)
    return dialect


@dataclass(frozen=True, slots=True)
class Paging:
    """Offset/count window of a search."""

    offset: int = _DEFAULT_OFFSET
    count: int = _DEFAULT_COUNT

    @property
    def is_default(self) -> bool:
        return self.offset == _DEFAULT_OFFSET and self.count == _DEFAULT_COUNT


@dataclass(frozen=True, slots=True)
class HighlightTags:
    """Strings inserted around highlighted terms."""

    open: str
    close: str


@dataclass(frozen=True, slots=True)
class FieldName:
    """A returned or loaded field, optionally renamed in the reply."""

    name: str
    alias: str | None = None

    def append_args(self, args: list[CommandArg]) -> int:
        """Append the field tokens and return how many were appended.

        Args:
            args (list[CommandArg]): Output token list.

        Returns:
            int: Number of appended tokens.

        """
        args.append(self.name)
        if self.alias is None:
            return 1
        args.extend(("AS", self.alias))
        return 3


def append_counted(args: list[CommandArg], keyword: str, fields: tuple[FieldName, ...]) -> None:
    """Append ``keyword <count> <field tokens...>`` for variable-width fields.

    The count is only known once every field has been emitted, so it is
    inserted after the fact at the position following the keyword.

    Args:
        args (list[CommandArg]): Output token list.
        keyword (str): Clause keyword.
        fields (tuple[FieldName, ...]): Fields to emit.

    """
    args.append(keyword)
    count_index = len(args)
    count = sum(field.append_args(args) for field in fields)
    args.insert(count_index, count)
