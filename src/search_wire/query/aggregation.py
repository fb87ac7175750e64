"""Aggregation request builder and its compilation into ``FT.AGGREGATE`` arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from search_wire.domain import ReplyShape, reply_shape_from_options
from search_wire.query.fields import FieldName, append_counted, validate_dialect

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from search_wire.domain import CommandArg
    from search_wire.query.reducers import Reducer


@dataclass(frozen=True, slots=True)
class SortField:
    """A property with an explicit sort direction."""

    field: str
    ascending: bool = True

    def append_args(self, args: list[CommandArg]) -> int:
        args.extend((self.field, "ASC" if self.ascending else "DESC"))
        return 2


def asc(field: str) -> SortField:
    return SortField(field=field, ascending=True)


def desc(field: str) -> SortField:
    return SortField(field=field, ascending=False)


@dataclass(frozen=True, slots=True)
class GroupBy:
    """``GROUPBY n @p... REDUCE ...`` pipeline stage."""

    fields: tuple[str, ...]
    reducers: tuple[Reducer, ...] = ()

    def append_args(self, args: list[CommandArg]) -> None:
        args.extend(("GROUPBY", len(self.fields), *self.fields))
        for reducer in self.reducers:
            reducer.append_args(args)


@dataclass(frozen=True, slots=True)
class SortBy:
    """``SORTBY n @p [ASC|DESC]... [MAX m]`` pipeline stage."""

    fields: tuple[str | SortField, ...]
    max: int | None = None

    def append_args(self, args: list[CommandArg]) -> None:
        args.append("SORTBY")
        count_index = len(args)
        count = 0
        for field in self.fields:
            if isinstance(field, SortField):
                count += field.append_args(args)
            else:
                args.append(field)
                count += 1
        args.insert(count_index, count)
        if self.max is not None:
            args.extend(("MAX", self.max))


@dataclass(frozen=True, slots=True)
class Apply:
    """``APPLY expr AS alias`` pipeline stage."""

    expression: str
    alias: str

    def append_args(self, args: list[CommandArg]) -> None:
        args.extend(("APPLY", self.expression, "AS", self.alias))


@dataclass(frozen=True, slots=True)
class FilterStage:
    """``FILTER expr`` pipeline stage."""

    expression: str

    def append_args(self, args: list[CommandArg]) -> None:
        args.extend(("FILTER", self.expression))


@dataclass(frozen=True, slots=True)
class LimitStage:
    """``LIMIT offset count`` pipeline stage."""

    offset: int
    count: int

    def append_args(self, args: list[CommandArg]) -> None:
        args.extend(("LIMIT", self.offset, self.count))


Stage: TypeAlias = GroupBy | SortBy | Apply | FilterStage | LimitStage


@dataclass(frozen=True, slots=True)
class CursorOptions:
    """Cursor batch size and server-side idle timeout."""

    count: int | None = None
    max_idle_ms: int | None = None

    def append_args(self, args: list[CommandArg]) -> None:
        args.append("WITHCURSOR")
        if self.count is not None:
            args.extend(("COUNT", self.count))
        if self.max_idle_ms is not None:
            args.extend(("MAXIDLE", self.max_idle_ms))


class AggregateRequest:
    """Describe one aggregation pipeline.

    Stages are emitted in the order they are added. Like :class:`Query`, the
    request is configured in place by a single caller and then compiled.
    """

    def __init__(self, query_string: str = "*") -> None:
        self.query_string = query_string
        self.stages: list[Stage] = []
        self.is_verbatim = False
        self.load_all = False
        self.loaded_fields: tuple[FieldName, ...] = ()
        self.timeout_ms: int | None = None
        self.cursor: CursorOptions | None = None
        self.params: dict[str, Any] = {}
        self.dialect_version: int | None = None

    def __repr__(self) -> str:
        return f"AggregateRequest({self.query_string!r}, stages={len(self.stages)})"

    def verbatim(self, value: bool = True) -> AggregateRequest:  # noqa: FBT001, FBT002
        self.is_verbatim = value
        return self

    def load(self, *fields: str | FieldName) -> AggregateRequest:
        """Load document fields into the pipeline; no argument loads all of them."""
        if not fields:
            self.load_all = True
            self.loaded_fields = ()
            return self
        self.load_all = False
        self.loaded_fields = tuple(field if isinstance(field, FieldName) else FieldName(field) for field in fields)
        return self

    def group_by(self, fields: str | Sequence[str], *reducers: Reducer) -> AggregateRequest:
        """Group rows by one or more properties and reduce each group."""
        names = (fields,) if isinstance(fields, str) else tuple(fields)
        self.stages.append(GroupBy(fields=names, reducers=reducers))
        return self

    def sort_by(self, *fields: str | SortField, max: int | None = None) -> AggregateRequest:  # noqa: A002
        """Sort rows; ``max`` keeps only the top rows."""
        self.stages.append(SortBy(fields=fields, max=max))
        return self

    def apply(self, expression: str, alias: str) -> AggregateRequest:
        """Compute ``expression`` for each row and store it under ``alias``."""
        self.stages.append(Apply(expression=expression, alias=alias))
        return self

    def filter(self, expression: str) -> AggregateRequest:
        """Drop rows for which ``expression`` is false."""
        self.stages.append(FilterStage(expression=expression))
        return self

    def limit(self, offset: int, count: int) -> AggregateRequest:
        self.stages.append(LimitStage(offset=offset, count=count))
        return self

    def with_cursor(self, count: int | None = None, max_idle_ms: int | None = None) -> AggregateRequest:
        """Return results in batches read through a cursor."""
        self.cursor = CursorOptions(count=count, max_idle_ms=max_idle_ms)
        return self

    def timeout(self, timeout_ms: int) -> AggregateRequest:
        self.timeout_ms = timeout_ms
        return self

    def add_param(self, name: str, value: str | float) -> AggregateRequest:
        self.params[name] = value
        return self

    def add_params(self, params: Mapping[str, str | float]) -> AggregateRequest:
        for name, value in params.items():
            self.add_param(name, value)
        return self

    def dialect(self, dialect: int) -> AggregateRequest:
        """Set the query dialect version; ``0`` is rejected."""
        self.dialect_version = validate_dialect(dialect)
        return self

    @property
    def is_with_cursor(self) -> bool:
        return self.cursor is not None

    @property
    def reply_shape(self) -> ReplyShape:
        return reply_shape_from_options(with_cursor=self.is_with_cursor)

    def get_args(self, default_dialect: int | None = None) -> list[CommandArg]:
        """Compile the request into ``FT.AGGREGATE`` arguments, index excluded.

        Args:
            default_dialect (int | None): Dialect used when none is set on the request.

        Returns:
            list[CommandArg]: Ordered wire tokens.

        """
        args: list[CommandArg] = [self.query_string]

        if self.is_verbatim:
            args.append("VERBATIM")
        if self.load_all:
            args.extend(("LOAD", "*"))
        elif self.loaded_fields:
            append_counted(args, "LOAD", self.loaded_fields)
        if self.timeout_ms is not None:
            args.extend(("TIMEOUT", self.timeout_ms))

        for stage in self.stages:
            stage.append_args(args)

        if self.cursor is not None:
            self.cursor.append_args(args)

        if self.params:
            args.extend(("PARAMS", len(self.params) * 2))
            for name, value in self.params.items():
                args.extend((name, value))

        dialect = self.dialect_version if self.dialect_version is not None else default_dialect
        if dialect is not None and dialect >= 1:
            args.extend(("DIALECT", dialect))

        return args
