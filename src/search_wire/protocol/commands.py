"""Full command argument lists, command name and index included."""

from __future__ import annotations

from typing import TYPE_CHECKING

from search_wire.domain import CommandName, CursorAction

if TYPE_CHECKING:
    from search_wire.domain import CommandArg
    from search_wire.query import AggregateRequest, Query


def search_command(index: str, query: Query, *, default_dialect: int | None = None) -> list[CommandArg]:
    """Build ``FT.SEARCH index <query args>``.

    Args:
        index (str): Target index name.
        query (Query): Search query.
        default_dialect (int | None): Dialect applied when the query has none.

    Returns:
        list[CommandArg]: Command tokens.

    """
    return [CommandName.SEARCH.value, index, *query.get_args(default_dialect=default_dialect)]


def aggregate_command(
    index: str,
    request: AggregateRequest,
    *,
    default_dialect: int | None = None,
) -> list[CommandArg]:
    """Build ``FT.AGGREGATE index <request args>``.

    Args:
        index (str): Target index name.
        request (AggregateRequest): Aggregation pipeline.
        default_dialect (int | None): Dialect applied when the request has none.

    Returns:
        list[CommandArg]: Command tokens.

    """
    return [CommandName.AGGREGATE.value, index, *request.get_args(default_dialect=default_dialect)]


def cursor_read_command(index: str, cursor_id: int, count: int | None = None) -> list[CommandArg]:
    """Build ``FT.CURSOR READ index cursor_id [COUNT count]``."""
    args: list[CommandArg] = [CommandName.CURSOR.value, CursorAction.READ.value, index, cursor_id]
    if count is not None:
        args.extend(("COUNT", count))
    return args


def cursor_delete_command(index: str, cursor_id: int) -> list[CommandArg]:
    """Build ``FT.CURSOR DEL index cursor_id``."""
    return [CommandName.CURSOR.value, CursorAction.DEL.value, index, cursor_id]


def info_command(index: str) -> list[CommandArg]:
    return [CommandName.INFO.value, index]


def explain_command(
    index: str,
    query_string: str,
    *,
    dialect: int | None = None,
    cli: bool = False,
) -> list[CommandArg]:
    """Build ``FT.EXPLAIN`` (or ``FT.EXPLAINCLI``) for a query string.

    Args:
        index (str): Target index name.
        query_string (str): Query expression to explain.
        dialect (int | None): Dialect used to parse the expression.
        cli (bool): Whether to request the multi-line form.

    Returns:
        list[CommandArg]: Command tokens.

    """
    name = CommandName.EXPLAIN_CLI if cli else CommandName.EXPLAIN
    args: list[CommandArg] = [name.value, index, query_string]
    if dialect is not None and dialect >= 1:
        args.extend(("DIALECT", dialect))
    return args
