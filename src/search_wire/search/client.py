"""Execution context running compiled commands through a transport."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

from search_wire.protocol import (
    aggregate_command,
    cursor_delete_command,
    cursor_read_command,
    explain_command,
    info_command,
    parse_aggregate_reply,
    parse_cursor_reply,
    parse_explain_cli_reply,
    parse_explain_reply,
    parse_info_reply,
    parse_ok_reply,
    parse_search_reply,
    search_command,
)
from search_wire.query import validate_dialect

if TYPE_CHECKING:
    from collections.abc import Iterator

    from search_wire.domain import AggregationResult, InfoResult, SearchResult
    from search_wire.query import AggregateRequest, Query
    from search_wire.search.protocols import SearchTransport

_logger = logging.getLogger(__name__)


class SearchCommands:
    """Compile requests, execute them and decode the replies.

    The default dialect lives here rather than on the requests: it is handed
    to the compiler on each call and never written back into a request.

    Args:
        transport: Transport executing command tokens.
        default_dialect: Dialect applied to requests that set none.

    """

    def __init__(self, transport: SearchTransport, default_dialect: int | None = None) -> None:
        self.transport = transport
        self.default_dialect: int | None = None
        self.set_default_dialect(default_dialect)

    def set_default_dialect(self, default_dialect: int | None) -> None:
        """Set or clear the default dialect; ``0`` is rejected."""
        if default_dialect is not None:
            validate_dialect(default_dialect)
        self.default_dialect = default_dialect

    def search(self, index: str, query: Query) -> SearchResult:
        """Run ``FT.SEARCH`` and decode the matching documents.

        Args:
            index (str): Target index name.
            query (Query): Search query.

        Returns:
            SearchResult: Decoded documents and total.

        """
        args = search_command(index, query, default_dialect=self.default_dialect)
        _logger.debug("Executing %s on index '%s' with %d arguments.", args[0], index, len(args))
        reply = self.transport.execute(args)
        return parse_search_reply(reply, query.reply_shape)

    def aggregate(self, index: str, request: AggregateRequest) -> AggregationResult:
        """Run ``FT.AGGREGATE`` and decode the first batch of rows.

        Args:
            index (str): Target index name.
            request (AggregateRequest): Aggregation pipeline.

        Returns:
            AggregationResult: Decoded rows, with a cursor id in cursor mode.

        """
        args = aggregate_command(index, request, default_dialect=self.default_dialect)
        _logger.debug("Executing %s on index '%s' with %d arguments.", args[0], index, len(args))
        reply = self.transport.execute(args)
        return parse_aggregate_reply(reply, request.reply_shape)

    def cursor_read(self, index: str, cursor_id: int, count: int | None = None) -> AggregationResult:
        """Read the next batch of a cursor opened by :meth:`aggregate`.

        Args:
            index (str): Index the cursor was opened on.
            cursor_id (int): Cursor handle from the previous batch.
            count (int | None): Batch size overriding the cursor's own.

        Returns:
            AggregationResult: Next batch; ``cursor_id`` is ``0`` once exhausted.

        """
        reply = self.transport.execute(cursor_read_command(index, cursor_id, count))
        return parse_cursor_reply(reply)

    def cursor_delete(self, index: str, cursor_id: int) -> bool:
        """Release a cursor before it is exhausted."""
        _logger.debug("Deleting cursor %d on index '%s'.", cursor_id, index)
        return parse_ok_reply(self.transport.execute(cursor_delete_command(index, cursor_id)))

    def iter_aggregate(
        self,
        index: str,
        request: AggregateRequest,
        count: int | None = None,
    ) -> Iterator[AggregationResult]:
        """Yield every batch of a cursor aggregation.

        A request without cursor options is run on a copy switched to cursor
        mode. When the caller stops iterating early the cursor is deleted.

        Args:
            index (str): Target index name.
            request (AggregateRequest): Aggregation pipeline.
            count (int | None): Batch size for subsequent reads.

        Yields:
            AggregationResult: One batch per engine round trip.

        """
        if not request.is_with_cursor:
            request = copy.copy(request).with_cursor(count=count)

        batch = self.aggregate(index, request)
        try:
            yield batch
            while batch.has_more:
                batch = self.cursor_read(index, batch.cursor_id or 0, count)
                yield batch
        except GeneratorExit:
            if batch.has_more:
                self.cursor_delete(index, batch.cursor_id or 0)
            raise
        _logger.debug("Cursor on index '%s' exhausted.", index)

    def info(self, index: str) -> InfoResult:
        return parse_info_reply(self.transport.execute(info_command(index)))

    def explain(self, index: str, query_string: str, dialect: int | None = None) -> str:
        """Return the engine's execution plan for a query string."""
        effective = dialect if dialect is not None else self.default_dialect
        reply = self.transport.execute(explain_command(index, query_string, dialect=effective))
        return parse_explain_reply(reply)

    def explain_cli(self, index: str, query_string: str, dialect: int | None = None) -> list[str]:
        """Return the execution plan as a list of display lines."""
        effective = dialect if dialect is not None else self.default_dialect
        reply = self.transport.execute(explain_command(index, query_string, dialect=effective, cli=True))
        return parse_explain_cli_reply(reply)
