from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from search_wire.errors import InvalidArgumentError, ProtocolError
from search_wire.query import AggregateRequest, Query
from search_wire.search import SearchCommands

_ROW = [b"brand", b"nike"]
_CURSOR_ID = 7


def test_default_dialect_is_applied_without_mutating_query(transport_stub) -> None:
    transport_stub.replies.append([0])
    commands = SearchCommands(transport=transport_stub, default_dialect=2)
    query = Query("hello")

    result = commands.search("idx", query)

    assert transport_stub.calls == [["FT.SEARCH", "idx", "hello", "DIALECT", 2]]
    assert query.dialect_version is None
    assert result.total == 0
    assert result.documents == []


def test_query_dialect_wins_over_default(transport_stub) -> None:
    transport_stub.replies.append([0])
    commands = SearchCommands(transport=transport_stub, default_dialect=2)

    commands.search("idx", Query("hello").dialect(3))

    assert transport_stub.calls[0][-2:] == ["DIALECT", 3]


def test_zero_default_dialect_is_rejected(transport_stub) -> None:
    with pytest.raises(InvalidArgumentError):
        SearchCommands(transport=transport_stub, default_dialect=0)


def test_set_default_dialect_zero_keeps_previous_value(transport_stub) -> None:
    commands = SearchCommands(transport=transport_stub, default_dialect=2)

    with pytest.raises(InvalidArgumentError):
        commands.set_default_dialect(0)

    assert commands.default_dialect == 2  # noqa: PLR2004
    commands.set_default_dialect(None)
    assert commands.default_dialect is None


def test_search_decodes_with_query_flags(transport_stub) -> None:
    transport_stub.replies.append([1, b"doc:1", b"2.5"])
    commands = SearchCommands(transport=transport_stub)

    result = commands.search("idx", Query("hello").no_content().with_scores())

    assert result.documents[0].id == "doc:1"
    assert result.documents[0].score == 2.5  # noqa: PLR2004
    assert not result.has_content


def test_aggregate_with_cursor_returns_cursor_id(transport_stub) -> None:
    transport_stub.replies.append([[1, _ROW], _CURSOR_ID])
    commands = SearchCommands(transport=transport_stub)

    result = commands.aggregate("idx", AggregateRequest().with_cursor(count=10))

    assert result.cursor_id == _CURSOR_ID
    assert result.rows == [{"brand": "nike"}]


def test_aggregate_without_cursor_has_no_cursor_id(transport_stub) -> None:
    transport_stub.replies.append([1, _ROW])
    commands = SearchCommands(transport=transport_stub)

    result = commands.aggregate("idx", AggregateRequest())

    assert result.cursor_id is None


def test_aggregate_with_cursor_rejects_plain_reply(transport_stub) -> None:
    transport_stub.replies.append([1, _ROW, _ROW])
    commands = SearchCommands(transport=transport_stub)

    with pytest.raises(ProtocolError):
        commands.aggregate("idx", AggregateRequest().with_cursor())


def test_cursor_read_and_delete(transport_stub) -> None:
    transport_stub.replies.extend([[[1, _ROW], 0], b"OK"])
    commands = SearchCommands(transport=transport_stub)

    batch = commands.cursor_read("idx", _CURSOR_ID, count=5)
    deleted = commands.cursor_delete("idx", _CURSOR_ID)

    assert batch.cursor_id == 0
    assert deleted
    assert transport_stub.calls == [
        ["FT.CURSOR", "READ", "idx", _CURSOR_ID, "COUNT", 5],
        ["FT.CURSOR", "DEL", "idx", _CURSOR_ID],
    ]


def test_iter_aggregate_reads_until_cursor_is_exhausted(transport_stub) -> None:
    transport_stub.replies.extend([[[2, _ROW], _CURSOR_ID], [[2, [b"brand", b"adidas"]], 0]])
    commands = SearchCommands(transport=transport_stub)
    request = AggregateRequest().group_by("@brand")

    batches = list(commands.iter_aggregate("idx", request, count=1))

    assert [batch.rows for batch in batches] == [[{"brand": "nike"}], [{"brand": "adidas"}]]
    assert transport_stub.calls == [
        ["FT.AGGREGATE", "idx", "*", "GROUPBY", 1, "@brand", "WITHCURSOR", "COUNT", 1],
        ["FT.CURSOR", "READ", "idx", _CURSOR_ID, "COUNT", 1],
    ]
    assert not request.is_with_cursor


def test_iter_aggregate_deletes_cursor_when_stopped_early(transport_stub) -> None:
    transport_stub.replies.extend([[[2, _ROW], _CURSOR_ID], b"OK"])
    commands = SearchCommands(transport=transport_stub)

    batches = commands.iter_aggregate("idx", AggregateRequest().with_cursor(count=1))
    first = next(batches)
    batches.close()

    assert first.cursor_id == _CURSOR_ID
    assert transport_stub.calls[-1] == ["FT.CURSOR", "DEL", "idx", _CURSOR_ID]


@dataclass
class _FailingCursorTransport:
    """Open a cursor, then fail every later command with its sub-command name."""

    calls: list[list[Any]] = field(default_factory=list)
    transport_name: str = "failing"

    def execute(self, args: Any) -> Any:
        self.calls.append(list(args))
        if args[0] == "FT.AGGREGATE":
            return [[2, _ROW], _CURSOR_ID]
        raise ConnectionError(f"connection lost on {args[1]}")


def test_iter_aggregate_propagates_read_failure_without_deleting_cursor() -> None:
    transport = _FailingCursorTransport()
    commands = SearchCommands(transport=transport)

    with pytest.raises(ConnectionError, match="on READ"):
        list(commands.iter_aggregate("idx", AggregateRequest().with_cursor(count=1)))

    assert [call[:2] for call in transport.calls] == [["FT.AGGREGATE", "idx"], ["FT.CURSOR", "READ"]]


def test_info(transport_stub) -> None:
    transport_stub.replies.append([b"index_name", b"idx", b"num_docs", b"10"])
    commands = SearchCommands(transport=transport_stub)

    info = commands.info("idx")

    assert info.index_name == "idx"
    assert info.num_docs == 10  # noqa: PLR2004
    assert transport_stub.calls == [["FT.INFO", "idx"]]


def test_explain_uses_default_dialect(transport_stub) -> None:
    transport_stub.replies.extend([b"plan", [b"line 1", b"line 2"]])
    commands = SearchCommands(transport=transport_stub, default_dialect=2)

    plan = commands.explain("idx", "@title:hello")
    lines = commands.explain_cli("idx", "@title:hello", dialect=3)

    assert plan == "plan"
    assert lines == ["line 1", "line 2"]
    assert transport_stub.calls == [
        ["FT.EXPLAIN", "idx", "@title:hello", "DIALECT", 2],
        ["FT.EXPLAINCLI", "idx", "@title:hello", "DIALECT", 3],
    ]
