"""Decoders turning untyped engine replies into typed results.

Reply arrays do not describe themselves: a search reply only carries
scores when scores were requested, an aggregation reply is wrapped with a
cursor id only when a cursor was requested. Every decoder therefore takes
the :class:`ReplyShape` of the originating request instead of guessing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from search_wire.domain import (
    AggregationResult,
    Document,
    InfoResult,
    ReplyShape,
    SearchResult,
    search_reply_stride,
)
from search_wire.errors import ProtocolError

_CURSOR_REPLY_LENGTH = 2


def to_text(value: Any) -> Any:
    """Decode a bulk string reply, leaving other values untouched."""
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def decode_value(value: Any) -> Any:
    """Decode bulk strings recursively inside nested replies."""
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, list | tuple):
        return [decode_value(item) for item in value]
    return value


def _is_array(value: Any) -> bool:
    return isinstance(value, list | tuple)


def _to_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise ProtocolError(f"Expected an integer {what}, got {value!r}.")
    if isinstance(value, int):
        return value
    try:
        return int(to_text(value))
    except (TypeError, ValueError) as exc:
        raise ProtocolError(f"Expected an integer {what}, got {value!r}.") from exc


def _to_float(value: Any, what: str) -> float:
    try:
        return float(to_text(value))
    except (TypeError, ValueError) as exc:
        raise ProtocolError(f"Expected a numeric {what}, got {value!r}.") from exc


def pairs_to_dict(items: Any) -> dict[str, Any]:
    """Convert a flat ``[key, value, key, value...]`` array to a mapping.

    Args:
        items (Any): Flat array reply, ``None`` for an empty mapping.

    Raises:
        ProtocolError: If ``items`` is not an array of even length.

    Returns:
        dict[str, Any]: Decoded mapping, in reply order.

    """
    if items is None:
        return {}
    if isinstance(items, Mapping):
        return {str(to_text(key)): decode_value(value) for key, value in items.items()}
    if not _is_array(items) or len(items) % 2:
        raise ProtocolError(f"Expected a flat key/value array, got {items!r}.")
    return {str(to_text(items[pos])): decode_value(items[pos + 1]) for pos in range(0, len(items), 2)}


def parse_search_reply(reply: Any, shape: ReplyShape) -> SearchResult:
    """Decode an ``FT.SEARCH`` reply.

    Each document spans the id, then the score, payload and field array
    when the query requested them, in that order.

    Args:
        reply (Any): Raw reply: ``[total, id, (score), (payload), (fields), ...]``.
        shape (ReplyShape): Reply shape of the originating query.

    Raises:
        ProtocolError: If the reply length does not fit the document stride.

    Returns:
        SearchResult: Decoded result.

    """
    if not _is_array(reply) or not reply:
        raise ProtocolError(f"Expected a non-empty search reply array, got {reply!r}.")

    total = _to_int(reply[0], "result total")
    body = reply[1:]
    stride = search_reply_stride(shape)
    if len(body) % stride:
        raise ProtocolError(
            f"Search reply has {len(body)} elements after the total, not a multiple of {stride}.",
        )

    with_scores = bool(shape & ReplyShape.WITH_SCORES)
    with_payloads = bool(shape & ReplyShape.WITH_PAYLOADS)
    has_content = not shape & ReplyShape.NO_CONTENT

    documents: list[Document] = []
    for start in range(0, len(body), stride):
        pos = start
        doc_id = str(to_text(body[pos]))
        pos += 1
        score = None
        if with_scores:
            score = _to_float(body[pos], "document score")
            pos += 1
        payload = None
        if with_payloads:
            payload = to_text(body[pos])
            pos += 1
        fields = pairs_to_dict(body[pos]) if has_content else {}
        documents.append(Document(id=doc_id, score=score, payload=payload, fields=fields))

    return SearchResult(total=total, documents=documents, has_content=has_content)


def _parse_rows(reply: Any, cursor_id: int | None) -> AggregationResult:
    if not _is_array(reply) or not reply:
        raise ProtocolError(f"Expected a non-empty aggregation reply array, got {reply!r}.")
    total = _to_int(reply[0], "aggregation total")
    rows = [pairs_to_dict(row) for row in reply[1:]]
    return AggregationResult(total=total, rows=rows, cursor_id=cursor_id)


def parse_cursor_reply(reply: Any) -> AggregationResult:
    """Decode a ``[rows, cursor_id]`` reply from a cursor aggregation or read.

    Args:
        reply (Any): Raw two-element reply.

    Raises:
        ProtocolError: If the reply is not a two-element array with an integer cursor.

    Returns:
        AggregationResult: Decoded batch carrying the next cursor id.

    """
    if not _is_array(reply) or len(reply) != _CURSOR_REPLY_LENGTH:
        raise ProtocolError(f"Expected a [rows, cursor_id] cursor reply, got {reply!r}.")
    cursor_id = _to_int(reply[1], "cursor id")
    return _parse_rows(reply[0], cursor_id=cursor_id)


def parse_aggregate_reply(reply: Any, shape: ReplyShape) -> AggregationResult:
    """Decode an ``FT.AGGREGATE`` reply.

    Args:
        reply (Any): Raw reply.
        shape (ReplyShape): Reply shape of the originating request.

    Returns:
        AggregationResult: Decoded result, with a cursor id only in cursor mode.

    """
    if shape & ReplyShape.WITH_CURSOR:
        return parse_cursor_reply(reply)
    return _parse_rows(reply, cursor_id=None)


def parse_ok_reply(reply: Any) -> bool:
    if reply is True:
        return True
    return to_text(reply) == "OK"


def parse_info_reply(reply: Any) -> InfoResult:
    """Decode an ``FT.INFO`` reply, leaving values loosely typed."""
    return InfoResult(values=pairs_to_dict(reply))


def parse_explain_reply(reply: Any) -> str:
    return str(to_text(reply))


def parse_explain_cli_reply(reply: Any) -> list[str]:
    if not _is_array(reply):
        raise ProtocolError(f"Expected an array explain reply, got {reply!r}.")
    return [str(to_text(line)) for line in reply]
