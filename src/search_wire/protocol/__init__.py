"""Wire protocol: command compilation and reply decoding."""

from search_wire.protocol.commands import (
    aggregate_command,
    cursor_delete_command,
    cursor_read_command,
    explain_command,
    info_command,
    search_command,
)
from search_wire.protocol.replies import (
    decode_value,
    pairs_to_dict,
    parse_aggregate_reply,
    parse_cursor_reply,
    parse_explain_cli_reply,
    parse_explain_reply,
    parse_info_reply,
    parse_ok_reply,
    parse_search_reply,
    to_text,
)

__all__ = [
    "aggregate_command",
    "cursor_delete_command",
    "cursor_read_command",
    "decode_value",
    "explain_command",
    "info_command",
    "pairs_to_dict",
    "parse_aggregate_reply",
    "parse_cursor_reply",
    "parse_explain_cli_reply",
    "parse_explain_reply",
    "parse_info_reply",
    "parse_ok_reply",
    "parse_search_reply",
    "search_command",
    "to_text",
]
