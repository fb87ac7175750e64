"""Transport interfaces, adapters and the command execution context."""

from search_wire.search.adapters import RedisClientAdapter
from search_wire.search.client import SearchCommands
from search_wire.search.factory import build_search_commands, build_transport
from search_wire.search.protocols import SearchTransport

__all__ = [
    "RedisClientAdapter",
    "SearchCommands",
    "SearchTransport",
    "build_search_commands",
    "build_transport",
]
