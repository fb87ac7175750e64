"""Factory helpers to instantiate the configured transport and commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from search_wire.errors import MissingConnectionUrlError
from search_wire.search.adapters import RedisClientAdapter
from search_wire.search.client import SearchCommands

if TYPE_CHECKING:
    from search_wire.config import SearchSettings
    from search_wire.search.protocols import SearchTransport


def build_transport(
    *,
    client: object | None = None,
    url: str | None = None,
    timeout_s: float = 30.0,
) -> SearchTransport:
    """Build a transport adapter from user options.

    Args:
        client (object | None): Optional pre-configured redis client.
        url (str | None): Optional server URL when no client is injected.
        timeout_s (float): Socket timeout in seconds.

    Raises:
        MissingConnectionUrlError: If `url` is missing when `client` is absent.

    Returns:
        SearchTransport: Transport adapter.

    """
    if client is not None:
        return RedisClientAdapter(client=client)
    if url is None:
        raise MissingConnectionUrlError
    return RedisClientAdapter.from_connection(url=url, timeout_s=timeout_s)


def build_search_commands(
    settings: SearchSettings,
    *,
    client: object | None = None,
) -> SearchCommands:
    """Wire settings, transport and default dialect together.

    Args:
        settings (SearchSettings): Connection and dialect settings.
        client (object | None): Optional pre-configured redis client.

    Returns:
        SearchCommands: Ready-to-use command executor.

    """
    transport = build_transport(client=client, url=settings.url, timeout_s=settings.timeout_s)
    return SearchCommands(transport=transport, default_dialect=settings.default_dialect)
