"""Adapters implementing the SearchTransport interface."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module
from typing import TYPE_CHECKING, Any

from search_wire.errors import MissingOptionalDependencyError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from search_wire.domain import CommandArg

_REDIS_MISSING_DEP_MSG = "Install the optional dependency group 'redis' to use this transport."


@dataclass(frozen=True, slots=True)
class RedisClientAdapter:
    """Thin adapter around the redis-py client."""

    client: Any
    transport_name: str = "redis"

    @classmethod
    def from_connection(
        cls,
        *,
        url: str,
        timeout_s: float,
    ) -> RedisClientAdapter:
        """Build an adapter from connection settings.

        Args:
            url (str): Server URL, e.g. ``redis://localhost:6379/0``.
            timeout_s (float): Socket timeout in seconds.

        Raises:
            MissingOptionalDependencyError: If `redis` is not installed.

        Returns:
            RedisClientAdapter: Configured adapter.

        """
        try:
            module = import_module("redis")
        except ImportError as exc:
            raise MissingOptionalDependencyError(_REDIS_MISSING_DEP_MSG) from exc

        redis_class = module.Redis
        client = redis_class.from_url(url, socket_timeout=timeout_s, protocol=2)
        return cls(client=client)

    def execute(self, args: Sequence[CommandArg]) -> Any:
        """Execute one command through ``execute_command``.

        Args:
            args (Sequence[CommandArg]): Command tokens, command name first.

        Returns:
            Any: Raw reply tree.

        """
        return self.client.execute_command(*args)
