"""Protocols for the transport that executes compiled commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from search_wire.domain import CommandArg


class SearchTransport(Protocol):
    """Define the single operation the compiler and decoder rely on."""

    transport_name: str

    def execute(self, args: Sequence[CommandArg]) -> Any:
        """Execute one command.

        Args:
            args (Sequence[CommandArg]): Command tokens, command name first.

        Returns:
            Any: Raw reply tree (bulk strings, integers and nested arrays).

        """
