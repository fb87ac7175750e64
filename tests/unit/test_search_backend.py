from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from search_wire.config import SearchSettings
from search_wire.errors import MissingConnectionUrlError, MissingOptionalDependencyError
from search_wire.search import adapters
from search_wire.search.adapters import RedisClientAdapter
from search_wire.search.factory import build_search_commands, build_transport

_TIMEOUT = 12


@dataclass
class _RedisClientStub:
    calls: list[tuple[object, ...]]

    def execute_command(self, *args: object) -> object:
        self.calls.append(args)
        return b"OK"


def test_build_transport_with_injected_client() -> None:
    transport = build_transport(client=_RedisClientStub(calls=[]))

    assert transport.transport_name == "redis"


def test_build_transport_requires_url_without_injected_client() -> None:
    with pytest.raises(MissingConnectionUrlError, match="Connection URL is required"):
        build_transport(client=None, url=None)


def test_adapter_execute_unpacks_tokens() -> None:
    client = _RedisClientStub(calls=[])
    adapter = RedisClientAdapter(client=client)

    reply = adapter.execute(["FT.SEARCH", "idx", "hello", "LIMIT", 5, 10])

    assert reply == b"OK"
    assert client.calls == [("FT.SEARCH", "idx", "hello", "LIMIT", 5, 10)]


def test_from_connection_raises_when_dependency_missing(monkeypatch) -> None:
    def _raise_import_error(_module_name: str):
        raise ImportError("missing")

    monkeypatch.setattr(adapters, "import_module", _raise_import_error)

    with pytest.raises(MissingOptionalDependencyError, match="optional dependency group 'redis'"):
        RedisClientAdapter.from_connection(url="redis://localhost:6379/0", timeout_s=30)


def test_from_connection_builds_client_when_dependency_exists(monkeypatch) -> None:
    created: dict[str, object] = {}

    class _Redis:
        @classmethod
        def from_url(cls, url: str, **kwargs: object) -> _RedisClientStub:
            created["url"] = url
            created.update(kwargs)
            return _RedisClientStub(calls=[])

    monkeypatch.setattr(adapters, "import_module", lambda _: SimpleNamespace(Redis=_Redis))

    adapter = RedisClientAdapter.from_connection(url="redis://localhost:6379/1", timeout_s=_TIMEOUT)

    assert adapter.transport_name == "redis"
    assert created["url"] == "redis://localhost:6379/1"
    assert created["socket_timeout"] == _TIMEOUT
    assert created["protocol"] == 2  # noqa: PLR2004


def test_build_search_commands_carries_default_dialect() -> None:
    commands = build_search_commands(SearchSettings(default_dialect=2), client=_RedisClientStub(calls=[]))

    assert commands.default_dialect == 2  # noqa: PLR2004
    assert commands.transport.transport_name == "redis"
