from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

_TEST_LAYERS = ("unit", "integration", "end2end")


@dataclass
class TransportStub:
    """Record executed commands and answer them with canned replies, in order."""

    replies: list[Any] = field(default_factory=list)
    calls: list[list[Any]] = field(default_factory=list)
    transport_name: str = "stub"

    def execute(self, args: Any) -> Any:
        self.calls.append(list(args))
        return self.replies.pop(0)


@pytest.fixture
def transport_stub() -> TransportStub:
    return TransportStub()


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            p = Path(str(item.fspath)).resolve()
        except Exception:  # noqa: S112
            continue

        if p == target_dir or target_dir in p.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    for marker in _TEST_LAYERS:
        _mark_tests_by_directory(config, items, marker)
