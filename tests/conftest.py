"""Shared test fixtures for burrow."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

GET_HANDLER = (
    "async def get(request):\n"
    "    return 'ok'\n"
)


class RecordingRouter:
    """Router double that records every registration in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, Any]] = []

    def _record(self, method: str, path: str, handler: Any) -> None:
        self.calls.append((method, path, handler))

    def get(self, path: str, handler: Any) -> None:
        self._record("get", path, handler)

    def post(self, path: str, handler: Any) -> None:
        self._record("post", path, handler)

    def put(self, path: str, handler: Any) -> None:
        self._record("put", path, handler)

    def patch(self, path: str, handler: Any) -> None:
        self._record("patch", path, handler)

    def delete(self, path: str, handler: Any) -> None:
        self._record("delete", path, handler)

    @property
    def registrations(self) -> list[tuple[str, str]]:
        return [(method, path) for method, path, _ in self.calls]

    def lookup(self, method: str, path: str) -> Any:
        """Return the handler registered for an exact ``method path``."""
        for m, p, handler in self.calls:
            if (m, p) == (method, path):
                return handler
        return None


def registered(table: Any) -> tuple[tuple[str, str], ...]:
    """The ``(method, path)`` pairs of a RouteTable, in registration order."""
    return tuple((route.method.value, route.path) for route in table)


def write_route(routes_dir: Path, name: str, content: str = GET_HANDLER) -> Path:
    """Write a method file (``name`` relative to *routes_dir*) and return its path."""
    p = routes_dir / name
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content)
    return p


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root with an empty ``src/routes`` tree."""
    (tmp_path / "src" / "routes").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def routes_dir(project: Path) -> Path:
    """The ``src/routes`` directory of :func:`project`."""
    return project / "src" / "routes"


@pytest.fixture
def router() -> RecordingRouter:
    return RecordingRouter()


@pytest.fixture(autouse=True)
def _drop_route_modules() -> Any:
    """Forget route modules imported by a test so the next one reloads them."""
    yield
    for name in [n for n in sys.modules if n == "burrow_routes" or n.startswith("burrow_routes.")]:
        del sys.modules[name]
