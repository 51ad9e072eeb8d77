"""Data models for directory-based route tables.

Immutable frozen dataclasses for discovered routes and the conflicts found
while building a table.  Built once at startup during discovery.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from burrow._types import HandlerFunc, RoutePath
from burrow.routes.methods import HttpMethod


class RouteRegistrar(Protocol):
    """A router with one registration method per supported HTTP method.

    Each method takes the URL pattern (``/product/:id``) and the handler.
    """

    def get(self, path: str, handler: HandlerFunc, /) -> object: ...

    def post(self, path: str, handler: HandlerFunc, /) -> object: ...

    def put(self, path: str, handler: HandlerFunc, /) -> object: ...

    def patch(self, path: str, handler: HandlerFunc, /) -> object: ...

    def delete(self, path: str, handler: HandlerFunc, /) -> object: ...


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A discovered route ready for registration.

    Attributes:
        method: HTTP method implemented by the source file.
        path: URL pattern (e.g., ``/product/:id``).
        source: Filesystem path to the originating method file.
        handler: The callable exported by the method file.

    """

    method: HttpMethod
    path: RoutePath
    source: Path
    handler: HandlerFunc

    def __str__(self) -> str:
        return f"[{self.method.label}] {self.path}"


@dataclass(frozen=True, slots=True)
class RouteConflict:
    """Two method files that resolve to the same fingerprint.

    Attributes:
        method: HTTP method both files implement.
        path: Resolved path of the rejected (second) route.
        first: Source of the route that was kept.
        second: Source of the route that was rejected.

    """

    method: HttpMethod
    path: RoutePath
    first: Path
    second: Path

    def describe(self) -> str:
        """Multi-line description naming both files and the resolved route."""
        return (
            "Dynamic route conflict detected!\n"
            "\n"
            "Files:\n"
            f"→ {self.first}\n"
            f"→ {self.second}\n"
            "\n"
            f"Both resolve to: [{self.method.label}] {self.path}"
        )


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Ordered result of one build.

    Routes appear in discovery order, which is also registration order.
    Conflicts hold the candidates that were dropped in non-strict mode.
    """

    routes: tuple[RouteSpec, ...] = ()
    conflicts: tuple[RouteConflict, ...] = ()

    def __iter__(self) -> Iterator[RouteSpec]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)
