"""Fingerprint registry — first-discovered-wins conflict resolution.

One registry lives for exactly one build.  It maps each fingerprint to the
source of the first route that claimed it; later claims are conflicts.
"""

import logging
from pathlib import Path

from burrow._errors import RouteConflictError
from burrow._types import Fingerprint, RoutePath
from burrow.routes.methods import HttpMethod
from burrow.routes.paths import fingerprint
from burrow.routes.types import RouteConflict, RouteSpec, RouteTable

logger = logging.getLogger("burrow.routes")


class RouteRegistry:
    """Accumulates accepted routes and conflicts during a walk.

    Entries are append-only: a fingerprint, once claimed, keeps its first
    source for the rest of the build.

    Args:
        strict: Raise on the first conflict instead of warning.

    """

    __slots__ = ("_conflicts", "_routes", "_seen", "_strict")

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict
        self._seen: dict[Fingerprint, Path] = {}
        self._routes: list[RouteSpec] = []
        self._conflicts: list[RouteConflict] = []

    def claim(self, method: HttpMethod, path: RoutePath, source: Path) -> bool:
        """Claim the fingerprint of ``method path`` for *source*.

        Returns True when the fingerprint was free.  On a conflict, raises in
        strict mode, otherwise logs a warning, records the conflict and
        returns False.

        Raises:
            RouteConflictError: On a conflict when strict.

        """
        key = fingerprint(method.value, path)
        previous = self._seen.get(key)
        if previous is None:
            self._seen[key] = source
            return True

        conflict = RouteConflict(method=method, path=path, first=previous, second=source)
        if self._strict:
            raise RouteConflictError(conflict.describe())

        logger.warning("\n%s\n", conflict.describe())
        self._conflicts.append(conflict)
        return False

    def add(self, route: RouteSpec) -> None:
        """Append an accepted route in discovery order."""
        self._routes.append(route)

    def table(self) -> RouteTable:
        """Freeze the accumulated state into a RouteTable."""
        return RouteTable(routes=tuple(self._routes), conflicts=tuple(self._conflicts))
