"""chirp integration — register a routes tree on a chirp App.

chirp writes path parameters as ``{name}``; burrow route tables use
``:name``.  ChirpRouter converts between the two and otherwise passes
handlers through untouched, so a method file's handler follows chirp's
conventions::

    # src/routes/product/[id]/GET.py
    async def get(request, id):
        return f"product {id}"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from burrow.routes.discovery import build_routes
from burrow.routes.methods import HttpMethod
from burrow.routes.paths import split_segments

if TYPE_CHECKING:
    from chirp import App

    from burrow._types import HandlerFunc
    from burrow.routes.types import RouteTable


def to_chirp_path(path: str) -> str:
    """Rewrite ``:name`` segments to chirp's ``{name}`` syntax.

    >>> to_chirp_path("/product/:id/reviews")
    '/product/{id}/reviews'
    """
    parts = [
        "{" + seg.param_name + "}" if seg.param_name else seg.value
        for seg in split_segments(path)
    ]
    return "/" + "/".join(parts)


class ChirpRouter:
    """RouteRegistrar adapter over a chirp ``App``.

    Usage::

        app = App()
        build_routes(ChirpRouter(app), "routes")
    """

    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    def _add(self, method: HttpMethod, path: str, handler: HandlerFunc) -> None:
        self.app.route(to_chirp_path(path), methods=[method.label])(handler)

    def get(self, path: str, handler: HandlerFunc) -> None:
        self._add(HttpMethod.GET, path, handler)

    def post(self, path: str, handler: HandlerFunc) -> None:
        self._add(HttpMethod.POST, path, handler)

    def put(self, path: str, handler: HandlerFunc) -> None:
        self._add(HttpMethod.PUT, path, handler)

    def patch(self, path: str, handler: HandlerFunc) -> None:
        self._add(HttpMethod.PATCH, path, handler)

    def delete(self, path: str, handler: HandlerFunc) -> None:
        self._add(HttpMethod.DELETE, path, handler)


def mount_routes(app: App, routes_dir: str = "routes", **options: object) -> RouteTable:
    """Build the routes tree onto *app*. Accepts :func:`build_routes` options."""
    return build_routes(ChirpRouter(app), routes_dir, **options)  # type: ignore[arg-type]
