"""Directory-based route discovery and registration.

Walks a ``routes/`` tree, turns directories into URL segments and method
files (``GET.py``, ``POST.py``, ...) into routes, and hands the result to
a router.

Public API::

    from burrow.routes import build_routes

    table = build_routes(router, "routes", prefix="/api", strict=True)
"""

from burrow.routes.discovery import build_routes, discover_routes, register_routes
from burrow.routes.methods import HttpMethod, parse_method_file
from burrow.routes.paths import canonical_path, fingerprint, split_segments
from burrow.routes.types import RouteConflict, RouteRegistrar, RouteSpec, RouteTable

__all__ = [
    "HttpMethod",
    "RouteConflict",
    "RouteRegistrar",
    "RouteSpec",
    "RouteTable",
    "build_routes",
    "canonical_path",
    "discover_routes",
    "fingerprint",
    "parse_method_file",
    "register_routes",
    "split_segments",
]
