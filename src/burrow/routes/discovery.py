"""Route discovery — walk a routes tree and build a route table.

Conventions::

    src/routes/
      GET.py                    # GET    /
      product/
        GET.py                  # GET    /product
        add-product/
          POST.py               # POST   /product/add-product
        [id]/
          GET.py                # GET    /product/:id
          DELETE.py             # DELETE /product/:id

Directories become path segments and ``[name]`` directories become ``:name``
parameters.  Files other than method files are ignored.

Discovery and registration are separate steps: the router sees nothing
until the whole tree has been walked without a fatal error.
"""

import logging
from pathlib import Path

from burrow._errors import ConfigError, DuplicateRouteError
from burrow._types import RoutePath
from burrow.config import BurrowConfig
from burrow.routes.loader import load_handler
from burrow.routes.methods import HttpMethod, parse_method_file
from burrow.routes.paths import canonical_path
from burrow.routes.registry import RouteRegistry
from burrow.routes.types import RouteRegistrar, RouteSpec, RouteTable

logger = logging.getLogger("burrow.routes")

# Directories never treated as path segments
_SKIP_DIRS: frozenset[str] = frozenset({"__pycache__"})


def build_routes(
    router: RouteRegistrar,
    routes_dir: str = "routes",
    *,
    prefix: str = "",
    strict: bool = False,
    root: str | Path | None = None,
    extensions: tuple[str, ...] = (".py",),
) -> RouteTable:
    """Discover ``<root>/src/<routes_dir>`` and register every route on *router*.

    Args:
        router: Object with ``get``/``post``/``put``/``patch``/``delete``
            methods taking ``(path, handler)``.
        routes_dir: Name of the routes tree under ``src/``.
        prefix: URL prefix for every route; trailing slashes are stripped.
        strict: Make dynamic route conflicts fatal.
        root: Project root. Defaults to the current working directory.
        extensions: File extensions recognised for method files.

    Returns:
        The RouteTable that was registered.

    Raises:
        ConfigError: If the routes directory does not exist.
        RouteError: On a missing handler, a duplicate method file, a module
            that fails to import, or (strict only) a dynamic route conflict.
        OSError: If a directory cannot be read.

    """
    config = BurrowConfig(
        root=Path(root) if root is not None else Path.cwd(),
        routes_dir=routes_dir,
        prefix=prefix,
        strict=strict,
        extensions=extensions,
    )
    table = discover_routes(config)
    register_routes(router, table)
    return table


def discover_routes(config: BurrowConfig) -> RouteTable:
    """Walk ``config.routes_path`` and return the route table.

    Raises:
        ConfigError: If the routes directory does not exist.

    """
    routes_dir = config.routes_path
    if not routes_dir.is_dir():
        msg = f"Routes directory not found: {routes_dir}"
        raise ConfigError(msg)

    registry = RouteRegistry(strict=config.strict)
    _walk_directory(routes_dir, routes_dir, prefix="", config=config, registry=registry)
    return registry.table()


def register_routes(router: RouteRegistrar, table: RouteTable) -> None:
    """Register every route of *table* on *router*, in table order."""
    for route in table:
        register = getattr(router, route.method.value)
        register(route.path, route.handler)
        logger.info("Loaded route: %s", route)


def _walk_directory(
    directory: Path,
    routes_dir: Path,
    *,
    prefix: str,
    config: BurrowConfig,
    registry: RouteRegistry,
) -> None:
    """Recursively walk a directory, claiming a route for each method file.

    Args:
        directory: Current directory being walked.
        routes_dir: Root of the routes tree (for module naming).
        prefix: Raw path prefix accumulated so far, brackets untouched.
        config: Build configuration.
        registry: Fingerprint registry shared by the whole walk.
    """
    claimed: dict[HttpMethod, Path] = {}

    for item in sorted(directory.iterdir()):
        if item.is_dir():
            if item.name in _SKIP_DIRS:
                continue
            _walk_directory(
                item,
                routes_dir,
                prefix=f"{prefix}/{item.name}",
                config=config,
                registry=registry,
            )
            continue

        method = parse_method_file(item.name, config.extensions)
        if method is None:
            continue

        path = canonical_path(prefix, config.prefix)

        if method in claimed:
            msg = (
                f"Duplicate route files for {method.label} {path}:\n"
                f"→ {claimed[method]}\n"
                f"→ {item}\n"
                "Keep exactly one file per method in each directory."
            )
            raise DuplicateRouteError(msg)
        claimed[method] = item

        _process_method_file(item, method, path, routes_dir, registry)


def _process_method_file(
    file: Path,
    method: HttpMethod,
    path: RoutePath,
    routes_dir: Path,
    registry: RouteRegistry,
) -> None:
    """Claim the route for *file* and, if accepted, load its handler."""
    if not registry.claim(method, path, file):
        return

    handler = load_handler(file, method, routes_dir)
    registry.add(RouteSpec(method=method, path=path, source=file, handler=handler))
