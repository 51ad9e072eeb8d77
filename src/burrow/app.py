"""Application entry points — show_routes, dev, serve.

Each mode loads a BurrowConfig (file config merged with keyword
overrides), builds the route table, and either prints it or serves it
through a chirp App.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING

from burrow.config_loader import load_config
from burrow.mount import ChirpRouter
from burrow.routes.discovery import discover_routes, register_routes

if TYPE_CHECKING:
    from chirp import App

    from burrow.config import BurrowConfig
    from burrow.routes.types import RouteTable


def _create_chirp_app(config: BurrowConfig, *, debug: bool = False) -> App:
    """Create a chirp App bound to the configured host and port."""
    from chirp import App, AppConfig

    app_config = AppConfig(
        debug=debug,
        host=config.host,
        port=config.port,
        workers=config.workers,
        static_dir=None,
    )
    return App(app_config)


def _build_table(config: BurrowConfig) -> tuple[RouteTable, float]:
    """Discover the routes tree, returning the table and elapsed milliseconds."""
    t0 = time.perf_counter()
    table = discover_routes(config)
    return table, (time.perf_counter() - t0) * 1000


def show_routes(root: str | Path = ".", **kwargs: object) -> RouteTable:
    """Build the route table without serving it and print the listing.

    Args:
        root: Path to the project root directory.
        **kwargs: Override BurrowConfig fields.

    """
    from burrow.banner import print_banner

    config = load_config(Path(root), **kwargs)
    table, load_ms = _build_table(config)
    print_banner(config, table, mode="routes", load_ms=load_ms)
    return table


def dev(root: str | Path = ".", **kwargs: object) -> None:
    """Serve the routes tree with chirp's development server (auto-reload).

    Args:
        root: Path to the project root directory.
        **kwargs: Override BurrowConfig fields.

    """
    from burrow.banner import print_banner

    config = load_config(Path(root), **kwargs)
    table, load_ms = _build_table(config)

    app = _create_chirp_app(config, debug=True)
    register_routes(ChirpRouter(app), table)

    print_banner(config, table, mode="dev", load_ms=load_ms)
    app.run()


def serve(root: str | Path = ".", **kwargs: object) -> None:
    """Run the routes tree as a live Pounce server in production.

    The route table is built once; every worker shares the frozen chirp app.

    Args:
        root: Path to the project root directory.
        **kwargs: Override BurrowConfig fields.

    """
    from burrow.banner import print_banner

    config = load_config(Path(root), **kwargs)
    table, load_ms = _build_table(config)

    app = _create_chirp_app(config, debug=False)
    register_routes(ChirpRouter(app), table)

    print_banner(config, table, mode="serve", load_ms=load_ms)

    from pounce.config import ServerConfig
    from pounce.server import Server

    server_config = ServerConfig(
        host=config.host,
        port=config.port,
        workers=config.workers,  # 0 = auto-detect via Pounce
    )
    server = Server(server_config, app)
    server.run()
