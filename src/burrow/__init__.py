"""Burrow — directory-based routing for chirp apps.

A folder hierarchy under ``src/routes`` becomes a route table: directories
are URL segments, ``[name]`` directories are path parameters, and method
files (``GET.py``, ``POST.py``, ``PUT.py``, ``PATCH.py``, ``DELETE.py``)
provide the handlers.

Quick start::

    from chirp import App
    from burrow import ChirpRouter, build_routes

    app = App()
    build_routes(ChirpRouter(app), "routes", prefix="/api")
    app.run()

Any router with ``get``/``post``/``put``/``patch``/``delete`` methods taking
``(path, handler)`` works in place of ChirpRouter.

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "BurrowConfig",
    "ChirpRouter",
    "__version__",
    "build_routes",
    "discover_routes",
    "mount_routes",
    "serve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import burrow`` fast while providing a clean top-level API.
    """
    if name == "BurrowConfig":
        from burrow.config import BurrowConfig

        return BurrowConfig

    if name == "build_routes":
        from burrow.routes import build_routes

        return build_routes

    if name == "discover_routes":
        from burrow.routes import discover_routes

        return discover_routes

    if name == "ChirpRouter":
        from burrow.mount import ChirpRouter

        return ChirpRouter

    if name == "mount_routes":
        from burrow.mount import mount_routes

        return mount_routes

    if name == "serve":
        from burrow.app import serve

        return serve

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
