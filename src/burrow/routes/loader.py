"""Handler loading — import a method file and pick out its handler.

A method file provides its handler in one of two ways::

    # routes/product/[id]/GET.py
    async def get(request, id):      # named after the method file
        ...

    # routes/product/[id]/DELETE.py
    async def handler(request, id):  # generic fallback
        ...

The method-named function wins when both are defined.
"""

import importlib.util
import sys
from importlib.machinery import BYTECODE_SUFFIXES, SourceFileLoader, SourcelessFileLoader
from pathlib import Path
from types import ModuleType

from burrow._errors import MissingHandlerError, RouteLoadError
from burrow._types import HandlerFunc
from burrow.routes.methods import HttpMethod

# Fallback export name used when the method-named function is absent
_HANDLER_NAME = "handler"

# Dotted namespace route modules are registered under in sys.modules
_MODULE_NAMESPACE = "burrow_routes"


def load_handler(file: Path, method: HttpMethod, routes_dir: Path) -> HandlerFunc:
    """Import *file* and return the handler it exports for *method*.

    Raises:
        RouteLoadError: If importing the module raises.
        MissingHandlerError: If the module defines neither the method-named
            function nor ``handler``.

    """
    module = _load_module(file, routes_dir)

    for name in (method.value, _HANDLER_NAME):
        func = getattr(module, name, None)
        if func is not None and callable(func):
            return func

    msg = (
        f"No handler exported in {file}: "
        f"define '{method.value}(request, ...)' or '{_HANDLER_NAME}(request, ...)'."
    )
    raise MissingHandlerError(msg)


def _module_name(file: Path, routes_dir: Path) -> str:
    """Dotted module name: routes/product/[id]/GET.py -> burrow_routes.product.[id].GET

    Dots inside directory names are escaped so ``a.b/GET.py`` and
    ``a/b/GET.py`` get distinct names.
    """
    relative = file.relative_to(routes_dir)
    parts = [
        *(_escape_part(part) for part in relative.parent.parts),
        relative.name.split(".", 1)[0],
    ]
    return ".".join([_MODULE_NAMESPACE, *parts])


def _escape_part(part: str) -> str:
    return part.replace("%", "%25").replace(".", "%2E")


def _load_module(file: Path, routes_dir: Path) -> ModuleType:
    """Import a file as a module without touching ``sys.path``.

    Bytecode files go through the sourceless loader, anything else is read
    as Python source regardless of its extension.
    """
    module_name = _module_name(file, routes_dir)
    if file.suffix.lower() in BYTECODE_SUFFIXES:
        loader = SourcelessFileLoader(module_name, str(file))
    else:
        loader = SourceFileLoader(module_name, str(file))

    spec = importlib.util.spec_from_file_location(module_name, file, loader=loader)
    if spec is None:
        msg = f"Cannot import route module {file}"
        raise RouteLoadError(msg)

    module = importlib.util.module_from_spec(spec)
    # Registered so dataclasses and pickling inside route files can find the module
    sys.modules[module_name] = module
    try:
        loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        msg = f"Failed to load route module {file}: {exc}"
        raise RouteLoadError(msg) from exc

    return module
