"""Terminal output — startup banner and route table listing.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback to plain text.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burrow.config import BurrowConfig
    from burrow.routes.types import RouteTable


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_CYAN = "\033[36m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_RED = "\033[31m" if _COLOR else ""
_MAGENTA = "\033[35m" if _COLOR else ""


_MODE_STYLES: dict[str, tuple[str, str]] = {
    "dev": (_GREEN, "dev"),
    "serve": (_CYAN, "serve"),
    "routes": (_MAGENTA, "routes"),
}

_METHOD_COLORS: dict[str, str] = {
    "GET": _GREEN,
    "POST": _YELLOW,
    "PUT": _CYAN,
    "PATCH": _MAGENTA,
    "DELETE": _RED,
}


def _mode_badge(mode: str) -> str:
    """Return a styled [mode] badge."""
    color, label = _MODE_STYLES.get(mode, (_DIM, mode))
    return f"{color}[{label}]{_RESET}"


def _clickable_url(url: str) -> str:
    """Wrap *url* in an OSC 8 hyperlink escape if the terminal supports it."""
    if not _COLOR:
        return url
    return f"\033]8;;{url}\033\\{_BOLD}{_CYAN}{url}{_RESET}\033]8;;\033\\"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def format_route_table(table: RouteTable, config: BurrowConfig) -> list[str]:
    """Render one line per route plus a line per recorded conflict.

    Sources are shown relative to the routes directory when possible.
    """
    width = max((len(route.path) for route in table), default=0)
    lines: list[str] = []
    for route in table:
        label = route.method.label
        color = _METHOD_COLORS.get(label, "")
        try:
            source = route.source.relative_to(config.routes_path)
        except ValueError:
            source = route.source
        lines.append(
            f"  {color}{label:<6}{_RESET} {route.path:<{width}}  {_DIM}{source}{_RESET}"
        )
    for conflict in table.conflicts:
        lines.append(
            f"  {_YELLOW}!{_RESET} [{conflict.method.label}] {conflict.path} "
            f"ignored: {conflict.second} conflicts with {conflict.first}"
        )
    return lines


def print_banner(
    config: BurrowConfig,
    table: RouteTable,
    mode: str,
    *,
    load_ms: float = 0.0,
) -> None:
    """Print the burrow banner and route listing to stderr.

    Args:
        config: Resolved BurrowConfig.
        table: The route table that was built.
        mode: One of ``"routes"``, ``"dev"``, ``"serve"``.
        load_ms: Time spent building the table in milliseconds.

    """
    from burrow import __version__

    header = f"  {_BOLD}burrow{_RESET} {_DIM}v{__version__}{_RESET}  {_mode_badge(mode)}"
    lines: list[str] = ["", header, f"  {_DIM}{'─' * 43}{_RESET}"]

    count = len(table)
    label = "route" if count == 1 else "routes"
    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    lines.append(f"  {_DIM}├─{_RESET} {count} {label} loaded{timing}")
    lines.append(f"  {_DIM}├─{_RESET} routes: {_DIM}{config.routes_path}{_RESET}")
    if config.prefix:
        lines.append(f"  {_DIM}├─{_RESET} prefix: {config.prefix}")
    strict_label = f"{_GREEN}on{_RESET}" if config.strict else "off"
    lines.append(f"  {_DIM}└─{_RESET} strict: {strict_label}")

    if mode == "serve":
        workers_label = str(config.workers) if config.workers > 0 else "auto"
        lines.append(f"     workers: {workers_label}")

    lines.append("")
    lines.extend(format_route_table(table, config))

    if mode in ("dev", "serve"):
        url = f"http://{config.host}:{config.port}"
        lines.append("")
        lines.append(f"  {_clickable_url(url)}")

    lines.append("")

    print("\n".join(lines), file=sys.stderr)
