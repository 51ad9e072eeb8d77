"""Burrow configuration.

BurrowConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class BurrowConfig:
    """Configuration for building a route table.

    Attributes:
        root: Project root directory. Always resolved to an absolute path
              on construction.
        source_dir: Directory under *root* that holds the routes tree.
        routes_dir: Name of the routes tree inside *source_dir*.
        prefix: URL prefix prepended to every route. Trailing slashes are
              stripped on construction (``"/api/"`` becomes ``"/api"``).
        strict: Treat dynamic route conflicts as fatal instead of warning
              and keeping the first route discovered.
        extensions: File extensions recognised for method files.
        host: Bind address for ``burrow serve``.
        port: Bind port for ``burrow serve``.
        workers: Number of server workers (0 = auto-detect).

    """

    root: Path = field(default_factory=Path.cwd)
    source_dir: str = "src"
    routes_dir: str = "routes"
    prefix: str = ""
    strict: bool = False
    extensions: tuple[str, ...] = (".py",)
    host: str = "127.0.0.1"
    port: int = 3000
    workers: int = 0

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        object.__setattr__(self, "prefix", self.prefix.rstrip("/"))
        object.__setattr__(
            self, "extensions", tuple(ext.lower() for ext in self.extensions),
        )

    @property
    def routes_path(self) -> Path:
        """Absolute path to the routes tree."""
        return self.root / self.source_dir / self.routes_dir
