"""Tests for burrow.config."""

from pathlib import Path

import pytest

from burrow.config import BurrowConfig


class TestBurrowConfig:
    """BurrowConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = BurrowConfig()
        assert config.source_dir == "src"
        assert config.routes_dir == "routes"
        assert config.prefix == ""
        assert config.strict is False
        assert config.extensions == (".py",)
        assert config.host == "127.0.0.1"
        assert config.port == 3000
        assert config.workers == 0

    def test_frozen(self) -> None:
        config = BurrowConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_routes_path_under_src(self, tmp_path: Path) -> None:
        config = BurrowConfig(root=tmp_path, routes_dir="api")
        assert config.routes_path == tmp_path / "src" / "api"

    def test_custom_source_dir(self, tmp_path: Path) -> None:
        config = BurrowConfig(root=tmp_path, source_dir="app")
        assert config.routes_path == tmp_path / "app" / "routes"

    def test_prefix_trailing_slashes_stripped(self) -> None:
        assert BurrowConfig(prefix="/api/").prefix == "/api"
        assert BurrowConfig(prefix="/api///").prefix == "/api"

    def test_root_prefix_becomes_empty(self) -> None:
        assert BurrowConfig(prefix="/").prefix == ""

    def test_extensions_lowercased(self) -> None:
        config = BurrowConfig(extensions=(".PY", ".pyc"))
        assert config.extensions == (".py", ".pyc")

    def test_relative_root_resolved_to_absolute(self) -> None:
        """Relative root is resolved to absolute in __post_init__."""
        config = BurrowConfig(root=Path("project"))
        assert config.root.is_absolute()

    def test_absolute_root_unchanged(self, tmp_path: Path) -> None:
        config = BurrowConfig(root=tmp_path)
        assert config.root == tmp_path
