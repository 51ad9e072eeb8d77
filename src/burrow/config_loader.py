"""Load BurrowConfig from burrow.yaml, burrow.toml or pyproject.toml.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path

import yaml

from burrow._errors import ConfigError
from burrow.config import BurrowConfig

# Keys a config file may set (``root`` always comes from the caller)
_FILE_KEYS: frozenset[str] = frozenset(
    f.name for f in fields(BurrowConfig) if f.name != "root"
)

# Expected type and its description for each file key
_KEY_TYPES: dict[str, tuple[type, str]] = {
    "source_dir": (str, "a string"),
    "routes_dir": (str, "a string"),
    "prefix": (str, "a string"),
    "host": (str, "a string"),
    "strict": (bool, "true or false"),
    "port": (int, "an integer"),
    "workers": (int, "an integer"),
    "extensions": (tuple, "a list of strings"),
}


def load_config(root: Path, **overrides: object) -> BurrowConfig:
    """Load BurrowConfig from root, optionally merging a config file.

    Looks for burrow.yaml, burrow.yml, burrow.toml, then a ``[tool.burrow]``
    table in pyproject.toml. Overrides take precedence; overrides that are
    ``None`` are treated as "not given".

    Raises:
        ConfigError: If a config file cannot be parsed, sets an unknown key,
            or sets a value of the wrong type.

    """
    file_config = _read_burrow_config(root)
    given = {k: v for k, v in overrides.items() if v is not None}
    merged = {**file_config, **given}
    if "extensions" in merged and not isinstance(merged["extensions"], tuple):
        merged["extensions"] = tuple(merged["extensions"])  # type: ignore[arg-type]
    return BurrowConfig(root=root, **merged)  # type: ignore[arg-type]


def _read_burrow_config(root: Path) -> dict[str, object]:
    """Read burrow config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("burrow.yaml", "burrow.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "burrow.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        data = _load_toml(pyproject)
        tool = data.get("tool")
        if isinstance(tool, dict) and isinstance(tool.get("burrow"), dict):
            return _validate_keys(tool["burrow"], pyproject)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return _flatten_burrow_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config."""
    return _flatten_burrow_section(_load_toml(path), path)


def _load_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def _flatten_burrow_section(data: dict[str, object], path: Path) -> dict[str, object]:
    """Extract burrow.* keys into top-level config."""
    result: dict[str, object] = {}
    section = data.get("burrow")
    if isinstance(section, dict):
        result.update(section)
    for k, v in data.items():
        if k != "burrow":
            result[k] = v
    return _validate_keys(result, path)


def _validate_keys(data: dict[str, object], path: Path) -> dict[str, object]:
    unknown = sorted(set(data) - _FILE_KEYS)
    if unknown:
        msg = f"Unknown burrow setting(s) in {path}: {', '.join(unknown)}"
        raise ConfigError(msg)
    for key, value in data.items():
        if not _has_type(key, value):
            expected = _KEY_TYPES[key][1]
            msg = (
                f"Invalid burrow setting in {path}: {key} must be {expected}, "
                f"got {type(value).__name__} {value!r}"
            )
            raise ConfigError(msg)
    return dict(data)


def _has_type(key: str, value: object) -> bool:
    kind = _KEY_TYPES[key][0]
    if kind is bool:
        return isinstance(value, bool)
    if kind is int:
        # bool is an int subclass
        return isinstance(value, int) and not isinstance(value, bool)
    if kind is tuple:
        return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)
    return isinstance(value, kind)
