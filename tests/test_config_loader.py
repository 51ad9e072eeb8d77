"""Tests for burrow.config_loader — file config merged with overrides."""

from pathlib import Path

import pytest

from burrow._errors import ConfigError
from burrow.config_loader import load_config


class TestLoadConfig:
    """load_config — file discovery, precedence and validation."""

    def test_no_config_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.root == tmp_path
        assert config.prefix == ""
        assert config.strict is False

    def test_burrow_toml_section(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text(
            '[burrow]\nprefix = "/api/"\nstrict = true\n'
        )
        config = load_config(tmp_path)
        assert config.prefix == "/api"
        assert config.strict is True

    def test_burrow_toml_top_level_keys(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text('routes_dir = "handlers"\n')
        config = load_config(tmp_path)
        assert config.routes_dir == "handlers"

    def test_burrow_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.yaml").write_text(
            "burrow:\n  prefix: /v1\n  extensions: [.py, .pyc]\n"
        )
        config = load_config(tmp_path)
        assert config.prefix == "/v1"
        assert config.extensions == (".py", ".pyc")

    def test_yaml_wins_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.yml").write_text("prefix: /yaml\n")
        (tmp_path / "burrow.toml").write_text('prefix = "/toml"\n')
        assert load_config(tmp_path).prefix == "/yaml"

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "shop"\n\n[tool.burrow]\nstrict = true\nport = 8080\n'
        )
        config = load_config(tmp_path)
        assert config.strict is True
        assert config.port == 8080

    def test_pyproject_without_tool_table_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "shop"\n')
        assert load_config(tmp_path).strict is False

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text('prefix = "/file"\nstrict = true\n')
        config = load_config(tmp_path, prefix="/cli", strict=False)
        assert config.prefix == "/cli"
        assert config.strict is False

    def test_none_overrides_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text('prefix = "/file"\n')
        config = load_config(tmp_path, prefix=None, strict=None)
        assert config.prefix == "/file"
        assert config.strict is False

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text('sitrct = true\n')
        with pytest.raises(ConfigError, match="sitrct"):
            load_config(tmp_path)

    def test_root_key_in_file_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text('root = "/elsewhere"\n')
        with pytest.raises(ConfigError, match="root"):
            load_config(tmp_path)

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text("prefix = \n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(tmp_path)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.yaml").write_text("prefix: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(tmp_path)

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.yaml").write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_empty_yaml_is_empty_config(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.yaml").write_text("")
        assert load_config(tmp_path).prefix == ""


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


class TestValueTypes:
    """Config file values of the wrong type raise ConfigError."""

    def test_non_string_prefix_raises(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text("prefix = 1\n")
        with pytest.raises(ConfigError, match=r"prefix must be a string") as exc_info:
            load_config(tmp_path)
        assert "burrow.toml" in str(exc_info.value)

    def test_string_strict_raises(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text('strict = "no"\n')
        with pytest.raises(ConfigError, match="strict must be true or false"):
            load_config(tmp_path)

    def test_bool_port_raises(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.burrow]\nport = true\n")
        with pytest.raises(ConfigError, match="port must be an integer"):
            load_config(tmp_path)

    def test_string_workers_raises(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.yaml").write_text("workers: four\n")
        with pytest.raises(ConfigError, match="workers must be an integer"):
            load_config(tmp_path)

    def test_extensions_must_be_list_of_strings(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text('extensions = ".py"\n')
        with pytest.raises(ConfigError, match="extensions must be a list of strings"):
            load_config(tmp_path)

    def test_extensions_with_non_string_item_raises(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.yaml").write_text("extensions: [.py, 3]\n")
        with pytest.raises(ConfigError, match="extensions"):
            load_config(tmp_path)

    def test_empty_yaml_value_raises(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.yaml").write_text("routes_dir:\n")
        with pytest.raises(ConfigError, match="routes_dir must be a string"):
            load_config(tmp_path)

    def test_valid_types_accepted(self, tmp_path: Path) -> None:
        (tmp_path / "burrow.toml").write_text(
            '[burrow]\nhost = "0.0.0.0"\nport = 9000\nworkers = 2\n'
            'extensions = [".py", ".PYC"]\n'
        )
        config = load_config(tmp_path)
        assert (config.host, config.port, config.workers) == ("0.0.0.0", 9000, 2)
        assert config.extensions == (".py", ".pyc")
