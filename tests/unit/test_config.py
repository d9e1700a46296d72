#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for configuration loading.

Tests cover:
- Config file discovery (dotfiles, pyproject.toml, home directory)
- TOML, YAML and JSON loading
- Validation of keys and value types
- Environment variable overrides
- Priority between file, environment and command line

"""

import json
import logging
from pathlib import Path

import pytest

from md2jira.config import (
    DEFAULT_CONFIG,
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    load_env_overrides,
    merge_configs,
    resolve_settings,
    validate_config,
)
from md2jira.exceptions import ConfigurationError


@pytest.mark.unit
class TestConfigDiscovery:
    """Test config file discovery."""

    def test_find_dotfile_in_start_dir(self, tmp_path: Path) -> None:
        """Test a dotfile in the start directory is found."""
        config = tmp_path / ".md2jira.toml"
        config.write_text("safe = true\n")

        assert find_config_in_parents(tmp_path) == config

    def test_find_dotfile_in_parent(self, tmp_path: Path) -> None:
        """Test discovery walks up the directory tree."""
        config = tmp_path / ".md2jira.yaml"
        config.write_text("safe: true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config

    def test_toml_preferred_over_json(self, tmp_path: Path) -> None:
        """Test dotfile names are checked in a fixed order."""
        (tmp_path / ".md2jira.json").write_text("{}")
        toml = tmp_path / ".md2jira.toml"
        toml.write_text("")

        assert find_config_in_parents(tmp_path) == toml

    def test_pyproject_with_section(self, tmp_path: Path) -> None:
        """Test pyproject.toml with a [tool.md2jira] table is found."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.md2jira]\nsafe = true\n")

        assert find_config_in_parents(tmp_path) == pyproject

    def test_pyproject_without_section_skipped(self, tmp_path: Path) -> None:
        """Test pyproject.toml without the section is ignored."""
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")
        nested = tmp_path / "sub"
        nested.mkdir()
        (nested / "pyproject.toml").write_text("[tool.other]\nx = 1\n")

        result = find_config_in_parents(nested)

        assert result is None or not str(result).startswith(str(tmp_path))

    def test_invalid_pyproject_skipped(self, tmp_path: Path) -> None:
        """Test unparsable pyproject.toml does not stop discovery."""
        (tmp_path / ".md2jira.json").write_text("{}")
        nested = tmp_path / "sub"
        nested.mkdir()
        (nested / "pyproject.toml").write_text("this is not [ toml")

        assert find_config_in_parents(nested) == tmp_path / ".md2jira.json"

    def test_home_directory_fallback(self, tmp_path: Path) -> None:
        """Test the home directory is searched last."""
        home_config = Path.home() / ".md2jira.yml"
        home_config.write_text("safe: true\n")
        project = tmp_path / "project"
        project.mkdir()

        assert discover_config_file(project) == home_config

    def test_nothing_found(self, tmp_path: Path) -> None:
        """Test discovery returns None without config files."""
        assert discover_config_file(tmp_path) is None


@pytest.mark.unit
class TestConfigLoading:
    """Test loading the supported formats."""

    def test_load_toml(self, tmp_path: Path) -> None:
        """Test loading a TOML file."""
        path = tmp_path / ".md2jira.toml"
        path.write_text('safe = true\nlog_level = "info"\n')

        assert load_config_file(path) == {"safe": True, "log_level": "info"}

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Test loading a YAML file."""
        path = tmp_path / "config.yaml"
        path.write_text("parse_tables: false\n")

        assert load_config_file(path) == {"parse_tables": False}

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """Test an empty YAML file is an empty configuration."""
        path = tmp_path / "config.yml"
        path.write_text("")

        assert load_config_file(path) == {}

    def test_load_json(self, tmp_path: Path) -> None:
        """Test loading a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"parse_footnotes": True}))

        assert load_config_file(str(path)) == {"parse_footnotes": True}

    def test_load_pyproject_section(self, tmp_path: Path) -> None:
        """Test only the [tool.md2jira] table is returned."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[project]\nname = 'x'\n\n[tool.md2jira]\nsafe = true\n")

        assert load_config_file(path) == {"safe": True}

    @pytest.mark.parametrize(
        "filename,content",
        [
            ("bad.toml", "safe = = true"),
            ("bad.yaml", "safe: [unclosed"),
            ("bad.json", "{not json"),
            ("list.json", "[1, 2]"),
            ("list.yaml", "- a\n- b\n"),
        ],
    )
    def test_invalid_files(self, tmp_path: Path, filename: str, content: str) -> None:
        """Test malformed files raise ConfigurationError."""
        path = tmp_path / filename
        path.write_text(content)

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(path)

        assert exc_info.value.config_path == str(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config_file(tmp_path / "missing.toml")

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        """Test unknown extensions are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[x]\n")

        with pytest.raises(ConfigurationError, match="Unsupported config file format"):
            load_config_file(path)


@pytest.mark.unit
class TestConfigValidation:
    """Test validate_config and environment overrides."""

    def test_known_keys_kept(self) -> None:
        """Test recognised keys pass through."""
        config = {"safe": True, "parse_tables": False, "log_level": "debug"}

        assert validate_config(config) == {"safe": True, "parse_tables": False, "log_level": "DEBUG"}

    def test_unknown_keys_warned_and_dropped(self, caplog) -> None:
        """Test unknown keys are logged at WARNING and ignored."""
        with caplog.at_level(logging.WARNING, logger="md2jira.config"):
            result = validate_config({"safe": True, "colour": "blue"}, source="test.toml")

        assert result == {"safe": True}
        assert "colour" in caplog.text
        assert "test.toml" in caplog.text

    def test_wrong_type(self) -> None:
        """Test wrongly typed values raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="safe"):
            validate_config({"safe": "yes"})

    def test_invalid_log_level(self) -> None:
        """Test unknown log levels raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="log_level"):
            validate_config({"log_level": "verbose"})

    @pytest.mark.parametrize("raw,expected", [("1", True), ("true", True), ("YES", True), ("off", False), ("0", False)])
    def test_env_safe(self, raw: str, expected: bool) -> None:
        """Test boolean parsing of MD2JIRA_SAFE."""
        assert load_env_overrides({"MD2JIRA_SAFE": raw}) == {"safe": expected}

    def test_env_invalid_bool(self) -> None:
        """Test unparsable MD2JIRA_SAFE values raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="MD2JIRA_SAFE"):
            load_env_overrides({"MD2JIRA_SAFE": "maybe"})

    def test_env_log_level(self) -> None:
        """Test MD2JIRA_LOG_LEVEL is upper-cased."""
        assert load_env_overrides({"MD2JIRA_LOG_LEVEL": "error"}) == {"log_level": "ERROR"}

    def test_env_empty_values_ignored(self) -> None:
        """Test empty variables are treated as unset."""
        assert load_env_overrides({"MD2JIRA_SAFE": "", "OTHER": "x"}) == {}


@pytest.mark.unit
class TestConfigPriority:
    """Test merging and priority handling."""

    def test_merge_configs(self) -> None:
        """Test override keys replace base keys and neither input changes."""
        base = {"safe": False, "log_level": "INFO"}
        override = {"safe": True, "parse_tables": False}

        assert merge_configs(base, override) == {"safe": True, "log_level": "INFO", "parse_tables": False}
        assert base == {"safe": False, "log_level": "INFO"}

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        """Test --config beats MD2JIRA_CONFIG and discovery."""
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"safe": true}')
        env_file = tmp_path / "env.json"
        env_file.write_text('{"safe": false}')

        result = load_config_with_priority(str(explicit), str(env_file), start_dir=tmp_path)

        assert result == {"safe": True}

    def test_env_path_beats_discovery(self, tmp_path: Path) -> None:
        """Test MD2JIRA_CONFIG beats discovered files."""
        (tmp_path / ".md2jira.json").write_text('{"safe": false}')
        env_file = tmp_path / "env.json"
        env_file.write_text('{"safe": true}')

        assert load_config_with_priority(None, str(env_file), start_dir=tmp_path) == {"safe": True}

    def test_no_config(self, tmp_path: Path) -> None:
        """Test an empty dict is returned without config files."""
        assert load_config_with_priority(start_dir=tmp_path) == {}

    def test_defaults(self, tmp_path: Path) -> None:
        """Test resolve_settings falls back to the defaults."""
        assert resolve_settings({}, {}, start_dir=tmp_path) == DEFAULT_CONFIG

    def test_full_precedence(self, tmp_path: Path) -> None:
        """Test command line > environment > file > defaults."""
        (tmp_path / ".md2jira.toml").write_text('safe = true\nparse_tables = false\nlog_level = "INFO"\n')

        settings = resolve_settings(
            {"safe": False, "parse_tables": None},
            {"MD2JIRA_LOG_LEVEL": "debug", "MD2JIRA_SAFE": "true"},
            start_dir=tmp_path,
        )

        assert settings["safe"] is False
        assert settings["parse_tables"] is False
        assert settings["log_level"] == "DEBUG"
        assert settings["parse_strikethrough"] is True
        assert settings["parse_footnotes"] is False

    def test_config_env_var(self, tmp_path: Path) -> None:
        """Test MD2JIRA_CONFIG is honoured by resolve_settings."""
        config = tmp_path / "custom.yaml"
        config.write_text("parse_footnotes: true\n")

        settings = resolve_settings({}, {"MD2JIRA_CONFIG": str(config)}, start_dir=tmp_path)

        assert settings["parse_footnotes"] is True
