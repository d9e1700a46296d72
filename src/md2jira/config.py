#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Where md2jira settings come from and how they combine.

Four sources feed the CLI, from weakest to strongest: built-in defaults, one
configuration file, ``MD2JIRA_*`` environment variables and command-line
flags. The configuration file is the ``--config`` argument, else the file
named by ``MD2JIRA_CONFIG``, else the first one discovered walking up from
the working directory, else a dotfile in the home directory.

Files may be TOML, YAML or JSON, or a ``pyproject.toml`` with a
``[tool.md2jira]`` table. Every file holds the same flat set of keys.
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple, Type

import yaml

from md2jira.constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAMES,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_SAFE_MODE,
    ENV_PREFIX,
    PYPROJECT_TOOL_SECTION,
)
from md2jira.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_KEYS: Dict[str, type] = {
    "safe": bool,
    "parse_strikethrough": bool,
    "parse_tables": bool,
    "parse_footnotes": bool,
    "log_level": str,
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "safe": DEFAULT_SAFE_MODE,
    "parse_strikethrough": DEFAULT_PARSE_STRIKETHROUGH,
    "parse_tables": DEFAULT_PARSE_TABLES,
    "parse_footnotes": DEFAULT_PARSE_FOOTNOTES,
    "log_level": DEFAULT_LOG_LEVEL,
}

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR"]

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


class _Format(NamedTuple):
    label: str
    load: Callable[[Any], Any]
    syntax_errors: Tuple[Type[Exception], ...]
    binary: bool


_TOML = _Format("TOML", tomllib.load, (tomllib.TOMLDecodeError,), True)
_FORMATS: Dict[str, _Format] = {
    ".toml": _TOML,
    ".yaml": _Format("YAML", yaml.safe_load, (yaml.YAMLError,), False),
    ".yml": _Format("YAML", yaml.safe_load, (yaml.YAMLError,), False),
    ".json": _Format("JSON", json.load, (json.JSONDecodeError,), False),
}


def _read_table(path: Path, fmt: _Format) -> Dict[str, Any]:
    """Parse ``path`` and require a mapping at the top level.

    An empty YAML document counts as an empty mapping.
    """
    try:
        if fmt.binary:
            with open(path, "rb") as f:
                data = fmt.load(f)
        else:
            with open(path, "r", encoding="utf-8") as f:
                data = fmt.load(f)
    except fmt.syntax_errors as e:
        raise ConfigurationError(
            f"Invalid {fmt.label} in config file {path}: {e}", config_path=str(path), original_error=e
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Error reading {fmt.label} config {path}: {e}", config_path=str(path), original_error=e
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{fmt.label} config file must contain a mapping, got {type(data).__name__}", config_path=str(path)
        )
    return data


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.md2jira]`` table, or an empty dict when there is none."""
    section = _read_table(pyproject_path, _TOML).get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(section).__name__}",
            config_path=str(pyproject_path),
        )
    return section


def _config_in(directory: Path) -> Optional[Path]:
    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def _pyproject_in(directory: Path) -> Optional[Path]:
    """Return ``directory/pyproject.toml`` if it has a non-empty md2jira table."""
    pyproject = directory / "pyproject.toml"
    if not pyproject.is_file():
        return None
    try:
        return pyproject if _load_pyproject_section(pyproject) else None
    except ConfigurationError as e:
        logger.debug("Skipping unreadable %s during discovery: %s", pyproject, e)
        return None


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Walk from ``start_dir`` (default: cwd) up to the root looking for a config file.

    In each directory the dotfiles in ``CONFIG_FILENAMES`` are tried in order,
    then ``pyproject.toml``. A pyproject without a ``[tool.md2jira]`` table,
    or one that cannot be parsed, does not stop the walk.
    """
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        found = _config_in(directory) or _pyproject_in(directory)
        if found is not None:
            return found
    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Search ``start_dir`` and its parents, then the home directory dotfiles."""
    return find_config_in_parents(start_dir) or _config_in(Path.home())


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Read one configuration file; the format follows the name and suffix.

    Raises
    ------
    ConfigurationError
        The path is missing or not a file, the suffix is unknown, the content
        does not parse, or the top level is not a mapping

    Examples
    --------
    >>> load_config_file(".md2jira.toml").get("safe")
    True

    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {path}", config_path=str(path))
    if not path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {path}", config_path=str(path))

    if path.name.lower() == "pyproject.toml":
        config = _load_pyproject_section(path)
    else:
        suffix = path.suffix.lower()
        fmt = _FORMATS.get(suffix)
        if fmt is None:
            raise ConfigurationError(
                f"Unsupported config file format: {suffix}. Use .toml, .yaml or .json", config_path=str(path)
            )
        config = _read_table(path, fmt)

    logger.debug("Loaded configuration from %s", path)
    return config


def validate_config(config: Mapping[str, Any], source: str = "configuration") -> Dict[str, Any]:
    """Keep the recognised keys of ``config`` and check their value types.

    Unknown keys are logged at WARNING level and dropped.

    Parameters
    ----------
    config : Mapping
        Raw configuration values
    source : str, default "configuration"
        Where the values came from, for messages

    Returns
    -------
    dict
        The recognised, type-checked settings

    Raises
    ------
    ConfigurationError
        If a recognised key holds a value of the wrong type, or an unknown
        log level

    """
    validated: Dict[str, Any] = {}
    for key, value in config.items():
        expected = CONFIG_KEYS.get(key)
        if expected is None:
            logger.warning("Ignoring unknown key %r in %s", key, source)
            continue
        if not isinstance(value, expected):
            raise ConfigurationError(
                f"Key {key!r} in {source} must be {expected.__name__}, got {type(value).__name__}"
            )
        if key == "log_level":
            value = value.upper()
            if value not in LOG_LEVEL_CHOICES:
                raise ConfigurationError(
                    f"Key 'log_level' in {source} must be one of {', '.join(LOG_LEVEL_CHOICES)}, got {value!r}"
                )
        validated[key] = value
    return validated


def _parse_env_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"Environment variable {name} must be a boolean (true/false), got {raw!r}")


def load_env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Read ``MD2JIRA_SAFE`` and ``MD2JIRA_LOG_LEVEL`` from ``environ``.

    Examples
    --------
    >>> load_env_overrides({"MD2JIRA_SAFE": "yes", "MD2JIRA_LOG_LEVEL": "debug"})
    {'safe': True, 'log_level': 'DEBUG'}

    """
    overrides: Dict[str, Any] = {}

    safe_var = f"{ENV_PREFIX}SAFE"
    if environ.get(safe_var):
        overrides["safe"] = _parse_env_bool(safe_var, environ[safe_var])

    level_var = f"{ENV_PREFIX}LOG_LEVEL"
    if environ.get(level_var):
        overrides["log_level"] = environ[level_var]

    return validate_config(overrides, source="environment")


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` updated with ``override``; neither argument is modified.

    Settings are flat, so keys in ``override`` simply replace those in ``base``.

    Examples
    --------
    >>> merge_configs({"safe": False, "log_level": "INFO"}, {"safe": True})
    {'safe': True, 'log_level': 'INFO'}

    """
    return {**base, **override}


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None, start_dir: Optional[Path] = None
) -> Dict[str, Any]:
    """Load and validate the single configuration file that applies.

    ``explicit_path`` (``--config``) beats ``env_var_path``
    (``MD2JIRA_CONFIG``), which beats discovery from ``start_dir``. A file
    that was named but cannot be loaded is an error; finding nothing is not.
    """
    named = explicit_path or env_var_path
    path = Path(named) if named else discover_config_file(start_dir)
    if path is None:
        logger.debug("No configuration file found")
        return {}
    return validate_config(load_config_file(path), source=str(path))


def resolve_settings(
    cli_overrides: Mapping[str, Any],
    environ: Mapping[str, str],
    explicit_path: Optional[str] = None,
    start_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Combine every configuration source into the effective settings.

    Priority: command line > environment > configuration file > defaults.
    ``None`` values in ``cli_overrides`` mean "not given on the command line".

    Parameters
    ----------
    cli_overrides : Mapping
        Values from the command line
    environ : Mapping
        Environment variables (usually ``os.environ``)
    explicit_path : str, optional
        Configuration file given with ``--config``
    start_dir : Path, optional
        Directory where auto-discovery starts, defaults to cwd

    Returns
    -------
    dict
        One value for every key of ``DEFAULT_CONFIG``

    """
    file_config = load_config_with_priority(explicit_path, environ.get(CONFIG_ENV_VAR), start_dir)
    env_config = load_env_overrides(environ)
    cli_config = {key: value for key, value in cli_overrides.items() if value is not None}

    settings = merge_configs(merge_configs(merge_configs(DEFAULT_CONFIG, file_config), env_config), cli_config)
    logger.debug("Effective settings: %s", settings)
    return settings
