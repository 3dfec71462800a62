"""Loads vresolve settings from TOML configuration files."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import ConfigError
from .types import LogLevel, OutputFormat

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "vresolve.toml"
PYPROJECT_FILENAME = "pyproject.toml"


class ResolverSettings(BaseModel):
    """Settings for the vresolve command-line interface.

    Attributes:
        log_level: Level passed to ``logging.basicConfig``.
        output_format: Default output format for commands that print versions.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: LogLevel = "WARNING"
    output_format: OutputFormat = "text"


def find_config_file(start: Path | None = None) -> Path | None:
    """Find the configuration file in a directory.

    ``vresolve.toml`` takes precedence over ``pyproject.toml``. A
    ``pyproject.toml`` is only used when it has a ``[tool.vresolve]`` table.

    Args:
        start: Directory to search. Defaults to the current working directory.

    Returns:
        Path to the configuration file, or None if there is none.
    """
    directory = start if start is not None else Path.cwd()

    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    pyproject = directory / PYPROJECT_FILENAME
    if pyproject.is_file() and "vresolve" in _read_toml(pyproject).get("tool", {}):
        return pyproject

    return None


def load_settings(config_path: Path | None = None) -> ResolverSettings:
    """Load settings from a configuration file.

    Args:
        config_path: Explicit path to a ``vresolve.toml`` or ``pyproject.toml``.
            When None, the current working directory is searched.

    Returns:
        Loaded settings, or the defaults when no configuration file exists.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or holds invalid
            settings.
    """
    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    path = config_path if config_path is not None else find_config_file()
    if path is None:
        logger.debug("No configuration file found, using defaults")
        return ResolverSettings()

    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("vresolve", {})
    else:
        section = data.get("vresolve", {})

    try:
        settings = ResolverSettings.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.debug("Loaded settings from %s", path)
    return settings


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
