"""Helpers shared by the CLI commands."""

import logging
from pathlib import Path
from typing import get_args

from rich.console import Console
from rich.markup import escape

from ..config import ResolverSettings, load_settings
from ..exceptions import ConfigError
from ..types import LogLevel
from ..version import NO_VERSION, Version

console = Console()

OUTPUT_FORMATS = ("text", "json")
AUTO_KEYWORD = "auto"


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗ Error:[/red] {escape(message)}")


def prepare(config: Path | None, log_level: str | None) -> ResolverSettings:
    """Load settings and configure logging for a command.

    Args:
        config: Explicit configuration file, if given on the command line.
        log_level: Log level given on the command line. Overrides the
            configured level.

    Returns:
        The loaded settings.

    Raises:
        ConfigError: If the configuration file cannot be loaded or the log
            level is unknown.
    """
    settings = load_settings(config)
    level = (log_level or settings.log_level).upper()
    if level not in get_args(LogLevel):
        raise ConfigError(
            f"Unknown log level: {log_level}. "
            f"Choose one of {', '.join(get_args(LogLevel))}"
        )
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


def parse_argument(text: str | None) -> Version:
    """Parse a version given on the command line.

    ``auto`` and the empty string both mean no version.
    """
    if text is None or text.strip().lower() in ("", AUTO_KEYWORD):
        return NO_VERSION
    return Version.parse(text.strip())


def display(version: Version) -> str:
    """Format a version for rich output, marking ``NO_VERSION`` explicitly."""
    return str(version) if version != NO_VERSION else "[dim]<any>[/dim]"
