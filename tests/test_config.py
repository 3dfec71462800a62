"""Tests loading settings from configuration files."""

from pathlib import Path

import pytest

from vresolve import ConfigError
from vresolve.config import ResolverSettings, find_config_file, load_settings


def test_defaults_without_config(project_dir: Path) -> None:
    """Test that defaults are used when no config file exists."""
    assert find_config_file() is None
    settings = load_settings()
    assert settings == ResolverSettings()
    assert settings.log_level == "WARNING"
    assert settings.output_format == "text"


def test_load_from_vresolve_toml(project_dir: Path) -> None:
    """Test loading the [vresolve] table of vresolve.toml."""
    (project_dir / "vresolve.toml").write_text(
        '[vresolve]\nlog_level = "DEBUG"\noutput_format = "json"\n'
    )

    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.output_format == "json"


def test_load_from_pyproject(project_dir: Path) -> None:
    """Test loading the [tool.vresolve] table of pyproject.toml."""
    (project_dir / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.vresolve]\noutput_format = "json"\n'
    )

    assert find_config_file() == project_dir / "pyproject.toml"
    assert load_settings().output_format == "json"


def test_pyproject_without_table_is_ignored(project_dir: Path) -> None:
    """Test that a pyproject.toml without [tool.vresolve] is not used."""
    (project_dir / "pyproject.toml").write_text('[project]\nname = "demo"\n')

    assert find_config_file() is None
    assert load_settings() == ResolverSettings()


def test_vresolve_toml_takes_precedence(project_dir: Path) -> None:
    """Test that vresolve.toml wins over pyproject.toml."""
    (project_dir / "vresolve.toml").write_text('[vresolve]\noutput_format = "text"\n')
    (project_dir / "pyproject.toml").write_text(
        '[tool.vresolve]\noutput_format = "json"\n'
    )

    assert find_config_file() == project_dir / "vresolve.toml"
    assert load_settings().output_format == "text"


def test_explicit_config_path(tmp_path: Path) -> None:
    """Test loading a config file given explicitly."""
    config = tmp_path / "custom.toml"
    config.write_text('[vresolve]\nlog_level = "INFO"\n')

    assert load_settings(config).log_level == "INFO"


def test_explicit_config_path_missing(tmp_path: Path) -> None:
    """Test that a missing explicit config file is an error."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_settings(tmp_path / "missing.toml")


def test_invalid_toml(project_dir: Path) -> None:
    """Test that broken TOML is reported."""
    (project_dir / "vresolve.toml").write_text("[vresolve\n")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_settings()


@pytest.mark.parametrize(
    "content",
    [
        '[vresolve]\noutput_format = "yaml"\n',
        '[vresolve]\nlog_level = "LOUD"\n',
        '[vresolve]\nunknown = 1\n',
    ],
)
def test_invalid_settings(project_dir: Path, content: str) -> None:
    """Test that invalid settings are reported."""
    (project_dir / "vresolve.toml").write_text(content)

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_settings()
