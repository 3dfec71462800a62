"""Shared fixtures for vresolve tests."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from vresolve import Version


@pytest.fixture
def release() -> Version:
    """A fully specified release version."""
    return Version(3, 42, 6)


@pytest.fixture
def snapshot() -> Version:
    """A fully specified pre-release version."""
    return Version(3, 42, 6, "SNAPSHOT")


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """An empty working directory without configuration files."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
