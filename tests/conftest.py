"""Shared fixtures for the customweek tests."""

from pathlib import Path

import pytest

from customweek.paths import CONFIG_DIR_ENV
from customweek.specification import WeekSpecification

REPO_CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


@pytest.fixture
def iso():
    return WeekSpecification.iso()


@pytest.fixture
def theater():
    return WeekSpecification.regional_theater_week()


@pytest.fixture
def repo_config(monkeypatch):
    """Point the config loader at the repository's config/ directory."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(REPO_CONFIG_DIR))
    return REPO_CONFIG_DIR


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """An empty config directory the loader will read from."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    return tmp_path
