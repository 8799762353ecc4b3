"""Shared pytest fixtures for themeconv tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def themes_dir(fixtures_dir: Path) -> Path:
    """Return path to theme source fixtures."""
    return fixtures_dir / "themes"


@pytest.fixture
def bootstrap_css(themes_dir: Path) -> Path:
    return themes_dir / "bootstrap-default.css"


@pytest.fixture
def darkly_scss(themes_dir: Path) -> Path:
    return themes_dir / "bootswatch-darkly.scss"


@pytest.fixture(autouse=True)
def restore_root_logging():
    """CLI commands reconfigure the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
