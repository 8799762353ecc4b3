"""Version lookup for themeconv."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_DIST_NAME = "themeconv"
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _source_tree_version() -> str | None:
    # src/ checkout: read the version pyproject.toml declares
    if not _PYPROJECT.is_file():
        return None
    with _PYPROJECT.open("rb") as f:
        project = tomllib.load(f).get("project", {})
    if project.get("name") != _DIST_NAME:
        return None
    return project.get("version")


def get_version() -> str:
    """Version from a source checkout's pyproject.toml, else installed metadata."""
    if version := _source_tree_version():
        return version
    try:
        return _metadata_version(_DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"
