"""
Conversion options persistence.

Reads and writes ConversionOptions from ``themeconv.yaml`` in a project
root, so a theme can be regenerated with the same settings. Command-line
flags take precedence over the file.

Default location: {project_root}/themeconv.yaml

Example::

    dark_mode_strategy: auto
    include_comments: true
    namespace: MyApp.Resources
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import OptionsError
from .ir.tokens import ConversionOptions

logger = logging.getLogger(__name__)

OPTIONS_FILE = "themeconv.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_options_path(project_root: Path) -> Path:
    """Get the themeconv.yaml file path."""
    return project_root / OPTIONS_FILE


def options_file_exists(project_root: Path) -> bool:
    """Check if a themeconv.yaml exists in the project."""
    return get_options_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def _parse_options_data(data: Any, options_path: Path) -> ConversionOptions:
    if not isinstance(data, dict):
        raise OptionsError(f"Expected a mapping in {options_path}, got {type(data).__name__}")
    try:
        return ConversionOptions(**data)
    except ValidationError as e:
        raise OptionsError(f"Invalid conversion options in {options_path}: {e}") from e


def load_options(project_root: Path, *, use_defaults: bool = True) -> ConversionOptions:
    """Load ConversionOptions from themeconv.yaml.

    Args:
        project_root: Directory containing themeconv.yaml.
        use_defaults: If True, return default options when the file doesn't exist.

    Returns:
        ConversionOptions instance.

    Raises:
        OptionsError: If file doesn't exist (when use_defaults=False) or invalid.
    """
    options_path = get_options_path(project_root)

    if not options_path.exists():
        if use_defaults:
            logger.debug("No themeconv.yaml found, using defaults")
            return ConversionOptions()
        raise OptionsError(f"Options file not found: {options_path}")

    try:
        content = options_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise OptionsError(f"Invalid YAML in {options_path}: {e}") from e
    except OSError as e:
        raise OptionsError(f"Cannot read {options_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty themeconv.yaml at {options_path}, using defaults")
            return ConversionOptions()
        raise OptionsError(f"Empty or invalid YAML in {options_path}")

    return _parse_options_data(data, options_path)


def save_options(project_root: Path, options: ConversionOptions) -> Path:
    """Save ConversionOptions to themeconv.yaml.

    Returns:
        Path to the saved file.

    Raises:
        OptionsError: If the file cannot be written.
    """
    options_path = get_options_path(project_root)

    data = options.model_dump(mode="json")

    try:
        options_path.parent.mkdir(parents=True, exist_ok=True)
        options_path.write_text(
            yaml.dump(
                data,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            ),
            encoding="utf-8",
        )
    except OSError as e:
        raise OptionsError(f"Cannot write {options_path}: {e}") from e

    logger.info(f"Saved conversion options to {options_path}")
    return options_path
