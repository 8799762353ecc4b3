"""
themeconv - Bootstrap theme to design-token converter.

Extracts CSS/SCSS theme variables, maps them onto a semantic token schema
and renders XAML resource dictionaries.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.emitter import generate_theme_document, generate_tokens_document, write_theme_files
from .core.errors import (
    OptionsError,
    OutputWriteError,
    SourceNotFoundError,
    ThemeConvError,
    UnsupportedFormatError,
)
from .core.extractor import parse_content, parse_file, parse_files, parse_source, parse_url
from .core.ir import ConversionOptions, DarkModeStrategy, RawVariableSet, TokenSet, VariableFormat
from .core.mapper import map_tokens

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    # Errors
    "ThemeConvError",
    "SourceNotFoundError",
    "UnsupportedFormatError",
    "OutputWriteError",
    "OptionsError",
    # Types
    "ConversionOptions",
    "DarkModeStrategy",
    "RawVariableSet",
    "TokenSet",
    "VariableFormat",
    # Pipeline
    "parse_content",
    "parse_file",
    "parse_files",
    "parse_source",
    "parse_url",
    "map_tokens",
    "generate_tokens_document",
    "generate_theme_document",
    "write_theme_files",
]
