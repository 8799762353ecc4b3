"""Core themeconv functionality: IR, extraction, mapping, emission."""

from . import ir
from .dtcg_export import export_dtcg_file, generate_dtcg_tokens
from .emitter import (
    ThemeFiles,
    generate_theme_document,
    generate_tokens_document,
    write_theme_files,
)
from .errors import (
    OptionsError,
    OutputWriteError,
    SourceContext,
    SourceNotFoundError,
    ThemeConvError,
    UnsupportedFormatError,
)
from .extractor import (
    categorize_name,
    detect_format,
    parse_content,
    parse_css,
    parse_file,
    parse_files,
    parse_scss,
    parse_source,
    parse_url,
)
from .mapper import map_tokens
from .options_loader import load_options, save_options

__all__ = [
    "ir",
    # Errors
    "ThemeConvError",
    "SourceNotFoundError",
    "UnsupportedFormatError",
    "OutputWriteError",
    "OptionsError",
    "SourceContext",
    # Extraction
    "categorize_name",
    "detect_format",
    "parse_content",
    "parse_css",
    "parse_scss",
    "parse_file",
    "parse_url",
    "parse_source",
    "parse_files",
    # Mapping
    "map_tokens",
    # Emission
    "ThemeFiles",
    "generate_tokens_document",
    "generate_theme_document",
    "write_theme_files",
    "generate_dtcg_tokens",
    "export_dtcg_file",
    # Options
    "load_options",
    "save_options",
]
