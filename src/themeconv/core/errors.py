"""
Error types for theme extraction, conversion and output.
"""

from dataclasses import dataclass
from typing import Optional


class ThemeConvError(Exception):
    """Base exception for all themeconv errors."""

    def __init__(self, message: str, context: Optional["SourceContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class SourceNotFoundError(ThemeConvError):
    """
    Raised when a theme source cannot be read.

    Examples:
    - File does not exist or is not readable
    - File is not valid UTF-8 text
    - URL unreachable or answered with an error status
    """

    pass


class UnsupportedFormatError(ThemeConvError):
    """
    Raised when a requested source format is neither CSS nor SCSS.
    """

    pass


class OutputWriteError(ThemeConvError):
    """
    Raised when generated documents cannot be written.

    Examples:
    - Output directory cannot be created
    - Target file is not writable
    """

    pass


class OptionsError(ThemeConvError):
    """
    Raised when a conversion options file cannot be loaded.

    Examples:
    - Invalid YAML
    - Unknown dark-mode strategy
    - Wrong value types
    """

    pass


@dataclass
class SourceContext:
    """
    Where an error happened.

    Attributes:
        source: File path, URL or output path involved
        detail: Optional extra detail (HTTP status, OS error text)
    """

    source: str
    detail: str | None = None

    def format(self) -> str:
        if self.detail:
            return f"{self.source} ({self.detail})"
        return self.source


def make_source_error(message: str, source: str, detail: str | None = None) -> SourceNotFoundError:
    """
    Helper to create a SourceNotFoundError with context.

    Args:
        message: Error description
        source: File path or URL that failed
        detail: Optional underlying error text

    Returns:
        SourceNotFoundError with context attached
    """
    return SourceNotFoundError(message, SourceContext(source=source, detail=detail))


def make_output_error(message: str, path: str, detail: str | None = None) -> OutputWriteError:
    """Helper to create an OutputWriteError with context."""
    return OutputWriteError(message, SourceContext(source=path, detail=detail))
