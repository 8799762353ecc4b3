"""
themeconv Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .tokens import (
    DEFAULT_NAMESPACE,
    ColorToken,
    ConversionOptions,
    DarkModeStrategy,
    NumericToken,
    Token,
    TokenSet,
    TypographyToken,
)
from .variables import RawVariableSet, VariableCategory, VariableFormat

__all__ = [
    # Variables
    "RawVariableSet",
    "VariableCategory",
    "VariableFormat",
    # Tokens
    "ColorToken",
    "NumericToken",
    "Token",
    "TokenSet",
    "TypographyToken",
    # Options
    "DEFAULT_NAMESPACE",
    "ConversionOptions",
    "DarkModeStrategy",
]
