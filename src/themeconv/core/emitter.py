"""
XAML resource-dictionary generation from a TokenSet.

Produces two documents:

- ``Tokens.xaml``: every token as a typed resource, one commented section
  per category, keys sorted within each section.
- ``Theme.xaml``: a wrapper that merges ``Tokens.xaml``; it repeats no tokens.

Both are rendered with lxml using four-space indentation and ``\\n`` line
endings, so identical input gives byte-identical output.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from lxml import etree

from .errors import make_output_error
from .ir.tokens import ConversionOptions, NumericToken, TokenSet, TypographyToken
from .units import format_number

logger = logging.getLogger(__name__)

MAUI_NAMESPACE = "http://schemas.microsoft.com/dotnet/2021/maui"
XAML_NAMESPACE = "http://schemas.microsoft.com/winfx/2009/xaml"
_NSMAP = {None: MAUI_NAMESPACE, "x": XAML_NAMESPACE}

TOKENS_FILE_NAME = "Tokens.xaml"
THEME_FILE_NAME = "Theme.xaml"
INDENT = "    "

# Typography keys containing one of these are numbers; the rest are strings.
NUMERIC_TYPOGRAPHY_MARKERS: tuple[str, ...] = ("FontSize", "LineHeight")

# (TokenSet attribute, section label)
NUMERIC_SECTIONS: tuple[tuple[str, str], ...] = (
    ("spacing", "Spacing"),
    ("border_radius", "Corner Radius"),
    ("border_width", "Border Width"),
)

_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


@dataclass(frozen=True)
class ThemeFiles:
    """Paths of the documents written by write_theme_files."""

    tokens_path: Path
    theme_path: Path


# =============================================================================
# Element helpers
# =============================================================================


def _maui(tag: str) -> str:
    return f"{{{MAUI_NAMESPACE}}}{tag}"


def _x(tag: str) -> str:
    return f"{{{XAML_NAMESPACE}}}{tag}"


def _xml_text(text: str) -> str:
    return _XML_INVALID_CHARS.sub("", text)


def _comment(text: str) -> etree._Comment:
    """A comment that is always well-formed (no ``--`` inside)."""
    safe = _xml_text(text)
    while "--" in safe:
        safe = safe.replace("--", "- -")
    return etree.Comment(f" {safe} ")


def _create_root() -> etree._Element:
    return etree.Element(_maui("ResourceDictionary"), nsmap=_NSMAP)


def _add_resource(root: etree._Element, tag: str, key: str, value: str) -> None:
    element = etree.SubElement(root, tag, attrib={_x("Key"): _xml_text(key)})
    element.text = _xml_text(value)


def _add_purpose(
    root: etree._Element, key: str, purpose: str | None, options: ConversionOptions
) -> None:
    if options.include_comments and purpose and purpose.strip():
        root.append(_comment(f"{key}: {purpose}"))


def _serialize(root: etree._Element) -> str:
    etree.indent(root, space=INDENT)
    markup = etree.tostring(root, xml_declaration=True, encoding="utf-8").decode("utf-8")
    return markup.replace("\r\n", "\n") + "\n"


# =============================================================================
# Sections
# =============================================================================


def _add_color_section(root: etree._Element, tokens: TokenSet, options: ConversionOptions) -> None:
    root.append(_comment("===== Color Tokens ====="))
    for key in sorted(tokens.colors):
        token = tokens.colors[key]
        _add_purpose(root, token.key, token.purpose, options)
        _add_resource(root, _maui("Color"), token.key, token.value)
        if options.include_comments and token.dark_value and token.dark_value.strip():
            root.append(_comment(f"Dark mode: {token.dark_value}"))


def typography_tag(token: TypographyToken) -> str:
    """``x:Double`` for font sizes and line heights, ``x:String`` otherwise."""
    if any(marker in token.key for marker in NUMERIC_TYPOGRAPHY_MARKERS):
        return _x("Double")
    return _x("String")


def _add_typography_section(
    root: etree._Element, tokens: TokenSet, options: ConversionOptions
) -> None:
    root.append(_comment("===== Typography Tokens ====="))
    for key in sorted(tokens.typography):
        token = tokens.typography[key]
        _add_purpose(root, token.key, token.purpose, options)
        _add_resource(root, typography_tag(token), token.key, token.value)


def _add_numeric_section(
    root: etree._Element,
    section: Mapping[str, NumericToken],
    label: str,
    options: ConversionOptions,
) -> None:
    root.append(_comment(f"===== {label} Tokens ====="))
    for key in sorted(section):
        token = section[key]
        _add_purpose(root, token.key, token.purpose, options)
        _add_resource(root, _x("Double"), token.key, format_number(token.value))


# =============================================================================
# Documents
# =============================================================================


def generate_tokens_document(tokens: TokenSet, options: ConversionOptions | None = None) -> str:
    """Render the token catalog document (``Tokens.xaml``).

    Args:
        tokens: Mapped tokens.
        options: Only ``include_comments`` is used.

    Returns:
        XAML text with declaration, ending in a newline.
    """
    options = options or ConversionOptions()
    root = _create_root()

    if tokens.colors:
        _add_color_section(root, tokens, options)
    if tokens.typography:
        _add_typography_section(root, tokens, options)
    for attribute, label in NUMERIC_SECTIONS:
        section: dict[str, NumericToken] = getattr(tokens, attribute)
        if section:
            _add_numeric_section(root, section, label, options)

    return _serialize(root)


def generate_theme_document(theme_name: str, options: ConversionOptions | None = None) -> str:
    """Render the theme wrapper document (``Theme.xaml``) that merges the tokens."""
    options = options or ConversionOptions()
    root = _create_root()

    root.append(_comment(f"{theme_name} Theme - Generated from Bootstrap"))
    root.append(_comment(f"Resources: {options.namespace}"))
    root.append(_comment("This theme imports tokens and provides base styles for controls"))

    merged = etree.SubElement(root, _maui("ResourceDictionary.MergedDictionaries"))
    etree.SubElement(merged, _maui("ResourceDictionary"), attrib={"Source": TOKENS_FILE_NAME})

    root.append(_comment("Base control styles can be added here"))

    return _serialize(root)


def write_theme_files(
    tokens: TokenSet,
    theme_name: str,
    output_dir: str | Path,
    options: ConversionOptions | None = None,
) -> ThemeFiles:
    """Write ``Tokens.xaml`` and ``Theme.xaml`` into ``output_dir``.

    The directory is created if needed.

    Raises:
        OutputWriteError: If the directory or either file cannot be written.
    """
    options = options or ConversionOptions()
    root = Path(output_dir)
    files = ThemeFiles(tokens_path=root / TOKENS_FILE_NAME, theme_path=root / THEME_FILE_NAME)

    tokens_markup = generate_tokens_document(tokens, options)
    theme_markup = generate_theme_document(theme_name, options)

    for path, markup in ((files.tokens_path, tokens_markup), (files.theme_path, theme_markup)):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(markup, encoding="utf-8", newline="\n")
        except OSError as e:
            raise make_output_error("Failed to write theme file", str(path), str(e)) from e
        logger.info(f"Wrote {path}")

    return files
