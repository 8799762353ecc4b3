"""
Theme variable extraction.

Scans CSS custom properties (``--bs-primary: #0d6efd;``) or SCSS variables
(``$primary: #0d6efd;``), collects them into a registry, substitutes
variable-to-variable references and files every variable under one of five
categories by name.

Only flat declarations are recognized. Anything that does not match the
declaration pattern (plain properties, declarations without a terminating
semicolon, nested SCSS constructs) is skipped without error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

import httpx

from .errors import UnsupportedFormatError
from .ir.variables import RawVariableSet, VariableCategory, VariableFormat
from .sources import fetch_url_text, read_file_text, read_source_text

logger = logging.getLogger(__name__)

_CSS_DECLARATION = re.compile(r"(--[a-zA-Z0-9\-_]+)\s*:\s*([^;]+);", re.MULTILINE)
_SCSS_DECLARATION = re.compile(r"\$([a-zA-Z0-9\-_]+)\s*:\s*([^;]+);", re.MULTILINE)
_SCSS_REFERENCE = re.compile(r"\$([a-zA-Z0-9\-_]+)")
_CSS_REFERENCE = re.compile(r"var\((--[a-zA-Z0-9\-_]+)\)")

# SCSS names are stored under the CSS custom-property name so categorization
# and reference lookup do not depend on the source syntax.
CANONICAL_PREFIX = "--bs-"

_SCSS_EXTENSIONS = (".scss",)
_CSS_EXTENSIONS = (".css",)

# =============================================================================
# Categorization tables
# =============================================================================

COLOR_KEYWORDS: tuple[str, ...] = (
    "primary",
    "secondary",
    "success",
    "danger",
    "warning",
    "info",
    "light",
    "dark",
    "color",
    "bg",
    "background",
    "border-color",
    "text",
)

# Bootstrap palette scales (gray-100, blue, red ...)
PALETTE_NAMES: tuple[str, ...] = (
    "white",
    "black",
    "gray",
    "grey",
    "red",
    "blue",
    "green",
    "yellow",
    "orange",
    "purple",
    "pink",
    "cyan",
    "teal",
    "indigo",
    "brown",
)

TYPOGRAPHY_KEYWORDS: tuple[str, ...] = ("font", "text", "line-height", "letter-spacing")
SPACING_KEYWORDS: tuple[str, ...] = ("spacer", "margin", "padding", "gap")
BORDER_KEYWORDS: tuple[str, ...] = ("border-radius", "border-width", "rounded")

# Tested in this order after the color check; first match wins.
_KEYWORD_CATEGORIES: tuple[tuple[VariableCategory, tuple[str, ...]], ...] = (
    (VariableCategory.TYPOGRAPHY, TYPOGRAPHY_KEYWORDS),
    (VariableCategory.SPACING, SPACING_KEYWORDS),
    (VariableCategory.BORDERS, BORDER_KEYWORDS),
)


def categorize_name(name: str) -> VariableCategory:
    """Classify a normalized variable name.

    Categories are tested in the order Color, Typography, Spacing, Border;
    a name matching several keyword lists goes to the first one tested
    (``border-color`` is a color, ``text-muted`` is a color, not typography).
    """
    lowered = name.lower()
    if any(keyword in lowered for keyword in COLOR_KEYWORDS) or lowered.startswith(
        PALETTE_NAMES
    ):
        return VariableCategory.COLORS
    for category, keywords in _KEYWORD_CATEGORIES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return VariableCategory.OTHER


def normalize_name(name: str) -> str:
    """Strip framework prefixes: ``--bs-primary`` / ``--primary`` / ``$primary`` -> ``primary``."""
    normalized = name.strip().lower()
    if normalized.startswith(CANONICAL_PREFIX):
        normalized = normalized[len(CANONICAL_PREFIX) :]
    elif normalized.startswith("--"):
        normalized = normalized[2:]
    return normalized.lstrip("$")


# =============================================================================
# Format detection
# =============================================================================


def coerce_format(fmt: VariableFormat | str) -> VariableFormat:
    """Turn a user-supplied format value into a VariableFormat.

    Raises:
        UnsupportedFormatError: If the value names neither CSS, SCSS nor auto.
    """
    if isinstance(fmt, VariableFormat):
        return fmt
    try:
        return VariableFormat(str(fmt).strip().lower())
    except ValueError as e:
        raise UnsupportedFormatError(
            f"Unsupported format: {fmt!r} (expected one of: auto, css, scss)"
        ) from e


def detect_format(content: str, source: str = "content") -> VariableFormat:
    """Pick CSS or SCSS for a source.

    The source extension decides first; otherwise the presence of any SCSS
    variable declaration in the content; otherwise CSS.
    """
    lowered = source.lower()
    if lowered.endswith(_SCSS_EXTENSIONS):
        return VariableFormat.SCSS
    if lowered.endswith(_CSS_EXTENSIONS):
        return VariableFormat.CSS
    if _SCSS_DECLARATION.search(content):
        return VariableFormat.SCSS
    return VariableFormat.CSS


def resolve_format(
    fmt: VariableFormat | str, content: str, source: str = "content"
) -> VariableFormat:
    """Resolve ``auto`` against a concrete source."""
    requested = coerce_format(fmt)
    if requested is VariableFormat.AUTO:
        detected = detect_format(content, source)
        logger.debug(f"Detected {detected} format for {source}")
        return detected
    return requested


# =============================================================================
# Registry
# =============================================================================


def collect_variables(content: str, fmt: VariableFormat, registry: dict[str, str]) -> int:
    """Add every declaration in ``content`` to ``registry``.

    Keys are canonical lowercase custom-property names. An existing entry is
    overwritten, which gives later sources precedence over earlier ones.

    Returns:
        Number of declarations matched.
    """
    if fmt is VariableFormat.SCSS:
        pattern = _SCSS_DECLARATION
    elif fmt is VariableFormat.CSS:
        pattern = _CSS_DECLARATION
    else:
        raise UnsupportedFormatError(f"Unsupported format: {fmt}")

    count = 0
    for match in pattern.finditer(content):
        name = match.group(1).strip()
        value = match.group(2).strip().rstrip(";")
        if fmt is VariableFormat.SCSS:
            name = f"{CANONICAL_PREFIX}{name}"
        value = value.replace("!default", "").strip()
        registry[name.lower()] = value
        count += 1

    logger.debug(f"Found {count} {fmt.value.upper()} variables")
    return count


def _warn(warnings: list[str], message: str) -> None:
    if message not in warnings:
        logger.warning(message)
        warnings.append(message)


def resolve_references(
    value: str,
    registry: dict[str, str],
    warnings: list[str],
    *,
    resolving: frozenset[str] = frozenset(),
) -> str:
    """Substitute ``$name`` and ``var(--name)`` references, recursively.

    A reference that is not in the registry, or that would recurse into a
    variable already being resolved, is left as literal text and a warning
    is appended to ``warnings``.

    Args:
        value: Raw declaration value.
        registry: Canonical name -> raw value.
        warnings: Collected diagnostics, appended to in place.
        resolving: Canonical names on the current resolution path.
    """

    def lookup(reference: str, canonical: str, kind: str) -> str:
        if canonical in resolving:
            _warn(warnings, f"Circular {kind} variable reference: {reference}")
            return reference
        if canonical in registry:
            return resolve_references(
                registry[canonical], registry, warnings, resolving=resolving | {canonical}
            )
        _warn(warnings, f"Unresolved {kind} variable reference: {reference}")
        return reference

    resolved = _SCSS_REFERENCE.sub(
        lambda m: lookup(m.group(0), f"{CANONICAL_PREFIX}{m.group(1)}".lower(), "SCSS"),
        value,
    )
    return _CSS_REFERENCE.sub(
        lambda m: lookup(m.group(0), m.group(1).lower(), "CSS"),
        resolved,
    )


def categorize_variables(
    registry: dict[str, str], warnings: list[str] | None = None
) -> RawVariableSet:
    """Resolve references for every registry entry and file it by category."""
    warnings = [] if warnings is None else warnings
    buckets: dict[VariableCategory, dict[str, str]] = {
        category: {} for category in VariableCategory
    }

    for name, value in registry.items():
        resolved = resolve_references(value, registry, warnings, resolving=frozenset({name}))
        normalized = normalize_name(name)
        category = categorize_name(normalized)
        buckets[category][normalized] = resolved
        _log_variable_discovered(category, normalized, resolved)

    variables = RawVariableSet(
        colors=buckets[VariableCategory.COLORS],
        typography=buckets[VariableCategory.TYPOGRAPHY],
        spacing=buckets[VariableCategory.SPACING],
        borders=buckets[VariableCategory.BORDERS],
        other=buckets[VariableCategory.OTHER],
        warnings=tuple(warnings),
    )
    _log_summary(variables)
    return variables


def _log_variable_discovered(category: VariableCategory, name: str, value: str) -> None:
    display = value if len(value) <= 60 else value[:57] + "..."
    logger.debug(f"  [{category.value}] {name} = {display}")


def _log_summary(variables: RawVariableSet) -> None:
    counts = variables.summary()
    logger.info(
        "Parsing complete - "
        + ", ".join(f"{name.capitalize()}: {count}" for name, count in counts.items())
    )


# =============================================================================
# Public entry points
# =============================================================================


def parse_content(
    content: str,
    fmt: VariableFormat | str = VariableFormat.AUTO,
    source: str = "content",
) -> RawVariableSet:
    """Extract variables from theme text.

    Args:
        content: CSS or SCSS text.
        fmt: Declared format, or AUTO to detect from ``source`` and content.
        source: File path or URL used for detection and messages.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format.
    """
    resolved_format = resolve_format(fmt, content, source)
    logger.debug(f"Parsing {resolved_format.value.upper()} content from {source}...")
    registry: dict[str, str] = {}
    collect_variables(content, resolved_format, registry)
    return categorize_variables(registry)


def parse_css(content: str) -> RawVariableSet:
    """Extract CSS custom properties."""
    return parse_content(content, VariableFormat.CSS)


def parse_scss(content: str) -> RawVariableSet:
    """Extract SCSS variables."""
    return parse_content(content, VariableFormat.SCSS)


def parse_file(path: str | Path, fmt: VariableFormat | str = VariableFormat.AUTO) -> RawVariableSet:
    """Extract variables from a local file.

    Raises:
        SourceNotFoundError: If the file cannot be read.
        UnsupportedFormatError: If ``fmt`` is not a known format.
    """
    content = read_file_text(path)
    return parse_content(content, fmt, str(path))


def parse_url(
    url: str,
    fmt: VariableFormat | str = VariableFormat.AUTO,
    *,
    client: httpx.Client | None = None,
) -> RawVariableSet:
    """Extract variables from a theme fetched over HTTP.

    Raises:
        SourceNotFoundError: If the URL cannot be fetched.
        UnsupportedFormatError: If ``fmt`` is not a known format.
    """
    content = fetch_url_text(url, client=client)
    return parse_content(content, fmt, url)


def parse_source(
    source: str | Path,
    fmt: VariableFormat | str = VariableFormat.AUTO,
    *,
    client: httpx.Client | None = None,
) -> RawVariableSet:
    """Extract variables from a file path or URL."""
    content = read_source_text(source, client=client)
    return parse_content(content, fmt, str(source))


def parse_files(
    sources: Iterable[str | Path],
    fmt: VariableFormat | str = VariableFormat.AUTO,
    *,
    client: httpx.Client | None = None,
) -> RawVariableSet:
    """Merge several theme sources into one variable set.

    Sources are read and collected one after another in the given order, so
    a variable declared again in a later source replaces the earlier value.
    References are resolved only once everything is collected, which lets a
    later source override a variable that an earlier one refers to.

    Raises:
        SourceNotFoundError: If any source cannot be read.
        UnsupportedFormatError: If ``fmt`` is not a known format.
    """
    source_list = list(sources)
    requested = coerce_format(fmt)
    logger.info(f"Parsing {len(source_list)} file(s)...")

    registry: dict[str, str] = {}
    for source in source_list:
        content = read_source_text(source, client=client)
        source_format = resolve_format(requested, content, str(source))
        collect_variables(content, source_format, registry)

    logger.debug(f"Collected {len(registry)} total variables")
    return categorize_variables(registry)
