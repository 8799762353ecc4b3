"""
Map extracted theme variables onto the semantic token schema.

All naming rules live in the module-level tables below; the mapping
functions only look values up and convert them. Mapping is total: unknown
names are dropped and unparseable lengths become 0.
"""

from __future__ import annotations

import logging
import re

from .ir.tokens import (
    ColorToken,
    ConversionOptions,
    DarkModeStrategy,
    NumericToken,
    TokenSet,
    TypographyToken,
)
from .ir.variables import RawVariableSet
from .units import BASE_FONT_SIZE_PX, convert_to_pixels, finite_or_zero, format_number

logger = logging.getLogger(__name__)

_HEX_RGB = re.compile(r"^#[0-9a-fA-F]{6}$")

# =============================================================================
# Mapping tables
# =============================================================================

# (raw variable name, token key, purpose)
COLOR_TOKEN_MAP: tuple[tuple[str, str, str], ...] = (
    ("primary", "Color.Primary", "Primary brand color"),
    ("secondary", "Color.Secondary", "Secondary brand color"),
    ("success", "Color.Success", "Success state color"),
    ("danger", "Color.Error", "Error/danger state color"),
    ("warning", "Color.Warning", "Warning state color"),
    ("info", "Color.Info", "Info state color"),
    ("light", "Color.Surface", "Light surface color"),
    ("dark", "Color.SurfaceVariant.Dark", "Dark surface variant"),
    ("body-bg", "Color.Background", "Body background color"),
    ("body-color", "Color.OnBackground", "Body text color"),
    ("border-color", "Color.Outline", "Border color"),
)

# Font family tokens: (token key, [(raw name, purpose), ...]) - first raw name present wins
FONT_FAMILY_MAP: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "FontFamily.Default",
        (
            ("font-family-base", "Default font family"),
            ("headings-font-family", "Default font family (from headings)"),
        ),
    ),
    ("FontFamily.Monospace", (("font-family-monospace", "Monospace font family"),)),
)

FONT_SIZE_VARIABLE = ("font-size-base", "FontSize.Body", "Base body font size")
LINE_HEIGHT_VARIABLE = ("line-height-base", "LineHeight.Default", "Default line height")

SYSTEM_FONT_ALIASES: frozenset[str] = frozenset(
    {"-apple-system", "system-ui", "BlinkMacSystemFont"}
)
SYSTEM_FONT = "System"

SPACER_VARIABLE = "spacer"

# (token key, multiplier of the base spacer, purpose)
SPACING_SCALE: tuple[tuple[str, float, str], ...] = (
    ("Spacing.ExtraSmall", 0.25, "Extra small spacing"),
    ("Spacing.Small", 0.5, "Small spacing"),
    ("Spacing.Medium", 1.0, "Medium spacing (base)"),
    ("Spacing.Large", 1.5, "Large spacing"),
    ("Spacing.ExtraLarge", 3.0, "Extra large spacing"),
)

# (token key, button variable, generic variable, tier label)
RADIUS_TIERS: tuple[tuple[str, str, str, str], ...] = (
    ("Radius.Medium", "btn-border-radius", "border-radius", "Medium"),
    ("Radius.Small", "btn-border-radius-sm", "border-radius-sm", "Small"),
    ("Radius.Large", "btn-border-radius-lg", "border-radius-lg", "Large"),
)

RADIUS_NAME_KEYWORD = "border-radius"

# Keys for extra radius variables: every keyword in the tuple must occur in
# the raw name. Tested in order; the last rule always matches.
RADIUS_KEY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("breadcrumb",), "Radius.Breadcrumb"),
    (("card",), "Radius.Card"),
    (("btn", "sm"), "Radius.ButtonSmall"),
    (("btn", "lg"), "Radius.ButtonLarge"),
    (("btn",), "Radius.Button"),
    (("sm",), "Radius.Small"),
    (("lg",), "Radius.Large"),
    ((), "Radius.Default"),
)

# Extra radii within this distance of an existing radius token are skipped.
RADIUS_DUPLICATE_TOLERANCE_PX = 0.1

BORDER_WIDTH_VARIABLE = ("border-width", "BorderWidth.Default", "Default border width")

# =============================================================================
# Value helpers
# =============================================================================


def normalize_color(value: str) -> str:
    """Upper-case hex colors; rgb()/rgba(), named colors and the rest pass through."""
    value = value.strip()
    if value.startswith("#"):
        return value.upper()
    return value


def brightness(hex_color: str) -> int:
    """Perceived brightness (0-255) of a ``#RRGGBB`` color."""
    r, g, b = (int(hex_color[i : i + 2], 16) for i in (1, 3, 5))
    return (r * 299 + g * 587 + b * 114) // 1000


def generate_dark_color(color: str) -> str | None:
    """Derive a dark-mode variant of a ``#RRGGBB`` color.

    Bright colors (brightness > 128) are darkened by 0.7, dark colors
    lightened by 1.3, each channel truncated and clamped to 0..255. Any other
    color form returns None.
    """
    if not _HEX_RGB.match(color):
        return None

    factor = 0.7 if brightness(color) > 128 else 1.3
    channels = [int(color[i : i + 2], 16) for i in (1, 3, 5)]
    r, g, b = (min(255, max(0, int(channel * factor))) for channel in channels)
    return f"#{r:02X}{g:02X}{b:02X}"


def convert_font_family(css_font: str) -> str:
    """First entry of a CSS font stack, unquoted, with system aliases collapsed."""
    first = css_font.split(",")[0].strip().strip("'\"")
    if first in SYSTEM_FONT_ALIASES:
        return SYSTEM_FONT
    return first


def radius_token_key(raw_name: str) -> str:
    """Token key for an extra border-radius variable, from keywords in its name."""
    lowered = raw_name.lower()
    for keywords, key in RADIUS_KEY_RULES:
        if all(keyword in lowered for keyword in keywords):
            return key
    return "Radius.Default"


def _numeric(key: str, value: float, purpose: str) -> NumericToken:
    return NumericToken(key=key, value=value, unit="px", purpose=purpose)


# =============================================================================
# Category mappers
# =============================================================================


def map_colors(colors: dict[str, str], options: ConversionOptions) -> dict[str, ColorToken]:
    tokens: dict[str, ColorToken] = {}
    generate_dark = options.dark_mode_strategy is DarkModeStrategy.AUTO

    for raw_name, key, purpose in COLOR_TOKEN_MAP:
        if raw_name not in colors:
            continue
        value = normalize_color(colors[raw_name])
        tokens[key] = ColorToken(
            key=key,
            value=value,
            dark_value=generate_dark_color(value) if generate_dark else None,
            purpose=purpose,
        )

    return tokens


def map_typography(typography: dict[str, str]) -> dict[str, TypographyToken]:
    tokens: dict[str, TypographyToken] = {}

    for key, candidates in FONT_FAMILY_MAP:
        for raw_name, purpose in candidates:
            if raw_name in typography:
                tokens[key] = TypographyToken(
                    key=key, value=convert_font_family(typography[raw_name]), purpose=purpose
                )
                break

    raw_name, key, purpose = FONT_SIZE_VARIABLE
    if raw_name in typography:
        size_px = convert_to_pixels(typography[raw_name], BASE_FONT_SIZE_PX)
        tokens[key] = TypographyToken(
            key=key, value=format_number(size_px), unit="px", purpose=purpose
        )

    raw_name, key, purpose = LINE_HEIGHT_VARIABLE
    if raw_name in typography:
        tokens[key] = TypographyToken(key=key, value=typography[raw_name], purpose=purpose)

    return tokens


def map_spacing(spacing: dict[str, str]) -> dict[str, NumericToken]:
    if SPACER_VARIABLE not in spacing:
        return {}

    base = convert_to_pixels(spacing[SPACER_VARIABLE], BASE_FONT_SIZE_PX)
    return {
        key: _numeric(key, finite_or_zero(base * multiplier), purpose)
        for key, multiplier, purpose in SPACING_SCALE
    }


def map_border_radius(borders: dict[str, str]) -> dict[str, NumericToken]:
    tokens: dict[str, NumericToken] = {}

    for key, button_name, generic_name, tier in RADIUS_TIERS:
        if button_name in borders:
            value = convert_to_pixels(borders[button_name], BASE_FONT_SIZE_PX)
            tokens[key] = _numeric(key, value, f"{tier} corner radius (from button)")
        elif generic_name in borders:
            value = convert_to_pixels(borders[generic_name], BASE_FONT_SIZE_PX)
            tokens[key] = _numeric(key, value, f"{tier} corner radius")

    for raw_name, raw_value in borders.items():
        if RADIUS_NAME_KEYWORD not in raw_name.lower():
            continue
        value = convert_to_pixels(raw_value, BASE_FONT_SIZE_PX)
        if any(
            abs(existing.value - value) < RADIUS_DUPLICATE_TOLERANCE_PX
            for existing in tokens.values()
        ):
            continue
        key = radius_token_key(raw_name)
        tokens[key] = _numeric(key, value, f"Corner radius from {raw_name}")

    return tokens


def map_border_width(borders: dict[str, str]) -> dict[str, NumericToken]:
    raw_name, key, purpose = BORDER_WIDTH_VARIABLE
    if raw_name not in borders:
        return {}
    return {key: _numeric(key, convert_to_pixels(borders[raw_name], BASE_FONT_SIZE_PX), purpose)}


# =============================================================================
# Entry point
# =============================================================================


def map_tokens(variables: RawVariableSet, options: ConversionOptions | None = None) -> TokenSet:
    """Map extracted variables to a TokenSet.

    Args:
        variables: Output of the extractor.
        options: Conversion options; only the dark-mode strategy matters here.

    Returns:
        TokenSet with colors, typography, spacing, border radius and border width.
    """
    options = options or ConversionOptions()

    tokens = TokenSet(
        colors=map_colors(variables.colors, options),
        typography=map_typography(variables.typography),
        spacing=map_spacing(variables.spacing),
        border_radius=map_border_radius(variables.borders),
        border_width=map_border_width(variables.borders),
    )

    counts = tokens.counts()
    logger.debug(
        "Mapped tokens - " + ", ".join(f"{name}: {count}" for name, count in counts.items())
    )
    return tokens
