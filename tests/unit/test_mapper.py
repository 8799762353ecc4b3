"""Tests for variable-to-token mapping."""

import math
from pathlib import Path

import pytest

from themeconv.core.emitter import generate_tokens_document
from themeconv.core.extractor import parse_file, parse_scss
from themeconv.core.ir import ConversionOptions, DarkModeStrategy, RawVariableSet
from themeconv.core.mapper import (
    brightness,
    convert_font_family,
    generate_dark_color,
    map_border_radius,
    map_border_width,
    map_colors,
    map_spacing,
    map_tokens,
    map_typography,
    normalize_color,
    radius_token_key,
)

# =============================================================================
# Colors
# =============================================================================


class TestColorHelpers:
    def test_normalize_color(self):
        assert normalize_color("#0d6efd") == "#0D6EFD"
        assert normalize_color("  #abc ") == "#ABC"
        assert normalize_color("rgb(1, 2, 3)") == "rgb(1, 2, 3)"
        assert normalize_color("red") == "red"

    def test_brightness(self):
        assert brightness("#000000") == 0
        assert brightness("#FFFFFF") == 255

    @pytest.mark.parametrize(
        "light,dark",
        [
            ("#375A7F", "#4775A5"),
            ("#FFC107", "#B28704"),
            ("#0D6EFD", "#108FFF"),
        ],
    )
    def test_generate_dark_color(self, light, dark):
        assert generate_dark_color(light) == dark

    @pytest.mark.parametrize("color", ["#FFF", "rgb(0, 0, 0)", "red", "#12345G", ""])
    def test_dark_color_only_for_six_digit_hex(self, color):
        assert generate_dark_color(color) is None

    @pytest.mark.parametrize("color", ["#F8F9FA", "#FFC107", "#DEE2E6", "#FFFFFF"])
    def test_bright_colors_get_darker(self, color):
        assert brightness(generate_dark_color(color)) < brightness(color)

    @pytest.mark.parametrize("color", ["#375A7F", "#303030", "#6C757D", "#212529"])
    def test_dark_colors_get_lighter(self, color):
        assert brightness(generate_dark_color(color)) > brightness(color)


class TestMapColors:
    def test_semantic_names(self):
        colors = {
            "primary": "#0d6efd",
            "danger": "#dc3545",
            "light": "#f8f9fa",
            "dark": "#212529",
            "body-bg": "#fff",
            "body-color": "#212529",
            "border-color": "#dee2e6",
        }
        tokens = map_colors(colors, ConversionOptions())

        assert set(tokens) == {
            "Color.Primary",
            "Color.Error",
            "Color.Surface",
            "Color.SurfaceVariant.Dark",
            "Color.Background",
            "Color.OnBackground",
            "Color.Outline",
        }
        assert tokens["Color.Primary"].value == "#0D6EFD"
        assert tokens["Color.Primary"].dark_value == "#108FFF"
        assert tokens["Color.Primary"].purpose == "Primary brand color"
        # three-digit hex has no dark variant
        assert tokens["Color.Background"].value == "#FFF"
        assert tokens["Color.Background"].dark_value is None

    def test_unknown_names_are_dropped(self):
        tokens = map_colors({"gray-100": "#f8f9fa", "blue": "#0d6efd"}, ConversionOptions())
        assert tokens == {}

    @pytest.mark.parametrize("strategy", [DarkModeStrategy.NONE, DarkModeStrategy.MANUAL])
    def test_no_dark_values_unless_auto(self, strategy):
        options = ConversionOptions(dark_mode_strategy=strategy)
        tokens = map_colors({"primary": "#0d6efd", "dark": "#212529"}, options)

        assert all(token.dark_value is None for token in tokens.values())


# =============================================================================
# Typography
# =============================================================================


class TestTypography:
    @pytest.mark.parametrize(
        "stack,expected",
        [
            ('"Inter", sans-serif', "Inter"),
            ("Lato, -apple-system, sans-serif", "Lato"),
            ("system-ui, -apple-system, sans-serif", "System"),
            ("-apple-system, BlinkMacSystemFont", "System"),
            ("BlinkMacSystemFont", "System"),
            ("'Open Sans'", "Open Sans"),
        ],
    )
    def test_convert_font_family(self, stack, expected):
        assert convert_font_family(stack) == expected

    def test_map_typography(self):
        tokens = map_typography(
            {
                "font-family-base": "Lato, sans-serif",
                "font-family-monospace": "SFMono-Regular, monospace",
                "font-size-base": "0.9375rem",
                "line-height-base": "1.5",
            }
        )

        assert tokens["FontFamily.Default"].value == "Lato"
        assert tokens["FontFamily.Monospace"].value == "SFMono-Regular"
        assert tokens["FontSize.Body"].value == "15"
        assert tokens["FontSize.Body"].unit == "px"
        assert tokens["LineHeight.Default"].value == "1.5"

    def test_headings_font_is_fallback(self):
        tokens = map_typography({"headings-font-family": "Georgia, serif"})
        assert tokens["FontFamily.Default"].value == "Georgia"

    def test_base_font_preferred_over_headings(self):
        tokens = map_typography(
            {"headings-font-family": "Georgia, serif", "font-family-base": "Inter"}
        )
        assert tokens["FontFamily.Default"].value == "Inter"


# =============================================================================
# Spacing and borders
# =============================================================================


class TestSpacing:
    def test_scale_from_spacer(self):
        tokens = map_spacing({"spacer": "1rem"})

        assert {key: token.value for key, token in tokens.items()} == {
            "Spacing.ExtraSmall": 4.0,
            "Spacing.Small": 8.0,
            "Spacing.Medium": 16.0,
            "Spacing.Large": 24.0,
            "Spacing.ExtraLarge": 48.0,
        }
        assert all(token.unit == "px" for token in tokens.values())

    def test_no_spacer_no_tokens(self):
        assert map_spacing({"gap": "1rem"}) == {}

    def test_overflowing_scale_gives_zero(self):
        tokens = map_spacing({"spacer": "1e308px"})

        assert tokens["Spacing.Medium"].value == 1e308
        assert tokens["Spacing.Large"].value == 0.0
        assert tokens["Spacing.ExtraLarge"].value == 0.0
        assert all(math.isfinite(token.value) for token in tokens.values())

    def test_huge_spacer_emits_no_infinity(self):
        markup = generate_tokens_document(map_tokens(parse_scss("$spacer: 1e308px;")))

        assert "inf" not in markup
        assert '<x:Double x:Key="Spacing.ExtraLarge">0</x:Double>' in markup

    def test_unparseable_spacer_gives_zero(self):
        tokens = map_spacing({"spacer": "calc(1rem * 2)"})
        assert all(token.value == 0.0 for token in tokens.values())


class TestBorderRadius:
    def test_button_radii_preferred(self):
        tokens = map_border_radius(
            {
                "border-radius": "0.375rem",
                "border-radius-sm": "0.25rem",
                "border-radius-lg": "0.5rem",
                "btn-border-radius": "0.25rem",
            }
        )

        assert tokens["Radius.Medium"].value == 4.0
        assert tokens["Radius.Medium"].purpose == "Medium corner radius (from button)"
        assert tokens["Radius.Small"].value == 4.0
        assert tokens["Radius.Small"].purpose == "Small corner radius"
        assert tokens["Radius.Large"].value == 8.0
        # the generic 6px radius is not a duplicate of any tier
        assert tokens["Radius.Default"].value == 6.0
        assert tokens["Radius.Default"].purpose == "Corner radius from border-radius"

    def test_duplicate_values_are_skipped(self):
        tokens = map_border_radius(
            {"border-radius": "0.5rem", "card-border-radius": "8.05px"}
        )
        assert set(tokens) == {"Radius.Medium"}

    def test_button_radius_beats_generic(self):
        tokens = map_border_radius({"border-radius": "0.375rem", "btn-border-radius": "0.5rem"})

        assert tokens["Radius.Medium"].value == 8.0
        assert tokens["Radius.Medium"].purpose == "Medium corner radius (from button)"
        assert tokens["Radius.Default"].value == 6.0

    def test_extra_radius_keys(self):
        tokens = map_border_radius(
            {"card-border-radius": "12px", "breadcrumb-border-radius": "3px"}
        )
        assert tokens["Radius.Card"].value == 12.0
        assert tokens["Radius.Breadcrumb"].value == 3.0

    @pytest.mark.parametrize(
        "name,key",
        [
            ("breadcrumb-border-radius", "Radius.Breadcrumb"),
            ("card-border-radius", "Radius.Card"),
            ("btn-border-radius-sm", "Radius.ButtonSmall"),
            ("btn-border-radius-lg", "Radius.ButtonLarge"),
            ("btn-border-radius", "Radius.Button"),
            ("border-radius-sm", "Radius.Small"),
            ("border-radius-lg", "Radius.Large"),
            ("border-radius-xl", "Radius.Default"),
        ],
    )
    def test_radius_token_key(self, name, key):
        assert radius_token_key(name) == key

    def test_border_width(self):
        tokens = map_border_width({"border-width": "1px", "border-radius": "4px"})
        assert set(tokens) == {"BorderWidth.Default"}
        assert tokens["BorderWidth.Default"].value == 1.0

    def test_no_border_width(self):
        assert map_border_width({"border-radius": "4px"}) == {}


# =============================================================================
# Whole theme
# =============================================================================


class TestMapTokens:
    def test_darkly(self, darkly_scss: Path):
        tokens = map_tokens(parse_file(darkly_scss))

        assert tokens.colors["Color.Primary"].value == "#375A7F"
        assert tokens.colors["Color.Primary"].dark_value == "#4775A5"
        assert tokens.colors["Color.SurfaceVariant.Dark"].value == "#303030"
        assert tokens.typography["FontFamily.Default"].value == "Lato"
        assert tokens.typography["FontSize.Body"].value == "15"
        assert tokens.border_radius["Radius.Medium"].value == 4.0
        assert tokens.border_width["BorderWidth.Default"].value == 1.0

    def test_bootstrap_css(self, bootstrap_css: Path):
        tokens = map_tokens(parse_file(bootstrap_css))

        assert tokens.typography["FontFamily.Default"].value == "System"
        assert tokens.typography["FontSize.Body"].value == "16"
        assert tokens.spacing["Spacing.Medium"].value == 16.0
        assert tokens.border_radius["Radius.Medium"].value == 6.0
        assert tokens.border_radius["Radius.Small"].value == 4.0
        assert tokens.border_radius["Radius.Large"].value == 8.0
        # xl and pill both fall back to Radius.Default; the later one wins
        assert tokens.border_radius["Radius.Default"].value == 800.0

    def test_empty_variables(self):
        tokens = map_tokens(RawVariableSet())
        assert tokens.is_empty
        assert tokens.keys() == []

    def test_idempotent(self, darkly_scss: Path):
        variables = parse_file(darkly_scss)
        options = ConversionOptions()
        assert map_tokens(variables, options) == map_tokens(variables, options)

    def test_minimal_theme(self):
        tokens = map_tokens(
            parse_scss("$primary: #ff6b6b;\n$spacer: 0.5rem;\n$border-radius: 8px;")
        )

        assert tokens.counts() == {
            "colors": 1,
            "typography": 0,
            "spacing": 5,
            "border_radius": 1,
            "border_width": 0,
        }
        assert tokens.spacing["Spacing.ExtraSmall"].value == 2.0
        assert tokens.border_radius["Radius.Medium"].value == 8.0
