"""
W3C Design Token Community Group (DTCG) tokens.json export.

Generates a DTCG-compliant tokens.json file from a TokenSet.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import make_output_error
from .ir.tokens import ColorToken, NumericToken, TokenSet, TypographyToken
from .units import format_number

# Typography key prefix -> (DTCG group, DTCG type)
_TYPOGRAPHY_GROUPS: dict[str, tuple[str, str]] = {
    "FontFamily": ("fontFamily", "fontFamily"),
    "FontSize": ("fontSize", "dimension"),
    "LineHeight": ("lineHeight", "number"),
}


def _leaf(type_: str, value: Any, purpose: str | None) -> dict[str, Any]:
    leaf: dict[str, Any] = {"$type": type_, "$value": value}
    if purpose:
        leaf["$description"] = purpose
    return leaf


def _token_name(key: str) -> str:
    """Drop the category prefix: ``Color.SurfaceVariant.Dark`` -> ``SurfaceVariant.Dark``."""
    parts = key.split(".", 1)
    return parts[1] if len(parts) == 2 else key


def _color_leaf(token: ColorToken) -> dict[str, Any]:
    leaf = _leaf("color", token.value, token.purpose)
    if token.dark_value:
        leaf["$extensions"] = {"mode": {"dark": token.dark_value}}
    return leaf


def _typography_leaf(token: TypographyToken, type_: str) -> dict[str, Any]:
    if type_ == "dimension":
        return _leaf(type_, f"{token.value}{token.unit or 'px'}", token.purpose)
    if type_ == "number":
        try:
            return _leaf(type_, float(token.value), token.purpose)
        except ValueError:
            return _leaf("string", token.value, token.purpose)
    return _leaf(type_, token.value, token.purpose)


def _dimension_leaf(token: NumericToken) -> dict[str, Any]:
    return _leaf("dimension", f"{format_number(token.value)}{token.unit}", token.purpose)


def generate_dtcg_tokens(tokens: TokenSet) -> dict[str, Any]:
    """Generate W3C DTCG format design tokens from a TokenSet.

    Groups tokens into: color, fontFamily, fontSize, lineHeight, dimension.
    Empty groups are omitted. Dark-mode color variants go under
    ``$extensions.mode.dark``.

    Args:
        tokens: Mapped tokens.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    dtcg: dict[str, Any] = {}

    # Color group
    color_group: dict[str, Any] = {}
    for key in sorted(tokens.colors):
        color_group[_token_name(key)] = _color_leaf(tokens.colors[key])
    if color_group:
        dtcg["color"] = color_group

    # Typography groups
    for key in sorted(tokens.typography):
        token = tokens.typography[key]
        prefix = key.split(".", 1)[0]
        group, type_ = _TYPOGRAPHY_GROUPS.get(prefix, ("typography", "string"))
        dtcg.setdefault(group, {})[_token_name(key)] = _typography_leaf(token, type_)

    # Dimension group (spacing + radii + border widths), nested by category
    dimension_group: dict[str, Any] = {}
    for section in (tokens.spacing, tokens.border_radius, tokens.border_width):
        for key in sorted(section):
            category = key.split(".", 1)[0]
            dimension_group.setdefault(category, {})[_token_name(key)] = _dimension_leaf(
                section[key]
            )
    if dimension_group:
        dtcg["dimension"] = dimension_group

    return dtcg


def export_dtcg_file(tokens: TokenSet, output_path: Path) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Args:
        tokens: Mapped tokens.
        output_path: Path to write tokens.json.

    Returns:
        Path to the written file.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    dtcg = generate_dtcg_tokens(tokens)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(dtcg, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise make_output_error("Failed to write DTCG tokens", str(output_path), str(e)) from e

    return output_path
