"""
CSS length conversion and locale-invariant number formatting.
"""

from __future__ import annotations

import math

# 1rem == 1em == 16px; em is not resolved against a cascade.
BASE_FONT_SIZE_PX = 16.0


def _parse_number(text: str) -> float | None:
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def finite_or_zero(value: float) -> float:
    """Clamp overflowed results (``inf``/``nan``) to 0."""
    return value if math.isfinite(value) else 0.0


def convert_to_pixels(value: str, base_font_size: float = BASE_FONT_SIZE_PX) -> float:
    """Convert a CSS length to pixels.

    ``px`` values pass through, ``rem`` and ``em`` are multiplied by
    ``base_font_size``, a unitless number is taken as pixels. Anything that
    does not parse yields 0.

    >>> convert_to_pixels("1.5rem")
    24.0
    """
    text = value.strip().lower()

    if text.endswith("px"):
        number = _parse_number(text[:-2])
        return number if number is not None else 0.0

    if text.endswith("rem"):
        number = _parse_number(text[:-3])
        return finite_or_zero(number * base_font_size) if number is not None else 0.0

    if text.endswith("em"):
        number = _parse_number(text[:-2])
        return finite_or_zero(number * base_font_size) if number is not None else 0.0

    number = _parse_number(text)
    return number if number is not None else 0.0


def format_number(value: float) -> str:
    """Render a number with a period separator and no grouping.

    Integral values drop the fractional part (``16.0`` -> ``"16"``), others
    use the shortest round-tripping form (``5.6``). Non-finite values render
    as ``"0"``.
    """
    if value == 0 or not math.isfinite(value):
        return "0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
