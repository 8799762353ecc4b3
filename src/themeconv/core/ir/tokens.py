"""
Design token IR types.

Tokens are the semantic output of the mapper: dot-namespaced keys such as
``Color.Primary`` or ``Radius.Medium`` with a normalized value. A TokenSet
groups them into the five categories the emitter renders.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Options
# =============================================================================


class DarkModeStrategy(StrEnum):
    """How dark-mode color variants are produced."""

    AUTO = "auto"  # derived by darkening/lightening the light value
    MANUAL = "manual"  # supplied by hand later, never generated
    NONE = "none"  # single theme only


DEFAULT_NAMESPACE = "ThemeConv.Resources"


class ConversionOptions(BaseModel):
    """Options shared by the mapper and the emitter."""

    model_config = ConfigDict(frozen=True)

    dark_mode_strategy: DarkModeStrategy = Field(
        default=DarkModeStrategy.AUTO,
        description="Dark mode generation strategy",
    )
    include_comments: bool = Field(
        default=True,
        description="Emit purpose and dark-mode comments in generated markup",
    )
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Label for the generated resources (cosmetic only)",
    )


# =============================================================================
# Tokens
# =============================================================================


class ColorToken(BaseModel):
    """A color token with an optional dark-mode variant."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["color"] = "color"
    key: str
    value: str
    dark_value: str | None = None
    purpose: str | None = None


class TypographyToken(BaseModel):
    """A font family, font size or line-height token.

    The value stays a string: font sizes are stored as invariant-formatted
    numbers, font families as names.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["typography"] = "typography"
    key: str
    value: str
    unit: str | None = None
    purpose: str | None = None


class NumericToken(BaseModel):
    """A spacing, radius or border-width token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["numeric"] = "numeric"
    key: str
    value: float
    unit: str = "px"
    purpose: str | None = None


Token = Annotated[ColorToken | TypographyToken | NumericToken, Field(discriminator="kind")]


# =============================================================================
# Token set
# =============================================================================


class TokenSet(BaseModel):
    """All tokens produced for one theme."""

    model_config = ConfigDict(frozen=True)

    colors: dict[str, ColorToken] = Field(default_factory=dict)
    typography: dict[str, TypographyToken] = Field(default_factory=dict)
    spacing: dict[str, NumericToken] = Field(default_factory=dict)
    border_radius: dict[str, NumericToken] = Field(default_factory=dict)
    border_width: dict[str, NumericToken] = Field(default_factory=dict)

    def iter_tokens(self) -> Iterator[ColorToken | TypographyToken | NumericToken]:
        """Yield every token, category by category."""
        yield from self.colors.values()
        yield from self.typography.values()
        yield from self.spacing.values()
        yield from self.border_radius.values()
        yield from self.border_width.values()

    def keys(self) -> list[str]:
        return [token.key for token in self.iter_tokens()]

    @property
    def is_empty(self) -> bool:
        return not any(
            (self.colors, self.typography, self.spacing, self.border_radius, self.border_width)
        )

    def counts(self) -> dict[str, int]:
        return {
            "colors": len(self.colors),
            "typography": len(self.typography),
            "spacing": len(self.spacing),
            "border_radius": len(self.border_radius),
            "border_width": len(self.border_width),
        }
