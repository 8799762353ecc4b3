"""
Raw theme variable IR types.

A RawVariableSet is what the extractor hands to the mapper: every variable
declared in the theme source, with cross-references already substituted,
partitioned into five categories by name.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class VariableFormat(StrEnum):
    """Declaration syntax of a theme source."""

    AUTO = "auto"
    CSS = "css"
    SCSS = "scss"


class VariableCategory(StrEnum):
    """Category a raw variable is filed under."""

    COLORS = "colors"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    BORDERS = "borders"
    OTHER = "other"


# =============================================================================
# Variable set
# =============================================================================


class RawVariableSet(BaseModel):
    """Extracted theme variables, keyed by normalized name.

    Keys are lowercase and hyphen separated with the ``--bs-``, ``--`` and
    ``$`` prefixes removed, so ``--bs-primary`` and ``$primary`` both end up
    as ``primary``.
    """

    model_config = ConfigDict(frozen=True)

    colors: dict[str, str] = Field(default_factory=dict, description="Color variables")
    typography: dict[str, str] = Field(
        default_factory=dict, description="Font family, size and line-height variables"
    )
    spacing: dict[str, str] = Field(
        default_factory=dict, description="Spacer, margin, padding and gap variables"
    )
    borders: dict[str, str] = Field(
        default_factory=dict, description="Border radius and width variables"
    )
    other: dict[str, str] = Field(default_factory=dict, description="Everything else")
    warnings: tuple[str, ...] = Field(
        default=(), description="Recoverable diagnostics (unresolved references)"
    )

    def get(self, category: VariableCategory) -> dict[str, str]:
        """Return the mapping for one category."""
        return getattr(self, category.value)

    @property
    def total(self) -> int:
        return sum(len(self.get(category)) for category in VariableCategory)

    def summary(self) -> dict[str, int]:
        """Per-category variable counts, in category order."""
        return {category.value: len(self.get(category)) for category in VariableCategory}
