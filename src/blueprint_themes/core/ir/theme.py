"""
Theme IR types: the pipeline's terminal artifact and contrast findings.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .color import ColorRef, ColorScale, DarkModeAdjustments
from .frozen import FrozenMap
from .tokens import DesignTokens

# A semantic token value: a colour reference or a literal CSS value.
ThemeValue = ColorRef | str


class ThemeConfig(BaseModel):
    """Fully merged theme, immutable once built.

    ``themes`` maps a variant name (``light``, ``dark``, ...) to its semantic
    tokens. ``theme_metadata`` records which plugin last registered each variant.
    ``dark_mode`` holds the adjustments the colour scales were generated with.
    """

    model_config = ConfigDict(frozen=True)

    colors: FrozenMap[str, ColorScale]
    themes: FrozenMap[str, FrozenMap[str, ThemeValue]]
    design_tokens: DesignTokens
    theme_metadata: FrozenMap[str, str] = Field(default_factory=dict, validate_default=True)
    dark_mode: DarkModeAdjustments | None = None

    def variant(self, name: str) -> Mapping[str, ThemeValue] | None:
        return self.themes.get(name)


class ContrastViolation(BaseModel):
    """A semantic pairing whose contrast is below the required ratio."""

    model_config = ConfigDict(frozen=True)

    token: str
    foreground: str
    background: str
    ratio: float
    required: float

    def __str__(self) -> str:
        return (
            f"{self.token}: {self.foreground} on {self.background} "
            f"is {self.ratio:.2f}:1 (requires {self.required}:1)"
        )
