"""
Design-token IR types.

Each category is a fixed-shape record. ``DesignTokens`` has no field defaults
on purpose: the one default token set lives in ``core.defaults`` and is passed
explicitly wherever it is needed.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .frozen import FrozenMap

# Token categories in declaration order.
TOKEN_CATEGORIES: Final[tuple[str, ...]] = (
    "spacing",
    "radius",
    "typography",
    "motion",
    "opacity",
    "breakpoints",
    "focus",
    "accessibility",
    "z_index",
)


class SpacingConfig(BaseModel):
    """Spacing scale as multiples of a base unit in pixels."""

    model_config = ConfigDict(frozen=True)

    base: float = Field(gt=0, description="Base unit in pixels")
    scale: tuple[float, ...]
    semantic: FrozenMap[str, float] | None = None


class TypographyConfig(BaseModel):
    """Font stacks, sizes, line heights and weights."""

    model_config = ConfigDict(frozen=True)

    font_families: FrozenMap[str, str]
    font_sizes: FrozenMap[str, int]
    line_heights: FrozenMap[str, float]
    font_weights: FrozenMap[str, int]


class MotionConfig(BaseModel):
    """Durations (ms), easing curves and composed transitions."""

    model_config = ConfigDict(frozen=True)

    durations: FrozenMap[str, int]
    easings: FrozenMap[str, str]
    transitions: FrozenMap[str, str]


class FocusConfig(BaseModel):
    """Focus ring geometry."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=0)
    offset: int
    style: str


class MinimumContrast(BaseModel):
    """Minimum contrast ratios by element kind."""

    model_config = ConfigDict(frozen=True)

    text: float = Field(ge=1.0, le=21.0)
    text_large: float = Field(ge=1.0, le=21.0)
    ui: float = Field(ge=1.0, le=21.0)
    interactive: float = Field(ge=1.0, le=21.0)
    focus: float = Field(ge=1.0, le=21.0)


class AccessibilityConfig(BaseModel):
    """Accessibility policy carried alongside the tokens."""

    model_config = ConfigDict(frozen=True)

    enforce_wcag: bool
    minimum_contrast: MinimumContrast
    color_blind_safe: bool
    min_hue_difference: float = Field(ge=0.0, le=180.0)
    high_contrast: bool


class DesignTokens(BaseModel):
    """One complete set of design tokens, every category present."""

    model_config = ConfigDict(frozen=True)

    spacing: SpacingConfig
    radius: FrozenMap[str, int]
    typography: TypographyConfig
    motion: MotionConfig
    opacity: FrozenMap[str, float]
    breakpoints: FrozenMap[str, str]
    focus: FocusConfig
    accessibility: AccessibilityConfig
    z_index: FrozenMap[str, int]
