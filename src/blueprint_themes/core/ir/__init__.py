"""
Intermediate representation for the theme pipeline.

All models are frozen pydantic models with read-only mapping fields; nothing
downstream of the builder can mutate them.
"""

from .color import (
    CANONICAL_STEPS,
    MAX_CHROMA,
    ColorDefinition,
    ColorMetadata,
    ColorRef,
    ColorScale,
    DarkModeAdjustments,
    GeneratedColorStep,
    OKLCHColor,
)
from .frozen import FrozenMap, freeze_mapping
from .plugin import PluginDependency, PluginMetadata
from .theme import ContrastViolation, ThemeConfig, ThemeValue
from .tokens import (
    TOKEN_CATEGORIES,
    AccessibilityConfig,
    DesignTokens,
    FocusConfig,
    MinimumContrast,
    MotionConfig,
    SpacingConfig,
    TypographyConfig,
)

__all__ = [
    # Colour
    "CANONICAL_STEPS",
    "MAX_CHROMA",
    "ColorDefinition",
    "ColorMetadata",
    "ColorRef",
    "ColorScale",
    "DarkModeAdjustments",
    "GeneratedColorStep",
    "OKLCHColor",
    # Read-only mappings
    "FrozenMap",
    "freeze_mapping",
    # Plugin
    "PluginDependency",
    "PluginMetadata",
    # Theme
    "ContrastViolation",
    "ThemeConfig",
    "ThemeValue",
    # Tokens
    "TOKEN_CATEGORIES",
    "AccessibilityConfig",
    "DesignTokens",
    "FocusConfig",
    "MinimumContrast",
    "MotionConfig",
    "SpacingConfig",
    "TypographyConfig",
]
