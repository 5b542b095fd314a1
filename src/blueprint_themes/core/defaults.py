"""
Default design tokens.

``DEFAULT_DESIGN_TOKENS`` is the single immutable fallback for every token
category a theme does not declare. It is passed into the merge step
explicitly (``ThemeBase.get_design_tokens(defaults)``,
``ThemeBuilder(defaults=...)``) so tests can substitute alternate defaults.
"""

from __future__ import annotations

from typing import Final

from .ir import (
    AccessibilityConfig,
    DesignTokens,
    FocusConfig,
    MinimumContrast,
    MotionConfig,
    SpacingConfig,
    TypographyConfig,
)

# =============================================================================
# Categories
# =============================================================================

DEFAULT_SPACING: Final = SpacingConfig(
    base=4,
    scale=(0, 0.5, 1, 1.5, 2, 2.5, 3, 4, 5, 6, 8, 10, 12, 16, 20, 24),
    semantic={"2xs": 1, "xs": 2, "sm": 3, "md": 4, "lg": 6, "xl": 8, "2xl": 10},
)

DEFAULT_RADIUS: Final[dict[str, int]] = {
    "none": 0,
    "sm": 2,
    "md": 4,
    "lg": 8,
    "xl": 12,
    "2xl": 16,
    "3xl": 24,
    "full": 9999,
}

DEFAULT_TYPOGRAPHY: Final = TypographyConfig(
    font_families={
        "sans": (
            '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, '
            '"Helvetica Neue", Arial, sans-serif'
        ),
        "mono": '"SF Mono", Monaco, "Cascadia Code", "Courier New", monospace',
    },
    font_sizes={
        "xs": 12,
        "sm": 14,
        "base": 16,
        "lg": 18,
        "xl": 20,
        "2xl": 24,
        "3xl": 30,
        "4xl": 36,
    },
    line_heights={
        "none": 1,
        "tight": 1.25,
        "snug": 1.375,
        "normal": 1.5,
        "relaxed": 1.625,
        "loose": 2,
        "heading-sm": 1.3,
        "heading-md": 1.25,
        "heading-lg": 1.2,
    },
    font_weights={"light": 300, "normal": 400, "medium": 500, "semibold": 600, "bold": 700},
)

DEFAULT_MOTION: Final = MotionConfig(
    durations={"instant": 0, "fast": 150, "normal": 300, "slow": 500},
    easings={
        "linear": "linear",
        "in": "cubic-bezier(0.4, 0, 1, 1)",
        "out": "cubic-bezier(0, 0, 0.2, 1)",
        "in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
        "bounce": "cubic-bezier(0.68, -0.55, 0.265, 1.55)",
    },
    transitions={
        "fast": "150ms cubic-bezier(0, 0, 0.2, 1)",
        "base": "300ms cubic-bezier(0.4, 0, 0.2, 1)",
        "slow": "500ms cubic-bezier(0.4, 0, 0.2, 1)",
        "bounce": "500ms cubic-bezier(0.68, -0.55, 0.265, 1.55)",
    },
)

DEFAULT_OPACITY: Final[dict[str, float]] = {
    "disabled": 0.5,
    "hover": 0.8,
    "overlay": 0.6,
    "subtle": 0.4,
}

DEFAULT_BREAKPOINTS: Final[dict[str, str]] = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

DEFAULT_FOCUS: Final = FocusConfig(width=2, offset=2, style="solid")

DEFAULT_ACCESSIBILITY: Final = AccessibilityConfig(
    enforce_wcag=False,
    minimum_contrast=MinimumContrast(text=4.5, text_large=3.0, ui=3.0, interactive=3.0, focus=3.0),
    color_blind_safe=True,
    min_hue_difference=60,
    high_contrast=True,
)

DEFAULT_Z_INDEX: Final[dict[str, int]] = {
    "base": 0,
    "dropdown": 1000,
    "sticky": 1020,
    "overlay": 1030,
    "modal": 1040,
    "popover": 1060,
    "tooltip": 1080,
}

# =============================================================================
# Aggregate
# =============================================================================

DEFAULT_DESIGN_TOKENS: Final = DesignTokens(
    spacing=DEFAULT_SPACING,
    radius=DEFAULT_RADIUS,
    typography=DEFAULT_TYPOGRAPHY,
    motion=DEFAULT_MOTION,
    opacity=DEFAULT_OPACITY,
    breakpoints=DEFAULT_BREAKPOINTS,
    focus=DEFAULT_FOCUS,
    accessibility=DEFAULT_ACCESSIBILITY,
    z_index=DEFAULT_Z_INDEX,
)
