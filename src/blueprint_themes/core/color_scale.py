"""
Colour scale generation.

Expands one perceptual ``ColorDefinition`` into concrete steps:

- lightness comes from a fixed curve keyed by step, independent of the
  source lightness, so every scale spans the same perceptual range;
- hue is held exactly at ``source.h``;
- chroma is ``source.c`` times a per-step multiplier that peaks in the middle
  of the scale and tapers toward 50 and 950, keeping the ends in gamut.

Optional ``DarkModeAdjustments`` scale chroma and push lightness away from
mid-grey. Output is a pure function of the definition and the adjustments.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from .ir import (
    MAX_CHROMA,
    ColorDefinition,
    ColorScale,
    DarkModeAdjustments,
    GeneratedColorStep,
    OKLCHColor,
)
from .oklch import oklch_to_hex

logger = logging.getLogger(__name__)

# Lightness by step, near-white at 50 through near-black at 950.
LIGHTNESS_CURVE: Final[dict[int, float]] = {
    50: 0.985,
    100: 0.970,
    200: 0.922,
    300: 0.870,
    400: 0.708,
    500: 0.556,
    600: 0.439,
    700: 0.371,
    800: 0.269,
    900: 0.205,
    950: 0.145,
}

# Chroma multiplier by step; non-increasing moving away from 500/600.
CHROMA_CURVE: Final[dict[int, float]] = {
    50: 0.13,
    100: 0.27,
    200: 0.40,
    300: 0.60,
    400: 0.80,
    500: 1.00,
    600: 1.00,
    700: 0.93,
    800: 0.80,
    900: 0.67,
    950: 0.40,
}


def apply_contrast_boost(lightness: float, boost: float) -> float:
    """Push ``lightness`` away from mid-grey by ``boost`` and clamp to 0-1."""
    if boost == 1.0:
        return lightness
    if lightness > 0.5:
        boosted = lightness + (1 - lightness) * (boost - 1)
    else:
        boosted = lightness - lightness * (boost - 1)
    return min(1.0, max(0.0, boosted))


def scale_step_color(
    definition: ColorDefinition, step: int, dark_mode: DarkModeAdjustments | None = None
) -> OKLCHColor:
    """Perceptual colour for one step of a definition's scale."""
    source = definition.source
    lightness = LIGHTNESS_CURVE[step]
    chroma = source.c * CHROMA_CURVE[step]
    if dark_mode is not None:
        lightness = apply_contrast_boost(lightness, dark_mode.contrast_boost)
        chroma = min(chroma * dark_mode.chroma_multiplier, MAX_CHROMA)
    return OKLCHColor(l=lightness, c=round(chroma, 6), h=source.h)


def generate_scale(
    definition: ColorDefinition, dark_mode: DarkModeAdjustments | None = None
) -> ColorScale:
    """Generate a concrete colour for every step the definition requests.

    Steps not listed in ``definition.scale`` are absent from the result.
    """
    steps: dict[int, GeneratedColorStep] = {}
    for step in definition.scale:
        color = scale_step_color(definition, step, dark_mode)
        steps[step] = GeneratedColorStep(oklch=color, hex=oklch_to_hex(color))
    return ColorScale(definition=definition, steps=steps)


def generate_all_scales(
    definitions: Mapping[str, ColorDefinition], dark_mode: DarkModeAdjustments | None = None
) -> dict[str, ColorScale]:
    """Generate scales for every registered colour, preserving name order."""
    scales = {
        name: generate_scale(definition, dark_mode) for name, definition in definitions.items()
    }
    logger.debug(f"Generated {len(scales)} color scales (dark mode: {dark_mode is not None})")
    return scales
