"""
WCAG contrast validation.

Computes relative luminance from linear sRGB and checks a fixed set of
semantic token pairings in every theme variant. Read-only: failing colours
are reported, never adjusted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Final

from .color_refs import coerce_theme_value
from .errors import UnresolvedColorRefError
from .ir import ColorRef, ColorScale, ContrastViolation, ThemeConfig, ThemeValue
from .oklch import RGB, oklch_to_linear_srgb, parse_css_color

logger = logging.getLogger(__name__)


class WCAGLevel(StrEnum):
    """WCAG conformance levels."""

    AA = "AA"
    AAA = "AAA"


class PairingKind(StrEnum):
    """Which threshold a pairing is held to."""

    TEXT = "text"
    UI = "ui"


# Minimum ratios by level: normal text, then large text / UI components.
CONTRAST_THRESHOLDS: Final[dict[WCAGLevel, dict[PairingKind, float]]] = {
    WCAGLevel.AA: {PairingKind.TEXT: 4.5, PairingKind.UI: 3.0},
    WCAGLevel.AAA: {PairingKind.TEXT: 7.0, PairingKind.UI: 4.5},
}

# (foreground token, background token, kind)
CONTRAST_PAIRINGS: Final[tuple[tuple[str, str, PairingKind], ...]] = (
    ("text", "background", PairingKind.TEXT),
    ("text", "surface", PairingKind.TEXT),
    ("textMuted", "background", PairingKind.TEXT),
    ("textMuted", "surface", PairingKind.TEXT),
    ("textInverse", "primary", PairingKind.TEXT),
    ("borderStrong", "background", PairingKind.UI),
    ("primary", "background", PairingKind.UI),
    ("success", "background", PairingKind.UI),
    ("error", "background", PairingKind.UI),
    ("warning", "background", PairingKind.UI),
    ("focus", "background", PairingKind.UI),
)


# =============================================================================
# Luminance and ratios
# =============================================================================


def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance of a linear sRGB colour."""
    r, g, b = rgb
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(foreground: RGB, background: RGB) -> float:
    """WCAG contrast ratio between two linear sRGB colours (1.0 to 21.0)."""
    lum_fg = relative_luminance(foreground)
    lum_bg = relative_luminance(background)
    lighter, darker = max(lum_fg, lum_bg), min(lum_fg, lum_bg)
    return (lighter + 0.05) / (darker + 0.05)


def required_ratio(level: WCAGLevel | str, kind: PairingKind | str) -> float:
    return CONTRAST_THRESHOLDS[WCAGLevel(level)][PairingKind(kind)]


def meets_wcag(
    ratio: float, level: WCAGLevel | str = WCAGLevel.AA, large_text: bool = False
) -> bool:
    """Check a ratio against a level; large text uses the lower threshold."""
    kind = PairingKind.UI if large_text else PairingKind.TEXT
    return ratio >= required_ratio(level, kind)


def check_contrast_pair(
    token: str, foreground: str, background: str, ratio: float, required: float
) -> ContrastViolation | None:
    """Return a violation when ``ratio`` is below ``required``, else None."""
    if ratio >= required:
        return None
    return ContrastViolation(
        token=token, foreground=foreground, background=background, ratio=ratio, required=required
    )


# =============================================================================
# Theme validation
# =============================================================================


def resolve_theme_color(value: ThemeValue, colors: Mapping[str, ColorScale]) -> RGB | None:
    """Resolve a semantic token value to linear sRGB.

    Returns None for literals that are not concrete colours (``var(...)``,
    ``transparent``).

    Raises:
        UnresolvedColorRefError: If a reference names an unknown colour or step.
    """
    value = coerce_theme_value(value)
    if not isinstance(value, ColorRef):
        return parse_css_color(value)

    scale = colors.get(value.color_name)
    step = scale.get(value.step) if scale is not None else None
    if step is None:
        raise UnresolvedColorRefError(f"Color reference '{value}' does not resolve")
    return oklch_to_linear_srgb(step.oklch)


def validate_theme_contrast(
    colors: Mapping[str, ColorScale],
    config: ThemeConfig,
    level: WCAGLevel | str = WCAGLevel.AA,
) -> list[ContrastViolation]:
    """Check every variant's semantic pairings against ``level``.

    Pairings with a missing or non-colour token are skipped.

    Returns:
        One violation per failing pairing, variants and pairings in order.
    """
    level = WCAGLevel(level)
    violations: list[ContrastViolation] = []

    for variant_name, tokens in config.themes.items():
        for fg_token, bg_token, kind in CONTRAST_PAIRINGS:
            fg_value = tokens.get(fg_token)
            bg_value = tokens.get(bg_token)
            if fg_value is None or bg_value is None:
                logger.debug(
                    f"Skipping {variant_name}: {fg_token}/{bg_token} (token not defined)"
                )
                continue

            fg_rgb = resolve_theme_color(fg_value, colors)
            bg_rgb = resolve_theme_color(bg_value, colors)
            if fg_rgb is None or bg_rgb is None:
                logger.debug(f"Skipping {variant_name}: {fg_token}/{bg_token} (not a color)")
                continue

            violation = check_contrast_pair(
                token=f"{variant_name}.{fg_token}",
                foreground=str(fg_value),
                background=str(bg_value),
                ratio=contrast_ratio(fg_rgb, bg_rgb),
                required=required_ratio(level, kind),
            )
            if violation:
                violations.append(violation)

    logger.debug(f"Contrast check ({level}): {len(violations)} violation(s)")
    return violations
