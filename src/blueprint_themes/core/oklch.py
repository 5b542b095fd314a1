"""
Pure-Python OKLCH colour math.

Converts OKLCH to OKLab, linear sRGB, gamma-encoded sRGB and hex, and parses
the small set of literal CSS colours themes use. No external colour
libraries required.
"""

from __future__ import annotations

import math
import re

from .ir import OKLCHColor

RGB = tuple[float, float, float]

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_NUMBER = r"\d*\.?\d+"
_OKLCH_RE = re.compile(
    rf"^oklch\(\s*({_NUMBER})(%?)\s+({_NUMBER})\s+({_NUMBER})(?:deg)?"
    rf"\s*(?:/\s*{_NUMBER}%?\s*)?\)$",
    re.IGNORECASE,
)

NAMED_COLORS: dict[str, str] = {
    "white": "#ffffff",
    "black": "#000000",
}


def oklch_to_css(L: float, C: float, H: float, alpha: float = 1.0) -> str:
    """Format an OKLCH color as a CSS string.

    Args:
        L: Lightness (0-1).
        C: Chroma (0-0.4).
        H: Hue (0-360).
        alpha: Opacity (0-1).

    Returns:
        CSS oklch() string.
    """
    L_fmt = f"{L:.3f}"
    C_fmt = f"{C:.4f}"
    H_fmt = f"{H:.1f}"
    if alpha < 1.0:
        return f"oklch({L_fmt} {C_fmt} {H_fmt} / {alpha:.2f})"
    return f"oklch({L_fmt} {C_fmt} {H_fmt})"


def format_oklch(color: OKLCHColor, alpha: float = 1.0) -> str:
    """Format an ``OKLCHColor`` model as a CSS string."""
    return oklch_to_css(color.l, color.c, color.h, alpha)


# =============================================================================
# Conversions
# =============================================================================


def oklch_to_oklab(L: float, C: float, H: float) -> tuple[float, float, float]:
    """Convert polar OKLCH to rectangular OKLab."""
    hue = math.radians(H)
    return L, C * math.cos(hue), C * math.sin(hue)


def oklab_to_linear_srgb(L: float, a: float, b: float) -> RGB:
    """Convert OKLab to linear-light sRGB (may fall outside 0-1)."""
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l3 = l_**3
    m3 = m_**3
    s3 = s_**3

    return (
        4.0767416621 * l3 - 3.3077115913 * m3 + 0.2309699292 * s3,
        -1.2684380046 * l3 + 2.6097574011 * m3 - 0.3413193965 * s3,
        -0.0041960863 * l3 - 0.7034186147 * m3 + 1.7076147010 * s3,
    )


def oklch_to_linear_srgb(color: OKLCHColor) -> RGB:
    """Convert an OKLCH colour to gamut-clamped linear sRGB."""
    rgb = oklab_to_linear_srgb(*oklch_to_oklab(color.l, color.c, color.h))
    return (_clamp(rgb[0]), _clamp(rgb[1]), _clamp(rgb[2]))


def linear_to_srgb(x: float) -> float:
    """sRGB transfer function (linear light to gamma-encoded)."""
    if x <= 0.0031308:
        return 12.92 * x
    return 1.055 * x ** (1 / 2.4) - 0.055


def srgb_to_linear(x: float) -> float:
    """Inverse sRGB transfer function (gamma-encoded to linear light)."""
    if x <= 0.04045:
        return x / 12.92
    return ((x + 0.055) / 1.055) ** 2.4


def oklch_to_hex(color: OKLCHColor) -> str:
    """Convert an OKLCH colour to a ``#rrggbb`` hex string, clamping to sRGB."""
    channels = (round(_clamp(linear_to_srgb(x)) * 255) for x in oklch_to_linear_srgb(color))
    return "#" + "".join(f"{ch:02x}" for ch in channels)


def hex_to_linear_srgb(value: str) -> RGB:
    """Convert ``#rgb`` or ``#rrggbb`` to linear sRGB.

    Raises:
        ValueError: If the value is not a hex colour.
    """
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"Not a hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)


def parse_css_color(value: str) -> RGB | None:
    """Parse a literal CSS colour into linear sRGB.

    Understands ``white``, ``black``, hex colours and ``oklch(...)``. Returns
    None for anything else (``var(...)``, gradients, keywords).
    """
    text = NAMED_COLORS.get(value.strip().lower(), value.strip())
    if _HEX_RE.match(text):
        return hex_to_linear_srgb(text)

    match = _OKLCH_RE.match(text)
    if not match:
        return None
    try:
        lightness = float(match.group(1))
        if match.group(2):
            lightness /= 100
        color = OKLCHColor(
            l=min(lightness, 1.0),
            c=min(float(match.group(3)), 0.4),
            h=float(match.group(4)) % 360,
        )
    except ValueError:
        return None
    return oklch_to_linear_srgb(color)


def _clamp(x: float) -> float:
    return min(1.0, max(0.0, x))
