"""
CSS generator for built themes.

Turns a ``ThemeConfig`` into CSS custom properties:

- primitives: one property per colour step, hex first with an OKLCH upgrade
  inside ``@supports``;
- design tokens: spacing, radius, typography, motion, opacity, z-index,
  breakpoints and focus;
- theme variants: semantic tokens under ``[data-theme="..."]`` selectors,
  colour references rendered as ``var()`` of the primitive.
"""

from __future__ import annotations

import re

from ..core.color_refs import coerce_theme_value
from ..core.errors import UnresolvedColorRefError
from ..core.ir import ColorRef, DesignTokens, ThemeConfig, ThemeValue
from ..core.oklch import format_oklch, parse_css_color

DEFAULT_PREFIX = "bp"

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_kebab_case(name: str) -> str:
    """``surfaceElevated`` -> ``surface-elevated``."""
    return _CAMEL_RE.sub("-", name).replace("_", "-").lower()


def _num(value: float) -> str:
    """Format a number without a trailing ``.0``."""
    return f"{value:g}"


def color_var_name(name: str, step: int, prefix: str = DEFAULT_PREFIX) -> str:
    return f"--{prefix}-{to_kebab_case(name)}-{step}"


# =============================================================================
# Primitives
# =============================================================================


def generate_primitives_css(config: ThemeConfig, prefix: str = DEFAULT_PREFIX) -> str:
    """Generate colour primitives with hex fallbacks and OKLCH where supported."""
    hex_lines: list[str] = []
    oklch_lines: list[str] = []
    for name, scale in config.colors.items():
        for step, generated in scale.steps.items():
            var = color_var_name(name, step, prefix)
            hex_lines.append(f"  {var}: {generated.hex};")
            oklch_lines.append(f"    {var}: {format_oklch(generated.oklch)};")

    lines = ["/* Color primitives */", ":root {", *hex_lines, "}", ""]
    lines.extend(["@supports (color: oklch(0 0 0)) {", "  :root {", *oklch_lines, "  }", "}", ""])
    return "\n".join(lines)


# =============================================================================
# Design tokens
# =============================================================================


def generate_tokens_css(tokens: DesignTokens, prefix: str = DEFAULT_PREFIX) -> str:
    """Generate custom properties for every design-token category."""
    p = f"--{prefix}"
    lines: list[str] = ["/* Design tokens */", ":root {"]

    # Spacing
    base = tokens.spacing.base
    for multiplier in tokens.spacing.scale:
        key = _num(multiplier).replace(".", "-")
        lines.append(f"  {p}-spacing-{key}: {_num(base * multiplier)}px;")
    for name, multiplier in (tokens.spacing.semantic or {}).items():
        lines.append(f"  {p}-spacing-{name}: {_num(base * multiplier)}px;")

    # Radius
    for name, value in tokens.radius.items():
        lines.append(f"  {p}-radius-{name}: {value}px;")

    # Typography
    typography = tokens.typography
    for name, family in typography.font_families.items():
        lines.append(f"  {p}-font-{name}: {family};")
    for name, size in typography.font_sizes.items():
        lines.append(f"  {p}-font-size-{name}: {size}px;")
    for name, height in typography.line_heights.items():
        lines.append(f"  {p}-line-height-{name}: {_num(height)};")
    for name, weight in typography.font_weights.items():
        lines.append(f"  {p}-font-weight-{name}: {weight};")

    # Motion
    for name, duration in tokens.motion.durations.items():
        lines.append(f"  {p}-duration-{name}: {duration}ms;")
    for name, easing in tokens.motion.easings.items():
        lines.append(f"  {p}-easing-{to_kebab_case(name)}: {easing};")
    for name, transition in tokens.motion.transitions.items():
        lines.append(f"  {p}-transition-{name}: {transition};")

    # Opacity, layering, breakpoints
    for name, opacity in tokens.opacity.items():
        lines.append(f"  {p}-opacity-{name}: {_num(opacity)};")
    for name, z in tokens.z_index.items():
        lines.append(f"  {p}-z-{name}: {z};")
    for name, width in tokens.breakpoints.items():
        lines.append(f"  {p}-breakpoint-{name}: {width};")

    # Focus
    lines.append(f"  {p}-focus-width: {tokens.focus.width}px;")
    lines.append(f"  {p}-focus-offset: {tokens.focus.offset}px;")
    lines.append(f"  {p}-focus-style: {tokens.focus.style};")

    lines.extend(["}", ""])
    return "\n".join(lines)


# =============================================================================
# Theme variants
# =============================================================================


def _variant_selector(variant_name: str) -> str:
    """CSS selector for a variant; ``light`` is also the ``:root`` default."""
    if variant_name == "light":
        return ':root, [data-theme="light"]'
    return f'[data-theme="{variant_name}"]'


def _token_declaration(token: str, value: ThemeValue, config: ThemeConfig, prefix: str) -> str:
    name = to_kebab_case(token)
    value = coerce_theme_value(value)
    if isinstance(value, ColorRef):
        scale = config.colors.get(value.color_name)
        if scale is None or value.step not in scale:
            raise UnresolvedColorRefError(
                f"Cannot emit '{token}': color reference '{value}' does not resolve",
                context={"token": token, "ref": str(value)},
            )
        primitive = color_var_name(value.color_name, value.step, prefix)
        return f"--{prefix}-color-{name}: var({primitive});"
    if parse_css_color(value) is not None:
        return f"--{prefix}-color-{name}: {value};"
    return f"--{prefix}-{name}: {value};"


def generate_theme_css(config: ThemeConfig, prefix: str = DEFAULT_PREFIX) -> str:
    """Generate one rule per theme variant.

    Raises:
        UnresolvedColorRefError: If a variant references an unknown colour step.
    """
    lines: list[str] = []
    for variant_name, tokens in config.themes.items():
        source = config.theme_metadata.get(variant_name)
        lines.append(f"/* Theme: {variant_name}" + (f" ({source}) */" if source else " */"))
        lines.append(f"{_variant_selector(variant_name)} {{")
        for token, value in tokens.items():
            lines.append("  " + _token_declaration(token, value, config, prefix))
        lines.append("}")
        lines.append("")
    return "\n".join(lines)


def generate_stylesheet(config: ThemeConfig, prefix: str = DEFAULT_PREFIX) -> str:
    """Generate the complete theme stylesheet."""
    header = "/* Blueprint theme: auto-generated, do not edit */\n\n"
    return (
        header
        + generate_primitives_css(config, prefix)
        + "\n"
        + generate_tokens_css(config.design_tokens, prefix)
        + "\n"
        + generate_theme_css(config, prefix)
    )
