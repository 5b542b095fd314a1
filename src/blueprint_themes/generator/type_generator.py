"""
TypeScript declaration generator for the colour registry.

Emits a ``ColorRegistry`` interface with one ``ColorRef`` member per
generated colour step (``blue500``), plus unions of colour and variant names.
"""

from __future__ import annotations

from ..core.color_refs import color_token_name
from ..core.ir import ThemeConfig


def _union(names: list[str]) -> str:
    return " | ".join(f"'{name}'" for name in names) if names else "never"


def generate_color_registry_types(config: ThemeConfig, *, include_docs: bool = True) -> str:
    """Generate ``colors.d.ts`` contents for a built theme."""
    color_names = list(config.colors)
    lines: list[str] = ["// Auto-generated by blueprint-themes. Do not edit.", ""]

    lines.append("export type ColorRef = string & { readonly __colorRef: unique symbol };")
    lines.append("")

    if include_docs:
        lines.append("/**")
        lines.append(" * Registered color steps.")
        if color_names:
            lines.append(f" * Available color names: {', '.join(color_names)}")
        lines.append(" */")
    lines.append("export interface ColorRegistry {")
    for name, scale in config.colors.items():
        for step in scale.steps:
            lines.append(f"  {color_token_name(name, step)}: ColorRef;")
    lines.append("}")
    lines.append("")

    lines.append(f"export type ColorName = {_union(color_names)};")
    lines.append(f"export type ThemeVariantName = {_union(list(config.themes))};")
    lines.append("")
    return "\n".join(lines)
