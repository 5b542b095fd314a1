"""
Artifact emission: CSS custom properties and TypeScript declarations.

Consumes only a built ``ThemeConfig``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.ir import ThemeConfig
from .css_generator import (
    generate_primitives_css,
    generate_stylesheet,
    generate_theme_css,
    generate_tokens_css,
)
from .type_generator import generate_color_registry_types

logger = logging.getLogger(__name__)

CSS_FILE = "theme.css"
TYPES_FILE = "colors.d.ts"


def write_theme_artifacts(config: ThemeConfig, output_dir: Path) -> list[Path]:
    """Write ``theme.css`` and ``colors.d.ts`` into ``output_dir``.

    Returns:
        Paths of the written files.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    css_path = output_dir / CSS_FILE
    css_path.write_text(generate_stylesheet(config), encoding="utf-8")

    types_path = output_dir / TYPES_FILE
    types_path.write_text(generate_color_registry_types(config), encoding="utf-8")

    logger.info(f"Wrote theme artifacts to {output_dir}")
    return [css_path, types_path]


__all__ = [
    "CSS_FILE",
    "TYPES_FILE",
    "generate_color_registry_types",
    "generate_primitives_css",
    "generate_stylesheet",
    "generate_theme_css",
    "generate_tokens_css",
    "write_theme_artifacts",
]
