"""
blueprint-themes: build-time theme pipeline.

Orders theme plugins by dependency, merges their colours, variants and design
tokens, generates OKLCH colour scales and validates WCAG contrast.
"""

from blueprint_themes._version import get_version
from blueprint_themes.core import (
    DEFAULT_DESIGN_TOKENS,
    Override,
    ThemeBase,
    ThemeBuilder,
    ThemeError,
    ThemePlugin,
    define_plugin,
    run_theme_pipeline,
)
from blueprint_themes.core.ir import ColorDefinition, ColorRef, OKLCHColor, ThemeConfig

__version__ = get_version()

__all__ = [
    "__version__",
    "ColorDefinition",
    "ColorRef",
    "DEFAULT_DESIGN_TOKENS",
    "OKLCHColor",
    "Override",
    "ThemeBase",
    "ThemeBuilder",
    "ThemeConfig",
    "ThemeError",
    "ThemePlugin",
    "define_plugin",
    "run_theme_pipeline",
]
