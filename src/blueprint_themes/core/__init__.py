"""
Core theme pipeline: colour references, scale generation, plugin
resolution, token merging and contrast validation.
"""

from .builder import (
    MergedTheme,
    PartialTheme,
    PluginContribution,
    RegistrationContext,
    ThemeBuilder,
    fold_contributions,
)
from .color_refs import (
    coerce_theme_value,
    create_color_ref,
    is_color_ref,
    resolve_color_ref,
    serialize_color_ref,
)
from .color_scale import apply_contrast_boost, generate_all_scales, generate_scale
from .contrast import (
    CONTRAST_PAIRINGS,
    CONTRAST_THRESHOLDS,
    WCAGLevel,
    contrast_ratio,
    meets_wcag,
    validate_theme_contrast,
)
from .defaults import DEFAULT_DESIGN_TOKENS
from .errors import (
    BuildConfigError,
    CircularDependencyError,
    DependencyError,
    DependencyMissingError,
    DependencyVersionMismatchError,
    DuplicatePluginError,
    ErrorKind,
    InvalidColorRefError,
    PluginDefinitionError,
    RegistrationError,
    ThemeError,
    ThemeValidationFailed,
    UnresolvedColorRefError,
    ValidationIssue,
)
from .pipeline import ThemeBuildResult, run_theme_pipeline
from .plugin import ThemePlugin, define_plugin, validate_plugin
from .resolver import satisfies_version, sort_plugins
from .theme_base import DEFAULT, Category, Default, Override, ThemeBase
from .validation import REQUIRED_SEMANTIC_TOKENS, ThemeValidationResult, validate_theme

__all__ = [
    # Builder
    "MergedTheme",
    "PartialTheme",
    "PluginContribution",
    "RegistrationContext",
    "ThemeBuilder",
    "fold_contributions",
    # Colour references and scales
    "apply_contrast_boost",
    "coerce_theme_value",
    "create_color_ref",
    "generate_all_scales",
    "generate_scale",
    "is_color_ref",
    "resolve_color_ref",
    "serialize_color_ref",
    # Contrast
    "CONTRAST_PAIRINGS",
    "CONTRAST_THRESHOLDS",
    "WCAGLevel",
    "contrast_ratio",
    "meets_wcag",
    "validate_theme_contrast",
    # Defaults
    "DEFAULT_DESIGN_TOKENS",
    # Errors
    "BuildConfigError",
    "CircularDependencyError",
    "DependencyError",
    "DependencyMissingError",
    "DependencyVersionMismatchError",
    "DuplicatePluginError",
    "ErrorKind",
    "InvalidColorRefError",
    "PluginDefinitionError",
    "RegistrationError",
    "ThemeError",
    "ThemeValidationFailed",
    "UnresolvedColorRefError",
    "ValidationIssue",
    # Pipeline
    "ThemeBuildResult",
    "run_theme_pipeline",
    # Plugins
    "ThemePlugin",
    "define_plugin",
    "validate_plugin",
    "satisfies_version",
    "sort_plugins",
    "DEFAULT",
    "Category",
    "Default",
    "Override",
    "ThemeBase",
    # Validation
    "REQUIRED_SEMANTIC_TOKENS",
    "ThemeValidationResult",
    "validate_theme",
]
