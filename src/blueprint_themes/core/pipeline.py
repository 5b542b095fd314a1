"""
Theme pipeline facade: build, then validate.

Build failures (dependency, registration and reference errors) propagate as
exceptions. Validation findings are aggregated in the result; whether they
block the build is decided by ``ThemeBuildResult.ok``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .builder import ThemeBuilder
from .contrast import WCAGLevel
from .defaults import DEFAULT_DESIGN_TOKENS
from .errors import ValidationIssue
from .ir import DarkModeAdjustments, DesignTokens, ThemeConfig
from .plugin import ThemePlugin
from .validation import ThemeValidationResult, validate_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeBuildResult:
    """A built theme and its validation findings."""

    config: ThemeConfig
    validation: ThemeValidationResult
    strict: bool = False

    @property
    def enforce_contrast(self) -> bool:
        """Contrast violations block when strict or when the tokens demand WCAG."""
        return self.strict or self.config.design_tokens.accessibility.enforce_wcag

    @property
    def blocking_issues(self) -> list[ValidationIssue]:
        return self.validation.blocking_issues(self.enforce_contrast)

    @property
    def ok(self) -> bool:
        return not self.blocking_issues


def run_theme_pipeline(
    plugins: Sequence[ThemePlugin],
    *,
    level: WCAGLevel | str = WCAGLevel.AA,
    strict: bool = False,
    defaults: DesignTokens = DEFAULT_DESIGN_TOKENS,
    dark_mode: DarkModeAdjustments | None = None,
) -> ThemeBuildResult:
    """Build a theme from ``plugins`` and validate it.

    Args:
        plugins: Plugins in use order.
        level: WCAG level for contrast checks. ``strict`` forces AAA.
        strict: Treat contrast violations as errors.
        defaults: Default design tokens for undeclared categories.
        dark_mode: Dark-mode scale adjustments. A plugin may still set its own.

    Raises:
        ThemeError: On any fatal build error.
    """
    builder = ThemeBuilder(defaults=defaults, dark_mode=dark_mode)
    for plugin in plugins:
        builder.use(plugin)

    config = builder.build()
    effective_level = WCAGLevel.AAA if strict else WCAGLevel(level)
    validation = validate_theme(config, builder.plugins, effective_level)

    logger.info(
        f"Validated theme at {effective_level}: {len(validation.errors)} errors, "
        f"{len(validation.warnings)} warnings, {len(validation.violations)} contrast violations"
    )
    return ThemeBuildResult(config=config, validation=validation, strict=strict)
