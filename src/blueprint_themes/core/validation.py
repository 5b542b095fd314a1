"""
Aggregated theme validation.

Runs every plugin's ``validate`` hook, checks each variant for the required
semantic tokens and runs the contrast validator. Findings are collected, not
raised, so a caller sees every problem in one pass and decides what is fatal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from .contrast import WCAGLevel, validate_theme_contrast
from .errors import ErrorKind, ThemeValidationFailed, ValidationIssue
from .ir import ContrastViolation, ThemeConfig
from .plugin import ThemePlugin

logger = logging.getLogger(__name__)

REQUIRED_SEMANTIC_TOKENS: Final[tuple[str, ...]] = (
    "background",
    "surface",
    "surfaceElevated",
    "surfaceSubdued",
    "text",
    "textMuted",
    "textInverse",
    "primary",
    "primaryHover",
    "primaryActive",
    "success",
    "warning",
    "error",
    "info",
    "border",
    "borderStrong",
    "focus",
)


class ThemeValidationResult:
    """Result of theme validation."""

    def __init__(self, level: WCAGLevel | str = WCAGLevel.AA) -> None:
        self.level = WCAGLevel(level)
        self.errors: list[ValidationIssue] = []
        self.warnings: list[ValidationIssue] = []
        self.violations: list[ContrastViolation] = []

    def add_error(self, issue: ValidationIssue) -> None:
        self.errors.append(issue)

    def add_warning(self, issue: ValidationIssue) -> None:
        self.warnings.append(issue)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def violation_issues(self) -> list[ValidationIssue]:
        """Contrast violations as issue records."""
        return [
            ValidationIssue(
                kind=ErrorKind.CONTRAST_VIOLATION,
                message=str(violation),
                context=violation.model_dump(),
            )
            for violation in self.violations
        ]

    def blocking_issues(self, strict: bool = False) -> list[ValidationIssue]:
        """Errors, plus contrast violations when ``strict``."""
        if strict:
            return [*self.errors, *self.violation_issues()]
        return list(self.errors)

    def raise_for_errors(self, strict: bool = False) -> None:
        """Raise ``ThemeValidationFailed`` if there are blocking issues."""
        issues = self.blocking_issues(strict)
        if issues:
            raise ThemeValidationFailed(issues)

    def __repr__(self) -> str:
        return (
            f"ThemeValidationResult(level={self.level}, errors={len(self.errors)}, "
            f"warnings={len(self.warnings)}, violations={len(self.violations)})"
        )


def validate_theme(
    config: ThemeConfig,
    plugins: Sequence[ThemePlugin] = (),
    level: WCAGLevel | str = WCAGLevel.AA,
) -> ThemeValidationResult:
    """Validate a built theme.

    Args:
        config: The built theme.
        plugins: Plugins whose ``validate`` hooks should run.
        level: WCAG level for the contrast check.

    Returns:
        ThemeValidationResult with plugin errors, token warnings and violations.
    """
    result = ThemeValidationResult(level)

    for plugin in plugins:
        try:
            issues = plugin.validate(config)
        except Exception as e:
            logger.exception(f"Plugin '{plugin.id}' validate() raised")
            result.add_error(
                ValidationIssue(
                    kind=ErrorKind.INVALID_PLUGIN,
                    message=f"validate() raised {type(e).__name__}: {e}",
                    plugin=plugin.id,
                )
            )
            continue
        for issue in issues:
            if issue.plugin is None:
                issue = issue.model_copy(update={"plugin": plugin.id})
            result.add_error(issue)

    for variant_name, tokens in config.themes.items():
        missing = [token for token in REQUIRED_SEMANTIC_TOKENS if token not in tokens]
        if missing:
            result.add_warning(
                ValidationIssue(
                    kind=ErrorKind.MISSING_TOKEN,
                    message=f"Theme variant '{variant_name}' is missing tokens: "
                    f"{', '.join(missing)}",
                    plugin=config.theme_metadata.get(variant_name),
                    context={"variant": variant_name, "missing": missing},
                )
            )

    result.violations = validate_theme_contrast(config.colors, config, level)

    logger.debug(repr(result))
    return result
