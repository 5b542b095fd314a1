"""
Error types for theme plugin resolution, colour references and validation.

Fatal problems (bad plugin definitions, dependency problems, malformed or
unresolvable colour references) are raised as exceptions and abort the build.
Non-fatal problems (plugin ``validate()`` findings, contrast violations) are
collected as :class:`ValidationIssue` records so callers see every problem in
one pass.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(StrEnum):
    """Machine-readable error categories."""

    DEPENDENCY_MISSING = "dependency_missing"
    CIRCULAR_DEPENDENCY = "circular_dependency"
    DEPENDENCY_VERSION_MISMATCH = "dependency_version_mismatch"
    INVALID_COLOR_REF = "invalid_color_ref"
    MISSING_COLOR = "missing_color"
    MISSING_THEME_VARIANT = "missing_theme_variant"
    MISSING_TOKEN = "missing_token"
    CONTRAST_VIOLATION = "contrast_violation"
    INVALID_PLUGIN = "invalid_plugin"
    DUPLICATE_ID = "duplicate_id"


class ValidationIssue(BaseModel):
    """A single non-fatal finding reported by validation."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    plugin: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        prefix = f"[{self.plugin}] " if self.plugin else ""
        return f"{prefix}{self.kind}: {self.message}"


class ThemeError(Exception):
    """Base exception for all theme pipeline errors."""

    default_kind: ErrorKind = ErrorKind.INVALID_PLUGIN

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        plugin: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.message = message
        self.kind = kind or self.default_kind
        self.plugin = plugin
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the owning plugin if known."""
        if self.plugin:
            return f"[{self.plugin}] {self.message}"
        return self.message

    def to_issue(self) -> ValidationIssue:
        """Convert this error into a reportable issue record."""
        return ValidationIssue(
            kind=self.kind, message=self.message, plugin=self.plugin, context=self.context
        )


class PluginDefinitionError(ThemeError):
    """
    Raised when a plugin object is not a valid plugin.

    Examples:
    - Id that is not lowercase kebab-case
    - Version that is not semver-like
    - Dependency without an id
    """

    default_kind = ErrorKind.INVALID_PLUGIN

    def __init__(self, message: str, issues: Sequence[ValidationIssue] = (), **kwargs: Any):
        self.issues = list(issues)
        super().__init__(message, **kwargs)


class DependencyError(ThemeError):
    """
    Raised when plugins cannot be ordered.

    Examples:
    - Required dependency not present in the plugin set
    - Circular dependencies
    - Dependency version outside the declared constraint
    - Two plugins sharing one id
    """


class DependencyMissingError(DependencyError):
    """A non-optional dependency is absent from the plugin set."""

    default_kind = ErrorKind.DEPENDENCY_MISSING


class CircularDependencyError(DependencyError):
    """No valid order exists; ``cycle`` names the member ids."""

    default_kind = ErrorKind.CIRCULAR_DEPENDENCY

    def __init__(self, cycle: Sequence[str], **kwargs: Any):
        self.cycle = list(cycle)
        path = " -> ".join([*self.cycle, self.cycle[0]]) if self.cycle else "?"
        super().__init__(
            f"Circular plugin dependency detected: {path}",
            context={"cycle": self.cycle},
            **kwargs,
        )


class DependencyVersionMismatchError(DependencyError):
    """A dependency's declared version does not satisfy the constraint."""

    default_kind = ErrorKind.DEPENDENCY_VERSION_MISMATCH


class DuplicatePluginError(DependencyError):
    """Two plugins in one resolution set share an id."""

    default_kind = ErrorKind.DUPLICATE_ID


class ColorRefError(ThemeError):
    """
    Raised for colour reference problems.

    Examples:
    - Empty colour name
    - Step outside the canonical step set
    - Reference to a colour that was never registered
    """

    default_kind = ErrorKind.INVALID_COLOR_REF


class InvalidColorRefError(ColorRefError):
    """A colour reference was constructed from an invalid name or step."""


class UnresolvedColorRefError(ColorRefError):
    """One or more references point at unregistered colours or steps."""

    default_kind = ErrorKind.MISSING_COLOR

    def __init__(self, message: str, issues: Sequence[ValidationIssue] = (), **kwargs: Any):
        self.issues = list(issues)
        super().__init__(message, **kwargs)


class RegistrationError(ThemeError):
    """
    Raised when a plugin's ``register`` call writes invalid data.

    Examples:
    - Colour name that is not alphanumeric camelCase
    - Extending a theme variant that does not exist
    """


class BuildConfigError(ThemeError):
    """Error loading or validating blueprint-theme.yaml."""


class ThemeValidationFailed(ThemeError):
    """Raised by callers that treat aggregated validation errors as fatal."""

    def __init__(self, issues: Sequence[ValidationIssue], **kwargs: Any):
        self.issues = list(issues)
        lines = "\n".join(f"  - {issue}" for issue in self.issues)
        super().__init__(f"Theme validation failed with {len(self.issues)} error(s):\n{lines}")


def make_missing_color_issue(color: str, plugin: str | None = None) -> ValidationIssue:
    """Create an issue for a colour a plugin requires but the theme lacks."""
    return ValidationIssue(
        kind=ErrorKind.MISSING_COLOR,
        message=f"Required color '{color}' is missing",
        plugin=plugin,
        context={"color": color},
    )


def make_missing_variant_issue(variant: str, plugin: str | None = None) -> ValidationIssue:
    """Create an issue for a theme variant a plugin requires but the theme lacks."""
    return ValidationIssue(
        kind=ErrorKind.MISSING_THEME_VARIANT,
        message=f"Required theme variant '{variant}' is missing",
        plugin=plugin,
        context={"variant": variant},
    )
