"""
Base class for plugins that own design-token categories.

Each token category on a ``ThemeBase`` subclass is either ``DEFAULT`` or
``Override(value)``. ``get_design_tokens`` resolves every category with an
exhaustive match: an override replaces the whole category, anything else
takes the whole category from the defaults passed in. There is no
field-level merge inside a category.

Example:
    class CompactTheme(ThemeBase):
        id = "compact"
        version = "1.0.0"
        spacing = Override(SpacingConfig(base=2, scale=(0, 1, 2, 4)))

        def register(self, ctx):
            ...
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeAlias, TypeVar

from .defaults import DEFAULT_DESIGN_TOKENS
from .ir import (
    TOKEN_CATEGORIES,
    AccessibilityConfig,
    DesignTokens,
    FocusConfig,
    MotionConfig,
    SpacingConfig,
    TypographyConfig,
)
from .plugin import ThemePlugin

T = TypeVar("T")


@dataclass(frozen=True)
class Default:
    """Marker: take this category from the defaults."""

    def __repr__(self) -> str:
        return "DEFAULT"


@dataclass(frozen=True)
class Override(Generic[T]):
    """Marker: this theme owns the whole category value."""

    value: T


DEFAULT = Default()

Category: TypeAlias = Default | Override[T]


class ThemeBase(ThemePlugin):
    """A plugin that declares design-token categories."""

    spacing: ClassVar[Category[SpacingConfig]] = DEFAULT
    radius: ClassVar[Category[Mapping[str, int]]] = DEFAULT
    typography: ClassVar[Category[TypographyConfig]] = DEFAULT
    motion: ClassVar[Category[MotionConfig]] = DEFAULT
    opacity: ClassVar[Category[Mapping[str, float]]] = DEFAULT
    breakpoints: ClassVar[Category[Mapping[str, str]]] = DEFAULT
    focus: ClassVar[Category[FocusConfig]] = DEFAULT
    accessibility: ClassVar[Category[AccessibilityConfig]] = DEFAULT
    z_index: ClassVar[Category[Mapping[str, int]]] = DEFAULT

    @classmethod
    def declared_categories(cls) -> list[str]:
        """Names of the categories this theme overrides."""
        return [name for name in TOKEN_CATEGORIES if isinstance(getattr(cls, name), Override)]

    def get_design_tokens(self, defaults: DesignTokens = DEFAULT_DESIGN_TOKENS) -> DesignTokens:
        """Resolve every category to the override or the default, as a whole."""
        values: dict[str, object] = {}
        for name in TOKEN_CATEGORIES:
            match getattr(self, name):
                case Override(value=value):
                    values[name] = value
                case Default():
                    values[name] = getattr(defaults, name)
                case other:
                    raise TypeError(
                        f"{type(self).__name__}.{name} must be DEFAULT or Override(...), "
                        f"got {other!r}"
                    )
        return DesignTokens.model_validate(values)
