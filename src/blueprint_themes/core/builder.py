"""
Theme builder and design-token merge engine.

``ThemeBuilder.build()`` runs the pipeline:

1. order plugins with the dependency resolver;
2. run each plugin's ``register`` against a fresh ``RegistrationContext``,
   collecting a ``PluginContribution`` per plugin;
3. fold contributions in order with two distinct rules:
   - colours and theme variants accumulate, last write wins per name;
   - design tokens are replaced per category by the most recent plugin that
     contributes tokens, so a later ``ThemeBase`` resets categories it does
     not declare back to the defaults;
4. run ``before_build`` hooks, then check that every ``ColorRef`` in every
   variant resolves;
5. generate colour scales (with any dark-mode adjustments), run
   ``after_build`` hooks and return a frozen ``ThemeConfig``.

Nothing is kept between ``build()`` calls.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .color_refs import COLOR_NAME_RE, coerce_theme_value, color_token_name, create_color_ref
from .color_scale import generate_all_scales
from .defaults import DEFAULT_DESIGN_TOKENS
from .errors import (
    ErrorKind,
    PluginDefinitionError,
    RegistrationError,
    UnresolvedColorRefError,
    ValidationIssue,
)
from .ir import (
    ColorDefinition,
    ColorRef,
    DarkModeAdjustments,
    DesignTokens,
    ThemeConfig,
    ThemeValue,
)
from .plugin import ThemePlugin, validate_plugin
from .resolver import sort_plugins

logger = logging.getLogger(__name__)

VARIANT_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9-]*$")


# =============================================================================
# Contributions and folding
# =============================================================================


@dataclass
class PluginContribution:
    """Everything one plugin adds to the theme."""

    plugin_id: str
    colors: dict[str, ColorDefinition] = field(default_factory=dict)
    variants: dict[str, dict[str, ThemeValue]] = field(default_factory=dict)
    design_tokens: DesignTokens | None = None
    dark_mode: DarkModeAdjustments | None = None


@dataclass(frozen=True)
class PartialTheme:
    """Read-only view of the merged theme handed to ``before_build`` hooks.

    Colours are still definitions here; scales have not been generated.
    """

    colors: Mapping[str, ColorDefinition]
    themes: Mapping[str, Mapping[str, ThemeValue]]
    design_tokens: DesignTokens
    dark_mode: DarkModeAdjustments | None = None


@dataclass
class MergedTheme:
    """Result of folding contributions, before scale generation."""

    colors: dict[str, ColorDefinition]
    variants: dict[str, dict[str, ThemeValue]]
    design_tokens: DesignTokens
    theme_metadata: dict[str, str] = field(default_factory=dict)
    dark_mode: DarkModeAdjustments | None = None

    def snapshot(self) -> PartialTheme:
        """Copy the current state into a read-only ``PartialTheme``."""
        return PartialTheme(
            colors=MappingProxyType(dict(self.colors)),
            themes=MappingProxyType(
                {name: MappingProxyType(dict(tokens)) for name, tokens in self.variants.items()}
            ),
            design_tokens=self.design_tokens,
            dark_mode=self.dark_mode,
        )

    def apply(self, contribution: PluginContribution) -> None:
        """Fold one contribution into this state."""
        for name, definition in contribution.colors.items():
            self.colors[name] = definition
        for name, tokens in contribution.variants.items():
            self.variants[name] = dict(tokens)
            self.theme_metadata[name] = contribution.plugin_id

        # Every category is replaced; undeclared ones already hold defaults.
        if contribution.design_tokens is not None:
            self.design_tokens = contribution.design_tokens
        if contribution.dark_mode is not None:
            self.dark_mode = contribution.dark_mode


def fold_contributions(
    contributions: Iterable[PluginContribution],
    defaults: DesignTokens = DEFAULT_DESIGN_TOKENS,
    dark_mode: DarkModeAdjustments | None = None,
) -> MergedTheme:
    """Fold contributions in order into one merged theme."""
    merged = MergedTheme(colors={}, variants={}, design_tokens=defaults, dark_mode=dark_mode)
    for contribution in contributions:
        merged.apply(contribution)
    return merged


# =============================================================================
# Registration context
# =============================================================================


class RegistrationContext:
    """What a plugin's ``register`` sees.

    Reads cover colours and variants from plugins that already ran plus this
    plugin's own additions. Writes go only into this plugin's contribution.
    """

    def __init__(self, merged: MergedTheme, contribution: PluginContribution):
        self._merged = merged
        self._contribution = contribution

    @property
    def plugin_id(self) -> str:
        return self._contribution.plugin_id

    @property
    def design_tokens(self) -> DesignTokens:
        """Tokens as merged from plugins that already ran."""
        return self._merged.design_tokens

    @property
    def dark_mode(self) -> DarkModeAdjustments | None:
        if self._contribution.dark_mode is not None:
            return self._contribution.dark_mode
        return self._merged.dark_mode

    def set_dark_mode(self, adjustments: DarkModeAdjustments | Mapping[str, Any]) -> None:
        """Set the dark-mode adjustments every colour scale is generated with.

        The last plugin in resolved order to call this wins.
        """
        if not isinstance(adjustments, DarkModeAdjustments):
            adjustments = DarkModeAdjustments.model_validate(adjustments)
        if self.dark_mode is not None:
            logger.warning(f"Plugin '{self.plugin_id}' overwrites dark mode adjustments")
        self._contribution.dark_mode = adjustments

    # -------------------------------------------------------------------------
    # Colours
    # -------------------------------------------------------------------------

    def _visible_colors(self) -> dict[str, ColorDefinition]:
        return {**self._merged.colors, **self._contribution.colors}

    @property
    def colors(self) -> Mapping[str, ColorRef]:
        """References to every visible colour step, keyed like ``blue500``."""
        refs: dict[str, ColorRef] = {}
        for name, definition in self._visible_colors().items():
            for step in definition.scale:
                refs[color_token_name(name, step)] = ColorRef(color_name=name, step=step)
        return MappingProxyType(refs)

    def ref(self, name: str, step: int) -> ColorRef:
        """Reference a colour step, even one a later plugin will register.

        Unresolvable references fail at the end of ``build()``.
        """
        return create_color_ref(name, step)

    def add_color(self, name: str, definition: ColorDefinition | Mapping[str, Any]) -> ColorRef:
        """Register a colour and return a reference to its 500 step (or first step)."""
        if not COLOR_NAME_RE.match(name):
            raise RegistrationError(
                f"Invalid color name '{name}': must start with a letter and be alphanumeric",
                kind=ErrorKind.INVALID_COLOR_REF,
                plugin=self.plugin_id,
            )
        if not isinstance(definition, ColorDefinition):
            definition = ColorDefinition.model_validate(definition)

        if name in self._visible_colors():
            logger.warning(f"Plugin '{self.plugin_id}' overwrites color '{name}'")
        self._contribution.colors[name] = definition
        logger.debug(f"Plugin '{self.plugin_id}' registered color '{name}'")

        step = 500 if 500 in definition.scale else definition.scale[0]
        return ColorRef(color_name=name, step=step)

    def get_color(self, name: str) -> ColorDefinition | None:
        return self._visible_colors().get(name)

    def has_color(self, name: str) -> bool:
        return name in self._visible_colors()

    def color_names(self) -> list[str]:
        return list(self._visible_colors())

    # -------------------------------------------------------------------------
    # Theme variants
    # -------------------------------------------------------------------------

    def _visible_variants(self) -> dict[str, dict[str, ThemeValue]]:
        return {**self._merged.variants, **self._contribution.variants}

    def add_theme_variant(self, name: str, tokens: Mapping[str, ThemeValue]) -> None:
        """Register a theme variant (semantic token name to ref or CSS value)."""
        if not VARIANT_NAME_RE.match(name):
            raise RegistrationError(
                f"Invalid theme variant name '{name}': must start with a letter "
                "and contain only letters, digits and hyphens",
                plugin=self.plugin_id,
            )
        for token, value in tokens.items():
            if not isinstance(value, ColorRef | str):
                raise RegistrationError(
                    f"Theme variant '{name}' token '{token}' must be a ColorRef or str, "
                    f"got {type(value).__name__}",
                    plugin=self.plugin_id,
                )

        if name in self._visible_variants():
            logger.warning(f"Plugin '{self.plugin_id}' overwrites theme variant '{name}'")
        # "gray.500" strings are stored as ColorRef so build() checks them.
        self._contribution.variants[name] = {
            token: coerce_theme_value(value) for token, value in tokens.items()
        }
        logger.debug(f"Plugin '{self.plugin_id}' registered theme variant '{name}'")

    def extend_theme_variant(
        self, base_name: str, new_name: str, overrides: Mapping[str, ThemeValue]
    ) -> None:
        """Register ``new_name`` as a copy of ``base_name`` with ``overrides`` applied."""
        base = self._visible_variants().get(base_name)
        if base is None:
            raise RegistrationError(
                f"Cannot extend theme variant '{base_name}': it is not registered",
                kind=ErrorKind.MISSING_THEME_VARIANT,
                plugin=self.plugin_id,
                context={"variant": base_name},
            )
        self.add_theme_variant(new_name, {**base, **overrides})

    def get_theme_variant(self, name: str) -> dict[str, ThemeValue] | None:
        variant = self._visible_variants().get(name)
        return dict(variant) if variant is not None else None

    def has_theme_variant(self, name: str) -> bool:
        return name in self._visible_variants()

    def theme_variant_names(self) -> list[str]:
        return list(self._visible_variants())


# =============================================================================
# Builder
# =============================================================================


class ThemeBuilder:
    """Accumulates plugins and builds a ``ThemeConfig``.

    Example:
        config = ThemeBuilder().use(primitives).use(blueprint_core).build()
    """

    def __init__(
        self,
        defaults: DesignTokens = DEFAULT_DESIGN_TOKENS,
        dark_mode: DarkModeAdjustments | None = None,
    ):
        self._defaults = defaults
        self._dark_mode = dark_mode
        self._plugins: dict[str, ThemePlugin] = {}

    def use(self, plugin: ThemePlugin) -> ThemeBuilder:
        """Add a plugin. A plugin with an already-used id replaces the earlier one.

        Raises:
            PluginDefinitionError: If the plugin is malformed.
        """
        issues = validate_plugin(plugin)
        if issues:
            plugin_id = getattr(plugin, "id", None)
            details = "; ".join(issue.message for issue in issues)
            raise PluginDefinitionError(
                f"Invalid plugin: {details}",
                issues,
                plugin=plugin_id if isinstance(plugin_id, str) else None,
            )

        if plugin.id in self._plugins:
            logger.warning(f"Plugin '{plugin.id}' is already registered, replacing it")
        self._plugins[plugin.id] = plugin
        return self

    @property
    def plugins(self) -> list[ThemePlugin]:
        return list(self._plugins.values())

    @property
    def defaults(self) -> DesignTokens:
        return self._defaults

    @property
    def dark_mode(self) -> DarkModeAdjustments | None:
        return self._dark_mode

    def has_plugin(self, plugin_id: str) -> bool:
        return plugin_id in self._plugins

    def contributions(self) -> list[PluginContribution]:
        """Run registration and return each plugin's contribution in resolved order."""
        _, contributions, _ = self._register_all()
        return contributions

    def build(self) -> ThemeConfig:
        """Resolve, register, merge and finalise the theme.

        ``before_build`` hooks see a read-only ``PartialTheme`` after every
        plugin has registered; ``after_build`` hooks see the finished config.
        Both run in resolved order.

        Raises:
            DependencyError: If plugins cannot be ordered.
            RegistrationError: If a plugin writes invalid data.
            UnresolvedColorRefError: If a variant references an unknown colour step.
        """
        ordered, _, merged = self._register_all()

        partial = merged.snapshot()
        for plugin in ordered:
            plugin.before_build(partial)

        self._check_references(merged)
        scales = generate_all_scales(merged.colors, merged.dark_mode)

        config = ThemeConfig(
            colors=scales,
            themes=merged.variants,
            design_tokens=merged.design_tokens,
            theme_metadata=merged.theme_metadata,
            dark_mode=merged.dark_mode,
        )
        logger.info(
            f"Built theme: {len(config.colors)} colors, {len(config.themes)} variants "
            f"from {len(self._plugins)} plugins"
        )

        for plugin in ordered:
            plugin.after_build(config)
        return config

    def _register_all(
        self,
    ) -> tuple[list[ThemePlugin], list[PluginContribution], MergedTheme]:
        ordered = sort_plugins(list(self._plugins.values()))
        merged = MergedTheme(
            colors={}, variants={}, design_tokens=self._defaults, dark_mode=self._dark_mode
        )
        contributions: list[PluginContribution] = []

        for plugin in ordered:
            contribution = PluginContribution(plugin_id=plugin.id)
            plugin.register(RegistrationContext(merged, contribution))
            contribution.design_tokens = plugin.get_design_tokens(self._defaults)
            merged.apply(contribution)
            contributions.append(contribution)

        return ordered, contributions, merged

    @staticmethod
    def _check_references(merged: MergedTheme) -> None:
        issues: list[ValidationIssue] = []
        for variant_name, tokens in merged.variants.items():
            for token, value in tokens.items():
                if not isinstance(value, ColorRef):
                    continue
                definition = merged.colors.get(value.color_name)
                if definition is None:
                    reason = f"color '{value.color_name}' is not registered"
                elif value.step not in definition.scale:
                    reason = f"color '{value.color_name}' has no step {value.step}"
                else:
                    continue
                issues.append(
                    ValidationIssue(
                        kind=ErrorKind.MISSING_COLOR,
                        message=f"{variant_name}.{token} -> {value}: {reason}",
                        plugin=merged.theme_metadata.get(variant_name),
                        context={"variant": variant_name, "token": token, "ref": str(value)},
                    )
                )

        if issues:
            lines = "\n".join(f"  - {issue.message}" for issue in issues)
            raise UnresolvedColorRefError(
                f"{len(issues)} unresolved color reference(s):\n{lines}", issues
            )
