"""Shared pytest fixtures for blueprint-themes tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from blueprint_themes.core.builder import RegistrationContext
from blueprint_themes.core.ir import PluginDependency, ThemeConfig
from blueprint_themes.core.plugin import ThemePlugin, define_plugin


def _noop(ctx: RegistrationContext) -> None:
    pass


def make_plugin(
    plugin_id: str,
    *deps: str | PluginDependency,
    version: str = "1.0.0",
    register: Callable[[RegistrationContext], None] | None = None,
) -> ThemePlugin:
    """Build a function-backed plugin; string deps are required, unversioned."""
    dependencies = [d if isinstance(d, PluginDependency) else PluginDependency(id=d) for d in deps]
    return define_plugin(
        id=plugin_id,
        version=version,
        register=register or _noop,
        dependencies=dependencies,
    )


@pytest.fixture
def plugin_factory() -> Callable[..., ThemePlugin]:
    """Return the plugin factory."""
    return make_plugin


@pytest.fixture
def core_config() -> ThemeConfig:
    """Theme built from the built-in primitives and core plugins."""
    from blueprint_themes.core.builder import ThemeBuilder
    from blueprint_themes.plugins import blueprint_core, primitives

    return ThemeBuilder().use(primitives).use(blueprint_core).build()
