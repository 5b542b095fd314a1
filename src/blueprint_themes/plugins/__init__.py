"""
Built-in theme plugins.

Plugins are compiled in and looked up by id; there is no dynamic loading.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.errors import BuildConfigError
from ..core.plugin import ThemePlugin
from .blueprint_core import BlueprintCoreTheme, blueprint_core
from .forest import forest
from .primitives import PrimitivesPlugin, primitives

BUILTIN_PLUGINS: dict[str, ThemePlugin] = {
    plugin.id: plugin for plugin in (primitives, blueprint_core, forest)
}


def get_plugin(plugin_id: str) -> ThemePlugin | None:
    """Look up a built-in plugin by id."""
    return BUILTIN_PLUGINS.get(plugin_id)


def list_plugins() -> list[ThemePlugin]:
    """All built-in plugins in registration order."""
    return list(BUILTIN_PLUGINS.values())


def resolve_plugin_ids(plugin_ids: Iterable[str]) -> list[ThemePlugin]:
    """Map plugin ids to built-in plugins.

    Raises:
        BuildConfigError: If any id is unknown.
    """
    ids = list(plugin_ids)
    unknown = [plugin_id for plugin_id in ids if plugin_id not in BUILTIN_PLUGINS]
    if unknown:
        available = ", ".join(BUILTIN_PLUGINS)
        raise BuildConfigError(
            f"Unknown plugin(s): {', '.join(unknown)}. Available: {available}",
            context={"unknown": unknown},
        )
    return [BUILTIN_PLUGINS[plugin_id] for plugin_id in ids]


__all__ = [
    "BUILTIN_PLUGINS",
    "BlueprintCoreTheme",
    "PrimitivesPlugin",
    "blueprint_core",
    "forest",
    "get_plugin",
    "list_plugins",
    "primitives",
    "resolve_plugin_ids",
]
