"""
Theme plugin contract.

A plugin is a named, versioned, stateless unit of theme configuration. Its
``register`` method runs once per build, in dependency order, and writes
colours and theme variants into the ``RegistrationContext`` it is given.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, ClassVar

from .errors import ErrorKind, ValidationIssue
from .ir import DesignTokens, PluginDependency, PluginMetadata, ThemeConfig

if TYPE_CHECKING:
    from .builder import PartialTheme, RegistrationContext

PLUGIN_ID_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
VERSION_RE = re.compile(r"^\d+\.\d+\.\d+")


class ThemePlugin(ABC):
    """Base class for theme plugins.

    Subclasses set ``id`` and ``version`` (and optionally metadata and
    ``dependencies``) as class attributes and implement ``register``.
    """

    id: ClassVar[str]
    version: ClassVar[str]
    name: ClassVar[str | None] = None
    description: ClassVar[str | None] = None
    author: ClassVar[str | None] = None
    license: ClassVar[str | None] = None
    homepage: ClassVar[str | None] = None
    tags: ClassVar[tuple[str, ...]] = ()
    dependencies: ClassVar[tuple[PluginDependency, ...]] = ()

    @abstractmethod
    def register(self, ctx: RegistrationContext) -> None:
        """Register colours and theme variants."""

    def validate(self, config: ThemeConfig) -> list[ValidationIssue]:
        """Check the merged config for this plugin's concerns."""
        return []

    def get_design_tokens(self, defaults: DesignTokens) -> DesignTokens | None:
        """Design tokens this plugin contributes, or None for none."""
        return None

    def before_build(self, partial: PartialTheme) -> None:
        """Called once every plugin has registered, before references are checked."""

    def after_build(self, config: ThemeConfig) -> None:
        """Called with the finished config at the end of ``build()``."""

    @property
    def metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name=self.name,
            description=self.description,
            author=self.author,
            license=self.license,
            homepage=self.homepage,
            tags=self.tags,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, version={self.version!r})"


class FunctionPlugin(ThemePlugin):
    """A plugin whose behaviour comes from plain callables."""

    def __init__(
        self,
        *,
        id: str,
        version: str,
        register: Callable[[RegistrationContext], None],
        validate: Callable[[ThemeConfig], list[ValidationIssue]] | None = None,
        before_build: Callable[[PartialTheme], None] | None = None,
        after_build: Callable[[ThemeConfig], None] | None = None,
        dependencies: Sequence[PluginDependency] = (),
        **metadata: Any,
    ):
        # Instance attributes shadow the class-level declarations.
        self.id = id  # type: ignore[misc]
        self.version = version  # type: ignore[misc]
        self.dependencies = tuple(dependencies)  # type: ignore[misc]
        self._register = register
        self._validate = validate
        self._before_build = before_build
        self._after_build = after_build
        for key in ("name", "description", "author", "license", "homepage"):
            if key in metadata:
                setattr(self, key, metadata.pop(key))
        if "tags" in metadata:
            self.tags = tuple(metadata.pop("tags"))  # type: ignore[misc]
        if metadata:
            raise TypeError(f"Unknown plugin metadata: {', '.join(sorted(metadata))}")

    def register(self, ctx: RegistrationContext) -> None:
        self._register(ctx)

    def validate(self, config: ThemeConfig) -> list[ValidationIssue]:
        if self._validate is None:
            return []
        return self._validate(config)

    def before_build(self, partial: PartialTheme) -> None:
        if self._before_build is not None:
            self._before_build(partial)

    def after_build(self, config: ThemeConfig) -> None:
        if self._after_build is not None:
            self._after_build(config)


def define_plugin(
    *,
    id: str,
    version: str,
    register: Callable[[RegistrationContext], None],
    validate: Callable[[ThemeConfig], list[ValidationIssue]] | None = None,
    before_build: Callable[[PartialTheme], None] | None = None,
    after_build: Callable[[ThemeConfig], None] | None = None,
    dependencies: Sequence[PluginDependency | dict[str, Any]] = (),
    **metadata: Any,
) -> ThemePlugin:
    """Create a plugin from callables.

    Example:
        forest = define_plugin(
            id="forest",
            version="1.0.0",
            dependencies=[{"id": "blueprint-core", "version": "^1.0.0"}],
            register=lambda ctx: ctx.add_color("moss", ...),
        )
    """
    deps = [d if isinstance(d, PluginDependency) else PluginDependency(**d) for d in dependencies]
    return FunctionPlugin(
        id=id,
        version=version,
        register=register,
        validate=validate,
        before_build=before_build,
        after_build=after_build,
        dependencies=deps,
        **metadata,
    )


def validate_plugin(plugin: object) -> list[ValidationIssue]:
    """Check that ``plugin`` satisfies the plugin contract.

    Returns:
        One issue per problem; empty when the plugin is well formed.
    """
    issues: list[ValidationIssue] = []
    plugin_id = getattr(plugin, "id", None)
    label = plugin_id if isinstance(plugin_id, str) else None

    def add(message: str, **context: Any) -> None:
        issues.append(
            ValidationIssue(
                kind=ErrorKind.INVALID_PLUGIN, message=message, plugin=label, context=context
            )
        )

    if not isinstance(plugin_id, str) or not plugin_id:
        add("Plugin must have a non-empty string id")
    elif not PLUGIN_ID_RE.match(plugin_id):
        add(f"Plugin id '{plugin_id}' must be lowercase kebab-case", id=plugin_id)

    version = getattr(plugin, "version", None)
    if not isinstance(version, str) or not VERSION_RE.match(version):
        add(f"Plugin version {version!r} must be semver (x.y.z)", version=version)

    if not callable(getattr(plugin, "register", None)):
        add("Plugin must define a callable register()")

    for dep in getattr(plugin, "dependencies", ()) or ():
        if not isinstance(dep, PluginDependency):
            add(f"Dependency {dep!r} must be a PluginDependency")
        elif not dep.id:
            add("Dependency id must be a non-empty string")
        elif dep.id == plugin_id:
            add("Plugin cannot depend on itself", dependency=dep.id)

    return issues
