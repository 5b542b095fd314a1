"""
Plugin IR types: dependency declarations and descriptive metadata.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PluginDependency(BaseModel):
    """A dependency on another plugin by id.

    ``version`` is either an exact semver string or a ``^``/``~``/``>=``
    constraint. Optional dependencies never block resolution when absent.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    version: str | None = None
    optional: bool = False


class PluginMetadata(BaseModel):
    """Non-functional plugin description."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None
    author: str | None = None
    license: str | None = None
    homepage: str | None = None
    tags: tuple[str, ...] = ()
