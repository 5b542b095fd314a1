"""
Plugin dependency resolution.

Orders plugins so that every plugin comes after its required dependencies.
Uses Kahn's algorithm with a min-heap of input positions, so mutually
independent plugins keep their input order and builds are reproducible.

Resolution is pure: it reads ``id``, ``version`` and ``dependencies`` and
never calls ``register``.
"""

from __future__ import annotations

import heapq
import logging
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

from .errors import (
    CircularDependencyError,
    DependencyMissingError,
    DependencyVersionMismatchError,
    DuplicatePluginError,
)

if TYPE_CHECKING:
    from .plugin import ThemePlugin

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="ThemePlugin")

_SEMVER_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)")


# =============================================================================
# Version constraints
# =============================================================================


def parse_version(version: str) -> tuple[int, int, int] | None:
    """Parse the ``major.minor.patch`` prefix of a version string."""
    match = _SEMVER_RE.match(version.strip())
    if not match:
        return None
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def satisfies_version(available: str, constraint: str) -> bool:
    """Check a declared plugin version against a dependency constraint.

    Supported constraints:
        ``1.2.3``   exact match
        ``^1.2.3``  same major (same major.minor when major is 0), at least 1.2.3
        ``~1.2.3``  same major.minor, at least 1.2.3
        ``>=1.2.3`` at least 1.2.3
    """
    constraint = constraint.strip()
    if not constraint or constraint == "*":
        return True

    if constraint.startswith(">="):
        operator, required_text = ">=", constraint[2:]
    elif constraint[0] in "^~":
        operator, required_text = constraint[0], constraint[1:]
    else:
        operator, required_text = "=", constraint

    have = parse_version(available)
    need = parse_version(required_text)
    if have is None or need is None:
        return False

    if operator == "=":
        return available.strip() == required_text.strip()
    if operator == ">=":
        return have >= need
    if operator == "~":
        return have[:2] == need[:2] and have >= need
    # caret
    if need[0] == 0:
        return have[:2] == need[:2] and have >= need
    return have[0] == need[0] and have >= need


# =============================================================================
# Ordering
# =============================================================================


def sort_plugins(plugins: Sequence[P]) -> list[P]:
    """Order plugins so every required dependency precedes its dependents.

    Args:
        plugins: Plugins in the order they were supplied.

    Returns:
        Every input plugin exactly once, dependencies first. Ties keep input order.

    Raises:
        DuplicatePluginError: If two plugins share an id.
        DependencyMissingError: If a required dependency is not in ``plugins``.
        DependencyVersionMismatchError: If a present dependency fails its constraint.
        CircularDependencyError: If no valid order exists.
    """
    position: dict[str, int] = {}
    for index, plugin in enumerate(plugins):
        if plugin.id in position:
            raise DuplicatePluginError(
                f"Duplicate plugin id '{plugin.id}' in resolution set", plugin=plugin.id
            )
        position[plugin.id] = index

    dependents: list[list[int]] = [[] for _ in plugins]
    in_degree = [0] * len(plugins)

    for index, plugin in enumerate(plugins):
        for dep in plugin.dependencies:
            dep_index = position.get(dep.id)
            if dep_index is None:
                if dep.optional:
                    logger.debug(f"Optional dependency '{dep.id}' of '{plugin.id}' not present")
                    continue
                raise DependencyMissingError(
                    f"Plugin '{plugin.id}' requires '{dep.id}', which is not registered",
                    plugin=plugin.id,
                    context={"dependency": dep.id},
                )

            dep_plugin = plugins[dep_index]
            if dep.version and not satisfies_version(dep_plugin.version, dep.version):
                raise DependencyVersionMismatchError(
                    f"Plugin '{plugin.id}' requires '{dep.id}' {dep.version}, "
                    f"but version {dep_plugin.version} is registered",
                    plugin=plugin.id,
                    context={
                        "dependency": dep.id,
                        "required": dep.version,
                        "available": dep_plugin.version,
                    },
                )

            if dep.optional:
                continue
            dependents[dep_index].append(index)
            in_degree[index] += 1

    ready = [index for index, degree in enumerate(in_degree) if degree == 0]
    heapq.heapify(ready)
    order: list[int] = []

    while ready:
        index = heapq.heappop(ready)
        order.append(index)
        for dependent in dependents[index]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                heapq.heappush(ready, dependent)

    if len(order) != len(plugins):
        remaining = {index for index, degree in enumerate(in_degree) if degree > 0}
        cycle = _find_cycle(plugins, position, remaining)
        raise CircularDependencyError(cycle)

    logger.debug(f"Resolved plugin order: {[plugins[i].id for i in order]}")
    return [plugins[i] for i in order]


def _find_cycle(
    plugins: Sequence[ThemePlugin], position: dict[str, int], remaining: set[int]
) -> list[str]:
    """Find one dependency cycle among plugins left unordered by Kahn's pass."""
    visited: set[int] = set()

    def dfs(node: int, path: list[int]) -> list[int] | None:
        if node in path:
            return path[path.index(node) :]
        if node in visited:
            return None
        visited.add(node)
        path.append(node)
        for dep in plugins[node].dependencies:
            dep_index = position.get(dep.id)
            if dep.optional or dep_index is None or dep_index not in remaining:
                continue
            cycle = dfs(dep_index, path)
            if cycle:
                return cycle
        path.pop()
        return None

    for start in sorted(remaining):
        cycle = dfs(start, [])
        if cycle:
            return [plugins[i].id for i in cycle]

    # Every node left with in_degree > 0 is on or downstream of a cycle.
    return [plugins[i].id for i in sorted(remaining)]
