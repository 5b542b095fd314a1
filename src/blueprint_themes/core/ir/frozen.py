"""
Read-only mapping fields for frozen IR models.

``ConfigDict(frozen=True)`` only blocks attribute assignment; a plain ``dict``
field can still be mutated in place. ``FrozenMap[K, V]`` validates like a
``dict`` and stores a ``MappingProxyType`` over a private copy, so a built
model (and the shared default tokens) cannot be changed through it.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, PlainSerializer

K = TypeVar("K")
V = TypeVar("V")


def freeze_mapping(value: Mapping[Any, Any]) -> Mapping[Any, Any]:
    """Copy ``value`` into a read-only mapping."""
    return MappingProxyType(dict(value))


def _thaw(value: Mapping[Any, Any]) -> dict[Any, Any]:
    # Nested read-only mappings bypass their own serializer under this one.
    return {k: _thaw(v) if isinstance(v, Mapping) else v for k, v in value.items()}


FrozenMap = Annotated[
    Mapping[K, V],
    AfterValidator(freeze_mapping),
    PlainSerializer(_thaw),
]
