"""
Colour reference system.

A :class:`ColorRef` names one step of a colour before the colour's concrete
value exists. References serialise to ``"name.step"``; ``resolve_color_ref``
is the exact inverse and reports malformed input by returning None.

Theme variants may spell a reference either way. ``coerce_theme_value`` is
the one rule that decides whether a string is a serialised reference, and
the builder, contrast validator and CSS emitter all apply it.
"""

from __future__ import annotations

import re

from .errors import InvalidColorRefError
from .ir import CANONICAL_STEPS, ColorRef, ThemeValue

COLOR_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9]*$")

_STEP_STRINGS: dict[str, int] = {str(step): step for step in CANONICAL_STEPS}


def create_color_ref(name: str, step: int) -> ColorRef:
    """Create a reference to ``step`` of colour ``name``.

    Raises:
        InvalidColorRefError: If the name is empty or the step is not canonical.
    """
    if not name:
        raise InvalidColorRefError(
            "Color reference name must be a non-empty string",
            context={"name": name, "step": step},
        )
    if isinstance(step, bool) or step not in CANONICAL_STEPS:
        raise InvalidColorRefError(
            f"Invalid color step {step!r} for '{name}'. "
            f"Valid steps: {', '.join(str(s) for s in CANONICAL_STEPS)}",
            context={"name": name, "step": step},
        )
    return ColorRef(color_name=name, step=step)


def serialize_color_ref(ref: ColorRef) -> str:
    """Serialise a reference as ``"name.step"``."""
    return str(ref)


def resolve_color_ref(value: str) -> ColorRef | None:
    """Parse ``"name.step"`` back into a reference.

    Returns None unless the string contains exactly one ``.``, the name is
    non-empty and the step is the exact decimal spelling of a canonical step.
    """
    if not isinstance(value, str) or value.count(".") != 1:
        return None
    name, step_text = value.split(".")
    step = _STEP_STRINGS.get(step_text)
    if not name or step is None:
        return None
    return ColorRef(color_name=name, step=step)


def coerce_theme_value(value: ThemeValue) -> ThemeValue:
    """Turn a serialised reference such as ``"gray.500"`` into a ``ColorRef``.

    Only strings whose name could be a registered colour qualify, so literals
    like ``"1.100"`` stay literals. Everything else is returned unchanged.
    """
    if isinstance(value, ColorRef):
        return value
    ref = resolve_color_ref(value)
    if ref is not None and COLOR_NAME_RE.match(ref.color_name):
        return ref
    return value


def is_color_ref(value: object) -> bool:
    """Check whether ``value`` is a colour reference rather than a literal."""
    return isinstance(value, ColorRef)


def color_token_name(name: str, step: int) -> str:
    """Compound name used for registry lookups and type generation (``blue500``)."""
    return f"{name}{step}"
