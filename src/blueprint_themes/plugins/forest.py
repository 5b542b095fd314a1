"""
Forest theme: green primary on top of the core variants.
"""

from __future__ import annotations

from ..core.builder import RegistrationContext
from ..core.errors import ValidationIssue, make_missing_color_issue
from ..core.ir import ColorDefinition, ColorMetadata, OKLCHColor, ThemeConfig
from ..core.plugin import define_plugin


def _register(ctx: RegistrationContext) -> None:
    ctx.add_color(
        "forestPrimary",
        ColorDefinition(
            source=OKLCHColor(l=0.6271, c=0.1699, h=149.21),
            metadata=ColorMetadata(name="Forest Primary", description="Deep forest green"),
        ),
    )
    ctx.extend_theme_variant(
        "light",
        "forest-light",
        {
            "primary": ctx.ref("forestPrimary", 600),
            "primaryHover": ctx.ref("forestPrimary", 700),
            "primaryActive": ctx.ref("forestPrimary", 800),
            "focus": ctx.ref("forestPrimary", 600),
        },
    )
    ctx.extend_theme_variant(
        "dark",
        "forest-dark",
        {
            "primary": ctx.ref("forestPrimary", 400),
            "primaryHover": ctx.ref("forestPrimary", 300),
            "primaryActive": ctx.ref("forestPrimary", 200),
            "focus": ctx.ref("forestPrimary", 400),
        },
    )


def _validate(config: ThemeConfig) -> list[ValidationIssue]:
    if "forestPrimary" not in config.colors:
        return [make_missing_color_issue("forestPrimary", "forest")]
    return []


forest = define_plugin(
    id="forest",
    version="1.0.0",
    register=_register,
    validate=_validate,
    dependencies=[
        {"id": "primitives", "version": "^1.0.0"},
        {"id": "blueprint-core", "version": "^1.0.0"},
    ],
    name="Forest",
    description="Nature-inspired green theme",
    author="Blueprint",
    license="MIT",
    tags=["green", "nature"],
)
