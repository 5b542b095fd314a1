"""
Blueprint core theme: neutral and semantic colour scales plus the ``light``
and ``dark`` variants every other theme builds on.
"""

from __future__ import annotations

from ..core.builder import RegistrationContext
from ..core.errors import ValidationIssue, make_missing_color_issue, make_missing_variant_issue
from ..core.ir import ColorDefinition, ColorMetadata, OKLCHColor, ThemeConfig
from ..core.theme_base import ThemeBase

CORE_COLORS: dict[str, tuple[float, float, float]] = {
    "gray": (0.55, 0.02, 240.0),
    "blue": (0.55, 0.15, 240.0),
    "green": (0.55, 0.13, 145.0),
    "red": (0.55, 0.15, 25.0),
    "yellow": (0.65, 0.13, 85.0),
}

REQUIRED_VARIANTS: tuple[str, ...] = ("light", "dark")

_SHADOWS_LIGHT = {
    "shadowSm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "shadowMd": "0 4px 6px -1px rgb(0 0 0 / 0.1)",
    "shadowLg": "0 10px 15px -3px rgb(0 0 0 / 0.1)",
    "shadowXl": "0 20px 25px -5px rgb(0 0 0 / 0.1)",
}

_SHADOWS_DARK = {
    "shadowSm": "0 1px 2px 0 rgb(0 0 0 / 0.3)",
    "shadowMd": "0 4px 6px -1px rgb(0 0 0 / 0.4)",
    "shadowLg": "0 10px 15px -3px rgb(0 0 0 / 0.4)",
    "shadowXl": "0 20px 25px -5px rgb(0 0 0 / 0.5)",
}


class BlueprintCoreTheme(ThemeBase):
    id = "blueprint-core"
    version = "1.0.0"
    name = "Blueprint Core"
    description = "Default light and dark themes"
    author = "Blueprint"
    license = "MIT"
    tags = ("core", "light", "dark")

    def register(self, ctx: RegistrationContext) -> None:
        for color_name, (lightness, chroma, hue) in CORE_COLORS.items():
            ctx.add_color(
                color_name,
                ColorDefinition(
                    source=OKLCHColor(l=lightness, c=chroma, h=hue),
                    metadata=ColorMetadata(name=color_name.title(), tags=["core"]),
                ),
            )

        c = ctx.colors
        fonts = ctx.design_tokens.typography.font_families
        radius = ctx.design_tokens.radius
        shared = {
            "borderWidth": "1px",
            "fontFamily": fonts["sans"],
            "fontFamilyHeading": fonts["sans"],
            "fontFamilyMono": fonts["mono"],
            "borderRadius": f"{radius['md']}px",
            "borderRadiusLarge": f"{radius['lg']}px",
            "borderRadiusFull": f"{radius['full']}px",
        }

        ctx.add_theme_variant(
            "light",
            {
                "background": c["gray50"],
                "surface": c["gray100"],
                "surfaceElevated": c["gray50"],
                "surfaceSubdued": c["gray200"],
                "text": c["gray900"],
                "textMuted": c["gray600"],
                "textInverse": c["gray50"],
                "primary": c["blue600"],
                "primaryHover": c["blue700"],
                "primaryActive": c["blue800"],
                "success": c["green600"],
                "warning": c["yellow700"],
                "error": c["red600"],
                "info": c["blue500"],
                "border": c["gray200"],
                "borderStrong": c["gray500"],
                "focus": c["blue600"],
                **_SHADOWS_LIGHT,
                **shared,
            },
        )
        ctx.add_theme_variant(
            "dark",
            {
                "background": c["gray950"],
                "surface": c["gray900"],
                "surfaceElevated": c["gray800"],
                "surfaceSubdued": c["gray950"],
                "text": c["gray50"],
                "textMuted": c["gray400"],
                "textInverse": c["gray950"],
                "primary": c["blue400"],
                "primaryHover": c["blue300"],
                "primaryActive": c["blue200"],
                "success": c["green400"],
                "warning": c["yellow400"],
                "error": c["red400"],
                "info": c["blue300"],
                "border": c["gray800"],
                "borderStrong": c["gray500"],
                "focus": c["blue400"],
                **_SHADOWS_DARK,
                **shared,
            },
        )

    def validate(self, config: ThemeConfig) -> list[ValidationIssue]:
        issues = [
            make_missing_color_issue(name, self.id)
            for name in CORE_COLORS
            if name not in config.colors
        ]
        issues.extend(
            make_missing_variant_issue(variant, self.id)
            for variant in REQUIRED_VARIANTS
            if variant not in config.themes
        )
        return issues


blueprint_core = BlueprintCoreTheme()
