"""
Primitive colours shared by every theme: near-white and near-black.
"""

from __future__ import annotations

from ..core.builder import RegistrationContext
from ..core.ir import ColorDefinition, ColorMetadata, OKLCHColor
from ..core.plugin import ThemePlugin


class PrimitivesPlugin(ThemePlugin):
    id = "primitives"
    version = "1.0.0"
    name = "Primitives"
    description = "White and black primitives used for inverse text and elevated surfaces"
    author = "Blueprint"
    license = "MIT"
    tags = ("core", "primitives")

    def register(self, ctx: RegistrationContext) -> None:
        ctx.add_color(
            "white",
            ColorDefinition(
                source=OKLCHColor(l=1.0, c=0.0, h=0.0),
                scale=(50,),
                metadata=ColorMetadata(name="White", tags=["primitive"]),
            ),
        )
        ctx.add_color(
            "black",
            ColorDefinition(
                source=OKLCHColor(l=0.0, c=0.0, h=0.0),
                scale=(950,),
                metadata=ColorMetadata(name="Black", tags=["primitive"]),
            ),
        )


primitives = PrimitivesPlugin()
