"""
Colour IR types: perceptual sources, definitions, references and scales.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .frozen import FrozenMap

# Canonical scale steps, light to dark.
CANONICAL_STEPS: Final[tuple[int, ...]] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Upper chroma bound for colours that stay inside displayable gamuts.
MAX_CHROMA: Final[float] = 0.4


class OKLCHColor(BaseModel):
    """A colour in OKLCH perceptual coordinates."""

    model_config = ConfigDict(frozen=True)

    l: float = Field(ge=0.0, le=1.0, description="Perceptual lightness (0-1)")  # noqa: E741
    c: float = Field(ge=0.0, le=MAX_CHROMA, description="Chroma (0-0.4)")
    h: float = Field(ge=0.0, lt=360.0, description="Hue in degrees (0-360)")


class ColorMetadata(BaseModel):
    """Non-functional description of a registered colour."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None
    tags: tuple[str, ...] = ()


class ColorDefinition(BaseModel):
    """A perceptual source colour plus the steps to derive from it."""

    model_config = ConfigDict(frozen=True)

    source: OKLCHColor
    scale: tuple[int, ...] = CANONICAL_STEPS
    metadata: ColorMetadata | None = None

    @field_validator("scale")
    @classmethod
    def _check_scale(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if not v:
            raise ValueError("scale must contain at least one step")
        invalid = [step for step in v if step not in CANONICAL_STEPS]
        if invalid:
            raise ValueError(f"invalid scale steps {invalid}; valid steps are {CANONICAL_STEPS}")
        if len(set(v)) != len(v):
            raise ValueError("scale steps must not repeat")
        if list(v) != sorted(v):
            raise ValueError("scale steps must be in ascending order")
        return v


class ColorRef(BaseModel):
    """Symbolic handle to one step of a named colour.

    A ``ColorRef`` is deliberately not a ``str``: theme variants hold either a
    reference or a literal CSS value, and the two never compare equal.
    """

    model_config = ConfigDict(frozen=True)

    color_name: str = Field(min_length=1)
    step: int

    @field_validator("step")
    @classmethod
    def _check_step(cls, v: int) -> int:
        if v not in CANONICAL_STEPS:
            raise ValueError(f"invalid color step {v}; valid steps are {CANONICAL_STEPS}")
        return v

    @property
    def token_name(self) -> str:
        """Compound registry name, e.g. ``blue500``."""
        return f"{self.color_name}{self.step}"

    def __str__(self) -> str:
        return f"{self.color_name}.{self.step}"


class GeneratedColorStep(BaseModel):
    """Concrete colour produced for one scale step."""

    model_config = ConfigDict(frozen=True)

    oklch: OKLCHColor
    hex: str


class ColorScale(BaseModel):
    """A registered colour: its definition and the generated steps."""

    model_config = ConfigDict(frozen=True)

    definition: ColorDefinition
    steps: FrozenMap[int, GeneratedColorStep]

    def get(self, step: int) -> GeneratedColorStep | None:
        return self.steps.get(step)

    def __contains__(self, step: object) -> bool:
        return step in self.steps


class DarkModeAdjustments(BaseModel):
    """Scale-wide tweaks for themes rendered on dark backgrounds.

    ``chroma_multiplier`` scales every step's chroma (capped at ``MAX_CHROMA``).
    ``contrast_boost`` pushes each step's lightness away from 0.5: light steps
    toward white, dark steps toward black, clamped to 0-1. ``1.0`` leaves the
    scale unchanged.
    """

    model_config = ConfigDict(frozen=True)

    chroma_multiplier: float = Field(default=1.0, ge=0.0)
    contrast_boost: float = Field(default=1.0, ge=1.0, le=2.0)
