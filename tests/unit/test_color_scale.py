"""Tests for OKLCH math and colour scale generation."""

from __future__ import annotations

import re

import pytest
from pydantic import ValidationError

from blueprint_themes.core.color_scale import (
    CHROMA_CURVE,
    LIGHTNESS_CURVE,
    apply_contrast_boost,
    generate_all_scales,
    generate_scale,
)
from blueprint_themes.core.ir import (
    CANONICAL_STEPS,
    MAX_CHROMA,
    ColorDefinition,
    DarkModeAdjustments,
    OKLCHColor,
)
from blueprint_themes.core.oklch import (
    format_oklch,
    hex_to_linear_srgb,
    oklch_to_css,
    oklch_to_hex,
    parse_css_color,
)

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


def _blue(**kwargs) -> ColorDefinition:
    return ColorDefinition(source=OKLCHColor(l=0.55, c=0.15, h=240.0), **kwargs)


# =============================================================================
# OKLCH math
# =============================================================================


class TestOKLCH:
    """Test OKLCH conversions and formatting."""

    def test_white_and_black_hex(self):
        assert oklch_to_hex(OKLCHColor(l=1.0, c=0.0, h=0.0)) == "#ffffff"
        assert oklch_to_hex(OKLCHColor(l=0.0, c=0.0, h=0.0)) == "#000000"

    def test_out_of_gamut_is_clamped(self):
        assert HEX_RE.match(oklch_to_hex(OKLCHColor(l=0.9, c=0.4, h=150.0)))

    def test_css_format(self):
        assert oklch_to_css(0.5, 0.1, 240) == "oklch(0.500 0.1000 240.0)"
        assert oklch_to_css(0.5, 0.1, 240, alpha=0.5) == "oklch(0.500 0.1000 240.0 / 0.50)"
        assert format_oklch(OKLCHColor(l=0.5, c=0.1, h=240)) == "oklch(0.500 0.1000 240.0)"

    def test_hex_to_linear(self):
        assert hex_to_linear_srgb("#fff") == pytest.approx((1.0, 1.0, 1.0))
        assert hex_to_linear_srgb("#000000") == (0.0, 0.0, 0.0)
        with pytest.raises(ValueError):
            hex_to_linear_srgb("red")

    def test_parse_css_color(self):
        assert parse_css_color("white") == pytest.approx((1.0, 1.0, 1.0))
        assert parse_css_color("black") == (0.0, 0.0, 0.0)
        assert parse_css_color("oklch(0.5 0.1 240)") == pytest.approx(
            parse_css_color("oklch(50% 0.1 240)")
        )
        assert parse_css_color("var(--bp-gray-500)") is None
        assert parse_css_color("1px") is None

    @pytest.mark.parametrize(
        "value",
        [
            "oklch(0.2.1 0.1 20)",
            "oklch(0.5 0.1.2 20)",
            "oklch(. 0.1 20)",
            "oklch(0.5 0.1 20 / 1.2.3)",
        ],
    )
    def test_parse_malformed_oklch_returns_none(self, value):
        assert parse_css_color(value) is None

    def test_parse_oklch_forms(self):
        assert parse_css_color("oklch(.5 .1 240deg)") == pytest.approx(
            parse_css_color("oklch(0.5 0.1 240)")
        )
        assert parse_css_color("oklch(0.5 0.1 240 / 50%)") is not None

    def test_model_bounds(self):
        with pytest.raises(ValidationError):
            OKLCHColor(l=1.2, c=0.1, h=0)
        with pytest.raises(ValidationError):
            OKLCHColor(l=0.5, c=0.5, h=0)
        with pytest.raises(ValidationError):
            OKLCHColor(l=0.5, c=0.1, h=360)


# =============================================================================
# Definitions
# =============================================================================


class TestColorDefinition:
    """Test scale validation on definitions."""

    def test_default_scale_is_canonical(self):
        assert _blue().scale == CANONICAL_STEPS

    @pytest.mark.parametrize("scale", [(), (150,), (500, 100), (100, 100)])
    def test_invalid_scales(self, scale):
        with pytest.raises(ValidationError):
            _blue(scale=scale)


# =============================================================================
# Scale generation
# =============================================================================


class TestGenerateScale:
    """Test scale generation."""

    def test_every_requested_step_present(self):
        scale = generate_scale(_blue())
        assert list(scale.steps) == list(CANONICAL_STEPS)

    def test_omitted_steps_absent(self):
        scale = generate_scale(_blue(scale=(100, 500, 900)))
        assert set(scale.steps) == {100, 500, 900}
        assert 200 not in scale
        assert scale.get(200) is None

    def test_deterministic(self):
        first = generate_scale(_blue())
        second = generate_scale(_blue())
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_hue_held_constant(self):
        scale = generate_scale(_blue())
        assert {step.oklch.h for step in scale.steps.values()} == {240.0}

    def test_lightness_from_curve_not_source(self):
        dark_source = ColorDefinition(source=OKLCHColor(l=0.2, c=0.1, h=30.0))
        light_source = ColorDefinition(source=OKLCHColor(l=0.9, c=0.1, h=30.0))

        for step in CANONICAL_STEPS:
            expected = LIGHTNESS_CURVE[step]
            assert generate_scale(dark_source).steps[step].oklch.l == expected
            assert generate_scale(light_source).steps[step].oklch.l == expected

    def test_lightness_decreases(self):
        scale = generate_scale(_blue())
        values = [scale.steps[s].oklch.l for s in CANONICAL_STEPS]
        assert values == sorted(values, reverse=True)

    def test_chroma_tapers_at_extremes(self):
        scale = generate_scale(_blue())
        mid = scale.steps[500].oklch.c
        assert scale.steps[50].oklch.c <= mid
        assert scale.steps[950].oklch.c <= mid

    def test_chroma_never_increases_toward_ends(self):
        curve = [CHROMA_CURVE[s] for s in CANONICAL_STEPS]
        peak = curve.index(max(curve))
        assert curve[: peak + 1] == sorted(curve[: peak + 1])
        assert curve[peak:] == sorted(curve[peak:], reverse=True)

    def test_single_step(self):
        definition = ColorDefinition(source=OKLCHColor(l=0.3, c=0.2, h=10.0), scale=(500,))
        scale = generate_scale(definition)

        assert list(scale.steps) == [500]
        step = scale.steps[500]
        assert step.oklch.l == LIGHTNESS_CURVE[500]
        assert step.oklch.l != definition.source.l
        assert step.oklch.c == pytest.approx(0.2 * CHROMA_CURVE[500])

    def test_hex_values(self):
        for step in generate_scale(_blue()).steps.values():
            assert HEX_RE.match(step.hex)

    def test_achromatic_source_stays_achromatic(self):
        scale = generate_scale(ColorDefinition(source=OKLCHColor(l=0.5, c=0.0, h=0.0)))
        for step in scale.steps.values():
            assert step.oklch.c == 0.0
            r, g, b = step.hex[1:3], step.hex[3:5], step.hex[5:7]
            assert r == g == b

    def test_generate_all_scales_preserves_order(self):
        scales = generate_all_scales({"blue": _blue(), "gray": _blue(scale=(500,))})
        assert list(scales) == ["blue", "gray"]


# =============================================================================
# Dark mode adjustments
# =============================================================================


class TestDarkMode:
    """Test chroma and lightness adjustments for dark themes."""

    def test_unset_matches_neutral_adjustments(self):
        neutral = DarkModeAdjustments()
        assert generate_scale(_blue(), neutral) == generate_scale(_blue())
        assert generate_all_scales({"blue": _blue()}, neutral) == generate_all_scales(
            {"blue": _blue()}
        )

    def test_chroma_multiplier(self):
        base = generate_scale(_blue())
        halved = generate_scale(_blue(), DarkModeAdjustments(chroma_multiplier=0.5))
        for step in CANONICAL_STEPS:
            assert halved.steps[step].oklch.c == pytest.approx(
                base.steps[step].oklch.c * 0.5, abs=1e-6
            )
            assert halved.steps[step].oklch.l == base.steps[step].oklch.l
            assert halved.steps[step].oklch.h == 240.0

    def test_chroma_is_capped(self):
        vivid = ColorDefinition(source=OKLCHColor(l=0.6, c=0.35, h=30.0))
        scale = generate_scale(vivid, DarkModeAdjustments(chroma_multiplier=3.0))
        assert max(step.oklch.c for step in scale.steps.values()) == MAX_CHROMA

    def test_contrast_boost_pushes_away_from_mid_grey(self):
        boosted = generate_scale(_blue(), DarkModeAdjustments(contrast_boost=1.5))
        assert boosted.steps[200].oklch.l == pytest.approx(0.922 + 0.078 * 0.5)
        assert boosted.steps[800].oklch.l == pytest.approx(0.269 * 0.5)

    def test_full_boost_clamps_to_extremes(self):
        scale = generate_scale(_blue(), DarkModeAdjustments(contrast_boost=2.0))
        for step in CANONICAL_STEPS:
            expected = 1.0 if LIGHTNESS_CURVE[step] > 0.5 else 0.0
            assert scale.steps[step].oklch.l == pytest.approx(expected)

    @pytest.mark.parametrize(
        ("lightness", "boost", "expected"),
        [(0.7, 1.0, 0.7), (0.8, 1.5, 0.9), (0.2, 1.5, 0.1), (0.5, 2.0, 0.0), (0.99, 2.0, 1.0)],
    )
    def test_apply_contrast_boost(self, lightness, boost, expected):
        assert apply_contrast_boost(lightness, boost) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "kwargs", [{"chroma_multiplier": -0.1}, {"contrast_boost": 0.9}, {"contrast_boost": 2.1}]
    )
    def test_bounds(self, kwargs):
        with pytest.raises(ValidationError):
            DarkModeAdjustments(**kwargs)
