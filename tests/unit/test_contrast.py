"""Tests for WCAG contrast validation."""

from __future__ import annotations

import pytest

from blueprint_themes.core import contrast
from blueprint_themes.core.color_scale import generate_scale
from blueprint_themes.core.contrast import (
    CONTRAST_PAIRINGS,
    WCAGLevel,
    check_contrast_pair,
    contrast_ratio,
    meets_wcag,
    relative_luminance,
    required_ratio,
    resolve_theme_color,
    validate_theme_contrast,
)
from blueprint_themes.core.defaults import DEFAULT_DESIGN_TOKENS
from blueprint_themes.core.errors import UnresolvedColorRefError
from blueprint_themes.core.ir import ColorDefinition, ColorRef, OKLCHColor, ThemeConfig


def _config(themes, colors=None) -> ThemeConfig:
    return ThemeConfig(
        colors=colors or {}, themes=themes, design_tokens=DEFAULT_DESIGN_TOKENS
    )


def _slate() -> dict:
    """Achromatic scale: relative luminance is exactly L**3."""
    return {"slate": generate_scale(ColorDefinition(source=OKLCHColor(l=0.5, c=0.0, h=0.0)))}


class TestLuminance:
    """Test luminance and ratio math."""

    def test_white_and_black(self):
        assert relative_luminance((1.0, 1.0, 1.0)) == pytest.approx(1.0)
        assert relative_luminance((0.0, 0.0, 0.0)) == 0.0
        assert contrast_ratio((1.0, 1.0, 1.0), (0.0, 0.0, 0.0)) == pytest.approx(21.0)

    def test_ratio_is_symmetric(self):
        fg, bg = (0.2, 0.3, 0.4), (0.9, 0.9, 0.8)
        assert contrast_ratio(fg, bg) == contrast_ratio(bg, fg)

    def test_same_color(self):
        assert contrast_ratio((0.5, 0.5, 0.5), (0.5, 0.5, 0.5)) == pytest.approx(1.0)


class TestThresholds:
    """Test level tables and pass/fail edges."""

    def test_tables(self):
        assert required_ratio("AA", "text") == 4.5
        assert required_ratio("AA", "ui") == 3.0
        assert required_ratio("AAA", "text") == 7.0
        assert required_ratio("AAA", "ui") == 4.5

    def test_meets_wcag(self):
        assert meets_wcag(4.5)
        assert not meets_wcag(4.49)
        assert meets_wcag(3.0, large_text=True)
        assert not meets_wcag(4.6, "AAA")
        assert meets_wcag(4.6, WCAGLevel.AAA, large_text=True)

    def test_exact_threshold_is_not_a_violation(self):
        assert check_contrast_pair("light.text", "a", "b", ratio=4.5, required=4.5) is None

    def test_just_below_threshold_is_a_violation(self):
        violation = check_contrast_pair("light.text", "a", "b", ratio=4.49, required=4.5)

        assert violation is not None
        assert violation.ratio == 4.49
        assert violation.required == 4.5
        assert violation.token == "light.text"


class TestResolveThemeColor:
    """Test resolution of semantic token values."""

    def test_literals(self):
        assert resolve_theme_color("white", {}) == pytest.approx((1.0, 1.0, 1.0))
        assert resolve_theme_color("#000", {}) == (0.0, 0.0, 0.0)
        assert resolve_theme_color("var(--x)", {}) is None

    def test_color_ref(self):
        rgb = resolve_theme_color(ColorRef(color_name="slate", step=500), _slate())
        assert relative_luminance(rgb) == pytest.approx(0.556**3, rel=1e-6)

    def test_serialized_ref_string(self):
        colors = _slate()
        assert resolve_theme_color("slate.500", colors) == resolve_theme_color(
            ColorRef(color_name="slate", step=500), colors
        )

    def test_unknown_ref(self):
        with pytest.raises(UnresolvedColorRefError):
            resolve_theme_color(ColorRef(color_name="nope", step=500), {})

    def test_unknown_serialized_ref(self):
        with pytest.raises(UnresolvedColorRefError, match="ghost.500"):
            resolve_theme_color("ghost.500", {})

    def test_numeric_literal_is_not_a_ref(self):
        assert resolve_theme_color("1.100", {}) is None


class TestValidateThemeContrast:
    """Test validation across variants and pairings."""

    def test_ratio_at_threshold_passes(self, monkeypatch):
        monkeypatch.setattr(contrast, "contrast_ratio", lambda fg, bg: 4.5)
        config = _config({"light": {"text": "#000000", "background": "#ffffff"}})

        assert validate_theme_contrast(config.colors, config, "AA") == []

    def test_ratio_below_threshold_fails(self, monkeypatch):
        monkeypatch.setattr(contrast, "contrast_ratio", lambda fg, bg: 4.49)
        config = _config({"light": {"text": "#000000", "background": "#ffffff"}})

        violations = validate_theme_contrast(config.colors, config, "AA")
        assert len(violations) == 1
        assert violations[0].required == 4.5
        assert violations[0].ratio == 4.49
        assert violations[0].token == "light.text"

    def test_aaa_turns_aa_passes_into_violations(self):
        # slate.500 on white is about 4.73:1
        config = _config(
            {"custom": {"text": ColorRef(color_name="slate", step=500), "background": "#ffffff"}},
            _slate(),
        )

        assert validate_theme_contrast(config.colors, config, WCAGLevel.AA) == []

        violations = validate_theme_contrast(config.colors, config, WCAGLevel.AAA)
        assert len(violations) == 1
        violation = violations[0]
        assert violation.token == "custom.text"
        assert violation.foreground == "slate.500"
        assert violation.background == "#ffffff"
        assert violation.required == 7.0
        assert 4.5 < violation.ratio < 7.0

    def test_ui_pairings_use_lower_threshold(self, monkeypatch):
        monkeypatch.setattr(contrast, "contrast_ratio", lambda fg, bg: 3.2)
        config = _config({"light": {"borderStrong": "#777777", "background": "#ffffff"}})

        assert validate_theme_contrast(config.colors, config, "AA") == []
        violations = validate_theme_contrast(config.colors, config, "AAA")
        assert [v.required for v in violations] == [4.5]

    def test_missing_tokens_are_skipped(self):
        config = _config({"sparse": {"text": "#777777"}})
        assert validate_theme_contrast(config.colors, config) == []

    def test_non_color_literals_are_skipped(self):
        config = _config({"light": {"text": "var(--brand)", "background": "#ffffff"}})
        assert validate_theme_contrast(config.colors, config) == []

    def test_malformed_oklch_literal_is_skipped(self):
        config = _config({"light": {"text": "oklch(0.2.1 0.1 20)", "background": "#ffffff"}})
        assert validate_theme_contrast(config.colors, config) == []

    def test_one_violation_per_failing_pairing(self):
        config = _config(
            {
                "a": {"text": "#777777", "background": "#888888", "surface": "#888888"},
                "b": {"text": "#000000", "background": "#ffffff"},
            }
        )
        violations = validate_theme_contrast(config.colors, config)
        assert [v.token for v in violations] == ["a.text", "a.text"]
        assert {v.background for v in violations} == {"#888888"}

    def test_read_only(self, core_config):
        before = core_config.model_dump()
        validate_theme_contrast(core_config.colors, core_config, "AAA")
        assert core_config.model_dump() == before

    def test_pairings_cover_inverse_text(self):
        assert ("textInverse", "primary", "text") in CONTRAST_PAIRINGS


class TestBuiltinContrast:
    """Test the built-in themes against WCAG."""

    def test_core_passes_aa(self, core_config):
        assert validate_theme_contrast(core_config.colors, core_config, "AA") == []

    def test_core_has_aaa_failures(self, core_config):
        assert validate_theme_contrast(core_config.colors, core_config, "AAA")

    def test_forest_passes_aa(self):
        from blueprint_themes.core.builder import ThemeBuilder
        from blueprint_themes.plugins import blueprint_core, forest, primitives

        config = ThemeBuilder().use(primitives).use(blueprint_core).use(forest).build()
        assert validate_theme_contrast(config.colors, config, "AA") == []
