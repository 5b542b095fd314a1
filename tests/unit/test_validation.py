"""Tests for aggregated theme validation and the pipeline facade."""

from __future__ import annotations

import pytest

from blueprint_themes.core.defaults import DEFAULT_DESIGN_TOKENS
from blueprint_themes.core.errors import (
    DependencyMissingError,
    ErrorKind,
    ThemeValidationFailed,
    ValidationIssue,
)
from blueprint_themes.core.ir import DarkModeAdjustments, ThemeConfig
from blueprint_themes.core.pipeline import run_theme_pipeline
from blueprint_themes.core.plugin import define_plugin
from blueprint_themes.core.validation import REQUIRED_SEMANTIC_TOKENS, validate_theme
from blueprint_themes.plugins import blueprint_core, forest, primitives


def _low_contrast(ctx) -> None:
    ctx.add_theme_variant("murky", {"text": "#777777", "background": "#888888"})


class TestValidateTheme:
    """Test validate_theme aggregation."""

    def test_core_is_clean(self, core_config):
        result = validate_theme(core_config, [primitives, blueprint_core])

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []
        assert result.violations == []

    def test_plugin_issues_are_errors(self):
        config = ThemeConfig(colors={}, themes={}, design_tokens=DEFAULT_DESIGN_TOKENS)

        result = validate_theme(config, [blueprint_core])

        assert not result.is_valid
        kinds = [issue.kind for issue in result.errors]
        assert kinds.count(ErrorKind.MISSING_COLOR) == 5
        assert kinds.count(ErrorKind.MISSING_THEME_VARIANT) == 2
        assert {issue.plugin for issue in result.errors} == {"blueprint-core"}

    def test_plugin_id_filled_in(self):
        plugin = define_plugin(
            id="picky",
            version="1.0.0",
            register=lambda ctx: None,
            validate=lambda config: [
                ValidationIssue(kind=ErrorKind.MISSING_COLOR, message="no brand color")
            ],
        )
        config = ThemeConfig(colors={}, themes={}, design_tokens=DEFAULT_DESIGN_TOKENS)

        result = validate_theme(config, [plugin])
        assert result.errors[0].plugin == "picky"

    def test_crashing_validate_is_reported(self):
        def crash(config):
            raise RuntimeError("boom")

        plugin = define_plugin(
            id="fragile", version="1.0.0", register=lambda ctx: None, validate=crash
        )
        config = ThemeConfig(colors={}, themes={}, design_tokens=DEFAULT_DESIGN_TOKENS)

        result = validate_theme(config, [plugin])
        assert len(result.errors) == 1
        assert result.errors[0].kind == ErrorKind.INVALID_PLUGIN
        assert "boom" in result.errors[0].message

    def test_missing_semantic_tokens_warn(self):
        config = ThemeConfig(
            colors={},
            themes={"sparse": {"text": "#000000"}},
            design_tokens=DEFAULT_DESIGN_TOKENS,
        )

        result = validate_theme(config)
        assert result.is_valid
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.kind == ErrorKind.MISSING_TOKEN
        assert "background" in warning.context["missing"]
        assert len(warning.context["missing"]) == len(REQUIRED_SEMANTIC_TOKENS) - 1

    def test_violations_block_only_when_strict(self):
        config = ThemeConfig(
            colors={},
            themes={"murky": {"text": "#777777", "background": "#888888"}},
            design_tokens=DEFAULT_DESIGN_TOKENS,
        )
        result = validate_theme(config)

        assert result.is_valid
        assert len(result.violations) == 1
        result.raise_for_errors()

        with pytest.raises(ThemeValidationFailed) as exc_info:
            result.raise_for_errors(strict=True)
        assert exc_info.value.issues[0].kind == ErrorKind.CONTRAST_VIOLATION

    def test_repr(self, core_config):
        assert "errors=0" in repr(validate_theme(core_config))


class TestRunThemePipeline:
    """Test the build-then-validate facade."""

    def test_builtins_ok(self):
        result = run_theme_pipeline([primitives, blueprint_core, forest])

        assert result.ok
        assert set(result.config.themes) == {"light", "dark", "forest-light", "forest-dark"}
        assert result.validation.level == "AA"

    def test_strict_checks_aaa_and_blocks(self):
        result = run_theme_pipeline([primitives, blueprint_core], strict=True)

        assert result.validation.level == "AAA"
        assert result.validation.violations
        assert not result.ok
        assert all(i.kind == ErrorKind.CONTRAST_VIOLATION for i in result.blocking_issues)

    def test_aaa_without_strict_reports_but_passes(self):
        result = run_theme_pipeline([primitives, blueprint_core], level="AAA")

        assert result.validation.violations
        assert result.ok

    def test_enforce_wcag_token_blocks(self):
        accessibility = DEFAULT_DESIGN_TOKENS.accessibility.model_copy(
            update={"enforce_wcag": True}
        )
        defaults = DEFAULT_DESIGN_TOKENS.model_copy(update={"accessibility": accessibility})
        murky = define_plugin(id="murky", version="1.0.0", register=_low_contrast)

        result = run_theme_pipeline([murky], defaults=defaults)
        assert result.enforce_contrast
        assert not result.ok

    def test_fatal_errors_propagate(self):
        with pytest.raises(DependencyMissingError):
            run_theme_pipeline([forest])

    def test_dark_mode_adjustments(self):
        plain = run_theme_pipeline([primitives, blueprint_core])
        adjusted = run_theme_pipeline(
            [primitives, blueprint_core], dark_mode=DarkModeAdjustments(chroma_multiplier=0.0)
        )

        assert adjusted.config.dark_mode == DarkModeAdjustments(chroma_multiplier=0.0)
        assert adjusted.config.colors["blue"].get(500).oklch.c == 0.0
        assert plain.config.colors["blue"].get(500).oklch.c > 0.0
