"""
Build configuration persistence.

Reads and writes ``blueprint-theme.yaml`` in the project root: which built-in
plugins to use, the WCAG level, strictness, dark-mode scale adjustments and
where artifacts go.

Default location: {project_root}/blueprint-theme.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .contrast import WCAGLevel
from .errors import BuildConfigError
from .ir import DarkModeAdjustments

logger = logging.getLogger(__name__)

BUILD_CONFIG_FILE = "blueprint-theme.yaml"

DEFAULT_PLUGINS: tuple[str, ...] = ("primitives", "blueprint-core")


class ThemeBuildConfig(BaseModel):
    """Contents of blueprint-theme.yaml."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    plugins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PLUGINS),
        description="Built-in plugin ids, in use order",
    )
    wcag_level: WCAGLevel = Field(default=WCAGLevel.AA, description="Contrast level to check")
    strict: bool = Field(default=False, description="Treat contrast violations as errors")
    output_dir: str = Field(default="dist/themes", description="Artifact directory")
    dark_mode: DarkModeAdjustments | None = Field(
        default=None, description="Chroma and contrast adjustments for dark scales"
    )


# =============================================================================
# Path helpers
# =============================================================================


def get_build_config_path(project_root: Path) -> Path:
    """Get the blueprint-theme.yaml file path."""
    return project_root / BUILD_CONFIG_FILE


def build_config_exists(project_root: Path) -> bool:
    """Check if a blueprint-theme.yaml exists in the project."""
    return get_build_config_path(project_root).exists()


# =============================================================================
# Loading and saving
# =============================================================================


def load_build_config(project_root: Path, *, use_defaults: bool = True) -> ThemeBuildConfig:
    """Load build configuration from blueprint-theme.yaml.

    Args:
        project_root: Project root directory.
        use_defaults: If True, return the default config when the file doesn't exist.

    Returns:
        ThemeBuildConfig instance.

    Raises:
        BuildConfigError: If the file doesn't exist (when use_defaults=False) or is invalid.
    """
    config_path = get_build_config_path(project_root)

    if not config_path.exists():
        if use_defaults:
            logger.debug(f"No {BUILD_CONFIG_FILE} found, using defaults")
            return ThemeBuildConfig()
        raise BuildConfigError(f"Build config not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise BuildConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty {BUILD_CONFIG_FILE} at {config_path}, using defaults")
            return ThemeBuildConfig()
        raise BuildConfigError(f"Empty or invalid YAML in {config_path}")

    if not isinstance(data, dict):
        raise BuildConfigError(f"Expected a mapping in {config_path}, got {type(data).__name__}")

    try:
        return ThemeBuildConfig.model_validate(data)
    except ValidationError as e:
        raise BuildConfigError(f"Invalid build config schema in {config_path}: {e}") from e


def save_build_config(project_root: Path, config: ThemeBuildConfig) -> Path:
    """Save build configuration to blueprint-theme.yaml.

    Returns:
        Path to the saved file.
    """
    config_path = get_build_config_path(project_root)
    config_path.write_text(
        yaml.dump(
            config.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    logger.info(f"Saved build config to {config_path}")
    return config_path
