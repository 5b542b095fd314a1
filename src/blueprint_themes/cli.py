"""
blueprint-themes command line interface.

Commands:
    build     Build, validate and write theme.css / colors.d.ts
    validate  Build and report validation findings without writing
    plugins   List built-in plugins

Environment:
    LOG_LEVEL  Logging level when --verbose is not given (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blueprint_themes._version import get_version
from blueprint_themes.core.build_config import load_build_config
from blueprint_themes.core.contrast import WCAGLevel
from blueprint_themes.core.errors import ThemeError
from blueprint_themes.core.pipeline import ThemeBuildResult, run_theme_pipeline
from blueprint_themes.generator import write_theme_artifacts
from blueprint_themes.plugins import list_plugins, resolve_plugin_ids

app = typer.Typer(
    help="Build-time theme pipeline: plugins, colour scales, tokens and contrast checks",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"blueprint-themes {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """blueprint-themes CLI."""


# =============================================================================
# Helpers
# =============================================================================


def _run(
    project: Path,
    level: WCAGLevel | None,
    strict: bool,
    plugin_ids: list[str] | None,
) -> tuple[ThemeBuildResult, Path]:
    """Load config, resolve plugins and run the pipeline, exiting on fatal errors."""
    try:
        build_config = load_build_config(project)
        plugins = resolve_plugin_ids(plugin_ids or build_config.plugins)
        result = run_theme_pipeline(
            plugins,
            level=level or build_config.wcag_level,
            strict=strict or build_config.strict,
            dark_mode=build_config.dark_mode,
        )
    except ThemeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    return result, project / build_config.output_dir


def _print_report(result: ThemeBuildResult) -> None:
    validation = result.validation
    config = result.config

    console.print(
        f"Built [bold]{len(config.colors)}[/bold] colors, "
        f"[bold]{len(config.themes)}[/bold] theme variants "
        f"({', '.join(config.themes) or 'none'})"
    )

    issues = [("error", issue) for issue in validation.errors]
    issues += [("warning", issue) for issue in validation.warnings]
    if issues:
        table = Table(title="Validation issues")
        table.add_column("Severity")
        table.add_column("Kind")
        table.add_column("Plugin")
        table.add_column("Message")
        for severity, issue in issues:
            style = "red" if severity == "error" else "yellow"
            table.add_row(
                f"[{style}]{severity}[/{style}]",
                issue.kind,
                issue.plugin or "-",
                escape(issue.message),
            )
        console.print(table)

    if validation.violations:
        severity = "error" if result.enforce_contrast else "warning"
        table = Table(title=f"Contrast violations ({validation.level}, {severity})")
        table.add_column("Token")
        table.add_column("Foreground")
        table.add_column("Background")
        table.add_column("Ratio", justify="right")
        table.add_column("Required", justify="right")
        for violation in validation.violations:
            table.add_row(
                violation.token,
                violation.foreground,
                violation.background,
                f"{violation.ratio:.2f}",
                f"{violation.required:.1f}",
            )
        console.print(table)
    else:
        console.print(f"[green]No contrast violations at {validation.level}[/green]")


# =============================================================================
# Commands
# =============================================================================

ProjectOption = Annotated[
    Path, typer.Option("--project", "-p", help="Project root containing blueprint-theme.yaml")
]
LevelOption = Annotated[
    WCAGLevel | None, typer.Option("--level", "-l", help="WCAG level (default from config)")
]
StrictOption = Annotated[
    bool, typer.Option("--strict", help="Check at AAA and treat contrast violations as errors")
]
PluginOption = Annotated[
    list[str] | None,
    typer.Option("--plugin", help="Plugin id to use (repeatable, overrides config)"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


@app.command()
def build(
    project: ProjectOption = Path("."),
    level: LevelOption = None,
    strict: StrictOption = False,
    plugin: PluginOption = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output directory (default from config)")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Build the theme and write theme.css and colors.d.ts."""
    _configure_logging(verbose)
    result, default_output = _run(project, level, strict, plugin)
    _print_report(result)

    if not result.ok:
        console.print(
            f"[red]Build failed with {len(result.blocking_issues)} blocking issue(s)[/red]"
        )
        raise typer.Exit(code=1)

    paths = write_theme_artifacts(result.config, output or default_output)
    for path in paths:
        console.print(f"[green]Wrote[/green] {path}")


@app.command()
def validate(
    project: ProjectOption = Path("."),
    level: LevelOption = None,
    strict: StrictOption = False,
    plugin: PluginOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Build the theme and report issues without writing artifacts."""
    _configure_logging(verbose)
    result, _ = _run(project, level, strict, plugin)
    _print_report(result)

    if not result.ok:
        raise typer.Exit(code=1)
    console.print("[green]Theme is valid[/green]")


@app.command(name="plugins")
def plugins_command() -> None:
    """List built-in plugins."""
    table = Table(title="Built-in plugins")
    table.add_column("ID", style="cyan")
    table.add_column("Version")
    table.add_column("Depends on")
    table.add_column("Description")
    for plugin in list_plugins():
        deps = ", ".join(
            f"{dep.id}{' ' + dep.version if dep.version else ''}" for dep in plugin.dependencies
        )
        table.add_row(plugin.id, plugin.version, deps or "-", plugin.description or "")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
