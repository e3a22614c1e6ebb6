"""
launcher-integration CLI.

Entry points the build-lifecycle runner calls on plugin install and uninstall.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.table import Table

from .core.config import get_config
from .core.logging import setup_logging
from .core.types import HookResult, HookStatus
from .models.project import ProjectContext, parse_version

app = typer.Typer(
    name="launcher-integration",
    help="Enable or disable launcher deep linking in a Cordova Android project",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"launcher-integration v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """launcher-integration: Cordova deep-linking project hooks."""
    pass


ProjectRootOption = typer.Option(None, "--project-root", "-r", help="Root of the Cordova project")
PluginDirOption = typer.Option(None, "--plugin-dir", help="Installation directory of the plugin")
PlatformOption = typer.Option([], "--platform", "-p", help="Platform targeted by the project (repeatable)")
CordovaVersionOption = typer.Option(None, "--cordova-version", help="Version of the Cordova CLI")
ContextFileOption = typer.Option(
    None,
    "--context-file",
    "-c",
    help="JSON hook context from the build runner (overrides the other options)",
    exists=True,
    dir_okay=False,
    resolve_path=True,
)


def build_context(
    project_root: Optional[Path],
    plugin_dir: Optional[Path],
    platforms: list[str],
    cordova_version: Optional[str],
    context_file: Optional[Path],
) -> ProjectContext:
    """Build the project context from a hook context file or from options."""
    if context_file is not None:
        try:
            return ProjectContext.from_hook_context(json.loads(context_file.read_text(encoding="utf-8")))
        except (ValueError, AttributeError, TypeError) as exc:
            # JSONDecodeError and pydantic's ValidationError are both ValueErrors
            raise typer.BadParameter(f"not a hook context: {exc}", param_hint="--context-file") from exc
    return ProjectContext(
        project_root=project_root,
        plugin_dir=plugin_dir,
        cordova_version=parse_version(cordova_version),
        platforms=platforms,
    )


def run_hook(hook: Callable[..., HookResult], project: ProjectContext) -> None:
    """Run one hook, print its outcome and exit non-zero when it failed."""
    from .orchestration import DeepLinkingHooks

    config = get_config()
    setup_logging(config)

    result = hook(DeepLinkingHooks(config), project)

    if result.status == HookStatus.COMPLETED:
        console.print(f"[bold green]✓ {result.hook_name} completed[/bold green]")
        for path in result.touched_files:
            console.print(f"  • {path}")
    elif result.status == HookStatus.SKIPPED:
        console.print(f"[yellow]{result.hook_name} skipped: {result.message}[/yellow]")
    else:
        console.print(f"[bold red]✗ {result.hook_name} failed![/bold red]")
        console.print(f"Error: {result.message}")
        raise typer.Exit(1)


@app.command()
def enable(
    project_root: Optional[Path] = ProjectRootOption,
    plugin_dir: Optional[Path] = PluginDirOption,
    platform: list[str] = PlatformOption,
    cordova_version: Optional[str] = CordovaVersionOption,
    context_file: Optional[Path] = ContextFileOption,
) -> None:
    """Install the deep-linking activity and relink the main activity."""
    project = build_context(project_root, plugin_dir, platform, cordova_version, context_file)
    run_hook(lambda hooks, p: hooks.enable(p), project)


@app.command()
def disable(
    project_root: Optional[Path] = ProjectRootOption,
    plugin_dir: Optional[Path] = PluginDirOption,
    platform: list[str] = PlatformOption,
    cordova_version: Optional[str] = CordovaVersionOption,
    context_file: Optional[Path] = ContextFileOption,
) -> None:
    """Remove the deep-linking activity and restore the main activity's parent."""
    project = build_context(project_root, plugin_dir, platform, cordova_version, context_file)
    run_hook(lambda hooks, p: hooks.disable(p), project)


@app.command("add-filter")
def add_filter(
    project_root: Optional[Path] = ProjectRootOption,
    plugin_dir: Optional[Path] = PluginDirOption,
    platform: list[str] = PlatformOption,
    cordova_version: Optional[str] = CordovaVersionOption,
    context_file: Optional[Path] = ContextFileOption,
) -> None:
    """Add the VIEW/DEFAULT intent filter to the launch activity."""
    project = build_context(project_root, plugin_dir, platform, cordova_version, context_file)
    run_hook(lambda hooks, p: hooks.add_intent_filter(p), project)


@app.command("remove-filter")
def remove_filter(
    project_root: Optional[Path] = ProjectRootOption,
    plugin_dir: Optional[Path] = PluginDirOption,
    platform: list[str] = PlatformOption,
    cordova_version: Optional[str] = CordovaVersionOption,
    context_file: Optional[Path] = ContextFileOption,
) -> None:
    """Remove VIEW/DEFAULT intent filters without data from the launch activity."""
    project = build_context(project_root, plugin_dir, platform, cordova_version, context_file)
    run_hook(lambda hooks, p: hooks.remove_intent_filter(p), project)


@app.command()
def config() -> None:
    """Show the current configuration."""
    cfg = get_config()

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", cfg.log_level)
    table.add_row("Plugin Activity", cfg.plugin_activity_name)
    table.add_row("Original Parent Class", cfg.original_parent_class)
    table.add_row("Manifest Indent", str(cfg.manifest_indent))
    table.add_row("Template Directory", "/".join(cfg.template_path_parts))

    console.print(table)

    console.print("\n[dim]Configure via environment variables:[/dim]")
    console.print("  LAUNCHER_LOG_LEVEL, LAUNCHER_ACTIVITY_NAME")
    console.print("  LAUNCHER_ORIGINAL_PARENT, LAUNCHER_MANIFEST_INDENT")


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
