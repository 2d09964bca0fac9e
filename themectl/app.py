"""Main Typer application for themectl CLI.

This module contains the main Typer app instance and registers all command
groups. It handles global options like debug mode, output formatting, and
the configuration directory.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .cmds import themes_app
from .config import ConfigManager, OUTPUT_FORMATS
from .exceptions import ConfigError
from .log import configure_logging
from .render import OutputFormatter
from .utils.exceptions import format_error_for_user

# Create main Typer app
app = typer.Typer(
    name="themectl",
    help="Discover, validate and catalog .tmTheme syntax themes",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
error_console = Console(stderr=True)
output_formatter = OutputFormatter(console)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"themectl {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output and logging",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format (table, json, yaml)",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory (default: ~/.themectl)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """themectl - inspect and catalog TextMate syntax themes.

    Examples:
        # List theme files under a folder
        themectl themes discover ~/themes

        # Load every theme in a folder
        themectl themes list ~/themes

        # Show one theme as JSON
        themectl -o json themes show ~/themes/monokai.tmTheme
    """
    try:
        config = ConfigManager(config_dir).get_config()
    except ConfigError as e:
        error_console.print(format_error_for_user(e, debug), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    if output_format is not None:
        output_format = output_format.lower()
        if output_format not in OUTPUT_FORMATS:
            error_console.print(
                f"[red]Unknown output format '{output_format}'. "
                f"Choose from: {', '.join(OUTPUT_FORMATS)}[/red]"
            )
            raise typer.Exit(2)

    configure_logging("DEBUG" if debug else config.log_level)

    # Store global options in context
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["output_format"] = output_format or config.output_format
    ctx.obj["console"] = console
    ctx.obj["output_formatter"] = output_formatter

    if debug:
        error_console.print("[dim]Debug mode enabled[/dim]")
        if config.themes_dir:
            error_console.print(f"[dim]Configured themes folder: {config.themes_dir}[/dim]")


app.add_typer(themes_app, name="themes", help="Discover, load and inspect themes")


def cli() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli()
