"""Theme commands for themectl CLI.

This module provides commands for discovering theme files, loading a whole
folder of themes into a catalog, and inspecting a single theme.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from ..exceptions import ConfigError
from ..models import Theme
from ..render import OutputFormatter
from ..theme_set import ThemeSet
from ..utils.exceptions import handle_exceptions

app = typer.Typer()


def get_formatter(ctx: typer.Context) -> tuple[OutputFormatter, str]:
    """Get formatter and effective output format from context."""
    return ctx.obj["output_formatter"], ctx.obj["output_format"]


def theme_to_dict(theme: Theme) -> Dict[str, Any]:
    """Plain-data view of a theme for JSON and YAML output."""
    return {
        "name": theme.name,
        "author": theme.author,
        "uuid": theme.uuid,
        "settings": theme.settings.colors(),
        "scopes": [
            {
                "scope": item.scope,
                "name": item.name,
                "foreground": item.style.foreground.to_hex() if item.style.foreground else None,
                "background": item.style.background.to_hex() if item.style.background else None,
                "font_style": item.style.font_style.describe() if item.style.font_style is not None else None,
            }
            for item in theme.scopes
        ],
    }


def catalog_rows(theme_set: ThemeSet) -> List[Dict[str, Any]]:
    """One summary row per catalog entry, sorted by identifier."""
    rows = []
    for identifier in theme_set.names():
        theme = theme_set[identifier]
        rows.append({
            "id": identifier,
            "name": theme.name,
            "author": theme.author,
            "rules": len(theme.scopes),
            "background": theme.settings.background.to_hex() if theme.settings.background else None,
            "foreground": theme.settings.foreground.to_hex() if theme.settings.foreground else None,
        })
    return rows


def resolve_folder(ctx: typer.Context, folder: Optional[Path]) -> Path:
    """Use the given folder or fall back to the configured themes folder."""
    if folder is not None:
        return folder
    configured = ctx.obj["config"].themes_dir
    if configured is None:
        raise ConfigError(
            "No folder given and no themes_dir configured. "
            "Pass a folder or set THEMECTL_THEMES_DIR."
        )
    return configured


@app.command()
@handle_exceptions
def discover(
    ctx: typer.Context,
    folder: Path = typer.Argument(..., help="Folder to search for theme files"),
) -> None:
    """List theme files found in a folder and its subfolders.

    Examples:
        # List theme files
        themectl themes discover ~/themes

        # As JSON
        themectl -o json themes discover ~/themes
    """
    formatter, output_format = get_formatter(ctx)
    paths = ThemeSet.discover_theme_paths(folder, extension=ctx.obj["config"].extension)

    if output_format in ["json", "yaml"]:
        formatter.render([str(path) for path in paths], format=output_format)
    else:
        formatter.render_table(
            [{"id": path.stem, "path": str(path)} for path in paths],
            title=f"Theme files in {folder}",
        )


@app.command("list")
@handle_exceptions
def list_themes(
    ctx: typer.Context,
    folder: Optional[Path] = typer.Argument(None, help="Folder to load (defaults to configured themes_dir)"),
) -> None:
    """Load every theme in a folder and list the catalog.

    The load fails as a whole if any theme file is invalid.

    Examples:
        # List themes in a folder
        themectl themes list ~/themes

        # Use the configured folder, output YAML
        themectl -o yaml themes list
    """
    formatter, output_format = get_formatter(ctx)
    theme_set = ThemeSet.load_from_folder(
        resolve_folder(ctx, folder),
        extension=ctx.obj["config"].extension,
    )
    rows = catalog_rows(theme_set)

    if output_format in ["json", "yaml"]:
        formatter.render(rows, format=output_format)
    else:
        formatter.render_table(rows, title=f"Themes ({len(rows)})")


@app.command()
@handle_exceptions
def show(
    ctx: typer.Context,
    theme_file: Path = typer.Argument(..., help="Path to a .tmTheme file"),
) -> None:
    """Load one theme file and show its settings and style rules.

    Examples:
        # Show a theme
        themectl themes show base16-ocean.dark.tmTheme

        # Get as JSON
        themectl -o json themes show base16-ocean.dark.tmTheme
    """
    formatter, output_format = get_formatter(ctx)
    theme = ThemeSet.get_theme(theme_file)
    data = theme_to_dict(theme)

    if output_format in ["json", "yaml"]:
        formatter.render(data, format=output_format)
        return

    formatter.render_properties(
        {
            "name": theme.name,
            "author": theme.author,
            "uuid": theme.uuid,
            **data["settings"],
        },
        title=theme.name or theme_file.stem,
    )
    formatter.render_table(
        data["scopes"],
        columns=["scope", "foreground", "background", "font_style"],
        title="Style Rules",
    )
