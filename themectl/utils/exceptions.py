"""Error formatting helpers for the command-line interface."""

import functools
from typing import Any, Callable

import click
import typer
from rich.console import Console

from ..exceptions import (
    BadIdentifierError,
    CatalogError,
    ConfigError,
    ParseThemeError,
    ThemeCtlError,
    ThemeValidationError,
)

error_console = Console(stderr=True)


def format_error_for_user(error: Exception, debug: bool = False) -> str:
    """Format an error message for user display.

    Args:
        error: The exception to format
        debug: Whether to include debug information

    Returns:
        Formatted error message
    """
    if isinstance(error, CatalogError):
        message = f"Theme load failed ({error.stage}): {error.message}"
        if error.path is not None and not isinstance(error, BadIdentifierError):
            message += f"\nFile: {error.path}"
        if isinstance(error, ThemeValidationError) and isinstance(error.cause, ParseThemeError):
            if error.cause.field:
                message += f"\nField: {error.cause.field}"
        if debug and error.cause is not None:
            message += f"\nCause: {type(error.cause).__name__}: {error.cause}"
        return message

    if isinstance(error, ConfigError):
        message = f"Configuration error: {error.message}"
        if debug and error.details:
            message += f"\nDetails: {error.details}"
        return message

    if isinstance(error, ThemeCtlError):
        message = f"Error: {error.message}"
        if debug and error.details:
            message += f"\nDetails: {error.details}"
        return message

    if debug:
        return f"Error: {str(error)}\nType: {type(error).__name__}"
    return f"Error: {str(error)}"


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to report themectl errors and exit with status 1."""
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ThemeCtlError as e:
            ctx = click.get_current_context(silent=True)
            debug = bool(ctx and ctx.obj and ctx.obj.get("debug", False))
            error_console.print(format_error_for_user(e, debug), markup=False, highlight=False, soft_wrap=True)
            if not debug:
                error_console.print("[dim]Use --debug for more details[/dim]")
            raise typer.Exit(1)
        except KeyboardInterrupt:
            error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
            raise typer.Exit(130)
    return wrapper
