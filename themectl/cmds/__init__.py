"""Command modules for themectl CLI.

This module exports all command groups (Typer apps) that can be registered
with the main application.
"""

from .themes import app as themes_app

__all__ = [
    "themes_app",
]
