"""Data models for themectl.

This package contains the Pydantic models a validated theme is made of:
colors, font styles, scoped style rules and default settings.
"""

from .color import Color
from .style import FontStyle, StyleModifier, ThemeItem, ThemeSettings
from .theme import Theme


__all__ = [
    "Color",
    "FontStyle",
    "StyleModifier",
    "ThemeItem",
    "ThemeSettings",
    "Theme",
]
