"""themectl package.

Discovers TextMate ``.tmTheme`` syntax-highlighting themes on disk, validates
them into typed models, and catalogs them by name.
"""

__version__ = "0.1.0"
__description__ = "Discover, validate and catalog TextMate syntax themes"

# Re-export main classes for convenience
from .theme_set import ThemeSet, THEME_EXTENSION, theme_identifier
from .settings import read_plist
from .models import Color, FontStyle, StyleModifier, Theme, ThemeItem, ThemeSettings
from .config import ConfigManager, LoaderConfig
from .exceptions import (
    ThemeCtlError,
    ConfigError,
    ValidationError,
    SettingsError,
    ParseThemeError,
    CatalogError,
    TraversalError,
    FileAccessError,
    DocumentParseError,
    ThemeValidationError,
    BadIdentifierError,
)

__all__ = [
    "__version__",
    "__description__",
    "ThemeSet",
    "THEME_EXTENSION",
    "theme_identifier",
    "read_plist",
    "Color",
    "FontStyle",
    "StyleModifier",
    "Theme",
    "ThemeItem",
    "ThemeSettings",
    "ConfigManager",
    "LoaderConfig",
    "ThemeCtlError",
    "ConfigError",
    "ValidationError",
    "SettingsError",
    "ParseThemeError",
    "CatalogError",
    "TraversalError",
    "FileAccessError",
    "DocumentParseError",
    "ThemeValidationError",
    "BadIdentifierError",
]
