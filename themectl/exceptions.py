"""Exception classes for themectl.

This module defines the error taxonomy used when discovering, parsing and
cataloging themes. Every failure of a catalog load surfaces as exactly one
``CatalogError`` subclass that names the stage that failed and keeps the
originating exception as its cause.
"""

from pathlib import Path
from typing import Optional, Dict, Any, Union


class ThemeCtlError(Exception):
    """Base exception class for all themectl errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(ThemeCtlError):
    """Exception raised for configuration-related errors."""
    pass


class ValidationError(ThemeCtlError):
    """Exception raised for invalid user-supplied options."""
    pass


class SettingsError(ThemeCtlError):
    """Raised by the settings-document parser for malformed documents."""
    pass


class ParseThemeError(ThemeCtlError):
    """Raised by the theme validator when a settings tree is not a usable theme."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs: Any) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            field: Dotted location of the offending field, if known
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.field = field


class CatalogError(ThemeCtlError):
    """Base class for every failure of a theme or catalog load.

    Subclasses form a closed set, one per failure origin.
    """

    stage = "catalog"

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[BaseException] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Filesystem location the failure is attributed to
            cause: The collaborator exception that triggered the failure
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.path = Path(path) if path is not None else None
        self.cause = cause

    @classmethod
    def lift(cls, error: BaseException, path: Union[str, Path]) -> "CatalogError":
        """Convert a collaborator error into the matching catalog error.

        Args:
            error: Exception raised by the OS, the settings parser or the validator
            path: Theme path being processed when the error occurred

        Returns:
            The catalog error for ``error``'s origin
        """
        if isinstance(error, CatalogError):
            return error
        if isinstance(error, SettingsError):
            return DocumentParseError(
                f"Could not parse settings document {path}: {error.message}",
                path=path,
                cause=error,
            )
        if isinstance(error, ParseThemeError):
            return ThemeValidationError(
                f"Invalid theme {path}: {error.message}",
                path=path,
                cause=error,
            )
        if isinstance(error, OSError):
            reason = error.strerror or str(error)
            return FileAccessError(f"Cannot read {path}: {reason}", path=path, cause=error)
        raise TypeError(f"Cannot lift {type(error).__name__} into a catalog error")


class TraversalError(CatalogError):
    """Directory walk failed (unreadable directory, missing root, broken link)."""

    stage = "traversal"


class FileAccessError(CatalogError):
    """A theme file could not be opened or read."""

    stage = "file access"


class DocumentParseError(CatalogError):
    """A theme file is not a well-formed settings document."""

    stage = "document parse"


class ThemeValidationError(CatalogError):
    """A settings document is well-formed but is not a usable theme."""

    stage = "theme validation"


class BadIdentifierError(CatalogError):
    """A theme path yields no usable identifier."""

    stage = "bad path"
