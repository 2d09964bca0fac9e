"""Utility modules for themectl.

This package provides helpers shared by the command-line interface.
"""

from .exceptions import format_error_for_user, handle_exceptions

__all__ = [
    "format_error_for_user",
    "handle_exceptions",
]
