"""
Utility modules for bookmark shortcuts.

This package contains the error hierarchy, logging setup and command-line
argument validation.
"""

from .error_handler import (
    BookmarkShortcutsError,
    ConfigurationError,
    InputReadError,
    MalformedLineError,
    OutputWriteError,
    UsageError,
)

__all__ = [
    "BookmarkShortcutsError",
    "ConfigurationError",
    "InputReadError",
    "MalformedLineError",
    "OutputWriteError",
    "UsageError",
]
