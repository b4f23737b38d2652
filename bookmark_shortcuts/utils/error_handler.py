"""
Error hierarchy for the bookmark shortcut generator.

Every failure the tool can report is one of the exceptions below. All of them
are terminal for the run: the CLI reports the message on stderr and exits with
a non-zero status. Nothing is retried.
"""

from pathlib import Path
from typing import Optional, Union


# ============================================================================
# Unified Exception Hierarchy for Bookmark Shortcuts
# ============================================================================
# Import these exceptions from bookmark_shortcuts.utils.error_handler
# ============================================================================


class BookmarkShortcutsError(Exception):
    """Base exception for all bookmark shortcut errors."""

    pass


# ============================================================================
# Usage and Configuration Errors
# ============================================================================


class UsageError(BookmarkShortcutsError):
    """Missing or conflicting command-line options."""

    pass


class ConfigurationError(BookmarkShortcutsError):
    """Configuration file missing, unreadable or invalid."""

    pass


# ============================================================================
# I/O Errors
# ============================================================================


class InputReadError(BookmarkShortcutsError):
    """
    The bookmarks file could not be read as text.

    Attributes:
        path: Path of the input file
        original_error: Underlying exception if any
    """

    def __init__(
        self,
        path: Union[str, Path],
        message: str = "Cannot read bookmarks file",
        original_error: Optional[Exception] = None,
    ):
        self.path = Path(path)
        self.message = message
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        text = f"{self.message}: {self.path}"
        if self.original_error:
            text += f" ({type(self.original_error).__name__}: {self.original_error})"
        return text


class OutputWriteError(BookmarkShortcutsError):
    """
    The generated file could not be written.

    Attributes:
        path: Target path
        format_name: Name of the dialect being written
        original_error: Underlying exception if any
    """

    def __init__(
        self,
        path: Union[str, Path],
        format_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.path = Path(path)
        self.format_name = format_name
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.format_name:
            parts.append(f"[{self.format_name}]")
        parts.append(f"Cannot write output file: {self.path}")
        if self.original_error:
            parts.append(
                f"Caused by: {type(self.original_error).__name__}: {self.original_error}"
            )
        return " ".join(parts)


# ============================================================================
# Parsing Errors
# ============================================================================


class MalformedLineError(BookmarkShortcutsError):
    """
    A non-comment, non-blank line is not a ``<shortcut> <path>`` pair.

    Attributes:
        line_number: 1-based line number in the input
        line: Raw content of the offending line
        source: Input file path, when known
    """

    def __init__(
        self,
        line_number: int,
        line: str,
        source: Optional[Union[str, Path]] = None,
    ):
        self.line_number = line_number
        self.line = line
        self.source = Path(source) if source is not None else None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        location = f"line {self.line_number}"
        if self.source is not None:
            location = f"{self.source}:{self.line_number}"
        return (
            f"Malformed bookmark at {location}: {self.line!r} "
            f"(expected '<shortcut> <path>')"
        )
