"""
Bookmarks file parser module.

This module reads the plain-text bookmarks format, one entry per line::

    # comment
    d   ~/downloads
    doc ~/My Documents

Blank lines and lines whose first non-whitespace character is ``#`` are
ignored. Every other line is split on its first run of whitespace into a
shortcut and a path; the path keeps any internal spaces.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from ..utils.error_handler import InputReadError, MalformedLineError
from .data_models import BookmarkEntry, BookmarkList, ParseResult

COMMENT_PREFIX = "#"
MALFORMED_POLICIES = ("error", "skip")

_FIELD_SEPARATOR = re.compile(r"\s+")
_LINE_BREAK = re.compile(r"\r\n?|\n")


class BookmarkFileParser:
    """
    Parser for bookmark shortcut files.

    With the default ``on_malformed="error"`` policy the first line that is
    not a valid ``<shortcut> <path>`` pair raises ``MalformedLineError`` and
    nothing is returned. With ``"skip"`` such lines are logged as warnings
    and recorded in ``ParseResult.skipped``.
    """

    def __init__(self, on_malformed: str = "error", encoding: str = "utf-8"):
        if on_malformed not in MALFORMED_POLICIES:
            raise ValueError(
                f"Invalid malformed-line policy: {on_malformed}. "
                f"Use one of: {', '.join(MALFORMED_POLICIES)}"
            )
        self.on_malformed = on_malformed
        self.encoding = encoding
        self.logger = logging.getLogger(__name__)

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Read and parse a bookmarks file.

        Args:
            file_path: Path to the bookmarks file

        Returns:
            ParseResult with the entries in file order

        Raises:
            InputReadError: If the file is missing, unreadable or not valid text
            MalformedLineError: If a line is malformed under the "error" policy
        """
        file_path = Path(file_path)

        try:
            text = file_path.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            raise InputReadError(
                file_path, "Bookmarks file not found", original_error=e
            ) from e
        except IsADirectoryError as e:
            raise InputReadError(
                file_path, "Bookmarks path is a directory", original_error=e
            ) from e
        except UnicodeDecodeError as e:
            raise InputReadError(
                file_path,
                f"Bookmarks file is not valid {self.encoding} text",
                original_error=e,
            ) from e
        except OSError as e:
            raise InputReadError(file_path, original_error=e) from e

        result = self.parse_text(text, source=file_path)
        self.logger.info(f"Parsed {len(result)} bookmarks from {file_path}")
        return result

    def parse_text(
        self, text: str, source: Optional[Union[str, Path]] = None
    ) -> ParseResult:
        """
        Parse the full text of a bookmarks file.

        Args:
            text: File content
            source: Optional file path, used in error messages

        Returns:
            ParseResult with the entries in input order
        """
        entries = []
        result = ParseResult()

        for line_number, raw_line in enumerate(split_lines(text), start=1):
            line = raw_line.strip()

            if not line:
                result.blank_lines += 1
                continue

            if line.startswith(COMMENT_PREFIX):
                result.comment_lines += 1
                continue

            entry = self._parse_line(line, line_number)
            if entry is not None:
                entries.append(entry)
                continue

            if self.on_malformed == "error":
                raise MalformedLineError(line_number, raw_line, source=source)

            self.logger.warning(
                f"Skipping malformed line {line_number}: {raw_line!r}"
            )
            result.skipped.append((line_number, raw_line))

        result.entries = tuple(entries)
        self.logger.debug(
            f"{len(entries)} entries, {result.comment_lines} comments, "
            f"{result.blank_lines} blank lines, {len(result.skipped)} skipped"
        )
        return result

    @staticmethod
    def _parse_line(line: str, line_number: int) -> Optional[BookmarkEntry]:
        """Split a trimmed line into an entry, or None if it is malformed."""
        fields = _FIELD_SEPARATOR.split(line, maxsplit=1)
        if len(fields) != 2:
            return None

        shortcut, path = fields[0], fields[1].strip()
        if not shortcut or not path:
            return None

        return BookmarkEntry(shortcut=shortcut, path=path, line_number=line_number)


def split_lines(text: str) -> List[str]:
    """Split on \\n, \\r\\n and \\r only; other control characters stay in the line."""
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_bookmarks(text: str) -> BookmarkList:
    """Parse bookmarks text with the default policy and return the entries."""
    return BookmarkFileParser().parse_text(text).entries
