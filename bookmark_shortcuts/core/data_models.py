"""
Data models for the bookmark shortcut generator.

A bookmarks file is turned into an ordered, immutable sequence of
``BookmarkEntry`` values which is then handed to exactly one exporter.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class BookmarkEntry:
    """
    One ``<shortcut> <path>`` pair read from the bookmarks file.

    The path is kept verbatim: ``~`` and any shell syntax are left for the
    consuming shell or file manager to interpret.
    """

    shortcut: str
    path: str
    line_number: int = field(default=0, compare=False)

    def __post_init__(self):
        if not self.shortcut or any(c.isspace() for c in self.shortcut):
            raise ValueError(f"Invalid shortcut: {self.shortcut!r}")
        if not self.path:
            raise ValueError(f"Empty path for shortcut {self.shortcut!r}")


BookmarkList = Tuple[BookmarkEntry, ...]


@dataclass
class ParseResult:
    """Outcome of parsing one bookmarks file."""

    entries: BookmarkList = ()
    skipped: List[Tuple[int, str]] = field(default_factory=list)
    comment_lines: int = 0
    blank_lines: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def shortcuts(self) -> List[str]:
        """Shortcuts in file order, duplicates included."""
        return [entry.shortcut for entry in self.entries]
