"""
zsh named-directory exporter.

Produces ``hash -d <shortcut>=<path>`` lines; after sourcing, ``~shortcut``
expands to the directory.
"""

from .base import ShortcutExporter
from ..data_models import BookmarkEntry


class ZshNamedDirExporter(ShortcutExporter):
    """
    Export bookmarks as zsh named directories.

    Paths are written unquoted; a path containing spaces must already be
    escaped in the bookmarks file.
    """

    @property
    def format_name(self) -> str:
        return "zsh"

    def format_line(self, entry: BookmarkEntry) -> str:
        return f"hash -d {entry.shortcut}={entry.path}"
