"""
lf file-manager keybinding exporter.

Produces ``map g<shortcut> cd <path>`` lines for an lf config file, so that
typing ``g`` followed by the shortcut jumps to the directory.
"""

from .base import ShortcutExporter
from ..data_models import BookmarkEntry


class LfExporter(ShortcutExporter):
    """Export bookmarks as lf ``map`` keybindings. Paths are not escaped."""

    KEY_PREFIX = "g"

    @property
    def format_name(self) -> str:
        return "lf"

    def format_line(self, entry: BookmarkEntry) -> str:
        return f"map {self.KEY_PREFIX}{entry.shortcut} cd {entry.path}"
