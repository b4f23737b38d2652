"""
Shell cd alias exporter.

Produces ``alias cd<shortcut>="<path>"`` lines; the path is the only value
quoted in any dialect.
"""

from .base import ShortcutExporter
from ..data_models import BookmarkEntry


class CdAliasExporter(ShortcutExporter):
    """Export bookmarks as ``alias cd<shortcut>="<path>"`` shell aliases."""

    ALIAS_PREFIX = "cd"

    @property
    def format_name(self) -> str:
        return "cd-alias"

    def format_line(self, entry: BookmarkEntry) -> str:
        return f'alias {self.ALIAS_PREFIX}{entry.shortcut}="{entry.path}"'
