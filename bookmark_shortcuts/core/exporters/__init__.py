"""
Shortcut exporters.

This module provides one exporter per output dialect: lf keybindings,
zsh named directories and shell cd aliases.
"""

from typing import Iterable

from .base import ShortcutExporter, ExportResult
from .lf_exporter import LfExporter
from .zsh_exporter import ZshNamedDirExporter
from .alias_exporter import CdAliasExporter
from ..data_models import BookmarkEntry

__all__ = [
    "ShortcutExporter",
    "ExportResult",
    "LfExporter",
    "ZshNamedDirExporter",
    "CdAliasExporter",
    "EXPORTERS",
    "get_exporter",
    "format_bookmarks",
]


# Dialect registry, keyed by the CLI option name
EXPORTERS = {
    "lf": LfExporter,
    "zsh": ZshNamedDirExporter,
    "cd-alias": CdAliasExporter,
}


def get_exporter(dialect: str) -> type:
    """
    Get an exporter class by dialect name.

    Args:
        dialect: One of "lf", "zsh", "cd-alias"

    Returns:
        Exporter class for the dialect

    Raises:
        ValueError: If the dialect is not supported
    """
    key = dialect.lower()
    if key not in EXPORTERS:
        supported = ", ".join(sorted(EXPORTERS))
        raise ValueError(
            f"Unsupported output dialect: {dialect}. "
            f"Supported dialects: {supported}"
        )
    return EXPORTERS[key]


def format_bookmarks(entries: Iterable[BookmarkEntry], dialect: str) -> str:
    """Render entries in the given dialect."""
    return get_exporter(dialect)().format(entries)
