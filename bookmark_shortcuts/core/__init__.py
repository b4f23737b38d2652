"""
Core bookmark shortcut modules.

This package contains the bookmarks file parser, the data models and the
per-dialect exporters.
"""

from .bookmark_parser import BookmarkFileParser, parse_bookmarks
from .data_models import BookmarkEntry, ParseResult

__all__ = [
    'BookmarkFileParser',
    'parse_bookmarks',
    'BookmarkEntry',
    'ParseResult',
]
