"""
Pytest configuration and shared fixtures for bookmark shortcut tests.
"""

import logging
from pathlib import Path
from typing import List

import pytest

from bookmark_shortcuts.config.pydantic_config import ON_MALFORMED_ENV_VAR
from bookmark_shortcuts.core.data_models import BookmarkEntry

# ============================================================================
# Sample Data
# ============================================================================

SAMPLE_BOOKMARKS_TEXT = """\
d ~/downloads
D ~/desktop
"""

COMMENTED_BOOKMARKS_TEXT = """\
# my bookmarks
d ~/downloads

D ~/desktop
"""


# ============================================================================
# Environment Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the user's config directory and environment out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg_config"))
    monkeypatch.delenv(ON_MALFORMED_ENV_VAR, raising=False)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)


# ============================================================================
# Bookmark Fixtures
# ============================================================================


@pytest.fixture
def sample_entries() -> List[BookmarkEntry]:
    """Entries matching SAMPLE_BOOKMARKS_TEXT."""
    return [
        BookmarkEntry(shortcut="d", path="~/downloads", line_number=1),
        BookmarkEntry(shortcut="D", path="~/desktop", line_number=2),
    ]


@pytest.fixture
def bookmarks_file(tmp_path) -> Path:
    """A bookmarks file with a comment and a blank line."""
    path = tmp_path / "bookmarks"
    path.write_text(COMMENTED_BOOKMARKS_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def malformed_bookmarks_file(tmp_path) -> Path:
    """A bookmarks file whose third line has no path."""
    path = tmp_path / "bookmarks_malformed"
    path.write_text(
        "d ~/downloads\n# comment\njustashortcutnopath\nD ~/desktop\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_BOOKMARKS_TEXT


@pytest.fixture
def commented_text() -> str:
    return COMMENTED_BOOKMARKS_TEXT
