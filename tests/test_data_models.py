"""
Tests for the bookmark data models.
"""

import dataclasses

import pytest

from bookmark_shortcuts.core.data_models import BookmarkEntry, ParseResult


class TestBookmarkEntry:
    """Tests for BookmarkEntry."""

    def test_fields(self):
        entry = BookmarkEntry(shortcut="d", path="~/downloads", line_number=3)

        assert entry.shortcut == "d"
        assert entry.path == "~/downloads"
        assert entry.line_number == 3

    def test_line_number_ignored_in_equality(self):
        assert BookmarkEntry("d", "~/downloads", 1) == BookmarkEntry("d", "~/downloads", 9)

    def test_frozen(self):
        entry = BookmarkEntry("d", "~/downloads")

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.path = "/tmp"

    @pytest.mark.parametrize("shortcut", ["", "a b", "a\tb"])
    def test_invalid_shortcut(self, shortcut):
        with pytest.raises(ValueError, match="Invalid shortcut"):
            BookmarkEntry(shortcut, "~/downloads")

    def test_empty_path(self):
        with pytest.raises(ValueError, match="Empty path"):
            BookmarkEntry("d", "")


class TestParseResult:
    """Tests for ParseResult."""

    def test_defaults(self):
        result = ParseResult()

        assert len(result) == 0
        assert result.skipped == []
        assert result.shortcuts() == []

    def test_shortcuts_keep_duplicates(self):
        result = ParseResult(
            entries=(
                BookmarkEntry("d", "~/a"),
                BookmarkEntry("x", "~/b"),
                BookmarkEntry("d", "~/c"),
            )
        )

        assert result.shortcuts() == ["d", "x", "d"]
