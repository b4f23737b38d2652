"""
Base classes for shortcut exporters.

Each output dialect renders one line per bookmark entry. Exporters are pure
text formatters with a thin ``export()`` wrapper that writes the result.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Sequence, Union
import logging

from ..data_models import BookmarkEntry
from ...utils.error_handler import OutputWriteError


@dataclass
class ExportResult:
    """
    Result of an export operation.

    Attributes:
        path: Path to the written file
        count: Number of entries written
        format_name: Name of the dialect used
        exported_at: Timestamp of the export
        warnings: Non-fatal warnings raised while exporting
    """

    path: Path
    count: int
    format_name: str
    exported_at: datetime = field(default_factory=datetime.now)
    warnings: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"ExportResult(format={self.format_name}, "
            f"count={self.count}, path={self.path})"
        )


class ShortcutExporter(ABC):
    """
    Abstract base class for shortcut exporters.

    Subclasses implement ``format_line()`` and the ``format_name`` property.

    Example:
        >>> exporter = LfExporter()
        >>> exporter.format([BookmarkEntry("d", "~/downloads")])
        'map gd cd ~/downloads\\n'
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Human-readable name of the dialect."""
        pass

    @abstractmethod
    def format_line(self, entry: BookmarkEntry) -> str:
        """
        Render a single entry.

        Args:
            entry: Bookmark entry to render

        Returns:
            The output line without a trailing newline
        """
        pass

    def format(self, entries: Iterable[BookmarkEntry]) -> str:
        """Render all entries in order, each line newline-terminated."""
        return "".join(f"{self.format_line(entry)}\n" for entry in entries)

    def validate_entries(self, entries: Sequence[BookmarkEntry]) -> List[str]:
        """
        Check entries before export.

        Returns:
            Warning messages; duplicates are reported but never removed
        """
        warnings = []

        if not entries:
            warnings.append("No bookmarks provided for export")
            return warnings

        seen = set()
        duplicates = []
        for entry in entries:
            if entry.shortcut in seen and entry.shortcut not in duplicates:
                duplicates.append(entry.shortcut)
            seen.add(entry.shortcut)
        if duplicates:
            warnings.append(
                f"Duplicate shortcut(s), the last definition wins when loaded: "
                f"{', '.join(duplicates)}"
            )

        return warnings

    def prepare_output_path(self, output_path: Union[str, Path]) -> Path:
        """
        Validate the output path without creating anything.

        Raises:
            OutputWriteError: If the parent directory is missing or the
                target is a directory
        """
        path = Path(output_path)

        if not path.parent.is_dir():
            raise OutputWriteError(
                path,
                format_name=self.format_name,
                original_error=FileNotFoundError(
                    f"Parent directory does not exist: {path.parent}"
                ),
            )
        if path.is_dir():
            raise OutputWriteError(
                path,
                format_name=self.format_name,
                original_error=IsADirectoryError(f"Is a directory: {path}"),
            )

        return path

    def export(
        self, entries: Sequence[BookmarkEntry], output_path: Union[str, Path]
    ) -> ExportResult:
        """
        Format entries and write them to ``output_path`` as UTF-8.

        Args:
            entries: Parsed bookmark entries, in file order
            output_path: Target file, overwritten if it exists

        Returns:
            ExportResult with export details

        Raises:
            OutputWriteError: If the file cannot be written
        """
        warnings = self.validate_entries(entries)
        for warning in warnings:
            self.logger.warning(warning)

        path = self.prepare_output_path(output_path)
        content = self.format(entries)

        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as e:
            raise OutputWriteError(
                path, format_name=self.format_name, original_error=e
            ) from e

        self.logger.info(f"Wrote {len(entries)} {self.format_name} lines to {path}")
        return ExportResult(
            path=path,
            count=len(entries),
            format_name=self.format_name,
            warnings=warnings,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name})"
