"""
Input validation utilities for bookmark shortcuts.

This module provides validation functions for command-line arguments.
"""

import os
from pathlib import Path
from typing import Optional, Union

from .error_handler import ConfigurationError, InputReadError, UsageError


def validate_input_file(file_path: Union[str, Path, None]) -> Path:
    """
    Validate that the bookmarks file exists and is readable.

    Args:
        file_path: Path to the bookmarks file

    Returns:
        Validated Path object

    Raises:
        UsageError: If no path was given
        InputReadError: If the file doesn't exist or isn't readable
    """
    if not file_path:
        raise UsageError("Input file is required (use --input/-i)")

    path = Path(file_path)

    if not path.exists():
        raise InputReadError(path, "Bookmarks file not found")

    if not path.is_file():
        raise InputReadError(path, "Bookmarks path is not a file")

    if not os.access(path, os.R_OK):
        raise InputReadError(path, "Bookmarks file is not readable")

    return path


def validate_output_file(file_path: Union[str, Path, None]) -> Path:
    """
    Validate the output file argument.

    Writability is checked by the exporter when the file is written.

    Raises:
        UsageError: If no path was given
    """
    if not file_path:
        raise UsageError("An output file is required")
    return Path(file_path)


def validate_config_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate configuration file if provided.

    Raises:
        ConfigurationError: If file doesn't exist or isn't a file
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {file_path}")

    return path


def validate_conflicting_arguments(input_path: Path, output_path: Path) -> None:
    """
    Refuse to overwrite the bookmarks file with generated output.

    Raises:
        UsageError: If input and output refer to the same file
    """
    if input_path.resolve() == output_path.resolve():
        raise UsageError(
            f"Output file must differ from the input file: {output_path}"
        )
