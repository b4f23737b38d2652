"""
Pydantic-based configuration system for bookmark shortcuts.

Configuration is optional. A TOML or JSON file may set the input encoding,
the malformed-line policy and logging options; everything has a default.
"""

import json
import os
from pathlib import Path
from typing import Dict, Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..utils.error_handler import ConfigurationError

CONFIG_FILE_NAMES = ("bookmark_shortcuts.toml", "bookmark_shortcuts.json")
ON_MALFORMED_ENV_VAR = "BOOKMARK_SHORTCUTS_ON_MALFORMED"


class ParsingConfig(BaseModel):
    """Bookmarks file parsing settings."""

    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the bookmarks file",
    )
    on_malformed: Literal["error", "skip"] = Field(
        default="error",
        description="Abort on a malformed line, or skip it with a warning",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        """Reject encodings Python does not know about."""
        import codecs

        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level for console output",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path; file logging is off when unset",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_file")
    @classmethod
    def empty_log_file_is_none(cls, v):
        return v or None


class ShortcutsConfig(BaseModel):
    """Top-level configuration model."""

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Loads and validates configuration from a file, the environment and defaults."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[ShortcutsConfig] = None
        self.source: Optional[Path] = None
        self._load_configuration(config_path)

    @staticmethod
    def _get_default_config_paths() -> list[Path]:
        """Get list of default configuration file paths to try."""
        config_home = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        return [Path(config_home) / name for name in CONFIG_FILE_NAMES]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))
            self.source = Path(config_path)
        else:
            for path in self._get_default_config_paths():
                if path.is_file():
                    config_data = self._load_config_file(path)
                    self.source = path
                    break

        self._load_overrides_from_env(config_data)

        try:
            self._config = ShortcutsConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(
                ConfigurationErrorFormatter.format_validation_error(e)
            ) from e

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                data = toml.load(config_path)
            else:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
        except (OSError, ValueError, toml.TomlDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {config_path} must be a table/object"
            )
        return data

    @staticmethod
    def _load_overrides_from_env(config_data: Dict) -> None:
        """Fill the malformed-line policy from the environment if the file leaves it unset."""
        parsing = config_data.setdefault("parsing", {})
        on_malformed = os.getenv(ON_MALFORMED_ENV_VAR)
        # a non-table "parsing" is left for pydantic to reject
        if not isinstance(parsing, dict):
            return
        if on_malformed and "on_malformed" not in parsing:
            parsing["on_malformed"] = on_malformed.strip().lower()

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("verbose") and config_dict["logging"]["level"] in (
            "WARNING",
            "ERROR",
        ):
            config_dict["logging"]["level"] = "INFO"

        self._config = ShortcutsConfig(**config_dict)

    @property
    def config(self) -> ShortcutsConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message, one line per problem
        """
        lines = ["Configuration validation failed:"]

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            input_value = error_detail.get("input", "N/A")
            lines.append(
                f"  {location}: {error_detail['msg']} (got {input_value!r})"
            )

        return "\n".join(lines)

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return ".".join(path_parts)
