"""
Configuration management for bookmark shortcuts.

Thin wrapper over the Pydantic-based ``ConfigurationManager`` exposing the
handful of settings the CLI needs.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from .pydantic_config import ConfigurationManager, ShortcutsConfig


class Configuration:
    """Configuration used by the CLI, backed by the Pydantic models."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to user configuration file (TOML/JSON)
        """
        self._manager = ConfigurationManager(config_path)
        self._config = self._manager.config

    @property
    def config(self) -> ShortcutsConfig:
        """Get the underlying Pydantic configuration."""
        return self._config

    @property
    def source(self) -> Optional[Path]:
        """Configuration file that was loaded, if any."""
        return self._manager.source

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update configuration from command-line arguments.

        Args:
            args: Dictionary of validated arguments
        """
        self._manager.update_from_cli_args(args)
        self._config = self._manager.config

    @property
    def encoding(self) -> str:
        return self._config.parsing.encoding

    @property
    def on_malformed(self) -> str:
        return self._config.parsing.on_malformed

    @property
    def log_level(self) -> str:
        return self._config.logging.level

    @property
    def log_file(self) -> Optional[str]:
        return self._config.logging.log_file
