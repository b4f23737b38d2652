"""
Tests for Pydantic-based configuration system.

This module tests the pydantic_config module including:
- ParsingConfig and LoggingConfig validation
- ConfigurationManager loading from files and the environment
- ConfigurationErrorFormatter error formatting
- the Configuration wrapper used by the CLI
"""

import json

import pytest
import toml
from pydantic import ValidationError

from bookmark_shortcuts.config.configuration import Configuration
from bookmark_shortcuts.config.pydantic_config import (
    ConfigurationErrorFormatter,
    ConfigurationManager,
    LoggingConfig,
    ParsingConfig,
    ShortcutsConfig,
)
from bookmark_shortcuts.utils.error_handler import ConfigurationError


# ============================================================================
# Model Tests
# ============================================================================


class TestParsingConfig:
    """Tests for ParsingConfig model."""

    def test_default_values(self):
        config = ParsingConfig()

        assert config.encoding == "utf-8"
        assert config.on_malformed == "error"

    def test_skip_policy(self):
        assert ParsingConfig(on_malformed="skip").on_malformed == "skip"

    def test_invalid_policy(self):
        with pytest.raises(ValidationError):
            ParsingConfig(on_malformed="ignore")

    def test_unknown_encoding(self):
        with pytest.raises(ValidationError, match="Unknown text encoding"):
            ParsingConfig(encoding="no-such-codec")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_default_values(self):
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.log_file is None

    def test_level_is_case_insensitive(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_empty_log_file_disables_file_logging(self):
        assert LoggingConfig(log_file="").log_file is None


# ============================================================================
# ConfigurationManager Tests
# ============================================================================


class TestConfigurationManager:
    """Tests for loading configuration."""

    def test_defaults_without_file(self):
        manager = ConfigurationManager()

        assert manager.config == ShortcutsConfig()
        assert manager.source is None

    def test_load_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            toml.dumps({"parsing": {"on_malformed": "skip", "encoding": "latin-1"}})
        )

        manager = ConfigurationManager(path)

        assert manager.config.parsing.on_malformed == "skip"
        assert manager.config.parsing.encoding == "latin-1"
        assert manager.source == path

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}))

        manager = ConfigurationManager(path)

        assert manager.config.logging.level == "DEBUG"

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("parsing: {}")

        with pytest.raises(ConfigurationError, match="Unsupported configuration file format"):
            ConfigurationManager(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager(tmp_path / "missing.toml")

    def test_broken_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[parsing\non_malformed = ")

        with pytest.raises(ConfigurationError, match="Failed to load configuration"):
            ConfigurationManager(path)

    def test_json_must_be_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigurationError, match="must be a table/object"):
            ConfigurationManager(path)

    def test_default_location(self, tmp_path):
        config_dir = tmp_path / "xdg_config"
        config_dir.mkdir()
        path = config_dir / "bookmark_shortcuts.toml"
        path.write_text('[logging]\nlevel = "ERROR"\n')

        manager = ConfigurationManager()

        assert manager.source == path
        assert manager.config.logging.level == "ERROR"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BOOKMARK_SHORTCUTS_ON_MALFORMED", "SKIP")

        assert ConfigurationManager().config.parsing.on_malformed == "skip"

    def test_environment_with_non_table_parsing_toml(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOOKMARK_SHORTCUTS_ON_MALFORMED", "skip")
        path = tmp_path / "config.toml"
        path.write_text('parsing = "oops"\n')

        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            ConfigurationManager(path)

    def test_environment_with_null_parsing_json(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOOKMARK_SHORTCUTS_ON_MALFORMED", "skip")
        path = tmp_path / "config.json"
        path.write_text('{"parsing": null}')

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(path)

        assert "parsing" in str(exc_info.value)

    def test_file_wins_over_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOOKMARK_SHORTCUTS_ON_MALFORMED", "skip")
        path = tmp_path / "config.toml"
        path.write_text('[parsing]\non_malformed = "error"\n')

        assert ConfigurationManager(path).config.parsing.on_malformed == "error"

    def test_verbose_raises_log_level(self):
        manager = ConfigurationManager()

        manager.update_from_cli_args({"verbose": True})

        assert manager.config.logging.level == "INFO"

    def test_verbose_keeps_debug_level(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "DEBUG"\n')
        manager = ConfigurationManager(path)

        manager.update_from_cli_args({"verbose": True})

        assert manager.config.logging.level == "DEBUG"


# ============================================================================
# Error Formatting Tests
# ============================================================================


class TestConfigurationErrorFormatter:
    """Tests for validation error formatting."""

    def test_format_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ShortcutsConfig(parsing={"on_malformed": "explode"})

        message = ConfigurationErrorFormatter.format_validation_error(exc_info.value)

        assert message.startswith("Configuration validation failed:")
        assert "parsing.on_malformed" in message
        assert "'explode'" in message

    def test_format_location_with_index(self):
        assert ConfigurationErrorFormatter._format_error_location(("a", 0, "b")) == "a.[0].b"

    def test_format_empty_location(self):
        assert ConfigurationErrorFormatter._format_error_location(()) == "Configuration"


# ============================================================================
# Configuration Wrapper Tests
# ============================================================================


class TestConfiguration:
    """Tests for the Configuration wrapper."""

    def test_properties(self, tmp_path):
        log_file = tmp_path / "run.log"
        path = tmp_path / "config.toml"
        path.write_text(
            "[parsing]\n"
            'encoding = "utf-16"\n'
            'on_malformed = "skip"\n'
            "[logging]\n"
            'level = "ERROR"\n'
            f'log_file = "{log_file}"\n'
        )

        config = Configuration(path)

        assert config.encoding == "utf-16"
        assert config.on_malformed == "skip"
        assert config.log_level == "ERROR"
        assert config.log_file == str(log_file)
        assert config.source == path

    def test_update_from_args(self):
        config = Configuration()

        config.update_from_args({"verbose": True})

        assert config.log_level == "INFO"
