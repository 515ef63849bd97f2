#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for config_loader module.
"""

import logging

import pytest

from ime_text_utils.config_loader import ConfigLoader, build_separator_array, get_word_separators
from ime_text_utils.config_schema import DEFAULT_CONFIG_FILENAME


class TestConfigLoader:
    """Test the ConfigLoader class."""

    def test_default_path(self):
        """Test the default configuration file name."""
        assert ConfigLoader().config_path.name == DEFAULT_CONFIG_FILENAME

    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        """Test that a missing file is not an error."""
        loader = ConfigLoader(config_path=tmp_path / "missing.yml")

        with caplog.at_level(logging.INFO):
            config = loader.load_config()

        assert config == loader.get_default_config()
        assert config["locale"]["default"] == "en"
        assert config["capitalization"]["word_separators"] == " "
        assert "not found" in caplog.text

    def test_partial_file_merged_with_defaults(self, write_config):
        """Test that a partial file overrides only its own keys."""
        config_path = write_config("locale:\n  default: tr_TR\n")

        config = ConfigLoader(config_path=config_path).load_config()

        assert config["locale"]["default"] == "tr_TR"
        assert config["capitalization"]["word_separators"] == " "
        assert config["logging"]["level"] == "WARNING"

    def test_empty_file_uses_defaults(self, write_config):
        """Test that an empty file gives the defaults."""
        loader = ConfigLoader(config_path=write_config(""))
        assert loader.load_config() == loader.get_default_config()

    def test_invalid_yaml(self, write_config):
        """Test that a syntax error becomes a ValueError."""
        loader = ConfigLoader(config_path=write_config("locale: [unclosed\n"))
        with pytest.raises(ValueError, match="Error parsing YAML file"):
            loader.load_config()

    def test_invalid_type(self, write_config):
        """Test that a wrongly typed value is rejected."""
        loader = ConfigLoader(config_path=write_config("capitalization:\n  word_separators: 5\n"))
        with pytest.raises(ValueError, match="Invalid type for capitalization.word_separators"):
            loader.load_config()

    def test_invalid_log_level(self, write_config):
        """Test that unknown log levels are rejected."""
        loader = ConfigLoader(config_path=write_config("logging:\n  level: LOUD\n"))
        with pytest.raises(ValueError, match="logging.level"):
            loader.load_config()

    def test_lowercase_log_level_accepted(self, write_config):
        """Test that log levels are case insensitive."""
        config = ConfigLoader(config_path=write_config("logging:\n  level: debug\n")).load_config()
        assert config["logging"]["level"] == "debug"

    def test_empty_locale(self, write_config):
        """Test that a blank locale is rejected."""
        loader = ConfigLoader(config_path=write_config("locale:\n  default: '  '\n"))
        with pytest.raises(ValueError, match="locale.default"):
            loader.load_config()


class TestWriteDefaultConfig:
    """Test the ConfigLoader.write_default_config method."""

    def test_write_and_reload(self, tmp_path):
        """Test that the written template loads back as the defaults."""
        loader = ConfigLoader(config_path=tmp_path / "conf" / "ime.yml")

        assert loader.write_default_config() is True
        assert loader.config_path.exists()
        assert loader.load_config() == loader.get_default_config()

    def test_no_overwrite_without_force(self, write_config):
        """Test that an existing file is kept unless forced."""
        config_path = write_config("locale:\n  default: de\n")
        loader = ConfigLoader(config_path=config_path)

        assert loader.write_default_config() is False
        assert "de" in config_path.read_text(encoding="utf-8")

        assert loader.write_default_config(force=True) is True
        assert loader.load_config()["locale"]["default"] == "en"


class TestWordSeparators:
    """Test building separator arrays."""

    def test_build_separator_array(self):
        """Test that separators are sorted and de-duplicated."""
        assert build_separator_array("- -  ") == [ord(" "), ord("-")]
        assert build_separator_array("") == []

    def test_get_word_separators(self):
        """Test reading separators from a configuration."""
        config = {"capitalization": {"word_separators": "/ ."}}
        assert get_word_separators(config) == [ord(" "), ord("."), ord("/")]
