#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Loads the YAML configuration and merges it over the defaults
# - Validates section and key types before the CLI uses them
# - Builds the sorted word separator array from the configuration
#

"""
config_loader.py - Configuration loading, merging and validation
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from .code_points import to_sorted_code_point_array
from .common_yaml_utils import load_safe_yaml, merge_yaml_configs, validate_yaml_schema
from .config_schema import (
    CONFIG_SCHEMA,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_TEMPLATE,
    VALID_LOG_LEVELS,
)


class ConfigLoader:
    """Handles loading, merging and validation of the configuration file."""

    def __init__(self, config_path: Path | None = None, logger: logging.Logger | None = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to configuration file (default: ime_text_config.yml)
            logger: Logger instance
        """
        self.config_path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_FILENAME)
        self.logger = logger or logging.getLogger(__name__)

    def get_default_config(self) -> dict[str, Any]:
        """Return the built-in defaults as a dictionary."""
        result = yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)
        return result if isinstance(result, dict) else {}

    def merge_with_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Merge a user configuration over the defaults so every key exists."""
        return merge_yaml_configs(self.get_default_config(), config)

    def load_config(self) -> dict[str, Any]:
        """
        Load, merge and validate the configuration.

        A missing file is not an error: the defaults are used.

        Returns:
            Complete configuration dictionary

        Raises:
            ValueError: If the file can't be parsed or holds invalid values
        """
        if not self.config_path.exists():
            self.logger.info(f"Configuration file {self.config_path} not found. Using defaults.")
            return self.get_default_config()

        user_config = load_safe_yaml(self.config_path)
        if not user_config:
            self.logger.warning(f"Configuration file {self.config_path} is empty. Using defaults.")
        config = self.merge_with_defaults(user_config)
        self.validate(config)
        self.logger.debug(f"Loaded configuration from {self.config_path}")
        return config

    def validate(self, config: dict[str, Any]) -> None:
        """
        Validate a merged configuration.

        Raises:
            ValueError: Listing every problem found
        """
        errors = validate_yaml_schema(config, CONFIG_SCHEMA)
        if not errors:
            level = config["logging"]["level"]
            if level.upper() not in VALID_LOG_LEVELS:
                errors.append(f"Invalid value for logging.level: {level} (expected one of {', '.join(VALID_LOG_LEVELS)})")
            if not config["locale"]["default"].strip():
                errors.append("Invalid value for locale.default: must not be empty")
        if errors:
            raise ValueError(f"Invalid configuration in {self.config_path}:\n  " + "\n  ".join(errors))

    def write_default_config(self, force: bool = False) -> bool:
        """
        Write the default configuration template to ``config_path``.

        Args:
            force: Overwrite an existing file

        Returns:
            True if the file was written, False if it already existed
        """
        if self.config_path.exists() and not force:
            self.logger.warning(f"Configuration file {self.config_path} already exists. Not overwriting.")
            return False
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_TEMPLATE)
        self.logger.info(f"Default configuration file written to {self.config_path}")
        return True


def build_separator_array(characters: str) -> list[int]:
    """Turn a string of separator characters into a sorted, de-duplicated code point list."""
    return sorted(set(to_sorted_code_point_array(characters)))


def get_word_separators(config: dict[str, Any]) -> list[int]:
    """Return the configured word separators as a sorted code point list."""
    return build_separator_array(config["capitalization"]["word_separators"])
