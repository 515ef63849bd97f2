#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Configuration and logging initialization for the ime-text CLI
#

"""
cli_setup.py - CLI setup and initialization
==========================================

Loads the configuration and sets up logging for the ime-text CLI.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from rich.markup import escape

from .common_print_utils import safe_print
from .config_loader import ConfigLoader


def setup_configuration(config_path: Path | None) -> dict[str, Any]:
    """Load and validate configuration, exiting with status 1 on errors.

    Args:
        config_path: Path to configuration file, or None for the default

    Returns:
        Configuration dictionary
    """
    try:
        return ConfigLoader(config_path=config_path).load_config()
    except ValueError as e:
        safe_print(f"[red]Configuration error:[/red] {escape(str(e))}")
        safe_print("Please fix the configuration file or delete it to use defaults.")
        sys.exit(1)


def setup_logging(config: dict[str, Any], level_override: str | None = None) -> logging.Logger:
    """Set up logging based on configuration.

    Args:
        config: Configuration dictionary
        level_override: Log level from the command line, wins over the config

    Returns:
        Configured logger instance
    """
    level_name = (level_override or config["logging"]["level"]).upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    log_format = config["logging"]["format"]

    logging.basicConfig(level=log_level, format=log_format)
    logger = logging.getLogger("ime_text_utils")
    logger.setLevel(log_level)

    if config["logging"]["file_enabled"]:
        try:
            file_handler = logging.FileHandler(config["logging"]["file_path"], encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.error(f"Failed to set up file logging to {config['logging']['file_path']}: {e}")
            # Continue without file logging

    return logger
