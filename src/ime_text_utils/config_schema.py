#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Configuration template and schema for the IME text utilities
# - Locale, word separators and logging sections
#

"""
config_schema.py - Configuration schema and default template
"""

DEFAULT_CONFIG_FILENAME = "ime_text_config.yml"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Default configuration template with comments
DEFAULT_CONFIG_TEMPLATE = """# IME Text Utilities Configuration
# ================================
# Command-line arguments override these settings.

# Locale settings
# ---------------
locale:
  # Locale tag used for case mapping (e.g. en, en_US, tr-TR, de)
  default: en

# Capitalization settings
# -----------------------
capitalization:
  # Every character in this string starts a new word for
  # "capitalize each word" (order and repetitions don't matter)
  word_separators: " "

# Logging settings
# ----------------
logging:
  # Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
  level: WARNING
  # Log format
  format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
  # Also log to a file
  file_enabled: false
  file_path: ime_text.log
"""

# Expected keys and value types
CONFIG_SCHEMA = {
    "locale": {
        "default": str,
    },
    "capitalization": {
        "word_separators": str,
    },
    "logging": {
        "level": str,
        "format": str,
        "file_enabled": bool,
        "file_path": str,
    },
}
