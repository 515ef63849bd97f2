#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
YAML helpers for the configuration layer.

Every failure is reported as a ValueError with the file name in the
message, so callers only have one exception type to handle.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def load_safe_yaml(yaml_path: str | Path) -> dict[str, Any]:
    """
    Load a YAML mapping from a file.

    Args:
        yaml_path: Path to the YAML file

    Returns:
        The parsed mapping; {} for an empty file

    Raises:
        ValueError: If the file is missing, unreadable, malformed, or its
            root is not a mapping
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise ValueError(f"YAML file not found: {yaml_path}")

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file {yaml_path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Error reading YAML file {yaml_path}: {e}") from e

    if data is None:
        logger.debug(f"YAML file {yaml_path} is empty")
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML file {yaml_path} must contain a mapping at the root level, got {type(data).__name__}")
    return data


def merge_yaml_configs(base_config: dict[str, Any], override_config: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two configurations; values from ``override_config`` win.

    Neither argument is modified.
    """
    result = dict(base_config)
    for key, value in override_config.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_yaml_configs(result[key], value)
        else:
            result[key] = value
    return result


def validate_yaml_schema(data: dict[str, Any], schema: dict[str, Any], prefix: str = "") -> list[str]:
    """
    Check ``data`` against a nested {key: type or sub-schema} mapping.

    Args:
        data: Parsed YAML data
        schema: Expected keys; a dict value describes a nested section
        prefix: Dotted path of ``data`` inside the whole document

    Returns:
        A list of error messages, empty when the data is valid
    """
    errors: list[str] = []
    for key, expected in schema.items():
        path = f"{prefix}{key}"
        if key not in data:
            errors.append(f"Missing required key: {path}")
            continue
        value = data[key]
        if isinstance(expected, dict):
            if not isinstance(value, dict):
                errors.append(f"Invalid type for {path}: expected a section, got {type(value).__name__}")
            else:
                errors.extend(validate_yaml_schema(value, expected, prefix=f"{path}."))
        elif not isinstance(value, expected):
            errors.append(f"Invalid type for {path}: expected {expected.__name__}, got {type(value).__name__}")
    return errors
