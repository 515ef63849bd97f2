#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for common_yaml_utils module.
"""

import pytest
import yaml

from ime_text_utils.common_yaml_utils import (
    load_safe_yaml,
    merge_yaml_configs,
    validate_yaml_schema,
)


class TestLoadSafeYaml:
    """Test the load_safe_yaml function."""

    def test_load_valid_yaml(self, tmp_path):
        """Test loading a valid YAML file."""
        yaml_file = tmp_path / "test.yml"
        yaml_content = {"locale": {"default": "de"}, "other": [1, 2]}
        yaml_file.write_text(yaml.dump(yaml_content))

        assert load_safe_yaml(yaml_file) == yaml_content
        assert load_safe_yaml(str(yaml_file)) == yaml_content

    def test_load_empty_yaml(self, tmp_path):
        """Test loading an empty YAML file."""
        yaml_file = tmp_path / "empty.yml"
        yaml_file.write_text("")

        assert load_safe_yaml(yaml_file) == {}

    def test_file_not_found(self, tmp_path):
        """Test loading a non-existent file."""
        with pytest.raises(ValueError, match="YAML file not found"):
            load_safe_yaml(tmp_path / "missing.yml")

    def test_invalid_yaml_syntax(self, tmp_path):
        """Test loading a file with invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yml"
        yaml_file.write_text("key: value\n- invalid mix of dict and list")

        with pytest.raises(ValueError, match="Error parsing YAML file"):
            load_safe_yaml(yaml_file)

    def test_non_dict_root(self, tmp_path):
        """Test loading YAML with a list at the root."""
        yaml_file = tmp_path / "list.yml"
        yaml_file.write_text("- item1\n- item2")

        with pytest.raises(ValueError, match="must contain a mapping at the root level"):
            load_safe_yaml(yaml_file)


class TestMergeYamlConfigs:
    """Test the merge_yaml_configs function."""

    def test_nested_merge(self):
        """Test that nested sections are merged key by key."""
        base = {"locale": {"default": "en"}, "logging": {"level": "INFO", "format": "%(message)s"}}
        override = {"logging": {"level": "DEBUG"}}

        result = merge_yaml_configs(base, override)

        assert result == {"locale": {"default": "en"}, "logging": {"level": "DEBUG", "format": "%(message)s"}}

    def test_inputs_not_modified(self):
        """Test that neither input is changed."""
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}, "d": 3}

        merge_yaml_configs(base, override)

        assert base == {"a": {"b": 1}}
        assert override == {"a": {"c": 2}, "d": 3}

    def test_scalar_replaces_section(self):
        """Test that a non-dict override replaces the whole value."""
        assert merge_yaml_configs({"a": {"b": 1}}, {"a": 5}) == {"a": 5}


class TestValidateYamlSchema:
    """Test the validate_yaml_schema function."""

    SCHEMA = {"locale": {"default": str}, "count": int}

    def test_valid(self):
        """Test data matching the schema."""
        assert validate_yaml_schema({"locale": {"default": "en"}, "count": 3}, self.SCHEMA) == []

    def test_missing_keys(self):
        """Test that missing keys are reported with their dotted path."""
        errors = validate_yaml_schema({"locale": {}}, self.SCHEMA)
        assert "Missing required key: locale.default" in errors
        assert "Missing required key: count" in errors

    def test_wrong_types(self):
        """Test that wrong value types are reported."""
        errors = validate_yaml_schema({"locale": "en", "count": "3"}, self.SCHEMA)
        assert errors == [
            "Invalid type for locale: expected a section, got str",
            "Invalid type for count: expected int, got str",
        ]
