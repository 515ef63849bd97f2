#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures for all tests
"""

import os
import sys

import pytest

# Add src directory to path so we can import our modules
src_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
sys.path.insert(0, src_dir)


@pytest.fixture
def space_separators():
    """Sorted separator array holding only the space"""
    return [ord(" ")]


@pytest.fixture
def word_separators():
    """Sorted separator array holding space and hyphen"""
    return sorted([ord(" "), ord("-")])


@pytest.fixture
def emoji_pair():
    """U+1F600 stored as a UTF-16 surrogate pair"""
    return "\ud83d\ude00"


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML configuration file and return its path"""

    def _write(content: str, name: str = "ime_text_config.yml"):
        config_path = tmp_path / name
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
