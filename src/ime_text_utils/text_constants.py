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
text_constants.py - Code point constants for the IME text utilities
====================================================================

This module contains the code points the classifiers look for, the
whitespace sets used by the character predicates, and the separator
used by comma-splittable text.
"""

# Code points tested by the trailing context classifiers
CODE_SPACE = ord(" ")
CODE_DOUBLE_QUOTE = ord('"')
CODE_SINGLE_QUOTE = ord("'")
CODE_PERIOD = ord(".")
CODE_SLASH = ord("/")
CODE_LOWERCASE_W = ord("w")
CODE_LOWERCASE_Z = ord("z")

# Not a code point: returned when a case mapping does not fit in one code point
CODE_UNSPECIFIED = -1

# Highest valid Unicode code point
MAX_CODE_POINT = 0x10FFFF

# Surrogate ranges of the UTF-16 storage form
MIN_HIGH_SURROGATE = 0xD800
MAX_HIGH_SURROGATE = 0xDBFF
MIN_LOW_SURROGATE = 0xDC00
MAX_LOW_SURROGATE = 0xDFFF
MIN_SUPPLEMENTARY_CODE_POINT = 0x10000

# Control characters counted as whitespace
WHITESPACE_CONTROLS = frozenset(
    {
        0x09,  # Tab
        0x0A,  # Line feed
        0x0B,  # Vertical tab
        0x0C,  # Form feed
        0x0D,  # Carriage return
        0x1C,  # File separator
        0x1D,  # Group separator
        0x1E,  # Record separator
        0x1F,  # Unit separator
    }
)

# Space separators that are NOT whitespace because they forbid a line break
NO_BREAK_SPACES = frozenset(
    {
        0x00A0,  # No-break space
        0x2007,  # Figure space
        0x202F,  # Narrow no-break space
    }
)

# Unicode categories of space, line and paragraph separators
SEPARATOR_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})

# Comma-splittable text has no escaping, so values can't contain this
SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT = ","

EMPTY_STRING = ""
