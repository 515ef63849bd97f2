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
character_types.py - Per code point character predicates
========================================================

All predicates take an integer code point, not a string, so they can be
fed directly from the code point iterators in code_points.
"""

import unicodedata

from .text_constants import (
    NO_BREAK_SPACES,
    SEPARATOR_CATEGORIES,
    WHITESPACE_CONTROLS,
)


def is_letter(code_point: int) -> bool:
    """Return True for code points in the general categories Lu, Ll, Lt, Lm and Lo."""
    return chr(code_point).isalpha()


def is_upper_case(code_point: int) -> bool:
    """Return True if the code point has the Uppercase property.

    Titlecase letters such as U+01C5 are neither upper nor lower case.
    """
    return chr(code_point).isupper()


def is_lower_case(code_point: int) -> bool:
    """Return True if the code point has the Lowercase property."""
    return chr(code_point).islower()


def is_digit(code_point: int) -> bool:
    """Return True for decimal digits (category Nd) in any script."""
    return chr(code_point).isdecimal()


def is_whitespace(code_point: int) -> bool:
    """
    Return True if the code point is whitespace.

    Whitespace is any space, line or paragraph separator except the no-break
    spaces, plus the controls TAB, LF, VT, FF, CR and U+001C..U+001F.
    Unlike str.isspace(), U+0085 and U+00A0 are not whitespace here.
    """
    if code_point in WHITESPACE_CONTROLS:
        return True
    if code_point in NO_BREAK_SPACES:
        return False
    return unicodedata.category(chr(code_point)) in SEPARATOR_CATEGORIES


def simple_to_lower(code_point: int) -> int:
    """
    Lowercase a single code point without looking at the locale.

    Only the first code point of the full lowercase mapping is kept, so the
    result is always exactly one code point (U+0130 becomes U+0069).
    """
    lowered = chr(code_point).lower()
    return ord(lowered[0]) if lowered else code_point
