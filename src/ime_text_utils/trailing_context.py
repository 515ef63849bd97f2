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
trailing_context.py - Heuristics on the text before the cursor
==============================================================

Both classifiers are called on every keystroke. They walk backward from
the end of the text one code point at a time and stop as soon as the
answer is known, so their cost is linear in the scanned suffix only.
"""

from .character_types import is_digit, is_whitespace
from .code_points import code_point_before, offset_by_code_points
from .text_constants import (
    CODE_DOUBLE_QUOTE,
    CODE_LOWERCASE_W,
    CODE_LOWERCASE_Z,
    CODE_PERIOD,
    CODE_SINGLE_QUOTE,
    CODE_SLASH,
)


def last_part_looks_like_url(text: str) -> bool:
    """
    Approximate whether the text before the cursor looks like a URL.

    Walks backward until a code point outside '.'..'z' is found. That range
    holds the ASCII letters and digits, period, slash, underscore, '@', '?'
    and '='; it excludes spaces, '!' and '"'. The run looks like a URL if:
    - it contains "//"
    - it starts with "www" and contains a period
    - it starts with a single slash at the start of the text or after
      whitespace
    - it contains both a period and a slash

    "abc./def" and ".abc/def" are reported as URLs too; that keeps the scan
    simple.

    Args:
        text: The text before the cursor

    Returns:
        True if the last run of URL-like characters looks like a URL
    """
    i = len(text)
    if i == 0:
        return False
    w_count = 0
    slash_count = 0
    has_slash = False
    has_period = False
    code_point = 0
    while i > 0:
        code_point = code_point_before(text, i)
        if code_point < CODE_PERIOD or code_point > CODE_LOWERCASE_Z:
            break
        if code_point == CODE_PERIOD:
            has_period = True
        if code_point == CODE_SLASH:
            has_slash = True
            slash_count += 1
            if slash_count == 2:
                return True
        else:
            slash_count = 0
        if code_point == CODE_LOWERCASE_W:
            w_count += 1
        else:
            w_count = 0
        i = offset_by_code_points(text, i, -1)

    if w_count >= 3 and has_period:
        return True
    if slash_count == 1 and (i == 0 or is_whitespace(code_point)):
        return True
    return has_period and has_slash


def is_inside_double_quote_or_after_digit(text: str) -> bool:
    """
    Examine the text and return whether we're inside a double quote.

    This decides whether an automatic space goes before or after a typed
    double quote. The previous double quote is found by walking backward: if
    whitespace follows it, it was a closing quote; if whitespace precedes it,
    it was an opening quote. After a digit the answer is always True, since
    the "inch" or "minutes" use is dominant there.

    Args:
        text: The text before the cursor

    Returns:
        Whether we're inside a double quote or right after a digit
    """
    i = len(text)
    if i == 0:
        return False
    code_point = code_point_before(text, i)
    if is_digit(code_point):
        return True
    prev_code_point = 0
    while i > 0:
        code_point = code_point_before(text, i)
        if code_point == CODE_DOUBLE_QUOTE and is_whitespace(prev_code_point):
            return False
        if is_whitespace(code_point) and prev_code_point == CODE_DOUBLE_QUOTE:
            return True
        i = offset_by_code_points(text, i, -1)
        prev_code_point = code_point
    # Start of text reached: inside a quote only if the text opens with one
    return code_point == CODE_DOUBLE_QUOTE


def get_trailing_single_quotes_count(text: str) -> int:
    """Return how many single quotes end ``text``."""
    return len(text) - len(text.rstrip(chr(CODE_SINGLE_QUOTE)))
