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

"""Capitalization type detection for words typed by the user."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from .character_types import is_letter, is_lower_case, is_upper_case
from .code_points import iter_code_points, sorted_contains


class CapitalizationType(enum.IntEnum):
    """How a word is capitalized."""

    NONE = 0
    """No caps, or mixed case."""
    FIRST = 1
    """First letter only."""
    ALL = 2
    """All letters."""


CAPITALIZE_NONE = CapitalizationType.NONE
CAPITALIZE_FIRST = CapitalizationType.FIRST
CAPITALIZE_ALL = CapitalizationType.ALL


def get_capitalization_type(text: str) -> CapitalizationType:
    """
    Classify how ``text`` is capitalized.

    Leading non-letters are skipped. If the first letter is not upper case,
    the word is either all lower case or camel case and the answer is NONE.
    Non-letters after the first letter (as in "IT'S" or "FULL-TIME") count
    toward neither total.

    Args:
        text: The word to classify; the empty string gives NONE

    Returns:
        FIRST if only the first letter is upper case, ALL if every letter is,
        NONE otherwise
    """
    code_points = iter_code_points(text)
    for code_point in code_points:
        if is_letter(code_point):
            break
    else:
        return CapitalizationType.NONE
    if not is_upper_case(code_point):
        return CapitalizationType.NONE

    caps_count = 1
    letter_count = 1
    for code_point in code_points:
        # Once caps is neither 1 nor every letter, no later letter can fix it
        if caps_count != 1 and letter_count != caps_count:
            break
        if is_upper_case(code_point):
            caps_count += 1
            letter_count += 1
        elif is_letter(code_point):
            letter_count += 1

    if caps_count == 1:
        return CapitalizationType.FIRST
    return CapitalizationType.ALL if letter_count == caps_count else CapitalizationType.NONE


def is_identical_after_upcase(text: str) -> bool:
    """Return True if no letter of ``text`` would change when upcased."""
    for code_point in iter_code_points(text):
        if is_letter(code_point) and not is_upper_case(code_point):
            return False
    return True


def is_identical_after_downcase(text: str) -> bool:
    """Return True if no letter of ``text`` would change when downcased."""
    for code_point in iter_code_points(text):
        if is_letter(code_point) and not is_lower_case(code_point):
            return False
    return True


def is_identical_after_capitalize_each_word(text: str, sorted_separators: Sequence[int]) -> bool:
    """
    Return True if ``text`` already looks like capitalize_each_word() output.

    Args:
        text: The text to test
        sorted_separators: Ascending code points that start a new word

    Returns:
        False at the first letter whose case doesn't match its position
    """
    needs_caps_next = True
    for code_point in iter_code_points(text):
        if is_letter(code_point):
            if (needs_caps_next and not is_upper_case(code_point)) or (
                not needs_caps_next and not is_lower_case(code_point)
            ):
                return False
        # We need a capital letter next if this is a separator.
        needs_caps_next = sorted_contains(sorted_separators, code_point)
    return True
