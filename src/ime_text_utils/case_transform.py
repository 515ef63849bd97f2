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
case_transform.py - Capitalized variants of typed words
=======================================================

These functions decide WHERE case changes apply, one code point at a
time; the actual mapping is delegated to a CaseMapper.

Known limitations, kept as they are:
- Greek gets upper case instead of title case for the first letter.
- Serbian "lj" should become "Lj" in title case and "LJ" in upper case.
- Dutch "ij" written as two code points should usually be capitalized
  together as "IJ". The single ligature code point works.
- A letter whose upper case is several code points ("ß" gives "SS")
  leaves a result that capitalizes differently a second time.
- capitalize_each_word() maps one code point at a time, so mappings that
  depend on the next code point are lost: Turkish "I" + U+0307 gives a
  dotless i followed by the combining dot.
"""

from __future__ import annotations

from collections.abc import Sequence

from .case_mapping import DEFAULT_CASE_MAPPER, CaseMapper
from .code_points import (
    code_point_at,
    code_point_count,
    iter_code_points,
    new_single_code_point_string,
    normalize_surrogate_pairs,
    offset_by_code_points,
    sorted_contains,
)
from .text_constants import CODE_SPACE, CODE_UNSPECIFIED


def capitalize_first_code_point(text: str, locale: str | None, case_mapper: CaseMapper | None = None) -> str:
    """
    Upcase the first code point of ``text`` and leave the rest untouched.

    The rest is not case mapped, but its surrogate pairs are joined like
    those of the mapped first code point.

    Args:
        text: Text to capitalize
        locale: Locale tag for the case mapping
        case_mapper: Mapper to use (default: DEFAULT_CASE_MAPPER)

    Returns:
        The capitalized text
    """
    mapper = case_mapper or DEFAULT_CASE_MAPPER
    if len(text) <= 1:
        return mapper.uppercase(text, locale)
    cutoff = offset_by_code_points(text, 0, 1)
    return mapper.uppercase(text[:cutoff], locale) + normalize_surrogate_pairs(text[cutoff:])


def capitalize_first_and_downcase_rest(text: str, locale: str | None, case_mapper: CaseMapper | None = None) -> str:
    """
    Upcase the first code point of ``text`` and downcase everything after it.

    Not idempotent for letters whose upper case is several code points:
    "ß" gives "SS", which a second pass turns into "Ss". See the module
    docstring for the languages this gets wrong.
    """
    mapper = case_mapper or DEFAULT_CASE_MAPPER
    if len(text) <= 1:
        return mapper.uppercase(text, locale)
    cutoff = offset_by_code_points(text, 0, 1)
    return mapper.uppercase(text[:cutoff], locale) + mapper.lowercase(text[cutoff:], locale)


# TODO: like capitalize_first_*, this gets the Dutch IJ digraph wrong
def capitalize_each_word(
    text: str,
    sorted_separators: Sequence[int],
    locale: str | None,
    case_mapper: CaseMapper | None = None,
) -> str:
    """
    Upcase the first code point of each word and downcase the others.

    Args:
        text: Text to capitalize
        sorted_separators: Ascending code points that start a new word
        locale: Locale tag for the case mapping
        case_mapper: Mapper to use (default: DEFAULT_CASE_MAPPER)

    Returns:
        The capitalized text
    """
    mapper = case_mapper or DEFAULT_CASE_MAPPER
    parts = []
    needs_caps_next = True
    for code_point in iter_code_points(text):
        next_char = new_single_code_point_string(code_point)
        if needs_caps_next:
            parts.append(mapper.uppercase(next_char, locale))
        else:
            parts.append(mapper.lowercase(next_char, locale))
        # We need a capital letter next if this is a separator.
        needs_caps_next = sorted_contains(sorted_separators, code_point)
    return "".join(parts)


def to_upper_case_of_string_for_locale(
    text: str | None,
    needs_to_upper_case: bool,
    locale: str | None,
    case_mapper: CaseMapper | None = None,
) -> str | None:
    """Upcase ``text`` when asked to; None passes through."""
    if text is None or not needs_to_upper_case:
        return text
    return (case_mapper or DEFAULT_CASE_MAPPER).uppercase(text, locale)


def to_upper_case_of_code_for_locale(
    code: int,
    needs_to_upper_case: bool,
    locale: str | None,
    case_mapper: CaseMapper | None = None,
) -> int:
    """
    Upcase a single key code.

    Codes below CODE_SPACE are keyboard control codes and are returned as is.

    Returns:
        The upcased code point, or CODE_UNSPECIFIED when the upper case form
        is more than one code point long (as for "ß")
    """
    if code < CODE_SPACE or not needs_to_upper_case:
        return code
    cased_text = to_upper_case_of_string_for_locale(
        new_single_code_point_string(code), needs_to_upper_case, locale, case_mapper
    )
    return code_point_at(cased_text, 0) if code_point_count(cased_text) == 1 else CODE_UNSPECIFIED
