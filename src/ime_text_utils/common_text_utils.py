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
common_text_utils.py - One import point for the IME string utilities
====================================================================

Re-exports the public functions of:
- code_points: code point iteration and arrays
- capitalization: capitalization type and "identical after" predicates
- case_transform: capitalized variants of words
- trailing_context: URL and quote heuristics on the text before the cursor
- text_processing: comma-splittable text, hex and other small helpers
"""

from .code_points import (
    BufferTooSmallError,
    MalformedTextError,
    code_point_at,
    code_point_before,
    code_point_count,
    copy_code_points_and_return_code_point_count,
    get_string_from_null_terminated_code_point_array,
    iter_code_points,
    new_single_code_point_string,
    offset_by_code_points,
    sorted_contains,
    to_code_point_array,
    to_sorted_code_point_array,
)
from .capitalization import (
    CAPITALIZE_ALL,
    CAPITALIZE_FIRST,
    CAPITALIZE_NONE,
    CapitalizationType,
    get_capitalization_type,
    is_identical_after_capitalize_each_word,
    is_identical_after_downcase,
    is_identical_after_upcase,
)
from .case_mapping import DEFAULT_CASE_MAPPER, CaseMapper
from .case_transform import (
    capitalize_each_word,
    capitalize_first_and_downcase_rest,
    capitalize_first_code_point,
    to_upper_case_of_code_for_locale,
    to_upper_case_of_string_for_locale,
)
from .trailing_context import (
    get_trailing_single_quotes_count,
    is_inside_double_quote_or_after_digit,
    last_part_looks_like_url,
)
from .text_processing import (
    Stringizer,
    append_to_comma_splittable_text_if_not_exists,
    byte_array_to_hex_string,
    contains_in_array,
    contains_in_comma_splittable_text,
    hex_string_to_byte_array,
    is_empty_string_or_white_spaces,
    join_comma_splittable_text,
    remove_dupes,
    remove_from_comma_splittable_text_if_exists,
)

__all__ = [
    # Code points
    "BufferTooSmallError",
    "MalformedTextError",
    "code_point_at",
    "code_point_before",
    "code_point_count",
    "copy_code_points_and_return_code_point_count",
    "get_string_from_null_terminated_code_point_array",
    "iter_code_points",
    "new_single_code_point_string",
    "offset_by_code_points",
    "sorted_contains",
    "to_code_point_array",
    "to_sorted_code_point_array",
    # Capitalization
    "CAPITALIZE_ALL",
    "CAPITALIZE_FIRST",
    "CAPITALIZE_NONE",
    "CapitalizationType",
    "get_capitalization_type",
    "is_identical_after_capitalize_each_word",
    "is_identical_after_downcase",
    "is_identical_after_upcase",
    # Case transforms
    "DEFAULT_CASE_MAPPER",
    "CaseMapper",
    "capitalize_each_word",
    "capitalize_first_and_downcase_rest",
    "capitalize_first_code_point",
    "to_upper_case_of_code_for_locale",
    "to_upper_case_of_string_for_locale",
    # Trailing context
    "get_trailing_single_quotes_count",
    "is_inside_double_quote_or_after_digit",
    "last_part_looks_like_url",
    # Small helpers
    "Stringizer",
    "append_to_comma_splittable_text_if_not_exists",
    "byte_array_to_hex_string",
    "contains_in_array",
    "contains_in_comma_splittable_text",
    "hex_string_to_byte_array",
    "is_empty_string_or_white_spaces",
    "join_comma_splittable_text",
    "remove_dupes",
    "remove_from_comma_splittable_text_if_exists",
]
