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
code_points.py - Code point iteration over variable-width text
==============================================================

A ``str`` element is the storage unit. Text coming from UTF-16 sources
(for instance decoded with the ``surrogatepass`` error handler) may store
a supplementary code point as a high + low surrogate pair, which counts as
ONE code point here. Every step in this module advances by exactly one
code point, never by a fixed number of storage units.

An unpaired surrogate is a malformed sequence and raises
MalformedTextError as soon as an iteration step reaches it.
"""

from __future__ import annotations

import bisect
import re
from collections.abc import Iterator, MutableSequence, Sequence

from .character_types import simple_to_lower
from .text_constants import (
    MAX_CODE_POINT,
    MAX_HIGH_SURROGATE,
    MAX_LOW_SURROGATE,
    MIN_HIGH_SURROGATE,
    MIN_LOW_SURROGATE,
    MIN_SUPPLEMENTARY_CODE_POINT,
)

_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")


class MalformedTextError(ValueError):
    """Raised when text holds an unpaired surrogate or a range splits a pair."""


class BufferTooSmallError(IndexError):
    """Raised when a caller-provided code point buffer cannot hold the result."""


def _has_surrogates(text: str) -> bool:
    return _SURROGATE_RE.search(text) is not None


def _combine(high: int, low: int) -> int:
    return ((high - MIN_HIGH_SURROGATE) << 10) + (low - MIN_LOW_SURROGATE) + MIN_SUPPLEMENTARY_CODE_POINT


def _decode_at(text: str, index: int, limit: int) -> tuple[int, int]:
    """Return (code point, storage units) for the code point starting at index."""
    unit = ord(text[index])
    if unit < MIN_HIGH_SURROGATE or unit > MAX_LOW_SURROGATE:
        return unit, 1
    if unit <= MAX_HIGH_SURROGATE and index + 1 < limit:
        low = ord(text[index + 1])
        if MIN_LOW_SURROGATE <= low <= MAX_LOW_SURROGATE:
            return _combine(unit, low), 2
    raise MalformedTextError(f"Unpaired surrogate U+{unit:04X} at index {index}")


def _decode_before(text: str, index: int, start: int) -> tuple[int, int]:
    """Return (code point, storage units) for the code point ending at index."""
    unit = ord(text[index - 1])
    if unit < MIN_HIGH_SURROGATE or unit > MAX_LOW_SURROGATE:
        return unit, 1
    if unit >= MIN_LOW_SURROGATE and index - 2 >= start:
        high = ord(text[index - 2])
        if MIN_HIGH_SURROGATE <= high <= MAX_HIGH_SURROGATE:
            return _combine(high, unit), 2
    raise MalformedTextError(f"Unpaired surrogate U+{unit:04X} at index {index - 1}")


def _check_range(text: str, start: int, end: int) -> None:
    if not 0 <= start <= end <= len(text):
        raise IndexError(f"Invalid range [{start}, {end}) for text of length {len(text)}")


def code_point_at(text: str, index: int) -> int:
    """Return the code point that starts at storage unit ``index``."""
    if not 0 <= index < len(text):
        raise IndexError(f"Index {index} out of range for text of length {len(text)}")
    return _decode_at(text, index, len(text))[0]


def code_point_before(text: str, index: int) -> int:
    """Return the code point that ends just before storage unit ``index``."""
    if not 0 < index <= len(text):
        raise IndexError(f"Index {index} out of range for text of length {len(text)}")
    return _decode_before(text, index, 0)[0]


def offset_by_code_points(text: str, index: int, offset: int) -> int:
    """
    Move ``index`` by ``offset`` code points, forward or backward.

    Args:
        text: The text to walk
        index: Starting storage unit index
        offset: Number of code points to move; negative moves backward

    Returns:
        The storage unit index reached

    Raises:
        IndexError: If the walk runs off either end of the text
        MalformedTextError: If an unpaired surrogate is crossed
    """
    length = len(text)
    if not 0 <= index <= length:
        raise IndexError(f"Index {index} out of range for text of length {length}")
    while offset > 0:
        if index >= length:
            raise IndexError("Offset runs past the end of the text")
        index += _decode_at(text, index, length)[1]
        offset -= 1
    while offset < 0:
        if index <= 0:
            raise IndexError("Offset runs past the start of the text")
        index -= _decode_before(text, index, 0)[1]
        offset += 1
    return index


def iter_code_points(text: str, start: int = 0, end: int | None = None) -> Iterator[int]:
    """Yield the code points of ``text[start:end]`` from left to right."""
    if end is None:
        end = len(text)
    _check_range(text, start, end)
    index = start
    while index < end:
        code_point, width = _decode_at(text, index, end)
        yield code_point
        index += width


def code_point_count(text: str | None) -> int:
    """Return the number of code points in ``text``; 0 for None or empty text."""
    if not text:
        return 0
    if not _has_surrogates(text):
        return len(text)
    return sum(1 for _ in iter_code_points(text))


def to_code_point_array(text: str, start: int = 0, end: int | None = None) -> list[int]:
    """
    Convert a range of a string to a list of code points.

    Args:
        text: The source string
        start: Start storage unit index, inclusive
        end: End storage unit index, exclusive (default: end of text)

    Returns:
        A new list holding at most ``end - start`` code points, possibly fewer
    """
    if not text:
        return []
    if end is None:
        end = len(text)
    _check_range(text, start, end)
    if not _has_surrogates(text):
        return [ord(char) for char in text[start:end]]
    return list(iter_code_points(text, start, end))


def copy_code_points_and_return_code_point_count(
    destination: MutableSequence[int],
    text: str,
    start: int,
    end: int,
    down_case: bool = False,
) -> int:
    """
    Copy the code points of ``text[start:end]`` into ``destination``.

    The destination must already be large enough; its size can be measured
    with code_point_count() beforehand. The buffer is never grown: a buffer
    that is too small is a caller bug and raises BufferTooSmallError after
    the code points that fit have been written.

    The optional down-casing uses simple_to_lower() and pays no attention to
    the locale, so it is not correct for every language.

    Args:
        destination: Pre-sized buffer (list or array.array)
        text: The source string
        start: Start storage unit index, inclusive
        end: End storage unit index, exclusive
        down_case: Lowercase each code point before copying it

    Returns:
        The number of copied code points
    """
    dest_index = 0
    for code_point in iter_code_points(text, start, end):
        try:
            destination[dest_index] = simple_to_lower(code_point) if down_case else code_point
        except IndexError as e:
            raise BufferTooSmallError(
                f"Destination of size {len(destination)} is too small for text range [{start}, {end})"
            ) from e
        dest_index += 1
    return dest_index


def to_sorted_code_point_array(text: str) -> list[int]:
    """Return the code points of ``text`` in ascending order."""
    return sorted(to_code_point_array(text))


def sorted_contains(sorted_code_points: Sequence[int], code_point: int) -> bool:
    """Binary search membership test on an ascending code point sequence."""
    index = bisect.bisect_left(sorted_code_points, code_point)
    return index < len(sorted_code_points) and sorted_code_points[index] == code_point


def new_single_code_point_string(code_point: int) -> str:
    """
    Build the shortest string holding one code point.

    Python strings store any code point in a single element, so this is
    always a one-element string.

    Raises:
        ValueError: If the code point is outside 0..0x10FFFF
    """
    if not 0 <= code_point <= MAX_CODE_POINT:
        raise ValueError(f"Invalid code point: {code_point}")
    return chr(code_point)


def get_string_from_null_terminated_code_point_array(code_points: Sequence[int]) -> str:
    """
    Construct a string from a code point array.

    Args:
        code_points: A code point array that is terminated by 0 when its
            logical length is shorter than the array length

    Returns:
        The string built from the code points before the first 0
    """
    string_length = len(code_points)
    for i, code_point in enumerate(code_points):
        if code_point == 0:
            string_length = i
            break
    return "".join(new_single_code_point_string(code_point) for code_point in code_points[:string_length])


def normalize_surrogate_pairs(text: str) -> str:
    """Replace every surrogate pair with the single code point it encodes."""
    if not _has_surrogates(text):
        return text
    return "".join(chr(code_point) for code_point in iter_code_points(text))
