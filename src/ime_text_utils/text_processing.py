#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Collected the small string helpers used around the input pipeline
# - Comma-splittable text, suggestion de-duplication, hex conversion
# - Stringizer for debug dumps of arrays
#

"""
text_processing.py - Small string helpers for the IME text utilities
====================================================================

Comma-Splittable Text is similar to Comma-Separated Values (CSV) but has a
much simpler syntax. Unlike CSV it has no escaping mechanism, so a value
can't contain a comma.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Generic, TypeVar

from .character_types import is_whitespace
from .code_points import iter_code_points
from .text_constants import EMPTY_STRING, SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]*")

E = TypeVar("E")


def contains_in_array(text: str, array: Sequence[str]) -> bool:
    """Return True if ``text`` equals one of the elements of ``array``."""
    return any(text == element for element in array)


def _split_comma_splittable_text(text: str) -> list[str]:
    """Split on commas, dropping trailing empty values."""
    elements = text.split(SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT)
    while elements and not elements[-1]:
        elements.pop()
    return elements


def contains_in_comma_splittable_text(text: str, extra_values: str | None) -> bool:
    """Return True if ``text`` is one of the values of ``extra_values``."""
    if not extra_values:
        return False
    return contains_in_array(text, _split_comma_splittable_text(extra_values))


def join_comma_splittable_text(head: str | None, tail: str | None) -> str:
    """
    Join two comma-splittable texts.

    Args:
        head: First text, may be empty or None
        tail: Second text, may be empty or None

    Returns:
        "head,tail", or whichever one is not empty
    """
    if not head and not tail:
        return EMPTY_STRING
    if not head:
        return tail  # type: ignore[return-value]
    if not tail:
        return head
    return head + SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT + tail


def append_to_comma_splittable_text_if_not_exists(text: str, extra_values: str | None) -> str | None:
    """Prepend ``text`` to ``extra_values`` unless it is already there."""
    if not extra_values:
        return text
    if contains_in_comma_splittable_text(text, extra_values):
        return extra_values
    return extra_values + SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT + text


def remove_from_comma_splittable_text_if_exists(text: str, extra_values: str | None) -> str:
    """Remove every occurrence of ``text`` from ``extra_values``."""
    if not extra_values:
        return EMPTY_STRING
    elements = _split_comma_splittable_text(extra_values)
    if not contains_in_array(text, elements):
        return extra_values
    return SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT.join(element for element in elements if element != text)


def remove_dupes(suggestions: list[str]) -> None:
    """
    Remove duplicates from a list of strings, in place.

    The first occurrence of every string keeps its position; the later ones
    are removed.
    """
    if len(suggestions) < 2:
        return
    suggestions[:] = list(dict.fromkeys(suggestions))


def is_empty_string_or_white_spaces(text: str | None) -> bool:
    """Return True if ``text`` is None, empty, or only whitespace code points."""
    if not text:
        return True
    return all(is_whitespace(code_point) for code_point in iter_code_points(text))


def byte_array_to_hex_string(data: bytes | None) -> str:
    """Return the lowercase hex form of ``data``; "" for None or empty data."""
    if not data:
        return EMPTY_STRING
    return data.hex()


def hex_string_to_byte_array(hex_string: str | None) -> bytes | None:
    """
    Convert a hex string to bytes. The string length must be an even number.

    Returns:
        The decoded bytes, or None for None or an empty string

    Raises:
        ValueError: If the length is odd or a character is not a hex digit
    """
    if not hex_string:
        return None
    length = len(hex_string)
    if length % 2 != 0:
        raise ValueError(f"Input hex string length must be an even number. Length = {length}")
    if not _HEX_DIGITS_RE.fullmatch(hex_string):
        raise ValueError(f"Input hex string holds a character that is not a hex digit: {hex_string!r}")
    return bytes.fromhex(hex_string)


class Stringizer(Generic[E]):
    """Turns arrays of elements into bracketed, readable strings."""

    def stringize(self, element: E | None) -> str:
        return str(element) if element is not None else "null"

    def join(self, array: Sequence[E | None] | None, delimiter: str | None = None) -> str:
        """
        Join the stringized elements of ``array``.

        Without a delimiter the result looks like "[a, b]"; with one it is
        "[" followed by the delimiter-joined elements and "]".
        """
        if array is None:
            return "null"
        string_array = [self.stringize(element) for element in array]
        if delimiter is None:
            delimiter = ", "
        return "[" + delimiter.join(string_array) + "]"
