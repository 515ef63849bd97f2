#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for character_types module.
"""

from ime_text_utils.character_types import (
    is_digit,
    is_letter,
    is_lower_case,
    is_upper_case,
    is_whitespace,
    simple_to_lower,
)


class TestLetterAndCase:
    """Test letter and case predicates."""

    def test_is_letter(self):
        """Test letters from several scripts."""
        for char in ["a", "Z", "é", "ß", "中", "Ж"]:
            assert is_letter(ord(char)), char
        for char in ["1", "'", " ", "-", "\u0301"]:
            assert not is_letter(ord(char)), char

    def test_is_upper_case(self):
        """Test upper case detection."""
        assert is_upper_case(ord("A"))
        assert is_upper_case(ord("É"))
        assert is_upper_case(0x10400)
        assert not is_upper_case(ord("a"))
        assert not is_upper_case(ord("1"))

    def test_is_lower_case(self):
        """Test lower case detection."""
        assert is_lower_case(ord("a"))
        assert is_lower_case(ord("ß"))
        assert is_lower_case(0x10428)
        assert not is_lower_case(ord("A"))
        assert not is_lower_case(ord("'"))

    def test_titlecase_letter(self):
        """Test that titlecase letters are neither upper nor lower case."""
        assert is_letter(0x01C5)
        assert not is_upper_case(0x01C5)
        assert not is_lower_case(0x01C5)

    def test_uncased_letter(self):
        """Test that CJK letters have no case."""
        assert not is_upper_case(0x4E2D)
        assert not is_lower_case(0x4E2D)


class TestDigitAndWhitespace:
    """Test digit and whitespace predicates."""

    def test_is_digit(self):
        """Test decimal digits in several scripts."""
        assert is_digit(ord("5"))
        assert is_digit(0x0663)
        assert not is_digit(0x00B2)
        assert not is_digit(ord("a"))

    def test_is_whitespace(self):
        """Test whitespace code points."""
        for code_point in [0x20, 0x09, 0x0A, 0x0D, 0x1F, 0x2003, 0x2028, 0x2029, 0x3000]:
            assert is_whitespace(code_point), hex(code_point)

    def test_not_whitespace(self):
        """Test no-break spaces and other code points."""
        for code_point in [0x00A0, 0x2007, 0x202F, 0x85, 0x00, ord("a"), ord("\"")]:
            assert not is_whitespace(code_point), hex(code_point)


class TestSimpleToLower:
    """Test the simple_to_lower function."""

    def test_basic(self):
        """Test ASCII and Latin-1 letters."""
        assert simple_to_lower(ord("A")) == ord("a")
        assert simple_to_lower(ord("É")) == ord("é")
        assert simple_to_lower(ord("a")) == ord("a")
        assert simple_to_lower(ord("1")) == ord("1")

    def test_single_code_point_result(self):
        """Test that multi code point lowercase forms are cut to one."""
        assert simple_to_lower(0x0130) == 0x69
