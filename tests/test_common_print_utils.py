#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for common_print_utils module.
"""

from unittest.mock import patch

from ime_text_utils.common_print_utils import quote_text, safe_print


class TestSafePrint:
    """Test the safe_print function."""

    @patch("ime_text_utils.common_print_utils.rich_print")
    def test_arguments_passed_through(self, mock_rich_print):
        """Test that arguments reach rich's print unchanged."""
        safe_print("Hello", "World", 123)
        mock_rich_print.assert_called_once_with("Hello", "World", 123)

        mock_rich_print.reset_mock()
        safe_print("Test", end="", flush=True)
        mock_rich_print.assert_called_once_with("Test", end="", flush=True)

    def test_markup_rendered(self, capsys):
        """Test that markup tags are not printed."""
        safe_print("[bold]Hello[/bold]")
        assert capsys.readouterr().out == "Hello\n"


class TestQuoteText:
    """Test the quote_text function."""

    def test_plain_text(self):
        """Test quoting plain text."""
        assert quote_text("hello") == '"hello"'

    def test_markup_escaped(self, capsys):
        """Test that text looking like markup is printed verbatim."""
        safe_print(quote_text("[red]x[/red]"))
        assert capsys.readouterr().out == '"[red]x[/red]"\n'
