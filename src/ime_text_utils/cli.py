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
cli.py - ime-text command-line interface
========================================

Inspect how the input pipeline sees a piece of text:

    ime-text analyze "check www.example.com"
    ime-text capitalize "hello world" --mode each-word
    ime-text init-config
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from .capitalization import (
    get_capitalization_type,
    is_identical_after_capitalize_each_word,
    is_identical_after_downcase,
    is_identical_after_upcase,
)
from .case_transform import (
    capitalize_each_word,
    capitalize_first_and_downcase_rest,
    capitalize_first_code_point,
)
from .cli_setup import setup_configuration, setup_logging
from .code_points import code_point_count
from .common_print_utils import quote_text, safe_print
from .config_loader import ConfigLoader, build_separator_array, get_word_separators
from .config_schema import VALID_LOG_LEVELS
from .trailing_context import is_inside_double_quote_or_after_digit, last_part_looks_like_url

logger = logging.getLogger(__name__)

CAPITALIZE_MODES = ("first", "first-lower-rest", "each-word")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for ime-text."""
    parser = argparse.ArgumentParser(
        prog="ime-text",
        description="Code-point-aware capitalization and trailing context analysis for typed text",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (default: ime_text_config.yml)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Override the log level from the configuration",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Classify the capitalization and trailing context of TEXT")
    analyze.add_argument("text", type=str, help="Text before the cursor")
    analyze.add_argument(
        "--separators",
        type=str,
        default=None,
        help="Word separator characters (default: from configuration)",
    )

    capitalize = subparsers.add_parser("capitalize", help="Print a capitalized variant of TEXT")
    capitalize.add_argument("text", type=str, help="Text to capitalize")
    capitalize.add_argument(
        "--mode",
        choices=CAPITALIZE_MODES,
        default="first",
        help="first: first code point only; first-lower-rest: also downcase the rest; each-word: every word (default: first)",
    )
    capitalize.add_argument("--locale", type=str, default=None, help="Locale tag (default: from configuration)")
    capitalize.add_argument(
        "--separators",
        type=str,
        default=None,
        help="Word separator characters for each-word mode (default: from configuration)",
    )

    init_config = subparsers.add_parser("init-config", help="Write the default configuration file")
    init_config.add_argument("--force", action="store_true", help="Overwrite an existing configuration file")

    return parser


def _resolve_separators(args: argparse.Namespace, config: dict[str, Any]) -> list[int]:
    if args.separators is not None:
        return build_separator_array(args.separators)
    return get_word_separators(config)


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


def run_analyze(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Print every classification of ``args.text``."""
    text = args.text
    separators = _resolve_separators(args, config)
    logger.debug(f"Analyzing {text!r} with separators {separators}")
    safe_print(f"[bold]Text:[/bold] {quote_text(text)}")
    safe_print(f"Code points: {code_point_count(text)}")
    safe_print(f"Capitalization: [cyan]{get_capitalization_type(text).name}[/cyan]")
    safe_print(f"Identical after upcase: {_yes_no(is_identical_after_upcase(text))}")
    safe_print(f"Identical after downcase: {_yes_no(is_identical_after_downcase(text))}")
    safe_print(
        f"Identical after capitalize each word: {_yes_no(is_identical_after_capitalize_each_word(text, separators))}"
    )
    safe_print(f"Looks like URL: {_yes_no(last_part_looks_like_url(text))}")
    safe_print(f"Inside double quote or after digit: {_yes_no(is_inside_double_quote_or_after_digit(text))}")
    return 0


def run_capitalize(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Print the capitalized variant of ``args.text`` selected by ``args.mode``."""
    locale = args.locale or config["locale"]["default"]
    logger.debug(f"Capitalizing {args.text!r} in mode {args.mode} for locale {locale}")
    if args.mode == "first":
        result = capitalize_first_code_point(args.text, locale)
    elif args.mode == "first-lower-rest":
        result = capitalize_first_and_downcase_rest(args.text, locale)
    else:
        result = capitalize_each_word(args.text, _resolve_separators(args, config), locale)
    safe_print(quote_text(result))
    return 0


def run_init_config(args: argparse.Namespace) -> int:
    """Write the default configuration file."""
    loader = ConfigLoader(config_path=Path(args.config) if args.config else None)
    if loader.write_default_config(force=args.force):
        safe_print(f"[green]Configuration written to[/green] {loader.config_path}")
        return 0
    safe_print(f"[yellow]{loader.config_path} already exists.[/yellow] Use --force to overwrite it.")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ime-text command."""
    args = create_parser().parse_args(argv)

    if args.command == "init-config":
        return run_init_config(args)

    config = setup_configuration(Path(args.config) if args.config else None)
    setup_logging(config, args.log_level)

    if args.command == "analyze":
        return run_analyze(args, config)
    return run_capitalize(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
