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
case_mapping.py - Locale-aware case mapping capability
======================================================

The capitalization transforms never map case themselves: they hand spans
of text to a CaseMapper. The default mapper uses Python's full Unicode
case mapping, which may change the length of the text ("ß" upcases to
"SS"), plus the Turkic dotted and dotless i rules. Subclass CaseMapper to
plug in another implementation (for instance one backed by ICU).
"""

from __future__ import annotations

from .code_points import normalize_surrogate_pairs

# Languages whose "i" and "I" are not case pairs of each other
TURKIC_LANGUAGES = frozenset({"tr", "az"})


def get_language(locale: str | None) -> str:
    """
    Extract the lowercase language subtag from a locale tag.

    Accepts "tr", "tr_TR" and "tr-TR" spellings. None or an empty tag is
    the root locale and gives "".
    """
    if not locale:
        return ""
    return locale.replace("-", "_").split("_", 1)[0].lower()


class CaseMapper:
    """Upcases and downcases spans of text under a locale."""

    def uppercase(self, text: str, locale: str | None) -> str:
        """Return ``text`` upcased under ``locale``."""
        text = normalize_surrogate_pairs(text)
        if get_language(locale) in TURKIC_LANGUAGES:
            text = text.replace("i", "İ")
        return text.upper()

    def lowercase(self, text: str, locale: str | None) -> str:
        """Return ``text`` downcased under ``locale``."""
        text = normalize_surrogate_pairs(text)
        if get_language(locale) in TURKIC_LANGUAGES:
            # "I" followed by a combining dot above is the decomposed dotted capital I
            text = text.replace("I\u0307", "i").replace("İ", "i").replace("I", "ı")
        return text.lower()


DEFAULT_CASE_MAPPER = CaseMapper()
