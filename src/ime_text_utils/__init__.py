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
IME Text Utilities

Code-point-aware capitalization detection, case transforms and trailing
context heuristics for an input-method text pipeline.
"""

__version__ = "0.1.0"
__author__ = "Emasoft"
__email__ = "713559+Emasoft@users.noreply.github.com"
__license__ = "Apache-2.0"

# Core modules
from . import code_points
from . import character_types
from . import capitalization
from . import case_mapping
from . import case_transform
from . import trailing_context

# Utility modules
from . import text_constants
from . import text_processing
from . import common_text_utils
from . import common_yaml_utils

# Configuration and CLI support
from . import config_schema
from . import config_loader

from .capitalization import CapitalizationType
from .case_mapping import CaseMapper
from .code_points import BufferTooSmallError, MalformedTextError

__all__ = [
    "code_points",
    "character_types",
    "capitalization",
    "case_mapping",
    "case_transform",
    "trailing_context",
    "text_constants",
    "text_processing",
    "common_text_utils",
    "common_yaml_utils",
    "config_schema",
    "config_loader",
    "CapitalizationType",
    "CaseMapper",
    "BufferTooSmallError",
    "MalformedTextError",
]
