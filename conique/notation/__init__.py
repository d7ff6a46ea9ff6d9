# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Gradient notation core for Conique.

Parsing of pasted CSS, color literal conversion and number formatting.
All operations are pure functions over text and schema values.
"""

from conique.notation.colorcodec import get_alpha, to_hex, to_rgba
from conique.notation.numbers import format_number
from conique.notation.parse import ParseConfig, parse_gradients

__all__ = [
    "parse_gradients",
    "ParseConfig",
    "to_rgba",
    "to_hex",
    "get_alpha",
    "format_number",
]
