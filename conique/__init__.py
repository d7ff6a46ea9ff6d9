# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Conique -- Gradient notation engine for layered CSS gradients.

Parses conic / linear / radial gradients out of pasted CSS, writes layer
stacks back as CSS or Tailwind classes, and round-trips the whole editor
state through a share-URL token.

Quick start::

    from conique import parse_gradients, to_css, to_tailwind

    layers = parse_gradients("background: conic-gradient(#f00 0deg, #00f 360deg);")
    to_css(layers)        # background: conic-gradient(from 0deg at 50% 50%, ...);
    to_tailwind(layers)   # bg-[conic-gradient(from_0deg_at_50%_50%,_...)]
"""

from __future__ import annotations

__version__ = "1.0.0"

from conique.defaults import default_state
from conique.notation import (
    ParseConfig,
    format_number,
    get_alpha,
    parse_gradients,
    to_hex,
    to_rgba,
)
from conique.runtime import (
    decode_state,
    encode_state,
    to_css,
    to_css_with_size,
    to_tailwind,
)
from conique.schema import (
    AppState,
    ColorStop,
    GradientLayer,
    GradientType,
    Position,
)

__all__ = [
    # Core API
    "parse_gradients",
    "to_css",
    "to_tailwind",
    "encode_state",
    "decode_state",
    # Color and number helpers
    "to_rgba",
    "to_hex",
    "get_alpha",
    "format_number",
    # Types (commonly needed)
    "AppState",
    "GradientLayer",
    "GradientType",
    "ColorStop",
    "Position",
    # Configuration and defaults
    "ParseConfig",
    "default_state",
    "to_css_with_size",
    # Version
    "__version__",
]
