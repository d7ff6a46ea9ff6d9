# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Schema definitions for gradient editor state.

All types in this module are immutable (frozen dataclasses).
Edits produce new values via ``dataclasses.replace``.
"""

from conique.schema.gradient_state import (
    AppState,
    ColorStop,
    GradientLayer,
    GradientType,
    Position,
)

__all__ = [
    # Stop-level types
    "ColorStop",
    "Position",
    # Layer types
    "GradientType",
    "GradientLayer",
    # Top-level container
    "AppState",
]
