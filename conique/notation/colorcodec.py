# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Color literal conversions.

Bridges the two color spaces of the editor:
- Stored stop colors: hex (``#RGB``, ``#RRGGBB``) or ``rgb(...)``/``rgba(...)``
- Color pickers: ``#rrggbb`` plus a separate alpha value

Every function is total. Literals it cannot read (named colors, hsl(a),
malformed text) pass through unchanged or fall back to black; nothing
raises. ``rgb(a)`` components are read with browser ``parseInt`` /
``parseFloat`` leniency (leading numeric text counts).
"""

from __future__ import annotations

import re
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from conique.notation.numbers import plain_number


# =============================================================================
# Literal Matching
# =============================================================================

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_FUNC_RE = re.compile(r"^(rgba?)\((.*)\)$", re.IGNORECASE | re.DOTALL)
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def is_hex_color(color: str) -> bool:
    """True for ``#`` followed by 3, 4, 6 or 8 hex digits."""
    return bool(_HEX_RE.match(color.strip()))


def _rgb_components(color: str) -> Optional[tuple[str, list[str]]]:
    """Split ``rgb(...)``/``rgba(...)`` into (lowercased name, raw components)."""
    m = _RGB_FUNC_RE.match(color.strip())
    if not m:
        return None
    return m.group(1).lower(), m.group(2).split(",")


def hex_to_channels(hex_color: str) -> NDArray[np.uint8]:
    """
    Convert ``#RGB`` or ``#RRGGBB`` to an array of 3 uint8 channels.

    Short form doubles each digit (``#f80`` → ``#ff8800``).

    Raises:
        ValueError: If the input is not a 3- or 6-digit hex color.
    """
    if not _RGB_HEX_RE.match(hex_color.strip()):
        raise ValueError(f"Expected #RGB or #RRGGBB, got {hex_color!r}")
    digits = hex_color.strip()[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return np.frombuffer(bytes.fromhex(digits), dtype=np.uint8)


def channels_to_hex(channels) -> str:
    """
    Convert 3 integer channels to lowercase ``#rrggbb``.

    Channels are clamped to [0, 255] first.
    """
    r, g, b = np.clip(np.asarray(channels, dtype=np.int64), 0, 255).tolist()
    return f"#{r:02x}{g:02x}{b:02x}"


# =============================================================================
# Codec
# =============================================================================


def to_rgba(color: str, opacity: float) -> str:
    """
    Re-express a color literal as ``rgba(...)`` with the given alpha.

    - ``rgb(...)``/``rgba(...)``: the first 3 components are copied as text
      (not re-validated); any existing alpha is replaced.
    - ``#RGB``/``#RRGGBB``: channels are decoded to 0-255 integers.
    - Anything else (named colors, hsl, 4/8-digit hex, malformed) is
      returned unchanged and the opacity is not applied.

    Args:
        color: CSS color literal
        opacity: Alpha to apply

    Returns:
        ``rgba(r, g, b, opacity)`` or the input unchanged

    Example:
        >>> to_rgba("#ff0000", 0.5)
        'rgba(255, 0, 0, 0.5)'
    """
    alpha = plain_number(opacity)

    parts = _rgb_components(color)
    if parts is not None:
        _, components = parts
        if len(components) < 3:
            return color
        r, g, b = (c.strip() for c in components[:3])
        return f"rgba({r}, {g}, {b}, {alpha})"

    if _RGB_HEX_RE.match(color.strip()):
        r, g, b = hex_to_channels(color).tolist()
        return f"rgba({r}, {g}, {b}, {alpha})"

    return color


def to_hex(color: str) -> str:
    """
    Convert a color literal to ``#rrggbb`` for a color picker.

    Hex input is returned unchanged (including 4/8-digit and uppercase
    forms). ``rgb(a)`` input is read as integers, clamped to [0, 255] and
    emitted lowercase. Anything unreadable returns ``#000000``.

    Example:
        >>> to_hex("rgb(255, 0, 0)")
        '#ff0000'
    """
    if is_hex_color(color):
        return color

    parts = _rgb_components(color)
    if parts is None:
        return "#000000"
    _, components = parts
    if len(components) < 3:
        return "#000000"

    channels = []
    for component in components[:3]:
        m = _LEADING_INT_RE.match(component)
        if not m:
            return "#000000"
        channels.append(int(m.group(1)))
    return channels_to_hex(channels)


def get_alpha(color: str) -> float:
    """
    Read the alpha channel of an ``rgba(...)`` literal.

    Only ``rgba`` carries alpha here. ``rgb(...)``, hex and every other
    format report 1. A missing or unreadable 4th component also reports 1.

    Example:
        >>> get_alpha("rgba(1,2,3,0.25)")
        0.25
    """
    parts = _rgb_components(color)
    if parts is None:
        return 1.0
    name, components = parts
    if name != "rgba" or len(components) < 4:
        return 1.0
    m = _LEADING_FLOAT_RE.match(components[3])
    if not m:
        return 1.0
    return float(m.group(1))
