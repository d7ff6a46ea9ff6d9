# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Number formatting for emitted CSS.

Two renderings are used:
- ``format_number``: fixed two-decimal rounding with a bare ``.00`` suffix
  dropped. Applied to stop positions and ``from`` angles.
- ``plain_number``: shortest round-trip text laid out the way JavaScript
  prints numbers (``1e-7``, ``1e+21``, ``0.00001``). Applied to ``at``
  coordinates and opacity, which are emitted unrounded.

Both match what a browser produces for the same value, so CSS generated
here and CSS generated by the web editor compare equal as strings.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

_CENTS = Decimal("0.01")
# Wide enough for any finite double plus two decimals.
_QUANTIZE_CONTEXT = Context(prec=400)

# Magnitude from which toFixed falls back to exponent notation
_FIXED_LIMIT = 1e21


def _non_finite(n: float) -> Optional[str]:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "Infinity" if n > 0 else "-Infinity"
    return None


def _js_float_text(n: float) -> str:
    """
    Lay out the shortest round-trip digits of a finite float as
    ECMAScript ``Number.prototype.toString`` does.

    Positional notation is used while the decimal point sits between
    6 places left of the first digit and 21 places right of it;
    exponent notation (``1e-7``, ``1.5e+21``) otherwise.
    """
    if n == 0:
        return "0"
    _, digit_tuple, exponent = Decimal(repr(abs(n))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # Position of the decimal point relative to the first digit
    point = exponent + k

    if k <= point <= 21:
        body = digits + "0" * (point - k)
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        e = point - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return "-" + body if n < 0 else body


def format_number(n: Optional[float]) -> str:
    """
    Round to 2 decimals and drop a ``.00`` suffix.

    Only the literal ``.00`` is stripped: ``5.1`` renders as ``5.10``.
    Rounding works on the exact binary value with ties away from zero
    (``0.125`` → ``0.13``, ``1.005`` → ``1.00`` → ``1``).

    Args:
        n: Value to format. None renders as ``"0"``.

    Returns:
        Formatted number text. Magnitudes of 1e21 and above use
        exponent notation, as ``toFixed`` does.
    """
    if n is None:
        return "0"
    n = float(n)
    special = _non_finite(n)
    if special is not None:
        return special
    if abs(n) >= _FIXED_LIMIT:
        return _js_float_text(n)
    if n == 0:
        n = 0.0  # -0.0 formats as "0"
    text = str(
        Decimal(n).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_QUANTIZE_CONTEXT)
    )
    if text.endswith(".00"):
        text = text[:-3]
    return text


def plain_number(n: float) -> str:
    """Render a number as JavaScript string interpolation would."""
    if isinstance(n, bool):
        return "true" if n else "false"
    if isinstance(n, int):
        return str(n)
    n = float(n)
    special = _non_finite(n)
    if special is not None:
        return special
    return _js_float_text(n)
