# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Tailwind serializer.

Formats a layer stack as a ``bg-[...]`` arbitrary-value class. Tailwind
reads ``_`` as a space inside arbitrary values, so every space becomes
``_`` and the result is a single class token.
"""

from __future__ import annotations

import re
from typing import Iterable

from conique.notation.numbers import format_number, plain_number
from conique.runtime.serializers.base import enabled_layers, stop_color
from conique.schema import GradientLayer

_COLOR_ESCAPE_RE = re.compile(r"[(),\s]+")


def escape_color(color: str) -> str:
    """Replace each run of parentheses, commas or whitespace with ``_``."""
    return _COLOR_ESCAPE_RE.sub("_", color)


def _layer_class_value(layer: GradientLayer) -> str:
    from_part = (
        f"from_{format_number(layer.from_angle)}deg_"
        if layer.from_angle is not None
        else ""
    )
    at_part = f"at_{plain_number(layer.at.x)}%_{plain_number(layer.at.y)}%"
    stop_list = ",_".join(
        f"{escape_color(stop_color(stop, layer))}_{format_number(stop.pos)}deg"
        for stop in layer.stops
    )
    return f"{layer.type.function_name}({from_part}{at_part},_{stop_list})"


def to_tailwind(layers: Iterable[GradientLayer]) -> str:
    """Serialize layers as a Tailwind ``bg-[...]`` class.

    Same traversal as ``to_css``: enabled layers only, stored stop order,
    layer opacity applied to stop colors. Layers are joined with a bare
    comma.

    Example::

        bg-[conic-gradient(from_0deg_at_50%_50%,_#ff0000_0deg,_#0000ff_360deg)]
    """
    joined = ",".join(_layer_class_value(layer) for layer in enabled_layers(layers))
    return f"bg-[{joined}]"
