# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
CSS serializer.

Formats a layer stack as a single ``background:`` declaration. Output is a
pure function of the layers: same layers, same string.
"""

from __future__ import annotations

from typing import Iterable

from conique.notation.numbers import format_number, plain_number
from conique.runtime.serializers.base import enabled_layers, stop_color
from conique.schema import AppState, GradientLayer


def _layer_css(layer: GradientLayer) -> str:
    from_part = (
        f"from {format_number(layer.from_angle)}deg "
        if layer.from_angle is not None
        else ""
    )
    at_part = f"at {plain_number(layer.at.x)}% {plain_number(layer.at.y)}%"
    # Stop positions always carry ``deg``, linear and radial layers included
    stop_list = ", ".join(
        f"{stop_color(stop, layer)} {format_number(stop.pos)}deg"
        for stop in layer.stops
    )
    return f"{layer.type.function_name}({from_part}{at_part}, {stop_list})"


def to_css(layers: Iterable[GradientLayer]) -> str:
    """Serialize layers as a CSS ``background`` declaration.

    Disabled layers are skipped. Stops render in stored order.

    Args:
        layers: Layer stack, top layer first.

    Returns:
        Declaration string, one gradient per line.

    Example::

        background: conic-gradient(from 0deg at 50% 50%, #ff0000 0deg, #0000ff 360deg),
        linear-gradient(at 0% 0%, #fff 0deg, #000 100deg);
    """
    joined = ",\n".join(_layer_css(layer) for layer in enabled_layers(layers))
    return f"background: {joined};"


def to_css_with_size(state: AppState) -> str:
    """CSS declaration preceded by a comment naming the preview size."""
    return (
        f"/* {plain_number(state.preview_w)}px × {plain_number(state.preview_h)}px */\n"
        f"{to_css(state.layers)}"
    )
