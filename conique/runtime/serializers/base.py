# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""Shared layer traversal for the CSS and Tailwind serializers."""

from __future__ import annotations

from typing import Iterable

from conique.notation.colorcodec import to_rgba
from conique.schema import ColorStop, GradientLayer


def enabled_layers(layers: Iterable[GradientLayer]) -> list[GradientLayer]:
    """Layers that contribute to output, in stack order."""
    return [layer for layer in layers if layer.enabled]


def stop_color(stop: ColorStop, layer: GradientLayer) -> str:
    """Color text for a stop, with layer opacity applied.

    Below full opacity the layer alpha replaces the stop's own alpha.
    """
    if layer.opacity < 1:
        return to_rgba(stop.color, layer.opacity)
    return stop.color
