# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
High-level edits on AppState reused across UIs.

Every action takes the current state and returns a new one; the input is
never modified. Actions that cannot apply (unknown layer id, stop index
out of range, removing the last layer) return the input state unchanged,
so ``new is state`` tells the caller nothing happened.

Layer ids come from an explicit ``LayerIds`` allocator owned by the
caller, never from the clock.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, Iterator, Optional

from conique.defaults import (
    NEW_LAYER_STOPS,
    NEW_LAYER_TYPE,
    NEW_STOP_COLOR,
    NEW_STOP_POS,
    default_state,
)
from conique.notation.parse import ParseConfig, parse_gradients
from conique.schema import AppState, ColorStop, GradientLayer, Position

logger = logging.getLogger(__name__)

NO_GRADIENTS_MESSAGE = (
    "No valid gradients found in the pasted CSS. Please paste CSS containing "
    "conic-gradient, linear-gradient, or radial-gradient."
)


class LayerIds:
    """Monotonic source of layer ids.

    Iterating yields consecutive integers, so an instance can be handed
    straight to ``parse_gradients(ids=...)``.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    @classmethod
    def for_state(cls, state: AppState) -> LayerIds:
        """Allocator whose first id is above every id in ``state``."""
        highest = max((int(layer.id) for layer in state.layers), default=0)
        return cls(highest + 1)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        value = self._next
        self._next += 1
        return value


def _map_layer(
    state: AppState,
    layer_id: int,
    edit: Callable[[GradientLayer], GradientLayer],
) -> AppState:
    """Apply ``edit`` to the layer with ``layer_id``; unchanged if absent."""
    found = False
    layers = []
    for layer in state.layers:
        if layer.id == layer_id:
            layer = edit(layer)
            found = True
        layers.append(layer)
    if not found:
        logger.debug("No layer with id %s, state unchanged", layer_id)
        return state
    return replace(state, layers=tuple(layers))


# =============================================================================
# Layers
# =============================================================================


def select_layer(state: AppState, layer_id: int) -> AppState:
    """Mark a layer as the one being edited."""
    return replace(state, selected_layer_id=layer_id)


def update_layer(state: AppState, layer_id: int, **patch) -> AppState:
    """Patch fields of one layer, e.g. ``update_layer(s, 1, opacity=0.5)``."""
    logger.debug("Update layer %s: %s", layer_id, sorted(patch))
    return _map_layer(state, layer_id, lambda layer: replace(layer, **patch))


def add_layer(state: AppState, ids: Iterable[int]) -> AppState:
    """Append a default conic layer and select it."""
    layer_id = next(iter(ids))
    layer = GradientLayer(
        id=layer_id,
        type=NEW_LAYER_TYPE,
        from_angle=0.0,
        at=Position(),
        stops=NEW_LAYER_STOPS,
    )
    logger.debug("Added layer %s", layer_id)
    return replace(state, layers=state.layers + (layer,), selected_layer_id=layer_id)


def remove_layer(state: AppState, layer_id: int) -> AppState:
    """Remove a layer. The last remaining layer cannot be removed.

    If the removed layer was selected, the first remaining layer becomes
    selected.
    """
    if len(state.layers) <= 1:
        return state
    layers = tuple(layer for layer in state.layers if layer.id != layer_id)
    if len(layers) == len(state.layers):
        return state
    selected = state.selected_layer_id
    if selected == layer_id:
        selected = layers[0].id
    logger.debug("Removed layer %s", layer_id)
    return replace(state, layers=layers, selected_layer_id=selected)


# =============================================================================
# Stops
# =============================================================================


def update_stop(state: AppState, layer_id: int, index: int, **patch) -> AppState:
    """Patch one stop (``color`` and/or ``pos``) of a layer."""

    def edit(layer: GradientLayer) -> GradientLayer:
        if not 0 <= index < len(layer.stops):
            return layer
        stops = list(layer.stops)
        stops[index] = replace(stops[index], **patch)
        return replace(layer, stops=tuple(stops))

    return _map_layer(state, layer_id, edit)


def add_stop(state: AppState, layer_id: int) -> AppState:
    """Append a white stop at 50 to a layer."""
    stop = ColorStop(NEW_STOP_COLOR, NEW_STOP_POS)
    return _map_layer(
        state, layer_id, lambda layer: replace(layer, stops=layer.stops + (stop,))
    )


def remove_stop(state: AppState, layer_id: int, index: int) -> AppState:
    """Remove one stop by index. A layer may be left with fewer than 2 stops."""

    def edit(layer: GradientLayer) -> GradientLayer:
        if not 0 <= index < len(layer.stops):
            return layer
        return replace(layer, stops=layer.stops[:index] + layer.stops[index + 1:])

    return _map_layer(state, layer_id, edit)


def sort_stops(state: AppState, layer_id: int) -> AppState:
    """Order a layer's stops by position. Equal positions keep their order."""
    return _map_layer(
        state,
        layer_id,
        lambda layer: replace(
            layer, stops=tuple(sorted(layer.stops, key=lambda s: s.pos))
        ),
    )


# =============================================================================
# Whole State
# =============================================================================


def set_preview_size(state: AppState, width: int, height: int) -> AppState:
    """Resize the preview box (each side at least 1px)."""
    return replace(state, preview_w=max(int(width), 1), preview_h=max(int(height), 1))


def import_css(
    state: AppState,
    css_text: str,
    ids: Optional[Iterable[int]] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Optional[AppState]:
    """Replace all layers with the gradients found in pasted CSS.

    Args:
        state: Current state
        css_text: Pasted text
        ids: Layer id source; defaults to ``LayerIds.for_state(state)``
        config: Import defaults passed to the parser

    Returns:
        New state with the first imported layer selected, or None when the
        text holds no gradient. Show ``NO_GRADIENTS_MESSAGE`` and keep the
        current state in that case.
    """
    if ids is None:
        ids = LayerIds.for_state(state)
    layers = parse_gradients(css_text, ids=ids, config=config)
    if not layers:
        logger.info("Import found no gradients; state unchanged")
        return None
    logger.debug("Imported %d layer(s)", len(layers))
    return replace(state, layers=layers, selected_layer_id=layers[0].id)


def reset() -> AppState:
    """Back to the example state."""
    return default_state()
