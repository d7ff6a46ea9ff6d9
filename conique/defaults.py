# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""Central place for Conique default settings."""

from conique.schema import AppState, ColorStop, GradientLayer, GradientType, Position

# Preview box
DEFAULT_PREVIEW_W: int = 300
DEFAULT_PREVIEW_H: int = 180

# Stop appended by "add stop"
NEW_STOP_COLOR: str = "#ffffff"
NEW_STOP_POS: float = 50

# Layer appended by "add layer"
NEW_LAYER_TYPE: GradientType = GradientType.CONIC
NEW_LAYER_STOPS: tuple[ColorStop, ...] = (
    ColorStop("#ff0000", 0),
    ColorStop("#0000ff", 360),
)

# Example stack shown on first load and after "reset"
DEFAULT_LAYERS: tuple[GradientLayer, ...] = (
    GradientLayer(
        id=1,
        type=GradientType.CONIC,
        from_angle=252.02,
        at=Position(x=54, y=278.75),
        stops=(
            ColorStop("#152275", -193.01),
            ColorStop("#E33B94", 18.24),
            ColorStop("#B61B6D", 31.32),
            ColorStop("#E33B94", 55.63),
            ColorStop("#152275", 85.18),
            ColorStop("#152275", 94.34),
            ColorStop("#144B8C", 110.28),
            ColorStop("#007BA7", 130.18),
            ColorStop("#007BA7", 134.69),
            ColorStop("#152275", 166.99),
            ColorStop("#E33B94", 378.24),
        ),
    ),
    GradientLayer(
        id=2,
        type=GradientType.CONIC,
        from_angle=103.86,
        at=Position(x=-4.6, y=50),
        stops=(
            ColorStop("#152275", 0),
            ColorStop("#152275", 360),
        ),
    ),
)


def default_state() -> AppState:
    """The example state the editor starts from."""
    return AppState(
        layers=DEFAULT_LAYERS,
        preview_w=DEFAULT_PREVIEW_W,
        preview_h=DEFAULT_PREVIEW_H,
        selected_layer_id=DEFAULT_LAYERS[0].id,
    )
