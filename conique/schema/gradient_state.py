# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Gradient editor state: canonical schema for layered CSS gradients.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same state → same CSS, same token
- Order-preserving: Stops render in stored order, never auto-sorted
- Serializable: JSON layout matches the share-URL token

Units:
- conic layers: stop positions and ``from`` are degrees
- linear / radial layers: stop positions are percent (``from`` is carried
  but ignored by consumers)
- ``at``: percent of the box on both axes

Positions are unrestricted reals. Negative and >360 degree stops are valid
and preserved.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


def _is_real(value) -> bool:
    """True for int/float values; bools are rejected."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# Stop and Position Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorStop:
    """
    A single (color, position) pair within a gradient layer.

    Attributes:
        color: CSS color literal ("#RGB", "#RRGGBB", "rgb(...)", "rgba(...)";
            hsl(a) and 4/8-digit hex are accepted from pasted CSS as-is)
        pos: Stop position. Degrees for conic layers, percent otherwise.
    """
    color: str
    pos: float

    def __post_init__(self) -> None:
        """Validate stop values."""
        if not isinstance(self.color, str):
            raise ValueError(f"Stop color must be a string, got {self.color!r}")
        if not _is_real(self.pos):
            raise ValueError(f"Stop position must be a number, got {self.pos!r}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": self.color, "pos": self.pos}

    @classmethod
    def from_dict(cls, data: dict) -> ColorStop:
        """Deserialize from dictionary."""
        return cls(color=data["color"], pos=data["pos"])


@dataclass(frozen=True, slots=True)
class Position:
    """The ``at <x>% <y>%`` anchor of a gradient, in percent."""
    x: float = 50.0
    y: float = 50.0

    def __post_init__(self) -> None:
        """Validate coordinates."""
        if not (_is_real(self.x) and _is_real(self.y)):
            raise ValueError(f"Position must be numeric, got ({self.x!r}, {self.y!r})")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> Position:
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


# =============================================================================
# Layer Types
# =============================================================================


class GradientType(Enum):
    """CSS gradient function family. Values are the keyword prefixes."""
    CONIC = "conic"
    LINEAR = "linear"
    RADIAL = "radial"

    @property
    def function_name(self) -> str:
        """CSS function name, e.g. ``conic-gradient``."""
        return f"{self.value}-gradient"


@dataclass(frozen=True, slots=True)
class GradientLayer:
    """
    One gradient function call in a stacked ``background`` value.

    Attributes:
        id: Stable identifier, unique within an AppState
        type: Gradient family (conic, linear, radial)
        from_angle: Start angle in degrees (``from`` clause). None suppresses
            the clause on output; 0 does not.
        at: Anchor position in percent
        stops: Ordered color stops. Insertion order is render order.
            May be empty or hold a single stop; the generator emits what is
            present.
        enabled: Disabled layers are skipped by the generator
        opacity: Layer opacity (0.0-1.0). Below 1 it overrides every stop's
            own alpha on output.
    """
    id: int
    type: GradientType
    from_angle: Optional[float] = 0.0
    at: Position = field(default_factory=Position)
    stops: tuple[ColorStop, ...] = ()
    enabled: bool = True
    opacity: float = 1.0

    def __post_init__(self) -> None:
        """Validate layer values."""
        if not _is_real(self.id) or not math.isfinite(self.id):
            raise ValueError(f"Layer id must be a finite number, got {self.id!r}")
        if not isinstance(self.type, GradientType):
            raise ValueError(f"Unknown gradient type: {self.type!r}")
        if self.from_angle is not None and not _is_real(self.from_angle):
            raise ValueError(f"From angle must be a number or None, got {self.from_angle!r}")
        if not isinstance(self.at, Position):
            raise ValueError(f"At must be a Position, got {self.at!r}")
        if not all(isinstance(s, ColorStop) for s in self.stops):
            raise ValueError("Stops must be ColorStop values")
        if not isinstance(self.enabled, bool):
            raise ValueError(f"Enabled must be a bool, got {self.enabled!r}")
        if not _is_real(self.opacity) or not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"Opacity must be 0-1, got {self.opacity!r}")

    def to_dict(self) -> dict:
        """Serialize to dictionary (``from_angle`` is stored as ``from``)."""
        return {
            "id": self.id,
            "type": self.type.value,
            "from": self.from_angle,
            "at": self.at.to_dict(),
            "stops": [s.to_dict() for s in self.stops],
            "enabled": self.enabled,
            "opacity": self.opacity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GradientLayer:
        """
        Deserialize from dictionary.

        ``id`` and ``type`` are required. Missing optional fields take
        their defaults; an explicit ``"from": null`` stays None.
        """
        at = data.get("at")
        return cls(
            id=data["id"],
            type=GradientType(data["type"]),
            from_angle=data.get("from", 0.0),
            at=Position.from_dict(at) if at is not None else Position(),
            stops=tuple(ColorStop.from_dict(s) for s in data.get("stops", ())),
            enabled=data.get("enabled", True),
            opacity=data.get("opacity", 1.0),
        )


# =============================================================================
# Top-Level Editor State
# =============================================================================


@dataclass(frozen=True, slots=True)
class AppState:
    """
    Complete editor state: the layer stack plus preview box and selection.

    This is the value the share-URL token carries. The surrounding UI holds
    one reference and replaces it wholesale after every action.

    Attributes:
        layers: Ordered layer stack (first layer paints on top)
        preview_w: Preview box width in px
        preview_h: Preview box height in px
        selected_layer_id: Id of the layer being edited. May dangle after
            external edits; use ``selected_layer`` to resolve it.

    Usage:
        state = AppState(
            layers=(
                GradientLayer(
                    id=1,
                    type=GradientType.CONIC,
                    stops=(ColorStop("#ff0000", 0), ColorStop("#0000ff", 360)),
                ),
            ),
            preview_w=300,
            preview_h=180,
            selected_layer_id=1,
        )
        state.to_css()
    """
    layers: tuple[GradientLayer, ...]
    preview_w: int
    preview_h: int
    selected_layer_id: int

    def __post_init__(self) -> None:
        """Validate state values."""
        if not all(isinstance(layer, GradientLayer) for layer in self.layers):
            raise ValueError("Layers must be GradientLayer values")
        for name in ("preview_w", "preview_h", "selected_layer_id"):
            value = getattr(self, name)
            if not _is_real(value):
                raise ValueError(f"{name} must be a number, got {value!r}")

    @property
    def selected_layer(self) -> Optional[GradientLayer]:
        """The selected layer, else the first layer, else None."""
        for layer in self.layers:
            if layer.id == self.selected_layer_id:
                return layer
        return self.layers[0] if self.layers else None

    def get_layer(self, layer_id: int) -> GradientLayer:
        """Get a specific layer by id."""
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        raise KeyError(f"No layer with id {layer_id}")

    def to_dict(self) -> dict:
        """Serialize to dictionary using the share-token key names."""
        return {
            "layers": [layer.to_dict() for layer in self.layers],
            "previewW": self.preview_w,
            "previewH": self.preview_h,
            "selectedLayerId": self.selected_layer_id,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string (compact unless ``indent`` is given)."""
        if indent is None:
            return json.dumps(self.to_dict(), separators=(",", ":"))
        return json.dumps(self.to_dict(), indent=indent)

    def to_css(self) -> str:
        """Canonical ``background:`` declaration for the enabled layers."""
        # Import here to avoid circular imports
        from conique.runtime.serializers.css import to_css
        return to_css(self.layers)

    def to_tailwind(self) -> str:
        """Tailwind ``bg-[...]`` arbitrary-value class for the enabled layers."""
        # Import here to avoid circular imports
        from conique.runtime.serializers.tailwind import to_tailwind
        return to_tailwind(self.layers)

    @classmethod
    def from_dict(cls, data: dict) -> AppState:
        """Deserialize from dictionary."""
        return cls(
            layers=tuple(GradientLayer.from_dict(layer) for layer in data["layers"]),
            preview_w=data["previewW"],
            preview_h=data["previewH"],
            selected_layer_id=data["selectedLayerId"],
        )

    @classmethod
    def from_json(cls, json_str: str) -> AppState:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
