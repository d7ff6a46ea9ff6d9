# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Gradient extraction from pasted CSS.

This is the import path of the editor: text copied from a design tool or a
stylesheet goes in, gradient layers come out.

Pipeline:
    1. Collapse whitespace and narrow to a ``background:`` value if present
    2. Tokenize with tinycss2 (nested parentheses come back as blocks)
    3. Walk the component tree for conic/linear/radial gradient calls
    4. Read stops, ``from <angle>deg`` and ``at <x>% <y>%`` from each call

Unpositioned stops are spaced by a flat step (45 by default) from the
previous stop rather than distributed evenly the way browsers do.
"""

from __future__ import annotations

import itertools
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

import tinycss2

from conique.schema import ColorStop, GradientLayer, GradientType, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseConfig:
    """Defaults applied while importing gradients."""

    # Added to the previous stop's position for a stop without one
    unpositioned_step: float = 45.0

    # Padding for calls with fewer than two readable stops.
    # The end stop sits at 360 (conic) or 100 (linear/radial).
    fallback_start: ColorStop = field(default_factory=lambda: ColorStop("#ff0000", 0.0))
    fallback_end_color: str = "#0000ff"

    # Used when the call has no ``at``/``from`` clause
    default_at: Position = field(default_factory=Position)
    default_from: float = 0.0


_WHITESPACE_RE = re.compile(r"\s+")
_BACKGROUND_RE = re.compile(r"background\s*:\s*([^;]+)", re.IGNORECASE)

_GRADIENT_FUNCTIONS = {t.function_name: t for t in GradientType}
_COLOR_FUNCTIONS = frozenset({"rgb", "rgba", "hsl", "hsla"})
_HEX_DIGITS_RE = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_NUMERIC_TOKENS = frozenset({"number", "percentage", "dimension"})
_INSIGNIFICANT = frozenset({"whitespace", "comment"})
_BLOCKS = frozenset({"() block", "[] block", "{} block"})


# =============================================================================
# Gradient Call Discovery
# =============================================================================


def _gradient_type(name: str) -> Optional[GradientType]:
    """Map a (lowercased) function name to its gradient type.

    Prefixed variants such as ``repeating-linear-gradient`` and
    ``-webkit-linear-gradient`` resolve to the base family.
    """
    for function_name, gradient_type in _GRADIENT_FUNCTIONS.items():
        if name == function_name or name.endswith("-" + function_name):
            return gradient_type
    return None


def _iter_gradient_calls(nodes: Iterable) -> Iterator[tuple[GradientType, list]]:
    """
    Yield ``(type, argument tokens)`` for every gradient call, in order.

    Matches never overlap: the arguments of a gradient call are not
    searched again. Other functions and blocks are searched depth-first
    with an explicit stack; nesting depth is unbounded.
    """
    # (sibling list, index of the next node to visit)
    stack = [(list(nodes), 0)]
    while stack:
        siblings, i = stack.pop()
        if i >= len(siblings):
            continue
        node = siblings[i]
        resume = i + 1
        nested = None
        if node.type == "function":
            gradient_type = _gradient_type(node.lower_name)
            if gradient_type is not None:
                yield gradient_type, node.arguments
            else:
                nested = node.arguments
        elif node.type == "ident":
            # ``linear-gradient (...)``: tinycss2 splits the name from its block
            gradient_type = _gradient_type(node.lower_value)
            j = i + 1
            while j < len(siblings) and siblings[j].type in _INSIGNIFICANT:
                j += 1
            if (
                gradient_type is not None
                and j < len(siblings)
                and siblings[j].type == "() block"
            ):
                yield gradient_type, siblings[j].content
                resume = j + 1
        elif node.type in _BLOCKS:
            nested = node.content
        stack.append((siblings, resume))
        if nested is not None:
            stack.append((list(nested), 0))


# =============================================================================
# Argument Reading
# =============================================================================


def _flatten(nodes: Iterable) -> Iterator:
    """Significant argument tokens, with non-color nested calls inlined."""
    stack = [iter(nodes)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
        elif node.type in _INSIGNIFICANT:
            continue
        elif node.type == "function" and node.lower_name not in _COLOR_FUNCTIONS:
            stack.append(iter(node.arguments))
        elif node.type in ("() block", "[] block"):
            stack.append(iter(node.content))
        else:
            yield node


def _color_literal(token) -> Optional[str]:
    """Source text of a color token, or None if it is not one."""
    if token.type == "hash" and _HEX_DIGITS_RE.match(token.value):
        return "#" + token.value
    if token.type == "function" and token.lower_name in _COLOR_FUNCTIONS:
        return tinycss2.serialize([token])
    return None


def _stop_position(token, gradient_type: GradientType) -> Optional[float]:
    """Position carried by a numeric token following a color.

    Conic percentages become degrees (100% = 360deg). Every other unit,
    or no unit, keeps the raw number.
    """
    if token is None or token.type not in _NUMERIC_TOKENS:
        return None
    value = float(token.value)
    if token.type == "percentage" and gradient_type is GradientType.CONIC:
        return value * 3.6
    return value


def _read_stops(
    tokens: list,
    gradient_type: GradientType,
    config: ParseConfig,
) -> list[ColorStop]:
    stops: list[ColorStop] = []
    current_pos = 0.0
    i = 0
    while i < len(tokens):
        color = _color_literal(tokens[i])
        if color is None:
            i += 1
            continue
        following = tokens[i + 1] if i + 1 < len(tokens) else None
        pos = _stop_position(following, gradient_type)
        if pos is None:
            pos = current_pos
        else:
            i += 1
        stops.append(ColorStop(color=color, pos=pos))
        current_pos = pos + config.unpositioned_step
        i += 1
    return stops


def _read_from(tokens: list, config: ParseConfig) -> float:
    """First ``from <number>deg`` clause, else the configured default."""
    for token, following in zip(tokens, tokens[1:]):
        if (
            token.type == "ident"
            and token.lower_value == "from"
            and following.type == "dimension"
            and following.lower_unit == "deg"
        ):
            return float(following.value)
    return config.default_from


def _read_at(tokens: list, config: ParseConfig) -> Position:
    """First ``at <x>% <y>%`` clause, else the configured default."""
    for token, x, y in zip(tokens, tokens[1:], tokens[2:]):
        if (
            token.type == "ident"
            and token.lower_value == "at"
            and x.type == "percentage"
            and y.type == "percentage"
        ):
            return Position(x=float(x.value), y=float(y.value))
    return config.default_at


def _build_layer(
    layer_id: int,
    gradient_type: GradientType,
    arguments: list,
    config: ParseConfig,
) -> GradientLayer:
    tokens = list(_flatten(arguments))
    stops = _read_stops(tokens, gradient_type, config)

    end_pos = 360.0 if gradient_type is GradientType.CONIC else 100.0
    fallback_end = ColorStop(config.fallback_end_color, end_pos)
    if not stops:
        stops = [config.fallback_start, fallback_end]
    elif len(stops) == 1:
        stops.append(fallback_end)

    return GradientLayer(
        id=layer_id,
        type=gradient_type,
        from_angle=_read_from(tokens, config),
        at=_read_at(tokens, config),
        stops=tuple(stops),
        enabled=True,
        opacity=1.0,
    )


# =============================================================================
# Public API
# =============================================================================


def find_gradient_text(css_text: str) -> str:
    """
    Normalize pasted text and narrow it to the part holding gradients.

    Whitespace runs collapse to one space. If a ``background:``
    declaration is present, only its value (up to the first ``;``) is kept.
    """
    text = _WHITESPACE_RE.sub(" ", css_text).strip()
    m = _BACKGROUND_RE.search(text)
    return m.group(1) if m else text


def parse_gradients(
    css_text: str,
    *,
    ids: Optional[Iterable[int]] = None,
    config: Optional[ParseConfig] = None,
) -> tuple[GradientLayer, ...]:
    """
    Extract gradient layers from arbitrary CSS text.

    Accepts a full rule, a declaration, a bare value, or text copied from a
    design tool. Layers come back in order of appearance, each enabled at
    full opacity (CSS carries neither concept). Calls with fewer than two
    readable stops are padded with red→blue defaults.

    Args:
        css_text: Pasted text
        ids: Source of layer ids (e.g. ``LayerIds``). Defaults to a fresh
            counter starting at 1.
        config: Import defaults (uses ParseConfig() if None)

    Returns:
        Parsed layers. An empty tuple means no gradient was found; the
        caller should leave its state untouched.

    Example:
        >>> layers = parse_gradients(
        ...     "background: conic-gradient(from 10deg at 20% 30%, "
        ...     "#ff0000 0deg, #0000ff 360deg);"
        ... )
        >>> layers[0].from_angle, layers[0].at
        (10.0, Position(x=20.0, y=30.0))
    """
    if not isinstance(css_text, str) or not css_text.strip():
        logger.debug("Nothing to parse")
        return ()

    config = config or ParseConfig()
    id_source = iter(ids) if ids is not None else itertools.count(1)

    nodes = tinycss2.parse_component_value_list(
        find_gradient_text(css_text), skip_comments=True
    )
    calls = list(_iter_gradient_calls(nodes))
    if not calls:
        logger.debug("No gradient functions found in %d chars of text", len(css_text))
        return ()

    try:
        layers = tuple(
            _build_layer(next(id_source), gradient_type, arguments, config)
            for gradient_type, arguments in calls
        )
    except RecursionError:
        # tinycss2.serialize recurses into a color function's nested blocks
        logger.debug("Color function nested too deeply; treated as no gradients")
        return ()
    logger.debug(
        "Parsed %d gradient layer(s): %s",
        len(layers),
        ", ".join(layer.type.value for layer in layers),
    )
    return layers
