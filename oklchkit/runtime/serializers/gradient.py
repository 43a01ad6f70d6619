# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
CSS gradient compositor.

Sorts a list of OKLCH stops and renders a ``linear-gradient``,
``radial-gradient`` or ``conic-gradient`` string for live previews,
clipboard export and token storage.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Union

import numpy as np

from oklchkit.convert.colorspace import oklch_to_srgb_uint8_batch, uint8_to_hex
from oklchkit.runtime.serializers.color import format_number
from oklchkit.schema import GradientStop, GradientType, OKLCHColor, sort_stops

StopLike = Union[GradientStop, Mapping]


def _coerce_stop(stop: StopLike) -> GradientStop:
    """Accept a GradientStop or the editor's flat ``{position, l, c, h}`` dict."""
    if isinstance(stop, GradientStop):
        return stop
    return GradientStop(
        position=float(stop["position"]),
        color=OKLCHColor(L=float(stop["l"]), C=float(stop["c"]), H=float(stop["h"])),
    )


def _coerce_type(gradient_type: Union[GradientType, str]) -> GradientType:
    if isinstance(gradient_type, GradientType):
        return gradient_type
    if gradient_type == GradientType.LINEAR.value:
        return GradientType.LINEAR
    if gradient_type == GradientType.RADIAL.value:
        return GradientType.RADIAL
    # Anything else renders as conic, matching the editor's select fallthrough
    return GradientType.CONIC


def build_color_stops(stops: Iterable[StopLike]) -> str:
    """Render ``"<hex> <position>%"`` per stop, ascending by position.

    The sort is stable, so stops sharing a position keep their input order.
    All stop colors convert in a single vectorized call.
    """
    ordered = sort_stops(_coerce_stop(s) for s in stops)
    if not ordered:
        return ""

    lch = np.array([s.color.to_tuple() for s in ordered], dtype=np.float64)
    hexes = uint8_to_hex(oklch_to_srgb_uint8_batch(lch))

    return ", ".join(
        f"{hex_color} {format_number(stop.position)}%"
        for hex_color, stop in zip(hexes, ordered)
    )


def build_gradient_css(
    gradient_type: Union[GradientType, str],
    angle: float,
    stops: Iterable[StopLike],
) -> str:
    """Compose a CSS gradient string.

    Args:
        gradient_type: linear, radial or conic (enum or its string value).
        angle: Angle in degrees. Not emitted for radial gradients.
        stops: GradientStop objects or ``{position, l, c, h}`` mappings,
            in any order.

    Returns:
        CSS gradient function string.

    Example::

        >>> build_gradient_css("linear", 90, [
        ...     {"position": 0, "l": 0.5, "c": 0, "h": 0},
        ...     {"position": 100, "l": 1, "c": 0, "h": 0},
        ... ])
        'linear-gradient(90deg, #636363 0%, #ffffff 100%)'
    """
    color_stops = build_color_stops(stops)
    kind = _coerce_type(gradient_type)

    # Angle is not validated: NaN renders as "NaNdeg", 400 as "400deg"
    if kind == GradientType.LINEAR:
        return f"linear-gradient({format_number(angle)}deg, {color_stops})"
    elif kind == GradientType.RADIAL:
        return f"radial-gradient(circle, {color_stops})"
    else:
        return f"conic-gradient(from {format_number(angle)}deg, {color_stops})"
