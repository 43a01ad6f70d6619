# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Gradient stop-list editing.

The rules the gradient editor enforces while a user edits stops:
- at least ``min_stops`` stops at all times
- positions clamped to [0, max_position]
- a new stop lands ``position_step`` past the furthest existing stop

All functions return new tuples; inputs are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from oklchkit.schema import GradientStop, OKLCHColor


@dataclass(frozen=True)
class StopEditorConfig:
    """Configuration for stop-list editing."""

    min_stops: int = 2
    position_step: float = 10.0
    max_position: float = 100.0

    # Position of the first stop added to an empty list
    empty_position: float = 50.0

    # Color given to newly added stops
    new_stop_color: OKLCHColor = field(
        default_factory=lambda: OKLCHColor(L=0.6, C=0.15, H=200.0)
    )


DEFAULT_STOPS: tuple[GradientStop, ...] = (
    GradientStop(position=0.0, color=OKLCHColor(L=0.7, C=0.15, H=180.0)),
    GradientStop(position=100.0, color=OKLCHColor(L=0.5, C=0.2, H=280.0)),
)


def clamp_position(value: float, config: Optional[StopEditorConfig] = None) -> float:
    """Clamp a stop position into [0, max_position]."""
    config = config or StopEditorConfig()
    return min(config.max_position, max(0.0, float(value)))


def next_stop_position(
    stops: tuple[GradientStop, ...],
    config: Optional[StopEditorConfig] = None,
) -> float:
    """Position for a newly added stop: ``min(100, max(positions) + 10)``."""
    config = config or StopEditorConfig()
    if not stops:
        return config.empty_position
    furthest = max(s.position for s in stops)
    return min(config.max_position, furthest + config.position_step)


def add_stop(
    stops: tuple[GradientStop, ...],
    config: Optional[StopEditorConfig] = None,
) -> tuple[GradientStop, ...]:
    """Append a stop with the default color at the next free position."""
    config = config or StopEditorConfig()
    new_stop = GradientStop(
        position=next_stop_position(stops, config),
        color=config.new_stop_color,
    )
    return tuple(stops) + (new_stop,)


def remove_stop(
    stops: tuple[GradientStop, ...],
    index: int,
    config: Optional[StopEditorConfig] = None,
) -> tuple[GradientStop, ...]:
    """Remove the stop at ``index`` unless that would go below ``min_stops``.

    Out-of-range indices leave the list unchanged.
    """
    config = config or StopEditorConfig()
    stops = tuple(stops)
    if len(stops) <= config.min_stops or not 0 <= index < len(stops):
        return stops
    return stops[:index] + stops[index + 1:]


def update_stop(
    stops: tuple[GradientStop, ...],
    index: int,
    *,
    position: Optional[float] = None,
    l: Optional[float] = None,
    c: Optional[float] = None,
    h: Optional[float] = None,
    config: Optional[StopEditorConfig] = None,
) -> tuple[GradientStop, ...]:
    """Replace fields of the stop at ``index``.

    Position is clamped; L/C/H are stored as given.

    Raises:
        IndexError: If index is out of range
    """
    stops = tuple(stops)
    stop = stops[index]

    color = stop.color
    if l is not None:
        color = replace(color, L=float(l))
    if c is not None:
        color = replace(color, C=float(c))
    if h is not None:
        color = replace(color, H=float(h))

    new_position = stop.position if position is None else clamp_position(position, config)
    updated = GradientStop(position=new_position, color=color)
    return stops[:index] + (updated,) + stops[index + 1:]
