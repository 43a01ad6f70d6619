# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Harmony-based palette generation in OKLCH.

Because OKLCH is perceptually uniform, hue rotations at fixed L and C
give colors of matching visual weight, and lightness ramps at fixed
hue give evenly spaced shades.

Rules (n = count):
- monochromatic: n shades, L from 0.2 to 1.0
- analogous: n hues spread evenly across ±30°
- complementary: base, +180°, then desaturated tints
- triadic: base, +120°, +240°, then desaturated tints
- split-complementary: base, +150°, +210°, then desaturated tints
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from oklchkit.schema import NamedOKLCH, OKLCHColor, PaletteType


@dataclass(frozen=True)
class PaletteConfig:
    """Configuration for palette generation."""

    # Monochromatic lightness ramp: L = start + span / (n - 1) * i
    shade_l_start: float = 0.2
    shade_l_span: float = 0.8

    # Analogous hue spread on each side of the base hue (degrees)
    analogous_spread: float = 30.0

    # Tint lightness ramp for the colors after the harmony anchors
    tint_l_start: float = 0.3
    tint_l_span: float = 0.6

    # Chroma multiplier applied to tints
    complementary_tint_chroma: float = 0.5
    triadic_tint_chroma: float = 0.6
    split_tint_chroma: float = 0.5

    # Hue offsets of the split-complementary pair
    split_offsets: tuple[float, float] = (150.0, 210.0)


def _rotate(h: float, degrees: float) -> float:
    return (h + degrees + 360) % 360


def _tints(
    base: OKLCHColor,
    anchors: int,
    count: int,
    chroma_factor: float,
    config: PaletteConfig,
) -> list[NamedOKLCH]:
    """Lightness-ramped, desaturated tints filling slots after the anchors."""
    tints = []
    remaining = count - anchors
    for k in range(max(remaining, 0)):
        step = config.tint_l_span / remaining
        tints.append(NamedOKLCH(
            name=f"Tint {k + 1}",
            color=OKLCHColor(
                L=config.tint_l_start + step * k,
                C=base.C * chroma_factor,
                H=base.H,
            ),
        ))
    return tints


def _monochromatic(base: OKLCHColor, count: int, config: PaletteConfig) -> list[NamedOKLCH]:
    if count == 1:
        return [NamedOKLCH(name="Shade 1", color=base)]
    step = config.shade_l_span / (count - 1)
    return [
        NamedOKLCH(
            name=f"Shade {i + 1}",
            color=OKLCHColor(L=config.shade_l_start + step * i, C=base.C, H=base.H),
        )
        for i in range(count)
    ]


def _analogous(base: OKLCHColor, count: int, config: PaletteConfig) -> list[NamedOKLCH]:
    if count == 1:
        return [NamedOKLCH(name="Color 1", color=base)]
    spread = config.analogous_spread
    step = spread * 2 / (count - 1)
    return [
        NamedOKLCH(
            name=f"Color {i + 1}",
            color=OKLCHColor(L=base.L, C=base.C, H=_rotate(base.H, -spread + step * i)),
        )
        for i in range(count)
    ]


def _anchored(
    base: OKLCHColor,
    count: int,
    anchors: list[tuple[str, float]],
    chroma_factor: float,
    config: PaletteConfig,
) -> list[NamedOKLCH]:
    palette = [
        NamedOKLCH(name=name, color=OKLCHColor(L=base.L, C=base.C, H=_rotate(base.H, offset)))
        for name, offset in anchors
    ]
    return palette + _tints(base, len(anchors), count, chroma_factor, config)


def generate_palette(
    base: OKLCHColor,
    palette_type: Union[PaletteType, str] = PaletteType.MONOCHROMATIC,
    count: int = 5,
    config: Optional[PaletteConfig] = None,
) -> tuple[NamedOKLCH, ...]:
    """
    Derive a named palette from a base color.

    Args:
        base: Base OKLCH color
        palette_type: Harmony rule (enum or its string value)
        count: Requested palette size. Harmony anchors are always emitted,
            so complementary returns at least 2 colors and triadic /
            split-complementary at least 3.
        config: Ramp and offset tunables (defaults match the editor UI)

    Returns:
        Tuple of NamedOKLCH in display order

    Raises:
        ValueError: If palette_type is not a known harmony rule
    """
    config = config or PaletteConfig()
    kind = PaletteType(palette_type)
    count = max(int(count), 1)

    if kind == PaletteType.MONOCHROMATIC:
        palette = _monochromatic(base, count, config)
    elif kind == PaletteType.ANALOGOUS:
        palette = _analogous(base, count, config)
    elif kind == PaletteType.COMPLEMENTARY:
        palette = _anchored(
            base, count,
            [("Base", 0.0), ("Complement", 180.0)],
            config.complementary_tint_chroma, config,
        )
    elif kind == PaletteType.TRIADIC:
        palette = _anchored(
            base, count,
            [("Base", 0.0), ("Triadic 1", 120.0), ("Triadic 2", 240.0)],
            config.triadic_tint_chroma, config,
        )
    else:
        first, second = config.split_offsets
        palette = _anchored(
            base, count,
            [("Base", 0.0), ("Split 1", first), ("Split 2", second)],
            config.split_tint_chroma, config,
        )

    return tuple(palette)
