# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors, gradients and swatch sets.

All types in this module are immutable (frozen dataclasses).
Numeric fields are never range-checked; only structure is validated.
"""

from oklchkit.schema.color_values import (
    FALLBACK_HEX,
    MAX_CHROMA,
    Gradient,
    GradientStop,
    GradientType,
    NamedColor,
    NamedOKLCH,
    OKLCHColor,
    PaletteType,
    RGBColor,
    SwatchSet,
    sort_stops,
)

__all__ = [
    # Constants
    "FALLBACK_HEX",
    "MAX_CHROMA",
    # Core types
    "OKLCHColor",
    "RGBColor",
    # Gradient types
    "GradientType",
    "GradientStop",
    "Gradient",
    "sort_stops",
    # Palette / storage types
    "PaletteType",
    "NamedOKLCH",
    "NamedColor",
    "SwatchSet",
]
