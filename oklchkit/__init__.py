# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Oklchkit -- OKLCH color engine for design tokens and CSS gradients.

Converts between OKLCH and sRGB, normalizes hand-authored CSS color
strings to hex, renders canonical ``oklch(...)`` tokens and composes
CSS gradients. Every function is pure and never holds state.

Quick start::

    from oklchkit import oklch_to_srgb_hex, parse_to_hex, build_gradient_css

    oklch_to_srgb_hex(0.5, 0, 0)            # '#636363'
    parse_to_hex("hsl(210, 50%, 40%)")      # '#336699'
    build_gradient_css("linear", 90, stops) # 'linear-gradient(90deg, ...)'
"""

from __future__ import annotations

__version__ = "1.0.0"

from oklchkit.schema import (
    FALLBACK_HEX,
    Gradient,
    GradientStop,
    GradientType,
    NamedColor,
    OKLCHColor,
    PaletteType,
    RGBColor,
    SwatchSet,
)
from oklchkit.convert import (
    hex_to_oklch,
    oklch_to_srgb_hex,
    oklch_to_srgb_uint8,
    srgb_to_oklch,
)
from oklchkit.parse import (
    convert_text_to_oklch,
    parse_color,
    parse_to_hex,
)
from oklchkit.runtime import (
    build_gradient_css,
    format_hex,
    format_oklch,
    picker_hex_to_token,
    token_to_picker_hex,
)
from oklchkit.palette import generate_palette

__all__ = [
    # Core API
    "oklch_to_srgb_hex",
    "oklch_to_srgb_uint8",
    "srgb_to_oklch",
    "hex_to_oklch",
    "parse_to_hex",
    "parse_color",
    "format_oklch",
    "format_hex",
    "build_gradient_css",
    # Token and palette helpers
    "token_to_picker_hex",
    "picker_hex_to_token",
    "convert_text_to_oklch",
    "generate_palette",
    # Types (commonly needed)
    "OKLCHColor",
    "RGBColor",
    "GradientType",
    "GradientStop",
    "Gradient",
    "PaletteType",
    "NamedColor",
    "SwatchSet",
    "FALLBACK_HEX",
    # Version
    "__version__",
]
