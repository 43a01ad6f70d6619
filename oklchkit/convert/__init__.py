# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
OKLCH ↔ sRGB conversion.

The single shared converter used by the parser, formatter and gradient
compositor. All operations are pure and deterministic.
"""

from oklchkit.convert.colorspace import (
    hex_to_oklch,
    hex_to_rgb,
    oklch_to_srgb_hex,
    oklch_to_srgb_uint8,
    oklch_to_srgb_uint8_batch,
    srgb_to_oklch,
    srgb_uint8_to_oklch_batch,
    uint8_to_hex,
)

__all__ = [
    "oklch_to_srgb_hex",
    "oklch_to_srgb_uint8",
    "srgb_to_oklch",
    "hex_to_oklch",
    "hex_to_rgb",
    "oklch_to_srgb_uint8_batch",
    "srgb_uint8_to_oklch_batch",
    "uint8_to_hex",
]
