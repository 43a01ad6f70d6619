# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Palette and gradient-stop tooling built on the converter.
"""

from oklchkit.palette.harmony import PaletteConfig, generate_palette
from oklchkit.palette.stops import (
    DEFAULT_STOPS,
    StopEditorConfig,
    add_stop,
    clamp_position,
    next_stop_position,
    remove_stop,
    update_stop,
)

__all__ = [
    # Harmony palettes
    "generate_palette",
    "PaletteConfig",
    # Stop editing
    "StopEditorConfig",
    "DEFAULT_STOPS",
    "add_stop",
    "remove_stop",
    "update_stop",
    "clamp_position",
    "next_stop_position",
]
