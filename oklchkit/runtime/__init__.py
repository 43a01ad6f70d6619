# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Output runtime for Oklchkit.

Serialization of engine values into the strings the host UI consumes:

1. Canonical colors -- ``oklch(L C H)`` and ``#rrggbb``
2. Gradients -- ``linear-gradient`` / ``radial-gradient`` / ``conic-gradient``
3. Tokens -- picker round trips, swatch-set payloads, CSS variables
"""

from oklchkit.runtime.serializers import (
    build_color_stops,
    build_gradient_css,
    format_hex,
    format_number,
    format_oklch,
    gradient_to_swatch_set,
    named_color,
    picker_hex_to_token,
    to_clipboard_text,
    to_css_variables,
    to_swatch_set,
    token_to_picker_hex,
)

__all__ = [
    "format_oklch",
    "format_hex",
    "format_number",
    "build_gradient_css",
    "build_color_stops",
    "token_to_picker_hex",
    "picker_hex_to_token",
    "named_color",
    "to_swatch_set",
    "gradient_to_swatch_set",
    "to_clipboard_text",
    "to_css_variables",
]
