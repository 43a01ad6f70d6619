# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Serializers from engine values to CSS and storage strings.

All serializers are pure; the same input always yields the same string.
"""

from oklchkit.runtime.serializers.color import format_hex, format_number, format_oklch
from oklchkit.runtime.serializers.gradient import build_color_stops, build_gradient_css
from oklchkit.runtime.serializers.tokens import (
    gradient_to_swatch_set,
    named_color,
    picker_hex_to_token,
    to_clipboard_text,
    to_css_variables,
    to_swatch_set,
    token_to_picker_hex,
)

__all__ = [
    # Color formatting
    "format_oklch",
    "format_hex",
    "format_number",
    # Gradients
    "build_gradient_css",
    "build_color_stops",
    # Tokens and swatch sets
    "token_to_picker_hex",
    "picker_hex_to_token",
    "named_color",
    "to_swatch_set",
    "gradient_to_swatch_set",
    "to_clipboard_text",
    "to_css_variables",
]
