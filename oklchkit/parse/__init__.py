# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Color string parsing.

``parse_to_hex`` is total: it always returns canonical hex and never
raises. The bulk helpers operate on free text rather than single tokens.
"""

from oklchkit.parse.bulk import (
    convert_color_to_oklch,
    convert_text_to_oklch,
    extract_oklch_swatches,
)
from oklchkit.parse.css import (
    RULES,
    ParsedColor,
    ParseRule,
    hsl_to_hex,
    parse_color,
    parse_to_hex,
)

__all__ = [
    # Single-token parser
    "parse_to_hex",
    "parse_color",
    "ParsedColor",
    "ParseRule",
    "RULES",
    "hsl_to_hex",
    # Free-text conversion
    "convert_color_to_oklch",
    "convert_text_to_oklch",
    "extract_oklch_swatches",
]
