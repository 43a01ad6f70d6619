# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Bulk conversion of color literals in free text.

Used to migrate pasted CSS, Tailwind configs or any text containing hex
or ``rgb()`` values to canonical ``oklch(...)`` tokens, and to pull
``oklch(...)`` swatches back out of CSS.

This grammar is deliberately separate from ``parse_to_hex``: it accepts
3-digit hex shorthand and searches inside larger strings.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from oklchkit.convert.colorspace import hex_to_oklch, oklch_to_srgb_hex, srgb_to_oklch
from oklchkit.runtime.serializers.color import format_oklch
from oklchkit.schema import NamedColor

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"#([a-f\d]{6}|[a-f\d]{3})", re.IGNORECASE)
_RGB_RE = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)", re.IGNORECASE)

# Order matters: the 6-digit alternative must win over its 3-digit prefix
_LITERAL_RE = re.compile(
    r"#[a-f\d]{6}|#[a-f\d]{3}|rgba?\(\d+,\s*\d+,\s*\d+(?:,\s*[\d.]+)?\)",
    re.IGNORECASE,
)

_OKLCH_LITERAL_RE = re.compile(r"oklch\(([\d.]+)\s+([\d.]+)\s+([\d.]+)\)")


def _expand_short_hex(digits: str) -> str:
    if len(digits) == 3:
        return "".join(ch * 2 for ch in digits)
    return digits


def convert_color_to_oklch(color: str) -> Optional[str]:
    """Convert one hex or rgb(a) literal to a canonical ``oklch(...)`` string.

    Args:
        color: ``#rgb``, ``#rrggbb``, ``rgb(r, g, b)`` or ``rgba(r, g, b, a)``.

    Returns:
        ``oklch(L C H)`` string, or None if the literal is neither form.
    """
    color = color.strip()

    m = _HEX_RE.search(color)
    if m:
        return format_oklch(hex_to_oklch(_expand_short_hex(m.group(1))))

    m = _RGB_RE.search(color)
    if m:
        r, g, b = (min(255, int(v)) for v in m.groups())
        return format_oklch(srgb_to_oklch(r, g, b))

    return None


def _replace(match: re.Match) -> str:
    literal = match.group(0)
    converted = convert_color_to_oklch(literal)
    if converted is None:
        logger.debug("Left color literal unchanged: %r", literal)
        return literal
    return converted


def convert_text_to_oklch(text: str) -> str:
    """Rewrite every hex / rgb(a) literal in ``text`` as ``oklch(...)``.

    Line structure and all non-color text are preserved. Literals that
    fail to convert are left as they were.
    """
    return "\n".join(_LITERAL_RE.sub(_replace, line) for line in text.split("\n"))


def extract_oklch_swatches(css_text: str) -> tuple[NamedColor, ...]:
    """Collect every ``oklch(L C H)`` literal in ``css_text`` as named swatches.

    Swatches are named ``Color 1`` .. ``Color n`` in order of appearance.
    The ``oklch`` field keeps the literal's original numbers; ``hex`` is
    computed from them.
    """
    swatches = []
    for m in _OKLCH_LITERAL_RE.finditer(css_text):
        l, c, h = m.groups()
        try:
            hex_color = oklch_to_srgb_hex(float(l), float(c), float(h))
        except ValueError:
            logger.debug("Skipping malformed oklch literal %r", m.group(0))
            continue
        swatches.append(NamedColor(
            name=f"Color {len(swatches) + 1}",
            oklch=f"oklch({l} {c} {h})",
            hex=hex_color,
        ))
    return tuple(swatches)
