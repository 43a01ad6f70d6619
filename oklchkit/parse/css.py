# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
CSS color string parser.

Normalizes a closed set of hand-authored color syntaxes to canonical hex:

    #RRGGBB                      exactly 7 characters
    oklch(L[%] C H[ / A])        L% divided by 100, alpha discarded
    rgb(R,G,B[,A]) / rgba(...)   commas optional, alpha discarded
    hsl(H,S%,L%)                 classic comma syntax only

Anything else resolves to ``#000000``. Parsing never raises: it runs
inline while the UI derives picker values, where an exception would
break rendering. Space-separated ``hsl()``, ``lab()`` and ``color()``
are not part of the grammar.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Optional

from oklchkit.convert.colorspace import oklch_to_srgb_hex
from oklchkit.runtime.serializers.color import format_hex
from oklchkit.schema import FALLBACK_HEX

logger = logging.getLogger(__name__)


# =============================================================================
# Grammar
# =============================================================================

_HEX_RE = re.compile(r"^#[0-9a-f]{6}$", re.IGNORECASE)

_OKLCH_RE = re.compile(
    r"oklch\(([\d.]+%?)\s+([\d.]+)\s+([\d.]+)\s*(?:/\s*[\d.]+%?\s*)?\)",
    re.IGNORECASE,
)

_RGB_RE = re.compile(
    r"rgba?\(\s*(\d+)\s*,?\s*(\d+)\s*,?\s*(\d+)\s*(?:[,/]\s*[\d.]+%?\s*)?\)",
    re.IGNORECASE,
)

_HSL_RE = re.compile(
    r"hsl\(\s*(\d+)\s*,?\s*(\d+)%?\s*,?\s*(\d+)%?\s*\)",
    re.IGNORECASE,
)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _channel(x: float) -> int:
    return min(255, max(0, _round_half_up(x)))


def _to_float(token: str) -> Optional[float]:
    # "1.2.3" satisfies [\d.]+ but is not a number
    try:
        return float(token)
    except ValueError:
        return None


# =============================================================================
# Rules
# =============================================================================


def _parse_hex(value: str) -> Optional[str]:
    if len(value) != 7 or not _HEX_RE.match(value):
        return None
    return value.lower()


def _parse_oklch(value: str) -> Optional[str]:
    m = _OKLCH_RE.search(value)
    if not m:
        return None
    l_token = m.group(1)
    l = _to_float(l_token.rstrip("%"))
    c = _to_float(m.group(2))
    h = _to_float(m.group(3))
    if l is None or c is None or h is None:
        return None
    if l_token.endswith("%"):
        l = l / 100
    return oklch_to_srgb_hex(l, c, h)


def _parse_rgb(value: str) -> Optional[str]:
    m = _RGB_RE.search(value)
    if not m:
        return None
    r, g, b = (min(255, int(v)) for v in m.groups())
    return format_hex(r, g, b)


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Classic HSL helper: one channel from the hue offset ``t`` (turns)."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL to hex. ``h`` in degrees, ``s`` and ``l`` in [0, 1].

    Channels are clamped, so saturation or lightness above 100% cannot
    produce a 3-digit component.
    """
    h = h / 360
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    r = _channel(hue_to_rgb(p, q, h + 1 / 3) * 255)
    g = _channel(hue_to_rgb(p, q, h) * 255)
    b = _channel(hue_to_rgb(p, q, h - 1 / 3) * 255)
    return format_hex(r, g, b)


def _parse_hsl(value: str) -> Optional[str]:
    m = _HSL_RE.search(value)
    if not m:
        return None
    h, s, l = (int(v) for v in m.groups())
    # Out-of-range components follow CSS: hue wraps, percentages clamp
    return hsl_to_hex(h % 360, min(s, 100) / 100, min(l, 100) / 100)


@dataclass(frozen=True)
class ParseRule:
    """One alternative of the color grammar."""
    name: str
    parse: Callable[[str], Optional[str]]


# Tried in order; the first rule returning a hex wins.
RULES: tuple[ParseRule, ...] = (
    ParseRule("hex", _parse_hex),
    ParseRule("oklch", _parse_oklch),
    ParseRule("rgb", _parse_rgb),
    ParseRule("hsl", _parse_hsl),
)


# =============================================================================
# Public API
# =============================================================================


@dataclass(frozen=True)
class ParsedColor:
    """
    Result of parsing a color string.

    Attributes:
        hex: Canonical lowercase hex; ``#000000`` on fallback
        rule: Name of the matching rule, or None when the input was
              not recognized
    """
    hex: str
    rule: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.rule is None


def parse_color(value: Optional[str]) -> ParsedColor:
    """Parse a CSS color string, reporting which grammar rule matched.

    Never raises. Unrecognized, empty or non-string input yields
    ``ParsedColor(hex="#000000", rule=None)``.
    """
    if not value or not isinstance(value, str):
        return ParsedColor(hex=FALLBACK_HEX)

    trimmed = value.strip()
    if trimmed.startswith("#"):
        # A leading '#' commits to the hex rule; "#abc" does not fall through
        rules = RULES[:1]
    else:
        rules = RULES[1:]

    for rule in rules:
        result = rule.parse(trimmed)
        if result is not None:
            return ParsedColor(hex=result, rule=rule.name)

    logger.debug("Unrecognized color %r, using %s", value, FALLBACK_HEX)
    return ParsedColor(hex=FALLBACK_HEX)


def parse_to_hex(value: Optional[str]) -> str:
    """Normalize any supported CSS color string to canonical hex.

    Args:
        value: Raw token value, e.g. ``"oklch(70% 0.15 180)"``,
            ``"rgb(212, 165, 116)"``, ``"hsl(210, 50%, 40%)"``.

    Returns:
        ``#rrggbb`` in lowercase. ``#000000`` for anything unrecognized.

    Example:
        >>> parse_to_hex("oklch(0.5 0 0)")
        '#636363'
        >>> parse_to_hex("#abc")
        '#000000'
    """
    return parse_color(value).hex
