# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Canonical color string formatting.

The precision here is a storage contract: tokens are diffed as strings,
so ``oklch(...)`` always carries 3 decimals for L and C and 1 for H.
Ties round half up on the exact binary value of the float, the way the
host UI's ``toFixed`` does, so the same color always stores the same token.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Union

from oklchkit.schema import OKLCHColor

OKLCHLike = Union[OKLCHColor, tuple[float, float, float]]

# Enough digits for any finite double at 3 decimals
_FIXED_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _fixed(value: float, digits: int) -> str:
    value = float(value)
    if not math.isfinite(value):
        return format_number(value)
    # -0.0 would render as "-0.000"
    exact = Decimal(value + 0.0)
    rounded = exact.quantize(Decimal(1).scaleb(-digits), context=_FIXED_CONTEXT)
    return format(rounded, "f")


def format_oklch(color: OKLCHLike) -> str:
    """Render an OKLCH color as ``oklch(L C H)``.

    Args:
        color: OKLCHColor or an (l, c, h) tuple.

    Returns:
        e.g. ``"oklch(0.700 0.150 180.0)"``
    """
    if isinstance(color, OKLCHColor):
        l, c, h = color.L, color.C, color.H
    else:
        l, c, h = color
    return f"oklch({_fixed(l, 3)} {_fixed(c, 3)} {_fixed(h, 1)})"


def format_hex(r: int, g: int, b: int) -> str:
    """Render 8-bit channels as lowercase ``#rrggbb``."""
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def format_number(value: float) -> str:
    """Render a number the way the host UI interpolates it into CSS.

    Follows JavaScript's number-to-string conversion: integral values drop
    the fractional part (``90.0`` -> ``"90"``), the shortest round-trip
    digits are used otherwise, and exponent form (``1e-7``, ``1e+21``)
    only kicks in below 1e-6 or at 1e21 and above. Non-finite values
    render as ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip; normalize drops trailing zeros
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
