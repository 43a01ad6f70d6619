# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: OKLCH ↔ OKLab ↔ LMS ↔ Linear RGB ↔ sRGB ↔ 8-bit sRGB

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

Gamut policy: out-of-gamut colors are clipped per channel after gamma
encoding. There is no hue-preserving gamut mapping.

The array functions accept any shape (..., 3) so a whole palette or
gradient converts in one call. The scalar functions wrap them.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from oklchkit.schema.color_values import OKLCHColor, RGBColor


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92 (negative inputs included)
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Power branch only ever sees bases >= 0.04045
    safe = np.maximum(srgb, 0.04045)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((safe + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB (unclipped).

    Inverse of srgb_to_linear. Negative linear values take the linear
    branch and stay negative; clipping happens at 8-bit quantization.
    """
    linear = np.asarray(linear, dtype=np.float64)
    safe = np.maximum(linear, 0.0031308)
    return np.where(
        linear > 0.0031308,
        1.055 * np.power(safe, 1.0 / 2.4) - 0.055,
        12.92 * linear,
    )


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS' (cube root) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# OKLab to LMS' (published coefficients rather than np.linalg.inv(_M2))
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS to linear sRGB
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Real cube root; negative LMS only arises from out-of-range input
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values. Out-of-gamut colors
        produce values outside [0, 1]; they are not clipped here.
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS' then undo the cube root
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3

    # LMS to RGB
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H).
        H is in degrees [0, 360); achromatic input (a = b = 0) gives H = 0.
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a))
    H = np.where(H < 0.0, H + 360.0, H)
    # A hue of -1e-15 lands on 360.0 after the shift
    H = np.where(H >= 360.0, 0.0, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = lch[..., 2] * np.pi / 180.0

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# 8-bit quantization
# =============================================================================


def quantize_uint8(srgb: NDArray[np.float64]) -> NDArray[np.int64]:
    """
    Scale sRGB [0,1] to integer channels [0,255].

    Rounds half up (2.5 -> 3), then clamps. This clamp is the gamut
    policy. NaN from overflowing input maps to 0, +/-inf to the edges.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    scaled = np.floor(srgb * 255.0 + 0.5)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(scaled, 0, 255).astype(np.int64)


# =============================================================================
# Full chains (vectorized)
# =============================================================================


def oklch_to_srgb_uint8_batch(lch: NDArray[np.float64]) -> NDArray[np.int64]:
    """
    Convert OKLCH colors to clamped 8-bit sRGB.

    Full chain: OKLCH → OKLab → Linear RGB → sRGB → [0, 255]

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)

    Returns:
        Integer array of shape (..., 3) with channels in [0, 255]
    """
    with np.errstate(over="ignore", invalid="ignore"):
        lab = oklch_to_oklab(lch)
        linear = oklab_to_linear_rgb(lab)
        srgb = linear_to_srgb(linear)
        return quantize_uint8(srgb)


def srgb_uint8_to_oklch_batch(pixels: NDArray) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB channels [0,255] to OKLCH.

    Full chain: [0, 255] → sRGB → Linear RGB → OKLab → OKLCH

    Args:
        pixels: Array of shape (..., 3) with sRGB channel values

    Returns:
        Array of shape (..., 3) with OKLCH values
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    linear = srgb_to_linear(srgb)
    lab = linear_rgb_to_oklab(linear)
    return oklab_to_oklch(lab)


def uint8_to_hex(rgb: NDArray) -> list[str]:
    """Format an (N, 3) or (3,) integer array as lowercase hex strings."""
    rows = np.atleast_2d(np.asarray(rgb, dtype=np.int64))
    return [f"#{r:02x}{g:02x}{b:02x}" for r, g, b in rows.tolist()]


# =============================================================================
# Scalar API
# =============================================================================


def oklch_to_srgb_uint8(l: float, c: float, h: float) -> RGBColor:
    """
    Convert one OKLCH color to a clamped 8-bit sRGB triple.

    Never raises for finite input; out-of-gamut channels are clipped.
    """
    rgb = oklch_to_srgb_uint8_batch(np.array([l, c, h], dtype=np.float64))
    r, g, b = (int(v) for v in rgb)
    return RGBColor(r=r, g=g, b=b)


def oklch_to_srgb_hex(l: float, c: float, h: float) -> str:
    """
    Convert OKLCH values to a canonical hex color string.

    Args:
        l: Lightness [0, 1]
        c: Chroma [0, ~0.4]
        h: Hue in degrees [0, 360)

    Returns:
        Lowercase hex string like "#3941c8"

    Example:
        >>> oklch_to_srgb_hex(0.5, 0.0, 0.0)
        '#636363'
    """
    rgb = oklch_to_srgb_uint8(l, c, h)
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def srgb_to_oklch(r: float, g: float, b: float) -> OKLCHColor:
    """
    Convert 8-bit sRGB channels to OKLCH.

    Args:
        r, g, b: Channel values [0, 255]

    Returns:
        OKLCHColor with H in [0, 360). Gray input yields a finite hue
        (0 when chroma is exactly zero).
    """
    lch = srgb_uint8_to_oklch_batch(np.array([r, g, b], dtype=np.float64))
    L, C, H = (float(v) for v in lch)
    return OKLCHColor(L=L, C=C, H=H)


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse a 6-digit hex string into an RGB triple.

    Args:
        hex_color: Hex string like "#3941c8" or "3941C8"

    Raises:
        ValueError: If the string is not 6 hex digits. Use
            ``oklchkit.parse.parse_to_hex`` for arbitrary input.
    """
    digits = hex_color.strip().lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected 6 hex digits, got {hex_color!r}")
    return RGBColor(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def hex_to_oklch(hex_color: str) -> OKLCHColor:
    """
    Convert a hex color string to OKLCH.

    Args:
        hex_color: Hex string like "#3941c8" or "3941C8"

    Returns:
        OKLCHColor; achromatic colors carry a finite hue rather than None
    """
    rgb = hex_to_rgb(hex_color)
    return srgb_to_oklch(rgb.r, rgb.g, rgb.b)

