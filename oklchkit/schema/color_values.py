# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Value types for the OKLCH color engine.

Design principles:
- Immutable: All types are frozen dataclasses
- Total: Numeric fields are NOT range-checked. Out-of-range values are
  legal inputs to the converter, which clamps on the way to sRGB.
  Callers that want canonical ranges use ``clamped()``.
- Serializable: JSON-ready for token storage by the host UI

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.4 = max saturation reachable in sRGB
- H (Hue): 0-360 degrees (≈30=orange, ≈90=yellow, ≈145=green, ≈250=blue)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Constants
# =============================================================================

# Returned for any color string the parser does not recognize.
FALLBACK_HEX = "#000000"

MAX_CHROMA = 0.4


def _wrap_hue(h: float) -> float:
    h = h % 360.0
    # -1e-17 % 360.0 rounds up to 360.0
    return 0.0 if h >= 360.0 else h


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    A single color in OKLCH color space.

    Attributes:
        L: Lightness (0.0 = black, 1.0 = white)
        C: Chroma (0.0 = neutral gray, ~0.4 upper bound for sRGB)
        H: Hue in degrees (0-360, where 0≈pink/red, 120≈green, 240≈blue).
           Achromatic colors carry H = 0.0, never None.
    """
    L: float
    C: float
    H: float = 0.0

    @property
    def is_achromatic(self) -> bool:
        """True if the color has no perceptible hue (gray/white/black)."""
        return self.C < 0.02

    @property
    def hex(self) -> str:
        """Canonical lowercase hex, gamut-clamped."""
        from oklchkit.convert.colorspace import oklch_to_srgb_hex
        return oklch_to_srgb_hex(self.L, self.C, self.H)

    @property
    def css(self) -> str:
        """Canonical ``oklch(L C H)`` string."""
        from oklchkit.runtime.serializers.color import format_oklch
        return format_oklch(self)

    def clamped(self) -> OKLCHColor:
        """Return a copy with L, C and H pulled into their canonical ranges."""
        return OKLCHColor(
            L=min(1.0, max(0.0, self.L)),
            C=min(MAX_CHROMA, max(0.0, self.C)),
            H=_wrap_hue(self.H),
        )

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.L, self.C, self.H)

    def to_dict(self) -> dict:
        """Serialize to dictionary (lowercase keys, as the editor UI stores them)."""
        return {"l": self.L, "c": self.C, "h": self.H}

    @classmethod
    def from_dict(cls, data: dict) -> OKLCHColor:
        """Deserialize from dictionary. Accepts lowercase or uppercase keys."""
        return cls(
            L=float(data["l"] if "l" in data else data["L"]),
            C=float(data["c"] if "c" in data else data["C"]),
            H=float(data.get("h", data.get("H", 0.0)) or 0.0),
        )


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An 8-bit sRGB triple.

    Transient: produced on the way to hex, never persisted.
    """
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        from oklchkit.runtime.serializers.color import format_hex
        return format_hex(self.r, self.g, self.b)

    def clamped(self) -> RGBColor:
        return RGBColor(
            r=min(255, max(0, int(self.r))),
            g=min(255, max(0, int(self.g))),
            b=min(255, max(0, int(self.b))),
        )

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        return cls(r=int(data["r"]), g=int(data["g"]), b=int(data["b"]))


# =============================================================================
# Gradient Types
# =============================================================================


class GradientType(Enum):
    """CSS gradient function to render."""
    LINEAR = "linear"  # linear-gradient(<angle>deg, ...)
    RADIAL = "radial"  # radial-gradient(circle, ...), angle not emitted
    CONIC = "conic"    # conic-gradient(from <angle>deg, ...)


@dataclass(frozen=True, slots=True)
class GradientStop:
    """
    A single stop in a gradient.

    Attributes:
        position: Position along the gradient axis in percent (0-100).
            Not validated; the editor clamps before storing.
        color: Color at this position
    """
    position: float
    color: OKLCHColor

    def to_dict(self) -> dict:
        """Serialize to the flat shape the gradient editor keeps in state."""
        return {"position": self.position, **self.color.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> GradientStop:
        """Deserialize from a flat ``{position, l, c, h}`` or nested ``color`` dict."""
        color_data = data.get("color", data)
        return cls(
            position=float(data["position"]),
            color=OKLCHColor.from_dict(color_data),
        )


def sort_stops(stops) -> tuple[GradientStop, ...]:
    """Stable ascending sort by position. Ties keep their input order."""
    return tuple(sorted(stops, key=lambda s: s.position))


@dataclass(frozen=True, slots=True)
class Gradient:
    """
    A CSS gradient definition.

    Stops are kept in the order given; serialization sorts them.

    Attributes:
        type: linear, radial or conic
        angle: Angle in degrees (ignored when rendering radial gradients)
        stops: At least 2 gradient stops
    """
    type: GradientType
    angle: float
    stops: tuple[GradientStop, ...]

    def __post_init__(self) -> None:
        """Validate gradient structure."""
        if len(self.stops) < 2:
            raise ValueError("Gradient must have at least 2 stops")

    def sorted_stops(self) -> tuple[GradientStop, ...]:
        return sort_stops(self.stops)

    @property
    def css(self) -> str:
        """CSS gradient string for backgrounds and clipboard export."""
        from oklchkit.runtime.serializers.gradient import build_gradient_css
        return build_gradient_css(self.type, self.angle, self.stops)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "type": self.type.value,
            "angle": self.angle,
            "stops": [s.to_dict() for s in self.stops],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Gradient:
        """Deserialize from dictionary."""
        return cls(
            type=GradientType(data["type"]),
            angle=float(data.get("angle", 0.0)),
            stops=tuple(GradientStop.from_dict(s) for s in data["stops"]),
        )


# =============================================================================
# Palette Types
# =============================================================================


class PaletteType(Enum):
    """Harmony rule used to derive a palette from a base color."""
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"


@dataclass(frozen=True, slots=True)
class NamedOKLCH:
    """A generated palette entry: a label plus its OKLCH value."""
    name: str
    color: OKLCHColor

    def to_named_color(self) -> NamedColor:
        """Render into the stored ``{name, oklch, hex}`` form."""
        return NamedColor(name=self.name, oklch=self.color.css, hex=self.color.hex)


@dataclass(frozen=True, slots=True)
class NamedColor:
    """
    One entry of a saved swatch set, as persisted by the host UI.

    Attributes:
        name: Display label ("Shade 1", "Stop 2", ...)
        oklch: Canonical ``oklch(L C H)`` string
        hex: Canonical lowercase hex
    """
    name: str
    oklch: str
    hex: str

    def to_dict(self) -> dict:
        return {"name": self.name, "oklch": self.oklch, "hex": self.hex}

    @classmethod
    def from_dict(cls, data: dict) -> NamedColor:
        return cls(name=data["name"], oklch=data["oklch"], hex=data["hex"])


@dataclass(frozen=True, slots=True)
class SwatchSet:
    """
    A named palette or gradient ready to be handed to the host UI for storage.

    Attributes:
        name: Palette name (required, non-empty)
        category: "palette" or "gradient"
        colors: Named colors, in display order
        tags: Free-form tags (palette type for generated palettes)
        description: Optional free text
        gradient: Gradient definition when category is "gradient"
    """
    name: str
    category: str
    colors: tuple[NamedColor, ...]
    tags: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    gradient: Optional[Gradient] = None

    def __post_init__(self) -> None:
        """Validate swatch set structure."""
        if not self.name:
            raise ValueError("Swatch set name cannot be empty")
        if self.category not in ("palette", "gradient"):
            raise ValueError(
                f"Category must be 'palette' or 'gradient', got {self.category!r}"
            )
        if self.category == "gradient" and self.gradient is None:
            raise ValueError("Gradient swatch sets require a gradient")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        result = {
            "name": self.name,
            "category": self.category,
            "colors": [c.to_dict() for c in self.colors],
        }
        if self.tags:
            result["tags"] = list(self.tags)
        if self.description:
            result["description"] = self.description
        if self.gradient is not None:
            result["gradient"] = self.gradient.to_dict()
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> SwatchSet:
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            category=data.get("category", "palette"),
            colors=tuple(NamedColor.from_dict(c) for c in data.get("colors", [])),
            tags=tuple(data.get("tags", ())),
            description=data.get("description", ""),
            gradient=(
                Gradient.from_dict(data["gradient"])
                if data.get("gradient") else None
            ),
        )

    @classmethod
    def from_json(cls, json_str: str) -> SwatchSet:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
