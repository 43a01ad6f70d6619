# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""
Design-token serializers.

Bridges between stored token strings and what the editors need:

1. Token -> picker: any supported CSS color string to hex for a native
   color input
2. Picker -> token: a picked hex back to canonical ``oklch(...)``
3. Swatch sets: named palettes and gradients as storage payloads
4. Clipboard and ``:root`` CSS custom-property text
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Union

from oklchkit.convert.colorspace import hex_to_oklch
from oklchkit.parse.css import parse_to_hex
from oklchkit.runtime.serializers.color import format_oklch
from oklchkit.schema import (
    Gradient,
    NamedColor,
    NamedOKLCH,
    OKLCHColor,
    PaletteType,
    SwatchSet,
)


def token_to_picker_hex(value: str) -> str:
    """Hex for a color picker from a raw token value. Never raises."""
    return parse_to_hex(value)


def picker_hex_to_token(hex_color: str) -> str:
    """Canonical ``oklch(L C H)`` token from a picked ``#rrggbb`` value.

    Raises:
        ValueError: If ``hex_color`` is not 6 hex digits
    """
    return format_oklch(hex_to_oklch(hex_color))


def named_color(name: str, color: OKLCHColor) -> NamedColor:
    """Render one OKLCH color into the stored ``{name, oklch, hex}`` form."""
    return NamedColor(name=name, oklch=format_oklch(color), hex=color.hex)


def to_swatch_set(
    name: str,
    colors: Iterable[Union[NamedOKLCH, NamedColor]],
    *,
    palette_type: Union[PaletteType, str, None] = None,
    tags: Iterable[str] = (),
    description: str = "",
) -> SwatchSet:
    """Build a palette payload.

    Args:
        name: Palette name
        colors: Generated (NamedOKLCH) or already rendered (NamedColor) entries
        palette_type: Harmony rule, recorded as the first tag
        tags: Extra tags; blanks and duplicates are dropped
        description: Optional free text

    Raises:
        ValueError: If name is empty
    """
    rendered = tuple(
        c.to_named_color() if isinstance(c, NamedOKLCH) else c
        for c in colors
    )

    all_tags: list[str] = []
    if palette_type is not None:
        all_tags.append(PaletteType(palette_type).value)
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in all_tags:
            all_tags.append(tag)

    return SwatchSet(
        name=name,
        category="palette",
        colors=rendered,
        tags=tuple(all_tags),
        description=description,
    )


def gradient_to_swatch_set(name: str, gradient: Gradient) -> SwatchSet:
    """Build a gradient payload with one ``Stop i`` color per stop.

    Stops are listed in the gradient's own order, as they were edited.
    """
    colors = tuple(
        named_color(f"Stop {i}", stop.color)
        for i, stop in enumerate(gradient.stops, 1)
    )
    return SwatchSet(
        name=name,
        category="gradient",
        colors=colors,
        gradient=gradient,
    )


def to_clipboard_text(swatch_set: SwatchSet, *, use_hex: bool = True) -> str:
    """One ``"<name>: <value>"`` line per color."""
    return "\n".join(
        f"{c.name}: {c.hex if use_hex else c.oklch}"
        for c in swatch_set.colors
    )


def to_css_variables(tokens: Mapping[str, str], *, selector: str = ":root") -> str:
    """Render tokens as a CSS custom-property block.

    Example::

        :root {
          --primary-500: oklch(0.600 0.150 250.0);
          --background: #ffffff;
        }
    """
    lines = [f"{selector} {{"]
    for name, value in tokens.items():
        prop = name if name.startswith("--") else f"--{name}"
        lines.append(f"  {prop}: {value};")
    lines.append("}")
    return "\n".join(lines)
