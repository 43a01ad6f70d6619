# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import dataclasses

import pytest

from oklchkit.schema import (
    FALLBACK_HEX,
    Gradient,
    GradientStop,
    GradientType,
    NamedColor,
    OKLCHColor,
    RGBColor,
    SwatchSet,
    sort_stops,
)


class TestOKLCHColor:

    def test_valid_color(self):
        c = OKLCHColor(L=0.5, C=0.1, H=200.0)
        assert c.L == 0.5
        assert c.C == 0.1
        assert c.H == 200.0

    def test_hue_defaults_to_zero(self):
        assert OKLCHColor(L=0.5, C=0.0).H == 0.0

    def test_out_of_range_accepted(self):
        c = OKLCHColor(L=1.5, C=-0.1, H=400.0)
        assert c.L == 1.5

    def test_clamped(self):
        c = OKLCHColor(L=1.5, C=0.9, H=400.0).clamped()
        assert c == OKLCHColor(L=1.0, C=0.4, H=40.0)

    def test_clamped_negative(self):
        c = OKLCHColor(L=-0.2, C=-0.1, H=-90.0).clamped()
        assert c == OKLCHColor(L=0.0, C=0.0, H=270.0)

    def test_achromatic(self):
        assert OKLCHColor(L=0.5, C=0.01, H=200.0).is_achromatic
        assert not OKLCHColor(L=0.5, C=0.1, H=200.0).is_achromatic

    def test_hex(self):
        assert OKLCHColor(L=0.5, C=0.0, H=0.0).hex == "#636363"

    def test_to_dict_roundtrip(self):
        c = OKLCHColor(L=0.5, C=0.1, H=200.0)
        assert c.to_dict() == {"l": 0.5, "c": 0.1, "h": 200.0}
        assert OKLCHColor.from_dict(c.to_dict()) == c

    def test_from_dict_uppercase_keys(self):
        c = OKLCHColor.from_dict({"L": 0.5, "C": 0.1, "H": None})
        assert c == OKLCHColor(L=0.5, C=0.1, H=0.0)

    def test_frozen(self):
        c = OKLCHColor(L=0.5, C=0.1, H=200.0)
        with pytest.raises(AttributeError):
            c.L = 0.6


class TestRGBColor:

    def test_hex(self):
        assert RGBColor(r=255, g=0, b=16).hex == "#ff0010"

    def test_clamped(self):
        assert RGBColor(r=300, g=-4, b=12).clamped() == RGBColor(r=255, g=0, b=12)

    def test_to_dict_roundtrip(self):
        rgb = RGBColor(r=1, g=2, b=3)
        assert RGBColor.from_dict(rgb.to_dict()) == rgb


class TestGradientStop:

    def test_flat_dict(self):
        stop = GradientStop(position=25.0, color=OKLCHColor(L=0.5, C=0.1, H=20.0))
        assert stop.to_dict() == {"position": 25.0, "l": 0.5, "c": 0.1, "h": 20.0}
        assert GradientStop.from_dict(stop.to_dict()) == stop

    def test_nested_color_dict(self):
        stop = GradientStop.from_dict({"position": 10, "color": {"l": 0.2, "c": 0.0, "h": 0}})
        assert stop == GradientStop(position=10.0, color=OKLCHColor(L=0.2, C=0.0, H=0.0))

    def test_position_not_validated(self):
        assert GradientStop(position=140.0, color=OKLCHColor(L=0.5, C=0.0)).position == 140.0


class TestSortStops:

    def test_ascending(self):
        a = GradientStop(position=100.0, color=OKLCHColor(L=1.0, C=0.0))
        b = GradientStop(position=0.0, color=OKLCHColor(L=0.0, C=0.0))
        assert sort_stops([a, b]) == (b, a)

    def test_stable_for_ties(self):
        a = GradientStop(position=50.0, color=OKLCHColor(L=1.0, C=0.0))
        b = GradientStop(position=50.0, color=OKLCHColor(L=0.0, C=0.0))
        assert sort_stops([a, b]) == (a, b)
        assert sort_stops([b, a]) == (b, a)


class TestGradient:

    def _stops(self):
        return (
            GradientStop(position=100.0, color=OKLCHColor(L=1.0, C=0.0)),
            GradientStop(position=0.0, color=OKLCHColor(L=0.5, C=0.0)),
        )

    def test_requires_two_stops(self):
        with pytest.raises(ValueError, match="at least 2"):
            Gradient(type=GradientType.LINEAR, angle=90.0, stops=self._stops()[:1])

    def test_keeps_input_order(self):
        g = Gradient(type=GradientType.LINEAR, angle=90.0, stops=self._stops())
        assert g.stops[0].position == 100.0
        assert [s.position for s in g.sorted_stops()] == [0.0, 100.0]

    def test_css(self):
        g = Gradient(type=GradientType.LINEAR, angle=90.0, stops=self._stops())
        assert g.css == "linear-gradient(90deg, #636363 0%, #ffffff 100%)"

    def test_radial_css(self):
        g = Gradient(type=GradientType.RADIAL, angle=45.0, stops=self._stops())
        assert g.css == "radial-gradient(circle, #636363 0%, #ffffff 100%)"

    def test_to_dict_roundtrip(self):
        g = Gradient(type=GradientType.CONIC, angle=30.0, stops=self._stops())
        assert g.to_dict()["type"] == "conic"
        assert Gradient.from_dict(g.to_dict()) == g

    def test_from_dict_unknown_type(self):
        with pytest.raises(ValueError):
            Gradient.from_dict({"type": "diamond", "angle": 0, "stops": []})


class TestSwatchSet:

    def _colors(self):
        return (NamedColor(name="Gray", oklch="oklch(0.500 0.000 0.0)", hex="#636363"),)

    def test_palette_roundtrip(self):
        s = SwatchSet(
            name="Grays",
            category="palette",
            colors=self._colors(),
            tags=("neutral",),
            description="Neutral ramp",
        )
        assert SwatchSet.from_json(s.to_json()) == s

    def test_optional_fields_omitted(self):
        d = SwatchSet(name="Grays", category="palette", colors=self._colors()).to_dict()
        assert set(d) == {"name", "category", "colors"}

    def test_invalid_category(self):
        with pytest.raises(ValueError, match="Category"):
            SwatchSet(name="X", category="theme", colors=())

    def test_gradient_requires_gradient(self):
        with pytest.raises(ValueError, match="require a gradient"):
            SwatchSet(name="X", category="gradient", colors=())

    def test_frozen(self):
        s = SwatchSet(name="X", category="palette", colors=())
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.name = "Y"


def test_fallback_constant():
    assert FALLBACK_HEX == "#000000"
