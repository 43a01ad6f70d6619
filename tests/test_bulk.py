# Copyright (c) 2026 Oklchkit
# SPDX-License-Identifier: MIT

"""Tests for free-text color conversion."""

from oklchkit.parse import (
    convert_color_to_oklch,
    convert_text_to_oklch,
    extract_oklch_swatches,
)
from oklchkit.schema import NamedColor

BLACK = "oklch(0.000 0.000 0.0)"


class TestConvertColor:

    def test_six_digit_hex(self):
        assert convert_color_to_oklch("#000000") == BLACK

    def test_three_digit_hex_expanded(self):
        assert convert_color_to_oklch("#fff") == convert_color_to_oklch("#ffffff")

    def test_rgb(self):
        assert convert_color_to_oklch("rgb(0, 0, 0)") == BLACK

    def test_rgba(self):
        assert convert_color_to_oklch("rgba(0,0,0,0.5)") == BLACK

    def test_rgb_matches_hex(self):
        assert convert_color_to_oklch("rgb(212, 165, 116)") == convert_color_to_oklch("#d4a574")

    def test_named_color_unsupported(self):
        assert convert_color_to_oklch("blue") is None


class TestConvertText:

    def test_rewrites_literals_in_place(self):
        text = "--a: #000;\n--b: rgb(0, 0, 0);\n--c: var(--x);"
        assert convert_text_to_oklch(text) == (
            f"--a: {BLACK};\n--b: {BLACK};\n--c: var(--x);"
        )

    def test_multiple_per_line(self):
        out = convert_text_to_oklch("border: 1px solid #000000; color: #000000;")
        assert out == f"border: 1px solid {BLACK}; color: {BLACK};"

    def test_rgba_alpha_consumed(self):
        assert convert_text_to_oklch("x: rgba(0, 0, 0, 0.25);") == f"x: {BLACK};"

    def test_text_without_colors_unchanged(self):
        text = "font-size: 16px;\nline-height: 1.5;"
        assert convert_text_to_oklch(text) == text

    def test_existing_oklch_untouched(self):
        text = "--p: oklch(0.600 0.150 250.0);"
        assert convert_text_to_oklch(text) == text


class TestExtractSwatches:

    def test_extracts_in_order(self):
        swatches = extract_oklch_swatches("--a: oklch(0.5 0 0);\n--b: oklch(1 0 0);")
        assert swatches == (
            NamedColor(name="Color 1", oklch="oklch(0.5 0 0)", hex="#636363"),
            NamedColor(name="Color 2", oklch="oklch(1 0 0)", hex="#ffffff"),
        )

    def test_malformed_literal_skipped(self):
        swatches = extract_oklch_swatches("oklch(1.2.3 0 0) oklch(0 0 0)")
        assert swatches == (NamedColor(name="Color 1", oklch="oklch(0 0 0)", hex="#000000"),)

    def test_no_literals(self):
        assert extract_oklch_swatches("color: red;") == ()
