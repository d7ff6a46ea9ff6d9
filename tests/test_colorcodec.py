# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""Tests for color literal conversions (hex ↔ rgb(a), alpha)."""

import pytest

from conique.notation.colorcodec import (
    channels_to_hex,
    get_alpha,
    hex_to_channels,
    is_hex_color,
    to_hex,
    to_rgba,
)


class TestToRgba:

    def test_hex_long_form(self):
        assert to_rgba("#ff0000", 0.5) == "rgba(255, 0, 0, 0.5)"

    def test_hex_short_form_expands(self):
        assert to_rgba("#f80", 0.25) == "rgba(255, 136, 0, 0.25)"

    def test_hex_uppercase(self):
        assert to_rgba("#E33B94", 0.5) == "rgba(227, 59, 148, 0.5)"

    def test_rgb_components_copied(self):
        assert to_rgba("rgb(10, 20, 30)", 0.5) == "rgba(10, 20, 30, 0.5)"

    def test_rgba_alpha_replaced(self):
        assert to_rgba("rgba(10,20,30,0.9)", 0.5) == "rgba(10, 20, 30, 0.5)"

    def test_components_not_revalidated(self):
        assert to_rgba("rgb(10%, 20%, 30%)", 0.5) == "rgba(10%, 20%, 30%, 0.5)"

    def test_function_name_case_insensitive(self):
        assert to_rgba("RGBA(1, 2, 3, 1)", 0) == "rgba(1, 2, 3, 0)"

    def test_integral_opacity_has_no_fraction(self):
        assert to_rgba("#000", 1.0) == "rgba(0, 0, 0, 1)"

    @pytest.mark.parametrize(
        "color",
        [
            "red",
            "hsl(0, 100%, 50%)",
            "#ff000080",
            "#abcd",
            "rgb(1 2 3)",
            "not a color",
            "",
        ],
    )
    def test_unsupported_returned_unchanged(self, color):
        assert to_rgba(color, 0.5) == color


class TestToHex:

    def test_rgb_to_hex(self):
        assert to_hex("rgb(255, 0, 0)") == "#ff0000"

    def test_rgba_ignores_alpha(self):
        assert to_hex("rgba(18, 52, 86, 0.4)") == "#123456"

    def test_hex_passthrough(self):
        assert to_hex("#ABC") == "#ABC"
        assert to_hex("#152275") == "#152275"
        assert to_hex("#ff000080") == "#ff000080"

    def test_clamps_and_truncates(self):
        assert to_hex("rgba(300, -5, 16.9, 0.5)") == "#ff0010"

    def test_lowercase_zero_padded(self):
        assert to_hex("rgb(1, 10, 171)") == "#010aab"

    @pytest.mark.parametrize(
        "color",
        ["hsl(0, 100%, 50%)", "rgb(a, b, c)", "rgb(1, 2)", "blue", "#zzz", ""],
    )
    def test_unreadable_is_black(self, color):
        assert to_hex(color) == "#000000"


class TestGetAlpha:

    def test_rgba_alpha(self):
        assert get_alpha("rgba(1,2,3,0.25)") == 0.25

    def test_rgba_leading_dot(self):
        assert get_alpha("rgba(1, 2, 3, .5)") == 0.5

    def test_hex_is_opaque(self):
        assert get_alpha("#ff0000") == 1

    def test_rgb_is_opaque(self):
        assert get_alpha("rgb(1, 2, 3)") == 1

    def test_missing_alpha(self):
        assert get_alpha("rgba(1, 2, 3)") == 1

    def test_unreadable_alpha(self):
        assert get_alpha("rgba(1, 2, 3, abc)") == 1

    def test_named_color(self):
        assert get_alpha("transparent") == 1


class TestPickerRoundtrip:
    """rgba → (hex, alpha) → rgba is lossless for well-formed input."""

    @pytest.mark.parametrize(
        "color",
        ["rgba(18, 52, 86, 0.4)", "rgba(0, 0, 0, 0)", "rgba(255, 255, 255, 1)"],
    )
    def test_roundtrip(self, color):
        assert to_rgba(to_hex(color), get_alpha(color)) == color


class TestChannelHelpers:

    def test_hex_to_channels(self):
        assert hex_to_channels("#f80").tolist() == [255, 136, 0]
        assert hex_to_channels("#007BA7").tolist() == [0, 123, 167]

    def test_hex_to_channels_rejects_other_lengths(self):
        with pytest.raises(ValueError, match="RRGGBB"):
            hex_to_channels("#ff")

    def test_channels_to_hex_clamps(self):
        assert channels_to_hex([256, -1, 15]) == "#ff000f"

    def test_is_hex_color(self):
        assert is_hex_color("#abc")
        assert is_hex_color("#aabbccdd")
        assert not is_hex_color("#abcde")
        assert not is_hex_color("abc")
