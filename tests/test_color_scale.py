"""Tests for the pH display color scale."""

import pytest
from matplotlib.colors import to_rgb

from phcalc.chemistry.conversions import ph_from_hydrogen
from phcalc.color_scale import (
    MODERATELY_BASIC_COLOR,
    NEAR_NEUTRAL_COLOR,
    NEUTRAL_COLOR,
    SLIGHTLY_BASIC_COLOR,
    STRONG_ACID_COLOR,
    STRONG_BASE_COLOR,
    color_for_ph,
    parse_css_color,
    text_color_for_ph,
)


class TestColorBands:
    def test_strong_acid(self):
        assert color_for_ph(0.5) == STRONG_ACID_COLOR == "#d70000"
        assert color_for_ph(2.99) == STRONG_ACID_COLOR

    def test_weak_acid_gradient_endpoints(self):
        assert color_for_ph(3.0) == "rgb(215, 100, 0)"
        assert color_for_ph(5.999999) == "rgb(254, 254, 0)"

    def test_weak_acid_midpoint(self):
        """t = 0.5 between orange and yellow, channels floored."""
        assert color_for_ph(4.5) == "rgb(235, 177, 0)"

    def test_near_neutral(self):
        assert color_for_ph(6.0) == NEAR_NEUTRAL_COLOR
        assert color_for_ph(6.9) == NEAR_NEUTRAL_COLOR

    def test_neutral(self):
        assert color_for_ph(7) == NEUTRAL_COLOR == "#7ceb7c"

    def test_neutral_tolerates_float_noise(self):
        assert color_for_ph(7.0 + 1e-12) == NEUTRAL_COLOR
        assert color_for_ph(7.0 - 1e-12) == NEUTRAL_COLOR
        assert color_for_ph(ph_from_hydrogen(1e-7)) == NEUTRAL_COLOR

    def test_basic_bands(self):
        assert color_for_ph(7.4) == SLIGHTLY_BASIC_COLOR
        assert color_for_ph(8.99) == SLIGHTLY_BASIC_COLOR
        assert color_for_ph(9.0) == MODERATELY_BASIC_COLOR
        assert color_for_ph(11.99) == MODERATELY_BASIC_COLOR
        assert color_for_ph(12.0) == STRONG_BASE_COLOR
        assert color_for_ph(14.0) == STRONG_BASE_COLOR

    def test_clamping_before_lookup(self):
        assert color_for_ph(-5) == color_for_ph(0)
        assert color_for_ph(20) == color_for_ph(14)


class TestTextColor:
    def test_contrast_on_dark_bands(self):
        assert text_color_for_ph(1.0) == "white"
        assert text_color_for_ph(12.5) == "white"

    def test_contrast_on_light_bands(self):
        assert text_color_for_ph(3.0) == "black"
        assert text_color_for_ph(7.0) == "black"
        assert text_color_for_ph(11.0) == "black"


class TestParseCssColor:
    def test_hex(self):
        assert parse_css_color("#ff0000") == (1.0, 0.0, 0.0)

    def test_rgb_function(self):
        r, g, b = parse_css_color("rgb(255, 0, 51)")
        assert (r, g, b) == (1.0, 0.0, 0.2)

    def test_every_band_parses(self):
        for ph in [0.5, 4.5, 6.5, 7.0, 8.0, 10.0, 13.0]:
            channels = parse_css_color(color_for_ph(ph))
            assert all(0.0 <= c <= 1.0 for c in channels)

    def test_hex_goes_through_matplotlib(self):
        assert parse_css_color("#7ceb7c") == to_rgb("#7ceb7c")
        assert parse_css_color("#fff") == (1.0, 1.0, 1.0)

    @pytest.mark.parametrize("bad", ["not-a-color", "#12345", "rgb(300, 0, 0)", "rgb(1,2)"])
    def test_rejects_unknown_forms(self, bad):
        with pytest.raises(ValueError):
            parse_css_color(bad)
