"""Tests for color_utils.py."""

import math

import matplotlib.colors as mcolors
import pytest

from epiutils.errors import InvalidArgumentError
from epiutils.styling.color_utils import (
    STANDARD_PALETTE,
    interpolate_colors,
    resolve_rgb,
    transco,
)


def _split_rgba(hex_str):
    return tuple(int(hex_str[i:i + 2], 16) for i in (1, 3, 5, 7))


class TestResolveRgb:
    def test_named(self):
        assert resolve_rgb("steelblue") == (70, 130, 180)

    def test_hex_with_alpha_drops_alpha(self):
        assert resolve_rgb("#11223344") == (0x11, 0x22, 0x33)

    def test_integer_index_cycles(self):
        assert resolve_rgb(1) == resolve_rgb(STANDARD_PALETTE[1])
        assert resolve_rgb(11) == resolve_rgb(STANDARD_PALETTE[1])

    def test_invalid(self):
        with pytest.raises(InvalidArgumentError):
            resolve_rgb("not-a-color")


class TestTransco:
    @pytest.mark.parametrize("color", ["steelblue", "#8e0152", "black", 3, (0.2, 0.4, 0.6)])
    @pytest.mark.parametrize("alpha", [0.0, 0.1, 0.5, 0.73, 1.0])
    def test_single_color_single_alpha(self, color, alpha):
        out = transco(color, alpha)
        assert len(out) == 1
        r, g, b, a = _split_rgba(out[0])
        assert (r, g, b) == resolve_rgb(color)
        assert a == math.floor(alpha * 255)

    def test_docstring_example(self):
        assert transco(["steelblue", "black"], 0.5) == ["#4682b47f", "#0000007f"]

    def test_many_colors_one_alpha(self):
        cols = ["red", "green", "blue", "#abcdef"]
        out = transco(cols, 0.25)
        assert len(out) == len(cols)
        for c, h in zip(cols, out):
            assert _split_rgba(h)[:3] == resolve_rgb(c)
            assert _split_rgba(h)[3] == 63

    def test_one_color_many_alphas(self):
        out = transco("firebrick", [0, 0.5, 1])
        assert out == ["#b2222200", "#b222227f", "#b22222ff"]

    def test_single_element_lists(self):
        assert transco(["firebrick"], [1.0]) == ["#b22222ff"]

    def test_default_alpha_is_opaque(self):
        assert transco("black") == ["#000000ff"]

    def test_input_alpha_channel_ignored(self):
        assert transco("#11223344", 1.0) == ["#112233ff"]

    def test_both_vectors_rejected(self):
        with pytest.raises(InvalidArgumentError):
            transco(["red", "blue"], [0.1, 0.2])

    @pytest.mark.parametrize("alpha", [1.5, -0.1, float("nan"), [0.2, 1.01]])
    def test_alpha_out_of_range(self, alpha):
        with pytest.raises(InvalidArgumentError):
            transco("red", alpha)

    def test_tuple_of_names_is_a_list_of_colors(self):
        assert transco(("red", "blue"), 0.5) == ["#ff00007f", "#0000ff7f"]

    def test_tuple_of_numbers_is_one_color(self):
        assert transco((1.0, 0.0, 0.0), 0.2) == ["#ff000033"]

    @pytest.mark.parametrize("alpha", ["0.5", ["0.5"], None])
    def test_non_numeric_alpha(self, alpha):
        with pytest.raises(InvalidArgumentError):
            transco("red", alpha)

    def test_empty_col(self):
        with pytest.raises(InvalidArgumentError):
            transco([], 0.5)

    def test_output_parses_as_matplotlib_color(self):
        for h in transco(["red", "steelblue"], 0.3):
            assert mcolors.is_color_like(h)


class TestInterpolateColors:
    def test_hex_matches_matplotlib(self):
        for h in interpolate_colors(["#8e0152", "#276419"], 5):
            assert h == mcolors.to_hex(h)

    def test_midpoint_rounds_half_up(self):
        assert interpolate_colors(["#000000", "#ffffff"], 3) == ["#000000", "#808080", "#ffffff"]

    def test_n_equal_to_stops_returns_stops(self):
        stops = ["#ff0000", "#00ff00", "#0000ff"]
        assert interpolate_colors(stops, 3) == stops

    def test_single_sample_is_first_stop(self):
        assert interpolate_colors(["#123456", "#ffffff"], 1) == ["#123456"]

    def test_zero(self):
        assert interpolate_colors(["red", "blue"], 0) == []

    def test_single_stop_repeats(self):
        assert interpolate_colors(["red"], 2) == ["#ff0000", "#ff0000"]

    @pytest.mark.parametrize("n", [-1, 2.5, "3"])
    def test_invalid_n(self, n):
        with pytest.raises(InvalidArgumentError):
            interpolate_colors(["red", "blue"], n)
