#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Unit tests for the color and brightness model.
"""

from __future__ import annotations

import numpy as np
import pytest

from pyroshow.color import (
    ColorUtils,
    cooling_shift,
    fade_curve,
    palette_layer,
    palette_lerp,
    shade,
    shade_array,
    to_color,
    to_rgb,
    to_rgb_float,
    zoom_brightness,
)
from pyroshow.colorlib import Color
from pyroshow.types import EffectType


# ─────────────────────────────────────────────────────────────────────────────
# Coercion
# ─────────────────────────────────────────────────────────────────────────────


class TestToColor:
    """Tests for color coercion."""

    def test_html_hex(self):
        """Hex strings parse to the right channels."""
        assert to_color("#ff0000").rgb == pytest.approx((1.0, 0.0, 0.0))

    def test_named_color(self):
        """CSS color names are accepted."""
        assert to_color("blue").rgb == pytest.approx((0.0, 0.0, 1.0))

    def test_int_tuple(self):
        """Integer tuples are treated as 0-255."""
        assert to_color((255, 0, 255)).rgb == pytest.approx((1.0, 0.0, 1.0))

    def test_float_tuple(self):
        """Float tuples are treated as 0-1."""
        assert to_color((0.5, 0.25, 1.0)).rgb == pytest.approx((0.5, 0.25, 1.0))

    def test_color_passthrough(self, red_color):
        """Color objects are returned as-is."""
        assert to_color(red_color) is red_color

    def test_multiple_args_give_list(self):
        """Several arguments give a list of colors."""
        colors = to_color("red", "green")
        assert isinstance(colors, list)
        assert len(colors) == 2

    def test_invalid_raises(self):
        """Unparseable values raise."""
        with pytest.raises((TypeError, ValueError)):
            to_color(12)

    def test_to_rgb_int_tuple(self):
        """to_rgb gives a 0-255 int triple."""
        assert tuple(to_rgb("#ffffff")) == (255, 255, 255)

    def test_to_rgb_float_none(self):
        """None converts to black."""
        assert to_rgb_float(None) == (0.0, 0.0, 0.0)

    def test_color_html_roundtrip(self):
        """Color.html renders a hex string."""
        assert Color.NewFromHtml("#ffaa44").html == "#ffaa44"


# ─────────────────────────────────────────────────────────────────────────────
# Palettes
# ─────────────────────────────────────────────────────────────────────────────


class TestPalettes:
    """Tests for palette sampling."""

    PALETTE = [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]

    def test_lerp_endpoints(self):
        """Positions 0 and 1 hit the first and last entries."""
        assert palette_lerp(self.PALETTE, 0.0) == pytest.approx((1.0, 0.0, 0.0))
        assert palette_lerp(self.PALETTE, 1.0) == pytest.approx((0.0, 0.0, 1.0))

    def test_lerp_between_entries(self):
        """Midway between two entries blends them evenly."""
        assert palette_lerp(self.PALETTE, 0.25) == pytest.approx((0.5, 0.5, 0.0))

    def test_single_entry_palette(self):
        """A single entry is returned for any position."""
        assert palette_lerp([(0.2, 0.3, 0.4)], 0.7) == pytest.approx((0.2, 0.3, 0.4))
        assert palette_layer([(0.2, 0.3, 0.4)], 0.7) == pytest.approx((0.2, 0.3, 0.4))

    def test_layer_is_discrete(self):
        """Layers pick whole entries."""
        assert palette_layer(self.PALETTE, 0.0) == (1.0, 0.0, 0.0)
        assert palette_layer(self.PALETTE, 0.6) == (0.0, 1.0, 0.0)
        assert palette_layer(self.PALETTE, 1.0) == (0.0, 0.0, 1.0)

    def test_gradient_length(self):
        """Gradients have the requested length and endpoints."""
        gradient = ColorUtils.gradient(5, "#ff0000", "#0000ff")
        assert len(gradient) == 5
        assert gradient[0] == pytest.approx((1.0, 0.0, 0.0))
        assert gradient[-1] == pytest.approx((0.0, 0.0, 1.0))

    def test_gradient_degenerate(self):
        """Zero and one entry gradients are handled."""
        assert ColorUtils.gradient(0, "red") == []
        assert len(ColorUtils.gradient(1, "red", "blue")) == 1

    def test_luminance(self, white_color):
        """White has full luminance."""
        assert ColorUtils.luminance(white_color) == pytest.approx(1.0)


# ─────────────────────────────────────────────────────────────────────────────
# Brightness model
# ─────────────────────────────────────────────────────────────────────────────


class TestFadeCurve:
    """Tests for fade curves per effect family."""

    @pytest.mark.parametrize(
        "effect_type,exponent",
        [
            (EffectType.BURST, 0.6),
            (EffectType.FOUNTAIN, 0.8),
            (EffectType.SPIRAL, 0.7),
        ],
    )
    def test_power_curves(self, effect_type, exponent):
        """Power curve families use their exponent."""
        assert fade_curve(0.5, effect_type) == pytest.approx(0.5**exponent)

    def test_willow_two_regimes(self):
        """Willow lingers above 0.3 and drops steeply below."""
        assert fade_curve(0.64, EffectType.WILLOW) == pytest.approx(0.8)
        assert fade_curve(0.2, EffectType.WILLOW) == pytest.approx(0.2**1.2)

    def test_linear_default(self):
        """Other effects fade linearly."""
        assert fade_curve(0.4, EffectType.RING) == pytest.approx(0.4)

    def test_clamped_input(self):
        """Out of range fractions are clamped."""
        assert fade_curve(1.5, EffectType.BURST) == 1.0
        assert fade_curve(-0.5, EffectType.BURST) == 0.0

    @pytest.mark.parametrize("effect_type", list(EffectType))
    def test_monotonic(self, effect_type):
        """Alpha never increases as life runs out."""
        values = [fade_curve(f / 50.0, effect_type) for f in range(51)]
        assert all(a <= b + 1e-12 for a, b in zip(values, values[1:]))


class TestZoomBrightness:
    """Tests for distance compensation."""

    def test_none_disables(self):
        """No distance means no compensation."""
        assert zoom_brightness(None) == 1.0

    def test_range(self):
        """Compensation runs from 1 at the near limit to 20 at the far limit."""
        assert zoom_brightness(10.0) == pytest.approx(1.0)
        assert zoom_brightness(500.0) == pytest.approx(20.0)
        assert zoom_brightness(5000.0) == pytest.approx(20.0)
        assert zoom_brightness(0.0) == pytest.approx(1.0)

    def test_non_decreasing(self):
        """Further away is never dimmer."""
        values = [zoom_brightness(d) for d in range(0, 600, 10)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_degenerate_range(self):
        """An empty distance range disables compensation."""
        assert zoom_brightness(100.0, 50.0, 50.0) == 1.0


class TestCoolingAndShade:
    """Tests for cooling shift and final shading."""

    def test_cooling_at_full_alpha(self):
        """No shift while fully lit."""
        assert cooling_shift((0.5, 0.5, 0.5), 1.0, EffectType.BURST) == pytest.approx(
            (0.5, 0.5, 0.5)
        )

    def test_cooling_shifts_toward_red(self):
        """Dim embers gain red and lose blue."""
        r, g, b = cooling_shift((0.5, 0.5, 0.5), 0.0, EffectType.WILLOW)
        assert r == pytest.approx(0.8)
        assert g == pytest.approx(0.3)
        assert b == pytest.approx(0.1)

    def test_cooling_only_for_burst_and_willow(self):
        """Other effects keep their color."""
        assert cooling_shift((0.5, 0.5, 0.5), 0.0, EffectType.RING) == (0.5, 0.5, 0.5)

    def test_shade_saturates(self):
        """Brightness can raise but never exceed 1."""
        assert shade((0.8, 0.4, 0.2), 0.5, 10.0) == pytest.approx((0.8, 0.4, 0.2))
        assert shade((0.8, 0.4, 0.2), 0.5, 1.0) == pytest.approx((0.4, 0.2, 0.1))

    def test_shade_array_matches_scalar(self):
        """The vectorized shade matches the scalar version."""
        colors = np.array([[0.8, 0.4, 0.2], [1.0, 1.0, 1.0]])
        alpha = np.array([0.5, 0.25])
        result = shade_array(colors, alpha, 2.0)
        assert tuple(result[0]) == pytest.approx(shade((0.8, 0.4, 0.2), 0.5, 2.0))
        assert tuple(result[1]) == pytest.approx(shade((1.0, 1.0, 1.0), 0.25, 2.0))
