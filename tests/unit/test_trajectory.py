#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Unit tests for launch trajectories and trail windows.
"""

from __future__ import annotations

import math

import pytest

from pyroshow.trajectory import (
    TRAIL_CONFIGS,
    compute_trajectory,
    ground_launch_position,
    launch_angle,
    launch_progress,
    trail_config,
    trail_progress,
    visible_trail_window,
    wind_strength,
)
from pyroshow.types import ArcProfile, EffectType


# ─────────────────────────────────────────────────────────────────────────────
# Trail configs
# ─────────────────────────────────────────────────────────────────────────────


class TestTrailConfig:
    """Tests for the static trail table."""

    def test_every_type_has_config(self):
        """All effect types have a trail entry."""
        assert set(TRAIL_CONFIGS) == set(EffectType)

    def test_known_values(self):
        """Spot check the table."""
        assert trail_config(EffectType.SPIRAL).arc_profile is ArcProfile.CORKSCREW
        assert trail_config(EffectType.PALM_SHELL).launch_lead_time == pytest.approx(4.8)
        assert trail_config(EffectType.FOUNTAIN).arc_profile is ArcProfile.LOW

    def test_fallback_is_burst(self):
        """Unknown keys fall back to the burst trail."""
        assert trail_config(None) == TRAIL_CONFIGS[EffectType.BURST]


# ─────────────────────────────────────────────────────────────────────────────
# Trajectories
# ─────────────────────────────────────────────────────────────────────────────


class TestComputeTrajectory:
    """Tests for the curved launch path."""

    START = (2.0, -5.0, 1.0)
    END = (0.0, 30.0, 0.0)

    @pytest.mark.parametrize("profile", list(ArcProfile))
    def test_endpoints_exact(self, profile):
        """The path leaves the launch point and ends at the burst point."""
        path = compute_trajectory(self.START, self.END, profile, 30, wind=(0.2, -0.1))
        assert len(path) == 31
        assert path[0] == pytest.approx(self.START)
        assert path[-1] == pytest.approx(self.END)

    def test_segments_respected(self):
        """segments + 1 points are returned."""
        assert len(compute_trajectory(self.START, self.END, ArcProfile.HIGH, 10)) == 11

    def test_high_arc_rises_above_linear(self):
        """High arcs lift above the straight line."""
        path = compute_trajectory(self.START, self.END, ArcProfile.HIGH, 30)
        mid = path[15]
        linear_y = (self.START[1] + self.END[1]) / 2
        assert mid[1] > linear_y

    def test_low_arc_lifts_less(self):
        """Low arcs lift less than high arcs."""
        high = compute_trajectory(self.START, self.END, ArcProfile.HIGH, 30)
        low = compute_trajectory(self.START, self.END, ArcProfile.LOW, 30)
        assert low[15][1] < high[15][1]

    def test_corkscrew_deviates_horizontally(self):
        """Corkscrew paths swing away from the straight line."""
        straight = compute_trajectory(self.START, self.END, ArcProfile.HIGH, 30)
        screw = compute_trajectory(self.START, self.END, ArcProfile.CORKSCREW, 30)
        assert any(abs(a[0] - b[0]) > 0.05 for a, b in zip(straight, screw))

    def test_wind_drifts_path(self):
        """Wind moves the interior of the path sideways."""
        calm = compute_trajectory(self.START, self.END, ArcProfile.HIGH, 30)
        windy = compute_trajectory(self.START, self.END, ArcProfile.HIGH, 30, wind=(0.25, 0.0))
        assert windy[15][0] > calm[15][0]
        assert windy[-1] == calm[-1]


class TestWind:
    """Tests for pseudo-wind."""

    def test_deterministic(self):
        """The same type and start give the same wind."""
        start = (1.5, -5.0, 2.0)
        assert wind_strength(EffectType.BURST, start) == wind_strength(EffectType.BURST, start)

    def test_range(self):
        """Wind stays within its bounds, including negative seeds."""
        for x in range(-20, 21, 3):
            wind_x, wind_z = wind_strength(EffectType.RING, (x * 0.7, -5.0, x * 0.3))
            assert -0.75 < wind_x < 0.25
            assert -0.5 < wind_z < 1.0 / 6.0

    def test_origin_start(self):
        """A launch from the origin has the baseline wind."""
        assert wind_strength(EffectType.BURST, (0.0, -5.0, 0.0)) == pytest.approx(
            (-0.25, -1.0 / 6.0)
        )


class TestLaunch:
    """Tests for launch positions and progress."""

    def test_launch_progress_clamped(self):
        """Progress is clamped to 0-1."""
        assert launch_progress(0.0, 1.0, 2.0) == 0.0
        assert launch_progress(2.0, 1.0, 2.0) == pytest.approx(0.5)
        assert launch_progress(5.0, 1.0, 2.0) == 1.0

    def test_trail_progress_from_burst(self):
        """Trail progress counts back from the burst time."""
        assert trail_progress(5.0, 5.0, 0.8) == 1.0
        assert trail_progress(4.6, 5.0, 0.8) == pytest.approx(0.5)
        assert trail_progress(3.0, 5.0, 0.8) == 0.0
        assert trail_progress(4.9, 5.0, 0.0) == 0.0

    def test_ground_launch_position(self):
        """Launches start at ground level near the burst point."""
        x, y, z = ground_launch_position((10.0, 40.0, -3.0), "shell-1")
        assert y == -5.0
        assert abs(x - 10.0) <= 2.0
        assert abs(z + 3.0) <= 2.0

    def test_ground_launch_is_stable(self):
        """The launch offset is a function of the identifier."""
        assert ground_launch_position((0, 30, 0), "abc") == ground_launch_position((0, 30, 0), "abc")

    def test_custom_ground_level(self):
        """Ground level is configurable."""
        assert ground_launch_position((0, 30, 0), "abc", ground_level=0.0)[1] == 0.0

    def test_launch_angle_vertical(self):
        """A straight up launch is 90 degrees."""
        assert launch_angle((0, 0, 0), (0, 10, 0)) == pytest.approx(90.0)


# ─────────────────────────────────────────────────────────────────────────────
# Trail window
# ─────────────────────────────────────────────────────────────────────────────


class TestVisibleTrailWindow:
    """Tests for the visible trail slice."""

    PATH = [(0.0, float(i), 0.0) for i in range(31)]

    def test_no_progress_is_empty(self):
        """Nothing is visible before launch."""
        assert visible_trail_window(self.PATH, 0.0) == []

    def test_too_few_points_is_empty(self):
        """A single visible point is not a trail."""
        assert visible_trail_window(self.PATH, 0.01) == []

    def test_window_length(self):
        """At most length + 1 points trail the head."""
        window = visible_trail_window(self.PATH, 0.5, length=8)
        assert len(window) == 9
        assert window[-1][0] == self.PATH[15]

    def test_weights(self):
        """Weights grow as the square root toward the head."""
        window = visible_trail_window(self.PATH, 0.5, length=8)
        weights = [w for _, w in window]
        assert weights[0] == 0.0
        assert weights[-1] == pytest.approx(1.0)
        assert weights[4] == pytest.approx(math.sqrt(0.5))

    def test_full_progress_reaches_burst(self):
        """At progress 1 the head is the burst point."""
        window = visible_trail_window(self.PATH, 1.0, length=8)
        assert window[-1][0] == self.PATH[-1]

    def test_short_head_window(self):
        """Near launch the window is clipped at the first point."""
        window = visible_trail_window(self.PATH, 0.1, length=8)
        assert window[0][0] == self.PATH[0]
        assert len(window) == 4
