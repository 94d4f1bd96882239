#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Crossette - Stars which split into secondary bursts.

A small primary break burns out at a fixed break time, at which
point several secondary bursts ignite around the primary sphere.
Secondary stars exist from the start but stay transparent until
the break, so the particle count never changes.
"""
from dataclasses import dataclass

import numpy as np
from traitlets import Float, Int

from pyroshow.effect import ClosedFormEffect, EffectMeta
from pyroshow.physics import ballistic_positions, sphere_directions
from pyroshow.types import EffectType


@dataclass
class CrossetteStars:
    """Initial conditions of a crossette."""

    primary_velocities: np.ndarray
    burst_origins: np.ndarray
    secondary_velocities: np.ndarray
    secondary_origins: np.ndarray
    secondary_colors: np.ndarray


class Crossette(ClosedFormEffect):
    """Primary break followed by synchronized secondary bursts."""

    meta = EffectMeta(
        "Crossette",
        "Primary break splitting into secondary bursts",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.CROSSETTE
    stock_tail_lifetime = 3.5
    default_palette = ('#e91e63', '#9c27b0', '#673ab7')

    # Configurable traits
    primary_count = Int(default_value=40, min=1, max=1000).tag(config=True)
    burst_count = Int(default_value=5, min=1, max=50).tag(config=True)
    burst_size = Int(default_value=25, min=1, max=500).tag(config=True)
    break_time = Float(default_value=1.0, min=0.05, max=5.0).tag(config=True)
    burn_time = Float(default_value=3.5, min=0.1, max=10.0).tag(config=True)

    def longest_burn(self):
        return max(self.break_time, self.burn_time)

    def sample(self, rng):
        primary = sphere_directions(rng, self.primary_count) \
                * rng.uniform(4.0, 7.0, self.primary_count)[:, np.newaxis]

        burst_dirs = sphere_directions(rng, self.burst_count)
        distances = rng.uniform(5.0, 8.0, self.burst_count)
        burst_origins = np.asarray(self.origin) + burst_dirs * distances[:, np.newaxis]

        total = self.burst_count * self.burst_size
        secondary = sphere_directions(rng, total) \
                * rng.uniform(2.0, 4.0, total)[:, np.newaxis]
        burst_index = np.repeat(np.arange(self.burst_count), self.burst_size)

        palette = np.array(self.palette, dtype=np.float64)
        if len(palette) > 1:
            color_index = 1 + burst_index % (len(palette) - 1)
        else:
            color_index = np.zeros(total, dtype=int)

        return CrossetteStars(primary_velocities=primary,
                              burst_origins=burst_origins,
                              secondary_velocities=secondary,
                              secondary_origins=burst_origins[burst_index],
                              secondary_colors=palette[color_index])

    def positions(self, stars, t):
        primary = ballistic_positions(self.origin, stars.primary_velocities, t,
                                      0.97, 5.0, self.config.gravity)
        ts = max(0.0, t - self.break_time)
        secondary = ballistic_positions(stars.secondary_origins, stars.secondary_velocities,
                                        ts, 0.95, 7.0, self.config.gravity)
        return np.concatenate((primary, secondary))

    def secondary_alpha(self, t) -> float:
        if t < self.break_time:
            return 0.0
        span = max(self.burn_time - self.break_time, 1e-6)
        return max(0.0, 1.0 - (t - self.break_time) / span)

    def appearance(self, stars, t):
        num_primary = len(stars.primary_velocities)
        num_secondary = len(stars.secondary_velocities)

        primary_alpha = max(0.0, 1.0 - t / self.break_time)
        alpha = np.concatenate((np.full(num_primary, primary_alpha),
                                np.full(num_secondary, self.secondary_alpha(t))))

        primary_colors = np.tile(np.asarray(self.palette[0], dtype=np.float64),
                                 (num_primary, 1))
        colors = np.concatenate((primary_colors, stars.secondary_colors))
        return colors, alpha, np.ones(len(alpha))
