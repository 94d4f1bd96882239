#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Chrysanthemum - A dense sphere of stars layered by color.

Faster stars travel further and take colors from later in the
palette, so the break shows concentric shells of color. Stars
brighten slightly while young and fade linearly over their burn.
"""
from dataclasses import dataclass

import numpy as np
from traitlets import Float, Int

from pyroshow.color import palette_layer
from pyroshow.effect import ClosedFormEffect, EffectMeta
from pyroshow.physics import ballistic_positions, sphere_directions
from pyroshow.types import EffectType


@dataclass
class ChrysanthemumStars:
    """Initial conditions of a chrysanthemum break."""

    velocities: np.ndarray
    colors: np.ndarray


class Chrysanthemum(ClosedFormEffect):
    """Multi-layer spherical break with speed-banded colors."""

    meta = EffectMeta(
        "Chrysanthemum",
        "Dense sphere with concentric color layers",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.CHRYSANTHEMUM
    stock_tail_lifetime = 3.5
    default_palette = ('#ff6b35', '#f7931e', '#ffd23f', '#06ffa5', '#3b82f6')

    # Configurable traits
    star_count = Int(default_value=250, min=1, max=5000).tag(config=True)
    burn_time = Float(default_value=3.5, min=0.1, max=10.0).tag(config=True)
    min_speed = Float(default_value=5.0, min=0.0, max=100.0).tag(config=True)
    max_speed = Float(default_value=13.0, min=0.0, max=100.0).tag(config=True)
    air_resistance = Float(default_value=0.98, min=0.5, max=1.0).tag(config=True)
    drag_rate = Float(default_value=5.0, min=0.0, max=20.0).tag(config=True)

    def longest_burn(self):
        return self.burn_time

    def sample(self, rng):
        count = self.star_count
        directions = sphere_directions(rng, count)
        speeds = rng.uniform(self.min_speed, self.max_speed, count)

        span = max(self.max_speed - self.min_speed, 1e-9)
        colors = np.array([palette_layer(self.palette, (s - self.min_speed) / span)
                           for s in speeds], dtype=np.float64).reshape(count, 3)

        return ChrysanthemumStars(velocities=directions * speeds[:, np.newaxis],
                                  colors=colors)

    def positions(self, stars, t):
        return ballistic_positions(self.origin, stars.velocities, t,
                                   self.air_resistance, self.drag_rate, self.config.gravity)

    def appearance(self, stars, t):
        count = len(stars.velocities)
        remaining = max(0.0, 1.0 - t / self.burn_time)
        alpha = np.full(count, remaining)
        boost = np.full(count, 1.0 + remaining * 0.5)
        return stars.colors, alpha, boost
