#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Palm Tree - Heavy fronds which rise, then arc over and fall.

Stars leave in a fan around the vertical axis. While rising they
burn bright with light drag; past the rising phase the drag grows
and the fronds dim and fade as they droop.
"""
import math
from dataclasses import dataclass

import numpy as np
from traitlets import Float, Int

from pyroshow.color import palette_lerp
from pyroshow.effect import ClosedFormEffect, EffectMeta
from pyroshow.types import EffectType


@dataclass
class PalmTreeStars:
    """Initial conditions of a palm tree."""

    velocities: np.ndarray
    colors: np.ndarray


def phased_drag_exponent(t: float, rising_phase: float, rising_rate: float,
                         falling_rate: float) -> float:
    """
    Drag exponent which grows at rising_rate until rising_phase and
    at falling_rate afterwards, continuous at the boundary
    """
    if t < rising_phase:
        return t * rising_rate
    return rising_phase * rising_rate + (t - rising_phase) * falling_rate


class PalmTree(ClosedFormEffect):
    """Fan of fronds with separate rising and falling phases."""

    meta = EffectMeta(
        "Palm Tree",
        "Rising fronds which arc over and droop",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.PALM_TREE
    stock_tail_lifetime = 5.0
    default_palette = ('#ffd700', '#ffaa00', '#ff8800', '#ff6600')

    # Configurable traits
    star_count = Int(default_value=100, min=1, max=5000).tag(config=True)
    burn_time = Float(default_value=5.0, min=0.1, max=10.0).tag(config=True)
    rising_phase = Float(default_value=1.5, min=0.0, max=10.0).tag(config=True)
    air_resistance = Float(default_value=0.96, min=0.5, max=1.0).tag(config=True)

    def longest_burn(self):
        return max(self.rising_phase, self.burn_time)

    def sample(self, rng):
        count = self.star_count
        fractions = np.arange(count) / count
        angles = fractions * 2.0 * np.pi + rng.uniform(-0.1, 0.1, count)
        elevation = math.pi / 5 + rng.uniform(-math.pi / 20, math.pi / 20, count)
        speeds = rng.uniform(6.0, 10.0, count)

        flat = np.cos(elevation) * speeds
        velocities = np.stack((np.cos(angles) * flat, np.sin(elevation) * speeds,
                               np.sin(angles) * flat), axis=1)
        colors = np.array([palette_lerp(self.palette, (s - 6.0) / 4.0) for s in speeds],
                          dtype=np.float64).reshape(count, 3)
        return PalmTreeStars(velocities=velocities, colors=colors)

    def positions(self, stars, t):
        exponent = phased_drag_exponent(t, self.rising_phase, 5.0, 8.0)
        travel = t * self.air_resistance ** exponent
        positions = np.asarray(self.origin) + stars.velocities * travel
        positions[:, 1] += 0.5 * self.config.gravity * t * t
        return positions

    def appearance(self, stars, t):
        count = len(stars.velocities)
        if t < self.rising_phase:
            return stars.colors, np.ones(count), np.full(count, 1.2)

        span = max(self.burn_time - self.rising_phase, 1e-6)
        fall = min(1.0, (t - self.rising_phase) / span)
        return stars.colors, np.full(count, 1.0 - fall), np.full(count, 1.0 - 0.3 * fall)
