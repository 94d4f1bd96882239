#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Strobe - Glittering stars which flash on and off.

Each star blinks at its own frequency with a short duty cycle
instead of fading smoothly, producing a hard flicker.
"""
from dataclasses import dataclass

import numpy as np
from traitlets import Float, Int

from pyroshow.effect import ClosedFormEffect, EffectMeta
from pyroshow.physics import ballistic_positions, sphere_directions
from pyroshow.types import EffectType


@dataclass
class StrobeStars:
    """Initial conditions of a strobe break."""

    velocities: np.ndarray
    frequencies: np.ndarray
    colors: np.ndarray


class Strobe(ClosedFormEffect):
    """Flickering stars gated by a per-star duty cycle."""

    meta = EffectMeta(
        "Strobe",
        "Stars flashing on and off at their own rate",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.STROBE
    stock_tail_lifetime = 2.5
    default_palette = ('#ffffff', '#00ffff', '#ff00ff')

    # Configurable traits
    star_count = Int(default_value=125, min=1, max=5000).tag(config=True)
    burn_time = Float(default_value=2.5, min=0.1, max=10.0).tag(config=True)
    min_frequency = Float(default_value=6.0, min=0.1, max=60.0).tag(config=True)
    max_frequency = Float(default_value=12.0, min=0.1, max=60.0).tag(config=True)
    duty_cycle = Float(default_value=0.3, min=0.0, max=1.0).tag(config=True)
    air_resistance = Float(default_value=0.97, min=0.5, max=1.0).tag(config=True)
    drag_rate = Float(default_value=6.0, min=0.0, max=20.0).tag(config=True)

    def longest_burn(self):
        return self.burn_time

    def sample(self, rng):
        count = self.star_count
        directions = sphere_directions(rng, count)
        speeds = rng.uniform(3.0, 8.0, count)
        frequencies = rng.uniform(self.min_frequency, self.max_frequency, count)

        palette = np.array(self.palette, dtype=np.float64)
        colors = palette[np.arange(count) % len(palette)]
        return StrobeStars(velocities=directions * speeds[:, np.newaxis],
                           frequencies=frequencies, colors=colors)

    def positions(self, stars, t):
        return ballistic_positions(self.origin, stars.velocities, t,
                                   self.air_resistance, self.drag_rate, self.config.gravity)

    def gate(self, stars, t) -> np.ndarray:
        """1.0 where a star is in the lit part of its cycle, else 0.0"""
        return (np.mod(t * stars.frequencies, 1.0) < self.duty_cycle).astype(np.float64)

    def appearance(self, stars, t):
        remaining = max(0.0, 1.0 - t / self.burn_time)
        alpha = remaining * self.gate(stars, t)
        return stars.colors, alpha, np.ones(len(alpha))
