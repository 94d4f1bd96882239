#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Ring - A flat halo of stars.

Stars are spaced evenly by angle around a horizontal circle with a
little jitter. Colors run through the palette in angular order, so
a multi-color palette paints a continuous gradient around the ring.
"""
import math
from dataclasses import dataclass

import numpy as np
from traitlets import Float, Int

from pyroshow.color import palette_lerp
from pyroshow.effect import ClosedFormEffect, EffectMeta
from pyroshow.types import EffectType


@dataclass
class RingStars:
    """Initial conditions of a ring."""

    velocities: np.ndarray
    colors: np.ndarray


class Ring(ClosedFormEffect):
    """Horizontal ring with an angular palette gradient."""

    meta = EffectMeta(
        "Ring",
        "Flat halo colored in angular order",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.RING
    stock_tail_lifetime = 3.0
    default_palette = ('#8a2be2', '#4b0082', '#0000ff', '#00bfff')

    # Configurable traits
    star_count = Int(default_value=150, min=1, max=5000).tag(config=True)
    burn_time = Float(default_value=3.0, min=0.1, max=10.0).tag(config=True)
    min_speed = Float(default_value=4.0, min=0.0, max=100.0).tag(config=True)
    max_speed = Float(default_value=5.5, min=0.0, max=100.0).tag(config=True)
    jitter = Float(default_value=0.05, min=0.0, max=math.pi).tag(config=True)
    air_resistance = Float(default_value=0.96, min=0.5, max=1.0).tag(config=True)
    drag_rate = Float(default_value=8.0, min=0.0, max=20.0).tag(config=True)

    def longest_burn(self):
        return self.burn_time

    def sample(self, rng):
        count = self.star_count
        fractions = np.arange(count) / count
        angles = fractions * 2.0 * np.pi + rng.uniform(-self.jitter, self.jitter, count)
        speeds = rng.uniform(self.min_speed, self.max_speed, count)
        lift = rng.uniform(-0.5, 0.5, count)

        velocities = np.stack((np.cos(angles) * speeds, lift, np.sin(angles) * speeds), axis=1)
        colors = np.array([palette_lerp(self.palette, f) for f in fractions],
                          dtype=np.float64).reshape(count, 3)
        return RingStars(velocities=velocities, colors=colors)

    def positions(self, stars, t):
        # drag only acts in the plane of the ring
        drag = self.air_resistance ** (t * self.drag_rate)
        vel = stars.velocities
        positions = np.empty_like(vel)
        positions[:, 0] = self.origin[0] + vel[:, 0] * t * drag
        positions[:, 1] = self.origin[1] + vel[:, 1] * t + 0.5 * self.config.gravity * t * t
        positions[:, 2] = self.origin[2] + vel[:, 2] * t * drag
        return positions

    def appearance(self, stars, t):
        count = len(stars.velocities)
        progress = min(1.0, t / self.burn_time)
        alpha = np.full(count, 1.0 - progress * progress)
        return stars.colors, alpha, np.ones(count)
