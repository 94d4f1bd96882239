#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Burst - A classic spherical break.

Every star is ejected at once from the burst point in a uniformly
random direction. Stars fall under gravity, fade sharply, and cool
toward red embers as they burn out.
"""

from traitlets import Float, Int

from pyroshow.effect import EffectMeta, IncrementalEffect
from pyroshow.physics import create_particle, random_direction
from pyroshow.types import EffectType


class Burst(IncrementalEffect):
    """Spherical burst of stars emitted in a single batch."""

    meta = EffectMeta(
        "Burst",
        "Spherical break which cools to embers",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.BURST
    stock_tail_lifetime = 2.0
    default_color = '#ffaa44'
    render_scale = 12.0

    # Configurable traits
    particle_count = Int(default_value=800, min=1, max=5000).tag(config=True)
    speed = Float(default_value=15.0, min=0.0, max=100.0).tag(config=True)
    life = Float(default_value=2.0, min=0.1, max=10.0).tag(config=True)

    def longest_burn(self):
        return self.life * 1.4

    def emit(self, state, dt):
        if state.spawned:
            return
        state.spawned = True

        rng = state.rng
        for _ in range(self.particle_count):
            direction = random_direction(rng)
            speed = self.speed * rng.uniform(0.8, 1.2)
            state.particles.append(create_particle(
                self.origin,
                [d * speed for d in direction],
                self.color,
                life=self.life * rng.uniform(0.8, 1.4),
                size=rng.uniform(0.03, 0.10)))
