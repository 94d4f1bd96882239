#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Willow - Long burning stars which droop into hanging trails.

Stars break mostly upward, then their horizontal motion is damped
and an extra downward pull grows with age, so they sag like willow
branches. A minimum alpha keeps the falling embers visible.
"""

from traitlets import Float, Int

from pyroshow.effect import EffectMeta, IncrementalEffect
from pyroshow.physics import create_particle, random_direction
from pyroshow.types import EffectType


class Willow(IncrementalEffect):
    """Drooping long-burn stars with a visibility floor."""

    meta = EffectMeta(
        "Willow",
        "Drooping golden trails that hang in the sky",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.WILLOW
    stock_tail_lifetime = 4.2
    default_color = '#ffcc44'
    render_scale = 15.0

    # Configurable traits
    particle_count = Int(default_value=500, min=1, max=5000).tag(config=True)
    speed = Float(default_value=12.0, min=0.0, max=100.0).tag(config=True)
    life = Float(default_value=3.5, min=0.1, max=10.0).tag(config=True)
    droop = Float(default_value=3.0, min=0.0, max=20.0).tag(config=True)
    damping = Float(default_value=0.98, min=0.5, max=1.0).tag(config=True)
    min_alpha = Float(default_value=0.15, min=0.0, max=1.0).tag(config=True)

    def longest_burn(self):
        return self.life * 1.2

    def emit(self, state, dt):
        if state.spawned:
            return
        state.spawned = True

        rng = state.rng
        for _ in range(self.particle_count):
            x, y, z = random_direction(rng)
            y = abs(y) * 0.7 + 0.3
            speed = self.speed * rng.uniform(0.6, 1.0)
            state.particles.append(create_particle(
                self.origin,
                [x * speed, y * speed, z * speed],
                self.color,
                life=self.life * rng.uniform(0.8, 1.2),
                size=rng.uniform(0.025, 0.10)))

    def before_integrate(self, particle, dt):
        # damping is defined per 1/60 s frame
        damp = self.damping ** (dt * 60.0)
        vel = particle.velocity
        vel[0] *= damp
        vel[2] *= damp

        progress = particle.age / particle.max_life if particle.max_life > 0 else 1.0
        vel[1] -= progress * progress * self.droop * dt * 15.0

    def particle_alpha(self, particle):
        return max(self.min_alpha, super().particle_alpha(particle))
