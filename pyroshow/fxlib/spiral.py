#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Spiral - A spinning wheel that sprays a corkscrew of sparks.

The emission direction sweeps around the forward (z) axis at a fixed
angular speed while sparks are emitted at a fixed rate, so the
stream winds into a helix as it travels forward.
"""
import math

from traitlets import Float

from pyroshow.effect import EffectMeta, IncrementalEffect
from pyroshow.physics import create_particle
from pyroshow.types import EffectType


class Spiral(IncrementalEffect):
    """Corkscrew spray from a sweeping emission direction."""

    meta = EffectMeta(
        "Spiral",
        "Corkscrew spray from a spinning emitter",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.SPIRAL
    stock_tail_lifetime = 3.6
    continuous_emission = True
    default_color = '#4488ff'
    render_scale = 18.0

    # Configurable traits
    rate = Float(default_value=200.0, min=1.0, max=2000.0).tag(config=True)
    angular_speed = Float(default_value=2.0, min=0.0, max=20.0).tag(config=True)
    speed = Float(default_value=8.0, min=0.0, max=100.0).tag(config=True)
    life = Float(default_value=3.0, min=0.1, max=10.0).tag(config=True)

    def longest_burn(self):
        return self.life * 1.2

    def _direction(self, spiral_time, push):
        # the angle sweeps in the x/y plane and push carries the stream
        # forward along z; the vector is not normalized
        angle = spiral_time * self.angular_speed * 2.0 * math.pi
        return (math.cos(angle), math.sin(angle), push)

    def emit(self, state, dt):
        interval = 1.0 / self.rate
        state.spawn_accumulator += dt

        rng = state.rng
        while state.spawn_accumulator >= interval:
            state.spawn_accumulator -= interval
            state.spiral_time += interval

            direction = self._direction(state.spiral_time, 0.8 + rng.random() * 0.4)
            speed = self.speed * rng.uniform(0.8, 1.2)
            state.particles.append(create_particle(
                self.origin,
                [d * speed for d in direction],
                self.color,
                life=self.life * rng.uniform(0.8, 1.2),
                size=rng.uniform(0.02, 0.07)))
