#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Fountain - A ground gerb spraying a steady column of sparks.

Sparks are emitted continuously at a fixed rate for as long as the
effect runs, inside a narrow cone around the vertical axis.
"""
import math

from traitlets import Float

from pyroshow.effect import EffectMeta, IncrementalEffect
from pyroshow.physics import create_particle, random_in_cone
from pyroshow.types import EffectType


class Fountain(IncrementalEffect):
    """Continuous upward cone of sparks."""

    meta = EffectMeta(
        "Fountain",
        "Steady upward spray of sparks",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.FOUNTAIN
    stock_tail_lifetime = 3.0
    continuous_emission = True
    default_color = '#ff6600'
    render_scale = 14.0

    # Configurable traits
    rate = Float(default_value=150.0, min=1.0, max=2000.0).tag(config=True)
    cone_angle = Float(default_value=math.pi / 8, min=0.0, max=math.pi / 2).tag(config=True)
    speed = Float(default_value=10.0, min=0.0, max=100.0).tag(config=True)
    life = Float(default_value=2.5, min=0.1, max=10.0).tag(config=True)

    def longest_burn(self):
        return self.life * 1.2

    def emit(self, state, dt):
        interval = 1.0 / self.rate
        state.spawn_accumulator += dt

        rng = state.rng
        while state.spawn_accumulator >= interval:
            state.spawn_accumulator -= interval
            direction = random_in_cone(rng, self.cone_angle)
            speed = self.speed * rng.uniform(0.8, 1.2)
            state.particles.append(create_particle(
                self.origin,
                [d * speed for d in direction],
                self.color,
                life=self.life * rng.uniform(0.8, 1.2),
                size=rng.uniform(0.02, 0.06)))
