# pylint: disable=invalid-name, too-many-instance-attributes, too-many-function-args
"""
Base classes for firework effect generators.

Every generator belongs to one of two strategies. Incremental effects
keep a live particle set in an explicit EffectState and advance it
through the physics kernel frame by frame. Closed-form effects sample
their initial conditions once and compute every particle directly
from the elapsed time, so they can be evaluated at any instant.
"""
import math

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple

import numpy as np

from traitlets import Float, HasTraits, Instance

from pyroshow.color import cooling_shift, fade_curve, shade, shade_array, \
        to_rgb_float
from pyroshow.config import EngineConfig
from pyroshow.log import Log
from pyroshow.physics import Particle, integrate, filter_alive
from pyroshow.types import EffectType, RenderableParticle, Strategy
from pyroshow.util import camel_to_snake, seeded_rng


_EffectMeta = NamedTuple('_EffectMeta', [('display_name', str), ('description', str),
                                         ('author', str), ('version', str)])


class EffectMeta(_EffectMeta, Instance):

    read_only = True
    allow_none = False

    def __init__(self, display_name, description, author, version, *args, **kwargs):
        super(EffectMeta, self).__init__(klass=_EffectMeta, \
            args=(display_name, description, author, version), *args, **kwargs)


class Effect(HasTraits):
    """
    Base class for effect generators.

    A generator is bound to one EffectInstance. Configurable
    constants are traits tagged config=True.
    """

    # traits
    meta = EffectMeta('_unknown_', 'Unimplemented', 'Unknown', '0')

    size_scale = Float(default_value=1.0, min=0.0).tag(config=True)

    effect_type: ClassVar[EffectType] = None
    strategy: ClassVar[Strategy] = None

    # how long particles outlive the nominal duration with stock traits
    stock_tail_lifetime: ClassVar[float] = 0.0

    # True when particles are emitted until the duration ends rather
    # than all at the burst
    continuous_emission: ClassVar[bool] = False

    default_color: ClassVar[str] = '#ffffff'
    default_palette: ClassVar[tuple] = ()

    def __init__(self, instance, config: EngineConfig=None, *args, **kwargs):
        self.instance = instance
        self.config = config if config is not None else EngineConfig()

        self._logger = Log.get('pyroshow.fx.%s' % camel_to_snake(self.__class__.__name__))
        super(Effect, self).__init__(*args, **kwargs)

        self.color = self._resolve_color()
        self.palette = self._resolve_palette()


    def _resolve_color(self) -> tuple:
        if self.instance.color is not None:
            return self.instance.color.rgb
        # a palette alone also sets the main color
        if self.instance.palette:
            return self.instance.palette[0].rgb
        return to_rgb_float(self.default_color)


    def _resolve_palette(self) -> list:
        if self.instance.palette is not None:
            return [c.rgb for c in self.instance.palette]
        if self.default_palette:
            if self.instance.color is not None:
                return [self.color] + [to_rgb_float(c) for c in self.default_palette[1:]]
            return [to_rgb_float(c) for c in self.default_palette]
        return [self.color]


    def rng(self) -> np.random.Generator:
        """
        A fresh generator seeded from the instance identifier, so
        every sampling pass draws the same numbers
        """
        return seeded_rng(self.instance.instance_id, self.effect_type.value)


    def longest_burn(self) -> float:
        """
        Longest time a particle can stay lit after it is emitted
        """
        return 0.0


    @property
    def tail_lifetime(self) -> float:
        """
        Time past the nominal duration during which particles may still
        be lit. Never shorter than the stock tail, and lengthened when
        the traits make particles burn longer than it covers.
        """
        needed = self.longest_burn()
        if not self.continuous_emission:
            needed -= max(0.0, self.instance.duration)
        return max(self.stock_tail_lifetime, needed)


    @property
    def total_time(self) -> float:
        """
        Time after start at which the effect is fully retired
        """
        return max(0.0, self.instance.duration) + self.tail_lifetime


    @property
    def origin(self) -> tuple:
        return self.instance.origin


    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.instance)



@dataclass
class EffectState:
    """
    Live state of an incremental effect, owned by one runner
    """

    rng: np.random.Generator
    particles: list = field(default_factory=list)
    spawned: bool = False
    spawn_accumulator: float = 0.0
    spiral_time: float = 0.0
    elapsed: float = 0.0


class IncrementalEffect(Effect):
    """
    Effect whose live particle set is advanced frame by frame.

    The state is never stored on the generator; callers create it
    with create_state() and pass it to every advance() and render().
    Concurrent advance() calls on the same state are not supported.
    """

    strategy = Strategy.INCREMENTAL

    # size multiplier applied when rendering
    render_scale: ClassVar[float] = 12.0

    def create_state(self) -> EffectState:
        """
        A fresh, empty state seeded from the instance
        """
        return EffectState(rng=self.rng())


    @abstractmethod
    def emit(self, state: EffectState, dt: float):
        """
        Append newly emitted particles to the state. Called before
        integration on every advance while the effect is emitting.

        :param state: the live state
        :param dt: elapsed time of this step
        """


    def before_integrate(self, particle: Particle, dt: float):
        """
        Hook to adjust a particle before the kernel integrates it
        """


    def advance(self, state: EffectState, dt: float, emitting: bool=True) -> EffectState:
        """
        Advance the live particle set by dt seconds

        :param state: the live state
        :param dt: elapsed time since the last advance; negative
                   values are treated as zero
        :param emitting: False once the nominal duration has passed,
                         which stops new emissions

        :return: the state
        """
        dt = max(0.0, float(dt))
        if emitting:
            self.emit(state, dt)

        gravity = self.config.gravity
        for particle in state.particles:
            self.before_integrate(particle, dt)
            integrate(particle, dt, gravity)

        state.particles = filter_alive(state.particles)
        state.elapsed += dt
        return state


    def particle_alpha(self, particle: Particle) -> float:
        return fade_curve(particle.life_fraction, self.effect_type)


    def render(self, state: EffectState, brightness: float=1.0) -> list:
        """
        Convert the live particles to renderable particles

        :param state: the live state
        :param brightness: zoom compensation multiplier

        :return: list of RenderableParticle
        """
        size_boost = math.sqrt(max(brightness, 0.0)) * self.render_scale * self.size_scale
        output = []
        for particle in state.particles:
            alpha = self.particle_alpha(particle)
            color = shade(cooling_shift(particle.color, alpha, self.effect_type),
                          alpha, brightness)
            output.append(RenderableParticle(
                position=tuple(particle.position),
                color=color,
                alpha=alpha,
                size=particle.size * alpha * size_boost))
        return output



class ClosedFormEffect(Effect):
    """
    Effect computed directly from elapsed time.

    Initial conditions are sampled once from the instance seed and
    cached. evaluate() has no side effects, so the same relative time
    always yields the same particles, and the number of particles is
    constant while the effect is active: particles which are not lit
    report alpha 0 instead of being removed.
    """

    strategy = Strategy.CLOSED_FORM

    star_size = Float(default_value=0.12, min=0.0).tag(config=True)

    def __init__(self, *args, **kwargs):
        super(ClosedFormEffect, self).__init__(*args, **kwargs)
        self._stars = None
        self.observe(self._config_changed)


    def _config_changed(self, change):
        self._stars = None


    @property
    def stars(self):
        """
        The sampled initial conditions
        """
        if self._stars is None:
            self._stars = self.sample(self.rng())
        return self._stars


    @property
    def particle_count(self) -> int:
        return len(self.positions(self.stars, 0.0))


    @abstractmethod
    def sample(self, rng: np.random.Generator):
        """
        Sample the initial conditions

        :param rng: seeded generator
        :return: an effect specific record of arrays
        """


    @abstractmethod
    def positions(self, stars, t: float) -> np.ndarray:
        """
        :return: (N, 3) array of positions at elapsed time t
        """


    @abstractmethod
    def appearance(self, stars, t: float) -> tuple:
        """
        :return: tuple of (colors (N, 3), alpha (N,), brightness (N,))
        """


    def sizes(self, stars, t: float, alpha: np.ndarray) -> np.ndarray:
        return self.star_size * self.size_scale * alpha


    def evaluate(self, relative_time: float, brightness: float=1.0) -> list:
        """
        Particles at an elapsed time since the burst

        :param relative_time: time since start_time
        :param brightness: zoom compensation multiplier

        :return: list of RenderableParticle, empty before the burst
                 and after the effect retires
        """
        if relative_time < 0 or relative_time > self.total_time:
            return []

        stars = self.stars
        t = float(relative_time)
        positions = self.positions(stars, t)
        colors, alpha, boost = self.appearance(stars, t)

        alpha = np.nan_to_num(np.clip(alpha, 0.0, 1.0))
        shaded = shade_array(colors, alpha, boost * brightness)
        sizes = self.sizes(stars, t, alpha) * math.sqrt(max(brightness, 0.0))

        return [RenderableParticle(tuple(pos), tuple(col), a, s)
                for pos, col, a, s in zip(positions.tolist(), shaded.tolist(),
                                          alpha.tolist(), np.broadcast_to(sizes, alpha.shape).tolist())]
