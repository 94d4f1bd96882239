#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Effect instances: one placed firework on the show timeline.
"""
# pylint: disable=no-member
import math
import uuid

from traitlets import Float, HasTraits, TraitError, default, validate

from pyroshow.traits import ColorSchemeTrait, ColorTrait, EffectTypeTrait, \
        UseEnumCaseless, Vec3Trait, WriteOnceUnicode
from pyroshow.types import EffectType, ShellSize


# Traits which define what an instance looks like. Changing any of
# them invalidates simulated state.
IDENTITY_TRAITS = ('effect_type', 'color', 'palette', 'origin', 'shell_size')

# Traits which only move the instance in time
TIMING_TRAITS = ('start_time', 'duration')


class EffectInstance(HasTraits):
    """
    A placed firework: what it is, where it bursts and when.

    Parameters are validated on assignment, so an invalid instance
    can never reach the simulation. Unknown effect types become
    bursts rather than failing.
    """

    instance_id = WriteOnceUnicode()
    effect_type = EffectTypeTrait()
    origin = Vec3Trait()
    start_time = Float(default_value=0.0)
    duration = Float(default_value=2.0, min=0.0)

    # None selects the effect's stock color and palette
    color = ColorTrait(default_value=None, allow_none=True)
    palette = ColorSchemeTrait(minlen=1, default_value=None, allow_none=True)

    # None selects the shell's stock caliber
    shell_size = UseEnumCaseless(ShellSize, default_value=None, allow_none=True)

    def __init__(self, effect_type=EffectType.BURST, origin=(0.0, 0.0, 0.0),
                 start_time: float=0.0, duration: float=2.0, **kwargs):
        super(EffectInstance, self).__init__(effect_type=effect_type, origin=origin,
                                             start_time=start_time, duration=duration,
                                             **kwargs)


    @default('instance_id')
    def _instance_id_default(self):
        return uuid.uuid4().hex


    @validate('start_time', 'duration')
    def _check_finite(self, proposal):
        if not math.isfinite(proposal['value']):
            raise TraitError('%s must be finite, got %r' % (
                proposal['trait'].name, proposal['value']))
        return proposal['value']


    @property
    def end_time(self) -> float:
        """Nominal end of the effect, excluding its tail."""
        return self.start_time + self.duration


    @property
    def identity(self) -> tuple:
        """
        A hashable summary of everything that determines how the
        instance looks
        """
        palette = None
        if self.palette is not None:
            palette = tuple(c.html for c in self.palette)
        color = self.color.html if self.color is not None else None
        return (self.instance_id, self.effect_type, color, palette,
                self.origin, self.shell_size)


    def __repr__(self):
        return '%s(id=%s, type=%s, origin=%s, start=%.3f, duration=%.3f)' % (
            self.__class__.__name__, self.instance_id, self.effect_type.value,
            self.origin, self.start_time, self.duration)
