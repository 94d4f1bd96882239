"""
Common types and enumerations which are used by everything.
"""

from enum import Enum
from typing import NamedTuple


Vec3 = tuple[float, float, float]


class Strategy(Enum):
    """
    How an effect produces its particles over time
    """
    # live particle set, advanced frame by frame
    INCREMENTAL = 'incremental'
    # positions computed directly from elapsed time
    CLOSED_FORM = 'closed_form'


class EffectType(Enum):
    """
    All known firework effect kinds.
    """
    BURST = 'burst'
    FOUNTAIN = 'fountain'
    SPIRAL = 'spiral'
    WILLOW = 'willow'
    CHRYSANTHEMUM = 'chrysanthemum'
    RING = 'ring'
    STROBE = 'strobe'
    CROSSETTE = 'crossette'
    PALM_TREE = 'palm_tree'
    PEONY_SHELL = 'peony_shell'
    CHRYSANTHEMUM_SHELL = 'chrysanthemum_shell'
    WILLOW_SHELL = 'willow_shell'
    PALM_SHELL = 'palm_shell'
    CROSSETTE_SHELL = 'crossette_shell'
    KAMURO_SHELL = 'kamuro_shell'

    @property
    def is_shell(self) -> bool:
        return self.value.endswith('_shell')

    @classmethod
    def lookup(cls, name) -> 'EffectType':
        """
        Find an effect type by name, value or alias (case insensitive)

        :param name: the name to look up
        :return: the EffectType, or None if it is unknown
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None

        key = name.strip().lower().replace('-', '_').replace(' ', '_')
        if key.startswith('effecttype.'):
            key = key[len('effecttype.'):]
        key = _ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        return None


# Names used for the same effects by show files and the shell catalog
_ALIASES = {
    'palmtree': 'palm_tree',
    'palm': 'palm_tree',
    'peony': 'peony_shell',
    'peony_4inch': 'peony_shell',
    'chrysanthemum_6inch': 'chrysanthemum_shell',
    'willow_6inch': 'willow_shell',
    'palm_8inch': 'palm_shell',
    'crossette_6inch': 'crossette_shell',
    'kamuro': 'kamuro_shell',
    'kamuro_8inch': 'kamuro_shell',
}


class ShellSize(Enum):
    """
    Shell caliber tiers which select count, burn time and velocity
    """
    SMALL = 'small'
    MEDIUM = 'medium'
    LARGE = 'large'


class ArcProfile(Enum):
    """
    Shape of a launch trail's vertical arc
    """
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'
    CORKSCREW = 'corkscrew'


class RenderableParticle(NamedTuple):
    """
    A particle as handed to a renderer, with color already
    faded, cooled and brightness compensated.
    """
    position: Vec3
    color: tuple
    alpha: float
    size: float


class TrailPoint(NamedTuple):
    """
    One point of the visible launch trail slice
    """
    position: Vec3
    alpha: float
    color: tuple
