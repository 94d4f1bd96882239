#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Effect discovery and dispatch by effect type.
"""
import functools
import inspect

from collections import OrderedDict
from typing import NamedTuple

from pyroshow import fxlib
from pyroshow.config import EngineConfig
from pyroshow.effect import Effect, EffectMeta
from pyroshow.log import Log
from pyroshow.trajectory import TrailConfig, trail_config
from pyroshow.types import EffectType, Strategy


class EffectInfo(NamedTuple):
    """
    Everything known about an effect type without instantiating it
    """
    effect_type: EffectType
    module: str
    clazz: type
    meta: EffectMeta
    strategy: Strategy
    tail_lifetime: float
    trail: TrailConfig
    traits: dict


def _all_subclasses(cls):
    for sub in cls.__subclasses__():
        yield sub
        yield from _all_subclasses(sub)


class EffectRegistry(object):
    """
    The closed set of effect generators, keyed by EffectType.

    Generators are discovered from pyroshow.fxlib. Lookups of a type
    without a generator fall back to the burst.
    """

    def __init__(self):
        self._logger = Log.get('pyroshow.registry')
        self._effects = self._discover_effects()


    def _discover_effects(self) -> OrderedDict:
        infos = OrderedDict()

        exported = {obj for obj in vars(fxlib).values() if inspect.isclass(obj)}
        for obj in _all_subclasses(Effect):
            if obj not in exported or inspect.isabstract(obj) or obj.effect_type is None:
                continue

            if obj.meta.display_name == '_unknown_':
                self._logger.error("Effect %s did not set metadata, skipping", obj.__name__)
                continue

            if obj.effect_type in infos:
                self._logger.error("Effect %s duplicates %s, skipping", obj.__name__,
                                   obj.effect_type.value)
                continue

            infos[obj.effect_type] = EffectInfo(obj.effect_type, obj.__module__, obj, obj.meta,
                                                obj.strategy, obj.stock_tail_lifetime,
                                                trail_config(obj.effect_type), obj.class_traits())

        ordered = OrderedDict((t, infos[t]) for t in EffectType if t in infos)
        self._logger.debug("Loaded effects: %s", ", ".join(t.value for t in ordered))
        return ordered


    @property
    def effect_types(self) -> tuple:
        return tuple(self._effects.keys())


    def info(self, effect_type) -> EffectInfo:
        """
        Get the info for an effect type

        :param effect_type: an EffectType or a name
        :return: the EffectInfo, or the burst's when unknown
        """
        key = EffectType.lookup(effect_type)
        if key not in self._effects:
            self._logger.warning("No effect for '%s', using %s", effect_type,
                                 EffectType.BURST.value)
            key = EffectType.BURST
        return self._effects[key]


    def create(self, instance, config: EngineConfig=None, **traits) -> Effect:
        """
        Instantiate the generator for an instance

        :param instance: the EffectInstance
        :param config: engine configuration
        :param traits: initial values for the generator's traits

        :return: the generator
        """
        return self.info(instance.effect_type).clazz(instance, config, **traits)


    def __iter__(self):
        return iter(self._effects.values())


    def __len__(self):
        return len(self._effects)


    def __contains__(self, effect_type):
        return EffectType.lookup(effect_type) in self._effects


@functools.lru_cache(maxsize=1)
def default_registry() -> EffectRegistry:
    """
    The shared registry of built-in effects
    """
    return EffectRegistry()
