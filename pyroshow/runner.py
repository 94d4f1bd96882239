#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Per-instance evaluation and the show preview.

An EffectRunner owns everything derived from one EffectInstance: its
generator, the live state of incremental effects and the cached
launch trajectory. It answers the three per-frame questions of the
renderer: is the instance active, what are its particles, and what
part of its launch trail is visible.

ShowPreview holds the runners of a whole show and evaluates them for
a clock value, optionally in parallel across instances.
"""
import math

from collections import OrderedDict
from concurrent.futures import Executor
from typing import NamedTuple

from wrapt import synchronized

from pyroshow.color import to_rgb_float, zoom_brightness
from pyroshow.config import EngineConfig
from pyroshow.instance import IDENTITY_TRAITS, TIMING_TRAITS, EffectInstance
from pyroshow.log import Log
from pyroshow.registry import EffectRegistry, default_registry
from pyroshow.schedule import ActivityWindow, activity
from pyroshow.trajectory import compute_trajectory, ground_launch_position, \
        trail_config, visible_trail_window, wind_strength
from pyroshow.types import Strategy, TrailPoint


class FrameEntry(NamedTuple):
    """
    The visible state of one instance in a frame
    """
    instance_id: str
    activity: ActivityWindow
    particles: list
    trail: list


class ShowFrame(NamedTuple):
    """
    The visible state of a show at a clock value
    """
    time: float
    entries: list

    @property
    def particle_count(self) -> int:
        return sum(len(entry.particles) for entry in self.entries)


class EffectRunner(object):
    """
    Drives one effect instance.

    Closed-form effects are evaluated directly at any clock value.
    Incremental effects are advanced by the real clock delta during
    forward playback; a backward jump, or a forward jump larger than
    max_frame_step, discards the live set and deterministically
    replays it from the burst in replay_step increments.

    Calls on one runner are serialized; separate runners share no
    mutable state and may be evaluated concurrently.
    """

    def __init__(self, instance: EffectInstance, config: EngineConfig=None,
                 registry: EffectRegistry=None):
        self.instance = instance
        self.config = config if config is not None else EngineConfig()
        self._registry = registry if registry is not None else default_registry()
        self._logger = Log.get('pyroshow.runner')

        self._effect = None
        self._state = None
        self._clock = None
        self._trajectory = None

        self._rebuild()
        instance.observe(self._identity_changed, names=list(IDENTITY_TRAITS))
        instance.observe(self._timing_changed, names=list(TIMING_TRAITS))


    def _rebuild(self):
        self._effect = self._registry.create(self.instance, self.config)
        self._trajectory = None
        self._drop_state()


    def _drop_state(self):
        self._state = None
        self._clock = None


    @synchronized
    def _identity_changed(self, change):
        self._logger.debug('%s: %s changed, resetting', self.instance.instance_id, change.name)
        self._rebuild()


    @synchronized
    def _timing_changed(self, change):
        self._drop_state()


    @property
    def effect(self):
        return self._effect


    @property
    def trail_config(self):
        return trail_config(self.instance.effect_type)


    @property
    def tail_lifetime(self) -> float:
        return self._effect.tail_lifetime


    @property
    def end_time(self) -> float:
        """Clock value after which the instance is retired."""
        return self.instance.start_time + self.instance.duration + self.tail_lifetime


    @property
    def launch_time(self) -> float:
        """Clock value at which the launch trail appears."""
        return self.instance.start_time - self.trail_config.launch_lead_time


    def activity(self, current_time: float) -> ActivityWindow:
        """
        Explosion and trail activity at a clock value
        """
        return activity(current_time, self.instance.start_time, self.instance.duration,
                        self.tail_lifetime, self.trail_config.launch_lead_time)


    def _is_emitting(self, relative_time: float) -> bool:
        return relative_time < self.instance.duration


    def _replay(self, target: float):
        effect = self._effect
        state = effect.create_state()
        effect.advance(state, 0.0, emitting=True)

        step = self.config.replay_step
        steps = int(math.ceil(target / step)) if target > 0 else 0
        previous = 0.0
        for idx in range(steps):
            now = min(target, (idx + 1) * step)
            effect.advance(state, now - previous, emitting=self._is_emitting(previous))
            previous = now

        self._state = state
        self._clock = target


    def _advance_to(self, relative_time: float):
        clock = self._clock
        if self._state is None or clock is None or relative_time < clock \
                or relative_time - clock > self.config.max_frame_step:
            if self._state is not None:
                self._logger.debug('%s: clock jumped %.3f -> %.3f, replaying',
                                   self.instance.instance_id, clock, relative_time)
            self._replay(relative_time)
        elif relative_time > clock:
            self._effect.advance(self._state, relative_time - clock,
                                 emitting=self._is_emitting(clock))
            self._clock = relative_time
        return self._state


    @synchronized
    def particles(self, current_time: float, viewer_distance: float=None) -> list:
        """
        The renderable particles at a clock value

        :param current_time: the global clock
        :param viewer_distance: camera distance, for brightness
                                compensation; None disables it

        :return: list of RenderableParticle, empty outside the
                 explosion window
        """
        window = self.activity(current_time)
        if not window.explosion_active:
            # retired or not yet started: nothing may outlive the window
            self._drop_state()
            return []

        brightness = zoom_brightness(viewer_distance, self.config.min_viewer_distance,
                                     self.config.max_viewer_distance)
        effect = self._effect
        if effect.strategy is Strategy.CLOSED_FORM:
            return effect.evaluate(window.relative_time, brightness)

        return effect.render(self._advance_to(window.relative_time), brightness)


    @property
    def trajectory(self) -> list:
        """
        The full launch path from the ground to the burst point
        """
        if self._trajectory is None:
            origin = self.instance.origin
            start = ground_launch_position(origin, self.instance.instance_id,
                                           self.config.ground_level)
            self._trajectory = compute_trajectory(
                start, origin, self.trail_config.arc_profile, self.config.trail_segments,
                wind_strength(self.instance.effect_type, start))
        return self._trajectory


    def trail_points(self, current_time: float) -> list:
        """
        The visible slice of the launch trail at a clock value

        :return: list of TrailPoint, head last
        """
        window = self.activity(current_time)
        if not window.trail_active:
            return []

        color = to_rgb_float(self.trail_config.color)
        return [TrailPoint(point, weight, color) for point, weight in
                visible_trail_window(self.trajectory, window.trail_progress,
                                     self.config.trail_length)]


    def evaluate(self, current_time: float, viewer_distance: float=None) -> FrameEntry:
        """
        Everything visible of this instance at a clock value

        :return: FrameEntry, or None when the instance is inactive
        """
        window = self.activity(current_time)
        if not window.active:
            self.particles(current_time)
            return None

        return FrameEntry(self.instance.instance_id, window,
                          self.particles(current_time, viewer_distance),
                          self.trail_points(current_time))


    def reset(self):
        """
        Discard live state; the next query rebuilds it
        """
        self._drop_state()


    def close(self):
        """
        Stop following the instance and release all state
        """
        self.instance.unobserve(self._identity_changed, names=list(IDENTITY_TRAITS))
        self.instance.unobserve(self._timing_changed, names=list(TIMING_TRAITS))
        self._drop_state()
        self._trajectory = None



class ShowPreview(object):
    """
    A collection of effect instances evaluated against one clock
    """

    def __init__(self, config: EngineConfig=None, registry: EffectRegistry=None):
        self.config = config if config is not None else EngineConfig()
        self._registry = registry if registry is not None else default_registry()
        self._runners = OrderedDict()
        self._logger = Log.get('pyroshow.show')


    def add(self, instance: EffectInstance) -> EffectRunner:
        """
        Add an instance, replacing any with the same identifier

        :return: the runner for the instance
        """
        self.remove(instance.instance_id)
        runner = EffectRunner(instance, self.config, self._registry)
        self._runners[instance.instance_id] = runner
        return runner


    def remove(self, instance_id: str) -> bool:
        """
        Remove an instance and release its state

        :return: True if it was present
        """
        runner = self._runners.pop(instance_id, None)
        if runner is None:
            return False
        runner.close()
        return True


    def clear(self):
        for runner in self._runners.values():
            runner.close()
        self._runners.clear()


    def runner(self, instance_id: str) -> EffectRunner:
        return self._runners[instance_id]


    @property
    def instances(self) -> list:
        return [runner.instance for runner in self._runners.values()]


    @property
    def start_time(self) -> float:
        """Earliest launch of the show, or 0 when empty."""
        if not self._runners:
            return 0.0
        return min(runner.launch_time for runner in self._runners.values())


    @property
    def end_time(self) -> float:
        """Latest retirement of any instance, or 0 when empty."""
        if not self._runners:
            return 0.0
        return max(runner.end_time for runner in self._runners.values())


    def frame(self, current_time: float, viewer_distance: float=None,
              executor: Executor=None) -> ShowFrame:
        """
        Evaluate every instance at a clock value

        :param current_time: the global clock
        :param viewer_distance: camera distance for brightness compensation
        :param executor: optional executor to evaluate instances in parallel

        :return: ShowFrame with one entry per active instance, in
                 insertion order
        """
        runners = list(self._runners.values())
        if executor is not None:
            results = list(executor.map(lambda r: r.evaluate(current_time, viewer_distance),
                                        runners))
        else:
            results = [r.evaluate(current_time, viewer_distance) for r in runners]

        return ShowFrame(current_time, [entry for entry in results if entry is not None])


    def __len__(self):
        return len(self._runners)


    def __contains__(self, instance_id):
        return instance_id in self._runners


    def __iter__(self):
        return iter(self._runners.values())
