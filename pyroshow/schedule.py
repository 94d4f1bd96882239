#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Timeline scheduling: maps the global clock onto an instance.
"""
from typing import NamedTuple

from pyroshow.trajectory import trail_progress


class ActivityWindow(NamedTuple):
    """
    Activity of one effect instance at a clock value
    """
    explosion_active: bool
    relative_time: float
    trail_active: bool
    trail_progress: float
    explosion_start: float
    explosion_end: float
    trail_start: float

    @property
    def active(self) -> bool:
        """True if anything of the instance is visible."""
        return self.explosion_active or self.trail_active


def activity(current_time: float, start_time: float, duration: float,
             tail_lifetime: float, trail_lead_time: float) -> ActivityWindow:
    """
    Compute explosion and trail activity for a clock value

    The explosion is active from start_time through the end of its
    tail, inclusive. The trail is active for the lead time before
    the explosion, excluding start_time itself, so the two never
    overlap.

    :param current_time: the global clock
    :param start_time: when the instance bursts
    :param duration: nominal effect duration
    :param tail_lifetime: extra time for the slowest particles to fade
    :param trail_lead_time: how long the launch takes

    :return: ActivityWindow
    """
    explosion_end = start_time + max(0.0, duration) + max(0.0, tail_lifetime)
    trail_start = start_time - max(0.0, trail_lead_time)

    return ActivityWindow(
        explosion_active=start_time <= current_time <= explosion_end,
        relative_time=current_time - start_time,
        trail_active=trail_start <= current_time < start_time,
        trail_progress=trail_progress(current_time, start_time, trail_lead_time),
        explosion_start=start_time,
        explosion_end=explosion_end,
        trail_start=trail_start)
