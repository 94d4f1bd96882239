#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Launch trajectories and the visible launch-trail slice.

A shell rises from a point on the ground to its burst point along
a curved path. Everything here is deterministic: the wind drift and
the ground launch point are derived from the effect type, the burst
position and the instance identifier, never from a random source.
"""
import math

from typing import NamedTuple

from frozendict import frozendict

from pyroshow.types import ArcProfile, EffectType, Vec3
from pyroshow.util import clamp, trunc_mod, lerp, string_hash32


DEFAULT_SEGMENTS = 30
DEFAULT_TRAIL_LENGTH = 8
GROUND_LEVEL = -5.0

# helix turns over the whole flight of a corkscrew launch
CORKSCREW_TURNS = 2.0
CORKSCREW_RADIUS = 0.5


class TrailConfig(NamedTuple):
    """
    Static launch trail appearance for an effect type
    """
    launch_lead_time: float
    color: str
    thickness: float
    arc_profile: ArcProfile
    intensity: float


TRAIL_CONFIGS = frozendict({
    EffectType.BURST: TrailConfig(0.8, '#ffaa44', 0.8, ArcProfile.HIGH, 0.09),
    EffectType.FOUNTAIN: TrailConfig(0.3, '#ff6600', 0.6, ArcProfile.LOW, 0.072),
    EffectType.SPIRAL: TrailConfig(1.0, '#4488ff', 0.9, ArcProfile.CORKSCREW, 0.108),
    EffectType.WILLOW: TrailConfig(0.9, '#ffcc44', 0.8, ArcProfile.HIGH, 0.09),
    EffectType.CHRYSANTHEMUM: TrailConfig(1.2, '#ffd23f', 1.2, ArcProfile.HIGH, 0.12),
    EffectType.CROSSETTE: TrailConfig(0.9, '#e91e63', 1.0, ArcProfile.MEDIUM, 0.108),
    EffectType.PALM_TREE: TrailConfig(1.0, '#ffd700', 0.9, ArcProfile.HIGH, 0.09),
    EffectType.STROBE: TrailConfig(0.7, '#ffffff', 0.8, ArcProfile.MEDIUM, 0.072),
    EffectType.RING: TrailConfig(0.8, '#8a2be2', 1.0, ArcProfile.MEDIUM, 0.108),
    EffectType.PEONY_SHELL: TrailConfig(2.8, '#ffd700', 1.0, ArcProfile.HIGH, 0.12),
    EffectType.CHRYSANTHEMUM_SHELL: TrailConfig(3.8, '#ffd700', 1.2, ArcProfile.HIGH, 0.132),
    EffectType.WILLOW_SHELL: TrailConfig(3.8, '#c0c0c0', 1.1, ArcProfile.MEDIUM, 0.12),
    EffectType.PALM_SHELL: TrailConfig(4.8, '#ffd700', 1.4, ArcProfile.HIGH, 0.15),
    EffectType.CROSSETTE_SHELL: TrailConfig(3.8, '#aa2eaa', 1.1, ArcProfile.MEDIUM, 0.126),
    EffectType.KAMURO_SHELL: TrailConfig(4.8, '#ffd700', 1.3, ArcProfile.MEDIUM, 0.144),
})


def trail_config(effect_type: EffectType) -> TrailConfig:
    """
    Look up the trail config for an effect type, falling back to
    the burst trail for anything without an entry.
    """
    return TRAIL_CONFIGS.get(effect_type, TRAIL_CONFIGS[EffectType.BURST])


def _arc_shape(arc_profile: ArcProfile, end_y: float) -> tuple:
    """
    Peak height, peak timing and amplitude scale for a profile
    """
    if arc_profile is ArcProfile.HIGH:
        return max(end_y * 1.3, end_y + 5.0), 0.6, 1.0
    if arc_profile is ArcProfile.MEDIUM:
        return max(end_y * 1.15, end_y + 3.0), 0.5, 0.7
    if arc_profile is ArcProfile.CORKSCREW:
        return max(end_y * 1.2, end_y + 3.0), 0.5, 1.0
    return end_y + 1.0, 0.5, 0.3


def compute_trajectory(start: Vec3, end: Vec3, arc_profile: ArcProfile=ArcProfile.HIGH,
                       segments: int=DEFAULT_SEGMENTS, wind: tuple=(0.0, 0.0)) -> list:
    """
    Compute a curved ground-to-target path

    x and z move linearly from start to end. The vertical axis gets
    a parabolic lift centred on the profile's peak time, shaped by
    sin(pi * t) so the path leaves start and arrives at end exactly.
    Wind drift follows the same bell-shaped envelope, and corkscrew
    launches add a helix whose radius shrinks to zero at the burst.

    :param start: launch point
    :param end: burst point
    :param arc_profile: the arc shape
    :param segments: number of segments; segments + 1 points are returned
    :param wind: horizontal (x, z) drift strength

    :return: list of (x, y, z) tuples
    """
    segments = max(1, int(segments))
    peak, peak_time, amplitude = _arc_shape(arc_profile, end[1])
    lift = peak - end[1]
    wind_x, wind_z = wind

    points = []
    for idx in range(segments + 1):
        t = idx / segments
        envelope = math.sin(math.pi * t)

        x = lerp(start[0], end[0], t)
        y = lerp(start[1], end[1], t)
        z = lerp(start[2], end[2], t)

        parabola = max(0.0, 1.0 - 4.0 * (t - peak_time) ** 2)
        y += lift * parabola * amplitude * envelope

        drift = envelope * (1.0 - 0.3 * t) * 2.0
        x += wind_x * drift
        z += wind_z * drift

        if arc_profile is ArcProfile.CORKSCREW:
            radius = CORKSCREW_RADIUS * (1.0 - t)
            angle = t * CORKSCREW_TURNS * 2.0 * math.pi
            x += radius * math.sin(angle)
            z += radius * (math.cos(angle) - 1.0)

        points.append((x, y, z))

    # pin the burst point against accumulated rounding
    points[-1] = tuple(float(v) for v in end)
    return points


def wind_strength(effect_type: EffectType, start: Vec3) -> tuple:
    """
    Pseudo-wind for a launch, derived from the effect name and the
    launch position

    :return: (x, z) drift strength
    """
    name = effect_type.value if isinstance(effect_type, EffectType) else str(effect_type)
    seed = ord(name[0]) * (start[0] + start[2])
    wind_x = (trunc_mod(seed, 100) - 50) / 200.0
    wind_z = (trunc_mod(seed * 7, 100) - 50) / 300.0
    return wind_x, wind_z


def launch_progress(current_time: float, launch_start: float, lead_time: float) -> float:
    """
    Fraction of the launch flight completed

    :return: progress clamped to 0.0 - 1.0
    """
    if lead_time <= 0:
        return 1.0 if current_time >= launch_start else 0.0
    return clamp((current_time - launch_start) / lead_time, 0.0, 1.0)


def trail_progress(current_time: float, burst_time: float, lead_time: float) -> float:
    """
    Launch progress measured back from the burst, so it reaches
    exactly 1.0 at burst_time whatever the rounding of the launch start

    :return: progress clamped to 0.0 - 1.0
    """
    if lead_time <= 0:
        return 1.0 if current_time >= burst_time else 0.0
    return clamp(1.0 - (burst_time - current_time) / lead_time, 0.0, 1.0)


def visible_trail_window(trajectory: list, progress: float,
                         length: int=DEFAULT_TRAIL_LENGTH) -> list:
    """
    The trailing slice of a trajectory behind the shell's current
    position, with a fade weight per point

    The head is the point nearest progress; up to length points
    behind it are included. Weights grow as sqrt of the position
    within the slice so the head is brightest.

    :return: list of (point, weight) tuples, empty when fewer than
             two points would be visible
    """
    if progress <= 0 or len(trajectory) < 2:
        return []

    count = len(trajectory)
    head = min(count - 1, int(math.floor(count * clamp(progress, 0.0, 1.0))))
    tail = max(0, head - max(1, length))
    window = trajectory[tail:head + 1]
    if len(window) < 2:
        return []

    last = len(window) - 1
    return [(point, math.sqrt(idx / last)) for idx, point in enumerate(window)]


def ground_launch_position(origin: Vec3, instance_id: str,
                           ground_level: float=GROUND_LEVEL) -> Vec3:
    """
    Ground point a shell is launched from, offset horizontally from
    below its burst point by a hash of the instance identifier
    """
    h = abs(string_hash32(instance_id))
    offset_x = ((h % 200) - 100) / 50.0
    offset_z = (((h * 7) % 200) - 100) / 50.0
    return (origin[0] + offset_x, float(ground_level), origin[2] + offset_z)


def launch_angle(start: Vec3, end: Vec3) -> float:
    """
    Elevation of the launch above the horizon, in degrees
    """
    horizontal = math.hypot(end[0] - start[0], end[2] - start[2])
    return math.degrees(math.atan2(end[1] - start[1], horizontal))
