#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Shells - Aerial shells modelled on real display calibers.

Each shell picks its star count, burn time and star velocity from a
three tier caliber table. Stars carry a small deterministic
"manufacturing variation" derived from their index, which staggers
burn rates and intensities so fades don't look uniform.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, NamedTuple

import numpy as np
from frozendict import frozendict
from traitlets import Float

from pyroshow.color import ColorUtils
from pyroshow.effect import ClosedFormEffect, EffectMeta
from pyroshow.fxlib.palm_tree import phased_drag_exponent
from pyroshow.physics import ballistic_positions, sphere_directions
from pyroshow.types import EffectType, ShellSize
from pyroshow.util import variation_array


class ShellProfile(NamedTuple):
    """
    Caliber dependent parameters of a shell
    """
    star_count: int
    burn_time: float
    velocity: float
    diameter: float


AUTHENTIC_COLORS = frozendict({
    'red': '#ff2e2e',
    'green': '#2eaa2e',
    'blue': '#2e2eff',
    'yellow': '#ffff2e',
    'orange': '#ff8c2e',
    'purple': '#aa2eaa',
    'white': '#ffffff',
    'gold': '#ffd700',
    'silver': '#c0c0c0',
})


def _profiles(small, medium, large):
    return frozendict({ShellSize.SMALL: ShellProfile(*small),
                       ShellSize.MEDIUM: ShellProfile(*medium),
                       ShellSize.LARGE: ShellProfile(*large)})


class Shell(ClosedFormEffect):
    """
    Base class for caliber-based shells.
    """

    profiles: ClassVar[frozendict] = None
    stock_size: ClassVar[ShellSize] = ShellSize.MEDIUM

    # manufacturing variation: (period, base, step)
    intensity_variation: ClassVar[tuple] = (10, 0.88, 0.024)
    burn_variation: ClassVar[tuple] = (5, 0.96, 0.02)

    @property
    def shell_size(self) -> ShellSize:
        if self.instance.shell_size is not None:
            return self.instance.shell_size
        return self.stock_size

    @property
    def profile(self) -> ShellProfile:
        return self.profiles[self.shell_size]

    def intensities(self, count: int) -> np.ndarray:
        return variation_array(count, *self.intensity_variation)

    def burn_times(self, count: int, burn_time: float=None) -> np.ndarray:
        if burn_time is None:
            burn_time = self.profile.burn_time
        return burn_time * variation_array(count, *self.burn_variation)

    def longest_burn(self):
        return float(np.max(self.burn_times(self.profile.star_count)))

    @staticmethod
    def linear_fade(t: float, burn_times: np.ndarray) -> np.ndarray:
        return np.clip(1.0 - t / np.maximum(burn_times, 1e-6), 0.0, 1.0)

    def solid_colors(self, count: int) -> np.ndarray:
        return np.tile(np.asarray(self.color, dtype=np.float64), (count, 1))


@dataclass
class PeonyStars:
    """Initial conditions of a peony."""

    velocities: np.ndarray
    burn_times: np.ndarray
    intensities: np.ndarray


class PeonyShell(Shell):
    """The basic round break: a sphere of single-color stars."""

    meta = EffectMeta(
        "Peony Shell",
        "Round break of evenly burning stars",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.PEONY_SHELL
    stock_tail_lifetime = 4.4
    default_color = AUTHENTIC_COLORS['red']
    stock_size = ShellSize.SMALL
    profiles = _profiles((55, 2.8, 8.5, 40), (90, 3.5, 10.0, 60), (120, 4.2, 12.0, 75))
    intensity_variation = (10, 0.85, 0.03)

    def sample(self, rng):
        profile = self.profile
        count = profile.star_count
        speeds = profile.velocity * rng.uniform(0.92, 1.08, count)
        return PeonyStars(velocities=sphere_directions(rng, count) * speeds[:, np.newaxis],
                          burn_times=self.burn_times(count),
                          intensities=self.intensities(count))

    def positions(self, stars, t):
        return ballistic_positions(self.origin, stars.velocities, t, 0.98, 4.0,
                                   self.config.gravity)

    def appearance(self, stars, t):
        count = len(stars.velocities)
        return self.solid_colors(count), self.linear_fade(t, stars.burn_times), \
                stars.intensities


@dataclass
class ChrysanthemumShellStars:
    """Initial conditions of a chrysanthemum shell."""

    velocities: np.ndarray
    burn_times: np.ndarray
    intensities: np.ndarray
    spark_velocities: np.ndarray
    spark_delays: np.ndarray


class ChrysanthemumShell(Shell):
    """Stars which leave trails of white sparks behind them."""

    meta = EffectMeta(
        "Chrysanthemum Shell",
        "Stars trailing streams of sparks",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.CHRYSANTHEMUM_SHELL
    stock_tail_lifetime = 5.8
    default_color = AUTHENTIC_COLORS['gold']
    profiles = _profiles((55, 2.8, 8.5, 40), (90, 3.5, 10.0, 60), (120, 4.2, 12.0, 75))

    sparks_per_star = 15
    spark_delay = 0.05
    spark_burn_time = 5.0
    spark_intensity = Float(default_value=0.6, min=0.0, max=1.0).tag(config=True)

    def longest_burn(self):
        last_spark = (self.sparks_per_star - 1) * self.spark_delay + self.spark_burn_time
        return max(super().longest_burn(), last_spark)

    def sample(self, rng):
        profile = self.profile
        count = profile.star_count
        speeds = profile.velocity * rng.uniform(0.9, 1.1, count)
        velocities = sphere_directions(rng, count) * speeds[:, np.newaxis]

        per_star = self.sparks_per_star
        parents = np.repeat(velocities, per_star, axis=0)
        factors = rng.uniform(0.7, 1.1, count * per_star)[:, np.newaxis]
        jitter = rng.uniform(-0.25, 0.25, (count * per_star, 3))
        delays = np.tile(np.arange(per_star) * self.spark_delay, count)

        return ChrysanthemumShellStars(velocities=velocities,
                                       burn_times=self.burn_times(count),
                                       intensities=self.intensities(count),
                                       spark_velocities=parents * factors + jitter,
                                       spark_delays=delays)

    def positions(self, stars, t):
        gravity = self.config.gravity
        star_pos = ballistic_positions(self.origin, stars.velocities, t, 0.97, 5.0, gravity)
        spark_t = np.maximum(0.0, t - stars.spark_delays)
        spark_pos = ballistic_positions(self.origin, stars.spark_velocities, spark_t,
                                        0.95, 6.0, gravity)
        return np.concatenate((star_pos, spark_pos))

    def appearance(self, stars, t):
        count = len(stars.velocities)
        num_sparks = len(stars.spark_velocities)

        spark_t = t - stars.spark_delays
        spark_alpha = np.where(spark_t < 0, 0.0,
                               np.clip(1.0 - spark_t / self.spark_burn_time, 0.0, 1.0))
        spark_alpha = spark_alpha * self.spark_intensity

        colors = np.concatenate((self.solid_colors(count), np.ones((num_sparks, 3))))
        alpha = np.concatenate((self.linear_fade(t, stars.burn_times), spark_alpha))
        boost = np.concatenate((stars.intensities, np.ones(num_sparks)))
        return colors, alpha, boost


@dataclass
class WillowShellStars:
    """Initial conditions of a willow shell."""

    velocities: np.ndarray
    masses: np.ndarray
    burn_times: np.ndarray
    intensities: np.ndarray


class WillowShell(Shell):
    """Heavy long-burning stars which hang and fall like willow branches."""

    meta = EffectMeta(
        "Willow Shell",
        "Heavy stars hanging in long drooping trails",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.WILLOW_SHELL
    stock_tail_lifetime = 6.0
    default_color = AUTHENTIC_COLORS['gold']
    profiles = _profiles((45, 3.2, 6.0, 40), (70, 4.0, 7.0, 50), (95, 4.8, 8.0, 60))
    intensity_variation = (15, 0.8, 0.02)

    # heavy stars burn up to 1.2 times longer
    def longest_burn(self):
        return super().longest_burn() * 1.2

    def sample(self, rng):
        profile = self.profile
        count = profile.star_count
        speeds = rng.uniform(profile.velocity - 1.0, profile.velocity + 1.5, count)
        return WillowShellStars(
            velocities=sphere_directions(rng, count, upper=True) * speeds[:, np.newaxis],
            masses=rng.uniform(0.8, 1.2, count),
            burn_times=self.burn_times(count),
            intensities=self.intensities(count))

    def positions(self, stars, t):
        return ballistic_positions(self.origin, stars.velocities, t, 0.95,
                                   6.0 * stars.masses, self.config.gravity * stars.masses)

    def appearance(self, stars, t):
        count = len(stars.velocities)
        # heavier stars carry more composition and burn longer
        alpha = np.clip(1.0 - (t / stars.burn_times) / stars.masses, 0.0, 1.0)
        return self.solid_colors(count), alpha, stars.intensities


@dataclass
class PalmShellStars:
    """Initial conditions of a palm shell."""

    velocities: np.ndarray
    colors: np.ndarray
    burn_times: np.ndarray
    intensities: np.ndarray


class PalmShell(Shell):
    """A few thick comet fronds which climb, then droop."""

    meta = EffectMeta(
        "Palm Shell",
        "Thick fronds which climb, then arc over",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.PALM_SHELL
    stock_tail_lifetime = 6.3
    default_color = AUTHENTIC_COLORS['gold']
    stock_size = ShellSize.LARGE
    # star_count is the number of fronds
    profiles = _profiles((20, 4.5, 8.0, 50), (25, 5.25, 9.0, 60), (30, 6.0, 10.0, 70))

    particles_per_frond = 20
    frond_tip_color = '#ffaa00'
    rising_phase = Float(default_value=1.5, min=0.0, max=10.0).tag(config=True)

    def longest_burn(self):
        return max(self.rising_phase, super().longest_burn())

    def sample(self, rng):
        profile = self.profile
        fronds = profile.star_count
        per_frond = self.particles_per_frond
        count = fronds * per_frond

        angles = np.arange(fronds) / fronds * 2.0 * np.pi + rng.uniform(-0.1, 0.1, fronds)
        elevation = math.pi / 4 + rng.uniform(-math.pi / 16, math.pi / 16, fronds)
        speeds = profile.velocity * rng.uniform(1.0, 1.4, fronds)
        flat = np.cos(elevation) * speeds
        frond_vel = np.stack((np.cos(angles) * flat, np.sin(elevation) * speeds,
                              np.sin(angles) * flat), axis=1)

        velocities = np.repeat(frond_vel, per_frond, axis=0) \
                * rng.uniform(0.8, 1.2, count)[:, np.newaxis] \
                + rng.uniform(-0.15, 0.15, (count, 3))

        gradient = np.asarray(ColorUtils.gradient(per_frond, self.color, self.frond_tip_color),
                              dtype=np.float64)
        return PalmShellStars(velocities=velocities,
                              colors=np.tile(gradient, (fronds, 1)),
                              burn_times=self.burn_times(count),
                              intensities=self.intensities(count))

    def positions(self, stars, t):
        exponent = phased_drag_exponent(t, self.rising_phase, 3.0, 8.0)
        travel = t * 0.96 ** exponent
        positions = np.asarray(self.origin) + stars.velocities * travel
        positions[:, 1] += 0.5 * self.config.gravity * t * t
        return positions

    def appearance(self, stars, t):
        count = len(stars.velocities)
        if t < self.rising_phase:
            return stars.colors, np.ones(count), stars.intensities * 1.2

        falling = t - self.rising_phase
        span = np.maximum(stars.burn_times - self.rising_phase, 1e-6)
        fall = np.clip(falling / span, 0.0, 1.0)
        return stars.colors, 1.0 - fall, stars.intensities * (1.0 - 0.3 * fall)


@dataclass
class CrossetteShellStars:
    """Initial conditions of a crossette shell."""

    velocities: np.ndarray
    break_positions: np.ndarray
    split_velocities: np.ndarray
    split_colors: np.ndarray
    intensities: np.ndarray


class CrossetteShell(Shell):
    """Stars which each split into a cross of four at the break."""

    meta = EffectMeta(
        "Crossette Shell",
        "Stars splitting into crosses mid-flight",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.CROSSETTE_SHELL
    stock_tail_lifetime = 3.1
    default_color = AUTHENTIC_COLORS['purple']
    default_palette = (AUTHENTIC_COLORS['purple'], AUTHENTIC_COLORS['gold'],
                       AUTHENTIC_COLORS['white'])
    profiles = _profiles((30, 2.0, 8.0, 60), (45, 2.0, 9.0, 80), (60, 2.0, 10.0, 90))

    splits = 4
    break_time = Float(default_value=1.5, min=0.05, max=5.0).tag(config=True)
    split_burn_time = Float(default_value=1.5, min=0.1, max=5.0).tag(config=True)
    split_speed = Float(default_value=4.0, min=0.0, max=50.0).tag(config=True)

    def longest_burn(self):
        return self.break_time + self.split_burn_time

    @staticmethod
    def cross_directions(velocities: np.ndarray) -> np.ndarray:
        """
        Four unit vectors perpendicular to each velocity, 90 degrees apart

        :return: (N, 4, 3) array
        """
        speed = np.linalg.norm(velocities, axis=1, keepdims=True)
        heading = velocities / np.maximum(speed, 1e-9)

        reference = np.tile(np.array([0.0, 1.0, 0.0]), (len(velocities), 1))
        parallel = np.abs(heading[:, 1]) > 0.99
        reference[parallel] = np.array([1.0, 0.0, 0.0])

        side = np.cross(heading, reference)
        side /= np.maximum(np.linalg.norm(side, axis=1, keepdims=True), 1e-9)
        up = np.cross(heading, side)
        return np.stack((side, up, -side, -up), axis=1)

    def sample(self, rng):
        profile = self.profile
        count = profile.star_count
        speeds = profile.velocity * rng.uniform(0.95, 1.05, count)
        velocities = sphere_directions(rng, count) * speeds[:, np.newaxis]

        break_positions = ballistic_positions(self.origin, velocities, self.break_time,
                                              0.97, 5.0, self.config.gravity)

        splits = self.cross_directions(velocities).reshape(count * self.splits, 3) \
                * self.split_speed
        palette = np.array(self.palette, dtype=np.float64)
        split_colors = palette[np.arange(count * self.splits) % len(palette)]

        return CrossetteShellStars(velocities=velocities,
                                   break_positions=np.repeat(break_positions, self.splits,
                                                             axis=0),
                                   split_velocities=splits,
                                   split_colors=split_colors,
                                   intensities=self.intensities(count))

    def positions(self, stars, t):
        gravity = self.config.gravity
        primary = ballistic_positions(self.origin, stars.velocities, min(t, self.break_time),
                                      0.97, 5.0, gravity)
        ts = max(0.0, t - self.break_time)
        split = ballistic_positions(stars.break_positions, stars.split_velocities, ts,
                                    0.95, 7.0, gravity)
        return np.concatenate((primary, split))

    def appearance(self, stars, t):
        count = len(stars.velocities)
        num_splits = len(stars.split_velocities)

        if t < self.break_time:
            primary_alpha = 1.0 - t / self.profile.burn_time
            split_alpha = 0.0
        else:
            primary_alpha = 0.0
            split_alpha = max(0.0, 1.0 - (t - self.break_time) / self.split_burn_time)

        colors = np.concatenate((self.solid_colors(count), stars.split_colors))
        alpha = np.concatenate((np.full(count, primary_alpha), np.full(num_splits, split_alpha)))
        boost = np.concatenate((stars.intensities,
                                np.repeat(stars.intensities, self.splits)))
        return colors, alpha, boost


@dataclass
class KamuroStars:
    """Initial conditions of a kamuro."""

    velocities: np.ndarray
    burn_times: np.ndarray
    intensities: np.ndarray
    crackle_phases: np.ndarray


class KamuroShell(Shell):
    """A dense dome of slow glittering stars forming a crown."""

    meta = EffectMeta(
        "Kamuro Shell",
        "Dense dome crown of crackling glitter",
        "pyroshow",
        "1.0",
    )

    effect_type = EffectType.KAMURO_SHELL
    stock_tail_lifetime = 4.2
    default_color = AUTHENTIC_COLORS['gold']
    stock_size = ShellSize.LARGE
    profiles = _profiles((150, 3.5, 5.0, 45), (200, 4.0, 5.5, 55), (250, 4.0, 6.0, 60))

    crackle_rate = Float(default_value=18.0, min=0.0, max=60.0).tag(config=True)
    crackle_onset = Float(default_value=0.6, min=0.0, max=1.0).tag(config=True)

    def sample(self, rng):
        profile = self.profile
        count = profile.star_count
        directions = sphere_directions(rng, count)
        # flatten the lower half into a crown
        directions[:, 1] = directions[:, 1] * 0.6 + 0.4
        directions /= np.linalg.norm(directions, axis=1, keepdims=True)
        speeds = profile.velocity * rng.uniform(0.9, 1.1, count)

        # golden ratio sequence, so crackle phases differ per star without drawing
        phases = np.mod(np.arange(count) * 0.6180339887, 1.0)
        return KamuroStars(velocities=directions * speeds[:, np.newaxis],
                           burn_times=self.burn_times(count),
                           intensities=self.intensities(count),
                           crackle_phases=phases)

    def positions(self, stars, t):
        return ballistic_positions(self.origin, stars.velocities, t, 0.94, 6.0,
                                   self.config.gravity)

    def crackle(self, stars, t) -> np.ndarray:
        """Brightness flicker in the last part of each star's burn"""
        progress = t / stars.burn_times
        lit = np.mod(t * self.crackle_rate + stars.crackle_phases, 1.0) < 0.5
        flicker = np.where(lit, 1.4, 0.5)
        return np.where(progress > self.crackle_onset, flicker, 1.0)

    def appearance(self, stars, t):
        count = len(stars.velocities)
        return self.solid_colors(count), self.linear_fade(t, stars.burn_times), \
                stars.intensities * self.crackle(stars, t)
