#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Sample command: evaluate one effect instance at clock values.

Effect parameters are accepted as extra flags after the instance
arguments, e.g. ``pyroshow sample ring -t 1 --star-count 60``.
"""

from argparse import ArgumentParser, Namespace
from typing import NamedTuple

import numpy as np

from pyroshow.client.commands.base import InstanceCommand
from pyroshow.runner import EffectRunner
from pyroshow.traits import add_traits_to_argparse, apply_from_argparse


class ParticleStats(NamedTuple):
    """Summary of a particle list."""

    count: int
    visible: int
    mean_alpha: float
    max_size: float
    bbox_min: tuple
    bbox_max: tuple


def particle_stats(particles: list) -> ParticleStats:
    """
    Summarize renderable particles. Visible means alpha > 0; the mean
    alpha and bounding box cover visible particles only.
    """
    if not particles:
        return ParticleStats(0, 0, 0.0, 0.0, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    alpha = np.array([p.alpha for p in particles], dtype=np.float64)
    lit = alpha > 0
    if not lit.any():
        return ParticleStats(len(particles), 0, 0.0, 0.0, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    positions = np.array([p.position for p in particles], dtype=np.float64)[lit]
    sizes = np.array([p.size for p in particles], dtype=np.float64)[lit]
    return ParticleStats(
        count=len(particles),
        visible=int(lit.sum()),
        mean_alpha=float(alpha[lit].mean()),
        max_size=float(sizes.max()),
        bbox_min=tuple(positions.min(axis=0).tolist()),
        bbox_max=tuple(positions.max(axis=0).tolist()),
    )


class SampleCommand(InstanceCommand):
    """Print activity and particle statistics of an effect."""

    name = "sample"
    help = "Sample an effect's particles at clock values"

    def configure_parser(self, parser: ArgumentParser) -> None:
        super().configure_parser(parser)
        parser.add_argument(
            "--distance",
            type=float,
            metavar="D",
            help="viewer distance for brightness compensation",
        )

    def _effect_args(self, args: Namespace, runner: EffectRunner) -> Namespace | None:
        """Parse effect parameters from the unparsed arguments."""
        parser = ArgumentParser(prog=f"pyroshow sample {args.effect}", add_help=False)
        add_traits_to_argparse(runner.effect, parser)
        try:
            return parser.parse_args(getattr(args, "unparsed", []))
        except SystemExit:
            return None

    def run(self, args: Namespace) -> int:
        self.effect_info(args)
        instance = self.build_instance(args)
        runner = EffectRunner(instance, self.cli.config)

        fx_args = self._effect_args(args, runner)
        if fx_args is None:
            return 1
        changed = apply_from_argparse(fx_args, runner.effect)

        self.print(self.out.header(f"{instance.effect_type.value} {self.out.muted(instance.instance_id)}"))
        if changed:
            for key, value in changed.items():
                self.print("  " + self.out.kv(key.replace("_", "-"), str(value)))
        self.print()

        for current_time in sorted(args.time):
            window = runner.activity(current_time)
            particles = runner.particles(current_time, args.distance)
            stats = particle_stats(particles)

            rows = [
                ("explosion", self.out.flag(window.explosion_active)),
                ("relative", f"{self.out.number(window.relative_time)}s"),
                ("trail", self.out.flag(window.trail_active)),
                ("progress", self.out.number(window.trail_progress)),
                ("particles", self.out.number(stats.count, 0)),
                ("visible", self.out.number(stats.visible, 0)),
            ]
            if stats.visible:
                rows.extend([
                    ("mean alpha", self.out.number(stats.mean_alpha)),
                    ("max size", self.out.number(stats.max_size)),
                    ("bbox min", self.out.vec(stats.bbox_min)),
                    ("bbox max", self.out.vec(stats.bbox_max)),
                ])

            for line in self.out.table(rows, title=f"t={current_time:g}"):
                self.print(line)
            self.print()

        return 0
