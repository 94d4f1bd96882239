#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Trail command: show the visible launch trail of an instance.
"""

from argparse import ArgumentParser, Namespace

from pyroshow.client.commands.base import InstanceCommand
from pyroshow.runner import EffectRunner
from pyroshow.trajectory import launch_angle


class TrailCommand(InstanceCommand):
    """Print launch trail points at clock values."""

    name = "trail"
    help = "Show the visible launch trail at clock values"

    def configure_parser(self, parser: ArgumentParser) -> None:
        super().configure_parser(parser)
        parser.add_argument(
            "--full",
            action="store_true",
            help="also print the complete trajectory",
        )

    def run(self, args: Namespace) -> int:
        info = self.effect_info(args)
        instance = self.build_instance(args)
        runner = EffectRunner(instance, self.cli.config)
        trajectory = runner.trajectory

        rows = [
            ("arc", info.trail.arc_profile.value),
            ("lead", f"{self.out.number(info.trail.launch_lead_time)}s"),
            ("launch", self.out.vec(trajectory[0])),
            ("burst", self.out.vec(trajectory[-1])),
            ("angle", f"{self.out.number(launch_angle(trajectory[0], trajectory[-1]), 1)}°"),
        ]
        for line in self.out.table(rows, title=instance.effect_type.value):
            self.print(line)
        self.print()

        if args.full:
            self.print(self.out.header(f" Trajectory ({len(trajectory)} points)"))
            for idx, point in enumerate(trajectory):
                self.print(f"  {self.out.muted(f'{idx:3d}')} {self.out.vec(point)}")
            self.print()

        for current_time in sorted(args.time):
            window = runner.activity(current_time)
            points = runner.trail_points(current_time)

            label = f"t={current_time:g}"
            if not points:
                self.print(f"{self.out.header(label)} {self.out.muted('no trail')}")
                continue

            self.print(
                f"{self.out.header(label)} "
                f"{self.out.kv('progress', f'{window.trail_progress:.3f}')} "
                f"{self.out.muted(f'({len(points)} points)')}"
            )
            for point in points:
                self.print(f"  {self.out.vec(point.position)} {self.out.muted('alpha')} "
                           f"{self.out.number(point.alpha)}")

        return 0
