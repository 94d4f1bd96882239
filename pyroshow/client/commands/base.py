#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Base command class for CLI commands.
"""

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from typing import ClassVar

from pyroshow.client.cli_base import PyroshowCLI
from pyroshow.instance import EffectInstance
from pyroshow.registry import EffectInfo, default_registry
from pyroshow.types import EffectType


class Command(ABC):
    """
    Base class for CLI commands.

    Subclasses must implement:
    - name: Command name (used as subparser name)
    - help: Short help text
    - configure_parser(): Add command-specific arguments
    - run(): Execute the command
    """

    name: ClassVar[str]
    help: ClassVar[str]
    aliases: ClassVar[list[str]] = []

    def __init__(self, cli: PyroshowCLI):
        self.cli = cli

    @property
    def out(self):
        # --no-color replaces the CLI's Output after registration
        return self.cli.out

    @classmethod
    def register(cls, cli: PyroshowCLI, subparsers) -> "Command":
        """
        Register this command with the CLI.

        Creates the subparser and returns a command instance.
        """
        instance = cls(cli)

        parser = subparsers.add_parser(
            cls.name,
            help=cls.help,
            aliases=cls.aliases,
        )
        instance.configure_parser(parser)
        parser.set_defaults(cmd_instance=instance)

        return instance

    @abstractmethod
    def configure_parser(self, parser: ArgumentParser) -> None:
        """Add command-specific arguments to the parser."""
        ...

    @abstractmethod
    def run(self, args: Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed arguments

        Returns:
            Exit code (0 for success)
        """
        ...

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def print(self, *args, **kwargs):
        """Print to stdout."""
        print(*args, **kwargs)

    def error(self, message: str) -> int:
        """Print error and return exit code 1."""
        print(self.out.error(message))
        return 1

    def success(self, message: str) -> int:
        """Print success and return exit code 0."""
        print(self.out.success(message))
        return 0


class InstanceCommand(Command):
    """
    A command which evaluates a single effect instance at one or more
    clock values.
    """

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument("effect", metavar="TYPE", help="effect type, e.g. burst or palm_shell")
        parser.add_argument(
            "-t",
            "--time",
            type=float,
            nargs="+",
            required=True,
            metavar="T",
            help="global clock values to evaluate",
        )
        parser.add_argument("--start", type=float, default=0.0, metavar="S",
                            help="start time of the instance (default: 0)")
        parser.add_argument("--duration", type=float, default=2.0, metavar="D",
                            help="nominal duration (default: 2)")
        parser.add_argument(
            "--origin",
            type=float,
            nargs=3,
            default=(0.0, 10.0, 0.0),
            metavar=("X", "Y", "Z"),
            help="burst point (default: 0 10 0)",
        )
        parser.add_argument("--id", dest="instance_id", metavar="ID",
                            help="instance identifier, which seeds all randomness")
        parser.add_argument("--color", metavar="COLOR", help="primary color")
        parser.add_argument("--palette", nargs="+", metavar="COLOR", help="palette colors")
        parser.add_argument("--shell-size", dest="shell_size", metavar="SIZE",
                            help="shell caliber for *_shell types")

    def effect_info(self, args: Namespace) -> EffectInfo:
        """Resolve the effect type, warning when it falls back to the burst."""
        if EffectType.lookup(args.effect) is None:
            self.print(self.out.warning(f"Unknown effect '{args.effect}', using burst"))
        return default_registry().info(args.effect)

    def build_instance(self, args: Namespace) -> EffectInstance:
        """
        Build the instance described by the arguments.

        Raises traitlets.TraitError on invalid values.
        """
        kwargs = {}
        if args.instance_id:
            kwargs["instance_id"] = args.instance_id
        if args.color:
            kwargs["color"] = args.color
        if args.palette:
            kwargs["palette"] = args.palette
        if args.shell_size:
            kwargs["shell_size"] = args.shell_size

        return EffectInstance(
            effect_type=args.effect,
            origin=tuple(args.origin),
            start_time=args.start,
            duration=args.duration,
            **kwargs,
        )
