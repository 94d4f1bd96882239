#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
CLI base infrastructure.

Provides the foundation for the pyroshow CLI with:
- Engine configuration loading
- Output styling integration
- Subcommand registration
"""

import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter

from pyroshow.client.output import Output
from pyroshow.config import EngineConfig, load_config
from pyroshow.log import Log
from pyroshow.version import __version__


class PyroshowCLI:
    """
    Base CLI handler with configuration and semantic output.

    Usage:
        cli = PyroshowCLI()
        subparsers = cli.add_subparsers()
        # Register commands...
        args = cli.parse_args()
    """

    def __init__(self):
        self.out = Output()
        self.parser = self._create_parser()
        self._subparsers = None
        self._config = None
        self._config_path = None

    def _create_parser(self) -> ArgumentParser:
        """Create the root argument parser."""
        parser = ArgumentParser(
            prog="pyroshow",
            description="Inspect firework effects and launch trails",
            formatter_class=RawDescriptionHelpFormatter,
            epilog=self._epilog(),
        )

        parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=f"pyroshow {__version__}",
        )
        parser.add_argument(
            "-c",
            "--config",
            type=str,
            metavar="FILE",
            help="engine configuration file (YAML)",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="enable debug output",
        )
        parser.add_argument(
            "--no-color",
            action="store_true",
            help="disable colored output",
        )

        return parser

    def _epilog(self) -> str:
        """Generate help epilog with examples."""
        return """\
Examples:
  pyroshow effects                           List effect types
  pyroshow effects --traits ring             Show tunable parameters
  pyroshow sample burst --time 7.5 --start 5 Particle statistics
  pyroshow sample ring --time 1 --star-count 60
  pyroshow trail palm_shell --time 4 --start 5
  pyroshow config                            Show engine configuration
"""

    def add_subparsers(self):
        """
        Add subparser container for commands.

        Call this before registering commands. Returns the same
        subparsers object on subsequent calls.
        """
        if self._subparsers is None:
            self._subparsers = self.parser.add_subparsers(
                title="commands",
                dest="command",
                metavar="COMMAND",
            )
        return self._subparsers

    def parse_args(self, args: list[str] | None = None) -> Namespace:
        """
        Parse command line arguments.

        Uses parse_known_args so commands can add arguments which
        depend on other arguments, such as effect parameters.
        Unparsed args are stored in parsed.unparsed for the command
        to handle.
        """
        if args is None:
            args = sys.argv[1:]

        parsed, unparsed = self.parser.parse_known_args(args)
        parsed.unparsed = unparsed

        if parsed.no_color:
            self.out = Output(force_color=False)

        if parsed.debug:
            Log.set_level("DEBUG")

        self._config_path = parsed.config
        self._config = None

        return parsed

    @property
    def config(self) -> EngineConfig:
        """The engine configuration, loaded on first use."""
        if self._config is None:
            self._config = load_config(self._config_path)
        return self._config

    @property
    def config_path(self) -> str | None:
        return self._config_path

    # ─────────────────────────────────────────────────────────────────────────
    # Output helpers
    # ─────────────────────────────────────────────────────────────────────────

    def error(self, message: str) -> None:
        """Print error message and exit with code 1."""
        print(self.out.error(message), file=sys.stderr)
        sys.exit(1)

    def print_success(self, message: str) -> None:
        """Print success message."""
        print(self.out.success(message))

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        print(self.out.warning(message))
