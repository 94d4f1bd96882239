#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
CLI main entry point.

Run with:
    python -m pyroshow.client.main
    or via the 'pyroshow' console script
"""

import sys

from ruamel.yaml.error import YAMLError
from traitlets import TraitError

from pyroshow.client.cli_base import PyroshowCLI
from pyroshow.client.commands import COMMANDS
from pyroshow.log import Log


def main(args: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    cli = PyroshowCLI()

    subparsers = cli.add_subparsers()
    for cmd_cls in COMMANDS:
        cmd_cls.register(cli, subparsers)

    parsed = cli.parse_args(args)

    if not hasattr(parsed, "command") or parsed.command is None:
        cli.parser.print_help()
        return 0

    if not hasattr(parsed, "cmd_instance"):
        cli.parser.print_help()
        return 1

    try:
        config = cli.config
        Log.enable_color(config.color_logs and cli.out.color_enabled)
        if not parsed.debug:
            Log.set_level(config.log_level)
        return parsed.cmd_instance.run(parsed)
    except KeyboardInterrupt:
        print()  # Clean line after ^C
        return 130
    except (TraitError, ValueError, OSError, YAMLError) as e:
        if parsed.debug:
            raise
        print(cli.out.error(str(e)), file=sys.stderr)
        return 1


def cli_entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
