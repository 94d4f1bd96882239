#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Config command: show or update the engine configuration.
"""

from argparse import ArgumentParser, Namespace

from pyroshow.client.commands.base import Command
from pyroshow.config import EngineConfig, config_path, save_config
from pyroshow.traits import add_traits_to_argparse, apply_from_argparse


class ConfigCommand(Command):
    """Show the engine configuration, optionally saving changes."""

    name = "config"
    help = "Show or change engine configuration"

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--save",
            action="store_true",
            help="write the configuration, including any changes",
        )
        add_traits_to_argparse(EngineConfig, parser)

    def run(self, args: Namespace) -> int:
        config = self.cli.config
        changed = apply_from_argparse(args, config)

        path = config_path(self.cli.config_path)
        self.print(self.out.header(" Engine configuration"))
        self.print(f" {self.out.muted(path)}")
        self.print()

        rows = [(key, self.out.value(str(value))) for key, value in config.to_dict().items()]
        for line in self.out.table(rows):
            self.print(line)

        if args.save:
            save_config(config, path)
            self.print()
            return self.success(f"Saved {path}")

        if changed:
            self.print()
            self.print(self.out.muted("Changes not saved, use --save"))
        return 0
