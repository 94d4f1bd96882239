#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
CLI command implementations.

Each command module registers itself via the COMMANDS list.
"""

from pyroshow.client.commands.base import Command, InstanceCommand
from pyroshow.client.commands.config import ConfigCommand
from pyroshow.client.commands.effects import EffectsCommand
from pyroshow.client.commands.sample import SampleCommand
from pyroshow.client.commands.trail import TrailCommand

# All available commands: order determines help output order
COMMANDS: list[type[Command]] = [
    EffectsCommand,
    SampleCommand,
    TrailCommand,
    ConfigCommand,
]

__all__ = ["COMMANDS", "Command", "InstanceCommand"]
