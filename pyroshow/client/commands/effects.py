#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Effects command: list effect types and their parameters.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from traitlets import Container, Enum, TraitType

from pyroshow.client.commands.base import Command
from pyroshow.client.output import format_number
from pyroshow.registry import EffectInfo, default_registry
from pyroshow.types import EffectType


def _trait_type(trait: TraitType) -> str:
    """Short type name for a trait."""
    type_map = {
        "float": "float",
        "int": "int",
        "bool": "bool",
        "unicode": "str",
        "colortrait": "color",
        "colorschemetrait": "colors",
    }
    name = trait.__class__.__name__.lower()
    if isinstance(trait, Enum):
        return "choice"
    if name in type_map:
        return type_map[name]
    if isinstance(trait, Container):
        return "list"
    return "str"


def _trait_constraints(trait: TraitType) -> str:
    parts = []
    if getattr(trait, "min", None) is not None:
        parts.append(f"min: {trait.min}")
    if getattr(trait, "max", None) is not None:
        parts.append(f"max: {trait.max}")
    if isinstance(trait, Enum):
        parts.append(f"one of: {', '.join(str(v).lower() for v in trait.values)}")
    if trait.default_value is not None:
        parts.append(f"default: {trait.default_value}")
    return ", ".join(parts)


def config_traits(info: EffectInfo) -> dict[str, TraitType]:
    """The tunable traits of an effect, by name."""
    return {
        name: trait
        for name, trait in sorted(info.traits.items())
        if trait.get_metadata("config") is True
    }


class EffectsCommand(Command):
    """List the available effect types."""

    name = "effects"
    help = "List effect types"
    aliases: ClassVar[list[str]] = ["list", "ls"]

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "effect",
            nargs="?",
            metavar="TYPE",
            help="show details for a single effect type",
        )
        parser.add_argument(
            "--traits",
            action="store_true",
            help="include tunable parameters",
        )
        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="only show type names (for scripting)",
        )

    def run(self, args: Namespace) -> int:
        registry = default_registry()

        if args.effect is not None:
            effect_type = EffectType.lookup(args.effect)
            if effect_type is None or effect_type not in registry:
                return self.error(f"Unknown effect: {args.effect}")
            self._show_effect(registry.info(effect_type), show_traits=True)
            return 0

        if args.quiet:
            for info in registry:
                self.print(info.effect_type.value)
            return 0

        self.print(self.out.header(f"Effects ({len(registry)})"))
        self.print()

        for info in registry:
            if args.traits:
                self._show_effect(info, show_traits=True)
                self.print()
                continue

            self.print(
                self.out.effect_line(
                    info.effect_type.value, info.strategy.value, info.meta.description
                )
            )
            details = [
                ("tail", f"{format_number(info.tail_lifetime)}s"),
                ("lead", f"{format_number(info.trail.launch_lead_time)}s"),
                ("arc", info.trail.arc_profile.value),
            ]
            self.print("    " + "  ".join(self.out.kv(k, v) for k, v in details))

        return 0

    def _show_effect(self, info: EffectInfo, show_traits: bool = False) -> None:
        rows = [
            ("name", info.meta.display_name),
            ("description", info.meta.description),
            ("strategy", info.strategy.value),
            ("tail lifetime", f"{format_number(info.tail_lifetime)}s"),
            ("launch lead", f"{format_number(info.trail.launch_lead_time)}s"),
            ("arc", info.trail.arc_profile.value),
            ("trail color", info.trail.color),
            ("module", info.module),
        ]
        for line in self.out.table(rows, title=info.effect_type.value):
            self.print(line)

        if not show_traits:
            return

        traits = config_traits(info)
        if not traits:
            return

        self.print()
        self.print(self.out.header(" Parameters:"))
        for name, trait in traits.items():
            self.print(
                self.out.trait_line(
                    name.replace("_", "-"),
                    _trait_type(trait),
                    constraints=_trait_constraints(trait),
                )
            )
