#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""Tests for CLI commands."""

import pytest
from traitlets import Float, Int

from pyroshow.client.cli_base import PyroshowCLI
from pyroshow.client.commands import COMMANDS, Command
from pyroshow.client.commands.config import ConfigCommand
from pyroshow.client.commands.effects import EffectsCommand, _trait_type, config_traits
from pyroshow.client.commands.sample import SampleCommand, particle_stats
from pyroshow.client.commands.trail import TrailCommand
from pyroshow.client.main import main
from pyroshow.config import load_config
from pyroshow.registry import default_registry
from pyroshow.traits import ColorSchemeTrait
from pyroshow.types import EffectType, RenderableParticle


class TestCommandRegistry:
    """Test the command list."""

    def test_all_commands_listed(self):
        assert COMMANDS == [EffectsCommand, SampleCommand, TrailCommand, ConfigCommand]

    def test_commands_are_commands(self):
        for cmd in COMMANDS:
            assert issubclass(cmd, Command)
            assert cmd.name
            assert cmd.help

    def test_register_sets_instance(self):
        cli = PyroshowCLI()
        subparsers = cli.add_subparsers()
        command = EffectsCommand.register(cli, subparsers)
        args = cli.parse_args(["effects"])
        assert args.cmd_instance is command


# ─────────────────────────────────────────────────────────────────────────────
# effects
# ─────────────────────────────────────────────────────────────────────────────


class TestEffectsCommand:
    def test_quiet_lists_every_type(self, capsys):
        assert main(["effects", "-q"]) == 0
        names = capsys.readouterr().out.split()
        assert names == [t.value for t in EffectType]

    def test_listing(self, capsys):
        assert main(["effects"]) == 0
        out = capsys.readouterr().out
        assert "Effects (15)" in out
        assert "palm_shell [closed_form]" in out
        assert "burst [incremental]" in out

    def test_single_effect(self, capsys):
        assert main(["effects", "ring"]) == 0
        out = capsys.readouterr().out
        assert "Parameters:" in out
        assert "star-count (int)" in out
        assert "launch lead" in out

    def test_alias_name(self, capsys):
        assert main(["effects", "Kamuro"]) == 0
        assert "Kamuro Shell" in capsys.readouterr().out

    def test_unknown_effect(self, capsys):
        assert main(["effects", "roman_candle"]) == 1
        assert "Unknown effect" in capsys.readouterr().out

    def test_traits_flag(self, capsys):
        assert main(["effects", "--traits"]) == 0
        assert capsys.readouterr().out.count("Parameters:") == 15


class TestTraitHelpers:
    def test_trait_types(self):
        assert _trait_type(Float()) == "float"
        assert _trait_type(Int()) == "int"
        assert _trait_type(ColorSchemeTrait()) == "colors"

    def test_config_traits(self):
        traits = config_traits(default_registry().info("crossette"))
        assert "break_time" in traits
        assert "meta" not in traits
        assert list(traits) == sorted(traits)


# ─────────────────────────────────────────────────────────────────────────────
# sample
# ─────────────────────────────────────────────────────────────────────────────


def _particle(position, alpha, size=0.1):
    return RenderableParticle(position, (1.0, 1.0, 1.0), alpha, size)


class TestParticleStats:
    def test_empty(self):
        stats = particle_stats([])
        assert stats.count == 0
        assert stats.visible == 0

    def test_only_lit_particles_counted(self):
        stats = particle_stats([
            _particle((0.0, 0.0, 0.0), 1.0, 0.2),
            _particle((2.0, 4.0, -1.0), 0.5, 0.1),
            _particle((100.0, 100.0, 100.0), 0.0, 5.0),
        ])
        assert stats.count == 3
        assert stats.visible == 2
        assert stats.mean_alpha == pytest.approx(0.75)
        assert stats.max_size == pytest.approx(0.2)
        assert stats.bbox_min == (0.0, 0.0, -1.0)
        assert stats.bbox_max == (2.0, 4.0, 0.0)

    def test_all_dark(self):
        stats = particle_stats([_particle((0.0, 0.0, 0.0), 0.0)])
        assert stats.count == 1
        assert stats.visible == 0


class TestSampleCommand:
    def test_burst_timeline(self, capsys):
        result = main(["sample", "burst", "-t", "5", "9.1", "--start", "5", "--id", "show-1"])

        assert result == 0
        out = capsys.readouterr().out
        assert "burst show-1" in out
        assert "t=5" in out
        assert "t=9.1" in out
        assert "800" in out

    def test_effect_parameters(self, capsys):
        result = main(["sample", "ring", "-t", "1", "--star-count", "60"])

        assert result == 0
        out = capsys.readouterr().out
        assert "star-count = 60" in out

    def test_invalid_parameter_value(self, capsys):
        result = main(["sample", "ring", "-t", "1", "--star-count", "0"])

        assert result == 1
        assert "star_count" in capsys.readouterr().err

    def test_unknown_parameter(self, capsys):
        result = main(["sample", "ring", "-t", "1", "--warp", "9"])

        assert result == 1
        assert "--warp" in capsys.readouterr().err

    def test_unknown_type_warns(self, capsys):
        result = main(["sample", "roman_candle", "-t", "0.5"])

        assert result == 0
        out = capsys.readouterr().out
        assert "using burst" in out
        assert "burst" in out

    def test_distance(self, capsys):
        assert main(["sample", "peony_shell", "-t", "0.5", "--distance", "400"]) == 0
        assert "max size" in capsys.readouterr().out

    def test_time_required(self):
        with pytest.raises(SystemExit):
            main(["sample", "burst"])


# ─────────────────────────────────────────────────────────────────────────────
# trail
# ─────────────────────────────────────────────────────────────────────────────


class TestTrailCommand:
    def test_trail_points(self, capsys):
        result = main(["trail", "burst", "-t", "4.6", "6", "--start", "5", "--origin", "0", "30", "0"])

        assert result == 0
        out = capsys.readouterr().out
        assert "progress = 0.500" in out
        assert "(0, 30, 0)" in out
        assert "no trail" in out

    def test_full_trajectory(self, capsys):
        assert main(["trail", "spiral", "-t", "0", "--full"]) == 0
        out = capsys.readouterr().out
        assert "Trajectory (31 points)" in out
        assert "corkscrew" in out

    def test_segments_from_config(self, tmp_path, capsys):
        path = tmp_path / "engine.yaml"
        path.write_text("trail_segments: 10\n")
        assert main(["-c", str(path), "trail", "ring", "-t", "0", "--full"]) == 0
        assert "Trajectory (11 points)" in capsys.readouterr().out


# ─────────────────────────────────────────────────────────────────────────────
# config
# ─────────────────────────────────────────────────────────────────────────────


class TestConfigCommand:
    def test_show(self, capsys):
        assert main(["config"]) == 0
        out = capsys.readouterr().out
        assert "trail_segments" in out
        assert "-9.8" in out

    def test_change_without_save(self, tmp_path, capsys):
        path = tmp_path / "engine.yaml"
        assert main(["-c", str(path), "config", "--trail-length", "12"]) == 0
        assert "not saved" in capsys.readouterr().out
        assert not path.exists()

    def test_save(self, tmp_path, capsys):
        path = tmp_path / "engine.yaml"
        result = main(["-c", str(path), "config", "--gravity", "-3.7", "--no-color-logs", "--save"])

        assert result == 0
        assert "Saved" in capsys.readouterr().out
        saved = load_config(str(path))
        assert saved.gravity == pytest.approx(-3.7)
        assert saved.color_logs is False

    def test_invalid_change(self, capsys):
        assert main(["config", "--trail-segments", "1"]) == 1
        assert "trail_segments" in capsys.readouterr().err
