#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Unit tests for engine configuration.
"""

from __future__ import annotations

import pytest
from traitlets import TraitError

from pyroshow.config import CONFIG_ENV, EngineConfig, config_path, load_config, save_config


class TestEngineConfig:
    """Tests for the configuration object."""

    def test_defaults(self, config):
        """Defaults match the documented constants."""
        assert config.gravity == -9.8
        assert config.min_viewer_distance == 10.0
        assert config.max_viewer_distance == 500.0
        assert config.trail_segments == 30
        assert config.trail_length == 8
        assert config.ground_level == -5.0
        assert config.replay_step == pytest.approx(1.0 / 30.0)
        assert config.max_frame_step == 0.25

    def test_distance_range_validated(self, config):
        """The far limit cannot be below the near limit."""
        with pytest.raises(TraitError):
            config.max_viewer_distance = 5.0

    def test_positive_gravity_rejected(self):
        """Gravity must point down."""
        with pytest.raises(TraitError):
            EngineConfig(gravity=3.0)

    def test_update_ignores_unknown(self, config):
        """Unknown keys are reported and skipped."""
        ignored = config.update({"gravity": -3.7, "warp_drive": True})
        assert ignored == ["warp_drive"]
        assert config.gravity == -3.7

    def test_to_dict(self, config):
        """to_dict covers every configurable value."""
        values = config.to_dict()
        assert values["trail_segments"] == 30
        assert "log_level" in values


class TestConfigFiles:
    """Tests for YAML load and save."""

    def test_path_resolution(self, tmp_path, monkeypatch):
        """Explicit paths win over the environment."""
        monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "env.yaml"))
        assert config_path() == str(tmp_path / "env.yaml")
        assert config_path("/explicit.yaml") == "/explicit.yaml"

    def test_missing_file_gives_defaults(self, tmp_path):
        """A missing file is not an error."""
        config = load_config(str(tmp_path / "nope.yaml"))
        assert config.gravity == -9.8

    def test_roundtrip(self, tmp_path):
        """Saved values load back."""
        path = str(tmp_path / "sub" / "engine.yaml")
        config = EngineConfig(gravity=-5.0, trail_length=12, log_level="debug")
        save_config(config, path)

        loaded = load_config(path)
        assert loaded.gravity == -5.0
        assert loaded.trail_length == 12
        assert loaded.log_level.upper() == "DEBUG"

    def test_empty_file(self, tmp_path):
        """An empty file gives defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)).trail_segments == 30

    def test_non_mapping_rejected(self, tmp_path):
        """A file that is not a mapping is an error."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(TraitError):
            load_config(str(path))

    def test_invalid_value_rejected(self, tmp_path):
        """Invalid values raise TraitError."""
        path = tmp_path / "bad.yaml"
        path.write_text("trail_segments: 0\n")
        with pytest.raises(TraitError):
            load_config(str(path))

    def test_environment_location(self, tmp_path, monkeypatch):
        """The environment variable selects the default file."""
        path = tmp_path / "from_env.yaml"
        path.write_text("ground_level: 0.5\n")
        monkeypatch.setenv(CONFIG_ENV, str(path))
        assert load_config().ground_level == 0.5
