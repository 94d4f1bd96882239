#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Shared fixtures for the pyroshow test suite.
"""

from __future__ import annotations

import pytest

from pyroshow.colorlib import Color
from pyroshow.config import EngineConfig
from pyroshow.instance import EffectInstance
from pyroshow.registry import default_registry
from pyroshow.types import EffectType


# ─────────────────────────────────────────────────────────────────────────────
# Color fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def red_color():
    """Pure red color."""
    return Color.NewFromRgb(1.0, 0.0, 0.0)


@pytest.fixture
def green_color():
    """Pure green color."""
    return Color.NewFromRgb(0.0, 1.0, 0.0)


@pytest.fixture
def blue_color():
    """Pure blue color."""
    return Color.NewFromRgb(0.0, 0.0, 1.0)


@pytest.fixture
def white_color():
    """Pure white color."""
    return Color.NewFromRgb(1.0, 1.0, 1.0)


# ─────────────────────────────────────────────────────────────────────────────
# Engine fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config lookups at an empty temp location."""
    monkeypatch.setenv("PYROSHOW_CONFIG", str(tmp_path / "engine.yaml"))
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def config() -> EngineConfig:
    """Default engine configuration."""
    return EngineConfig()


@pytest.fixture
def registry():
    """The built-in effect registry."""
    return default_registry()


@pytest.fixture
def make_instance():
    """Factory for effect instances with a fixed identifier."""

    def _make(effect_type=EffectType.BURST, instance_id="fixture-instance", **kwargs):
        kwargs.setdefault("origin", (0.0, 20.0, 0.0))
        return EffectInstance(effect_type=effect_type, instance_id=instance_id, **kwargs)

    return _make
