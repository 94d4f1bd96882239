#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Deterministic firework show simulation.
"""
from pyroshow.config import EngineConfig, load_config, save_config
from pyroshow.instance import EffectInstance
from pyroshow.registry import EffectRegistry, default_registry
from pyroshow.runner import EffectRunner, FrameEntry, ShowFrame, ShowPreview
from pyroshow.types import ArcProfile, EffectType, RenderableParticle, ShellSize, \
        Strategy, TrailPoint
from pyroshow.version import __version__
