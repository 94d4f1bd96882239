#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
# pylint: disable=no-member
"""
Engine configuration.

Tunables for the simulation core, loaded from and saved to YAML.
Every field is a trait tagged config=True, so invalid values fail
validation with a TraitError as soon as they are loaded.
"""
import os
import tempfile

from ruamel.yaml import YAML
from traitlets import Bool, CaselessStrEnum, Float, HasTraits, Int, TraitError, \
        validate

from pyroshow.log import Log
from pyroshow.physics import GRAVITY


CONFDIR = os.path.join(os.path.expanduser('~'), '.config', 'pyroshow')
CONFFILE = os.path.join(CONFDIR, 'engine.yaml')
CONFIG_ENV = 'PYROSHOW_CONFIG'

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class EngineConfig(HasTraits):
    """
    Tunable constants of the simulation core
    """
    gravity = Float(default_value=GRAVITY, max=0.0).tag(config=True)

    min_viewer_distance = Float(default_value=10.0, min=0.0).tag(config=True)
    max_viewer_distance = Float(default_value=500.0, min=0.0).tag(config=True)

    trail_segments = Int(default_value=30, min=2, max=1000).tag(config=True)
    trail_length = Int(default_value=8, min=1, max=1000).tag(config=True)
    ground_level = Float(default_value=-5.0).tag(config=True)

    # incremental effects: fixed step used when rebuilding state after a jump,
    # and the largest forward delta still treated as normal playback
    replay_step = Float(default_value=1.0 / 30.0, min=0.001, max=1.0).tag(config=True)
    max_frame_step = Float(default_value=0.25, min=0.0).tag(config=True)

    log_level = CaselessStrEnum(LOG_LEVELS, default_value='WARNING').tag(config=True)
    color_logs = Bool(default_value=True).tag(config=True)


    @validate('max_viewer_distance')
    def _check_distance_range(self, proposal):
        if proposal['value'] < self.min_viewer_distance:
            raise TraitError('max_viewer_distance must not be below min_viewer_distance')
        return proposal['value']


    def to_dict(self) -> dict:
        """
        The configurable values, in a form suitable for YAML
        """
        return {k: getattr(self, k) for k in sorted(self.trait_names(config=True))}


    def update(self, values: dict) -> list:
        """
        Apply a mapping of values. Unknown keys are logged and skipped.

        :return: list of the keys which were ignored
        """
        known = set(self.trait_names(config=True))
        ignored = []
        for key, value in values.items():
            if key not in known:
                ignored.append(key)
                continue
            setattr(self, key, value)

        if ignored:
            Log.get('pyroshow.config').warning('Ignoring unknown config keys: %s',
                                               ', '.join(sorted(str(k) for k in ignored)))
        return ignored


def config_path(path: str=None) -> str:
    """
    Resolve the configuration file location: explicit path, then
    the environment, then the per-user default.
    """
    if path is not None:
        return path
    return os.environ.get(CONFIG_ENV, CONFFILE)


def load_config(path: str=None) -> EngineConfig:
    """
    Load the engine configuration from YAML

    A missing file yields the defaults.

    :param path: file to read, resolved by config_path()
    :return: the configuration
    """
    filename = config_path(path)
    config = EngineConfig()

    if not os.path.isfile(filename):
        Log.get('pyroshow.config').debug('No config at %s, using defaults', filename)
        return config

    with open(filename, 'r') as yaml_file:
        data = YAML(typ='safe').load(yaml_file)

    if data is None:
        return config
    if not isinstance(data, dict):
        raise TraitError('Config file %s must contain a mapping' % filename)

    config.update(data)
    return config


def save_config(config: EngineConfig, path: str=None):
    """
    Serialize the configuration to a file, atomically.

    :param config: the configuration to write
    :param path: target filename, resolved by config_path()
    """
    filename = config_path(path)
    dirname = os.path.dirname(os.path.abspath(filename))
    os.makedirs(dirname, exist_ok=True)

    yaml = YAML(typ='safe')
    yaml.default_flow_style = False

    with tempfile.NamedTemporaryFile('w', dir=dirname, delete=False) as temp:
        temp.write('# pyroshow engine configuration\n')
        yaml.dump(config.to_dict(), temp)
        tempname = temp.name
    os.replace(tempname, filename)
