"""
Package configuration.

Defaults are read from the `config.yaml` file that ships with the package. A
file with the same name in the user config folder for the package (see
`user_config_file`) overrides any of the default keys.
"""

# std
from pathlib import Path

# third-party
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
PACKAGE = 'xstrings'
FILENAME = 'config.yaml'
SOURCE = Path(__file__).parent / FILENAME


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    import yaml

    with filename.open('r') as file:
        return yaml.safe_load(file) or {}


CONFIG_PARSERS = {
    'yaml': load_yaml,
    'yml':  load_yaml,
}


def load(filename):
    if (path := Path(filename)).exists():
        return CONFIG_PARSERS[path.suffix.lstrip('.')](path)

    raise FileNotFoundError(f"Non-existent file: '{filename!s}'")


def user_config_file():
    return user_config_path(PACKAGE) / FILENAME


def merge(defaults, overrides):
    """
    Recursively merge the mapping `overrides` into a copy of `defaults`.
    """
    merged = dict(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            value = merge(merged[key], value)
        merged[key] = value
    return merged


# Node
# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Nested mapping with item read access through attribute lookup.

    >>> node = ConfigNode({'format': {'surplus': 'ignore'}})
    >>> node.format.surplus
    'ignore'
    """

    @classmethod
    def load(cls, filename, defaults=None):
        assert filename or defaults
        config = load(defaults) if defaults else {}
        if filename and Path(filename).exists():
            logger.debug('Loading user config: {!s}.', filename)
            config = merge(config, load(filename))
        return cls(config)

    def __init__(self, *args, **kws):
        super().__init__(*args, **kws)
        for key, value in self.items():
            if isinstance(value, dict) and not isinstance(value, ConfigNode):
                super().__setitem__(key, type(self)(value))

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)


# ---------------------------------------------------------------------------- #

def load_config(user=True):
    """
    Load the package defaults, updated from the user config file if one exists
    and `user` is true.
    """
    return ConfigNode.load(user_config_file() if user else None, SOURCE)


CONFIG = load_config()
