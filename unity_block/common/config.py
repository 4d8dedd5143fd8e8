import os.path

import yaml
from munch import DefaultMunch

_this_file_path = os.path.abspath(os.path.dirname(__file__))
_config_path = os.path.join(_this_file_path, "config.yaml")

with open(_config_path, 'r', encoding="utf-8") as yamlfile:
    _cfg = yaml.safe_load(yamlfile)
config = DefaultMunch.fromDict(_cfg)


def load_driver_config(source=None):
    """
    Builds the driver configuration.

    Args:
        source : a mapping (e.g. {"unity": {"endpoint": ...}}), a path to a YAML file, or None for an
                 empty configuration

    Returns:
        DefaultMunch where missing keys read as None
    """
    if source is None:
        source = {}
    elif isinstance(source, str):
        with open(source, 'r', encoding="utf-8") as yamlfile:
            source = yaml.safe_load(yamlfile) or {}
    return DefaultMunch.fromDict(source)
