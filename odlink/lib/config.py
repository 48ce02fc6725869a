"""Odlink library module for handling of odlink configuration settings

Example:
--------

    >>> from odlink.lib import config
    >>> config.odlink.partials.use_bias_partials.bool
    True

Description:
------------

This module is used to read odlink configuration settings. We first try to read configuration settings from the current
working directory, then from `~/.odlink` and finally from odlink's config directory (see `_CONFIG_DIRECTORIES`). The main
configuration file is called odlink.conf. Personal changes to the config can be done in a file called odlink_local.conf
(see `_CONFIG_FILENAMES`).

The configuration is split into sections, and each section consists of `key=value`-pairs. To read a configuration
entry, use `config.odlink.section.key`, for instance `config.odlink.partials.use_bias_partials` reads the key
`use_bias_partials` in the `partials`-section. To actually use a configuration entry you should convert it to the
required data type using one of the properties `str`, `int`, `float`, `bool`, `list`, `tuple` or `dict`.

Each configuration entry has an associated `source` indicating the origin of the value:

    >>> config.odlink.partials.use_bias_partials.source
    '/home/odlink/config/odlink.conf'

"""

# Standard library imports
import pathlib

# Midgard imports
from midgard.config.config import Configuration

# Odlink imports
from odlink.lib import enums  # noqa  # Register odlink enums


# Base directory of the odlink installation
ODLINK_DIR = pathlib.Path(__file__).resolve().parent.parent.parent

# Prioritized list of possible names of odlink config files
_CONFIG_FILENAMES = dict(odlink=("odlink_local.conf", "odlink.conf"))

# Prioritized list of possible locations for all odlink config files
_CONFIG_DIRECTORIES = (pathlib.Path.cwd(), pathlib.Path.home() / ".odlink", ODLINK_DIR / "config")


def config_paths(cfg_name):
    """Yield all files that contain the given configuration"""
    for file_name in _CONFIG_FILENAMES.get(cfg_name, (f"{cfg_name}.conf",))[::-1]:
        for file_dir in _CONFIG_DIRECTORIES:
            file_path = file_dir / file_name
            if file_path.exists():
                yield file_path
                break


def read_odlink_config():
    """Read odlink-configuration"""
    odlink.clear()
    for file_path in config_paths("odlink"):
        odlink.update_from_file(file_path, interpolate=True)


# Add configurations as module variables
odlink = Configuration("odlink")
read_odlink_config()
