# What it does: Manages all read/write operations for the `.twig/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from .errors import InvalidConfigKey
from .storage import TWIG_DIR

DEFAULT_ABBREV = 7


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(repo_root, TWIG_DIR, 'config')


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def split_key(key):
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise InvalidConfigKey() from None
    if not section or not option:
        raise InvalidConfigKey()
    return section, option


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    section, option = split_key(key)
    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)
    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)


def get_abbrev(repo_root): # Number of characters shown for abbreviated commit ids (core.abbrev)
    config = read_config(repo_root)
    try:
        abbrev = config.getint('core', 'abbrev', fallback=DEFAULT_ABBREV)
    except ValueError:
        return DEFAULT_ABBREV
    return max(abbrev, 4)
