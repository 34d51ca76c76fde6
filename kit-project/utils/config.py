# What it does: Manages all read/write operations for the `.kit/config` file and supplies the author/committer identity lines
# What data structure it uses: Map / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
import time

from . import codec

METADATA_DIR = '.kit'


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(repo_root, METADATA_DIR, 'config')


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def _split_key(key):
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError(f"invalid key format {key!r}: should be 'section.key'") from None
    return section, option


def get_value(repo_root, key, fallback=None):
    section, option = _split_key(key)
    return read_config(repo_root).get(section, option, fallback=fallback)


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    section, option = _split_key(key)

    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)


def get_compression_level(repo_root):
    config = read_config(repo_root)
    level = config.getint('core', 'compression', fallback=codec.DEFAULT_LEVEL)
    if not -1 <= level <= 9:
        raise ValueError(f"core.compression must be between -1 and 9, got {level}")
    return level


def get_strict_trees(repo_root):
    return read_config(repo_root).getboolean('core', 'stricttrees', fallback=False)


def get_user_config(repo_root): # Retrieves user.name and user.email from the config, or None if not set
    config = read_config(repo_root)
    user_name = config.get('user', 'name', fallback=None)
    user_email = config.get('user', 'email', fallback=None)
    return user_name, user_email


def format_offset(seconds):
    sign = '-' if seconds < 0 else '+'
    minutes = abs(seconds) // 60
    return f"{sign}{minutes // 60:02d}{minutes % 60:02d}"


def local_offset(timestamp):
    return time.localtime(timestamp).tm_gmtoff


def identity_line(name, email, timestamp=None, offset=None): # "Name <email> <unix-seconds> <+hhmm>"
    if timestamp is None:
        timestamp = int(time.time())
    if offset is None:
        offset = local_offset(timestamp)
    return f"{name} <{email}> {timestamp} {format_offset(offset)}"


def get_identity(repo_root, role='author', environ=None):
    """Returns the identity line for ``role`` ('author' or 'committer').

    KIT_<ROLE>_NAME / KIT_<ROLE>_EMAIL / KIT_<ROLE>_DATE override the config.
    """
    environ = os.environ if environ is None else environ
    prefix = f"KIT_{role.upper()}_"

    user_name, user_email = get_user_config(repo_root)
    name = environ.get(prefix + 'NAME', user_name)
    email = environ.get(prefix + 'EMAIL', user_email)
    if not name or not email:
        raise ValueError(f"{role} identity unknown: run 'kit config user.name <name>' and 'kit config user.email <email>'")

    date = environ.get(prefix + 'DATE')
    timestamp = int(date) if date else None
    offset = 0 if date else None
    return identity_line(name, email, timestamp, offset)
