# What it does: Configures logging for the command-line tool
# How it does: One stderr handler on the root logger; -v raises the level to INFO, -vv to DEBUG

import logging

LOG_FORMAT = 'kit: %(levelname)s: %(message)s'


def setup_logging(verbosity=0):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
