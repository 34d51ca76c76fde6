# The command: kit config <key> [<value>]
# What it does: Sets a configuration key (e.g. user.name), or prints its current value when no value is given
# How it does: Passes the key and value to `utils/config.py`, which handles the INI file

import sys
from utils import repository, config as config_utils
from utils.errors import KitError


def run(args):
    try:
        repo_root = repository.require_repo_root()
        if args.value is None:
            value = config_utils.get_value(repo_root, args.key)
            if value is None:
                sys.exit(1)
            print(value)
            return
        config_utils.write_config(repo_root, args.key, args.value)
    except (KitError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Set {args.key} to '{args.value}'")
