# The command: kit init [<directory>]
# What it does: Initializes a new, empty repository by creating the hidden `.kit` directory and its internal structure
# How it does: It creates the `objects` and `refs/heads` subdirectories and a `HEAD` file holding a symbolic reference to the default 'master' branch
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database)

import sys
from utils import repository


def run(args):
    try:
        kit_dir, created = repository.init_repository(args.directory)
    except OSError as e:
        print(f"Error initializing repository: {e}", file=sys.stderr)
        sys.exit(1)

    if created:
        print(f"Initialized empty Kit repository in {kit_dir}/")
    else:
        print(f"Reinitialized existing Kit repository in {kit_dir}/")
