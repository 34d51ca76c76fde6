# The command: kit write-tree
# What it does: Snapshots the working directory into tree and blob objects and prints the root tree address
# How it does: SnapshotBuilder walks the repository bottom-up, skipping `.kit` and anything matched by `.kitignore`

import sys
from utils import repository, ignore
from utils.errors import KitError
from utils.snapshot import SnapshotBuilder


def snapshot_working_tree(repo_root, store):
    builder = SnapshotBuilder(store, ignore_patterns=ignore.get_ignored_patterns(repo_root))
    return builder.build_tree(repo_root)


def run(args):
    try:
        repo_root = repository.require_repo_root()
        tree_address = snapshot_working_tree(repo_root, repository.open_store(repo_root))
    except (KitError, OSError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(tree_address)
