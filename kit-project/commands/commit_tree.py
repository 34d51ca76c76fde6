# The command: kit commit-tree <tree> [-p <parent>] -m <message>
# What it does: Creates a commit object for an existing tree and prints its address
# How it does: Renders the commit text with the configured author/committer identity and stores it as a 'commit' object. HEAD is not moved

import sys
from utils import repository, config
from utils.commit import build_commit
from utils.errors import KitError
from utils.hashing import HashAddress


def run(args):
    try:
        repo_root = repository.require_repo_root()
        store = repository.open_store(repo_root)
        tree = HashAddress.from_hex(args.tree)
        parent = HashAddress.from_hex(args.parent) if args.parent else None

        commit_address = build_commit(store, tree, parent,
                                      config.get_identity(repo_root, 'author'),
                                      config.get_identity(repo_root, 'committer'),
                                      args.message)
    except (KitError, OSError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(commit_address)
