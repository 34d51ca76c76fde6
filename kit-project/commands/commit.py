# The command: kit commit -m "<message>"
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of the working directory
# How it does: It snapshots the working tree to get a single root tree address, uses the current HEAD commit as the parent, stores the commit object, then moves the current branch to it
# What data structure it uses: Merkle Tree (the snapshot), Directed Acyclic Graph (DAG) (each commit links to its parent)

import sys
from utils import repository, config
from utils.commit import build_commit
from utils.errors import KitError
from utils.hashing import HashAddress
from commands.write_tree import snapshot_working_tree


def create_commit(repo_root, message): # Snapshots, stores a commit object and updates the current branch
    store = repository.open_store(repo_root)
    tree_address = snapshot_working_tree(repo_root, store)

    parent = repository.get_head_commit(repo_root)
    parent = HashAddress.from_hex(parent) if parent else None

    commit_address = build_commit(store, tree_address, parent,
                                  config.get_identity(repo_root, 'author'),
                                  config.get_identity(repo_root, 'committer'),
                                  message)
    repository.update_head(repo_root, commit_address)
    return commit_address


def run(args):
    try:
        repo_root = repository.require_repo_root()
        commit_address = create_commit(repo_root, args.message)
    except (KitError, OSError, ValueError) as e:
        print(f"Error during commit: {e}", file=sys.stderr)
        sys.exit(1)

    branch = repository.get_current_branch(repo_root) or 'detached HEAD'
    summary = args.message.splitlines()[0] if args.message.strip() else ''
    print(f"[{branch} {commit_address.short()}] {summary}")
