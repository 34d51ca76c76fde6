# The command: kit log [<commit>]
# What it does: Displays the commit history by starting at HEAD (or the given commit) and walking backward through the parent links
# How it does: Reads each commit object, prints it, and follows its single parent until a root commit is reached
# What data structure it uses: Linear traversal up the parent chain of the commit DAG

import sys
from utils import repository
from utils.commit import parse_commit
from utils.hashing import as_address
from utils.errors import KitError
from commands.cat_file import resolve


def iter_history(store, commit_address):
    commit_address = as_address(commit_address)
    visited = set()
    while commit_address is not None and commit_address not in visited:
        visited.add(commit_address)
        commit = parse_commit(store.read(commit_address, expected='commit'))
        yield commit_address, commit
        commit_address = commit.parent


def run(args):
    try:
        repo_root = repository.require_repo_root()
        store = repository.open_store(repo_root)

        start = args.commit or repository.get_head_commit(repo_root)
        if not start:
            current_branch = repository.get_current_branch(repo_root) or repository.DEFAULT_BRANCH
            print(f"fatal: your current branch '{current_branch}' does not have any commits yet", file=sys.stderr)
            sys.exit(1)

        for address, commit in iter_history(store, resolve(repo_root, start)):
            print(f"commit {address}")
            print(f"Author: {commit.author}")
            print(f"Committer: {commit.committer}")
            print()
            for line in commit.message.splitlines():
                print(f"    {line}")
            print()
    except (KitError, OSError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
