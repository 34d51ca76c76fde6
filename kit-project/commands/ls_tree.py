# The command: kit ls-tree [--name-only] [-r] [--strict] <tree>
# What it does: Lists the entries of a tree object
# How it does: Decodes the tree payload with the tree codec; -r walks into subtrees, --strict (or core.strictTrees) rejects trees whose entries are not sorted
# What data structure it uses: Tree Traversal (depth-first over the Merkle Tree)

import sys
from utils import repository, snapshot, config
from utils.commit import parse_commit
from utils.errors import KitError
from commands.cat_file import resolve, format_tree_entry


def run(args):
    try:
        repo_root = repository.require_repo_root()
        store = repository.open_store(repo_root)
        strict = args.strict or config.get_strict_trees(repo_root)

        address = resolve(repo_root, args.tree)
        obj_type, content = store.get(address)
        if obj_type == 'commit':
            address = parse_commit(content).tree

        for path, entry in snapshot.iter_tree(store, address, recursive=args.recursive, strict=strict):
            print(path if args.name_only else format_tree_entry(entry, path))
    except (KitError, OSError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
