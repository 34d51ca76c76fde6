# The command: kit cat-file (-p | -t | -s) <object>
# What it does: Prints the content, type or size of a stored object
# How it does: Fetches and validates the object through ObjectStore.get. Blobs are written to stdout as raw bytes; trees are decoded into one line per entry; commits are printed as text
# What data structure it uses: Hash Table (object store lookup), List (decoded tree entries)

import sys
from utils import repository, tree
from utils.errors import KitError


def resolve(repo_root, name): # Accepts a 40-character address or HEAD
    if name == 'HEAD':
        head = repository.get_head_commit(repo_root)
        if not head:
            raise ValueError("HEAD does not point to a commit yet")
        return head
    return name


def format_tree_entry(entry, path=None):
    return f"{entry.mode.zfill(6)} {entry.obj_type} {entry.target}\t{path or entry.name}"


def run(args):
    try:
        repo_root = repository.require_repo_root()
        store = repository.open_store(repo_root)
        obj_type, content = store.get(resolve(repo_root, args.object))

        if args.mode == 'type':
            print(obj_type)
        elif args.mode == 'size':
            print(len(content))
        elif obj_type == 'tree':
            for entry in tree.decode_tree(content):
                print(format_tree_entry(entry))
        elif obj_type == 'commit':
            sys.stdout.write(content.decode())
        else:
            sys.stdout.flush()
            sys.stdout.buffer.write(content)
            sys.stdout.buffer.flush()
    except (KitError, OSError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
