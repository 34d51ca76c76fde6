# The command: kit hash-object [-w] [-t <type>] <file>
# What it does: Computes the address a file would have as an object, and with -w stores it
# How it does: Reads the file as raw bytes (never decoded as text), checks that tree and commit content parses, and hands it to ObjectStore.put
# What data structure it uses: Hash Table (the object store)

import sys
from utils import repository
from utils.commit import parse_commit
from utils.errors import KitError
from utils.objects import ObjectStore
from utils.tree import decode_tree


def check_content(obj_type, content): # Blobs are opaque; trees and commits must decode
    if obj_type == 'tree':
        decode_tree(content)
    elif obj_type == 'commit':
        parse_commit(content)


def run(args):
    try:
        with open(args.file, 'rb') as f:
            content = f.read()

        check_content(args.type, content)

        if args.write:
            store = repository.open_store(repository.require_repo_root())
        else:
            # Nothing is written, so no repository is needed
            store = ObjectStore(repository.objects_dir('.'))

        address = store.put(args.type, content, write=args.write)
    except (KitError, OSError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(address)
