# What it does: Turns a directory on disk into tree and blob objects, and reads a stored tree back as a flat {path: address} map
# How it does: Post-order recursion. A directory's tree can only be hashed after every child has been stored, so children are written first and the parent tree last
# What data structure it uses: Merkle Tree (each tree's address covers the addresses of everything below it)

import logging
import os
import stat

from .config import METADATA_DIR
from .errors import UnsupportedEntryKind
from .ignore import is_ignored
from .tree import (EXECUTABLE_MODE, FILE_MODE, TREE_MODE, TreeEntry,
                   decode_tree, encode_tree)

logger = logging.getLogger(__name__)

SKIP = 'skip'
ERROR = 'error'


class SnapshotBuilder:
    """Stores a directory tree in an ObjectStore and returns the root tree address.

    ``exclude`` names are skipped at every level (the repository's own
    metadata directory by default). ``ignore_patterns`` are glob patterns
    matched against paths relative to the snapshot root. Entries that are
    neither regular files nor directories are skipped with a warning, or
    raise UnsupportedEntryKind when ``on_unsupported`` is ``'error'``.
    """

    def __init__(self, store, exclude=frozenset({METADATA_DIR}), ignore_patterns=(), on_unsupported=SKIP):
        if on_unsupported not in (SKIP, ERROR):
            raise ValueError(f"on_unsupported must be {SKIP!r} or {ERROR!r}, not {on_unsupported!r}")
        self.store = store
        self.exclude = frozenset(exclude)
        self.ignore_patterns = frozenset(ignore_patterns)
        self.on_unsupported = on_unsupported

    def build_tree(self, directory):
        return self._write_tree(os.fspath(directory), '')

    def store_blob(self, file_path):
        with open(file_path, 'rb') as f:
            content = f.read()
        return self.store.put('blob', content)

    def _skip(self, name, rel_path):
        if name in self.exclude:
            return True
        return bool(self.ignore_patterns) and is_ignored(rel_path, self.ignore_patterns)

    def _write_tree(self, directory, rel_dir): # Recursively writes a tree object for a directory and returns its address
        entries = []
        with os.scandir(directory) as it:
            dir_entries = sorted(it, key=lambda e: e.name)

        for dir_entry in dir_entries:
            rel_path = f"{rel_dir}/{dir_entry.name}" if rel_dir else dir_entry.name
            if self._skip(dir_entry.name, rel_path):
                continue

            st = dir_entry.stat(follow_symlinks=False)
            if stat.S_ISDIR(st.st_mode):
                address = self._write_tree(dir_entry.path, rel_path)
                entries.append(TreeEntry(TREE_MODE, dir_entry.name, address))
            elif stat.S_ISREG(st.st_mode):
                mode = EXECUTABLE_MODE if st.st_mode & stat.S_IXUSR else FILE_MODE
                entries.append(TreeEntry(mode, dir_entry.name, self.store_blob(dir_entry.path)))
            elif self.on_unsupported == ERROR:
                raise UnsupportedEntryKind(dir_entry.path)
            else:
                logger.warning("skipping %s: not a regular file or directory", rel_path)

        address = self.store.put('tree', encode_tree(entries))
        logger.debug("wrote tree %s for %s (%d entries)", address, rel_dir or '.', len(entries))
        return address


def iter_tree(store, tree_address, recursive=False, strict=False, base_path=''):
    """Yield (path, entry) pairs for a stored tree.

    With ``recursive`` subtrees are expanded in place of their own entry.
    """
    for entry in decode_tree(store.read(tree_address, expected='tree'), strict=strict):
        path = f"{base_path}{entry.name}"
        if recursive and entry.is_tree:
            yield from iter_tree(store, entry.target, recursive=True, strict=strict, base_path=f"{path}/")
        else:
            yield path, entry


def read_tree(store, tree_address, strict=False): # Flattens a stored tree into {relative path: blob address}
    return {path: entry.target
            for path, entry in iter_tree(store, tree_address, recursive=True, strict=strict)}
