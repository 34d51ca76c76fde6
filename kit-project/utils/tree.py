# What it does: Encodes directory entries into the binary tree payload and decodes it back
# How it does: Each entry is "<mode> <name>\0" followed by the 20 raw bytes of its target address; entries are sorted by the bytes of their names
# What data structure it uses: List of TreeEntry records, one level of the Merkle Tree that represents the project's file structure

from typing import NamedTuple

from .errors import CorruptTree
from .hashing import DIGEST_SIZE, HashAddress

FILE_MODE = '100644'
EXECUTABLE_MODE = '100755'
TREE_MODE = '40000'

BLOB_MODES = (FILE_MODE, EXECUTABLE_MODE)


def encode_name(name):
    return name.encode('utf-8', 'surrogateescape')


def decode_name(raw):
    return raw.decode('utf-8', 'surrogateescape')


class TreeEntry(NamedTuple):
    mode: str
    name: str
    target: HashAddress

    @property
    def is_tree(self):
        return self.mode == TREE_MODE

    @property
    def obj_type(self):
        return 'tree' if self.is_tree else 'blob'


def sort_entries(entries):
    return sorted(entries, key=lambda entry: encode_name(entry.name))


def encode_tree(entries):
    """Return the canonical tree payload for ``entries``.

    Input order does not matter; the output is always sorted by name bytes.
    The object header is added by ObjectStore.put, not here.
    """
    parts = []
    seen = set()
    for entry in sort_entries(entries):
        name = encode_name(entry.name)
        if not name or b'/' in name or b'\0' in name:
            raise ValueError(f"invalid tree entry name: {entry.name!r}")
        if name in seen:
            raise ValueError(f"duplicate tree entry name: {entry.name!r}")
        seen.add(name)
        parts.append(entry.mode.encode('ascii') + b' ' + name + b'\0' + entry.target.raw)
    return b''.join(parts)


def iter_tree_entries(payload):
    """Yield TreeEntry records from a tree payload in stored order.

    Raises CorruptTree as soon as an entry cannot be framed.
    """
    payload = bytes(payload)
    position = 0
    while position < len(payload):
        null_index = payload.find(b'\0', position)
        if null_index == -1:
            raise CorruptTree(f"tree entry at offset {position} has no NUL terminator")

        mode, sep, name = payload[position:null_index].partition(b' ')
        if not sep or not mode:
            raise CorruptTree(f"tree entry at offset {position} has no mode")

        target_start = null_index + 1
        target_end = target_start + DIGEST_SIZE
        if target_end > len(payload):
            raise CorruptTree(f"tree entry at offset {position} is truncated: "
                              f"{len(payload) - target_start} of {DIGEST_SIZE} address bytes present")

        try:
            mode = mode.decode('ascii')
        except UnicodeDecodeError:
            raise CorruptTree(f"tree entry at offset {position} has a non-ASCII mode") from None

        yield TreeEntry(mode, decode_name(name), HashAddress(payload[target_start:target_end]))
        position = target_end


def decode_tree(payload, strict=False):
    entries = list(iter_tree_entries(payload))
    if strict:
        for previous, current in zip(entries, entries[1:]):
            if encode_name(previous.name) >= encode_name(current.name):
                raise CorruptTree(f"tree entries out of order: {previous.name!r} before {current.name!r}")
    return entries
