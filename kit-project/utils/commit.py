# What it does: Renders, stores and parses commit objects
# How it does: A commit payload is "tree <hex>", an optional "parent <hex>", the author and committer lines, a blank line and the message. Parsing reads header lines until the blank line
# What data structure it uses: Directed Acyclic Graph (DAG), each commit links to at most one parent

from typing import NamedTuple, Optional

from .errors import CorruptCommit
from .hashing import HashAddress, as_address


class Commit(NamedTuple):
    tree: HashAddress
    parent: Optional[HashAddress]
    author: str
    committer: str
    message: str


def render_commit(tree, parent, author, committer, message):
    lines = [f'tree {as_address(tree)}']
    if parent is not None:
        lines.append(f'parent {as_address(parent)}')
    lines.append(f'author {author}')
    lines.append(f'committer {committer}')
    lines.append('')
    lines.append(message + '\n')
    return '\n'.join(lines).encode()


def build_commit(store, tree, parent, author, committer, message): # Stores a commit object and returns its address
    return store.put('commit', render_commit(tree, parent, author, committer, message))


def parse_commit(content):
    text = content.decode()
    header, sep, message = text.partition('\n\n')
    if not sep:
        raise CorruptCommit("commit has no blank line before the message")

    fields = {}
    for line in header.splitlines():
        key, _, value = line.partition(' ')
        if key in fields:
            raise CorruptCommit(f"commit has more than one {key!r} line")
        fields[key] = value

    if 'tree' not in fields:
        raise CorruptCommit("commit has no tree line")

    try:
        tree = as_address(fields['tree'])
        parent = as_address(fields['parent']) if 'parent' in fields else None
    except ValueError as e:
        raise CorruptCommit(str(e)) from e

    # The stored message always carries one terminating newline
    return Commit(tree=tree,
                  parent=parent,
                  author=fields.get('author', ''),
                  committer=fields.get('committer', ''),
                  message=message[:-1] if message.endswith('\n') else message)
