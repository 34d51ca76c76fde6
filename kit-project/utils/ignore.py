# What it does: Implements the `.kitignore` functionality used while snapshotting a directory
# What data structure it uses: Set (to store the ignore patterns for near O(1) de-duplication)

import os
from fnmatch import fnmatch

IGNORE_FILE = '.kitignore'


def get_ignored_patterns(repo_root):
    """
    Reads the .kitignore file and returns a set of glob patterns.
    """
    ignore_file = os.path.join(repo_root, IGNORE_FILE)
    patterns = set()

    if os.path.exists(ignore_file):
        with open(ignore_file, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    patterns.add(line.rstrip('/'))
    return patterns


def is_ignored(path, ignore_patterns): # Returns True if the relative path or any of its segments matches a pattern
    path = path.replace(os.sep, '/')
    for pattern in ignore_patterns:
        if fnmatch(path, pattern) or any(fnmatch(part, pattern) for part in path.split('/')):
            return True
    return False
