# What it does: Provides high-level functions for interacting with the repository structure, like finding the repo root, creating it, and moving the single HEAD pointer
# How it does: It reads/writes `HEAD` and the branch file it points to. `find_repo_root` walks up the directory tree to locate the `.kit` directory
# What data structure it uses: Uses recursion (linear recursion) to find the repo root. HEAD is a pointer to the newest node of the commit graph

import os

from . import config
from .errors import NotARepository
from .objects import ObjectStore

METADATA_DIR = config.METADATA_DIR
DEFAULT_BRANCH = 'master'


def find_repo_root(path='.'): # Recursively searches for the .kit directory to find the repository root
    path = os.path.abspath(path)
    kit_dir = os.path.join(path, METADATA_DIR)
    if os.path.isdir(kit_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def require_repo_root(path='.'):
    repo_root = find_repo_root(path)
    if not repo_root:
        raise NotARepository(os.path.abspath(path))
    return repo_root


def init_repository(path='.'): # Creates the .kit skeleton; returns (kit_dir, created)
    kit_dir = os.path.join(os.path.abspath(path), METADATA_DIR)
    if os.path.exists(kit_dir):
        return kit_dir, False

    os.makedirs(os.path.join(kit_dir, 'objects'))
    os.makedirs(os.path.join(kit_dir, 'refs', 'heads'))
    with open(os.path.join(kit_dir, 'HEAD'), 'w') as f:
        f.write(f'ref: refs/heads/{DEFAULT_BRANCH}\n')
    return kit_dir, True


def objects_dir(repo_root):
    return os.path.join(repo_root, METADATA_DIR, 'objects')


def open_store(repo_root): # An ObjectStore for the repository, honouring core.compression
    return ObjectStore(objects_dir(repo_root), compression_level=config.get_compression_level(repo_root))


def _head_ref_path(repo_root): # Path of the file HEAD resolves to (a branch file, or HEAD itself when detached)
    head_path = os.path.join(repo_root, METADATA_DIR, 'HEAD')
    if not os.path.exists(head_path):
        return head_path
    with open(head_path, 'r') as f:
        head_content = f.read().strip()
    if head_content.startswith('ref: '):
        ref_path = head_content.split(' ', 1)[1]
        return os.path.join(repo_root, METADATA_DIR, *ref_path.split('/'))
    return head_path


def get_head_commit(repo_root): # Retrieves the commit hash that HEAD points to, or None if there are no commits
    ref_path = _head_ref_path(repo_root)
    if not os.path.exists(ref_path) or os.path.getsize(ref_path) == 0:
        return None
    with open(ref_path, 'r') as f:
        value = f.read().strip()
    if value.startswith('ref: '):
        return None
    return value or None


def get_current_branch(repo_root): # Name of the branch HEAD points to, or None when detached
    head_path = os.path.join(repo_root, METADATA_DIR, 'HEAD')
    with open(head_path, 'r') as f:
        head_content = f.read().strip()
    if head_content.startswith('ref: refs/heads/'):
        return head_content[len('ref: refs/heads/'):]
    return None


def update_head(repo_root, commit_hash): # Moves the current branch (or a detached HEAD) to commit_hash
    ref_path = _head_ref_path(repo_root)
    os.makedirs(os.path.dirname(ref_path), exist_ok=True)
    with open(ref_path, 'w') as f:
        f.write(f"{commit_hash}\n")
