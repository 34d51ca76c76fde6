# The command: kit clone <url> <directory>
# What it does: Clones a remote repository
# How it does: Kit has no transport of its own. It runs the external `git` executable: init, add the remote as origin, fetch, check out origin/master

import logging
import os
import subprocess
import sys

logger = logging.getLogger(__name__)

GIT = 'git'


def clone_steps(url, directory):
    return [
        ('initialize the directory as a git repository', [GIT, 'init', directory]),
        ('add the remote repository as origin', [GIT, '-C', directory, 'remote', 'add', 'origin', url]),
        ('fetch the objects from the remote repository', [GIT, '-C', directory, 'fetch', 'origin']),
        ('check out the master branch', [GIT, '-C', directory, 'checkout', 'origin/master']),
    ]


def run(args):
    os.makedirs(args.directory, exist_ok=True)

    for description, command in clone_steps(args.url, args.directory):
        logger.info("running %s", ' '.join(command))
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except FileNotFoundError:
            print(f"fatal: '{GIT}' executable not found; clone needs an installed git", file=sys.stderr)
            sys.exit(1)
        if result.returncode != 0:
            print(f"fatal: failed to {description}: {result.stderr.strip()}", file=sys.stderr)
            sys.exit(1)

    print(f"Cloned repository from {args.url} to {args.directory}")
