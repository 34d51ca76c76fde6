import argparse
from commands import (
    init, hash_object, cat_file, ls_tree, write_tree,
    commit_tree, commit, log, config, clone
)
from utils.log import setup_logging
from utils.objects import OBJECT_TYPES


def build_parser():
    # The main parser
    parser = argparse.ArgumentParser(prog="kit", description="Kit: a content-addressable object store.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more detail to stderr (repeat for debug output).")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create an empty repository.")
    init_parser.add_argument("directory", nargs="?", default=".", help="Where to create the repository.")
    init_parser.set_defaults(func=init.run)

    # Command: hash-object
    hash_object_parser = subparsers.add_parser("hash-object", help="Compute an object address, optionally storing the object.")
    hash_object_parser.add_argument("-w", dest="write", action="store_true", help="Write the object into the store.")
    hash_object_parser.add_argument("-t", dest="type", choices=OBJECT_TYPES, default="blob", help="Object type (default: blob).")
    hash_object_parser.add_argument("file", help="File to hash.")
    hash_object_parser.set_defaults(func=hash_object.run)

    # Command: cat-file
    cat_file_parser = subparsers.add_parser("cat-file", help="Show the content, type or size of an object.")
    cat_mode = cat_file_parser.add_mutually_exclusive_group(required=True)
    cat_mode.add_argument("-p", dest="mode", action="store_const", const="pretty", help="Pretty-print the content.")
    cat_mode.add_argument("-t", dest="mode", action="store_const", const="type", help="Show the object type.")
    cat_mode.add_argument("-s", dest="mode", action="store_const", const="size", help="Show the payload size.")
    cat_file_parser.add_argument("object", help="Object address, or HEAD.")
    cat_file_parser.set_defaults(func=cat_file.run)

    # Command: ls-tree
    ls_tree_parser = subparsers.add_parser("ls-tree", help="List the entries of a tree object.")
    ls_tree_parser.add_argument("--name-only", action="store_true", help="Only print entry names.")
    ls_tree_parser.add_argument("-r", dest="recursive", action="store_true", help="Recurse into subtrees.")
    ls_tree_parser.add_argument("--strict", action="store_true", help="Reject trees whose entries are not sorted.")
    ls_tree_parser.add_argument("tree", help="Tree or commit address, or HEAD.")
    ls_tree_parser.set_defaults(func=ls_tree.run)

    # Command: write-tree
    write_tree_parser = subparsers.add_parser("write-tree", help="Store the working directory as a tree object.")
    write_tree_parser.set_defaults(func=write_tree.run)

    # Command: commit-tree
    commit_tree_parser = subparsers.add_parser("commit-tree", help="Create a commit object for a tree.")
    commit_tree_parser.add_argument("tree", help="Address of the tree to commit.")
    commit_tree_parser.add_argument("-p", dest="parent", help="Address of the parent commit.")
    commit_tree_parser.add_argument("-m", "--message", required=True, help="Commit message.")
    commit_tree_parser.set_defaults(func=commit_tree.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Snapshot the working directory and record a commit.")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show commit logs.")
    log_parser.add_argument("commit", nargs="?", help="Commit to start from (default: HEAD).")
    log_parser.set_defaults(func=log.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Get or set a configuration value.")
    config_parser.add_argument("key", help="The configuration key (e.g., user.name).")
    config_parser.add_argument("value", nargs="?", help="The value to set; omit to print the current value.")
    config_parser.set_defaults(func=config.run)

    # Command: clone
    clone_parser = subparsers.add_parser("clone", help="Clone a remote repository using the installed git.")
    clone_parser.add_argument("url", help="Repository URL.")
    clone_parser.add_argument("directory", help="Directory to clone into.")
    clone_parser.set_defaults(func=clone.run)

    return parser


# The main entry point for the Kit object store
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
