import argparse
from commands import (
    init, add, rm, commit, log, find, status, config,
    branch, rm_branch, checkout, reset, merge
)
# The main entry point for the Twig version control system
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(prog="twig", description="Twig: a small snapshot-based version control system.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Initialize a new repository.")
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Stage file contents for the next commit.")
    add_parser.add_argument("files", nargs="+", help="Files to add.")
    add_parser.set_defaults(func=add.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the staged changes.")
    commit_parser.add_argument("message", nargs="?", default="", help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: rm
    rm_parser = subparsers.add_parser("rm", help="Unstage a file or stage it for removal.")
    rm_parser.add_argument("file", help="The file to remove.")
    rm_parser.set_defaults(func=rm.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the history of the current branch.")
    log_parser.set_defaults(func=log.run)

    # Command: global-log
    global_log_parser = subparsers.add_parser("global-log", help="Show every commit ever made.")
    global_log_parser.set_defaults(func=log.run_global)

    # Command: find
    find_parser = subparsers.add_parser("find", help="Print the ids of commits with the given message.")
    find_parser.add_argument("message", help="The exact commit message.")
    find_parser.set_defaults(func=find.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the working tree status.")
    status_parser.set_defaults(func=status.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a configuration value.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.abbrev).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="List or create branches.")
    branch_parser.add_argument("name", nargs="?", help="The name of the branch to create.")
    branch_parser.set_defaults(func=branch.run)

    # Command: rm-branch
    rm_branch_parser = subparsers.add_parser("rm-branch", help="Delete a branch.")
    rm_branch_parser.add_argument("name", help="The name of the branch to delete.")
    rm_branch_parser.set_defaults(func=rm_branch.run)

    # Command: checkout
    checkout_parser = subparsers.add_parser("checkout", help="Switch branches or restore a file.")
    checkout_parser.add_argument("targets", nargs="+", help="<branch> | [<commit>] [--] <file>")
    checkout_parser.set_defaults(func=checkout.run)

    # Command: reset
    reset_parser = subparsers.add_parser("reset", help="Move the current branch to a commit.")
    reset_parser.add_argument("commit", help="The (possibly abbreviated) commit id.")
    reset_parser.set_defaults(func=reset.run)

    # Command: merge
    merge_parser = subparsers.add_parser("merge", help="Merge a branch into the current branch.")
    merge_parser.add_argument("branch", help="The branch to merge.")
    merge_parser.set_defaults(func=merge.run)

    # Parse the arguments
    args = parser.parse_args(argv)

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
