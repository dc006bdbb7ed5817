# The command: twig branch [<branch-name>]
# What it does: Creates a new branch pointer to the current head commit, or if no name is given, it lists all existing branches
# How it does: Creating a branch adds a name -> head commit entry to the branch table without switching to it. Listing prints the names sorted, marking the current one with an asterisk
# What data structure it uses: Map / Dictionary (the branch table maps branch names to commit hashes), List (to hold branch names for sorting and display)

import sys
from utils import config, errors
from utils.repository import Repository


def run(args):
#With no arguments, lists all branches.
#With an argument, creates a new branch.
    try:
        repo = Repository.open()
        if args.name:
            repo.branches.create(args.name)
            repo.save()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    if args.name:
        abbrev = config.get_abbrev(repo.repo_root)
        print(f"Branch '{args.name}' created at commit {repo.branches.head(args.name)[:abbrev]}")
    else:
        for name in repo.branches.names():
            if name == repo.current_branch:
                print(f"* {name}")
            else:
                print(f"  {name}")
