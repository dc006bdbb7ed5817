# The command: twig status
# What it does: Lists the branches, the staged additions and removals, working-directory changes that are not staged, and untracked files
# How it does: It compares three states: the head commit's {path: hash} snapshot, the staging area, and the hashes of the files currently in the working directory
# What data structure it uses: Hash Table / Dictionary (to represent the three states for efficient O(1) average time complexity lookups), Lists (sorted output sections)

import sys
from utils import errors, workdir
from utils.repository import Repository


def _section(header, entries):
    return [f"=== {header} ===", *entries, ""]


def format_status(repo):
    branches = []
    for name in repo.branches.names():
        branches.append(f"*{name}" if name == repo.current_branch else name)

    unstaged = workdir.modifications_not_staged(repo)

    lines = []
    lines += _section("Branches", branches)
    lines += _section("Staged Files", sorted(repo.staging.additions))
    lines += _section("Removed Files", sorted(repo.staging.removals))
    lines += _section("Modifications Not Staged For Commit",
                      [f"{path} ({change})" for path, change in sorted(unstaged.items())])
    lines += _section("Untracked Files", workdir.untracked_files(repo))
    return "\n".join(lines)


def run(args): # Compares the head commit, the staging area and the working directory and prints the status
    try:
        repo = Repository.open()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    print(format_status(repo))
