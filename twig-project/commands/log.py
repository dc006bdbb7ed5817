# The commands: twig log / twig global-log
# What it does: Displays commit history. `log` starts at the current head and walks back to the initial commit; `global-log` shows every commit ever made
# How it does: `log` follows only the first parent of each commit, so the commits merged in from another branch are not listed; merge commits show both parents on a `Merge:` line. `global-log` iterates the whole commit graph
# What data structure it uses: It performs a Graph Traversal (a linear walk up the first-parent chain) on the Directed Acyclic Graph (DAG) formed by the commits

import sys
import time
from utils import config, errors
from utils.repository import Repository


def format_date(timestamp): # e.g. "Thu Jan 1 00:00:00 1970 +0000"
    t = time.localtime(timestamp)
    return f"{time.strftime('%a %b', t)} {t.tm_mday} {time.strftime('%H:%M:%S %Y %z', t)}"


def format_commit(commit, abbrev):
    lines = ["===", f"commit {commit.id}"]
    if commit.is_merge:
        lines.append(f"Merge: {commit.parent[:abbrev]} {commit.second_parent[:abbrev]}")
    lines.append(f"Date: {format_date(commit.timestamp)}")
    lines.append(commit.message)
    lines.append("")
    return "\n".join(lines)


def run(args):
    try:
        repo = Repository.open()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    abbrev = config.get_abbrev(repo.repo_root)
    for commit in repo.commits.first_parent_history(repo.branches.current_head):
        print(format_commit(commit, abbrev))


def run_global(args):
    try:
        repo = Repository.open()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    abbrev = config.get_abbrev(repo.repo_root)
    # Newest first; the order is otherwise unspecified
    for commit in sorted(repo.commits, key=lambda c: (-c.timestamp, c.id)):
        print(format_commit(commit, abbrev))
