# The command: twig commit <message>
# What it does: Creates a permanent, uniquely identified snapshot (a commit) of the head commit's files plus the staged changes
# How it does: It starts from the parent commit's complete {path: blob hash} snapshot, applies the staged additions and removals, and records the result with the message and a timestamp. The current branch is advanced to the new commit and the staging area is cleared
# What data structure it uses: Directed Acyclic Graph (DAG) (as each commit links to its parents, forming the history graph), Hash Table / Dictionary (the snapshot and the staging area)

import sys
from utils import config, errors
from utils.commits import build_snapshot
from utils.repository import Repository


def create_commit(repo, message, second_parent=None): # Creates a commit from the staging area and advances the current branch
    if not message or not message.strip():
        raise errors.EmptyCommitMessage()
    # A merge commit records its two parents even if nothing ended up staged
    if repo.staging.is_empty() and second_parent is None:
        raise errors.NoChangesStaged()

    parent = repo.head_commit
    tracked_files = build_snapshot(parent.tracked_files, repo.staging.additions, repo.staging.removals)
    new_commit = repo.commits.create(message, parent.id, second_parent, tracked_files)

    repo.branches.set_head(repo.current_branch, new_commit.id)
    repo.staging.clear()
    return new_commit


def run(args):
    try:
        repo = Repository.open()
        new_commit = create_commit(repo, args.message)
        repo.save()
        abbrev = config.get_abbrev(repo.repo_root)
        print(f"[{repo.current_branch} {new_commit.id[:abbrev]}] {new_commit.message.splitlines()[0]}")
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
