# The command: twig reset <commit-id>
# What it does: Moves the current branch to an arbitrary commit and makes the working directory match it
# How it does: Resolves the (possibly abbreviated) commit id, refuses if an untracked file would be overwritten, writes every file the commit tracks, deletes files tracked only by the current head, points the current branch at the commit and clears the staging area
# What data structure it uses: Dictionary ({path: hash} snapshots)

import sys
from utils import errors, resolver, workdir
from utils.repository import Repository


def reset_to_commit(repo, commit_ref):
    commit_id = resolver.resolve(repo.commits, commit_ref)
    target = repo.commits.get(commit_id)
    workdir.check_untracked_obstruction(repo, target.tracked_files)

    workdir.update_working_directory(repo, repo.head_files, target.tracked_files)
    repo.branches.set_head(repo.current_branch, commit_id)
    repo.staging.clear()
    return target


def run(args): #Executes the reset command
    try:
        repo = Repository.open()
        reset_to_commit(repo, args.commit)
        repo.save()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
