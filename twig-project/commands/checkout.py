# The command: twig checkout <branch-name> | [<commit-id>] <file>
# What it does: Switches branches OR restores a single file from a commit into the working directory
# How it does:
#   - If <branch-name>: Checks that no untracked file would be overwritten, writes every file of the branch's head commit, deletes files tracked only by the current head, makes the branch current and clears the staging area.
#   - If [<commit-id>] <file>: Resolves the (possibly abbreviated) commit id, defaulting to the head commit, and overwrites the working file with that commit's version. Nothing is staged.
# What data structure it uses: Dictionary ({path: hash} snapshots), Hash Table (object store lookup).

import sys
from utils import errors, resolver, workdir
from utils.repository import Repository


def checkout_file(repo, commit_id, path):
    commit = repo.commits.get(commit_id)
    if path not in commit.tracked_files:
        raise errors.FileNotInCommit()
    workdir.write_working_file(repo.repo_root, path, repo.objects.get(commit.tracked_files[path]))


def checkout_branch(repo, name):
    if name not in repo.branches:
        raise errors.NoSuchBranch("No such branch exists.")
    if name == repo.current_branch:
        raise errors.SelfCheckout()
    target = repo.commits.get(repo.branches.head(name))
    workdir.check_untracked_obstruction(repo, target.tracked_files)

    workdir.update_working_directory(repo, repo.head_files, target.tracked_files)
    repo.branches.switch_current(name)
    repo.staging.clear()


def _names_a_file(repo, target): # True if target is a file in the head commit or the working directory
    try:
        path = repo.relative_path(target)
    except errors.FileNotFound:
        return False
    return path in repo.head_files or workdir.read_working_file(repo.repo_root, path) is not None


def run(args):
    targets = [t for t in args.targets if t != '--']
    try:
        repo = Repository.open()
        if len(targets) == 1:
            target = targets[0]
            if target in repo.branches:
                checkout_branch(repo, target)
                print(f"Switched to branch '{target}'")
            elif _names_a_file(repo, target):
                checkout_file(repo, repo.branches.current_head, repo.relative_path(target))
            else:
                raise errors.NoSuchBranch("No such branch exists.")
        elif len(targets) == 2:
            commit_id = resolver.resolve(repo.commits, targets[0])
            checkout_file(repo, commit_id, repo.relative_path(targets[1]))
        else:
            print("usage: twig checkout <branch> | [<commit>] <file>", file=sys.stderr)
            sys.exit(1)
        repo.save()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
