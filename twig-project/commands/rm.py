# The command: twig rm <file>
# What it does: Unstages a file staged for addition, or stages a tracked file for removal and deletes it from the working directory
# How it does: It consults the staging area first, then the head commit's tracked files; a file known to neither cannot be removed

import sys
from utils import errors, workdir
from utils.repository import Repository


def remove_file(repo, path):
    if repo.staging.remove(path, repo.head_files.get(path)):
        workdir.delete_working_file(repo.repo_root, path)


def run(args):
    try:
        repo = Repository.open()
        remove_file(repo, repo.relative_path(args.file))
        repo.save()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
