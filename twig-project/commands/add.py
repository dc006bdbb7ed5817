# The command: twig add <file>...
# What it does: Stages the current contents of files for the next commit
# How it does: For each file it hashes the working content. If that matches what the head commit already tracks, any staged entry for the file is dropped; otherwise the content is stored as a blob and the path is staged for addition under its hash
# What data structure it uses: Hash Table / Dictionary (the staging area's additions mapping and the object store)

import sys
from utils import errors, workdir
from utils.repository import Repository


def add_file(repo, path): # Stages one repo-relative path; returns the staged blob hash or None if it matched the head version
    content = workdir.read_working_file(repo.repo_root, path)
    if content is None:
        raise errors.FileNotFound()
    return repo.staging.add(path, content, repo.head_files.get(path), repo.objects)


def run(args):
    try:
        repo = Repository.open()
        paths = [repo.relative_path(f) for f in args.files]
        # Check every file first so a bad path stages nothing
        for path in paths:
            if workdir.read_working_file(repo.repo_root, path) is None:
                raise errors.FileNotFound()
        for path in paths:
            add_file(repo, path)
        repo.save()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
