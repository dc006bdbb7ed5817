# What it does: Moves tracked content between the object store and the working directory, and compares the working directory with the head commit and the staging area
# How it does: Working files are addressed by repo-relative paths with '/' separators. `update_working_directory` first deletes files the current snapshot tracks but the target does not (pruning directories left empty), then writes every file of the target snapshot. `check_untracked_obstruction` refuses to run such an update when it would overwrite or displace a file twig does not track
# What data structure it uses: Dictionaries ({path: hash} snapshots), Sets (path comparisons), and Tree Traversal (using os.walk to scan the repository)

import os

from .errors import UntrackedObstruction
from .ignore import get_ignored_patterns, is_ignored
from .objects import hash_object
from .storage import TWIG_DIR


def _full_path(repo_root, path):
    return os.path.join(repo_root, *path.split('/'))


def list_working_files(repo_root, include_ignored=False): # Every file under the repo root outside .twig, as sorted repo-relative paths
    ignore_patterns = get_ignored_patterns(repo_root)
    working_files = []
    for root, dirs, files in os.walk(repo_root):
        if TWIG_DIR in dirs:
            dirs.remove(TWIG_DIR)
        rel_root = os.path.relpath(root, repo_root).replace(os.sep, '/')
        for file in files:
            rel_path = file if rel_root == '.' else f"{rel_root}/{file}"
            if include_ignored or not is_ignored(rel_path, ignore_patterns):
                working_files.append(rel_path)
    return sorted(working_files)


def read_working_file(repo_root, path): # Returns the file's bytes, or None if it is not a regular file
    full_path = _full_path(repo_root, path)
    if not os.path.isfile(full_path):
        return None
    with open(full_path, 'rb') as f:
        return f.read()


def write_working_file(repo_root, path, content):
    full_path = _full_path(repo_root, path)
    dir_name = os.path.dirname(full_path)
    if dir_name and not os.path.exists(dir_name):
        os.makedirs(dir_name, exist_ok=True)
    with open(full_path, 'wb') as f:
        f.write(content)


def delete_working_file(repo_root, path): # Also removes directories the deletion leaves empty, up to the repo root
    full_path = _full_path(repo_root, path)
    if os.path.isfile(full_path):
        os.remove(full_path)
    dir_name = os.path.dirname(full_path)
    while len(dir_name) > len(os.path.normpath(repo_root)) and os.path.isdir(dir_name) and not os.listdir(dir_name):
        os.rmdir(dir_name)
        dir_name = os.path.dirname(dir_name)


def working_hashes(repo_root): # {path: blob hash} for the working directory, without storing anything
    hashes = {}
    for path in list_working_files(repo_root):
        hashes[path] = hash_object(read_working_file(repo_root, path))
    return hashes


def untracked_files(repo, include_ignored=False):
    """
    Working files that are neither staged for addition nor tracked by the
    head commit. A file staged for removal and then re-created counts as
    untracked.
    """
    head_files = repo.head_files
    staging = repo.staging
    untracked = []
    for path in list_working_files(repo.repo_root, include_ignored):
        tracked = path in head_files and path not in staging.removals
        if not tracked and path not in staging.additions:
            untracked.append(path)
    return untracked


def _parent_dirs(path): # 'a/b/c' -> ['a', 'a/b']
    parts = path.split('/')
    return ['/'.join(parts[:i]) for i in range(1, len(parts))]


def check_untracked_obstruction(repo, target_files):
    """
    Raises UntrackedObstruction if switching to target_files would clobber
    a file twig does not track. Ignore rules do not apply here. Besides a
    plain overwrite, a file left on disk is in the way when the target
    needs a directory at its path, or a file where it sits in a directory.
    """
    head_files = repo.head_files
    target_dirs = {parent for path in target_files for parent in _parent_dirs(path)}
    in_the_way = set(path for path in untracked_files(repo, include_ignored=True) if path in target_files)
    for path in list_working_files(repo.repo_root, include_ignored=True):
        if path in head_files:
            continue
        if path in target_dirs or any(parent in target_files for parent in _parent_dirs(path)):
            in_the_way.add(path)
    if in_the_way:
        raise UntrackedObstruction(in_the_way)


def update_working_directory(repo, current_files, target_files):
    # Deletions go first so a file and a directory can trade places
    for path in sorted(current_files):
        if path not in target_files:
            delete_working_file(repo.repo_root, path)
    for path, blob_hash in sorted(target_files.items()):
        write_working_file(repo.repo_root, path, repo.objects.get(blob_hash))


def modifications_not_staged(repo):
    """
    Returns {path: 'modified' | 'deleted'} for changes in the working
    directory that the staging area does not account for.
    """
    working = working_hashes(repo.repo_root)
    head_files = repo.head_files
    additions = repo.staging.additions
    removals = repo.staging.removals
    changes = {}

    for path, blob_hash in working.items():
        if path in additions:
            if additions[path] != blob_hash:
                changes[path] = 'modified'
        elif path in head_files and path not in removals and head_files[path] != blob_hash:
            changes[path] = 'modified'

    for path in additions:
        if path not in working:
            changes[path] = 'deleted'
    for path in head_files:
        if path not in working and path not in removals:
            changes[path] = 'deleted'
    return changes
