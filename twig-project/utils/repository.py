# What it does: Locates the repository and bundles all of its state (object store, commit graph, branch table, staging area) into one context object for the duration of a command
# How it does: `find_repo_root` walks up the directory tree to locate the `.twig` directory. `Repository.open` loads every piece of state through the storage service, commands mutate it in memory, and `save` writes it back once the command has succeeded
# What data structure it uses: Uses recursion (specifically, linear recursion) to find the repo root. The context object owns the Hash Tables and the commit DAG defined in the other utils modules

import os

from .branches import DEFAULT_BRANCH, BranchTable
from .commits import CommitGraph
from .errors import AlreadyInitialized, FileNotFound, NotInitialized
from .index import StagingArea
from .objects import ObjectStore
from .storage import TWIG_DIR, Storage


def find_repo_root(path='.'): # Recursively searches for the .twig directory to find the repository root
    path = os.path.abspath(path)
    twig_dir = os.path.join(path, TWIG_DIR)
    if os.path.isdir(twig_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


class Repository:

    def __init__(self, repo_root, storage, objects, commits, branches, staging):
        self.repo_root = repo_root
        self.storage = storage
        self.objects = objects
        self.commits = commits
        self.branches = branches
        self.staging = staging

    @classmethod
    def open(cls, path='.'):
        repo_root = find_repo_root(path)
        if not repo_root:
            raise NotInitialized()
        storage = Storage(repo_root)
        return cls(
            repo_root,
            storage,
            ObjectStore(storage, storage.load('blob-index')),
            CommitGraph(storage.load('commit-graph'), storage.load('commit-prefix-index')),
            BranchTable(storage.load('branch-table'), storage.load('current-branch')),
            StagingArea(storage.load('staging-additions'), storage.load('staging-removals')),
        )

    @classmethod
    def initialize(cls, path='.'):
        """
        Creates a repository in path with a single branch, master, pointing
        at the initial commit (no files, epoch timestamp).
        """
        repo_root = os.path.abspath(path)
        if os.path.exists(os.path.join(repo_root, TWIG_DIR)):
            raise AlreadyInitialized()
        storage = Storage(repo_root)
        storage.create_layout()
        repo = cls(repo_root, storage, ObjectStore(storage), CommitGraph(), BranchTable(), StagingArea())
        root = repo.commits.create_root()
        repo.branches.set_head(DEFAULT_BRANCH, root.id)
        repo.save()
        return repo

    @property
    def current_branch(self):
        return self.branches.current

    @property
    def head_commit(self):
        return self.commits.get(self.branches.current_head)

    @property
    def head_files(self):
        return self.head_commit.tracked_files

    def relative_path(self, path): # Normalizes a user-supplied path to a repo-relative path with '/' separators
        rel_path = os.path.relpath(os.path.abspath(path), self.repo_root).replace(os.sep, '/')
        # Nothing outside the working tree (or the .twig directory itself) can be tracked
        if rel_path == '..' or rel_path.startswith('../') or rel_path.split('/')[0] in ('.', TWIG_DIR):
            raise FileNotFound()
        return rel_path

    def save(self):
        self.objects.flush()
        self.storage.save('commit-graph', self.commits.commits)
        self.storage.save('commit-prefix-index', self.commits.prefixes)
        self.storage.save('branch-table', self.branches.heads)
        self.storage.save('current-branch', self.branches.current)
        self.storage.save('staging-additions', self.staging.additions)
        self.storage.save('staging-removals', self.staging.removals)
