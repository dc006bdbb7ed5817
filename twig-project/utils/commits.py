# What it does: Holds the commit history: immutable commit nodes, the full-id index and the abbreviated (6 character) id index
# How it does: A commit is serialized into a canonical text form (timestamp, parents, tracked files, message) and its id is the SHA-1 of that text, so the id is a pure function of the commit's content. `CommitGraph.create` is the only way to make a commit and registers it in both indexes
# What data structure it uses: Directed Acyclic Graph (each commit links to one or two parents), Hash Tables (id -> commit, prefix -> id suffixes)

import time
from dataclasses import dataclass, field

from .errors import AmbiguousCommitId, NoSuchCommit
from .objects import hash_object

PREFIX_LENGTH = 6
INITIAL_MESSAGE = 'initial commit'


@dataclass(frozen=True)
class Commit:
    id: str
    message: str
    timestamp: int
    parent: str = None
    second_parent: str = None
    tracked_files: dict = field(default_factory=dict)

    @property
    def parents(self):
        return [p for p in (self.parent, self.second_parent) if p]

    @property
    def is_merge(self):
        return self.second_parent is not None


def serialize_commit(message, timestamp, parents, tracked_files): # Canonical byte form of a commit; the commit id is derived from it
    lines = [f'timestamp {timestamp}']
    for parent in parents:
        lines.append(f'parent {parent}')
    for name in sorted(tracked_files):
        lines.append(f'blob {tracked_files[name]} {name}')
    lines.append('')
    lines.append(message)
    return '\n'.join(lines).encode()


def parse_commit(commit_id, content): # Rebuilds a Commit from its serialized bytes
    lines = content.decode().split('\n')
    timestamp = 0
    parents = []
    tracked_files = {}
    for i, line in enumerate(lines):
        if not line:
            message = '\n'.join(lines[i + 1:])
            break
        kind, value = line.split(' ', 1)
        if kind == 'timestamp':
            timestamp = int(value)
        elif kind == 'parent':
            parents.append(value)
        elif kind == 'blob':
            blob_id, name = value.split(' ', 1)
            tracked_files[name] = blob_id
    else:
        message = ''
    parents += [None, None]
    return Commit(commit_id, message, timestamp, parents[0], parents[1], tracked_files)


def build_snapshot(parent_files, additions, removals):
    """
    New tracked files for a commit: the parent's snapshot, overridden by the
    staged additions, with the staged removals dropped.
    """
    snapshot = dict(parent_files)
    snapshot.update(additions)
    for name in removals:
        snapshot.pop(name, None)
    return snapshot


class CommitGraph:

    def __init__(self, commits=None, prefixes=None):
        self.commits = dict(commits or {})
        # prefix -> id suffixes in insertion order
        self.prefixes = {prefix: list(suffixes) for prefix, suffixes in (prefixes or {}).items()}

    def create(self, message, parent, second_parent=None, tracked_files=None, timestamp=None):
        if timestamp is None:
            timestamp = int(time.time())
        tracked_files = dict(tracked_files or {})
        parents = [p for p in (parent, second_parent) if p]
        content = serialize_commit(message, timestamp, parents, tracked_files)
        commit_id = hash_object(content, 'commit')
        if commit_id not in self.commits:
            self.commits[commit_id] = Commit(commit_id, message, timestamp, parent, second_parent, tracked_files)
            self.prefixes.setdefault(commit_id[:PREFIX_LENGTH], []).append(commit_id[PREFIX_LENGTH:])
        return self.commits[commit_id]

    def create_root(self):
        return self.create(INITIAL_MESSAGE, None, timestamp=0)

    def get(self, commit_id):
        try:
            return self.commits[commit_id]
        except KeyError:
            raise NoSuchCommit() from None

    def __contains__(self, commit_id):
        return commit_id in self.commits

    def __iter__(self):
        return iter(self.commits.values())

    def __len__(self):
        return len(self.commits)

    def resolve_prefix(self, prefix):
        # Exactly six characters returns the first indexed match without
        # checking that it is unique; longer prefixes must be unambiguous.
        head, rest = prefix[:PREFIX_LENGTH], prefix[PREFIX_LENGTH:]
        suffixes = self.prefixes.get(head)
        if len(prefix) < PREFIX_LENGTH or not suffixes:
            raise NoSuchCommit()
        if not rest:
            return head + suffixes[0]
        matches = [head + suffix for suffix in suffixes if suffix.startswith(rest)]
        if not matches:
            raise NoSuchCommit()
        if len(matches) > 1:
            raise AmbiguousCommitId(prefix)
        return matches[0]

    def first_parent_history(self, commit_id): # Yields commits from commit_id back to the root, ignoring second parents
        while commit_id:
            commit = self.get(commit_id)
            yield commit
            commit_id = commit.parent

    def find_by_message(self, message):
        return [commit.id for commit in self if commit.message == message]
