# What it does: Persists all repository state under the `.twig` directory behind a small load(key) / save(key, value) interface
# How it does: Each key maps to a plain-text file (or directory of files) in `.twig`. Commits are written once and never rewritten; branch refs and the HEAD file follow the usual `refs/heads/<name>` and `ref: refs/heads/<name>` layout
# What data structure it uses: Dictionaries in memory, line-oriented text files on disk

import os

from .commits import parse_commit, serialize_commit

TWIG_DIR = '.twig'

KEYS = (
    'commit-graph',
    'commit-prefix-index',
    'branch-table',
    'current-branch',
    'staging-additions',
    'staging-removals',
    'blob-index',
)


class Storage:

    def __init__(self, repo_root):
        self.repo_root = repo_root
        self.twig_dir = os.path.join(repo_root, TWIG_DIR)

    def path(self, *parts):
        return os.path.join(self.twig_dir, *parts)

    def create_layout(self): # Creates the empty .twig directory structure
        for parts in (('commits',), ('objects',), ('refs', 'heads'), ('staging',)):
            os.makedirs(self.path(*parts), exist_ok=True)

    def load(self, key):
        if key not in KEYS:
            raise KeyError(key)
        return getattr(self, '_load_' + key.replace('-', '_'))()

    def save(self, key, value):
        if key not in KEYS:
            raise KeyError(key)
        getattr(self, '_save_' + key.replace('-', '_'))(value)

    # Blob content

    def read_blob(self, rel_path):
        with open(self.path(*rel_path.split('/')), 'rb') as f:
            return f.read()

    def write_blob(self, rel_path, content):
        full_path = self.path(*rel_path.split('/'))
        if os.path.exists(full_path):
            return
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, 'wb') as f:
            f.write(content)

    # commit-graph: one file per commit, never rewritten

    def _load_commit_graph(self):
        commits = {}
        commits_dir = self.path('commits')
        if not os.path.isdir(commits_dir):
            return commits
        for commit_id in sorted(os.listdir(commits_dir)):
            with open(os.path.join(commits_dir, commit_id), 'rb') as f:
                commits[commit_id] = parse_commit(commit_id, f.read())
        return commits

    def _save_commit_graph(self, commits):
        commits_dir = self.path('commits')
        os.makedirs(commits_dir, exist_ok=True)
        for commit_id, commit in commits.items():
            commit_path = os.path.join(commits_dir, commit_id)
            if os.path.exists(commit_path):
                continue
            with open(commit_path, 'wb') as f:
                f.write(serialize_commit(commit.message, commit.timestamp, commit.parents, commit.tracked_files))

    # commit-prefix-index: "<prefix> <suffix>" lines, kept in insertion order

    def _load_commit_prefix_index(self):
        prefixes = {}
        for prefix, suffix in self._read_pairs('commit-prefixes'):
            prefixes.setdefault(prefix, []).append(suffix)
        return prefixes

    def _save_commit_prefix_index(self, prefixes):
        pairs = [(prefix, suffix) for prefix, suffixes in prefixes.items() for suffix in suffixes]
        self._write_pairs('commit-prefixes', pairs)

    # branch-table: refs/heads/<name> holds the head commit id; names may contain '/'

    def _list_refs(self, heads_dir):
        names = []
        for root, dirs, files in os.walk(heads_dir):
            rel_root = os.path.relpath(root, heads_dir).replace(os.sep, '/')
            for file in files:
                names.append(file if rel_root == '.' else f"{rel_root}/{file}")
        return names

    def _load_branch_table(self):
        heads = {}
        heads_dir = self.path('refs', 'heads')
        if not os.path.isdir(heads_dir):
            return heads
        for name in self._list_refs(heads_dir):
            with open(os.path.join(heads_dir, *name.split('/')), 'r') as f:
                heads[name] = f.read().strip()
        return heads

    def _save_branch_table(self, heads):
        heads_dir = self.path('refs', 'heads')
        os.makedirs(heads_dir, exist_ok=True)
        for name in self._list_refs(heads_dir):
            if name not in heads:
                ref_path = os.path.join(heads_dir, *name.split('/'))
                os.remove(ref_path)
                ref_dir = os.path.dirname(ref_path)
                while ref_dir != heads_dir and not os.listdir(ref_dir):
                    os.rmdir(ref_dir)
                    ref_dir = os.path.dirname(ref_dir)
        for name, commit_id in heads.items():
            ref_path = os.path.join(heads_dir, *name.split('/'))
            os.makedirs(os.path.dirname(ref_path), exist_ok=True)
            with open(ref_path, 'w') as f:
                f.write(f"{commit_id}\n")

    # current-branch: HEAD holds a symbolic ref

    def _load_current_branch(self):
        with open(self.path('HEAD'), 'r') as f:
            head_content = f.read().strip()
        return head_content.split('ref: refs/heads/', 1)[-1]

    def _save_current_branch(self, name):
        with open(self.path('HEAD'), 'w') as f:
            f.write(f"ref: refs/heads/{name}\n")

    # staging-additions / staging-removals: "<hash> <path>" lines

    def _load_staging_additions(self):
        return {path: hash_val for hash_val, path in self._read_pairs('staging', 'additions')}

    def _save_staging_additions(self, additions):
        self._write_pairs(('staging', 'additions'), [(h, p) for p, h in sorted(additions.items())])

    def _load_staging_removals(self):
        return {path: hash_val for hash_val, path in self._read_pairs('staging', 'removals')}

    def _save_staging_removals(self, removals):
        self._write_pairs(('staging', 'removals'), [(h, p) for p, h in sorted(removals.items())])

    # blob-index: "<hash> <object path>" lines

    def _load_blob_index(self):
        return dict(self._read_pairs('blob-index'))

    def _save_blob_index(self, blob_index):
        self._write_pairs('blob-index', sorted(blob_index.items()))

    def _read_pairs(self, *parts):
        file_path = self.path(*parts)
        pairs = []
        if not os.path.exists(file_path):
            return pairs
        with open(file_path, 'r') as f:
            for line in f:
                line = line.rstrip('\n')
                if line:
                    first, second = line.split(' ', 1)
                    pairs.append((first, second))
        return pairs

    def _write_pairs(self, parts, pairs):
        if isinstance(parts, str):
            parts = (parts,)
        file_path = self.path(*parts)
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        with open(file_path, 'w') as f:
            for first, second in pairs:
                f.write(f"{first} {second}\n")
