# What it does: Holds the staging area: files staged for addition and files staged for removal, relative to the current head commit
# How it does: Two disjoint {path: blob hash} dictionaries. `add` and `remove` apply the staging rules given the file's content and the blob the head commit tracks for it; reading and deleting working files is left to the caller
# What data structure it uses: Dictionaries (mapping file paths to blob hashes)

from .errors import NothingToRemove
from .objects import hash_object


class StagingArea:

    def __init__(self, additions=None, removals=None):
        self.additions = dict(additions or {})
        self.removals = dict(removals or {})

    def is_empty(self):
        return not self.additions and not self.removals

    def clear(self):
        self.additions.clear()
        self.removals.clear()

    def unstage(self, path): # Drops any staged entry for path
        self.additions.pop(path, None)
        self.removals.pop(path, None)

    def stage_addition(self, path, blob_hash):
        self.removals.pop(path, None)
        self.additions[path] = blob_hash

    def stage_removal(self, path, blob_hash):
        self.additions.pop(path, None)
        self.removals[path] = blob_hash

    def add(self, path, content, head_hash, object_store):
        """
        Stages content for path.

        When the content matches the version tracked by the head commit,
        nothing is written and any staged entry for the path is dropped.
        Returns the staged blob hash, or None when the file was unstaged.
        """
        if hash_object(content) == head_hash:
            self.unstage(path)
            return None
        blob_hash = object_store.put(content)
        self.stage_addition(path, blob_hash)
        return blob_hash

    def remove(self, path, head_hash):
        """
        Unstages a pending addition, or stages a tracked file for removal.

        Returns True when the caller should also delete the working file.
        """
        if path in self.additions:
            del self.additions[path]
            return False
        if head_hash is None:
            raise NothingToRemove()
        self.stage_removal(path, head_hash)
        return True
