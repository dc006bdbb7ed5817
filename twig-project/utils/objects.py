# What it does: Manages the content-addressed object store that holds every version of every tracked file (blobs)
# How it does: `hash_object` computes the SHA-1 identity of some content. `ObjectStore.put` records new content under that identity only if it is not already known, so identical content is stored once. New blobs are buffered until the repository is saved
# What data structure it uses: Hash Table / Dictionary (the blob index maps each SHA-1 hash to the location of its content)

import hashlib

from .errors import NoSuchObject


def hash_object(content, obj_type='blob'): # Hashes content with a '<type> <len>\0' header and returns the hex digest
    header = f'{obj_type} {len(content)}\0'.encode()
    return hashlib.sha1(header + content).hexdigest()


def object_path(sha1): # Relative location of a blob inside the .twig directory
    return f'objects/{sha1[:2]}/{sha1[2:]}'


class ObjectStore:
    """
    Append-only blob storage keyed by content hash.

    `blob_index` maps every known blob id to its object path. Content added
    through `put` during the current command lives in `pending` until
    `flush` hands it to the storage service.
    """

    def __init__(self, storage, blob_index=None):
        self.storage = storage
        self.blob_index = dict(blob_index or {})
        self.pending = {}

    def put(self, content):
        sha1 = hash_object(content)
        if sha1 not in self.blob_index:
            self.blob_index[sha1] = object_path(sha1)
            self.pending[sha1] = content
        return sha1

    def get(self, sha1):
        if sha1 in self.pending:
            return self.pending[sha1]
        if sha1 not in self.blob_index:
            raise NoSuchObject(sha1)
        return self.storage.read_blob(self.blob_index[sha1])

    def contains(self, sha1):
        return sha1 in self.blob_index

    def __len__(self):
        return len(self.blob_index)

    def flush(self): # Writes buffered blobs and the updated index through the storage service
        for sha1, content in self.pending.items():
            self.storage.write_blob(self.blob_index[sha1], content)
        self.pending = {}
        self.storage.save('blob-index', self.blob_index)
