# Unit tests for utils/objects.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'twig-project'))

from utils import errors
from utils.objects import ObjectStore, hash_object, object_path
from utils.repository import Repository
from utils.storage import Storage


class TestHashObject:

    def test_is_deterministic(self):
        assert hash_object(b'hello') == hash_object(b'hello')
        assert len(hash_object(b'hello')) == 40

    def test_type_is_part_of_identity(self):
        # Same bytes hashed as a blob and as a commit must not collide
        assert hash_object(b'hello', 'blob') != hash_object(b'hello', 'commit')

    def test_object_path_fans_out_on_first_two_chars(self):
        sha1 = hash_object(b'x')
        assert object_path(sha1) == f'objects/{sha1[:2]}/{sha1[2:]}'


class TestObjectStore:

    def test_get_returns_what_was_put(self):
        store = ObjectStore(storage=None)
        sha1 = store.put(b'some content\n')
        assert store.get(sha1) == b'some content\n'

    def test_put_is_idempotent(self):
        store = ObjectStore(storage=None)
        first = store.put(b'same')
        second = store.put(b'same')
        assert first == second
        assert len(store) == 1
        assert len(store.pending) == 1

    def test_unknown_id_raises(self):
        store = ObjectStore(storage=None)
        with pytest.raises(errors.NoSuchObject):
            store.get('0' * 40)

    def test_flush_persists_blobs(self, temp_repo):
        storage = Storage(temp_repo)
        store = ObjectStore(storage, storage.load('blob-index'))
        sha1 = store.put(b'persist me')
        store.flush()

        assert store.pending == {}
        assert os.path.isfile(os.path.join(temp_repo, '.twig', 'objects', sha1[:2], sha1[2:]))

        reloaded = ObjectStore(storage, storage.load('blob-index'))
        assert reloaded.contains(sha1)
        assert reloaded.get(sha1) == b'persist me'

    def test_existing_blob_is_not_rewritten(self, temp_repo):
        repo = Repository.open(temp_repo)
        sha1 = repo.objects.put(b'once')
        repo.save()

        repo = Repository.open(temp_repo)
        assert repo.objects.put(b'once') == sha1
        assert repo.objects.pending == {}
