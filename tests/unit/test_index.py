# Unit tests for utils/index.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'twig-project'))

from utils import errors
from utils.index import StagingArea
from utils.objects import ObjectStore, hash_object


@pytest.fixture
def store():
    return ObjectStore(storage=None)


class TestAdd:

    def test_new_file_is_staged_and_stored(self, store):
        staging = StagingArea()
        blob_hash = staging.add('a.txt', b'hello', None, store)
        assert staging.additions == {'a.txt': blob_hash}
        assert store.get(blob_hash) == b'hello'

    def test_restaging_overwrites_previous_entry(self, store):
        staging = StagingArea()
        staging.add('a.txt', b'one', None, store)
        second = staging.add('a.txt', b'two', None, store)
        assert staging.additions == {'a.txt': second}

    def test_content_matching_head_unstages(self, store):
        staging = StagingArea()
        head_hash = hash_object(b'committed')
        staging.add('a.txt', b'edited', head_hash, store)

        assert staging.add('a.txt', b'committed', head_hash, store) is None
        assert staging.is_empty()

    def test_content_matching_head_writes_nothing(self, store):
        staging = StagingArea()
        staging.add('a.txt', b'committed', hash_object(b'committed'), store)
        assert len(store) == 0

    def test_content_matching_head_cancels_removal(self, store):
        head_hash = hash_object(b'committed')
        staging = StagingArea(removals={'a.txt': head_hash})
        staging.add('a.txt', b'committed', head_hash, store)
        assert staging.removals == {}

    def test_addition_and_removal_stay_disjoint(self, store):
        staging = StagingArea(removals={'a.txt': hash_object(b'old')})
        staging.add('a.txt', b'new', hash_object(b'old'), store)
        assert 'a.txt' in staging.additions
        assert 'a.txt' not in staging.removals


class TestRemove:

    def test_staged_file_is_only_unstaged(self):
        staging = StagingArea(additions={'a.txt': 'h1'})
        assert staging.remove('a.txt', None) is False
        assert staging.is_empty()

    def test_tracked_file_is_staged_for_removal(self):
        staging = StagingArea()
        assert staging.remove('a.txt', 'h1') is True
        assert staging.removals == {'a.txt': 'h1'}

    def test_unknown_file_fails(self):
        with pytest.raises(errors.NothingToRemove):
            StagingArea().remove('a.txt', None)

    def test_clear(self):
        staging = StagingArea({'a': 'h1'}, {'b': 'h2'})
        staging.clear()
        assert staging.is_empty()
