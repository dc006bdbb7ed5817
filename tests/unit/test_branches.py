# Unit tests for utils/branches.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'twig-project'))

from utils import errors
from utils.branches import BranchTable, ancestry, check_branch_name, find_common_ancestor
from utils.commits import CommitGraph


class HistoryBuilder:
    # Builds small commit graphs with readable names

    def __init__(self):
        self.graph = CommitGraph()
        self.ids = {'root': self.graph.create_root().id}
        self.clock = 0

    def commit(self, name, parent, second_parent=None):
        self.clock += 1
        second = self.ids[second_parent] if second_parent else None
        commit = self.graph.create(name, self.ids[parent], second, timestamp=self.clock)
        self.ids[name] = commit.id
        return commit.id

    def ancestor(self, a, b):
        commit = find_common_ancestor(self.graph, self.ids[a], self.ids[b])
        return next(name for name, commit_id in self.ids.items() if commit_id == commit.id)


@pytest.fixture
def history():
    return HistoryBuilder()


class TestBranchTable:

    def test_create_starts_at_current_head(self):
        table = BranchTable({'master': 'c1'}, 'master')
        table.create('feature')
        assert table.head('feature') == 'c1'
        assert table.current == 'master'

    def test_create_existing_fails(self):
        table = BranchTable({'master': 'c1'}, 'master')
        with pytest.raises(errors.BranchAlreadyExists):
            table.create('master')

    @pytest.mark.parametrize('name', ['', 'a//b', '/lead', 'trail/', '../up', 'x/./y', '-flag'])
    def test_invalid_names(self, name):
        with pytest.raises(errors.InvalidBranchName):
            check_branch_name(name)

    def test_name_cannot_shadow_a_branch_directory(self):
        table = BranchTable({'master': 'c1', 'feature/x': 'c1'}, 'master')
        with pytest.raises(errors.InvalidBranchName):
            table.create('feature')
        with pytest.raises(errors.InvalidBranchName):
            table.create('master/y')
        table.create('feature/y')
        assert table.names() == ['feature/x', 'feature/y', 'master']

    def test_delete(self):
        table = BranchTable({'master': 'c1', 'feature': 'c2'}, 'master')
        table.delete('feature')
        assert table.names() == ['master']

    def test_delete_missing_fails(self):
        table = BranchTable({'master': 'c1'}, 'master')
        with pytest.raises(errors.NoSuchBranch):
            table.delete('nope')

    def test_delete_current_fails(self):
        table = BranchTable({'master': 'c1'}, 'master')
        with pytest.raises(errors.CannotRemoveCurrentBranch):
            table.delete('master')

    def test_switch_and_set_head(self):
        table = BranchTable({'master': 'c1', 'feature': 'c1'}, 'master')
        table.switch_current('feature')
        table.set_head('feature', 'c9')
        assert table.current_head == 'c9'
        assert table.head('master') == 'c1'
        with pytest.raises(errors.NoSuchBranch):
            table.switch_current('nope')

    def test_branch_points_are_derived(self, history):
        history.commit('a', 'root')
        history.commit('b', 'a')
        history.commit('c', 'a')
        table = BranchTable({'master': history.ids['b'], 'feature': history.ids['c']}, 'master')
        assert table.branch_points(history.graph) == {history.ids['root'], history.ids['a']}

        table.delete('feature')
        assert table.branch_points(history.graph) == set()


class TestFindCommonAncestor:

    def test_same_commit(self, history):
        history.commit('a', 'root')
        assert history.ancestor('a', 'a') == 'a'

    def test_simple_fork(self, history):
        history.commit('a', 'root')
        history.commit('b1', 'a')
        history.commit('b2', 'b1')
        history.commit('c1', 'a')
        assert history.ancestor('b2', 'c1') == 'a'
        assert history.ancestor('c1', 'b2') == 'a'

    def test_one_head_is_ancestor_of_the_other(self, history):
        history.commit('a', 'root')
        history.commit('b', 'a')
        history.commit('c', 'b')
        assert history.ancestor('c', 'a') == 'a'
        assert history.ancestor('a', 'c') == 'a'

    def test_follows_second_parents(self, history):
        # feature was merged into master, then both moved on
        history.commit('a', 'root')
        history.commit('f1', 'a')
        history.commit('m1', 'a')
        history.commit('merge', 'm1', 'f1')
        history.commit('f2', 'f1')
        history.commit('m2', 'merge')
        assert history.ancestor('m2', 'f2') == 'f1'

    def test_repeated_merges(self, history):
        history.commit('a', 'root')
        history.commit('f1', 'a')
        history.commit('m1', 'a')
        history.commit('merge1', 'm1', 'f1')
        history.commit('f2', 'f1')
        history.commit('f3', 'f2')
        history.commit('merge2', 'merge1', 'f3')
        history.commit('f4', 'f3')
        history.commit('m3', 'merge2')
        assert history.ancestor('m3', 'f4') == 'f3'

    def test_ancestor_of_a_candidate_is_never_chosen(self, history):
        # x is reachable from head in one step through the second parent,
        # but y descends from x and is also common, so y is the split point
        history.commit('x', 'root')
        history.commit('y', 'x')
        history.commit('given', 'y')
        history.commit('p', 'y')
        history.commit('head', 'p', 'x')
        assert history.ancestor('head', 'given') == 'y'

    def test_criss_cross_tie_is_deterministic(self, history):
        history.commit('a1', 'root')
        history.commit('b1', 'root')
        history.commit('a2', 'a1', 'b1')
        history.commit('b2', 'b1', 'a1')
        assert history.ancestor('a2', 'b2') == 'a1'
        assert history.ancestor('a2', 'b2') == 'a1'
        assert history.ancestor('b2', 'a2') == 'b1'

    def test_ancestry_includes_head_and_root(self, history):
        history.commit('a', 'root')
        history.commit('b', 'a')
        assert set(ancestry(history.graph, history.ids['b'])) == {
            history.ids['root'], history.ids['a'], history.ids['b']}
