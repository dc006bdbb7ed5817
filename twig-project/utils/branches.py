# What it does: Manages branch pointers (name -> head commit), the current branch marker, and the searches over the commit DAG that merging needs
# How it does: The branch table is an in-memory dictionary loaded from and saved to `refs/heads`. `find_common_ancestor` runs a breadth-first search from each head over every parent link (so merge commits are followed on both sides), then keeps the nearest commit both heads can reach
# What data structure it uses: Map / Dictionary (branch table), Queue (breadth-first search), Sets (reachability)

from collections import deque

from .errors import BranchAlreadyExists, CannotRemoveCurrentBranch, InvalidBranchName, NoSuchBranch

DEFAULT_BRANCH = 'master'


def check_branch_name(name, existing=()):
    """
    Branch names map to files under refs/heads, so a name may contain '/'
    but no empty, '.' or '..' component, and it cannot be both a branch
    and the directory of another one ('feature' next to 'feature/x').
    """
    parts = name.split('/')
    if not name.strip() or name.startswith('-') or any(part in ('', '.', '..') for part in parts):
        raise InvalidBranchName(f"'{name}' is not a valid branch name.")
    for other in existing:
        if other.startswith(name + '/') or name.startswith(other + '/'):
            raise InvalidBranchName(f"Branch '{name}' clashes with existing branch '{other}'.")


class BranchTable:

    def __init__(self, heads=None, current=DEFAULT_BRANCH):
        self.heads = dict(heads or {})
        self.current = current

    @property
    def current_head(self):
        return self.heads[self.current]

    def __contains__(self, name):
        return name in self.heads

    def names(self):
        return sorted(self.heads)

    def head(self, name):
        if name not in self.heads:
            raise NoSuchBranch()
        return self.heads[name]

    def create(self, name): # New branches start at the current head; the current branch does not change
        if name in self.heads:
            raise BranchAlreadyExists()
        check_branch_name(name, self.heads)
        self.heads[name] = self.current_head

    def delete(self, name):
        if name not in self.heads:
            raise NoSuchBranch()
        if name == self.current:
            raise CannotRemoveCurrentBranch()
        del self.heads[name]

    def set_head(self, name, commit_id):
        self.heads[name] = commit_id

    def switch_current(self, name):
        if name not in self.heads:
            raise NoSuchBranch()
        self.current = name

    def branch_points(self, graph):
        """
        Commits that the ancestry of more than one branch passes through.

        Computed on demand from the branch heads; nothing is stored on the
        commits themselves.
        """
        seen_by = {}
        for name, head in self.heads.items():
            for commit_id in ancestry(graph, head):
                seen_by.setdefault(commit_id, set()).add(name)
        return {commit_id for commit_id, names in seen_by.items() if len(names) > 1}


def _distances(graph, head): # Breadth-first distances from head to every ancestor, in discovery order
    distances = {head: 0}
    queue = deque([head])
    while queue:
        commit_id = queue.popleft()
        for parent in graph.get(commit_id).parents:
            if parent not in distances:
                distances[parent] = distances[commit_id] + 1
                queue.append(parent)
    return distances


def ancestry(graph, head): # All commits reachable from head, head included
    return _distances(graph, head).keys()


def find_common_ancestor(graph, head_a, head_b):
    """
    Returns the nearest commit reachable from both heads.

    Both heads are searched breadth first over all parents. A common
    ancestor that is itself an ancestor of another common ancestor is never
    the answer. Among the rest the smallest combined distance wins; ties go
    to whichever was discovered first walking back from head_a.
    """
    from_a = _distances(graph, head_a)
    from_b = _distances(graph, head_b)
    common = [commit_id for commit_id in from_a if commit_id in from_b]

    # Walk below each surviving candidate once, discarding what it reaches.
    dominated = set()
    for commit_id in common:
        if commit_id in dominated:
            continue
        queue = deque(graph.get(commit_id).parents)
        while queue:
            parent = queue.popleft()
            if parent in dominated:
                continue
            dominated.add(parent)
            queue.extend(graph.get(parent).parents)

    candidates = [commit_id for commit_id in common if commit_id not in dominated]
    order = {commit_id: i for i, commit_id in enumerate(candidates)}
    best = min(candidates, key=lambda c: (from_a[c] + from_b[c], order[c]))
    return graph.get(best)
