# The command: twig merge <branch-name>
# What it does: Performs a three-way merge between the current branch, the given branch, and their common ancestor (the split point)
# How it does: It finds the split point. If the given branch is already contained in the current one nothing happens; if the current branch is contained in the given one it is fast-forwarded. Otherwise every file is classified by comparing its blob hash in the three commits, the working directory and staging area are updated accordingly, conflicting files get conflict markers, and a merge commit with two parents is created
# What data structure it uses: DAG (for finding common ancestor), Hash Tables ({path: hash} snapshots for the three commits), Sets (union of all paths)

#Implemented 3 way merge at whole-file granularity
import sys
from dataclasses import dataclass, field
from utils import errors, workdir
from utils.branches import find_common_ancestor
from utils.repository import Repository
from commands import commit

MERGED = 'merged'
GIVEN_IS_ANCESTOR = 'given-is-ancestor'
FAST_FORWARDED = 'fast-forwarded'

KEEP = 'keep'
TAKE_GIVEN = 'take-given'
REMOVE = 'remove'
CONFLICT = 'conflict'

# case letter -> what happens to the file
ACTIONS = {
    'a': KEEP,        # unchanged in both
    'b': TAKE_GIVEN,  # changed only in the given branch
    'c': KEEP,        # changed only in the current branch
    'd': KEEP,        # changed the same way in both
    'e': REMOVE,      # unmodified in current, deleted in given
    'f': KEEP,        # deleted in current, unmodified in given
    'g': KEEP,        # new, only in current
    'h': TAKE_GIVEN,  # new, only in given
    'i': CONFLICT,
}

CONFLICT_START = b'<<<<<<< HEAD\n'
CONFLICT_SEPARATOR = b'=======\n'
CONFLICT_END = b'>>>>>>>\n'


@dataclass
class MergeResult:
    outcome: str
    commit_id: str = None
    conflicts: list = field(default_factory=list)
    actions: dict = field(default_factory=dict)

    @property
    def has_conflicts(self):
        return bool(self.conflicts)


def classify(ancestor_hash, current_hash, given_hash):
    """
    Returns the case letter for one file given its blob hash at the split
    point, in the current head and in the given head (None when absent).
    """
    if ancestor_hash is not None:
        if current_hash == ancestor_hash and given_hash == ancestor_hash:
            return 'a'
        if current_hash == ancestor_hash and given_hash is None:
            return 'e'
        if current_hash == ancestor_hash:
            return 'b'
        if current_hash is None and given_hash == ancestor_hash:
            return 'f'
        if given_hash == ancestor_hash:
            return 'c'
        if current_hash == given_hash:
            return 'd'
        return 'i'
    if given_hash is None:
        return 'g'
    if current_hash is None:
        return 'h'
    if current_hash == given_hash:
        return 'd'
    return 'i'


def _terminated(content):
    if content and not content.endswith(b'\n'):
        return content + b'\n'
    return content


def conflict_content(current_content, given_content): # Current branch's bytes first, then the given branch's
    return (CONFLICT_START + _terminated(current_content) + CONFLICT_SEPARATOR
            + _terminated(given_content) + CONFLICT_END)


def _read_blob(repo, blob_hash):
    return repo.objects.get(blob_hash) if blob_hash else b''


def merge_branch(repo, branch_to_merge):
    if not repo.staging.is_empty():
        raise errors.UncommittedChanges()
    if branch_to_merge not in repo.branches:
        raise errors.NoSuchBranch()
    if branch_to_merge == repo.current_branch:
        raise errors.SelfMerge()

    current_branch = repo.current_branch
    head = repo.head_commit
    given = repo.commits.get(repo.branches.head(branch_to_merge))
    workdir.check_untracked_obstruction(repo, given.tracked_files)

    split_point = find_common_ancestor(repo.commits, head.id, given.id)
    if split_point.id == given.id:
        return MergeResult(GIVEN_IS_ANCESTOR)
    if split_point.id == head.id:
        workdir.update_working_directory(repo, head.tracked_files, given.tracked_files)
        repo.branches.set_head(current_branch, given.id)
        return MergeResult(FAST_FORWARDED, commit_id=given.id)

    ancestor_files = split_point.tracked_files
    head_files = head.tracked_files
    given_files = given.tracked_files
    all_files = set(ancestor_files) | set(head_files) | set(given_files)

    result = MergeResult(MERGED)
    for path in sorted(all_files):
        head_hash = head_files.get(path)
        given_hash = given_files.get(path)
        case = classify(ancestor_files.get(path), head_hash, given_hash)
        action = ACTIONS[case]
        result.actions[path] = case

        if action == TAKE_GIVEN:
            workdir.write_working_file(repo.repo_root, path, repo.objects.get(given_hash))
            repo.staging.stage_addition(path, given_hash)
        elif action == REMOVE:
            workdir.delete_working_file(repo.repo_root, path)
            repo.staging.stage_removal(path, head_hash)
        elif action == CONFLICT:
            content = conflict_content(_read_blob(repo, head_hash), _read_blob(repo, given_hash))
            workdir.write_working_file(repo.repo_root, path, content)
            repo.staging.stage_addition(path, repo.objects.put(content))
            result.conflicts.append(path)

    message = f"Merged {branch_to_merge} into {current_branch}."
    result.commit_id = commit.create_commit(repo, message, second_parent=given.id).id
    return result


def run(args):
    try:
        repo = Repository.open()
        result = merge_branch(repo, args.branch)
        repo.save()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    if result.outcome == GIVEN_IS_ANCESTOR:
        print("Given branch is an ancestor of the current branch.")
    elif result.outcome == FAST_FORWARDED:
        print("Current branch fast-forwarded.")
    elif result.has_conflicts:
        for path in result.conflicts:
            print(f"CONFLICT (content): Merge conflict in {path}")
        print("Encountered a merge conflict.")
