# The command: twig find <message>
# What it does: Prints the ids of all commits whose message is exactly the given message, one per line

import sys
from utils import errors
from utils.repository import Repository


def find_commits(repo, message):
    commit_ids = sorted(repo.commits.find_by_message(message))
    if not commit_ids:
        raise errors.NoCommitWithMessage()
    return commit_ids


def run(args):
    try:
        repo = Repository.open()
        commit_ids = find_commits(repo, args.message)
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    for commit_id in commit_ids:
        print(commit_id)
