# The command: twig rm-branch <branch-name>
# What it does: Deletes a branch pointer. Only the name goes away; commits made on the branch stay in the commit graph

import sys
from utils import errors
from utils.repository import Repository


def run(args):
    try:
        repo = Repository.open()
        repo.branches.delete(args.name)
        repo.save()
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
