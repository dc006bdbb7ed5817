# The command: twig init
# What it does: Initializes a new repository by creating the hidden `.twig` directory and its internal structure
# How it does: It creates the `commits`, `objects`, `refs/heads` and `staging` subdirectories, records the initial commit (no files, epoch timestamp) and points the `master` branch and HEAD at it
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database) and a Directed Acyclic Graph (the commit history)

import os
import sys
from utils import errors
from utils.repository import Repository


def run(args):
    try:
        repo = Repository.initialize(os.getcwd())
    except errors.TwigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    print(f"Initialized empty Twig repository in {repo.storage.twig_dir}/")
