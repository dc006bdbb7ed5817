# What it does: Decides which working files twig leaves out of `status` and `add` scans, from `.twigignore` plus a few built-in rules
# How it does: One glob per line. A pattern ending in '/' only matches directories, a pattern containing '/' is matched against the whole repo-relative path, anything else is matched against every path component
# What data structure it uses: List of patterns, checked in order

import os
from fnmatch import fnmatch

IGNORE_FILE = '.twigignore'
BUILTIN_PATTERNS = ('*.pyc', '__pycache__/')


def get_ignored_patterns(repo_root):
    patterns = list(BUILTIN_PATTERNS)
    ignore_file = os.path.join(repo_root, IGNORE_FILE)
    if not os.path.isfile(ignore_file):
        return patterns
    with open(ignore_file, 'r') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                patterns.append(line)
    return patterns


def _matches(path, parts, pattern):
    if pattern.endswith('/'):
        return any(fnmatch(part, pattern.rstrip('/')) for part in parts[:-1])
    if '/' in pattern:
        return fnmatch(path, pattern.lstrip('/'))
    return any(fnmatch(part, pattern) for part in parts)


def is_ignored(path, patterns): # path is repo-relative with '/' separators
    parts = path.split('/')
    return any(_matches(path, parts, pattern) for pattern in patterns)
