# What it does: Expands a commit id typed by the user (full or abbreviated) into a full commit id
# How it does: Full-length ids are looked up directly; anything shorter goes through the commit graph's 6 character prefix index

from .errors import NoSuchCommit
from .commits import PREFIX_LENGTH

FULL_ID_LENGTH = 40


def resolve(graph, ref):
    ref = ref.strip().lower()
    if len(ref) < PREFIX_LENGTH:
        raise NoSuchCommit()
    if len(ref) >= FULL_ID_LENGTH:
        if ref not in graph:
            raise NoSuchCommit()
        return ref
    return graph.resolve_prefix(ref)
