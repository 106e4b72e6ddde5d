"""Fold per-path status codes into top-level directory entries."""

from __future__ import annotations

from treemark.status.models import MODIFIED, UNMODIFIED, EntryStatus, StatusMap


def top_level_segment(path: str) -> str:
    """Return the first segment of a ``/``-separated relative path."""
    return path.split("/", 1)[0]


def set_entry_status(
    status: StatusMap,
    path: str,
    index_code: str,
    working_code: str,
) -> None:
    """Record ``(index_code, working_code)`` for *path* in *status*.

    A path without a separator is a direct entry and always takes the given
    codes (last write wins).  A nested path is attributed to its top-level
    segment: the first change creates the entry with the codes as given,
    later changes only raise a column to ``M`` when the incoming code for
    that column is non-blank.  A blank incoming code never downgrades an
    existing marker.
    """
    if "/" not in path:
        status[path] = EntryStatus(index=index_code, working_tree=working_code)
        return

    name = top_level_segment(path)
    existing = status.get(name)
    if existing is None:
        status[name] = EntryStatus(index=index_code, working_tree=working_code)
        return

    if index_code != UNMODIFIED:
        existing.index = MODIFIED
    if working_code != UNMODIFIED:
        existing.working_tree = MODIFIED
