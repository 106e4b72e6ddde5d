"""Decode git's quoted path notation."""

from __future__ import annotations


def unquote_git_file_name(field: str) -> str:
    """Return the literal filename for a path field emitted by git.

    With ``core.quotepath=false`` git still wraps names containing ``"`` or
    ``\\`` in double quotes and backslash-escapes them, so ``\\file".md``
    is printed as ``"\\\\file\\".md"``.  Escaped quotes are restored before
    escaped backslashes.
    """
    if len(field) >= 2 and field.startswith('"') and field.endswith('"'):
        field = field[1:-1]
    return field.replace('\\"', '"').replace("\\\\", "\\")


def strip_trailing_slash(path: str) -> str:
    """Drop the single trailing ``/`` git appends to directory entries."""
    if path.endswith("/"):
        return path[:-1]
    return path
