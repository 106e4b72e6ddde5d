"""Parse ``git status --short`` and ``git ls-tree --name-only`` output.

Short status lines have the form ``XY path``: ``X`` is the index code, ``Y``
the working-tree code and the path starts at column 3.  Rename lines
(``XY old -> new``) are not split; the whole remainder is taken as the
filename and only the committed-diff path resolves renames precisely.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

from treemark.git.quoting import strip_trailing_slash, unquote_git_file_name
from treemark.status.aggregator import set_entry_status
from treemark.status.models import EntryStatus, StatusMap

log = logging.getLogger(__name__)

_FILENAME_OFFSET = 3


def _lines(text: Optional[str]) -> Iterator[str]:
    """Yield the non-empty lines of *text*."""
    if not text:
        return
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if line:
            yield line


def parse_status_line(line: str) -> Optional[Tuple[str, str, str]]:
    """Return ``(filename, index_code, working_code)`` or ``None`` if malformed."""
    filename = strip_trailing_slash(unquote_git_file_name(line[_FILENAME_OFFSET:]))
    if not filename:
        log.debug("Skipping short status line without a filename: %r", line)
        return None
    return filename, line[0], line[1]


def parse_git_status(status_text: Optional[str], tree_text: Optional[str]) -> StatusMap:
    """Build a StatusMap from short-status and ls-tree output.

    Every name listed by ls-tree that has no change gets an unmodified
    entry, so tracked files can be told apart from ignored ones.
    """
    status: StatusMap = {}

    for line in _lines(status_text):
        parsed = parse_status_line(line)
        if parsed is None:
            continue
        filename, index_code, working_code = parsed
        set_entry_status(status, filename, index_code, working_code)

    for line in _lines(tree_text):
        filename = unquote_git_file_name(line)
        if filename not in status:
            status[filename] = EntryStatus()

    return status
