"""Merge ``git diff --name-status <base>...HEAD`` output into a StatusMap.

Examples of the lines handled::

    M\tpath
    A\tpath
    D\tpath
    R100\told\tnew
    C075\told\tnew

Committed changes only ever land in the index column.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from treemark.git.quoting import strip_trailing_slash, unquote_git_file_name
from treemark.status.aggregator import set_entry_status
from treemark.status.models import UNMODIFIED, EntryStatus, StatusMap

log = logging.getLogger(__name__)

_CODE_RE = re.compile(r"^[A-Za-z]+")

# Codes whose line carries a source and a destination path.
_TWO_PATH_CODES = ("R", "C")


def parse_diff_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(code, target_path)`` for one name-status line.

    For renames and copies the target is the destination path, so the
    marker lands on the file's current location.  Returns ``None`` when the
    line lacks the expected fields.
    """
    m = _CODE_RE.match(line)
    if m is None:
        log.debug("Skipping diff line without a status code: %r", line)
        return None
    code = m.group(0)[0]

    parts = line.split("\t")
    field_index = 2 if code in _TWO_PATH_CODES else 1
    if len(parts) <= field_index or not parts[field_index]:
        log.debug("Skipping diff line with missing path field: %r", line)
        return None

    target = strip_trailing_slash(unquote_git_file_name(parts[field_index]))
    if not target:
        return None
    return code, target


def apply_branch_diff(diff_text: Optional[str], status: StatusMap) -> None:
    """Apply committed changes from *diff_text* to *status* in place."""
    if not diff_text:
        return

    for line in diff_text.split("\n"):
        line = line.rstrip("\r")
        if not line:
            continue
        parsed = parse_diff_line(line)
        if parsed is None:
            continue
        code, target = parsed

        if "/" in target:
            set_entry_status(status, target, code, UNMODIFIED)
            continue

        # Top-level entries keep the exact code (R, C, T...) rather than M.
        existing = status.get(target)
        if existing is None:
            status[target] = EntryStatus(index=code, working_tree=UNMODIFIED)
        else:
            existing.index = code
