"""Status data models — per-entry status pair and the status map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

UNMODIFIED = " "
MODIFIED = "M"


@dataclass
class EntryStatus:
    """Index and working-tree codes attributed to one directory entry."""

    index: str = UNMODIFIED
    working_tree: str = UNMODIFIED

    def to_dict(self) -> Dict[str, str]:
        return {"index": self.index, "working_tree": self.working_tree}


# Entry name (a single path segment) -> status pair.
StatusMap = Dict[str, EntryStatus]
