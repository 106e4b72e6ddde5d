"""Map status codes to presentation categories and highlight groups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping


class StatusCategory(str, Enum):
    IGNORED = "Ignored"
    UNTRACKED = "Untracked"
    ADDED = "Added"
    COPIED = "Copied"
    DELETED = "Deleted"
    MODIFIED = "Modified"
    RENAMED = "Renamed"
    TYPE_CHANGED = "TypeChanged"
    UNMERGED = "Unmerged"
    UNMODIFIED = "Unmodified"


CATEGORY_FOR_CODE: Dict[str, StatusCategory] = {
    "!": StatusCategory.IGNORED,
    "?": StatusCategory.UNTRACKED,
    "A": StatusCategory.ADDED,
    "C": StatusCategory.COPIED,
    "D": StatusCategory.DELETED,
    "M": StatusCategory.MODIFIED,
    "R": StatusCategory.RENAMED,
    "T": StatusCategory.TYPE_CHANGED,
    "U": StatusCategory.UNMERGED,
    " ": StatusCategory.UNMODIFIED,
}

GROUP_PREFIX = "Treemark"


def category_for(code: str) -> StatusCategory:
    """Return the category for *code*; unknown codes are Unmodified."""
    return CATEGORY_FOR_CODE.get(code, StatusCategory.UNMODIFIED)


def column_name(index: bool) -> str:
    return "Index" if index else "WorkingTree"


def highlight_group(code: str, *, index: bool) -> str:
    """Return the highlight group name, e.g. ``TreemarkIndexModified``."""
    return f"{GROUP_PREFIX}{column_name(index)}{category_for(code).value}"


@dataclass(frozen=True)
class HighlightGroup:
    name: str
    index: bool
    status_code: str

    @property
    def category(self) -> StatusCategory:
        return category_for(self.status_code)


def highlight_groups() -> List[HighlightGroup]:
    """Every highlight group a marker can use, two per status code."""
    groups: List[HighlightGroup] = []
    for code in CATEGORY_FOR_CODE:
        groups.append(HighlightGroup(highlight_group(code, index=True), True, code))
        groups.append(HighlightGroup(highlight_group(code, index=False), False, code))
    return groups


def get_symbol(symbols: Mapping[str, str], code: str) -> str:
    """Return the configured symbol for *code*, or the code itself."""
    return symbols.get(code, code)
