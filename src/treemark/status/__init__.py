"""Status models, aggregation, and presentation categories."""

from treemark.status.aggregator import set_entry_status, top_level_segment
from treemark.status.categories import (
    HighlightGroup,
    StatusCategory,
    category_for,
    get_symbol,
    highlight_group,
    highlight_groups,
)
from treemark.status.models import EntryStatus, StatusMap

__all__ = [
    "EntryStatus",
    "HighlightGroup",
    "StatusCategory",
    "StatusMap",
    "category_for",
    "get_symbol",
    "highlight_group",
    "highlight_groups",
    "set_entry_status",
    "top_level_segment",
]
