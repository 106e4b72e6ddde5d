"""Resolve per-entry markers for a directory listing.

This is the presentation-neutral half of rendering: every reporter works
from the rows built here.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from treemark.config.schema import SymbolsConfig
from treemark.status.categories import (
    StatusCategory,
    category_for,
    get_symbol,
    highlight_group,
)
from treemark.status.models import EntryStatus, StatusMap

_PARENT_ENTRY = ".."


@dataclass(frozen=True)
class Marker:
    code: str
    symbol: str
    category: StatusCategory
    group: str


@dataclass(frozen=True)
class EntryMarkers:
    name: str
    is_dir: bool = False
    index: Optional[Marker] = None
    working_tree: Optional[Marker] = None

    @property
    def has_markers(self) -> bool:
        return self.index is not None


def list_entries(directory: Path) -> List[Tuple[str, bool]]:
    """Return ``(name, is_dir)`` for each entry, directories first."""
    entries = [(p.name, p.is_dir()) for p in directory.iterdir()]
    entries.sort(key=lambda e: (not e[1], e[0].lower()))
    return entries


def lookup(
    name: str, status: StatusMap, *, show_ignored: bool
) -> Optional[EntryStatus]:
    """Status for *name*; entries git does not mention count as ignored."""
    found = status.get(name)
    if found is not None:
        return found
    if not show_ignored:
        return None
    return EntryStatus(index="!", working_tree="!")


def _marker(code: str, symbols: Dict[str, str], *, index: bool) -> Marker:
    return Marker(
        code=code,
        symbol=get_symbol(symbols, code),
        category=category_for(code),
        group=highlight_group(code, index=index),
    )


def build_markers(
    entries: List[Tuple[str, bool]],
    status: Optional[StatusMap],
    *,
    show_ignored: bool,
    symbols: Optional[SymbolsConfig] = None,
) -> List[EntryMarkers]:
    """Build one row per entry. With no status at all, rows carry no markers."""
    symbols = symbols or SymbolsConfig()
    rows: List[EntryMarkers] = []
    for name, is_dir in entries:
        if name == _PARENT_ENTRY:
            continue
        codes = lookup(name, status, show_ignored=show_ignored) if status is not None else None
        if codes is None:
            rows.append(EntryMarkers(name=name, is_dir=is_dir))
            continue
        rows.append(
            EntryMarkers(
                name=name,
                is_dir=is_dir,
                index=_marker(codes.index, symbols.index, index=True),
                working_tree=_marker(codes.working_tree, symbols.working_tree, index=False),
            )
        )
    return rows


def summarize(rows: List[EntryMarkers]) -> Dict[StatusCategory, int]:
    """Count entries per category; an entry counts once per category it shows."""
    counts: Counter[StatusCategory] = Counter()
    for row in rows:
        if not row.has_markers:
            continue
        assert row.index is not None and row.working_tree is not None
        shown = {row.index.category, row.working_tree.category}
        if len(shown) > 1:
            shown.discard(StatusCategory.UNMODIFIED)
        counts.update(shown)
    return dict(counts)
