"""Rich terminal reporter — listing with coloured status markers."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from treemark.output.markers import EntryMarkers, Marker, summarize
from treemark.status.categories import HighlightGroup, StatusCategory

_CATEGORY_STYLE = {
    StatusCategory.ADDED: "green",
    StatusCategory.COPIED: "magenta",
    StatusCategory.DELETED: "red",
    StatusCategory.MODIFIED: "yellow",
    StatusCategory.RENAMED: "magenta",
    StatusCategory.TYPE_CHANGED: "cyan",
    StatusCategory.UNMERGED: "bold red",
    StatusCategory.UNTRACKED: "bright_blue",
    StatusCategory.IGNORED: "dim",
    StatusCategory.UNMODIFIED: "dim",
}

# Staged markers are drawn bold so the two columns stay distinguishable.
_INDEX_STYLE = "bold"


def category_style(category: StatusCategory, *, index: bool) -> str:
    style = _CATEGORY_STYLE.get(category, "")
    if index and category is not StatusCategory.UNMODIFIED:
        return f"{_INDEX_STYLE} {style}".strip()
    return style


def _marker_text(marker: Optional[Marker], *, index: bool) -> Text:
    if marker is None:
        return Text(" ")
    return Text(marker.symbol, style=category_style(marker.category, index=index))


def _name_text(row: EntryMarkers) -> Text:
    name = f"{row.name}/" if row.is_dir else row.name
    return Text(name, style="bold blue" if row.is_dir else "")


def render(
    rows: List[EntryMarkers],
    directory: Path,
    *,
    console: Optional[Console] = None,
    show_summary: bool = True,
    status_available: bool = True,
) -> None:
    """Print the listing with two marker columns."""
    console = console or Console()

    table = Table(
        title=str(directory),
        title_style="bold",
        show_header=False,
        box=None,
        pad_edge=False,
    )
    table.add_column("I", width=1)
    table.add_column("W", width=1)
    table.add_column("Name")

    for row in rows:
        table.add_row(
            _marker_text(row.index, index=True),
            _marker_text(row.working_tree, index=False),
            _name_text(row),
        )

    console.print(table)

    if not status_available:
        console.print("[dim]Git status unavailable for this directory.[/dim]")
        return
    if show_summary:
        _print_summary(console, rows)


def _print_summary(console: Console, rows: List[EntryMarkers]) -> None:
    counts = summarize(rows)
    console.print()
    console.print(f"[dim]Entries:[/dim]  {len(rows)}")
    for category in StatusCategory:
        if category is StatusCategory.UNMODIFIED or not counts.get(category):
            continue
        style = _CATEGORY_STYLE[category]
        console.print(f"[{style}]{category.value}:[/{style}] {counts[category]}")


def render_groups(groups: List[HighlightGroup], *, console: Optional[Console] = None) -> None:
    """Print the highlight group table."""
    console = console or Console()
    table = Table(title="Highlight groups", title_style="bold", border_style="dim")
    table.add_column("Group", style="cyan", no_wrap=True)
    table.add_column("Column")
    table.add_column("Code", justify="center")
    table.add_column("Category")

    for group in groups:
        style = category_style(group.category, index=group.index)
        table.add_row(
            group.name,
            "index" if group.index else "working tree",
            Text(repr(group.status_code), style=style),
            Text(group.category.value, style=style),
        )
    console.print(table)
