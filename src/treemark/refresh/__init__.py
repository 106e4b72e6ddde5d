"""Refresh pipeline — concurrent git runs, status loading, listings."""

from treemark.refresh.concurrent import concurrent
from treemark.refresh.listing import Listing, ListingEvent, ListingRegistry
from treemark.refresh.loader import build_status, collect_git_status, load_git_status

__all__ = [
    "Listing",
    "ListingEvent",
    "ListingRegistry",
    "build_status",
    "collect_git_status",
    "concurrent",
    "load_git_status",
]
