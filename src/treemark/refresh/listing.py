"""Per-listing status state and the events that refresh or redraw it."""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional

from treemark.config.schema import StatusConfig, is_valid_base_branch
from treemark.refresh.loader import Scheduler, call_now, load_git_status
from treemark.status.models import StatusMap

log = logging.getLogger(__name__)

Renderer = Callable[["Listing", StatusMap], None]
Loader = Callable[..., None]


class ListingEvent(str, Enum):
    OPENED = "opened"    # listing shown for the first time
    WRITTEN = "written"  # files changed on disk or in the repository
    EDITED = "edited"    # listing text changed, git state did not


class Listing:
    """One open directory listing and its most recent StatusMap.

    ``OPENED`` and ``WRITTEN`` start a refresh; ``EDITED`` only redraws from
    the cached map.  A refresh that yields no result leaves the cached map
    and the current presentation untouched.  Overlapping refreshes are not
    serialised: whichever completes last is drawn.
    """

    def __init__(
        self,
        directory: Path,
        config: StatusConfig,
        render: Renderer,
        *,
        loader: Loader = load_git_status,
        schedule: Scheduler = call_now,
    ) -> None:
        self.directory = directory
        self.config = config
        self.current_status: Optional[StatusMap] = None
        self._render = render
        self._loader = loader
        self._schedule = schedule

    def notify(self, event: ListingEvent) -> None:
        if event in (ListingEvent.OPENED, ListingEvent.WRITTEN):
            self.refresh()
        elif event is ListingEvent.EDITED:
            self.redraw()

    def refresh(self) -> None:
        self._loader(
            self.directory, self.config, self._on_status, schedule=self._schedule
        )

    def redraw(self) -> None:
        if self.current_status is not None:
            self._render(self, self.current_status)

    def _on_status(self, status: Optional[StatusMap]) -> None:
        if status is None:
            log.debug("No status for %s; keeping previous markers", self.directory)
            return
        self.current_status = status
        self._render(self, status)


class ListingRegistry:
    """Open listings keyed by directory, sharing one base configuration."""

    def __init__(
        self,
        config: StatusConfig,
        render: Renderer,
        *,
        loader: Loader = load_git_status,
        schedule: Scheduler = call_now,
    ) -> None:
        self.config = config
        self._render = render
        self._loader = loader
        self._schedule = schedule
        self._listings: Dict[Path, Listing] = {}

    @property
    def listings(self) -> List[Listing]:
        return list(self._listings.values())

    def get(self, directory: Path) -> Optional[Listing]:
        return self._listings.get(directory)

    def open(self, directory: Path) -> Listing:
        """Return the listing for *directory*, starting it on first open."""
        listing = self._listings.get(directory)
        if listing is not None:
            return listing
        listing = Listing(
            directory,
            self.config,
            self._render,
            loader=self._loader,
            schedule=self._schedule,
        )
        self._listings[directory] = listing
        listing.notify(ListingEvent.OPENED)
        return listing

    def close(self, directory: Path) -> None:
        self._listings.pop(directory, None)

    def refresh_all(self) -> None:
        for listing in self.listings:
            listing.refresh()

    def set_base_branch(self, base_branch: Optional[str]) -> bool:
        """Switch every listing to *base_branch* and refresh.

        Empty names and names git would read as an option are ignored.
        """
        if not is_valid_base_branch(base_branch):
            return False
        self.config = dataclasses.replace(self.config, base_branch=base_branch)
        for listing in self.listings:
            listing.config = dataclasses.replace(listing.config, base_branch=base_branch)
        self.refresh_all()
        log.info("Base branch set to %s", base_branch)
        return True
