"""Tests for per-listing refresh/redraw wiring and the listing registry."""

from pathlib import Path

from treemark.config.schema import StatusConfig
from treemark.refresh.listing import Listing, ListingEvent, ListingRegistry
from treemark.status.models import EntryStatus


class ScriptedLoader:
    """Loader that answers each refresh with the next scripted result."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __call__(self, directory, config, callback, *, schedule):
        self.calls.append((directory, config))
        result = self.results.pop(0) if self.results else None
        schedule(lambda: callback(result))


class Recorder:
    def __init__(self):
        self.drawn = []

    def __call__(self, listing, status):
        self.drawn.append((listing.directory, status))


_FIRST = {"a.txt": EntryStatus(" ", "M")}
_SECOND = {"a.txt": EntryStatus("M", " ")}


class TestListing:
    def test_opened_refreshes_and_draws(self):
        loader, render = ScriptedLoader(_FIRST), Recorder()
        listing = Listing(Path("/r"), StatusConfig(), render, loader=loader)
        listing.notify(ListingEvent.OPENED)
        assert listing.current_status == _FIRST
        assert render.drawn == [(Path("/r"), _FIRST)]

    def test_written_replaces_map(self):
        loader, render = ScriptedLoader(_FIRST, _SECOND), Recorder()
        listing = Listing(Path("/r"), StatusConfig(), render, loader=loader)
        listing.notify(ListingEvent.OPENED)
        listing.notify(ListingEvent.WRITTEN)
        assert listing.current_status == _SECOND
        assert len(loader.calls) == 2

    def test_edited_redraws_cached_map(self):
        loader, render = ScriptedLoader(_FIRST), Recorder()
        listing = Listing(Path("/r"), StatusConfig(), render, loader=loader)
        listing.notify(ListingEvent.OPENED)
        listing.notify(ListingEvent.EDITED)
        assert len(loader.calls) == 1
        assert render.drawn == [(Path("/r"), _FIRST), (Path("/r"), _FIRST)]

    def test_edited_before_any_status_draws_nothing(self):
        render = Recorder()
        listing = Listing(Path("/r"), StatusConfig(), render, loader=ScriptedLoader())
        listing.notify(ListingEvent.EDITED)
        assert render.drawn == []

    def test_unavailable_keeps_previous(self):
        loader, render = ScriptedLoader(_FIRST, None), Recorder()
        listing = Listing(Path("/r"), StatusConfig(), render, loader=loader)
        listing.refresh()
        listing.refresh()
        assert listing.current_status == _FIRST
        assert len(render.drawn) == 1

    def test_schedule_is_passed_to_loader(self):
        queued = []
        render = Recorder()
        listing = Listing(
            Path("/r"), StatusConfig(), render,
            loader=ScriptedLoader(_FIRST), schedule=queued.append,
        )
        listing.refresh()
        assert render.drawn == []
        queued.pop()()
        assert render.drawn == [(Path("/r"), _FIRST)]


class TestListingRegistry:
    def test_open_starts_listing_once(self):
        loader = ScriptedLoader(_FIRST, _SECOND)
        registry = ListingRegistry(StatusConfig(), Recorder(), loader=loader)
        first = registry.open(Path("/r"))
        again = registry.open(Path("/r"))
        assert first is again
        assert len(loader.calls) == 1

    def test_listings_have_own_config(self):
        registry = ListingRegistry(StatusConfig(), Recorder(), loader=ScriptedLoader())
        listing = registry.open(Path("/r"))
        listing.config = StatusConfig(show_ignored=False)
        assert registry.config.show_ignored is True

    def test_set_base_branch_refreshes_all(self):
        loader = ScriptedLoader()
        registry = ListingRegistry(StatusConfig(), Recorder(), loader=loader)
        registry.open(Path("/a"))
        registry.open(Path("/b"))
        loader.calls.clear()

        assert registry.set_base_branch("main") is True
        assert registry.config.base_branch == "main"
        assert sorted(d for d, _ in loader.calls) == [Path("/a"), Path("/b")]
        assert all(cfg.base_branch == "main" for _, cfg in loader.calls)

    def test_set_base_branch_ignores_empty(self):
        loader = ScriptedLoader()
        registry = ListingRegistry(StatusConfig(), Recorder(), loader=loader)
        registry.open(Path("/a"))
        loader.calls.clear()
        assert registry.set_base_branch("") is False
        assert registry.set_base_branch(None) is False
        assert loader.calls == []
        assert registry.config.base_branch == "HEAD"

    def test_set_base_branch_rejects_option_like_name(self):
        loader = ScriptedLoader()
        registry = ListingRegistry(StatusConfig(), Recorder(), loader=loader)
        registry.open(Path("/a"))
        loader.calls.clear()
        assert registry.set_base_branch("--output=x") is False
        assert loader.calls == []
        assert registry.get(Path("/a")).config.base_branch == "HEAD"

    def test_close(self):
        registry = ListingRegistry(StatusConfig(), Recorder(), loader=ScriptedLoader())
        registry.open(Path("/a"))
        registry.close(Path("/a"))
        assert registry.get(Path("/a")) is None
        assert registry.listings == []
