"""Reporters — terminal listing, JSON and YAML status dumps."""

from treemark.output.markers import EntryMarkers, Marker, build_markers, list_entries

__all__ = ["EntryMarkers", "Marker", "build_markers", "list_entries"]
