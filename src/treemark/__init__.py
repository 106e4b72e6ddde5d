"""treemark — git status markers for directory listings."""

__version__ = "0.3.0"
