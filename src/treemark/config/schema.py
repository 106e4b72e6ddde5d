"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal

OutputFormat = Literal["terminal", "json", "yaml"]

OUTPUT_FORMATS = ("terminal", "json", "yaml")


@dataclass(frozen=True)
class StatusConfig:
    """Settings threaded into each status refresh."""

    base_branch: str = "HEAD"
    include_committed: bool = False  # also merge base...HEAD into the index column
    show_ignored: bool = True  # entries git does not track are shown as ignored


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class SymbolsConfig:
    index: Dict[str, str] = field(default_factory=dict)  # code -> marker text
    working_tree: Dict[str, str] = field(default_factory=dict)


@dataclass
class TreemarkConfig:
    version: str = "1.0"
    status: StatusConfig = field(default_factory=StatusConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    symbols: SymbolsConfig = field(default_factory=SymbolsConfig)


def is_valid_base_branch(name: object) -> bool:
    """A usable ref name: a non-empty string git cannot read as an option."""
    return isinstance(name, str) and bool(name) and not name.startswith("-")
