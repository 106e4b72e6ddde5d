"""JSON reporter for scripts and editor integrations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from treemark.status.models import StatusMap


def to_dict(status: StatusMap, directory: Path, *, base_branch: str) -> Dict[str, Any]:
    """Convert a StatusMap to a JSON-serialisable dict, entries sorted by name."""
    return {
        "version": "1.0",
        "directory": str(directory),
        "base_branch": base_branch,
        "entries": {name: status[name].to_dict() for name in sorted(status)},
    }


def render(status: StatusMap, directory: Path, *, base_branch: str) -> str:
    """Return formatted JSON string."""
    return json.dumps(
        to_dict(status, directory, base_branch=base_branch),
        indent=2,
        ensure_ascii=False,
    )
