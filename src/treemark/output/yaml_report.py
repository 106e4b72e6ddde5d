"""YAML reporter — same document as the JSON report."""

from __future__ import annotations

from pathlib import Path

import yaml

from treemark.output.json_report import to_dict
from treemark.status.models import StatusMap


def render(status: StatusMap, directory: Path, *, base_branch: str) -> str:
    return yaml.safe_dump(
        to_dict(status, directory, base_branch=base_branch),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
