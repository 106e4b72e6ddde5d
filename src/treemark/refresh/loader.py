"""Status refresh pipeline — run git, join the streams, parse and merge.

The three git commands run concurrently; the joined results are handed to
*schedule* so the caller decides which thread parses and renders.  A
refresh either delivers a complete StatusMap or ``None`` when status is
unavailable, in which case the caller keeps its previous presentation.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Sequence

from treemark.config.schema import StatusConfig
from treemark.git.adapter import (
    Done,
    branch_diff_command,
    ls_tree_command,
    run_command_async,
    status_command,
)
from treemark.git.branch_diff import apply_branch_diff
from treemark.git.models import ProcessResult
from treemark.git.status_parser import parse_git_status
from treemark.refresh.concurrent import concurrent
from treemark.status.models import StatusMap

log = logging.getLogger(__name__)

# (args, cwd, done) -> None; must eventually call done exactly once.
Runner = Callable[[list, Path, Done], None]
Scheduler = Callable[[Callable[[], None]], None]
StatusCallback = Callable[[Optional[StatusMap]], None]


def call_now(fn: Callable[[], None]) -> None:
    fn()


def _skipped(done: Done) -> None:
    done(ProcessResult.empty())


def build_status(
    results: Sequence[ProcessResult], config: StatusConfig
) -> Optional[StatusMap]:
    """Turn the joined ``(status, tree, diff)`` results into a StatusMap."""
    status_result, tree_result, diff_result = results

    if not status_result.ok or not tree_result.ok:
        log.debug(
            "Status unavailable (status exit %d, ls-tree exit %d)",
            status_result.code, tree_result.code,
        )
        return None

    parsed = parse_git_status(status_result.stdout, tree_result.stdout)

    if config.include_committed:
        if diff_result.ok:
            apply_branch_diff(diff_result.stdout, parsed)
        else:
            log.debug(
                "Skipping committed changes, diff exited with %d", diff_result.code
            )
    return parsed


def load_git_status(
    directory: Path,
    config: StatusConfig,
    callback: StatusCallback,
    *,
    runner: Runner = run_command_async,
    schedule: Scheduler = call_now,
) -> None:
    """Start a refresh for *directory* and deliver the result to *callback*."""

    def run_status(done: Done) -> None:
        runner(status_command(), directory, done)

    def run_ls_tree(done: Done) -> None:
        runner(ls_tree_command(config.base_branch), directory, done)

    def run_branch_diff(done: Done) -> None:
        runner(branch_diff_command(config.base_branch), directory, done)

    operations = [
        run_status,
        run_ls_tree if config.show_ignored else _skipped,
        run_branch_diff if config.include_committed else _skipped,
    ]

    def joined(results: list) -> None:
        schedule(lambda: callback(build_status(results, config)))

    concurrent(operations, joined)


def collect_git_status(
    directory: Path,
    config: StatusConfig,
    *,
    runner: Runner = run_command_async,
    timeout: Optional[float] = None,
) -> Optional[StatusMap]:
    """Blocking variant of :func:`load_git_status` for one-shot callers."""
    finished = threading.Event()
    delivered: list = []

    def on_status(status: Optional[StatusMap]) -> None:
        delivered.append(status)
        finished.set()

    load_git_status(directory, config, on_status, runner=runner)
    if not finished.wait(timeout):
        log.warning("Timed out waiting for git status in %s", directory)
        return None
    return delivered[0]
