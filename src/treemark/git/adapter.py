"""Git subprocess wrapper — status, ls-tree and branch diff commands."""

from __future__ import annotations

import logging
import subprocess
import threading
from pathlib import Path
from typing import Callable, List, Optional

from treemark.git.models import ProcessResult

log = logging.getLogger(__name__)

# Exit codes reported when git could not be run at all.
EXIT_NOT_RUNNABLE = 127
EXIT_TIMED_OUT = 124

DEFAULT_TIMEOUT = 30

Done = Callable[[ProcessResult], None]


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


# --- Command lines ---
# quotepath=false keeps UTF-8 names readable; quoting is still applied to
# names containing quotes or backslashes.


def status_command() -> List[str]:
    return [
        "git", "-c", "core.quotepath=false", "-c", "status.relativePaths=true",
        "status", ".", "--short",
    ]


def ls_tree_command(base_branch: str) -> List[str]:
    return [
        "git", "-c", "core.quotepath=false", "ls-tree", "--name-only",
        "--end-of-options", base_branch, ".",
    ]


def branch_diff_command(base_branch: str) -> List[str]:
    return [
        "git", "-c", "core.quotepath=false", "diff", "--name-status", "--relative",
        "--end-of-options", f"{base_branch}...HEAD", "--", ".",
    ]


# --- Execution ---


def run_command(
    args: List[str], cwd: Path, timeout: int = DEFAULT_TIMEOUT
) -> ProcessResult:
    """Run *args* in *cwd* and return its result. Never raises."""
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        log.debug("Could not run %s in %s: %s", args[0], cwd, exc)
        return ProcessResult(code=EXIT_NOT_RUNNABLE, stderr=str(exc))
    except subprocess.TimeoutExpired:
        log.debug("Command timed out after %ss: %s", timeout, " ".join(args))
        return ProcessResult(
            code=EXIT_TIMED_OUT, stderr=f"timed out after {timeout}s"
        )

    if result.returncode != 0:
        log.debug(
            "Command exited with %d: %s: %s",
            result.returncode, " ".join(args), result.stderr.strip(),
        )
    return ProcessResult(
        code=result.returncode, stdout=result.stdout, stderr=result.stderr
    )


def run_command_async(
    args: List[str], cwd: Path, done: Done, timeout: int = DEFAULT_TIMEOUT
) -> None:
    """Run *args* on a worker thread and pass the result to *done*."""

    def worker() -> None:
        done(run_command(args, cwd, timeout))

    thread = threading.Thread(
        target=worker, name=f"treemark-{' '.join(args[-3:])}", daemon=True
    )
    thread.start()


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    result = run_command(["git", "rev-parse", "--show-toplevel"], cwd=cwd)
    if result.code == EXIT_NOT_RUNNABLE:
        raise GitError(f"git could not be run in {cwd}: {result.stderr}")
    if not result.ok:
        raise GitError(f"git error: {result.stderr.strip()}")
    return Path(result.stdout.strip())
