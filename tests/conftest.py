"""Shared test fixtures — sample git output, fake runners, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path
from typing import Dict, List

import pytest

from treemark.git.models import ProcessResult


@pytest.fixture
def sample_status() -> str:
    """``git status --short`` output with top-level and nested changes."""
    return textwrap.dedent("""\
        M  staged.py
         M edited.py
        ?? notes.txt
        A  src/new_module.py
         M src/pkg/util.py
        ?? build/
        R  old.md -> new.md
    """)


@pytest.fixture
def sample_tree() -> str:
    """``git ls-tree HEAD . --name-only`` output."""
    return textwrap.dedent("""\
        README.md
        edited.py
        src
        staged.py
        tracked.txt
    """)


@pytest.fixture
def sample_branch_diff() -> str:
    """``git diff --name-status --relative base...HEAD`` output."""
    return (
        "M\tREADME.md\n"
        "A\tadded.txt\n"
        "R100\told.txt\tnew.txt\n"
        "C075\ttemplate.cfg\tcopy.cfg\n"
        "D\tdocs/guide.md\n"
    )


class FakeRunner:
    """Stand-in for ``run_command_async`` that answers from a table.

    Results are keyed by git subcommand (``status``, ``ls-tree``, ``diff``).
    With ``deferred=True`` completions are queued until :meth:`complete`.
    """

    def __init__(self, results: Dict[str, ProcessResult], *, deferred: bool = False) -> None:
        self.results = results
        self.deferred = deferred
        self.calls: List[List[str]] = []
        self.pending: List = []
        self._fired: set = set()

    @staticmethod
    def subcommand(args: List[str]) -> str:
        for name in ("status", "ls-tree", "diff"):
            if name in args:
                return name
        raise AssertionError(f"unexpected command: {args}")

    def __call__(self, args, cwd, done) -> None:
        self.calls.append(list(args))
        result = self.results.get(self.subcommand(args), ProcessResult.empty())
        if self.deferred:
            self.pending.append(lambda: done(result))
        else:
            done(result)

    def complete(self, order=None) -> None:
        """Release queued completions in *order*, or every one still held."""
        if order is None:
            order = [i for i in range(len(self.pending)) if i not in self._fired]
        for i in order:
            self._fired.add(i)
            self.pending[i]()

    def ran(self, name: str) -> bool:
        return any(self.subcommand(c) == name for c in self.calls)


@pytest.fixture
def fake_runner_factory():
    return FakeRunner


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def git():
    return _git


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", str(repo)], capture_output=True, check=True)
    _git(repo, "config", "user.email", "test@test.com")
    _git(repo, "config", "user.name", "Test")
    _git(repo, "config", "commit.gpgsign", "false")
    # Initial commit
    (repo / "README.md").write_text("# Test\n")
    (repo / "src").mkdir()
    (repo / "src" / "app.py").write_text("print('hello')\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "init")
    return repo
