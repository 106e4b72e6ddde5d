"""Data models for git command results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Exit code and captured output of one git invocation."""

    code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.code == 0

    @classmethod
    def empty(cls) -> "ProcessResult":
        """Successful result with no output, used for disabled streams."""
        return cls(code=0)
