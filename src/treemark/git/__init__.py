"""Git interface layer — adapter, output parsers, models."""

from treemark.git.adapter import (
    GitError,
    branch_diff_command,
    get_repo_root,
    ls_tree_command,
    run_command,
    run_command_async,
    status_command,
)
from treemark.git.branch_diff import apply_branch_diff, parse_diff_line
from treemark.git.models import ProcessResult
from treemark.git.quoting import unquote_git_file_name
from treemark.git.status_parser import parse_git_status, parse_status_line

__all__ = [
    "GitError",
    "ProcessResult",
    "apply_branch_diff",
    "branch_diff_command",
    "get_repo_root",
    "ls_tree_command",
    "parse_diff_line",
    "parse_git_status",
    "parse_status_line",
    "run_command",
    "run_command_async",
    "status_command",
    "unquote_git_file_name",
]
