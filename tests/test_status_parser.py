"""Tests for the short-status / ls-tree parser."""

from treemark.git.status_parser import parse_git_status, parse_status_line
from treemark.status.models import EntryStatus


class TestStatusLines:
    def test_top_level_codes(self, sample_status):
        status = parse_git_status(sample_status, "")
        assert status["staged.py"] == EntryStatus("M", " ")
        assert status["edited.py"] == EntryStatus(" ", "M")
        assert status["notes.txt"] == EntryStatus("?", "?")

    def test_directory_entry_slash_stripped(self, sample_status):
        status = parse_git_status(sample_status, "")
        assert status["build"] == EntryStatus("?", "?")
        assert "build/" not in status

    def test_nested_changes_aggregate(self, sample_status):
        status = parse_git_status(sample_status, "")
        # First change under src keeps its codes, the second raises the
        # working-tree column to M.
        assert status["src"] == EntryStatus("A", "M")

    def test_rename_line_kept_whole(self, sample_status):
        status = parse_git_status(sample_status, "")
        assert status["old.md -> new.md"] == EntryStatus("R", " ")
        assert "new.md" not in status

    def test_quoted_filename(self):
        status = parse_git_status('?? "my \\"quoted\\" file.txt"\n', "")
        assert status == {'my "quoted" file.txt': EntryStatus("?", "?")}

    def test_every_key_is_top_level(self, sample_status, sample_tree):
        status = parse_git_status(sample_status, sample_tree)
        assert all("/" not in key for key in status)


class TestTreeFallback:
    def test_tracked_unchanged_entry_added(self, sample_status, sample_tree):
        status = parse_git_status(sample_status, sample_tree)
        assert status["tracked.txt"] == EntryStatus(" ", " ")
        assert status["README.md"] == EntryStatus(" ", " ")

    def test_tree_does_not_override_changes(self, sample_status, sample_tree):
        status = parse_git_status(sample_status, sample_tree)
        assert status["edited.py"] == EntryStatus(" ", "M")
        assert status["src"] == EntryStatus("A", "M")

    def test_tree_only(self):
        status = parse_git_status("", "tracked.txt\n")
        assert status == {"tracked.txt": EntryStatus(" ", " ")}

    def test_quoted_tree_name(self):
        status = parse_git_status("", '"back\\\\slash.txt"\n')
        assert status == {"back\\slash.txt": EntryStatus(" ", " ")}


class TestEdgeCases:
    def test_empty_inputs(self):
        assert parse_git_status("", "") == {}
        assert parse_git_status(None, None) == {}

    def test_trailing_newline_not_an_entry(self):
        status = parse_git_status("M  a.txt\n", "b.txt\n")
        assert set(status) == {"a.txt", "b.txt"}
        assert "" not in status

    def test_short_line_skipped(self):
        assert parse_status_line("M ") is None
        assert parse_git_status("M\n??\n", "") == {}

    def test_crlf_tolerated(self):
        status = parse_git_status(" M a.txt\r\n", "")
        assert status == {"a.txt": EntryStatus(" ", "M")}

    def test_idempotent(self, sample_status, sample_tree):
        first = parse_git_status(sample_status, sample_tree)
        second = parse_git_status(sample_status, sample_tree)
        assert first == second
        assert first is not second
