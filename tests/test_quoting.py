"""Tests for git path unquoting."""

from treemark.git.quoting import strip_trailing_slash, unquote_git_file_name


class TestUnquote:
    def test_plain_name_unchanged(self):
        assert unquote_git_file_name("hello.py") == "hello.py"

    def test_utf8_name_unchanged(self):
        assert unquote_git_file_name("résumé.txt") == "résumé.txt"

    def test_escaped_quote_and_backslash(self):
        assert unquote_git_file_name(r'"\"weird\\name\".md"') == '"weird\\name".md'

    def test_backslash_only(self):
        # git shows '\file.md' as "\\file.md"
        assert unquote_git_file_name(r'"\\file.md"') == "\\file.md"

    def test_name_with_spaces_in_quotes(self):
        assert unquote_git_file_name('"my file.txt"') == "my file.txt"

    def test_unwrapped_escapes_still_replaced(self):
        assert unquote_git_file_name(r"a\"b") == 'a"b'

    def test_single_quote_char_left_alone(self):
        assert unquote_git_file_name('"') == '"'

    def test_empty(self):
        assert unquote_git_file_name("") == ""


class TestTrailingSlash:
    def test_strips_one_slash(self):
        assert strip_trailing_slash("build/") == "build"

    def test_no_slash(self):
        assert strip_trailing_slash("build") == "build"
