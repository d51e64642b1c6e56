"""Tests for LsCommand against a real directory tree."""

import os

import pytest

from termls.commands.accounts import AccountDirectory
from termls.commands.executor import LsCommand
from termls.commands.models import Options
from termls.utils.colors import ColorSpecResolver


@pytest.fixture
def accounts():
    return AccountDirectory({os.getuid(): "owner"}, {os.getgid(): "group"})


@pytest.fixture
def tree(tmp_path, monkeypatch):
    """A small directory tree, with the working directory set to its root."""
    (tmp_path / "b.txt").write_text("bb")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / ".hidden").write_text("")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "x").write_text("x")
    (tmp_path / "empty").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def run(accounts, paths, width=80, color_table=None, **flags):
    flags.setdefault("color", False)
    command = LsCommand(Options(**flags), color_table, accounts)
    return command.execute(paths, width)


class TestLsCommand:
    """Test cases for LsCommand output assembly."""

    def test_current_directory_by_default(self, tree, accounts):
        output, error = run(accounts, [])
        assert output == "a.txt  b.txt  empty  sub"
        assert error is None

    def test_all_includes_dot_entries(self, tree, accounts):
        output, _ = run(accounts, ["."], all=True, one_per_line=True)
        assert output.split("\n") == [".", "..", ".hidden", "a.txt", "b.txt", "empty", "sub"]

    def test_single_directory_has_no_header(self, tree, accounts):
        output, _ = run(accounts, ["sub"])
        assert output == "x"

    def test_empty_single_directory(self, tree, accounts):
        output, error = run(accounts, ["empty"])
        assert output == ""
        assert error is None

    def test_multiple_directories(self, tree, accounts):
        output, _ = run(accounts, ["sub", "empty"])
        assert output == "empty:\n\nsub:\nx"

    def test_files_before_directories(self, tree, accounts):
        output, _ = run(accounts, ["sub", "b.txt", "a.txt"])
        assert output == "a.txt  b.txt\n\nsub:\nx"

    def test_dirs_first_puts_files_last(self, tree, accounts):
        output, _ = run(accounts, ["sub", "a.txt"], dirs_first=True)
        assert output == "sub:\nx\n\na.txt"

    def test_dirs_first_inside_directory(self, tree, accounts):
        output, _ = run(accounts, ["."], dirs_first=True)
        assert output == "empty  sub  a.txt  b.txt"

    def test_directory_as_file(self, tree, accounts):
        output, _ = run(accounts, ["sub", "empty"], treat_dir_as_file=True)
        assert output == "empty  sub"

    def test_missing_argument_is_reported_and_others_listed(self, tree, accounts):
        output, error = run(accounts, ["nope", "a.txt"])
        assert output == "a.txt"
        assert error == "cannot access nope: no such file or directory"

    def test_sort_by_size_and_reverse(self, tree, accounts):
        output, _ = run(accounts, ["a.txt", "b.txt"], sort_by_size=True, one_per_line=True)
        assert output == "b.txt\na.txt"
        output, _ = run(accounts, ["a.txt", "b.txt"], sort_by_size=True,
                        sort_reverse=True, one_per_line=True)
        assert output == "a.txt\nb.txt"

    def test_long_listing(self, tree, accounts):
        output, _ = run(accounts, ["b.txt"], long=True)
        fields = output.split()
        assert fields[0].startswith("-") and len(fields[0]) == 10
        assert fields[1:3] == ["1", "owner"]
        assert fields[4] == "2"
        assert fields[-1] == "b.txt"

    def test_colored_directory_headers(self, tree, accounts):
        table = ColorSpecResolver().resolve()
        output, _ = run(accounts, ["sub", "empty"], color=True, color_table=table)
        assert output == "\x1b[0;34mempty\x1b[0m:\n\n\x1b[0;34msub\x1b[0m:\nx"

    def test_orphan_symlink(self, tree, accounts):
        os.symlink("missing", "dead")
        table = ColorSpecResolver().resolve(None, "or=31:mi=05")
        output, error = run(accounts, ["dead"], long=True, color=True, color_table=table)
        assert error is None
        assert output.startswith("lrwxrwxrwx")
        assert output.endswith("\x1b[31mdead\x1b[0m -> \x1b[05mmissing\x1b[0m")

    def test_symlink_inside_directory_resolves_relative_to_it(self, tree, accounts):
        os.symlink("x", os.path.join("sub", "link"))
        output, _ = run(accounts, ["sub"], long=True)
        lines = output.split("\n")
        assert lines[0].endswith("link -> x")
        assert lines[0].startswith("l")

    def test_human_sizes(self, tree, accounts):
        (tree / "big").write_bytes(b"\0" * 1536)
        output, _ = run(accounts, ["big"], long=True, human=True)
        assert " 1.5K " in output
