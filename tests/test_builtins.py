"""Tests for the builtins module."""

import os

import pytest

from plaidsh.builtins import (
    AUTHOR,
    BUILTIN_REGISTRY,
    BUILTINS_HELP,
    builtin_author,
    builtin_cd,
    builtin_exit,
    builtin_help,
    builtin_pwd,
    builtin_setenv,
)
from plaidsh.shell import Shell


@pytest.fixture
def shell():
    return Shell(history_file=None)


class TestBuiltinRegistry:
    def test_all_help_entries_have_handlers(self):
        for name in BUILTINS_HELP:
            assert name in BUILTIN_REGISTRY, f"'{name}' missing from BUILTIN_REGISTRY"

    def test_all_handlers_have_help_entries(self):
        for name in BUILTIN_REGISTRY:
            assert name in BUILTINS_HELP, f"'{name}' in BUILTIN_REGISTRY but not in BUILTINS_HELP"

    def test_quit_is_exit(self):
        assert BUILTIN_REGISTRY["quit"] is BUILTIN_REGISTRY["exit"]


class TestCd:
    def test_cd_to_directory(self, tmp_path, shell, monkeypatch):
        monkeypatch.chdir(tmp_path)
        sub = tmp_path / "sub"
        sub.mkdir()
        assert builtin_cd([str(sub)], shell) == 0
        assert os.getcwd() == str(sub)

    def test_cd_no_args_goes_home(self, tmp_path, shell, monkeypatch):
        monkeypatch.chdir("/")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert builtin_cd([], shell) == 0
        assert os.getcwd() == str(tmp_path)

    def test_cd_each_argument_in_turn(self, tmp_path, shell, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "a" / "b").mkdir(parents=True)
        assert builtin_cd(["a", "b"], shell) == 0
        assert os.getcwd() == str(tmp_path / "a" / "b")

    def test_cd_nonexistent(self, shell, capsys, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert builtin_cd(["/nonexistent_dir_xyz"], shell) == 1
        assert "no such file or directory" in capsys.readouterr().err

    def test_cd_to_file(self, tmp_path, shell, capsys, monkeypatch):
        monkeypatch.chdir(tmp_path)
        f = tmp_path / "afile.txt"
        f.touch()
        assert builtin_cd([str(f)], shell) == 1
        assert "not a directory" in capsys.readouterr().err

    def test_cd_other_os_error(self, tmp_path, shell, capsys, monkeypatch):
        monkeypatch.chdir(tmp_path)

        def refuse(path):
            raise PermissionError(13, "Permission denied", path)

        monkeypatch.setattr(os, "chdir", refuse)
        assert builtin_cd(["locked"], shell) == 1
        assert "cd: locked: Permission denied" in capsys.readouterr().err


class TestPwd:
    def test_pwd(self, tmp_path, shell, capsys, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert builtin_pwd([], shell) == 0
        assert capsys.readouterr().out.strip() == str(tmp_path)


class TestSetenv:
    def test_sets_variable(self, shell, monkeypatch):
        monkeypatch.setenv("PLAIDSH_SET", "")
        assert builtin_setenv(["PLAIDSH_SET", "hello world"], shell) == 0
        assert os.environ["PLAIDSH_SET"] == "hello world"

    def test_overwrites(self, shell, monkeypatch):
        monkeypatch.setenv("PLAIDSH_SET", "old")
        builtin_setenv(["PLAIDSH_SET", "new"], shell)
        assert os.environ["PLAIDSH_SET"] == "new"

    def test_incomplete_arguments(self, shell, capsys):
        assert builtin_setenv(["ONLY_NAME"], shell) == 1
        assert "Incomplete arguments" in capsys.readouterr().err
        assert builtin_setenv([], shell) == 1

    def test_illegal_name(self, shell, capsys, monkeypatch):
        monkeypatch.delenv("BAD-NAME", raising=False)
        assert builtin_setenv(["BAD-NAME", "x"], shell) == 1
        assert "Illegal variable name: BAD-NAME" in capsys.readouterr().err
        assert "BAD-NAME" not in os.environ

    def test_digits_and_underscores_allowed(self, shell, monkeypatch):
        monkeypatch.setenv("_V2", "")
        assert builtin_setenv(["_V2", "ok"], shell) == 0
        assert os.environ["_V2"] == "ok"


class TestAuthor:
    def test_author(self, shell, capsys):
        assert builtin_author([], shell) == 0
        assert capsys.readouterr().out == f"Author: {AUTHOR}\n"


class TestHelp:
    def test_help_returns_zero(self, shell):
        assert builtin_help([], shell) == 0

    def test_help_lists_all_builtins(self, shell, capsys):
        builtin_help([], shell)
        output = capsys.readouterr().out
        assert "built-in commands" in output
        for name in BUILTINS_HELP:
            assert name in output


class TestExit:
    def test_exit_raises_system_exit(self, shell):
        with pytest.raises(SystemExit) as exc_info:
            builtin_exit([], shell)
        assert exc_info.value.code == 0

    def test_exit_with_code(self, shell):
        with pytest.raises(SystemExit) as exc_info:
            builtin_exit(["42"], shell)
        assert exc_info.value.code == 42

    def test_exit_bad_code(self, shell, capsys):
        with pytest.raises(SystemExit) as exc_info:
            builtin_exit(["abc"], shell)
        assert exc_info.value.code == 2
        assert "numeric argument required" in capsys.readouterr().err
