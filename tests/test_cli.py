"""Tests for argument parsing and the CLI entry point"""
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from git_submodule_keeper.cli.args import parse_args
from git_submodule_keeper.cli.main import main


class TestParseArgs:
    def test_clone(self):
        args = parse_args(["clone", "https://github.com/org/repo.git", "dest"])
        assert args.command == "clone"
        assert args.url == "https://github.com/org/repo.git"
        assert args.path == "dest"

    def test_clone_path_optional(self):
        assert parse_args(["clone", "url"]).path is None

    def test_rm(self):
        args = parse_args(["rm", "libs/foo"])
        assert args.command == "rm"
        assert args.path == "libs/foo"

    @pytest.mark.parametrize("command", ["init", "ls", "status"])
    def test_commands_without_arguments(self, command):
        assert parse_args([command]).command == command

    def test_cwd_before_subcommand(self):
        assert parse_args(["--cwd", "/tmp", "ls"]).cwd == "/tmp"

    def test_cwd_after_subcommand(self):
        assert parse_args(["ls", "--cwd", "/srv"]).cwd == "/srv"

    def test_cwd_default(self):
        assert parse_args(["ls"]).cwd is None

    def test_status_ignore(self):
        assert parse_args(["status", "--ignore", "untracked"]).ignore == "untracked"

    def test_status_ignore_invalid(self):
        with pytest.raises(SystemExit):
            parse_args(["status", "--ignore", "sometimes"])

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_flags(self):
        args = parse_args(["-v", "--debug", "ls"])
        assert args.verbose is True
        assert args.debug is True


class TestMain:
    def test_ls(self, superproject, output):
        assert main(["--cwd", superproject.working_dir, "ls"]) == 0
        assert output.getvalue().splitlines() == ["foo libs/foo", "vendor vendor"]

    def test_status(self, superproject, output):
        assert main(["status", "--cwd", superproject.working_dir]) == 0
        lines = output.getvalue().splitlines()
        assert lines[0] == "foo libs/foo clean"
        assert "vendor vendor clean" in lines

    def test_error_outside_repository(self, temp_dir, capsys):
        assert main(["--cwd", str(temp_dir), "ls"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_cwd(self, temp_dir, capsys):
        assert main(["--cwd", str(temp_dir / "missing"), "ls"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_rm_unknown_path(self, superproject, capsys):
        assert main(["--cwd", superproject.working_dir, "rm", "nope"]) == 1
        assert "No submodule found" in capsys.readouterr().err

    @patch("git_submodule_keeper.services.git.operations.subprocess.run")
    def test_clone_failure_exit_code(self, mock_run, temp_dir):
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=128)
        assert main(["--cwd", str(temp_dir), "clone", "https://github.com/org/repo.git"]) == 128

    @patch("git_submodule_keeper.services.git.operations.subprocess.run")
    def test_clone_killed_by_signal_exits_1(self, mock_run, temp_dir):
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=-9)
        assert main(["--cwd", str(temp_dir), "clone", "https://github.com/org/repo.git"]) == 1

    def test_clone_with_path(self, superproject, temp_dir, output):
        code = main(["--cwd", str(temp_dir), "clone", superproject.working_dir, "copy"])
        assert code == 0
        assert output.getvalue().splitlines() == [
            "initialized foo at libs/foo",
            "initialized vendor at vendor",
        ]
        assert (Path(temp_dir) / "copy" / "libs" / "foo" / "foo.txt").exists()

    def test_clone_without_inferable_path_succeeds_silently(self, superproject, temp_dir, output):
        workdir = temp_dir / "work"
        workdir.mkdir()
        assert main(["--cwd", str(workdir), "clone", superproject.working_dir]) == 0
        assert output.getvalue() == ""
        assert (workdir / "super" / "vendor" / "vendor.txt").exists()

    def test_keyboard_interrupt(self, temp_dir, capsys):
        with patch("git_submodule_keeper.cli.main.SubmoduleKeeper", side_effect=KeyboardInterrupt):
            assert main(["--cwd", str(temp_dir), "ls"]) == 1
        assert "cancelled" in capsys.readouterr().err
