"""Tests for prsummary.git.runner module."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from prsummary.git import GitError
from prsummary.git.runner import _probe_git_command, _run_git_command, is_inside_repository


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_successful_command(self, mocker):
        """Test successful git command execution."""
        mock_result = MagicMock()
        mock_result.stdout = "output\n"
        mock_result.returncode = 0

        mock_run = mocker.patch("subprocess.run", return_value=mock_result)

        result = _run_git_command(["status"], Path("/repo"))
        assert result == "output"
        assert mock_run.call_args.args[0] == ["git", "status"]
        assert mock_run.call_args.kwargs["cwd"] == Path("/repo")

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError with stderr."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="fatal: bad revision\n"),
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["log", "a..b"], Path("/repo"))

        assert "Git command failed: git log a..b" in str(exc_info.value)
        assert "fatal: bad revision" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"], Path("/repo"))

        assert "not installed" in str(exc_info.value)


class TestProbeGitCommand:
    """Tests for _probe_git_command function."""

    def test_returns_code_and_output(self, mocker):
        """Test that a non-zero exit is returned, not raised."""
        mock_result = MagicMock()
        mock_result.stdout = "  \n"
        mock_result.returncode = 1
        mock_run = mocker.patch("subprocess.run", return_value=mock_result)

        assert _probe_git_command(["show-ref", "--verify", "x"], Path("/repo")) == (1, "")
        assert mock_run.call_args.kwargs["check"] is False

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git still raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError):
            _probe_git_command(["status"], Path("/repo"))


class TestIsInsideRepository:
    """Tests for is_inside_repository function."""

    def test_inside_work_tree(self, mocker):
        mocker.patch("prsummary.git.runner._probe_git_command", return_value=(0, "true"))
        assert is_inside_repository(Path("/repo")) is True

    def test_not_a_repository(self, mocker):
        mocker.patch("prsummary.git.runner._probe_git_command", return_value=(128, ""))
        assert is_inside_repository(Path("/tmp")) is False

    def test_inside_git_dir_is_not_work_tree(self, mocker):
        """Test that the .git directory itself does not count."""
        mocker.patch("prsummary.git.runner._probe_git_command", return_value=(0, "false"))
        assert is_inside_repository(Path("/repo/.git")) is False
