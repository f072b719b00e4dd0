"""Tests for prsummary.git.log module."""

import shutil
from pathlib import Path

import pytest

from prsummary.git import CommitExtractionError, GitError
from prsummary.git.log import extract_commit_range, get_commit_log

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


class TestGetCommitLog:
    """Tests for get_commit_log function."""

    def test_builds_range_query(self, mocker):
        """Test the log query over target..current."""
        mock_run = mocker.patch("prsummary.git.log._run_git_command", return_value="Fix bug")

        result = get_commit_log(Path("/repo"), "origin/dev", "feature/x")

        assert result == "Fix bug"
        mock_run.assert_called_once_with(
            ["log", "--pretty=format:%s%n%n%b", "origin/dev..feature/x"],
            Path("/repo"),
        )

    def test_with_diff_appends_patch_flag(self, mocker):
        mock_run = mocker.patch("prsummary.git.log._run_git_command", return_value="")

        get_commit_log(Path("/repo"), "dev", "feature/x", with_diff=True)

        assert mock_run.call_args.args[0][-1] == "-p"


class TestExtractCommitRange:
    """Tests for extract_commit_range function."""

    def test_returns_commit_text(self, mocker, sample_commit_text):
        mocker.patch("prsummary.git.log._run_git_command", return_value=sample_commit_text.strip())

        result = extract_commit_range(Path("/repo"), "feature/x", "dev", include_diffs=False)

        assert result.startswith("Add login endpoint")
        assert "Add user model" in result

    def test_empty_range_is_empty_string(self, mocker):
        """Test that no commits is an empty string, not an error."""
        mocker.patch("prsummary.git.log._run_git_command", return_value="")

        assert extract_commit_range(Path("/repo"), "feature/x", "dev", include_diffs=True) == ""

    def test_query_failure_is_wrapped(self, mocker):
        """Test that git failures surface as CommitExtractionError."""
        mocker.patch(
            "prsummary.git.log._run_git_command",
            side_effect=GitError("Git command failed: git log\nfatal: bad object"),
        )

        with pytest.raises(CommitExtractionError) as exc_info:
            extract_commit_range(Path("/repo"), "feature/x", "dev", include_diffs=False)

        assert "Error obtaining commit messages" in str(exc_info.value)
        assert "fatal: bad object" in str(exc_info.value)


@requires_git
class TestExtractCommitRangeRealRepo:
    """Tests against a real git repository."""

    def test_lists_commits_newest_first(self, git_repo):
        result = extract_commit_range(git_repo, "feature/x", "origin/dev", include_diffs=False)

        assert "Initial commit" not in result
        assert result.index("Add b") < result.index("Add a")
        assert "First body line." in result
        assert "diff --git" not in result

    def test_includes_diffs(self, git_repo):
        result = extract_commit_range(git_repo, "feature/x", "origin/dev", include_diffs=True)

        assert "diff --git a/a.txt b/a.txt" in result
        assert "+b" in result

    def test_no_new_commits(self, git_repo):
        assert extract_commit_range(git_repo, "dev", "feature/x", include_diffs=False) == ""
