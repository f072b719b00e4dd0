"""Commit range extraction.

Contains:
- get_commit_log: Raw log of the commits in target..current
- extract_commit_range: Commit messages (and optional diffs) between two branches
"""

from pathlib import Path

from prsummary.git.exceptions import CommitExtractionError, GitError
from prsummary.git.runner import _run_git_command

# Subject, blank line, body for each commit
COMMIT_LOG_FORMAT = "%s%n%n%b"


def get_commit_log(path: Path, from_exclusive: str, to_inclusive: str, with_diff: bool = False) -> str:
    """Get the log of commits reachable from ``to_inclusive`` but not ``from_exclusive``.

    Args:
        path: Working directory of the repository.
        from_exclusive: The ref whose history is excluded (the target branch).
        to_inclusive: The ref whose history is listed (the current branch).
        with_diff: Append each commit's unified diff.

    Returns:
        The stripped log output, empty if the range has no commits.

    Raises:
        GitError: If git fails.
    """
    args = ["log", f"--pretty=format:{COMMIT_LOG_FORMAT}", f"{from_exclusive}..{to_inclusive}"]
    if with_diff:
        args.append("-p")
    return _run_git_command(args, path)


def extract_commit_range(path: Path, current: str, target: str, include_diffs: bool) -> str:
    """Extract the commit messages between the target and current branch.

    Args:
        path: Working directory of the repository.
        current: The current (feature) branch.
        target: The branch being merged into.
        include_diffs: Whether to include each commit's diff.

    Returns:
        The commit text, or an empty string when there are no new commits.

    Raises:
        CommitExtractionError: If the log query fails.
    """
    try:
        output = get_commit_log(path, target, current, with_diff=include_diffs)
    except GitError as e:
        raise CommitExtractionError(f"Error obtaining commit messages: {e}")

    if not output:
        # No new commits
        return ""
    return output
