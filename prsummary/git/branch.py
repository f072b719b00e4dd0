"""Git branch utilities.

Contains:
- BranchLocation: Where a target branch was found
- require_workspace: Check that a workspace directory is available
- get_current_branch / resolve_current_branch: Current branch name
- local_branch_exists / remote_branch_exists: Ref lookups
- lookup_target_branch / validate_target_branch: Local-then-remote target lookup
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from prsummary.git.exceptions import (
    NoWorkspaceOpenError,
    NotAGitRepositoryError,
    TargetBranchNotFoundError,
)
from prsummary.git.runner import _probe_git_command, _run_git_command, is_inside_repository

DEFAULT_REMOTE = "origin"


class BranchLocation(Enum):
    """Result of looking up a target branch."""

    LOCAL = "local"
    REMOTE = "remote"
    NOT_FOUND = "not-found"


def require_workspace(workspace: Optional[Path]) -> Path:
    """Return the workspace path, or fail if there is none.

    Args:
        workspace: The workspace root, or None if no workspace is open.

    Returns:
        The workspace path.

    Raises:
        NoWorkspaceOpenError: If the workspace is missing or not a directory.
    """
    if workspace is None or not Path(workspace).is_dir():
        raise NoWorkspaceOpenError("No workspace folder is open.")
    return Path(workspace)


def get_current_branch(path: Path) -> str:
    """Get the abbreviated name of the checked-out branch.

    Returns 'HEAD' when the repository is in detached HEAD state.
    """
    return _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"], path)


def resolve_current_branch(workspace: Optional[Path]) -> str:
    """Determine the current working branch of the workspace.

    Args:
        workspace: The workspace root, or None if no workspace is open.

    Returns:
        The current branch name.

    Raises:
        NoWorkspaceOpenError: If no workspace is available.
        NotAGitRepositoryError: If the workspace is not inside a git work tree.
    """
    path = require_workspace(workspace)
    if not is_inside_repository(path):
        raise NotAGitRepositoryError(
            "Error obtaining branch name. Ensure you are inside a git repository."
        )
    return get_current_branch(path)


def local_branch_exists(path: Path, name: str) -> bool:
    """Check whether a local branch named ``name`` exists."""
    returncode, _ = _probe_git_command(
        ["show-ref", "--verify", "--quiet", f"refs/heads/{name}"], path
    )
    return returncode == 0


def remote_branch_exists(path: Path, name: str, remote: str = DEFAULT_REMOTE) -> bool:
    """Check whether ``name`` refers to a branch on a remote.

    The name may be a remote-tracking ref ("origin/dev") or a bare branch
    name on the remote ("dev"). Remote-tracking refs are checked first, then
    the remote itself is asked with ls-remote.

    Args:
        path: Working directory of the repository.
        name: Branch name as typed by the user.
        remote: Remote to query with ls-remote.

    Returns:
        True if the remote has the branch.

    Raises:
        GitError: If the ls-remote query against a configured remote fails.
    """
    returncode, _ = _probe_git_command(
        ["show-ref", "--verify", "--quiet", f"refs/remotes/{name}"], path
    )
    if returncode == 0:
        return True

    # An unconfigured remote has no branches
    returncode, _ = _probe_git_command(["remote", "get-url", remote], path)
    if returncode != 0:
        return False

    branch = name[len(remote) + 1:] if name.startswith(f"{remote}/") else name
    output = _run_git_command(["ls-remote", "--heads", remote, branch], path)
    return bool(output)


def lookup_target_branch(path: Path, name: str, remote: str = DEFAULT_REMOTE) -> BranchLocation:
    """Find where a target branch lives.

    Local branches are checked first; the remote lookup only runs when no
    local branch matches.

    Args:
        path: Working directory of the repository.
        name: Target branch name.
        remote: Remote used for the fallback lookup.

    Returns:
        The BranchLocation of the branch.
    """
    if local_branch_exists(path, name):
        return BranchLocation.LOCAL
    if remote_branch_exists(path, name, remote=remote):
        return BranchLocation.REMOTE
    return BranchLocation.NOT_FOUND


def validate_target_branch(path: Path, name: str, remote: str = DEFAULT_REMOTE) -> BranchLocation:
    """Validate that the target branch exists locally or on the remote.

    Args:
        path: Working directory of the repository.
        name: Target branch name.
        remote: Remote used for the fallback lookup.

    Returns:
        Where the branch was found.

    Raises:
        TargetBranchNotFoundError: If the branch exists neither locally nor remotely.
    """
    location = lookup_target_branch(path, name, remote=remote)
    if location is BranchLocation.NOT_FOUND:
        raise TargetBranchNotFoundError(name)
    return location
