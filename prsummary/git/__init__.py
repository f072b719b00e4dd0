"""Git query module for prsummary.

This package provides the read-only git queries the summary pipeline needs:
- exceptions: GitError, NoWorkspaceOpenError, NotAGitRepositoryError,
              TargetBranchNotFoundError, CommitExtractionError
- runner: _run_git_command, _probe_git_command, is_inside_repository
- branch: BranchLocation, require_workspace, get_current_branch,
          resolve_current_branch, local_branch_exists, remote_branch_exists,
          lookup_target_branch, validate_target_branch
- log: get_commit_log, extract_commit_range
"""

# Exceptions
from prsummary.git.exceptions import (
    GitError,
    NoWorkspaceOpenError,
    NotAGitRepositoryError,
    TargetBranchNotFoundError,
    CommitExtractionError,
)

# Runner utilities
from prsummary.git.runner import (
    _run_git_command,
    _probe_git_command,
    is_inside_repository,
)

# Branch utilities
from prsummary.git.branch import (
    DEFAULT_REMOTE,
    BranchLocation,
    require_workspace,
    get_current_branch,
    resolve_current_branch,
    local_branch_exists,
    remote_branch_exists,
    lookup_target_branch,
    validate_target_branch,
)

# Commit log utilities
from prsummary.git.log import (
    get_commit_log,
    extract_commit_range,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoWorkspaceOpenError",
    "NotAGitRepositoryError",
    "TargetBranchNotFoundError",
    "CommitExtractionError",
    # Runner
    "_run_git_command",
    "_probe_git_command",
    "is_inside_repository",
    # Branch
    "DEFAULT_REMOTE",
    "BranchLocation",
    "require_workspace",
    "get_current_branch",
    "resolve_current_branch",
    "local_branch_exists",
    "remote_branch_exists",
    "lookup_target_branch",
    "validate_target_branch",
    # Log
    "get_commit_log",
    "extract_commit_range",
]
