"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors (failed git queries)
- NoWorkspaceOpenError: Raised when there is no workspace directory
- NotAGitRepositoryError: Raised when the workspace is not inside a git work tree
- TargetBranchNotFoundError: Raised when the target branch exists neither locally nor remotely
- CommitExtractionError: Raised when the commit log query fails
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoWorkspaceOpenError(GitError):
    """Raised when no workspace folder is available."""

    pass


class NotAGitRepositoryError(GitError):
    """Raised when the workspace is not inside a git repository."""

    pass


class TargetBranchNotFoundError(GitError):
    """Raised when the target branch matches no local or remote branch."""

    def __init__(self, branch: str):
        super().__init__(f"Target branch '{branch}' does not exist.")
        self.branch = branch


class CommitExtractionError(GitError):
    """Raised when the commit messages between two branches cannot be read."""

    pass
