"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- _probe_git_command: Run a git probe and return its exit code and output
- is_inside_repository: Check whether a path is inside a git work tree
"""

import logging
import subprocess
from pathlib import Path

from prsummary.git.exceptions import GitError

logger = logging.getLogger(__name__)


def _run_git_command(args: list[str], cwd: Path) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Working directory to run git in.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running git %s in %s", " ".join(args), cwd)
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def _probe_git_command(args: list[str], cwd: Path) -> tuple[int, str]:
    """Run a git command whose non-zero exit is an answer, not a failure.

    Args:
        args: List of arguments to pass to git.
        cwd: Working directory to run git in.

    Returns:
        Tuple of (exit code, stripped stdout).

    Raises:
        GitError: If git is not installed.
    """
    logger.debug("Probing git %s in %s", " ".join(args), cwd)
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    return result.returncode, result.stdout.strip()


def is_inside_repository(path: Path) -> bool:
    """Check whether a directory is inside a git work tree.

    Args:
        path: Directory to check.

    Returns:
        True if git considers the path part of a work tree.
    """
    returncode, output = _probe_git_command(["rev-parse", "--is-inside-work-tree"], path)
    return returncode == 0 and output == "true"
