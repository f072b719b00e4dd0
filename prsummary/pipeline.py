"""PR summary pipeline.

Runs the steps of one invocation in order:
branch resolution -> commit range extraction -> truncation ->
prompt construction -> LLM call -> reply parsing.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from prsummary.config import Settings
from prsummary.formatters import PrSummary
from prsummary.git import (
    extract_commit_range,
    require_workspace,
    resolve_current_branch,
    validate_target_branch,
)
from prsummary.llm import BaseLLMProvider, get_provider, parse_summary_response
from prsummary.prompt import build_prompt_messages
from prsummary.truncation import TruncationResult, truncate_text

logger = logging.getLogger(__name__)


@dataclass
class SummaryRequest:
    """User inputs for one PR summary."""

    target_branch: str
    additional_prompt: str = ""
    jira_ticket: str = ""
    include_diffs: bool = False


@dataclass
class CommitRange:
    """Commit text collected for the current branch."""

    branch: str
    text: str
    truncated: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass
class PipelineResult:
    """Outcome of one PR summary invocation.

    ``summary`` is None when the range had no commits (``empty_range``); in
    that case no LLM call was made.
    """

    branch: str
    target_branch: str
    summary: Optional[PrSummary] = None
    truncated: bool = False
    empty_range: bool = False
    model: Optional[str] = None

    @property
    def empty_reply(self) -> bool:
        return self.summary is not None and self.summary.is_empty


def collect_commit_range(
    workspace: Optional[Path],
    request: SummaryRequest,
    max_diff_size: int,
) -> CommitRange:
    """Resolve branches and extract the (size-bounded) commit text.

    Truncation is only applied when diffs are included.

    Raises:
        NoWorkspaceOpenError: If no workspace is available.
        NotAGitRepositoryError: If the workspace is not a git work tree.
        TargetBranchNotFoundError: If the target branch does not exist.
        CommitExtractionError: If the log query fails.
    """
    branch = resolve_current_branch(workspace)
    path = require_workspace(workspace)

    location = validate_target_branch(path, request.target_branch)
    logger.info("Target branch %s found (%s)", request.target_branch, location.value)

    text = extract_commit_range(path, branch, request.target_branch, request.include_diffs)

    result = TruncationResult(text, False)
    if request.include_diffs:
        result = truncate_text(text, max_diff_size)
        if result.was_truncated:
            logger.info(
                "Commit text truncated from %d to %d characters", len(text), max_diff_size
            )

    return CommitRange(branch=branch, text=result.text, truncated=result.was_truncated)


def generate_pr_summary(
    workspace: Optional[Path],
    request: SummaryRequest,
    settings: Settings,
    provider: Optional[BaseLLMProvider] = None,
    on_request: Optional[Callable[[Settings], None]] = None,
) -> PipelineResult:
    """Generate a PR title and description for the current branch.

    Args:
        workspace: The workspace root.
        request: The user's inputs.
        settings: Resolved settings (API key, model, max diff size).
        provider: LLM provider to use; built from settings when omitted.
        on_request: Called right before the LLM request is sent. Not called
            when the commit range is empty.

    Returns:
        The PipelineResult.

    Raises:
        GitError: For any git-related failure.
        LLMError: If the LLM call fails.
    """
    commits = collect_commit_range(workspace, request, settings.max_diff_size)

    result = PipelineResult(
        branch=commits.branch,
        target_branch=request.target_branch,
        truncated=commits.truncated,
    )

    if commits.is_empty:
        logger.info("No commits between %s and %s", request.target_branch, commits.branch)
        result.empty_range = True
        return result

    messages = build_prompt_messages(
        request.additional_prompt,
        request.jira_ticket,
        commits.branch,
        commits.text,
    )

    provider = provider or get_provider(settings)
    if on_request is not None:
        on_request(settings)
    llm_result = provider.complete(messages)
    logger.info(
        "Model %s used %d input / %d output tokens",
        llm_result.model,
        llm_result.input_tokens,
        llm_result.output_tokens,
    )

    result.summary = parse_summary_response(llm_result.content)
    result.model = llm_result.model
    return result
