"""Prompt construction for the PR summary request.

Contains:
- PromptMessage: A single role-tagged message sent to the LLM
- INSTRUCTION_PROMPT: The base instruction given to every provider
- build_prompt_messages: Assemble the ordered message list
"""

from pydantic import BaseModel


class PromptMessage(BaseModel):
    """A role-tagged chat message."""

    role: str = "user"
    content: str


INSTRUCTION_PROMPT = (
    "Generate a PR title and description (format the description in markdown) "
    "based on the following branch name and commit messages with diffs. "
    "Include JIRA ticket information if provided. **Be concise.**"
)


def build_prompt_messages(
    additional_prompt: str,
    jira_ticket: str,
    branch_name: str,
    range_text: str,
) -> list[PromptMessage]:
    """Build the messages for the PR summary request.

    The order is always: instruction, branch name, commit text, and the
    JIRA ticket when one is given. The commit text is included verbatim,
    even when empty.

    Args:
        additional_prompt: Extra instructions appended to the base instruction.
        jira_ticket: Ticket identifier, or an empty string for none.
        branch_name: The current branch.
        range_text: Commit messages (with optional diffs).

    Returns:
        The ordered list of PromptMessage.
    """
    instruction = INSTRUCTION_PROMPT
    if additional_prompt:
        instruction = f"{instruction} {additional_prompt}"

    messages = [
        PromptMessage(content=instruction),
        PromptMessage(content=f"Branch Name: {branch_name}"),
        PromptMessage(content=f"Commit Messages with Diffs: {range_text}"),
    ]

    if jira_ticket:
        messages.append(PromptMessage(content=f"JIRA Ticket: {jira_ticket}"))

    return messages
