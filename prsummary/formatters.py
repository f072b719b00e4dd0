"""PR summary model and Markdown rendering."""

from pydantic import BaseModel, field_validator


class PrSummary(BaseModel):
    """Pydantic model for a parsed PR summary.

    Attributes:
        title: Single-line PR title without heading markers.
        description: Markdown description of the PR.
    """

    title: str = ""
    description: str = ""

    @field_validator("title")
    @classmethod
    def title_must_be_single_line(cls, v: str) -> str:
        """Ensure the title is a single stripped line."""
        if "\n" in v.strip():
            raise ValueError("Title must be a single line")
        return v.strip()

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        """Strip surrounding whitespace from the description."""
        return v.strip()

    @property
    def is_empty(self) -> bool:
        """True when the model returned nothing usable."""
        return not self.title and not self.description


def render_pr_summary(summary: PrSummary) -> str:
    """Render a PrSummary as a Markdown document.

    Args:
        summary: The parsed PR summary.

    Returns:
        The Markdown document.

    Example output:
        # Add user authentication

        ## Changes
        - Implement login and logout endpoints
    """
    return f"# {summary.title}\n\n{summary.description}"
