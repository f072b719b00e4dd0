"""Parsing of the LLM reply into a PR summary.

Contains:
- parse_summary_response: Split a free-text reply into title and description
"""

import re

from prsummary.formatters import PrSummary

# One or more leading '#' followed by optional whitespace
_HEADING_MARKER = re.compile(r"^#+\s*")

# Split after each newline, keeping it on the preceding line
_LINE_BREAK = re.compile(r"(?<=\n)")


def parse_summary_response(raw_response: str) -> PrSummary:
    """Parse the LLM reply into a PrSummary.

    The first line is the title (with any Markdown heading marker removed);
    everything after it is the description.

    Args:
        raw_response: The raw text response from the LLM.

    Returns:
        The parsed PrSummary. An empty reply gives an empty title and
        description.
    """
    text = raw_response.strip()
    if not text:
        return PrSummary()

    # Only "\n" ends a line; form feeds and other separators stay in the text
    lines = _LINE_BREAK.split(text)

    title = _HEADING_MARKER.sub("", lines[0].strip()).strip()
    description = "".join(lines[1:]).strip()

    return PrSummary(title=title, description=description)
