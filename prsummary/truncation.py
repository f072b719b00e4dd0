"""Size bounding for the commit text sent to the LLM."""

from typing import NamedTuple


class TruncationResult(NamedTuple):
    """Commit text after size bounding."""

    text: str
    was_truncated: bool


def truncate_text(text: str, max_size: int) -> TruncationResult:
    """Cut text down to at most ``max_size`` characters.

    The cut is a plain character cut and may split a diff hunk in half.

    Args:
        text: The commit text.
        max_size: Maximum number of characters to keep.

    Returns:
        A TruncationResult; ``text`` is returned unchanged when it already fits.

    Raises:
        ValueError: If max_size is negative.
    """
    if max_size < 0:
        raise ValueError(f"max_size must not be negative, got {max_size}")

    if len(text) <= max_size:
        return TruncationResult(text, False)
    return TruncationResult(text[:max_size], True)
