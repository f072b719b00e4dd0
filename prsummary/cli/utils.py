"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import Optional

import typer


def mask_api_key(api_key: str) -> str:
    """Mask an API key for display."""
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


def ask_text(value: Optional[str], prompt: str, no_input: bool, default: str = "") -> str:
    """Return an option value, prompting for it when it was not given.

    Args:
        value: The value passed on the command line, or None.
        prompt: Prompt text shown to the user.
        no_input: Never prompt; fall back to the default instead.
        default: Value used when nothing is entered.

    Returns:
        The stripped value.
    """
    if value is None:
        if no_input:
            value = default
        else:
            value = typer.prompt(prompt, default=default, show_default=bool(default))
    return value.strip()


def ask_flag(value: Optional[bool], prompt: str, no_input: bool, default: bool = False) -> bool:
    """Return a flag value, asking a yes/no question when it was not given."""
    if value is None:
        if no_input:
            return default
        return typer.confirm(prompt, default=default)
    return value


def write_summary_file(path: Path, document: str) -> Path:
    """Write the rendered PR summary to a Markdown file.

    Args:
        path: Destination file.
        document: The rendered Markdown document.

    Returns:
        The path written.
    """
    path = path.expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document, encoding="utf-8")
    return path
