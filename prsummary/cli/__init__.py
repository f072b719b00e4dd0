"""CLI entry point for prsummary.

This module provides the main CLI application that combines the default
summary command and the config subcommands into a single interface.
"""

import typer

from prsummary.cli.config import config_app
from prsummary.cli.main import main_command

# Main application
app = typer.Typer(
    name="prsummary",
    help="prsummary: AI-generated pull request titles and descriptions",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
