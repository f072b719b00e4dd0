"""Main CLI command for generating PR summaries."""

from pathlib import Path
from typing import Optional

import typer

from prsummary import __version__
from prsummary.config import DEFAULT_OUTPUT_FILE, LLMProvider, Settings, load_settings
from prsummary.formatters import render_pr_summary
from prsummary.git import GitError
from prsummary.global_config import GlobalConfigError
from prsummary.llm import LLMError, MissingAPIKeyError
from prsummary.logging_utils import configure_logging
from prsummary.pipeline import SummaryRequest, generate_pr_summary
from prsummary.cli.utils import ask_flag, ask_text, write_summary_file


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"prsummary {__version__}")
        raise typer.Exit()


def _announce_request(settings: Settings) -> None:
    typer.echo(f"Generating PR summary using {settings.provider.value}...", err=True)


def main_command(
    ctx: typer.Context,
    target: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="Target branch you are merging into (default: origin/dev or configured)",
    ),
    prompt: Optional[str] = typer.Option(
        None,
        "--prompt",
        "-p",
        help="Additional instructions appended to the LLM prompt",
    ),
    ticket: Optional[str] = typer.Option(
        None,
        "--ticket",
        "-j",
        help="JIRA ticket to reference in the PR description",
    ),
    include_diffs: Optional[bool] = typer.Option(
        None,
        "--diffs/--no-diffs",
        help="Include commit diffs in the prompt",
    ),
    max_diff_size: Optional[int] = typer.Option(
        None,
        "--max-diff-size",
        min=1,
        help="Maximum characters of commit text sent when diffs are included",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        help="Override LLM provider (openai, anthropic)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Override LLM model",
    ),
    repo: Optional[Path] = typer.Option(
        None,
        "--repo",
        help="Workspace root of the git repository (default: current directory)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Save the PR summary to this Markdown file",
    ),
    no_input: bool = typer.Option(
        False,
        "--no-input",
        help="Never prompt; use defaults for anything not given",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log verbosity (-v info, -vv debug)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate an AI-written pull request title and description from branch commits."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    configure_logging(verbose)

    # Validate provider override if provided
    override_provider = None
    if provider:
        try:
            override_provider = LLMProvider(provider.lower())
        except ValueError:
            typer.echo(f"Invalid provider: {provider}", err=True)
            typer.echo("Valid providers: " + ", ".join(p.value for p in LLMProvider))
            raise typer.Exit(1)

    try:
        # Step 1: Settings (fails early when the API key is missing)
        settings = load_settings(
            provider=override_provider,
            model=model,
            max_diff_size=max_diff_size,
        )

        # Step 2: Collect inputs
        request = SummaryRequest(
            additional_prompt=ask_text(prompt, "Additional prompt (optional)", no_input),
            jira_ticket=ask_text(ticket, "JIRA ticket (optional)", no_input),
            include_diffs=ask_flag(include_diffs, "Include diffs?", no_input),
            target_branch=ask_text(
                target,
                "Enter the target branch you are merging into",
                no_input,
                default=settings.target_branch,
            ),
        )
        if not request.target_branch:
            typer.echo("Target branch is required.", err=True)
            raise typer.Exit(1)

        # Step 3: Run the pipeline
        workspace = repo if repo is not None else Path.cwd()
        result = generate_pr_summary(
            workspace, request, settings, on_request=_announce_request
        )

        if result.truncated:
            typer.echo(
                "Warning: Diff is too large and has been truncated to fit the size limit.",
                err=True,
            )

        if result.empty_range:
            typer.echo(
                f"Warning: No new commits found between {request.target_branch} "
                f"and the current branch.",
                err=True,
            )
            raise typer.Exit(0)

        if result.empty_reply:
            typer.echo("Warning: The model returned an empty reply. Nothing to show.", err=True)
            raise typer.Exit(0)

        # Step 4: Display
        document = render_pr_summary(result.summary)
        typer.echo("")
        typer.echo("=" * 60)
        typer.echo(document)
        typer.echo("=" * 60)

        # Step 5: Optionally save
        save_path = output
        if save_path is None and not no_input:
            if typer.confirm("Save PR summary to a file?", default=False):
                save_path = Path(typer.prompt("File path", default=DEFAULT_OUTPUT_FILE))

        if save_path is not None:
            written = write_summary_file(save_path, document)
            typer.echo(f"PR summary saved successfully to {written}", err=True)

    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except (GitError, LLMError) as e:
        typer.echo(f"Failed to generate PR summary: {e}", err=True)
        raise typer.Exit(1)
    except (GlobalConfigError, ValueError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
