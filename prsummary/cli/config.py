"""CLI commands for global configuration management."""

import typer

from prsummary import global_config
from prsummary.config import (
    API_KEY_ENV_VARS,
    AVAILABLE_MODELS,
    DEFAULT_MAX_DIFF_SIZE,
    DEFAULT_TARGET_BRANCH,
    LLMProvider,
)
from prsummary.cli.utils import mask_api_key

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global prsummary configuration in ~/.prsummary/",
    add_completion=False,
)

_VALID_PROVIDERS = ", ".join(p.value for p in LLMProvider)


def _parse_provider(provider: str) -> LLMProvider:
    try:
        return LLMProvider(provider.lower())
    except ValueError:
        typer.echo(f"Invalid provider: {provider}", err=True)
        typer.echo(f"Valid providers: {_VALID_PROVIDERS}")
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if not config:
        typer.echo("No configuration found; defaults are in use.")

    typer.echo("Current prsummary configuration (~/.prsummary/config.yaml):")
    typer.echo()
    typer.echo(f"  Provider: {config.get('provider', 'not set')}")
    typer.echo(f"  Model: {config.get('model', 'not set')}")
    typer.echo(f"  Max Diff Size: {config.get('max_diff_size', DEFAULT_MAX_DIFF_SIZE)}")
    typer.echo(f"  Target Branch: {config.get('target_branch', DEFAULT_TARGET_BRANCH)}")
    typer.echo()

    provider_str = config.get("provider")
    if provider_str:
        try:
            env_var = API_KEY_ENV_VARS[LLMProvider(provider_str)]
        except ValueError:
            return
        api_key = global_config.get_credential(env_var)
        if api_key:
            typer.echo(f"  API Key ({env_var}): {mask_api_key(api_key)}")
        else:
            typer.echo(f"  API Key ({env_var}): not set")


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(..., help=f"Provider name ({_VALID_PROVIDERS})"),
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = _parse_provider(provider)
    env_var = API_KEY_ENV_VARS[llm_provider]

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)
    if not api_key.strip():
        typer.echo("API key cannot be empty.", err=True)
        raise typer.Exit(1)

    try:
        global_config.save_credential(env_var, api_key.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help=f"Provider name ({_VALID_PROVIDERS})"),
    model: str = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (optional, will prompt if not provided)",
    ),
) -> None:
    """Set the active LLM provider and model."""
    llm_provider = _parse_provider(provider)
    models = AVAILABLE_MODELS[llm_provider]

    if not model:
        typer.echo(f"Available models for {llm_provider.value}:")
        for i, m in enumerate(models, 1):
            typer.echo(f"  {i}. {m}")

        model_choice = typer.prompt(f"Select a model (1-{len(models)})", type=int, default=1)
        if model_choice < 1 or model_choice > len(models):
            typer.echo("Invalid choice. Aborting.", err=True)
            raise typer.Exit(1)
        model = models[model_choice - 1]
    elif model not in models:
        typer.echo(f"Warning: {model} is not in the list of known models for {llm_provider.value}")

    try:
        global_config.set_provider_and_model(llm_provider, model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to {llm_provider.value} ({model})")


@config_app.command("set-max-diff-size")
def config_set_max_diff_size(
    size: int = typer.Argument(..., help="Maximum characters of commit text when diffs are included"),
) -> None:
    """Set the maximum diff size."""
    try:
        global_config.set_max_diff_size(size)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Max diff size set to {size} characters")


@config_app.command("set-target-branch")
def config_set_target_branch(
    branch: str = typer.Argument(..., help="Default branch to merge into (e.g. origin/main)"),
) -> None:
    """Set the default target branch."""
    try:
        global_config.set_target_branch(branch)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Default target branch set to {branch.strip()}")
