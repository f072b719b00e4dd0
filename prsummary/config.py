"""Configuration for prsummary.

Defaults live here; user overrides are read from ~/.prsummary/config.yaml
(see global_config.py). load_settings() combines both into an explicit
Settings value that is passed to the pipeline and the LLM providers.
"""

import os
from enum import Enum
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator


class LLMProvider(Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.prsummary/config.yaml doesn't set them

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_MAX_TOKENS = 1500
DEFAULT_TEMPERATURE = 0.3

# Maximum characters of commit text (with diffs) sent to the LLM
DEFAULT_MAX_DIFF_SIZE = 10000

DEFAULT_TARGET_BRANCH = "origin/dev"

DEFAULT_OUTPUT_FILE = "PR_summary.md"


# ============================================================
# AVAILABLE MODELS PER PROVIDER
# ============================================================

AVAILABLE_MODELS = {
    LLMProvider.OPENAI: [
        "gpt-3.5-turbo",
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4o",
        "gpt-4o-mini",
    ],
    LLMProvider.ANTHROPIC: [
        "claude-sonnet-4-20250514",
        "claude-3-5-sonnet-latest",
        "claude-3-5-haiku-latest",
    ],
}

DEFAULT_MODELS = {
    LLMProvider.OPENAI: DEFAULT_MODEL,
    LLMProvider.ANTHROPIC: "claude-3-5-haiku-latest",
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
}


class Settings(BaseModel):
    """Resolved settings for one invocation."""

    provider: LLMProvider = DEFAULT_PROVIDER
    model: str = DEFAULT_MODEL
    api_key: str
    max_diff_size: int = Field(default=DEFAULT_MAX_DIFF_SIZE, gt=0)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    temperature: float = DEFAULT_TEMPERATURE
    target_branch: str = DEFAULT_TARGET_BRANCH

    @field_validator("api_key")
    @classmethod
    def api_key_must_not_be_empty(cls, v: str) -> str:
        """Ensure the API key is set."""
        if not v or not v.strip():
            raise ValueError("API key cannot be empty")
        return v.strip()


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[provider]


def resolve_api_key(provider: LLMProvider) -> str:
    """Find the API key for a provider.

    Checks in order:
    1. Environment variable (a repo-level .env file is loaded first)
    2. ~/.prsummary/credentials file

    Raises:
        MissingAPIKeyError: If the API key is not found.
    """
    # Imported here to avoid a circular import with prsummary.llm
    from prsummary import global_config
    from prsummary.llm.exceptions import MissingAPIKeyError

    load_dotenv()
    env_var = get_api_key_env_var(provider)

    api_key = os.getenv(env_var, "").strip()
    if api_key:
        return api_key

    api_key = (global_config.get_credential(env_var) or "").strip()
    if api_key:
        return api_key

    raise MissingAPIKeyError(
        f"{provider.value} API key not found. Set it using:\n"
        f"  1. Environment variable: export {env_var}=your_key_here\n"
        f"  2. Run: prsummary config set-key {provider.value}\n"
        f"  3. Manually add to ~/.prsummary/credentials"
    )


def _first_set(*values: Any) -> Any:
    """Return the first value that is not None (0 counts as set)."""
    return next((v for v in values if v is not None), None)


def load_settings(
    provider: Optional[LLMProvider] = None,
    model: Optional[str] = None,
    max_diff_size: Optional[int] = None,
) -> Settings:
    """Build the Settings for an invocation.

    Explicit arguments win over ~/.prsummary/config.yaml, which wins over
    the defaults in this module.

    Args:
        provider: Provider override.
        model: Model override.
        max_diff_size: Maximum diff size override.

    Returns:
        The validated Settings.

    Raises:
        MissingAPIKeyError: If no API key is configured for the provider.
        ValueError: If a configured value is invalid.
    """
    from prsummary import global_config

    config = global_config.load_global_config()

    if provider is None:
        provider = global_config.get_active_provider() or DEFAULT_PROVIDER
        # A configured model only applies to the configured provider
        model = model or config.get("model")
    model = model or DEFAULT_MODELS[provider]

    values = {
        "provider": provider,
        "model": model,
        "api_key": resolve_api_key(provider),
        "max_diff_size": _first_set(max_diff_size, config.get("max_diff_size"), DEFAULT_MAX_DIFF_SIZE),
        "max_tokens": _first_set(config.get("max_tokens"), DEFAULT_MAX_TOKENS),
        "temperature": _first_set(config.get("temperature"), DEFAULT_TEMPERATURE),
        "target_branch": config.get("target_branch") or DEFAULT_TARGET_BRANCH,
    }

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")
