"""LLM provider module for prsummary.

This module provides a unified interface to the supported LLM providers.
The provider and model come from the Settings passed in by the caller.
"""

from prsummary.config import LLMProvider, Settings
from prsummary.llm.base import BaseLLMProvider, LLMResult
from prsummary.llm.exceptions import (
    AuthenticationFailedError,
    FailureKind,
    LLMError,
    MissingAPIKeyError,
    ProviderCallError,
    ProviderError,
    RateLimitedError,
    TransportFailureError,
    classify_provider_failure,
)
from prsummary.llm.parsing import parse_summary_response


def get_provider(settings: Settings) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        settings: Resolved settings naming the provider and model.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    provider = settings.provider

    if provider == LLMProvider.OPENAI:
        from prsummary.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(settings)

    elif provider == LLMProvider.ANTHROPIC:
        from prsummary.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(settings)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMResult",
    "LLMError",
    "MissingAPIKeyError",
    "ProviderCallError",
    "AuthenticationFailedError",
    "RateLimitedError",
    "ProviderError",
    "TransportFailureError",
    "FailureKind",
    "classify_provider_failure",
    "parse_summary_response",
    "get_provider",
]
