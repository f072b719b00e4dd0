"""Base classes and shared utilities for LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from prsummary.config import Settings
from prsummary.llm.exceptions import (
    LLMError,
    MissingAPIKeyError,
    ProviderCallError,
    classify_provider_failure,
    extract_error_message,
)
from prsummary.prompt import PromptMessage


@dataclass
class LLMResult:
    """Result from an LLM completion call, including token usage."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    #: Human-readable provider name used in error messages
    name: str = "LLM"

    def __init__(self, settings: Settings):
        """Initialize the provider.

        Args:
            settings: Resolved settings carrying the API key and model options.

        Raises:
            MissingAPIKeyError: If the settings carry no API key.
        """
        if not settings.api_key:
            raise MissingAPIKeyError(f"{self.name} API key is not set.")
        self.settings = settings
        self.model = settings.model

    @abstractmethod
    def complete(self, messages: list[PromptMessage]) -> LLMResult:
        """Send the messages to the model and return its reply.

        Args:
            messages: The ordered prompt messages.

        Returns:
            An LLMResult with the reply text and token usage.

        Raises:
            AuthenticationFailedError: If the API key is rejected.
            RateLimitedError: If the provider rate limit is hit.
            ProviderError: For any other error status.
            TransportFailureError: If no response was received.
        """
        pass

    def _call_failed(self, status: int | None, body: object, fallback: str) -> ProviderCallError:
        """Classify a failed call into the matching ProviderCallError."""
        message = extract_error_message(body, fallback)
        return classify_provider_failure(status, message, provider_name=self.name)

    @staticmethod
    def to_chat_messages(messages: list[PromptMessage]) -> list[dict[str, str]]:
        """Convert prompt messages into the chat payload format."""
        return [{"role": m.role, "content": m.content} for m in messages]


__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "LLMResult",
    "MissingAPIKeyError",
]
