"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when API key is not set
- AuthenticationFailedError: Provider rejected the API key (HTTP 401)
- RateLimitedError: Provider rate limit hit (HTTP 429)
- ProviderError: Any other error status returned by the provider
- TransportFailureError: The request never got a status back

Provider call failures are classified by classify_provider_failure().
"""

from enum import Enum
from typing import Any, Optional


class FailureKind(Enum):
    """Categories of a failed provider call."""

    AUTHENTICATION = "authentication"
    RATE_LIMITED = "rate-limited"
    PROVIDER = "provider"
    TRANSPORT = "transport"


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class ProviderCallError(LLMError):
    """Base class for failures of the provider call itself."""

    kind: FailureKind

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class AuthenticationFailedError(ProviderCallError):
    """Raised when the provider rejects the API key."""

    kind = FailureKind.AUTHENTICATION


class RateLimitedError(ProviderCallError):
    """Raised when the provider rate limit is exceeded."""

    kind = FailureKind.RATE_LIMITED


class ProviderError(ProviderCallError):
    """Raised for any other non-success status from the provider."""

    kind = FailureKind.PROVIDER


class TransportFailureError(ProviderCallError):
    """Raised when the request fails without an HTTP status."""

    kind = FailureKind.TRANSPORT


def classify_provider_failure(
    status: Optional[int],
    message: str,
    provider_name: str = "LLM",
) -> ProviderCallError:
    """Map a failed provider call to its error category.

    Args:
        status: HTTP status of the response, or None if there was no response.
        message: The provider's error message (or the transport error text).
        provider_name: Human-readable provider name for the message.

    Returns:
        The matching ProviderCallError instance (not raised).
    """
    if status is None:
        return TransportFailureError(f"An error occurred: {message}")
    if status == 401:
        return AuthenticationFailedError(
            f"Authentication failed. Please check your {provider_name} API key.",
            status=status,
        )
    if status == 429:
        return RateLimitedError(
            "Rate limit exceeded. Please try again later.",
            status=status,
        )
    return ProviderError(f"{provider_name} API error: {message}", status=status)


def extract_error_message(body: Any, fallback: str) -> str:
    """Read the provider's error message from a response body.

    Both OpenAI and Anthropic report ``{"error": {"message": ...}}``; the
    OpenAI SDK may also hand over the inner error object directly.

    Args:
        body: The decoded response body, if any.
        fallback: Message to use when the body has none.

    Returns:
        The error message.
    """
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("message"):
            return str(body["message"])
    return fallback
