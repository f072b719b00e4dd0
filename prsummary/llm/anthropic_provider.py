"""Anthropic Claude provider implementation."""

import logging

import anthropic
from anthropic import Anthropic

from prsummary.llm.base import BaseLLMProvider, LLMResult
from prsummary.prompt import PromptMessage

logger = logging.getLogger(__name__)


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    name = "Anthropic"

    def complete(self, messages: list[PromptMessage]) -> LLMResult:
        """Generate a PR summary using Anthropic Claude.

        Consecutive user messages are merged into one turn by the API, so the
        prompt segments are sent as-is.

        Args:
            messages: The ordered prompt messages.

        Returns:
            An LLMResult containing the reply and token usage.

        Raises:
            ProviderCallError: If the API call fails.
        """
        client = Anthropic(api_key=self.settings.api_key, max_retries=0)

        logger.debug("Calling Anthropic model %s with %d messages", self.model, len(messages))
        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
                messages=self.to_chat_messages(messages),
            )
        except anthropic.APIStatusError as e:
            raise self._call_failed(e.status_code, e.body, e.message)
        except anthropic.APIConnectionError as e:
            raise self._call_failed(None, None, str(e))

        # Concatenate the text blocks of the reply
        raw_response = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )

        return LLMResult(
            content=raw_response,
            model=self.model,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
        )
