"""OpenAI GPT provider implementation."""

import logging

import openai
from openai import OpenAI

from prsummary.llm.base import BaseLLMProvider, LLMResult
from prsummary.prompt import PromptMessage

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    name = "OpenAI"

    def complete(self, messages: list[PromptMessage]) -> LLMResult:
        """Generate a PR summary using OpenAI chat completions.

        Args:
            messages: The ordered prompt messages.

        Returns:
            An LLMResult containing the reply and token usage.

        Raises:
            ProviderCallError: If the API call fails.
        """
        # No retries: a failed call ends the invocation
        client = OpenAI(api_key=self.settings.api_key, max_retries=0)

        logger.debug("Calling OpenAI model %s with %d messages", self.model, len(messages))
        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
                messages=self.to_chat_messages(messages),
            )
        except openai.APIStatusError as e:
            raise self._call_failed(e.status_code, e.body, e.message)
        except openai.APIConnectionError as e:
            raise self._call_failed(None, None, str(e))

        raw_response = response.choices[0].message.content or ""

        usage = response.usage
        return LLMResult(
            content=raw_response,
            model=self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )
