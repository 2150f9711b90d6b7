"""Provider for OpenAI-compatible chat completion endpoints.

GitHub Models, OpenAI and OpenRouter all accept the OpenAI request format,
so a single client implementation serves them with different base URLs.
"""

import logging
from typing import Optional

from openai import APIConnectionError, APIStatusError, OpenAI

from commitpost.config import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
)
from commitpost.llm.base import BaseLLMProvider
from commitpost.llm.exceptions import EmptyCompletionError, LLMTransportError

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(BaseLLMProvider):
    """Chat completion provider using the openai SDK."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ):
        """Initialize the provider.

        Args:
            api_key: Credential for the endpoint.
            model: Model identifier, e.g. openai/gpt-4o-mini.
            temperature: Sampling temperature.
            max_tokens: Upper bound on generated tokens.
            base_url: Endpoint root. None uses the OpenAI default.
            client: Preconfigured client, mainly for tests.
        """
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.base_url = base_url
        # No retries: a failed request ends the run
        self.client = client or OpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Generate post text with a single chat completion request."""
        logger.info('Requesting post copy from model "%s"...', self.model)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except APIStatusError as e:
            raise LLMTransportError(
                f"Model request failed with status {e.status_code}: {e.response.text}"
            ) from e
        except APIConnectionError as e:
            raise LLMTransportError(f'Model request to "{self.model}" failed: {e}') from e

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices and choices[0].message else None

        if not content or not content.strip():
            raise EmptyCompletionError(
                f'Model response from "{self.model}" did not include any content.'
            )

        usage = getattr(response, "usage", None)
        if usage:
            logger.debug(
                "Token usage: %s prompt, %s completion",
                usage.prompt_tokens,
                usage.completion_tokens,
            )

        return content.strip()
