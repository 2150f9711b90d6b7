"""LLM provider module for commitpost.

This module builds the completion provider selected in the settings.
"""

from commitpost.config import PROVIDER_BASE_URLS, Settings
from commitpost.llm.base import BaseLLMProvider
from commitpost.llm.exceptions import (
    EmptyCompletionError,
    LLMError,
    LLMTransportError,
)


def get_provider(settings: Settings) -> BaseLLMProvider:
    """Get the completion provider configured by ``settings``.

    Args:
        settings: Validated run settings.

    Returns:
        A provider bound to the configured endpoint, model and sampling options.
    """
    from commitpost.llm.openai_compat import OpenAICompatibleProvider

    return OpenAICompatibleProvider(
        api_key=settings.llm_api_key,
        model=settings.model,
        temperature=settings.temperature,
        max_tokens=settings.max_output_tokens,
        base_url=PROVIDER_BASE_URLS[settings.provider],
    )


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "LLMTransportError",
    "EmptyCompletionError",
    "get_provider",
]
