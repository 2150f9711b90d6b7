"""Base class for completion providers."""

from abc import ABC, abstractmethod


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    model: str

    @abstractmethod
    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Generate text for a prompt.

        Args:
            system_prompt: Instruction sent as the system message.
            user_prompt: The composed user prompt.

        Returns:
            The generated text, stripped of surrounding whitespace.

        Raises:
            LLMTransportError: If the request fails.
            EmptyCompletionError: If the response has no content.
        """
        pass
