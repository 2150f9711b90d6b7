"""LLM-related exception classes.

Contains all exception classes for completion calls:
- LLMError: Base exception for LLM-related errors
- LLMTransportError: The endpoint returned an error status or could not be reached
- EmptyCompletionError: The response carried no usable text
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class LLMTransportError(LLMError):
    """Raised when the completion endpoint fails at the transport level."""

    pass


class EmptyCompletionError(LLMError):
    """Raised when the completion response has no text content."""

    pass
