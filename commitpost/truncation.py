"""Character-budget truncation for text sent to the model."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TruncationResult:
    """Text after truncation and whether anything was cut."""

    text: str
    truncated: bool


def truncation_marker(limit: int) -> str:
    """Return the marker appended to text cut down to ``limit`` characters."""
    return f"\n\n[Diff truncated to the first {limit} characters]"


def truncate_content(content: str, limit: Optional[int]) -> TruncationResult:
    """Bound content to a character budget.

    A missing, zero or negative limit disables truncation. Slicing counts
    characters, not bytes.

    Args:
        content: The text to bound.
        limit: Maximum number of characters to keep.

    Returns:
        A TruncationResult; ``truncated`` is True only if text was cut.
    """
    if not limit or limit <= 0:
        return TruncationResult(text=content, truncated=False)

    if len(content) <= limit:
        return TruncationResult(text=content, truncated=False)

    return TruncationResult(
        text=content[:limit] + truncation_marker(limit),
        truncated=True,
    )
