"""Prompt composition for post generation.

Contains:
- DEFAULT_SYSTEM_PROMPT: The persona sent as the system message
- PromptContext: Everything the composer needs, validated
- normalize_hashtags: Turn free-form hashtag input into `#tag` tokens
- compose_prompt: Build the user prompt from a PromptContext
"""

import re
from typing import Iterable, Optional, Union

from pydantic import BaseModel, field_validator

MAX_POST_CHARS = 280

DEFAULT_SYSTEM_PROMPT = (
    "You are a social media copywriter who crafts concise, engaging posts for X "
    f"(formerly Twitter). Stay under {MAX_POST_CHARS} characters in a single post "
    "and highlight what matters to users."
)

# Marker line between commit blocks; blank lines alone already separate sections
# inside a block.
COMMIT_SEPARATOR = "\n\n---\n\n"

_HASHTAG_SPLIT_RE = re.compile(r"[\s,]+")


def normalize_hashtags(raw: Union[str, Iterable[str], None]) -> list[str]:
    """Split hashtag input into tokens carrying exactly one leading '#'.

    Tokens are separated by commas and/or whitespace. Order is kept and
    duplicates are not removed.

    Example:
        >>> normalize_hashtags("alpha, #beta gamma")
        ['#alpha', '#beta', '#gamma']
    """
    if not raw:
        return []

    chunks = [raw] if isinstance(raw, str) else list(raw)

    tokens = []
    for chunk in chunks:
        for value in _HASHTAG_SPLIT_RE.split(str(chunk)):
            value = value.strip()
            if not value:
                continue
            tokens.append(value if value.startswith("#") else f"#{value}")
    return tokens


class PromptContext(BaseModel):
    """Inputs of the prompt composer.

    Attributes:
        from_id: Resolved start of the commit range.
        to_id: Resolved end of the commit range.
        commit_summaries: One summary block per commit, oldest first.
        community: Target community label. None posts to the main timeline.
        tone: Requested tone of voice.
        hashtags: Hashtag tokens, normalized to start with '#'.
        call_to_action: Literal closing line the post should end with.
        extra_instructions: Free text appended after the commit context.
        prompt_override: Full prompt that replaces composition entirely.
    """

    from_id: str
    to_id: str
    commit_summaries: list[str] = []
    community: Optional[str] = None
    tone: Optional[str] = None
    hashtags: list[str] = []
    call_to_action: Optional[str] = None
    extra_instructions: Optional[str] = None
    prompt_override: Optional[str] = None

    @field_validator("hashtags", mode="before")
    @classmethod
    def normalize_hashtag_tokens(cls, v):
        """Accept a raw string or a list and normalize every token."""
        return normalize_hashtags(v)


def compose_prompt(context: PromptContext) -> str:
    """Build the user prompt sent to the model.

    A non-empty ``prompt_override`` is returned verbatim. Otherwise the
    prompt is a fixed sequence of instruction paragraphs; optional ones are
    skipped when their field is empty, without changing the order of the rest.

    Args:
        context: The validated prompt inputs.

    Returns:
        The prompt text.
    """
    if context.prompt_override:
        return context.prompt_override

    parts = [
        "You are a concise social media writer for X. "
        f"Compose a single post (no thread) under {MAX_POST_CHARS} characters.",
        f"Summarize {len(context.commit_summaries)} commit(s) between "
        f"{context.from_id} and {context.to_id} with a focus on what users will notice.",
    ]

    if context.community:
        parts.append(f'This message will share with the "{context.community}" community.')
    else:
        parts.append("This message will post to the main timeline.")

    if context.tone:
        parts.append(f"Adopt a {context.tone} tone.")

    if context.hashtags:
        parts.append(f"Incorporate these hashtags: {' '.join(context.hashtags)}")

    if context.call_to_action:
        parts.append(f"Finish with: {context.call_to_action}")

    parts.append("Commit context:")
    parts.append(COMMIT_SEPARATOR.join(context.commit_summaries))

    if context.extra_instructions:
        parts.append(f"Additional instructions: {context.extra_instructions}")

    parts.append("Stay actionable, friendly, and avoid overly technical jargon.")

    return "\n\n".join(parts)
