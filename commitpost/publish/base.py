"""Base class for post publishers."""

from abc import ABC, abstractmethod
from typing import Optional


class BasePublisher(ABC):
    """Abstract base class for publishing targets."""

    @abstractmethod
    def publish(self, text: str, community_id: Optional[str] = None) -> str:
        """Publish text and return the id of the created post.

        Args:
            text: The finished post.
            community_id: Community to post into. None targets the main timeline.

        Returns:
            The published post id, or an empty string if the platform returned none.

        Raises:
            PublishError: If publishing fails.
        """
        pass

    def post_url(self, post_id: str) -> str:
        """Public URL of a published post, or an empty string without an id."""
        return ""
