"""Abstract version-control query surface used by the pipeline."""

from abc import ABC, abstractmethod
from typing import Sequence


class CommitSource(ABC):
    """Read-only access to commit history."""

    @abstractmethod
    def resolve(self, ref: str) -> str:
        """Resolve a reference to a canonical commit id.

        Raises:
            ResolutionError: If the reference does not name a commit.
        """
        pass

    @abstractmethod
    def list_range(self, from_id: str, to_id: str) -> list[str]:
        """List the commits reachable from ``to_id`` but not from ``from_id``.

        Returns:
            Commit ids ordered oldest first. ``from_id`` is excluded and
            ``to_id`` is included.

        Raises:
            RangeQueryError: If the range cannot be listed.
        """
        pass

    @abstractmethod
    def read_title(self, commit_id: str) -> str:
        """Return the subject line of a commit."""
        pass

    @abstractmethod
    def read_body(self, commit_id: str) -> str:
        """Return the message body of a commit (may be empty)."""
        pass

    @abstractmethod
    def read_diff(self, commit_id: str, paths: Sequence[str] = ()) -> str:
        """Return the diff a commit introduces, limited to ``paths`` if given."""
        pass
