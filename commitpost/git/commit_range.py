"""Commit range collection.

Contains:
- CommitRange: The resolved endpoints and the ordered commits to summarize
- collect_commit_range: Resolve two references into an ordered commit list
"""

import logging
from dataclasses import dataclass

from commitpost.git.base import CommitSource
from commitpost.git.exceptions import GitError, RangeQueryError, ResolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitRange:
    """Resolved range endpoints and the commits to summarize, oldest first."""

    from_id: str
    to_id: str
    commit_ids: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.commit_ids

    def __len__(self) -> int:
        return len(self.commit_ids)


def _resolve(source: CommitSource, ref: str) -> str:
    try:
        return source.resolve(ref)
    except ResolutionError:
        raise
    except GitError as e:
        raise ResolutionError(ref, str(e)) from e


def collect_commit_range(
    source: CommitSource,
    from_ref: str,
    to_ref: str,
    include_from: bool = False,
) -> CommitRange:
    """Resolve two references and list the commits between them.

    The range excludes the start commit and includes the end commit. With
    ``include_from`` the start commit is put in front, even if nothing else
    falls in the range. An empty result is valid and means there is nothing
    to post about.

    Args:
        source: Where to read history from.
        from_ref: Start of the range.
        to_ref: End of the range.
        include_from: Also summarize the start commit.

    Returns:
        The resolved CommitRange.

    Raises:
        ResolutionError: If either reference cannot be resolved.
        RangeQueryError: If the commits cannot be listed.
    """
    from_id = _resolve(source, from_ref)
    to_id = _resolve(source, to_ref)

    try:
        commit_ids = list(source.list_range(from_id, to_id))
    except RangeQueryError:
        raise
    except GitError as e:
        raise RangeQueryError(from_id, to_id, str(e)) from e

    if include_from:
        commit_ids.insert(0, from_id)

    logger.debug("Found %d commit(s) between %s and %s", len(commit_ids), from_id, to_id)
    return CommitRange(from_id=from_id, to_id=to_id, commit_ids=tuple(commit_ids))
