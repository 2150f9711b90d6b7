"""Per-commit summary blocks for the model prompt.

Contains:
- CommitRecord: Metadata and diff of one commit
- read_commit_record: Load a CommitRecord through a CommitSource
- format_commit_summary: Render a CommitRecord as a text block
- build_commit_summary: Read and render one commit
- build_commit_summaries: Read and render an ordered list of commits
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from commitpost.git.base import CommitSource
from commitpost.git.exceptions import CommitReadError, GitError
from commitpost.truncation import truncate_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitRecord:
    """Metadata and diff of one commit."""

    id: str
    title: str
    body: str
    diff: str
    paths: tuple[str, ...] = field(default_factory=tuple)


def _read(operation: str, commit_id: str, reader: Callable[..., str], *args) -> str:
    try:
        return reader(commit_id, *args)
    except CommitReadError:
        raise
    except GitError as e:
        raise CommitReadError(operation, commit_id, str(e)) from e


def read_commit_record(
    source: CommitSource,
    commit_id: str,
    paths: Sequence[str] = (),
) -> CommitRecord:
    """Read title, body and diff of a commit.

    Raises:
        CommitReadError: If any of the reads fails.
    """
    paths = tuple(paths)
    return CommitRecord(
        id=commit_id,
        title=_read("title", commit_id, source.read_title).strip(),
        body=_read("body", commit_id, source.read_body).strip(),
        diff=_read("diff", commit_id, source.read_diff, paths),
        paths=paths,
    )


def format_commit_summary(record: CommitRecord, max_diff_chars: int) -> str:
    """Render a commit as a summary block.

    The block always starts with the commit line, then the title. The body
    and diff preview sections are left out when empty.

    Args:
        record: The commit to render.
        max_diff_chars: Character budget for the diff. 0 means unlimited.

    Returns:
        The summary text, sections separated by a blank line.
    """
    diff = truncate_content(record.diff, max_diff_chars)

    sections = [f"Commit: {record.id}", f"Title: {record.title}"]

    if record.body.strip():
        sections.append(f"Body:\n{record.body}")

    if diff.text.strip():
        sections.append(f"Diff preview:\n{diff.text}")

    return "\n\n".join(sections)


def build_commit_summary(
    source: CommitSource,
    commit_id: str,
    max_diff_chars: int,
    paths: Sequence[str] = (),
) -> str:
    """Read one commit and render its summary block.

    Raises:
        CommitReadError: If the commit cannot be read.
    """
    record = read_commit_record(source, commit_id, paths)
    return format_commit_summary(record, max_diff_chars)


def build_commit_summaries(
    source: CommitSource,
    commit_ids: Sequence[str],
    max_diff_chars: int,
    paths: Sequence[str] = (),
) -> list[str]:
    """Render summaries for commits one at a time, keeping their order."""
    summaries = []
    total = len(commit_ids)
    for index, commit_id in enumerate(commit_ids, start=1):
        logger.info("Collecting commit %d/%d: %s", index, total, commit_id)
        summaries.append(build_commit_summary(source, commit_id, max_diff_chars, paths))
    return summaries
