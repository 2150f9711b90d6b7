"""Git history access for commitpost.

This package provides:
- exceptions: GitError, ResolutionError, RangeQueryError, CommitReadError
- runner: _run_git_command
- base: CommitSource
- repository: GitCommitSource
- commit_range: CommitRange, collect_commit_range
- summary: CommitRecord, build_commit_summary, build_commit_summaries
"""

# Exceptions
from commitpost.git.exceptions import (
    CommitReadError,
    GitError,
    RangeQueryError,
    ResolutionError,
)

# Runner utilities
from commitpost.git.runner import _run_git_command

# Commit sources
from commitpost.git.base import CommitSource
from commitpost.git.repository import GitCommitSource

# Range collection
from commitpost.git.commit_range import CommitRange, collect_commit_range

# Summaries
from commitpost.git.summary import (
    CommitRecord,
    build_commit_summaries,
    build_commit_summary,
    format_commit_summary,
    read_commit_record,
)


__all__ = [
    # Exceptions
    "GitError",
    "ResolutionError",
    "RangeQueryError",
    "CommitReadError",
    # Runner
    "_run_git_command",
    # Sources
    "CommitSource",
    "GitCommitSource",
    # Range
    "CommitRange",
    "collect_commit_range",
    # Summary
    "CommitRecord",
    "read_commit_record",
    "format_commit_summary",
    "build_commit_summary",
    "build_commit_summaries",
]
