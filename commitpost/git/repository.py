"""CommitSource backed by the git command line."""

from pathlib import Path
from typing import Optional, Sequence

from commitpost.git.base import CommitSource
from commitpost.git.exceptions import (
    CommitReadError,
    GitError,
    RangeQueryError,
    ResolutionError,
)
from commitpost.git.runner import _run_git_command


class GitCommitSource(CommitSource):
    """Query commits of a local git checkout."""

    def __init__(self, repo_path: Optional[Path] = None):
        """Initialize the source.

        Args:
            repo_path: Repository directory. Defaults to the current directory.
        """
        self.repo_path = repo_path

    def _git(self, args: list[str], strip: bool = True) -> str:
        return _run_git_command(args, cwd=self.repo_path, strip=strip)

    def resolve(self, ref: str) -> str:
        try:
            return self._git(["rev-parse", "--verify", "--end-of-options", f"{ref}^{{commit}}"])
        except GitError as e:
            raise ResolutionError(ref, str(e)) from e

    def list_range(self, from_id: str, to_id: str) -> list[str]:
        try:
            output = self._git(["rev-list", "--reverse", f"{from_id}..{to_id}"])
        except GitError as e:
            raise RangeQueryError(from_id, to_id, str(e)) from e
        if not output:
            return []
        return [line for line in output.split("\n") if line]

    def read_title(self, commit_id: str) -> str:
        try:
            return self._git(["show", "-s", "--format=%s", commit_id])
        except GitError as e:
            raise CommitReadError("title", commit_id, str(e)) from e

    def read_body(self, commit_id: str) -> str:
        try:
            return self._git(["show", "-s", "--format=%b", commit_id])
        except GitError as e:
            raise CommitReadError("body", commit_id, str(e)) from e

    def read_diff(self, commit_id: str, paths: Sequence[str] = ()) -> str:
        args = ["show", commit_id, "--format="]
        if paths:
            args += ["--"] + list(paths)
        try:
            # Keep the diff as-is; the truncation budget counts every character
            return self._git(args, strip=False)
        except GitError as e:
            raise CommitReadError("diff", commit_id, str(e)) from e
