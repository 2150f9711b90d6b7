"""Git-related exception classes.

Contains all exception classes for git operations:
- GitError: Base exception for git-related errors
- ResolutionError: A reference could not be resolved to a commit id
- RangeQueryError: Listing the commits between two ids failed
- CommitReadError: Reading a commit's title, body or diff failed
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class ResolutionError(GitError):
    """Raised when a commit reference cannot be resolved."""

    def __init__(self, ref: str, detail: str):
        self.ref = ref
        self.detail = detail
        super().__init__(f'Failed to resolve commit reference "{ref}": {detail}')


class RangeQueryError(GitError):
    """Raised when the commits between two ids cannot be listed."""

    def __init__(self, from_id: str, to_id: str, detail: str):
        self.from_id = from_id
        self.to_id = to_id
        self.detail = detail
        super().__init__(f"Failed to list commits between {from_id} and {to_id}: {detail}")


class CommitReadError(GitError):
    """Raised when a commit's title, body or diff cannot be read."""

    def __init__(self, operation: str, commit_id: str, detail: str):
        self.operation = operation
        self.commit_id = commit_id
        self.detail = detail
        super().__init__(f"Failed to read commit {operation} for {commit_id}: {detail}")
