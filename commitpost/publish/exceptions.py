"""Publishing exception classes."""


class PublishError(Exception):
    """Raised when the platform rejects a post or cannot be reached."""

    pass
