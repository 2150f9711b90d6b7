"""Turn a range of git commits into an AI-written X post."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitpost")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
