"""Annotate commit messages with the ticket named in the current branch."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ticketnote")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
