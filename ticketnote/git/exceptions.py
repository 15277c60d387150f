"""Git-related exception classes."""


class GitError(Exception):
    """Raised when the branch cannot be resolved through git."""

    pass
