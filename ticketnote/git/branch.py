"""Current branch lookup."""

from ticketnote.git.runner import _run_git_command
from ticketnote.git.exceptions import GitError


def get_branch() -> str:
    """Get the short name of the current branch.

    A detached HEAD resolves to the literal ``HEAD``; whether that yields a
    ticket is up to the pattern.

    Returns:
        The current branch name.

    Raises:
        GitError: If not in a git repository, or git returns nothing.
    """
    branch = _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"])
    if not branch:
        raise GitError("Git did not report a current branch.")
    return branch
