"""Git collaborators for ticketnote.

This package wraps the few git calls the tool needs:
- exceptions: GitError
- runner: _run_git_command
- branch: get_branch
"""

from ticketnote.git.exceptions import GitError
from ticketnote.git.runner import _run_git_command
from ticketnote.git.branch import get_branch


__all__ = [
    "GitError",
    "_run_git_command",
    "get_branch",
]
