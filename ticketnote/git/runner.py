"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
"""

import subprocess

from ticketnote.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command, stripped of surrounding whitespace.

    Raises:
        GitError: If the command fails or git is not available.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}".rstrip()) from e
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e
    except OSError as e:
        raise GitError(f"Couldn't run git: {e.strerror or e}") from e
