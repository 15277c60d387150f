"""Commit message file access.

Contains functions for:
- Reading the commit message file as UTF-8
- Atomically replacing the file contents
- Running an update over the file
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Callable

from ticketnote.exceptions import MessageFileError


def read_message_file(path: Path) -> str:
    """Read a commit message file.

    Args:
        path: Path to the commit message file.

    Returns:
        The decoded message.

    Raises:
        MessageFileError: If the file can't be read or isn't valid UTF-8.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise MessageFileError(f"Couldn't read commit message in {path}: {e.strerror or e}") from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MessageFileError(f"Couldn't parse commit message in {path}: not valid UTF-8") from e


def write_message_file(path: Path, content: str) -> None:
    """Replace a commit message file atomically.

    The content goes to a temp file in the same directory which is then
    renamed over the target, so an interrupted write leaves the old file.

    Args:
        path: Path to the commit message file.
        content: Message to write.

    Raises:
        MessageFileError: If the file can't be written.
    """
    try:
        fd, temp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        )
    except OSError as e:
        raise MessageFileError(f"Couldn't write commit message to {path}: {e.strerror or e}") from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        try:
            os.chmod(temp_path, stat.S_IMODE(path.stat().st_mode))
        except FileNotFoundError:
            pass
        os.replace(temp_path, path)
    except OSError as e:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise MessageFileError(f"Couldn't write commit message to {path}: {e.strerror or e}") from e


def update_message_file(path: Path, updater: Callable[[str], str]) -> bool:
    """Read, transform and write back a commit message file.

    Args:
        path: Path to the commit message file.
        updater: Function mapping the old message to the new one.

    Returns:
        True if the file was rewritten, False if the message was unchanged.
    """
    message = read_message_file(path)
    updated = updater(message)
    if updated == message:
        return False
    write_message_file(path, updated)
    return True
