"""Ticket pattern parsing and extraction.

Contains functions for:
- Compiling the user-supplied ticket regexp
- Extracting the ticket from a branch name
"""

import re
from typing import Optional

from ticketnote.exceptions import ConfigurationError


def compile_pattern(raw: str) -> re.Pattern:
    """Compile a ticket regexp.

    Args:
        raw: The regular expression as given on the command line.

    Returns:
        The compiled pattern.

    Raises:
        ConfigurationError: If the regexp is invalid or doesn't have exactly
            one capture group.
    """
    try:
        pattern = re.compile(raw)
    except re.error as e:
        raise ConfigurationError(f"Invalid regexp '{raw}': {e}") from e
    if pattern.groups != 1:
        raise ConfigurationError("Regexp must have one capture group for matching the ticket name")
    return pattern


def extract_ticket(pattern: re.Pattern, text: str) -> Optional[str]:
    """Extract the ticket from text.

    Args:
        pattern: Compiled pattern with a single capture group.
        text: Text to search, usually a branch name.

    Returns:
        The captured ticket, or None if the pattern doesn't match or the
        group took no part in the match.
    """
    match = pattern.search(text)
    # Patterns reaching here normally come from compile_pattern; one built
    # elsewhere without exactly one group yields no ticket rather than IndexError
    if match is None or pattern.groups != 1:
        return None
    return match.group(1)
