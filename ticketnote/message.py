"""Commit message ticket line handling."""

import re
from typing import Callable

TICKET_PREFIX = "Ticket: "


def message_has_ticket(message: str) -> bool:
    """Check whether any line of the message starts with the ticket prefix."""
    return any(line.startswith(TICKET_PREFIX) for line in message.split("\n"))


def append_ticket(message: str, ticket: str) -> str:
    """Append a ticket line to a commit message.

    A message that already ends in a blank line keeps exactly one blank
    line before the ticket; anything else gets a single newline.

    Args:
        message: The commit message.
        ticket: The ticket identifier.

    Returns:
        The message with ``Ticket: <ticket>`` and a newline appended.
    """
    if message.endswith("\n\n"):
        separated = message.rstrip("\n") + "\n\n"
    else:
        separated = message + "\n"
    return f"{separated}{TICKET_PREFIX}{ticket}\n"


class MessageUpdater:
    """Adds the ticket line to commit messages that don't have one yet.

    Attributes:
        pattern: Compiled ticket pattern passed to the reader.
        ticket_reader: Callable taking the pattern and returning the ticket.
    """

    def __init__(self, pattern: re.Pattern, ticket_reader: Callable[[re.Pattern], str]):
        self.pattern = pattern
        self.ticket_reader = ticket_reader

    def __call__(self, message: str) -> str:
        return self.update(message)

    def update(self, message: str) -> str:
        """Return the message with a ticket line.

        The ticket reader isn't consulted when the message already has a
        ticket line. Errors from the reader propagate unchanged.
        """
        if message_has_ticket(message):
            return message
        ticket = self.ticket_reader(self.pattern)
        return append_ticket(message, ticket)
