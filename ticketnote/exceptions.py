"""Exception classes for ticketnote.

Reportable errors derive from TicketError and end the run with a message
and a non-zero status. QuietFailure is deliberately not a TicketError: it
ends the run successfully without printing anything.
"""


class TicketError(Exception):
    """Base exception for errors reported to the user."""

    pass


class ConfigurationError(TicketError):
    """Raised for an unusable regexp or conflicting options."""

    pass


class MessageFileError(TicketError):
    """Raised when the commit message file can't be read, decoded or written."""

    pass


class TicketNotFoundError(TicketError):
    """Raised when the pattern doesn't match the branch name."""

    def __init__(self, branch: str, pattern: str):
        self.branch = branch
        self.pattern = pattern
        super().__init__(f"Couldn't find ticket in branch '{branch}' with regexp '{pattern}'")


class QuietFailure(Exception):
    """Raised when the omit policy swallows a ticket lookup failure."""

    pass
