"""Ticket reader: branch lookup plus error policy."""

import re
from typing import Callable, Optional

from ticketnote.exceptions import QuietFailure, TicketNotFoundError
from ticketnote.git import GitError, get_branch
from ticketnote.policy import ErrorHandling, ErrorPolicy
from ticketnote.ticket import extract_ticket


class TicketReader:
    """Reads the ticket for the current branch.

    A failed branch lookup and a branch that doesn't match the pattern are
    treated the same way and resolved through the error handling policy:

    - abort: the underlying error propagates
    - omit: QuietFailure is raised
    - placeholder: the placeholder text is returned as the ticket

    Attributes:
        error_handling: The selected policy.
        branch_reader: Callable returning the current branch name.
        branch: The branch seen by the last read, if it could be resolved.
    """

    def __init__(
        self,
        error_handling: ErrorHandling,
        branch_reader: Callable[[], str] = get_branch,
    ):
        self.error_handling = error_handling
        self.branch_reader = branch_reader
        self.branch: Optional[str] = None

    def __call__(self, pattern: re.Pattern) -> str:
        return self.read(pattern)

    def read(self, pattern: re.Pattern) -> str:
        """Read the ticket for the current branch.

        Args:
            pattern: Compiled ticket pattern.

        Returns:
            The ticket, or the placeholder under the placeholder policy.

        Raises:
            GitError: Branch lookup failed under the abort policy.
            TicketNotFoundError: No match under the abort policy.
            QuietFailure: Either failure under the omit policy.
        """
        try:
            self.branch = self.branch_reader()
            ticket = extract_ticket(pattern, self.branch)
            if ticket is None:
                raise TicketNotFoundError(self.branch, pattern.pattern)
            return ticket
        except (GitError, TicketNotFoundError) as e:
            policy = self.error_handling.policy
            if policy is ErrorPolicy.ABORT:
                raise
            if policy is ErrorPolicy.OMIT:
                raise QuietFailure() from e
            return self.error_handling.placeholder
