"""CLI command for trying a ticket regexp against a branch name."""

import typer

from ticketnote.exceptions import TicketError
from ticketnote.message import TICKET_PREFIX
from ticketnote.policy import ErrorHandling, ErrorPolicy
from ticketnote.reader import TicketReader
from ticketnote.ticket import compile_pattern


def regexp_command(
    regexp: str = typer.Argument(
        ...,
        help="Regular expression with one capture group, i.e. a part surrounded by parentheses",
    ),
    branch_name: str = typer.Argument(
        ...,
        help="Branch name to test against. It doesn't have to exist in your repo",
    ),
) -> None:
    """Test a regular expression against a branch name.

    Outputs what add-ticket would determine to be the ticket given a
    regexp and a branch name.

    A non-matching branch name is an error here. With add-ticket, errors
    by default only cause the ticket line to be omitted from the commit
    message.
    """
    try:
        pattern = compile_pattern(regexp)
        reader = TicketReader(
            ErrorHandling(policy=ErrorPolicy.ABORT),
            branch_reader=lambda: branch_name,
        )
        ticket = reader(pattern)
    except TicketError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"{TICKET_PREFIX}{ticket}")
