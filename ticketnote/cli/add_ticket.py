"""CLI command for adding the branch ticket to a commit message."""

from pathlib import Path
from typing import Optional

import typer

from ticketnote.exceptions import QuietFailure, TicketError
from ticketnote.git import GitError, get_branch
from ticketnote.message import MessageUpdater
from ticketnote.message_file import update_message_file
from ticketnote.policy import ErrorHandling
from ticketnote.reader import TicketReader
from ticketnote.ticket import compile_pattern


def add_ticket_command(
    regexp: str = typer.Argument(
        ...,
        help="Regular expression with one capture group matching the ticket in the branch name",
    ),
    file: Path = typer.Argument(
        ...,
        help="Commit message file, as passed to the prepare-commit-msg hook",
    ),
    abort: bool = typer.Option(
        False,
        "--abort",
        "-a",
        help="Abort execution on ticket parse error with a message and error status",
    ),
    omit: bool = typer.Option(
        False,
        "--omit",
        "-o",
        help="Omit ticket line on ticket parse error (default)",
    ),
    placeholder: Optional[str] = typer.Option(
        None,
        "--placeholder",
        "-p",
        help="Use placeholder on ticket parse error",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show the branch, pattern and outcome on stderr",
    ),
) -> None:
    """Add ticket information from the current branch to a commit message."""
    try:
        pattern = compile_pattern(regexp)
        error_handling = ErrorHandling.from_flags(abort=abort, omit=omit, placeholder=placeholder)
        reader = TicketReader(error_handling, branch_reader=get_branch)
        written = update_message_file(file, MessageUpdater(pattern, reader))
    except QuietFailure:
        raise typer.Exit(0)
    except (TicketError, GitError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if debug:
        typer.echo(f"Pattern: {pattern.pattern}", err=True)
        typer.echo(f"Policy: {error_handling.policy.value}", err=True)
        if written:
            if reader.branch is not None:
                typer.echo(f"Branch: {reader.branch}", err=True)
            else:
                typer.echo("Branch could not be resolved, used placeholder", err=True)
            typer.echo(f"Added ticket line to {file}", err=True)
        else:
            typer.echo("Commit message already has a ticket line", err=True)
