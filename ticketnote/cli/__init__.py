"""CLI entry point for ticketnote.

This module provides the CLI application that combines all commands into a
single unified interface.
"""

import typer

from ticketnote.cli.add_ticket import add_ticket_command
from ticketnote.cli.regexp import regexp_command
from ticketnote.cli.main import main_command

# Main application
app = typer.Typer(
    name="ticketnote",
    help="ticketnote: add branch tickets to git commit messages",
    add_completion=False,
    no_args_is_help=True,
)

app.command("add-ticket")(add_ticket_command)
app.command("test-regexp")(regexp_command)

app.callback()(main_command)


__all__ = [
    "app",
    "add_ticket_command",
    "regexp_command",
    "main_command",
]
