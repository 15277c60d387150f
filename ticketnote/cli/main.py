"""Root callback for the ticketnote CLI."""

from typing import Optional

import typer

from ticketnote import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ticketnote {__version__}")
        raise typer.Exit()


def main_command(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Add the ticket from the current git branch to commit messages.

    Meant to run from a prepare-commit-msg hook, e.g.:

        ticketnote add-ticket '\\b(ch\\d+)\\b' "$1"
    """
