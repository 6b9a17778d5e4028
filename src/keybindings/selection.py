"""Choosing which application's keybindings to show."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

import typer

from keybindings.errors import SelectionError
from keybindings.settings.user import Settings

logger: Final = logging.getLogger(__name__)


def choose_from_terminal(settings: Settings) -> int:
    """Show a numbered menu and prompt until a valid index is entered.

    Invalid input is reported and the prompt repeats, with no retry limit.

    Args:
        settings: Applications to choose from

    Returns:
        Index of the chosen application

    Raises:
        SelectionError: If there is nothing to choose from, or input ends
    """
    if not settings:
        raise SelectionError("No applications configured")

    typer.echo("\nChoose application:\n")
    for i, name in enumerate(settings.names):
        typer.echo(f"({i})  {name}")

    last = len(settings) - 1
    while True:
        typer.echo("")
        try:
            raw: str = typer.prompt("Choice", default="", show_default=False)
        except typer.Abort as exc:
            raise SelectionError("An error occurred while reading input") from exc

        try:
            choice = int(raw)
        except ValueError:
            typer.echo(f"\nInvalid input: {raw!r} is not an integer")
            continue

        if 0 <= choice <= last:
            return choice
        typer.echo(f"Choice should be between 0 and {last}")


def choose_by_name(settings: Settings, name: str) -> int:
    """Return the index of the application with exactly this name.

    Raises:
        SelectionError: If no application has that name
    """
    index = settings.index_of(name)
    if index is None:
        raise SelectionError(f"Unrecognized application name: {name}")
    return index


def resolve_choice(settings: Settings, args: Sequence[str]) -> int:
    """Pick an application from command-line arguments.

    No argument prompts interactively; one argument is an application name.

    Raises:
        SelectionError: On more than one argument or an unknown name
    """
    if not args:
        choice = choose_from_terminal(settings)
    elif len(args) == 1:
        choice = choose_by_name(settings, args[0])
    else:
        raise SelectionError(f"Zero or one command line argument expected, got {len(args)}")

    logger.debug("Selected application %d (%s)", choice, settings[choice].name)
    return choice
