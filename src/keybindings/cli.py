"""Keybindings viewer CLI application.

This module provides the command-line interface: an optional application
name argument, an interactive menu when it is omitted, and a help text
pointing at the settings file.
"""

from __future__ import annotations

import logging
import sys
from typing import Final

import typer

from keybindings.controller import KeybindingsViewer
from keybindings.errors import KeybindingsError

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="List the keybindings of other applications", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "keybindings.cli"

HELP_FLAGS: Final = ("-h", "--help")

# Unknown option-like tokens (such as -h) are collected as plain arguments
COMMAND_SETTINGS: Final = {"ignore_unknown_options": True, "help_option_names": []}

ARGS_ARGUMENT = typer.Argument(None, metavar="[APPLICATION]", show_default=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")

HELP_TEXT = (
    "\n{prog} [application name]\n\n"
    "Lists the keybindings of the application name given as an argument.\n"
    "Configs can be found at: {config}\n\n"
)


def fail(exc: KeybindingsError) -> typer.Exit:
    """Report a fatal error on stderr and return the exit to raise."""
    logger.debug("Fatal error", exc_info=exc)
    typer.secho(exc.message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


@app.command(context_settings=COMMAND_SETTINGS, add_help_option=False)
def show(
    ctx: typer.Context,
    args: list[str] | None = ARGS_ARGUMENT,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the keybindings of an application."""
    args = list(args or [])

    try:
        viewer = KeybindingsViewer(debug=debug)
    except KeybindingsError as exc:
        raise fail(exc) from exc

    if len(args) == 1 and args[0] in HELP_FLAGS:
        prog = ctx.find_root().info_name or "keybindings"
        typer.echo(HELP_TEXT.format(prog=prog, config=viewer.paths.config_file), nl=False)
        raise typer.Exit()

    try:
        viewer.run(args)
    except KeybindingsError as exc:
        raise fail(exc) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
