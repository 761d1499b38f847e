#!/usr/bin/env python3
"""
Main CLI entry point for apekey
"""

import logging
from typing import Optional

import typer

from apekey import __version__
from apekey.commands.config import config
from apekey.commands.keymap import find, show
from apekey.config.constants import LOG_LEVELS
from apekey.config.settings import validate_all_env_vars
from apekey.config.user_config import load_user_config
from apekey.ui.gui import gui
from apekey.utils.logging_utils import setup_logging
from apekey.utils.output import err_console

logger = logging.getLogger(__name__)


# Version command
def version():
    """Show apekey version"""
    typer.echo(f"apekey version {__version__}")


# Callback for global options
def main(
    ctx: typer.Context,
    log: Optional[str] = typer.Option(
        None,
        "--log",
        envvar="APEKEY_LOG_LEVEL",
        help=f"Log level written to the log file ({', '.join(LOG_LEVELS)})",
    ),
):
    """
    apekey - searchable cheat sheet for xmonad keybinds

    Reads the keybinds annotated in the comments of xmonad.hs and shows them
    grouped by section, with fuzzy search.

    [bold]Examples:[/bold]

    Open the keymap window:
        [cyan]apekey[/cyan]

    Print the keymap of another file:
        [cyan]apekey show ~/dotfiles/xmonad.hs[/cyan]

    Search from the shell:
        [cyan]apekey find "swap master"[/cyan]
    """
    if log is not None and log.lower() not in LOG_LEVELS:
        err_console.print(f"[red]Error: Invalid log level '{log}'. Valid values: {LOG_LEVELS}[/red]")
        raise typer.Exit(1)

    setup_logging(log)

    for error in validate_all_env_vars():
        logger.warning(error)

    ctx.obj = load_user_config()

    if ctx.invoked_subcommand is None:
        gui(ctx, path=None, theme=None)


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(
        name="apekey",
        help="Searchable cheat sheet for xmonad keybinds",
        rich_markup_mode="rich",
    )

    app.command()(gui)
    app.command()(show)
    app.command()(find)
    app.command()(config)
    app.command()(version)

    # Add global callback
    app.callback(invoke_without_command=True)(main)
    return app


# Create the app instance
app = create_app()


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
