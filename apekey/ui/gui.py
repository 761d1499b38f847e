"""
GUI interface for apekey - the searchable keymap window
"""

from typing import Optional

import typer

from apekey.commands.keymap import source_path
from apekey.config.constants import THEMES
from apekey.config.user_config import UserConfig
from apekey.utils.output import err_console


def gui(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Annotated xmonad config"),
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme to use (dark, light)",
    ),
):
    """Open the searchable keymap window."""
    from apekey.ui.app import run_app

    config = ctx.obj if isinstance(ctx.obj, UserConfig) else UserConfig()
    if theme is not None:
        if theme.lower() not in THEMES:
            err_console.print(f"[red]Error: Unknown theme '{theme}', expected one of {THEMES}[/red]")
            raise typer.Exit(1)
        config.theme = theme.lower()

    try:
        run_app(source_path(ctx, path), config)
    except KeyboardInterrupt:
        pass
