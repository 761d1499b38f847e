"""Config command for apekey."""

import typer
from rich.table import Table

from apekey.config.settings import get_env_info, get_user_config_path, resolve_xmonad_config
from apekey.config.user_config import UserConfig, save_example_config
from apekey.exceptions import ConfigurationError, FileReadError
from apekey.utils.output import console, err_console


def config(
    init: bool = typer.Option(False, "--init", help="Write an example config file"),
):
    """Show the config file, environment and resolved keymap path."""
    path = get_user_config_path()

    if init:
        if save_example_config(path):
            console.print(f"[green]Created[/green] {path}")
        else:
            console.print(f"[yellow]Config file already exists:[/yellow] {path}")
        return

    user_config = UserConfig()
    if path.exists():
        try:
            user_config = UserConfig.try_read(path)
        except (FileReadError, ConfigurationError) as e:
            err_console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1) from e
        console.print(f"[bold]Config file:[/bold] {path}")
    else:
        console.print(f"[bold]Config file:[/bold] {path} [dim](not found, run --init)[/dim]")

    keymap = resolve_xmonad_config(None, user_config.xmonad_config)
    console.print(f"[bold]Keymap source:[/bold] {keymap}")
    console.print(f"[bold]Theme:[/bold] {user_config.theme}\n")

    table = Table(show_header=True, box=None)
    table.add_column("Variable", style="cyan")
    table.add_column("Value")
    table.add_column("Description", style="dim")
    for name, info in get_env_info().items():
        if not info["is_set"]:
            value = "[dim]unset[/dim]"
        elif info["valid"]:
            value = info["value"]
        else:
            value = f"[red]{info['value']} (invalid)[/red]"
        table.add_row(name, value, info["description"])
    console.print(table)
