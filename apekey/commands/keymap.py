"""Keymap commands for apekey: print the parsed keymap, search it."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from apekey.config.settings import resolve_xmonad_config
from apekey.config.user_config import UserConfig
from apekey.exceptions import FileReadError, ParseError
from apekey.models.keymap import Document
from apekey.parsing import parse_document, read_config
from apekey.services.fuzzy_matcher import split_positions
from apekey.services.keybind_search import flatten, search
from apekey.ui.formatting import highlight
from apekey.utils.output import console, err_console, print_json


def _user_config(ctx: typer.Context) -> UserConfig:
    obj = ctx.obj if ctx is not None else None
    return obj if isinstance(obj, UserConfig) else UserConfig()


def source_path(ctx: typer.Context, path: Optional[str]) -> Path:
    """Resolve the keymap source from the argument, environment and user config."""
    return resolve_xmonad_config(path, _user_config(ctx).xmonad_config)


def load_document(path: Path) -> Document:
    """Read and parse ``path``, exiting with status 1 on failure."""
    try:
        return parse_document(read_config(path))
    except FileReadError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e
    except ParseError as e:
        err_console.print(f"[red]Error: {e.message}[/red] [dim]({path})[/dim]")
        raise typer.Exit(1) from e


def show(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Annotated xmonad config"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Print the keymap annotated in an xmonad config."""
    document = load_document(source_path(ctx, path))

    if json_output:
        print_json(document.to_dict())
        return

    if document.title:
        console.print(f"\n[bold]{document.title}[/bold]")

    if not document.sections:
        console.print("[yellow]No keybinds found[/yellow]")
        return

    for section in document.sections:
        table = Table(title=section.title, title_justify="left", show_header=False, box=None)
        table.add_column("Keys", style="bold red", no_wrap=True)
        table.add_column("Description")
        for keybind in section.keybinds:
            table.add_row(keybind.keys, keybind.description)
        console.print()
        console.print(table)

    console.print(
        f"\n[dim]{document.section_count} sections, {document.keybind_count} keybinds[/dim]"
    )


def find(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Fuzzy search pattern"),
    path: Optional[str] = typer.Argument(None, help="Annotated xmonad config"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show at most N results"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Fuzzy search the keybinds of an xmonad config, best match first."""
    document = load_document(source_path(ctx, path))
    keybinds = flatten(document)
    results = search(keybinds, query)
    if limit is not None:
        results = results[:limit]

    if json_output:
        print_json([r.to_dict() for r in results])
        return

    if not results:
        console.print(f"[yellow]No keybinds match '{query}'[/yellow]")
        return

    table = Table(show_header=True, box=None)
    table.add_column("Keys", no_wrap=True)
    table.add_column("Description")
    table.add_column("Score", justify="right", style="dim")
    for result in results:
        positions = result.score.positions if result.score else ()
        in_keys, in_description = split_positions(positions, result.keys)
        table.add_row(
            highlight(result.keys, in_keys, "bold red", "bold underline yellow"),
            highlight(result.description, in_description, "", "bold underline yellow"),
            str(result.score.rank) if result.score else "",
        )
    console.print(table)
    console.print(f"\n[dim]{len(results)} of {len(keybinds)} keybinds[/dim]")
