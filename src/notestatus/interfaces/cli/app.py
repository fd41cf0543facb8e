"""CLI application for note-status using Rich and Typer."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from notestatus.core.config import NOTESTATUS_VAULT, setup_logging
from notestatus.core.factory import build_synchronizer
from notestatus.core.status import StatusSynchronizer
from notestatus.core.types import TRACKED_KEYS, Status

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="notestatus",
    help="Track workflow status in the front matter of Markdown notes",
    no_args_is_help=True,
)

console = Console()

NoteArgument = typer.Argument(..., help="Note path, relative to the vault")
VaultOption = typer.Option(
    None,
    "--vault",
    "-v",
    help="Vault directory (default: $NOTESTATUS_VAULT or current directory)",
)
DebugOption = typer.Option(False, "--debug", "-d", help="Enable debug logging")


def _get_vault_path(vault: Optional[str]) -> Path:
    """Resolve vault path from argument or config."""
    if vault:
        return Path(vault).expanduser()
    return NOTESTATUS_VAULT


def _run(
    note: str,
    vault: Optional[str],
    debug: bool,
    action: Callable[[StatusSynchronizer], Awaitable[None]],
) -> StatusSynchronizer:
    setup_logging(debug=debug)
    try:
        synchronizer = build_synchronizer(_get_vault_path(vault), note)
        asyncio.run(action(synchronizer))
    except OSError as e:
        logger.debug("Status update failed", exc_info=True)
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    return synchronizer


def _transition(note: str, vault: Optional[str], debug: bool, status: Status):
    _run(note, vault, debug, lambda s: s.set_status_to(status))
    console.print(f"[green]{note}: {status}[/green]")


@app.command()
def someday(
    note: str = NoteArgument,
    vault: Optional[str] = VaultOption,
    debug: bool = DebugOption,
):
    """Mark a note as someday."""
    _transition(note, vault, debug, Status.SOMEDAY)


@app.command()
def todo(
    note: str = NoteArgument,
    vault: Optional[str] = VaultOption,
    debug: bool = DebugOption,
):
    """Mark a note as todo."""
    _transition(note, vault, debug, Status.TODO)


@app.command("in-progress")
def in_progress(
    note: str = NoteArgument,
    vault: Optional[str] = VaultOption,
    debug: bool = DebugOption,
):
    """Mark a note as in progress and stamp the start date."""
    _transition(note, vault, debug, Status.IN_PROGRESS)


@app.command()
def waiting(
    note: str = NoteArgument,
    vault: Optional[str] = VaultOption,
    debug: bool = DebugOption,
):
    """Mark a note as waiting and stamp the waiting-since date."""
    _transition(note, vault, debug, Status.WAITING)


@app.command()
def completed(
    note: str = NoteArgument,
    vault: Optional[str] = VaultOption,
    debug: bool = DebugOption,
):
    """Mark a note as completed and stamp the completion date."""
    _transition(note, vault, debug, Status.COMPLETED)


@app.command()
def clear(
    note: str = NoteArgument,
    vault: Optional[str] = VaultOption,
    debug: bool = DebugOption,
):
    """Remove the status and all status timestamps from a note."""
    _run(note, vault, debug, lambda s: s.delete_status())
    console.print(f"[yellow]{note}: status cleared[/yellow]")


@app.command()
def show(
    note: str = NoteArgument,
    vault: Optional[str] = VaultOption,
    debug: bool = DebugOption,
):
    """Show the status properties of a note."""
    rows: list[tuple[str, str]] = []

    async def collect(synchronizer: StatusSynchronizer) -> None:
        context = synchronizer.context
        document = context.store.get_active_document()
        properties = await context.metadata.get_properties_in_file(document)
        rows.extend((p.key, p.value) for p in properties if p.key in TRACKED_KEYS)

    _run(note, vault, debug, collect)

    if not rows:
        console.print(f"[dim]{note}: no status tracked[/dim]")
        return

    table = Table(title=note, show_header=True, header_style="bold cyan")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(key, value)
    console.print(table)


@app.command("list")
def list_notes(
    vault: Optional[str] = VaultOption,
    status: Optional[Status] = typer.Option(
        None, "--status", "-s", help="Only notes with this status"
    ),
    debug: bool = DebugOption,
):
    """List notes in the vault with their status."""
    setup_logging(debug=debug)
    synchronizer = build_synchronizer(_get_vault_path(vault))
    store = synchronizer.context.store

    async def collect() -> list[tuple[str, str]]:
        found = []
        for path in store.list_notes():
            store.set_active_document(path)
            current = await synchronizer.current_status()
            if current is None or (status is not None and current != status):
                continue
            found.append((str(path.relative_to(store.root)), str(current)))
        store.set_active_document(None)
        return found

    rows = asyncio.run(collect())
    if not rows:
        console.print("[dim]No notes with a status.[/dim]")
        return

    table = Table(title="Notes", show_header=True, header_style="bold cyan")
    table.add_column("Note")
    table.add_column("Status", style="green")
    for path, current in rows:
        table.add_row(path, current)
    console.print(table)


def main():
    """Entry point for the notestatus command."""
    app()


if __name__ == "__main__":
    main()
