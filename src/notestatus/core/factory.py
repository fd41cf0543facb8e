"""Factory for building a StatusSynchronizer wired to a vault on disk."""

from collections.abc import Callable
from datetime import date
from pathlib import Path

from notestatus.core.config import DATE_FORMAT, NOTESTATUS_VAULT
from notestatus.core.status import StatusSynchronizer
from notestatus.core.types import StatusContext
from notestatus.vault.metaedit import FrontmatterMetadata
from notestatus.vault.notes import NoteStore


def build_synchronizer(
    vault_dir: Path | str | None = None,
    note: Path | str | None = None,
    clock: Callable[[], date] = date.today,
) -> StatusSynchronizer:
    """
    Build a StatusSynchronizer over a file-backed vault.

    Args:
        vault_dir: Vault root (defaults to config)
        note: Note to make active, relative to the vault root
        clock: Source of today's date for timestamps

    Returns:
        Configured StatusSynchronizer

    Raises:
        FileNotFoundError: If ``note`` does not exist
    """
    store = NoteStore(Path(vault_dir) if vault_dir else NOTESTATUS_VAULT)
    if note is not None:
        store.set_active_document(note)

    context = StatusContext(
        store=store,
        metadata=FrontmatterMetadata(store),
        clock=clock,
        date_format=DATE_FORMAT,
    )
    return StatusSynchronizer(context)
