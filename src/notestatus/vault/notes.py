"""File-backed document store for vault notes."""

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


# Line endings are kept as they are on disk
def _read_note(path: Path) -> str:
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def _write_note(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


class NoteStore:
    """Reads and overwrites Markdown notes under a vault root.

    Holds the active note that status operations act on. Nothing is active
    until ``set_active_document`` is called.
    """

    def __init__(self, root: Path | str):
        """
        Initialize the store.

        Args:
            root: Vault root directory; relative note paths resolve against it
        """
        self.root = Path(root).expanduser().resolve()
        self._active: Path | None = None

    def resolve(self, note: Path | str) -> Path:
        """Get absolute path for a note given relative to the vault root."""
        path = Path(note).expanduser()
        if not path.is_absolute():
            path = self.root / path
        return path.resolve()

    def get_active_document(self) -> Path | None:
        return self._active

    def set_active_document(self, note: Path | str | None) -> Path | None:
        """
        Make a note the active document.

        Args:
            note: Note path, or None to clear the active document

        Returns:
            Resolved path of the active note

        Raises:
            FileNotFoundError: If the note does not exist
        """
        if note is None:
            self._active = None
            return None

        path = self.resolve(note)
        if not path.is_file():
            raise FileNotFoundError(f"Note not found: {path}")
        self._active = path
        logger.debug(f"Active note: {path}")
        return path

    async def read(self, document: Path) -> str:
        return await asyncio.to_thread(_read_note, document)

    async def modify(self, document: Path, text: str) -> None:
        logger.debug(f"Writing {len(text)} chars to {document}")
        await asyncio.to_thread(_write_note, document, text)

    def list_notes(self, folder: str = ".") -> list[Path]:
        """List all markdown notes in a folder of the vault."""
        folder_path = self.root / folder
        if not folder_path.exists():
            return []
        return sorted(folder_path.glob("**/*.md"))

    def __repr__(self) -> str:
        return f"NoteStore({self.root})"
