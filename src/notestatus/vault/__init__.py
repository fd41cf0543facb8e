"""Vault module: Markdown notes on disk and their front matter.

Provides the file-backed document store and the metadata API the status
synchronizer runs against outside a note-taking host.
"""

from notestatus.vault.metaedit import FrontmatterMetadata
from notestatus.vault.notes import NoteStore

__all__ = [
    "FrontmatterMetadata",
    "NoteStore",
]
