"""Tests for notestatus.core.factory."""

import pytest

from notestatus.core.factory import build_synchronizer
from notestatus.vault.metaedit import FrontmatterMetadata
from notestatus.vault.notes import NoteStore


def test_build_synchronizer_wires_vault(vault, make_note, today):
    """Synchronizer runs against a NoteStore with the given note active."""
    note = make_note("# Plan\n")

    sync = build_synchronizer(vault, "note.md", clock=lambda: today)

    assert isinstance(sync.context.store, NoteStore)
    assert isinstance(sync.context.metadata, FrontmatterMetadata)
    assert sync.context.store.get_active_document() == note.resolve()
    assert sync.context.clock() == today


def test_build_synchronizer_without_note(vault):
    """No note means no active document."""
    sync = build_synchronizer(vault)

    assert sync.context.store.get_active_document() is None


def test_build_synchronizer_missing_note(vault):
    """A missing note is reported immediately."""
    with pytest.raises(FileNotFoundError):
        build_synchronizer(vault, "missing.md")
