"""Shared test fixtures and configuration."""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from notestatus.core.status import StatusSynchronizer
from notestatus.core.types import Property, StatusContext
from notestatus.vault.metaedit import FrontmatterMetadata
from notestatus.vault.notes import NoteStore

TODAY = date(2024, 3, 15)


@pytest.fixture
def today():
    """Date returned by the fixed test clock."""
    return TODAY


@pytest.fixture
def vault(tmp_path):
    """Provide an empty vault directory."""
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def make_note(vault):
    """Factory writing a note into the vault."""

    def _make_note(content: str, name: str = "note.md"):
        path = vault / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _make_note


@pytest.fixture
def store(vault):
    """NoteStore over the temp vault."""
    return NoteStore(vault)


@pytest.fixture
def make_synchronizer(store):
    """Factory for a synchronizer with a fixed clock and an active note."""

    def _make_synchronizer(note=None, today: date = TODAY):
        if note is not None:
            store.set_active_document(note)
        context = StatusContext(
            store=store,
            metadata=FrontmatterMetadata(store),
            clock=lambda: today,
        )
        return StatusSynchronizer(context)

    return _make_synchronizer


@pytest.fixture
def mock_context():
    """StatusContext with mocked collaborators and an active document."""

    def _mock_context(properties: list[Property] | None = None, text: str = ""):
        store = MagicMock()
        store.get_active_document.return_value = "doc"
        store.read = AsyncMock(return_value=text)
        store.modify = AsyncMock()

        values = {p.key: p.value for p in properties or []}
        metadata = MagicMock()
        metadata.get_properties_in_file = AsyncMock(return_value=properties or [])
        metadata.get_property_value = AsyncMock(side_effect=lambda k, d: values.get(k))
        metadata.create_yaml_property = AsyncMock()
        metadata.update = AsyncMock()

        return StatusContext(store=store, metadata=metadata, clock=lambda: TODAY)

    return _mock_context
