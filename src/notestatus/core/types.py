"""Shared types and ports for note-status."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import Any, Protocol

from pydantic import BaseModel


class Status(StrEnum):
    """Workflow states stored in the ``status`` property."""

    SOMEDAY = "someday"
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    WAITING = "waiting"
    COMPLETED = "completed"


class PropertyKey(StrEnum):
    """Front matter keys managed by the status synchronizer."""

    STATUS = "status"
    STARTED = "started"
    WAITING_SINCE = "waiting-since"
    COMPLETED = "completed"


TRACKED_KEYS = frozenset(key.value for key in PropertyKey)


class Property(BaseModel, frozen=True):
    """A single front matter entry."""

    key: str
    value: str = ""


class MetadataApi(Protocol):
    """Property access for a document's front matter."""

    def get_properties_in_file(self, document: Any) -> Awaitable[list[Property]]:
        pass

    def get_property_value(self, key: str, document: Any) -> Awaitable[str | None]:
        pass

    def create_yaml_property(
        self, key: str, initial_value: str, document: Any
    ) -> Awaitable[None]:
        pass

    def update(self, key: str, value: str, document: Any) -> Awaitable[None]:
        pass


class DocumentStore(Protocol):
    """Full-text access to documents and the active document handle."""

    def get_active_document(self) -> Any | None:
        pass

    def read(self, document: Any) -> Awaitable[str]:
        pass

    def modify(self, document: Any, text: str) -> Awaitable[None]:
        pass


Clock = Callable[[], date]


@dataclass(frozen=True)
class StatusContext:
    """Everything the status synchronizer touches.

    The document store decides which note is active, the metadata API edits
    its front matter, and the clock supplies today's date for timestamps.
    """

    store: DocumentStore
    metadata: MetadataApi
    clock: Clock = field(default=date.today)
    date_format: str = "%Y-%m-%d"
