"""note-status core library - status synchronization for notes."""

from notestatus.core.status import StatusSynchronizer
from notestatus.core.types import (
    Clock,
    DocumentStore,
    MetadataApi,
    Property,
    PropertyKey,
    Status,
    StatusContext,
)

__all__ = [
    "Clock",
    "DocumentStore",
    "MetadataApi",
    "Property",
    "PropertyKey",
    "Status",
    "StatusContext",
    "StatusSynchronizer",
]
