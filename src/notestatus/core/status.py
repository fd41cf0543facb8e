"""Status synchronization for the active note.

Keeps the ``status`` property of a note and its per-status timestamps in
step:

- entering ``in-progress`` stamps ``started``
- entering ``waiting`` stamps ``waiting-since``
- entering ``completed`` stamps ``completed``
- leaving ``waiting`` removes ``waiting-since``

Every transition is allowed from any state. ``started`` and ``completed``
stay in place until the whole status is cleared with ``delete_status``.
"""

import logging
from collections.abc import Iterable

from notestatus.core.types import PropertyKey, Status, StatusContext
from notestatus.vault.frontmatter import remove_property_lines

logger = logging.getLogger(__name__)


class StatusSynchronizer:
    """Applies status transitions to the active document of a context."""

    def __init__(self, context: StatusContext):
        """
        Initialize the synchronizer.

        Args:
            context: Document store, metadata API and clock to operate on
        """
        self.context = context

    @property
    def _document(self):
        return self.context.store.get_active_document()

    def _today(self) -> str:
        return self.context.clock().strftime(self.context.date_format)

    async def has_property(self, key: str) -> bool:
        """Check whether the active document defines ``key``."""
        document = self._document
        if document is None:
            return False

        properties = await self.context.metadata.get_properties_in_file(document)
        return any(p.key == key for p in properties)

    async def delete_properties(self, keys: Iterable[str]) -> None:
        """
        Remove properties from the active document.

        Only the first source line of each key is removed. Keys the document
        does not define are ignored.

        Args:
            keys: Property keys to remove
        """
        document = self._document
        if document is None:
            return

        wanted = set(keys)
        properties = await self.context.metadata.get_properties_in_file(document)
        to_delete = [p.key for p in properties if p.key in wanted]
        if not to_delete:
            return

        content = await self.context.store.read(document)
        lines = remove_property_lines(content.split("\n"), to_delete)
        await self.context.store.modify(document, "\n".join(lines))
        logger.debug(f"Deleted {to_delete} from {document}")

    async def set_property(self, key: str, value: str) -> None:
        """Create ``key`` if missing, then set it to ``value``."""
        document = self._document
        if document is None:
            return

        if not await self.has_property(key):
            await self.context.metadata.create_yaml_property(key, "", document)

        await self.context.metadata.update(key, value, document)

    async def set_status(self, desired_status: str) -> None:
        """
        Set the ``status`` property.

        Leaving ``waiting`` removes ``waiting-since``. The current value is
        read before it is overwritten.

        Args:
            desired_status: New status value
        """
        document = self._document
        if document is None:
            return

        if await self.has_property(PropertyKey.STATUS):
            current = await self.context.metadata.get_property_value(
                PropertyKey.STATUS, document
            )
            if current == Status.WAITING and desired_status != Status.WAITING:
                await self.delete_properties([PropertyKey.WAITING_SINCE])

        await self.set_property(PropertyKey.STATUS, desired_status)
        logger.info(f"Status of {document} set to {desired_status}")

    async def current_status(self) -> Status | str | None:
        """Read the status of the active document.

        Values outside the known set are returned as plain strings.
        """
        document = self._document
        if document is None:
            return None

        value = await self.context.metadata.get_property_value(
            PropertyKey.STATUS, document
        )
        if value is None:
            return None
        try:
            return Status(value)
        except ValueError:
            return value

    async def delete_status(self) -> None:
        """Stop tracking status: remove status and all its timestamps."""
        await self.delete_properties(
            [
                PropertyKey.STATUS,
                PropertyKey.STARTED,
                PropertyKey.WAITING_SINCE,
                PropertyKey.COMPLETED,
            ]
        )

    async def set_status_someday(self) -> None:
        await self.set_status(Status.SOMEDAY)

    async def set_status_todo(self) -> None:
        await self.set_status(Status.TODO)

    async def set_status_in_progress(self) -> None:
        await self.set_status(Status.IN_PROGRESS)
        await self.set_property(PropertyKey.STARTED, self._today())

    async def set_status_waiting(self) -> None:
        await self.set_status(Status.WAITING)
        await self.set_property(PropertyKey.WAITING_SINCE, self._today())

    async def set_status_completed(self) -> None:
        await self.set_status(Status.COMPLETED)
        await self.set_property(PropertyKey.COMPLETED, self._today())

    async def set_status_to(self, status: Status) -> None:
        """Run the transition operation for ``status``."""
        transitions = {
            Status.SOMEDAY: self.set_status_someday,
            Status.TODO: self.set_status_todo,
            Status.IN_PROGRESS: self.set_status_in_progress,
            Status.WAITING: self.set_status_waiting,
            Status.COMPLETED: self.set_status_completed,
        }
        await transitions[Status(status)]()
