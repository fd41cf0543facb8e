"""Metadata API over the front matter of notes in a document store.

Mirrors the property editor an Obsidian-style host exposes to plugins:
properties are listed from the parsed front matter, new ones are appended to
the end of the block and updates rewrite the value in place.
"""

import logging
from typing import Any

from notestatus.core.types import DocumentStore, Property
from notestatus.vault.frontmatter import (
    insert_property_line,
    parse_frontmatter,
    replace_property_value,
)

logger = logging.getLogger(__name__)


class FrontmatterMetadata:
    """Property editing for notes served by a ``DocumentStore``."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_properties_in_file(self, document: Any) -> list[Property]:
        content = await self.store.read(document)
        return parse_frontmatter(content)

    async def get_property_value(self, key: str, document: Any) -> str | None:
        properties = await self.get_properties_in_file(document)
        return next((p.value for p in properties if p.key == key), None)

    async def create_yaml_property(
        self, key: str, initial_value: str, document: Any
    ) -> None:
        content = await self.store.read(document)
        lines = insert_property_line(content.split("\n"), key, initial_value)
        await self.store.modify(document, "\n".join(lines))
        logger.debug(f"Created property {key!r} in {document}")

    async def update(self, key: str, value: str, document: Any) -> None:
        content = await self.store.read(document)
        lines = content.split("\n")
        updated = replace_property_value(lines, key, value)
        if updated == lines:
            logger.debug(f"Property {key!r} unchanged in {document}")
            return
        await self.store.modify(document, "\n".join(updated))
