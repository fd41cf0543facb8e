"""YAML front matter parsing and line editing for vault notes.

Notes carry their metadata in a ``---`` delimited block at the very top::

    ---
    status: waiting
    waiting-since: 2024-01-01
    ---

Line edits work on the raw text so that everything except the touched line
stays byte-identical.
"""

import logging
import re
from datetime import date, datetime
from typing import Any

import yaml

from notestatus.core.types import Property

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
TOP_LEVEL_RE = re.compile(r"^([^\s#:-][^:\s]*):(.*)$")


def property_pattern(key: str) -> re.Pattern[str]:
    """Return the pattern matching the source line of ``key``.

    Leading whitespace is allowed and the key must be followed directly by a
    colon, so ``status`` never matches a ``status-extra`` line.
    """
    return re.compile(rf"^\s*{re.escape(key)}:")


def find_property_line(lines: list[str], key: str) -> int:
    """Index of the first line defining ``key``, or -1."""
    pattern = property_pattern(key)
    return next((i for i, line in enumerate(lines) if pattern.match(line)), -1)


def remove_property_lines(lines: list[str], keys: list[str]) -> list[str]:
    """Drop the first line defining each key, keeping the rest in order."""
    indexes = {find_property_line(lines, key) for key in keys}
    indexes.discard(-1)
    return [line for i, line in enumerate(lines) if i not in indexes]


def frontmatter_bounds(lines: list[str]) -> tuple[int, int] | None:
    """Return the indexes of the opening and closing delimiters."""
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return None
    for i in range(1, len(lines)):
        if lines[i].rstrip() == FRONTMATTER_DELIMITER:
            return 0, i
    return None


def _line_ending(line: str) -> str:
    return "\r" if line.endswith("\r") else ""


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return yaml.safe_dump(value, default_flow_style=True).strip()
    return str(value)


def _scan_block(block: list[str]) -> list[Property]:
    """Collect top-level ``key: value`` lines of a block YAML cannot load."""
    properties: dict[str, str] = {}
    for line in block:
        match = TOP_LEVEL_RE.match(line.rstrip("\r"))
        if match and match.group(1) not in properties:
            properties[match.group(1)] = match.group(2).strip()
    return [Property(key=k, value=v) for k, v in properties.items()]


def parse_frontmatter(content: str) -> list[Property]:
    """
    Parse the front matter of a note into properties.

    A block that is not valid YAML is read line by line so that its
    top-level keys are still visible to editors.

    Args:
        content: Full note content including frontmatter

    Returns:
        Properties in file order, empty when there is no usable block
    """
    lines = content.split("\n")
    bounds = frontmatter_bounds(lines)
    if bounds is None:
        return []

    start, end = bounds
    block = lines[start + 1 : end]
    try:
        raw = yaml.safe_load("\n".join(block))
    except yaml.YAMLError as e:
        logger.warning(f"Invalid YAML front matter, reading keys line by line: {e}")
        return _scan_block(block)

    if raw is None:
        return []
    if not isinstance(raw, dict):
        logger.warning(f"Front matter must be a mapping, got {type(raw).__name__}")
        return _scan_block(block)

    return [Property(key=str(k), value=_render_value(v)) for k, v in raw.items()]


def insert_property_line(lines: list[str], key: str, value: str) -> list[str]:
    """Append ``key: value`` to the front matter, creating the block if needed.

    The new lines take the line ending of the surrounding text.
    """
    line = f"{key}: {value}".rstrip()
    bounds = frontmatter_bounds(lines)
    if bounds is None:
        ending = _line_ending(lines[0]) if lines else ""
        delimiter = FRONTMATTER_DELIMITER + ending
        return [delimiter, line + ending, delimiter, *lines]

    _, end = bounds
    return [*lines[:end], line + _line_ending(lines[end]), *lines[end:]]


def _top_level_line(lines: list[str], key: str) -> int:
    bounds = frontmatter_bounds(lines)
    if bounds is None:
        return -1
    start, end = bounds
    prefix = f"{key}:"
    return next((i for i in range(start + 1, end) if lines[i].startswith(prefix)), -1)


def replace_property_value(lines: list[str], key: str, value: str) -> list[str]:
    """Rewrite the value of the line defining ``key``.

    An unindented line inside the front matter wins over nested keys of the
    same name. Indentation and line ending are preserved. Lines are returned
    unchanged when the key is not present.
    """
    index = _top_level_line(lines, key)
    if index == -1:
        index = find_property_line(lines, key)
    if index == -1:
        return list(lines)

    line = lines[index]
    indent = line[: len(line) - len(line.lstrip())]
    updated = list(lines)
    updated[index] = f"{indent}{key}: {value}".rstrip() + _line_ending(line)
    return updated
