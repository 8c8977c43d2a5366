"""
Front matter handling for content files.

A content file starts with a block of `key: value` lines fenced by `---`
lines, followed by a blank line and the markdown body:

    ---
    title: Hello
    tags: ["rust", "memory"]
    listed: false
    ---

    Body text...

"""

import json
from typing import Any, Mapping

from mdpress.logger import get_logger
from mdpress.models import FrontMatter, ParsedDocument

logger = get_logger(__name__)

DELIMITER = "---"

ARRAY_KEYS = frozenset({"tags", "articles"})
"""Keys whose values are JSON arrays of strings. Everything else is scalar."""


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse_front_matter(text: str) -> ParsedDocument:
    """
    Split a raw content file into its metadata and markdown body.

    Never raises: text without a well formed front matter block comes back
    untouched with empty metadata, and malformed lines or array values are
    skipped or replaced by an empty list.

    """
    text = normalize_newlines(text)
    lines = text.split("\n")

    if not lines or lines[0] != DELIMITER:
        return ParsedDocument(metadata={}, content=text)

    closing_index = None
    # The closing delimiter needs a line after it, even an empty one
    for index in range(1, len(lines) - 1):
        if lines[index] == DELIMITER:
            closing_index = index
            break

    if closing_index is None:
        return ParsedDocument(metadata={}, content=text)

    metadata = parse_metadata_lines(lines[1:closing_index])

    body_lines = lines[closing_index + 1 :]
    if body_lines and body_lines[0] == "" and len(body_lines) > 1:
        body_lines = body_lines[1:]

    return ParsedDocument(metadata=metadata, content="\n".join(body_lines))


def parse_metadata_lines(lines: list[str]) -> FrontMatter:
    metadata: FrontMatter = {}

    for line in lines:
        key, separator, raw_value = line.partition(":")
        if not separator:
            continue

        key = key.strip()
        value = raw_value.strip()
        if not key or not value:
            continue

        # Later duplicates overwrite earlier ones
        metadata[key] = parse_value(key, value)

    return metadata


def parse_value(key: str, value: str) -> str | bool | list[str]:
    if key in ARRAY_KEYS:
        return parse_array(key, value)
    if value == "true":
        return True
    if value == "false":
        return False
    return value


def parse_array(key: str, value: str) -> list[str]:
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        logger.debug(f"Front matter field `{key}` is not valid JSON: {value!r}")
        return []

    if not isinstance(parsed, list):
        logger.debug(f"Front matter field `{key}` is not a JSON array: {value!r}")
        return []

    return [str(item) for item in parsed]


def dump_front_matter(metadata: Mapping[str, Any], body: str) -> str:
    """
    Serialize metadata and body back into the content file format.

    `parse_front_matter` inverts this for string, boolean and string-array
    values. `None` values are dropped.

    """
    lines = [DELIMITER]
    for key, value in metadata.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            lines.append(f"{key}: {json.dumps(list(value), ensure_ascii=False)}")
        elif isinstance(value, bool):
            lines.append(f"{key}: {'true' if value else 'false'}")
        else:
            lines.append(f"{key}: {value}")
    lines.append(DELIMITER)

    return "\n".join(lines) + "\n\n" + body
