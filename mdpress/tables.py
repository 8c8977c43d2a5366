"""Pipe table scanning and rendering."""

from re import compile, split
from typing import Literal

from mdpress.inline import render_cell
from mdpress.placeholders import PlaceholderKind, PlaceholderStore

Alignment = Literal["left", "center", "right"]

ROW_PATTERN = compile(r"^\|.+\|$")
SEPARATOR_PATTERN = compile(r"^\|[\s\-:|]+\|$")


def split_cells(line: str) -> list[str]:
    """Split a `|a|b|` row into trimmed cells. `\\|` stays literal cell content."""
    inner = line[1:-1]
    return [cell.replace("\\|", "|").strip() for cell in split(r"(?<!\\)\|", inner)]


def parse_alignment(cell: str) -> Alignment:
    left = cell.startswith(":")
    right = cell.endswith(":")
    if left and right:
        return "center"
    if right:
        return "right"
    return "left"


def build_table(lines: list[str], placeholders: PlaceholderStore) -> str:
    """Build table HTML from a header row, a separator row and any body rows."""
    header_line, separator_line, *body_lines = lines
    alignments = [parse_alignment(cell) for cell in split_cells(separator_line)]

    def render_row(line: str, tag: str) -> str:
        cells = []
        for index, cell in enumerate(split_cells(line)):
            alignment = alignments[index] if index < len(alignments) else "left"
            cells.append(
                f'<{tag} style="text-align: {alignment}">{render_cell(cell, placeholders)}</{tag}>'
            )
        return "<tr>" + "".join(cells) + "</tr>"

    rows = ["<table>", "<thead>", render_row(header_line, "th"), "</thead>", "<tbody>"]
    rows.extend(render_row(line, "td") for line in body_lines)
    rows.extend(["</tbody>", "</table>"])
    return "\n".join(rows)


def protect_tables(text: str, placeholders: PlaceholderStore) -> str:
    """
    Replace every table with a placeholder token.

    A table opens on a `|...|` row directly followed by a separator row such
    as `|---|:--:|--:|` and runs until the first line that is not a row.
    Rows without a separator are left alone as plain text.

    """
    lines = text.split("\n")
    result: list[str] = []
    index = 0

    while index < len(lines):
        line = lines[index]
        is_header = ROW_PATTERN.match(line) is not None
        has_separator = index + 1 < len(lines) and SEPARATOR_PATTERN.match(lines[index + 1])

        if not (is_header and has_separator):
            result.append(line)
            index += 1
            continue

        table_lines = []
        while index < len(lines) and ROW_PATTERN.match(lines[index]):
            table_lines.append(lines[index])
            index += 1

        table = build_table(table_lines, placeholders)
        result.append(placeholders.protect(PlaceholderKind.TABLE, table))

    return "\n".join(result)
