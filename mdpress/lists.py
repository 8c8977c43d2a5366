"""Nested list reconstruction from indented `- ` and `N. ` lines."""

from dataclasses import dataclass
from re import compile
from typing import Literal

ListType = Literal["ul", "ol"]

UNORDERED_PATTERN = compile(r"^(\s*)- (.+)$")
ORDERED_PATTERN = compile(r"^(\s*)(\d+)\. (.+)$")

CHECKED_PREFIXES = ("[x] ", "[X] ")
UNCHECKED_PREFIX = "[ ] "


@dataclass
class ListLine:
    type: ListType
    level: int
    content: str
    number: int | None = None


@dataclass
class OpenList:
    type: ListType
    level: int


def indent_level(indent: str) -> int:
    """Two spaces or one tab per nesting level."""
    return len(indent.replace("\t", "  ")) // 2


def parse_list_line(line: str) -> ListLine | None:
    match = UNORDERED_PATTERN.match(line)
    if match:
        return ListLine(type="ul", level=indent_level(match.group(1)), content=match.group(2))

    match = ORDERED_PATTERN.match(line)
    if match:
        return ListLine(
            type="ol",
            level=indent_level(match.group(1)),
            content=match.group(3),
            number=int(match.group(2)),
        )
    return None


def render_item_content(content: str) -> tuple[str, bool]:
    """Return the item HTML and whether the item is a checkbox."""
    if content.startswith(CHECKED_PREFIXES):
        return (
            f'<input type="checkbox" checked disabled> '
            f'<span class="checkbox-checked">{content[4:]}</span>',
            True,
        )
    if content.startswith(UNCHECKED_PREFIX):
        return f'<input type="checkbox" disabled> <span>{content[4:]}</span>', True
    return content, False


def open_tag(item: ListLine) -> str:
    start = f' start="{item.number}"' if item.type == "ol" and item.number != 1 else ""
    return f"<{item.type}{start}>"


def build_nested_list(items: list[ListLine]) -> str:
    """
    Turn a run of list lines into nested `<ul>`/`<ol>` markup.

    A stack holds the lists still open. Lists deeper than the current line
    are closed first; then the line either starts a new (nested) list or
    becomes a sibling of the item on top of the stack.

    """
    html: list[str] = []
    stack: list[OpenList] = []
    has_checkbox = False

    for item in items:
        content, is_checkbox = render_item_content(item.content)
        has_checkbox = has_checkbox or is_checkbox

        while stack and stack[-1].level > item.level:
            html.append(f"</li></{stack.pop().type}>")

        if not stack or stack[-1].level < item.level:
            html.append(f"{open_tag(item)}<li>{content}")
            stack.append(OpenList(type=item.type, level=item.level))
        else:
            html.append(f"</li><li>{content}")

    while stack:
        html.append(f"</li></{stack.pop().type}>")

    rendered = "".join(html)
    # Only an outer bullet list is styled as a checklist
    if has_checkbox and items and items[0].type == "ul":
        rendered = rendered.replace("<ul", '<ul class="checkbox-list"', 1)
    return rendered


def render_lists(text: str) -> str:
    """Replace every contiguous run of list lines with its nested HTML."""
    lines = text.split("\n")
    result: list[str] = []
    index = 0

    while index < len(lines):
        item = parse_list_line(lines[index])
        if item is None:
            result.append(lines[index])
            index += 1
            continue

        run = []
        # Blank lines and non-list lines both end the run
        while item is not None:
            run.append(item)
            index += 1
            item = parse_list_line(lines[index]) if index < len(lines) else None

        result.append(build_nested_list(run))

    return "\n".join(result)
