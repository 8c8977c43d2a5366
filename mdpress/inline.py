"""
Inline markdown rules.

The emphasis rules must run in the order of `apply_emphasis`: `**` has to
be consumed before `*`, otherwise bold text would be split into two italic
runs.

"""

from re import compile

from mdpress.highlight import escape_html
from mdpress.placeholders import PlaceholderKind, PlaceholderStore

INLINE_CODE_PATTERN = compile(r"`([^`]+)`")
IMAGE_PATTERN = compile(r"!\[([^\]]*)\]\(([^)]+)\)")
LINK_PATTERN = compile(r"\[([^\]]+)\]\(([^)]+)\)")

STRIKETHROUGH_PATTERN = compile(r"~~(.+?)~~")
UNDERLINE_PATTERN = compile(r"\+\+(.+?)\+\+")
BOLD_PATTERN = compile(r"\*\*(.+?)\*\*")
ITALIC_PATTERN = compile(r"\*(.+?)\*")


def _attribute(value: str) -> str:
    return value.replace('"', "&quot;")


def protect_inline_code(text: str, placeholders: PlaceholderStore) -> str:
    """
    Render `code` spans. The escaped span is swapped for an inline token so
    emphasis rules never reach inside it.
    """
    return INLINE_CODE_PATTERN.sub(
        lambda match: placeholders.protect(
            PlaceholderKind.INLINE_CODE, f"<code>{escape_html(match.group(1))}</code>"
        ),
        text,
    )


def render_images(text: str) -> str:
    return IMAGE_PATTERN.sub(
        lambda match: (
            f'<img src="{_attribute(match.group(2))}" alt="{_attribute(match.group(1))}">'
        ),
        text,
    )


def render_links(text: str) -> str:
    return LINK_PATTERN.sub(
        lambda match: (
            f'<a href="{_attribute(match.group(2))}" target="_blank" '
            f'rel="noopener noreferrer">{match.group(1)}</a>'
        ),
        text,
    )


def apply_emphasis(text: str) -> str:
    text = STRIKETHROUGH_PATTERN.sub(r"<del>\1</del>", text)
    text = UNDERLINE_PATTERN.sub(r"<u>\1</u>", text)
    text = BOLD_PATTERN.sub(r"<strong>\1</strong>", text)
    text = ITALIC_PATTERN.sub(r"<em>\1</em>", text)
    return text


def render_cell(text: str, placeholders: PlaceholderStore) -> str:
    """Inline formatting allowed inside table cells: code and emphasis only."""
    return apply_emphasis(protect_inline_code(text, placeholders))
