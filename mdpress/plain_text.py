"""
Markup stripping for the search index.

This works on the raw markdown rather than on rendered HTML, so the text
of code blocks survives while cards and other custom blocks disappear.

"""

from re import MULTILINE, compile

CODE_FENCE_OPEN_PATTERN = compile(r"```[\w+#-]*\n")
CODE_FENCE_PATTERN = compile(r"```")
CUSTOM_BLOCK_PATTERN = compile(r":::(?:bookmark|article|magazine|dictionary)\n[\s\S]*?:::")
CALLOUT_HEADER_PATTERN = compile(r"^> \[!\w+\][ \t]*\n", MULTILINE)
IMAGE_PATTERN = compile(r"!\[([^\]]*)\]\(([^)]+)\)")
LINK_PATTERN = compile(r"\[([^\]]+)\]\(([^)]+)\)")
HEADING_PATTERN = compile(r"^#{1,6}\s+", MULTILINE)
HORIZONTAL_RULE_PATTERN = compile(r"\n[-*_]{3,}\n")
BOLD_PATTERN = compile(r"(\*\*|__)(.*?)\1")
ITALIC_PATTERN = compile(r"(\*|_)(.*?)\1")
STRIKETHROUGH_PATTERN = compile(r"~~(.*?)~~")
UNDERLINE_PATTERN = compile(r"\+\+(.*?)\+\+")
INLINE_CODE_PATTERN = compile(r"`([^`]+)`")
QUOTE_PATTERN = compile(r"^>\s+", MULTILINE)
UNORDERED_MARKER_PATTERN = compile(r"^[\s-]*[-+*]\s+", MULTILINE)
ORDERED_MARKER_PATTERN = compile(r"^\s*\d+\.\s+", MULTILINE)
HTML_TAG_PATTERN = compile(r"<[^>]*>")
WHITESPACE_PATTERN = compile(r"\s+")


def extract_plain_text(markdown: str) -> str:
    """Reduce markdown to whitespace-collapsed prose suitable for indexing."""
    if not markdown:
        return ""

    text = CODE_FENCE_OPEN_PATTERN.sub("", markdown)
    text = CODE_FENCE_PATTERN.sub("", text)

    # Cards carry slugs and URLs, not prose
    text = CUSTOM_BLOCK_PATTERN.sub("", text)
    text = CALLOUT_HEADER_PATTERN.sub("", text)

    text = IMAGE_PATTERN.sub(r"\1", text)
    text = LINK_PATTERN.sub(r"\1", text)

    text = HEADING_PATTERN.sub("", text)
    text = HORIZONTAL_RULE_PATTERN.sub("\n", text)

    text = BOLD_PATTERN.sub(r"\2", text)
    text = ITALIC_PATTERN.sub(r"\2", text)
    text = STRIKETHROUGH_PATTERN.sub(r"\1", text)
    text = UNDERLINE_PATTERN.sub(r"\1", text)
    text = INLINE_CODE_PATTERN.sub(r"\1", text)

    text = QUOTE_PATTERN.sub("", text)
    text = UNORDERED_MARKER_PATTERN.sub("", text)
    text = ORDERED_MARKER_PATTERN.sub("", text)

    text = HTML_TAG_PATTERN.sub("", text)

    return WHITESPACE_PATTERN.sub(" ", text).strip()
