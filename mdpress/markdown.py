"""
Markdown to HTML rendering.

The renderer is an ordered series of passes over the whole document. The
order matters: block constructs that must not be touched by the inline
rules (callouts, code, cards, tables) are rendered first and swapped for
placeholder tokens, the inline rules and paragraph wrapping then run on
what is left, and finally the tokens are restored.

"""

from dataclasses import dataclass, field
from html import unescape
from re import MULTILINE, compile, escape, split

from mdpress import cards
from mdpress.config import MdpressConfig
from mdpress.frontmatter import normalize_newlines
from mdpress.highlight import Highlighter, PlainHighlighter, PygmentsHighlighter
from mdpress.inline import apply_emphasis, protect_inline_code, render_images, render_links
from mdpress.lists import render_lists
from mdpress.logger import get_logger
from mdpress.models import (
    CrossReferences,
    DictionaryEntrySummary,
    Heading,
    MagazineSummary,
    PostSummary,
    RenderResult,
)
from mdpress.placeholders import PlaceholderKind, PlaceholderStore
from mdpress.tables import protect_tables
from mdpress.toc import build_table_of_contents

logger = get_logger(__name__)

CALLOUT_HEADER_PATTERN = compile(r"^> \[!(\w+)\]\s*$")
CALLOUT_QUOTE_PATTERN = compile(r"^>\s?")
CODE_BLOCK_PATTERN = compile(r"```([\w+#-]+)?\n([\s\S]*?)```")
BOOKMARK_PATTERN = compile(r":::bookmark\n([\s\S]*?):::")
REFERENCE_PATTERN = compile(r":::(article|magazine|dictionary)\n([^\n]+)\n:::")
HEADING_PATTERN = compile(r"^(#{1,5}) (.+)$", MULTILINE)
HORIZONTAL_RULE_PATTERN = compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
BLOCK_TAG_PATTERN = compile(r"^<(?:h[1-6]|ul|ol|pre|hr|blockquote|div|table|nav)\b")
HTML_TAG_PATTERN = compile(r"<[^>]*>")


@dataclass
class RenderState:
    """Accumulators threaded through one top level render, callouts included."""

    references: CrossReferences
    placeholders: PlaceholderStore = field(default_factory=PlaceholderStore)
    headings: list[Heading] = field(default_factory=list)

    @property
    def heading_prefix(self) -> str:
        return f"heading-{self.placeholders.nonce}-"


class MarkdownRenderer:
    def __init__(
        self,
        config: MdpressConfig | None = None,
        highlighter: Highlighter | None = None,
    ):
        self.config = config or MdpressConfig()
        self.labels = self.config.labels

        if highlighter is None:
            highlighter = PygmentsHighlighter() if self.config.highlight else PlainHighlighter()
        self.highlighter = highlighter

    def render(self, text: str, references: CrossReferences | None = None) -> str:
        return self.render_document(text, references).html

    def render_document(
        self, text: str, references: CrossReferences | None = None
    ) -> RenderResult:
        """
        Render a markdown body to an HTML fragment.

        Never raises for malformed content: unresolved cards render as "not
        found" cards and anything unrecognised passes through as text. When
        the document has h2-h4 headings a table of contents is prepended.

        """
        state = RenderState(references=references or CrossReferences())

        html = self._render_body(normalize_newlines(text), state, depth=0)
        html = state.placeholders.restore(html)
        html, headings = self._number_headings(html, state)

        toc = build_table_of_contents(headings, self.labels.toc_title)
        if toc:
            html = toc + "\n" + html

        return RenderResult(html=html, headings=headings)

    def _render_body(self, text: str, state: RenderState, depth: int) -> str:
        placeholders = state.placeholders

        text = self._protect_callouts(text, state, depth)
        text = self._protect_code_blocks(text, placeholders)
        text = self._protect_bookmarks(text, placeholders)
        text = self._protect_references(text, state)
        text = protect_tables(text, placeholders)

        text = protect_inline_code(text, placeholders)
        # Images before links, `![alt](src)` contains a link
        text = render_images(text)
        text = render_links(text)
        text = self._render_headings(text, state)
        text = render_horizontal_rules(text)
        text = render_lists(text)
        text = apply_emphasis(text)

        return wrap_paragraphs(text, placeholders)

    def _protect_callouts(self, text: str, state: RenderState, depth: int) -> str:
        """
        Swap `> [!TYPE]` blocks for tokens. The quoted body is rendered with
        this same pipeline one level deeper, sharing the heading sequence and
        placeholders of the enclosing document.
        """
        lines = text.split("\n")
        result: list[str] = []
        index = 0

        while index < len(lines):
            header = CALLOUT_HEADER_PATTERN.match(lines[index])
            if header is None:
                result.append(lines[index])
                index += 1
                continue

            index += 1
            body_lines = []
            while index < len(lines) and lines[index].startswith(">"):
                body_lines.append(CALLOUT_QUOTE_PATTERN.sub("", lines[index], count=1))
                index += 1
            body = "\n".join(body_lines).strip()

            if depth + 1 > self.config.max_callout_depth:
                logger.warning(
                    f"Callout nesting exceeds {self.config.max_callout_depth} levels, "
                    "rendering the body as raw text"
                )
                html = cards.callout_too_deep(body, self.labels)
            else:
                # Code inside the callout is protected before the nested pass
                # so quoted lines inside it are never read as callouts
                body = self._protect_code_blocks(body, state.placeholders)
                content = self._render_body(body, state, depth + 1)
                html = cards.callout(header.group(1), content, self.labels)

            result.append(state.placeholders.protect(PlaceholderKind.CALLOUT, html))

        return "\n".join(result)

    def _protect_code_blocks(self, text: str, placeholders: PlaceholderStore) -> str:
        def replace(match) -> str:
            language = match.group(1) or "text"
            code = match.group(2).strip()
            highlighted = self.highlighter.highlight(code, language)
            return placeholders.protect(
                PlaceholderKind.CODE_BLOCK, cards.code_block(highlighted, language, self.labels)
            )

        return CODE_BLOCK_PATTERN.sub(replace, text)

    def _protect_bookmarks(self, text: str, placeholders: PlaceholderStore) -> str:
        return BOOKMARK_PATTERN.sub(
            lambda match: placeholders.protect(
                PlaceholderKind.BOOKMARK, cards.bookmark(match.group(1).strip())
            ),
            text,
        )

    def _protect_references(self, text: str, state: RenderState) -> str:
        references = state.references

        def replace(match) -> str:
            kind, slug = match.group(1), match.group(2).strip()

            entry: PostSummary | MagazineSummary | DictionaryEntrySummary | None
            if kind == "article":
                entry = references.find_post(slug)
                html = cards.article(slug, entry, self.labels)
                placeholder_kind = PlaceholderKind.ARTICLE
            elif kind == "magazine":
                entry = references.find_magazine(slug)
                html = cards.magazine(slug, entry, self.labels)
                placeholder_kind = PlaceholderKind.MAGAZINE
            else:
                entry = references.find_dictionary_entry(slug)
                html = cards.dictionary(slug, entry, self.labels)
                placeholder_kind = PlaceholderKind.DICTIONARY

            if entry is None:
                logger.info(f"Unresolved {kind} reference `{slug}`")

            return state.placeholders.protect(placeholder_kind, html)

        return REFERENCE_PATTERN.sub(replace, text)

    def _render_headings(self, text: str, state: RenderState) -> str:
        """
        Headings get a provisional id here. Callouts are rendered before the
        text around them, so final `heading-N` ids are only assigned once the
        whole document is assembled.
        """

        def replace(match) -> str:
            level = len(match.group(1))
            heading = Heading(
                level=level,
                title=match.group(2),
                id=f"{state.heading_prefix}{len(state.headings)}",
            )
            state.headings.append(heading)
            return f'<h{level} id="{heading.id}">{heading.title}</h{level}>'

        return HEADING_PATTERN.sub(replace, text)

    def _number_headings(self, html: str, state: RenderState) -> tuple[str, list[Heading]]:
        """Replace provisional ids with `heading-0`, `heading-1`... in document order."""
        provisional = {heading.id: heading for heading in state.headings}
        headings: list[Heading] = []

        def replace(match) -> str:
            heading = provisional[match.group(1)].model_copy(
                update={
                    "id": f"heading-{len(headings)}",
                    "title": self._heading_label(match.group(2)),
                }
            )
            headings.append(heading)
            return f'<h{heading.level} id="{heading.id}">{match.group(2)}</h{heading.level}>'

        pattern = compile(rf'<h[1-5] id="({escape(state.heading_prefix)}\d+)">(.*?)</h[1-5]>')
        return pattern.sub(replace, html), headings

    def _heading_label(self, title_html: str) -> str:
        """The rendered heading with its tags removed, for the table of contents."""
        return unescape(HTML_TAG_PATTERN.sub("", title_html)).strip()


def render_horizontal_rules(text: str) -> str:
    return "\n".join(
        "<hr>" if HORIZONTAL_RULE_PATTERN.match(line) else line for line in text.split("\n")
    )


def wrap_paragraphs(text: str, placeholders: PlaceholderStore) -> str:
    """
    Wrap prose blocks, separated by blank lines, in `<p>` tags.

    Blocks that already start with a block level tag or consist of a single
    block token are left alone. In blocks mixing tokens and prose only the
    prose is wrapped. Newlines inside a paragraph become `<br>`.

    """
    blocks = []

    for block in split(r"\n\n+", text):
        block = block.strip()
        if not block:
            continue

        if BLOCK_TAG_PATTERN.match(block) or placeholders.is_block_token(block):
            blocks.append(block)
        elif placeholders.contains_block_token(block):
            for part in placeholders.split_block_tokens(block):
                if placeholders.is_block_token(part):
                    blocks.append(part)
                elif part.strip():
                    blocks.append(_paragraph(part.strip()))
        else:
            blocks.append(_paragraph(block))

    return "\n".join(blocks)


def _paragraph(text: str) -> str:
    return "<p>" + text.replace("\n", "<br>") + "</p>"


def render_markdown(
    text: str,
    posts: list[PostSummary] | None = None,
    magazines: list[MagazineSummary] | None = None,
    dictionary: list[DictionaryEntrySummary] | None = None,
) -> str:
    """Render with the default configuration and the given lookup lists."""
    references = CrossReferences(
        posts=posts or [], magazines=magazines or [], dictionary=dictionary or []
    )
    return MarkdownRenderer().render(text, references)
