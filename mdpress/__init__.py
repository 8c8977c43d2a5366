"""File-backed markdown publishing: rendering, plain text extraction and search."""

from mdpress.config import MdpressConfig
from mdpress.content import ContentStore, ContentType
from mdpress.frontmatter import dump_front_matter, parse_front_matter
from mdpress.markdown import MarkdownRenderer, render_markdown
from mdpress.models import (
    CrossReferences,
    DictionaryEntrySummary,
    Heading,
    MagazineSummary,
    ParsedDocument,
    PostSummary,
    RenderResult,
)
from mdpress.plain_text import extract_plain_text
from mdpress.search import SearchDocument, SearchEngine, SearchResult
from mdpress.site import Site

__all__ = [
    "ContentStore",
    "ContentType",
    "CrossReferences",
    "DictionaryEntrySummary",
    "Heading",
    "MagazineSummary",
    "MarkdownRenderer",
    "MdpressConfig",
    "ParsedDocument",
    "PostSummary",
    "RenderResult",
    "SearchDocument",
    "SearchEngine",
    "SearchResult",
    "Site",
    "dump_front_matter",
    "extract_plain_text",
    "parse_front_matter",
    "render_markdown",
]
