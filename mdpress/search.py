"""
In-memory full text search over the site's content.

Every query rescans all documents; the corpus of a personal site is small
enough that no inverted index is kept.

"""

from re import IGNORECASE, compile, escape, findall
from threading import Lock
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, model_validator

from mdpress.highlight import escape_html
from mdpress.logger import get_logger
from mdpress.plain_text import extract_plain_text

logger = get_logger(__name__)

TITLE_MATCH_SCORE = 10
TITLE_EXACT_BONUS = 5
TAG_MATCH_SCORE = 5
TAG_EXACT_BONUS = 3
BODY_OCCURRENCE_SCORE = 1

SNIPPET_MAX_LENGTH = 120
SNIPPET_LEADING_CONTEXT = 40
SNIPPET_WORD_BOUNDARY_WINDOW = 10

WHITESPACE_PATTERN = compile(r"\s+")


class SearchDocument(BaseModel):
    """
    One indexed entry. The plain text and the lower-cased copies used for
    matching are derived from `title`, `tags` and the raw markdown `content`
    when the document is created.

    """

    id: str
    """Slug of the entry"""

    title: str
    content: str = ""
    """Raw markdown body"""

    tags: list[str] = []
    type: str = "posts"
    emoji: str = ""
    date: str = ""

    plain_text: str = ""
    normalized_title: str = ""
    normalized_tags: list[str] = []
    normalized_text: str = ""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    def compute_search_fields(cls, values: Any) -> Any:  # noqa: N805
        if not isinstance(values, dict):
            return values

        values = dict(values)
        plain_text = extract_plain_text(values.get("content") or "")
        values["plain_text"] = plain_text
        values["normalized_title"] = str(values.get("title", "")).lower()
        values["normalized_tags"] = [str(tag).lower() for tag in values.get("tags") or []]
        values["normalized_text"] = plain_text.lower()
        return values


class SearchResult(BaseModel):
    item: SearchDocument
    score: int
    snippet: str
    """HTML-escaped excerpt with every query term wrapped in `<mark>`"""


class SearchEngine:
    """
    Scores documents against whitespace separated query terms.

    The document list is held as an immutable tuple that mutations replace
    under a lock, so a query always sees either the old or the new index.
    `rebuild` is the way to re-index: `add_document` never deduplicates by
    id, so adding without clearing first leaves stale copies behind.

    """

    def __init__(self) -> None:
        self._documents: tuple[SearchDocument, ...] = ()
        self._lock = Lock()

    @property
    def documents(self) -> list[SearchDocument]:
        return list(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def add_document(self, document: SearchDocument | dict) -> SearchDocument:
        if isinstance(document, dict):
            document = SearchDocument(**document)

        with self._lock:
            self._documents = (*self._documents, document)
        return document

    def clear(self) -> None:
        with self._lock:
            self._documents = ()

    def rebuild(self, documents: Iterable[SearchDocument | dict]) -> int:
        """Replace the whole index in one step. Returns the new document count."""
        prepared = tuple(
            SearchDocument(**document) if isinstance(document, dict) else document
            for document in documents
        )
        with self._lock:
            self._documents = prepared

        logger.info(f"Search index rebuilt with {len(prepared)} documents")
        return len(prepared)

    def search(self, query: str) -> list[SearchResult]:
        terms = split_query(query)
        if not terms:
            return []

        results = []
        for document in self._documents:
            score = calculate_score(document, terms)
            if score > 0:
                results.append(
                    SearchResult(
                        item=document,
                        score=score,
                        snippet=generate_snippet(document.plain_text, terms),
                    )
                )

        # sorted() is stable, equal scores stay in insertion order
        return sorted(results, key=lambda result: result.score, reverse=True)


def split_query(query: str) -> list[str]:
    if not query or not query.strip():
        return []
    return WHITESPACE_PATTERN.sub(" ", query.lower()).strip().split(" ")


def calculate_score(document: SearchDocument, terms: list[str]) -> int:
    score = 0

    for term in terms:
        if term in document.normalized_title:
            score += TITLE_MATCH_SCORE
            if document.normalized_title == term:
                score += TITLE_EXACT_BONUS

        if any(term in tag for tag in document.normalized_tags):
            score += TAG_MATCH_SCORE
            if term in document.normalized_tags:
                score += TAG_EXACT_BONUS

        score += BODY_OCCURRENCE_SCORE * len(findall(escape(term), document.normalized_text))

    return score


def generate_snippet(text: str, terms: list[str]) -> str:
    """
    Cut an excerpt around the first occurrence of the first term.

    The window starts 40 characters before the match, moved back to the
    preceding space when one is close by, and spans at most 120 characters.
    Without a match the excerpt is the start of the text.

    """
    if not text:
        return ""

    index = text.lower().find(terms[0])

    if index == -1:
        snippet = text
        if len(text) > SNIPPET_MAX_LENGTH:
            snippet = text[:SNIPPET_MAX_LENGTH] + "..."
        return highlight_terms(escape_html(snippet), terms)

    start = max(0, index - SNIPPET_LEADING_CONTEXT)
    end = min(len(text), start + SNIPPET_MAX_LENGTH)

    if start > 0:
        previous_space = text.rfind(" ", 0, start + 1)
        if previous_space > start - SNIPPET_WORD_BOUNDARY_WINDOW:
            start = previous_space + 1

    snippet = text[start:end]
    if start > 0:
        snippet = "..." + snippet
    if end < len(text):
        snippet = snippet + "..."

    return highlight_terms(escape_html(snippet), terms)


def highlight_terms(snippet: str, terms: list[str]) -> str:
    """
    Wrap every case-insensitive occurrence of any term in `<mark>`, in a single pass.

    The snippet is already HTML escaped, so entities such as `&amp;` are
    matched as a whole and left alone unless a term itself starts with `&`.
    """
    escaped_terms = sorted({escape_html(term) for term in terms if term}, key=len, reverse=True)
    if not escaped_terms:
        return snippet

    leading = [escape(term) for term in escaped_terms if term.startswith("&")]
    others = [escape(term) for term in escaped_terms if not term.startswith("&")]
    alternatives = [f"(?P<term>{'|'.join(leading)})"] if leading else []
    alternatives.append(r"(?P<entity>&#?\w+;)")
    if others:
        alternatives.append(f"(?P<other>{'|'.join(others)})")
    pattern = compile("|".join(alternatives), IGNORECASE)

    def replace(match) -> str:
        if match.group("entity") is not None:
            return match.group(0)
        return f"<mark>{match.group(0)}</mark>"

    return pattern.sub(replace, snippet)
