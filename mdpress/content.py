"""File-backed storage of content entries, one markdown file per entry."""

from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from mdpress.exceptions import ContentNotFoundError, InvalidSlugError
from mdpress.frontmatter import dump_front_matter, parse_front_matter
from mdpress.logger import get_logger
from mdpress.models import (
    CrossReferences,
    DictionaryEntrySummary,
    EntrySummary,
    FrontMatter,
    MagazineSummary,
    ParsedDocument,
    PostSummary,
)
from mdpress.search import SearchDocument

logger = get_logger(__name__)

MARKDOWN_SUFFIX = ".md"


class ContentType(str, Enum):
    POSTS = "posts"
    TOPICS = "topics"
    MAGAZINES = "magazines"
    DICTIONARY = "dictionary"

    @property
    def summary_class(self) -> type[EntrySummary]:
        if self is ContentType.MAGAZINES:
            return MagazineSummary
        if self is ContentType.DICTIONARY:
            return DictionaryEntrySummary
        return PostSummary


def validate_slug(slug: str) -> str:
    """Slugs name a file directly inside their content directory."""
    if not slug or slug.startswith(".") or "/" in slug or "\\" in slug or "\x00" in slug:
        raise InvalidSlugError(f"Invalid slug: `{slug}`")
    return slug


def summarize(content_type: ContentType, slug: str, metadata: FrontMatter) -> EntrySummary:
    """
    Build the lookup record for an entry. Missing or mistyped fields fall back
    to their defaults instead of failing, as hand edited files are common.
    """
    summary_class = content_type.summary_class

    values: dict[str, Any] = {"slug": slug, "listed": metadata.get("listed") is not False}
    for field_name, field in summary_class.model_fields.items():
        if field_name in values or field_name not in metadata:
            continue
        value = metadata[field_name]
        if isinstance(field.default, list):
            if isinstance(value, list):
                values[field_name] = value
        elif isinstance(value, str) and value:
            values[field_name] = value

    return summary_class(**values)


class ContentStore:
    """
    Reads and writes the four content directories below `root`. Files are
    re-read on every call, nothing is cached between requests.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def directory(self, content_type: ContentType) -> Path:
        return self.root / ContentType(content_type).value

    def path_for(self, content_type: ContentType, slug: str) -> Path:
        return self.directory(content_type) / f"{validate_slug(slug)}{MARKDOWN_SUFFIX}"

    def list_entries(
        self, content_type: ContentType, only_listed: bool = False
    ) -> list[EntrySummary]:
        """All entries of one type, newest `date` first."""
        content_type = ContentType(content_type)
        directory = self.directory(content_type)
        if not directory.is_dir():
            return []

        entries = []
        for path in sorted(directory.glob(f"*{MARKDOWN_SUFFIX}")):
            document = parse_front_matter(path.read_text(encoding="utf-8"))
            entry = summarize(content_type, path.stem, document.metadata)
            if only_listed and not entry.listed:
                continue
            entries.append(entry)

        entries.sort(key=lambda entry: entry.date, reverse=True)
        return entries

    def read(self, content_type: ContentType, slug: str) -> ParsedDocument:
        path = self.path_for(content_type, slug)
        if not path.is_file():
            raise ContentNotFoundError(ContentType(content_type).value, slug)
        return parse_front_matter(path.read_text(encoding="utf-8"))

    def read_raw(self, content_type: ContentType, slug: str) -> str:
        path = self.path_for(content_type, slug)
        if not path.is_file():
            raise ContentNotFoundError(ContentType(content_type).value, slug)
        return path.read_text(encoding="utf-8")

    def save(
        self,
        content_type: ContentType,
        slug: str,
        metadata: Mapping[str, Any],
        body: str,
    ) -> Path:
        """Write an entry, replacing any existing file for the slug."""
        path = self.path_for(content_type, slug)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dump_front_matter(metadata, body), encoding="utf-8")
        logger.info(f"Saved {path}")
        return path

    def delete(self, content_type: ContentType, slug: str) -> None:
        path = self.path_for(content_type, slug)
        if not path.is_file():
            raise ContentNotFoundError(ContentType(content_type).value, slug)
        path.unlink()
        logger.info(f"Deleted {path}")

    def cross_references(self) -> CrossReferences:
        """Lookup lists for `:::article`, `:::magazine` and `:::dictionary` blocks."""
        return CrossReferences(
            posts=[
                *self.list_entries(ContentType.POSTS),
                *self.list_entries(ContentType.TOPICS),
            ],
            magazines=self.list_entries(ContentType.MAGAZINES),
            dictionary=self.list_entries(ContentType.DICTIONARY),
        )

    def search_documents(self, include_unlisted: bool = False) -> list[SearchDocument]:
        documents = []
        for content_type in ContentType:
            for entry in self.list_entries(content_type, only_listed=not include_unlisted):
                document = self.read(content_type, entry.slug)
                documents.append(
                    SearchDocument(
                        id=entry.slug,
                        title=entry.title,
                        content=document.content,
                        tags=getattr(entry, "tags", []),
                        type=content_type.value,
                        emoji=entry.emoji,
                        date=entry.date,
                    )
                )
        return documents
