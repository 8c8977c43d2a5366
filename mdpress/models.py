from typing import Union

from pydantic import BaseModel, ConfigDict, Field

FrontMatter = dict[str, Union[str, bool, list[str]]]
"""Parsed front matter. Only `tags` and `articles` hold lists."""


class ParsedDocument(BaseModel):
    """A content file split into its front matter and markdown body."""

    metadata: FrontMatter = {}
    content: str = ""


class EntrySummary(BaseModel):
    """
    Fields shared by every cross reference entry. These are the read-only
    lookups handed to the renderer so that `:::article` style blocks can
    resolve a slug into a card.

    """

    slug: str
    title: str = "Untitled"
    emoji: str = "📄"
    date: str = ""
    listed: bool = True

    model_config = ConfigDict(frozen=True)


class PostSummary(EntrySummary):
    tags: list[str] = []
    quicklook: str = ""


class MagazineSummary(EntrySummary):
    emoji: str = "📚"
    description: str = ""
    articles: list[str] = []
    """Slugs of the posts collected in this magazine"""


class DictionaryEntrySummary(EntrySummary):
    reading: str = ""
    description: str = ""


class CrossReferences(BaseModel):
    """Lookup lists borrowed by the renderer for the duration of one render."""

    posts: list[PostSummary] = Field(default_factory=list)
    magazines: list[MagazineSummary] = Field(default_factory=list)
    dictionary: list[DictionaryEntrySummary] = Field(default_factory=list)

    def find_post(self, slug: str) -> PostSummary | None:
        return next((post for post in self.posts if post.slug == slug), None)

    def find_magazine(self, slug: str) -> MagazineSummary | None:
        return next((magazine for magazine in self.magazines if magazine.slug == slug), None)

    def find_dictionary_entry(self, slug: str) -> DictionaryEntrySummary | None:
        return next((entry for entry in self.dictionary if entry.slug == slug), None)


class Heading(BaseModel):
    level: int = Field(ge=1, le=5)
    title: str
    """Heading text reduced to plain text"""

    id: str
    """`heading-<n>`, numbered in document order within one render"""


class RenderResult(BaseModel):
    html: str
    headings: list[Heading] = []
