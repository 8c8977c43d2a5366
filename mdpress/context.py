"""Context model for passing page information through page plugins."""

from pydantic import BaseModel, Field

from mdpress.content import ContentType
from mdpress.models import CrossReferences, FrontMatter, Heading


class PageContext(BaseModel):
    """Context object passed through plugins containing page metadata and content."""

    content_type: ContentType
    slug: str

    # Raw content from file
    raw_content: str

    # Markdown body once the front matter is split off, None until then
    content: str | None = None

    metadata: FrontMatter = Field(default_factory=dict)
    title: str = "Untitled"
    emoji: str = "📄"
    date: str = ""
    tags: list[str] = []

    references: CrossReferences = Field(default_factory=CrossReferences)

    # Plugin outputs
    html: str = ""
    headings: list[Heading] = []
    plain_text: str = ""

    @property
    def body(self) -> str:
        """The markdown to render, the whole file when no front matter was split off."""
        return self.raw_content if self.content is None else self.content

    @property
    def url(self) -> str:
        return f"/{self.content_type.value}/{self.slug}"
