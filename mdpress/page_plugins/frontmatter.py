"""Frontmatter plugin for splitting metadata off raw content files."""

from mdpress.context import PageContext
from mdpress.frontmatter import parse_front_matter
from mdpress.page_plugins.base import PagePlugin
from mdpress.page_plugins.config import FrontmatterPluginConfig, PluginName


class FrontmatterPlugin(PagePlugin[FrontmatterPluginConfig]):
    """Plugin to extract front matter and the markdown body from raw content."""

    name = PluginName.FRONTMATTER

    async def process(self, ctx: PageContext) -> PageContext:
        document = parse_front_matter(ctx.raw_content)
        ctx.metadata = document.metadata
        ctx.content = document.content

        metadata = document.metadata
        for field_name in ("title", "emoji", "date"):
            value = metadata.get(field_name)
            if isinstance(value, str) and value:
                setattr(ctx, field_name, value)

        tags = metadata.get("tags")
        if isinstance(tags, list):
            ctx.tags = tags

        return ctx
