"""Plain text plugin producing the text that gets indexed for search."""

from mdpress.context import PageContext
from mdpress.page_plugins.base import PagePlugin
from mdpress.page_plugins.config import PlainTextPluginConfig, PluginName
from mdpress.plain_text import extract_plain_text


class PlainTextPlugin(PagePlugin[PlainTextPluginConfig]):
    name = PluginName.PLAIN_TEXT

    async def process(self, ctx: PageContext) -> PageContext:
        ctx.plain_text = extract_plain_text(ctx.body)
        return ctx
