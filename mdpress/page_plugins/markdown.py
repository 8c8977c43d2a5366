"""Markdown plugin for converting the page body to HTML."""

from mdpress.config import MdpressConfig
from mdpress.context import PageContext
from mdpress.markdown import MarkdownRenderer
from mdpress.page_plugins.base import PagePlugin
from mdpress.page_plugins.config import MarkdownPluginConfig, PluginName


class MarkdownPlugin(PagePlugin[MarkdownPluginConfig]):
    """Plugin to convert markdown to HTML."""

    name = PluginName.MARKDOWN

    def __init__(
        self,
        config: MarkdownPluginConfig,
        global_config: MdpressConfig | None = None,
        renderer: MarkdownRenderer | None = None,
    ) -> None:
        super().__init__(config)
        self.renderer = renderer or MarkdownRenderer(global_config)

    async def process(self, ctx: PageContext) -> PageContext:
        result = self.renderer.render_document(ctx.body, ctx.references)
        ctx.html = result.html
        ctx.headings = result.headings
        return ctx
