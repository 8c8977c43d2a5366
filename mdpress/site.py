from mdpress.config import MdpressConfig
from mdpress.content import ContentStore, ContentType
from mdpress.context import PageContext
from mdpress.logger import get_logger
from mdpress.page_plugins.manager import PagePluginManager
from mdpress.search import SearchEngine, SearchResult

logger = get_logger(__name__)


class Site:
    """
    Wires the content store, the page plugins and the search engine together
    for the page serving and admin layers.

    """

    def __init__(self, config: MdpressConfig | None = None):
        self.config = config or MdpressConfig()
        self.store = ContentStore(self.config.content_dir)
        self.search_engine = SearchEngine()

        self.plugin_manager = PagePluginManager(self.config)
        self.plugin_manager.load_plugins_from_config(self.config.page_plugins)

    async def render_page(self, content_type: ContentType, slug: str) -> PageContext:
        """Run one content file through the page plugins. Raises ContentNotFoundError."""
        content_type = ContentType(content_type)
        ctx = PageContext(
            content_type=content_type,
            slug=slug,
            raw_content=self.store.read_raw(content_type, slug),
            references=self.store.cross_references(),
        )
        return await self.plugin_manager.process_page(ctx)

    def rebuild_search_index(self) -> int:
        documents = self.store.search_documents(include_unlisted=self.config.index_unlisted)
        return self.search_engine.rebuild(documents)

    def search(self, query: str) -> list[SearchResult]:
        return self.search_engine.search(query)

    def close(self) -> None:
        self.plugin_manager.teardown()
