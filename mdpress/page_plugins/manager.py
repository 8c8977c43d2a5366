"""Plugin manager for loading and executing page plugins."""

import inspect
import time
from typing import TYPE_CHECKING, Any

from mdpress.context import PageContext
from mdpress.logger import get_logger
from mdpress.page_plugins.base import PagePlugin
from mdpress.page_plugins.config import PagePluginConfig, PluginName
from mdpress.page_plugins.frontmatter import FrontmatterPlugin
from mdpress.page_plugins.markdown import MarkdownPlugin
from mdpress.page_plugins.plain_text import PlainTextPlugin
from mdpress.plugins import BasePluginManager

if TYPE_CHECKING:
    from mdpress.config import MdpressConfig

logger = get_logger(__name__)


class PagePluginManager(BasePluginManager[PagePluginConfig, PagePlugin]):
    """Manages loading and execution of page plugins."""

    def __init__(self, global_config: "MdpressConfig | None" = None) -> None:
        super().__init__()
        self.global_config = global_config
        self._plugin_registry: dict[PluginName, type[PagePlugin]] = {
            PluginName.FRONTMATTER: FrontmatterPlugin,
            PluginName.MARKDOWN: MarkdownPlugin,
            PluginName.PLAIN_TEXT: PlainTextPlugin,
        }

    def load_plugin(self, name: str, config: PagePluginConfig) -> PagePlugin:
        """Load and configure a plugin."""
        if name not in self._plugin_registry:
            raise ValueError(f"Unknown plugin: {name}")

        plugin_class = self._plugin_registry[name]
        plugin = plugin_class(**self._get_constructor_params(plugin_class, config))
        plugin.setup()
        return plugin

    def _get_constructor_params(
        self, plugin_class: type[PagePlugin], config: PagePluginConfig
    ) -> dict[str, Any]:
        """Inspect the plugin constructor and determine what parameters to provide.

        Uses simple name-based conventions:
        - 'config': gets the plugin config
        - 'global_config': gets the global MdpressConfig (if available)
        - other params with defaults: skipped
        - other required params: error

        """
        signature = inspect.signature(plugin_class.__init__)
        params: dict[str, Any] = {}

        for param_name, param in signature.parameters.items():
            if param_name == "self":
                continue

            if param_name == "config":
                params[param_name] = config
            elif param_name == "global_config" and self.global_config is not None:
                params[param_name] = self.global_config
            elif param.default is not inspect.Parameter.empty:
                continue
            else:
                raise ValueError(
                    f"Unknown required parameter '{param_name}' for plugin "
                    f"{plugin_class.__name__}"
                )

        return params

    async def process_page(self, ctx: PageContext) -> PageContext:
        """Process a page through all loaded plugins."""
        for plugin in self.plugins:
            start_time = time.perf_counter()
            ctx = await plugin.process(ctx)
            duration = time.perf_counter() - start_time
            logger.info(f"Plugin {plugin.name.value} took {duration:.4f}s for {ctx.url}")
        return ctx

    def get_plugin_by_name(self, name: PluginName) -> PagePlugin | None:
        for plugin in self.plugins:
            if plugin.name == name:
                return plugin
        return None
