"""
A page plugin fills in part of a `PageContext`.

The manager runs plugins in dependency order, so a plugin may rely on the
fields its declared predecessors wrote: the frontmatter plugin splits off
`metadata` and `content`, the markdown plugin writes `html` and `headings`
from them.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from mdpress.context import PageContext
from mdpress.page_plugins.config import PluginName

ConfigT = TypeVar("ConfigT")


class PagePlugin(ABC, Generic[ConfigT]):
    name: PluginName

    def __init__(self, config: ConfigT) -> None:
        self.config = config

    @abstractmethod
    async def process(self, ctx: PageContext) -> PageContext:
        """Write this plugin's fields onto `ctx` and hand it to the next plugin."""

    def setup(self) -> None:
        """Runs once when the manager loads the plugin, before any page."""

    def teardown(self) -> None:
        """Runs when the manager drops its plugins. Release anything `setup` acquired."""
