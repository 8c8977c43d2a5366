"""Page plugin configuration models."""

from typing import Annotated, Literal

from pydantic import Field

from mdpress.plugins import BasePluginConfig, PluginNameEnum


class PluginName(PluginNameEnum):
    """Enum for page plugin names."""

    FRONTMATTER = "frontmatter"
    MARKDOWN = "markdown"
    PLAIN_TEXT = "plain_text"


class BasePagePluginConfig(BasePluginConfig[PluginName]):
    """Base configuration for all page plugins."""

    name: PluginName


class FrontmatterPluginConfig(BasePagePluginConfig):
    """Configuration for the frontmatter plugin.

    Example YAML configuration:
    ```yaml
    page_plugins:
      - name: frontmatter
        enabled: true
    ```
    """

    name: Literal[PluginName.FRONTMATTER] = PluginName.FRONTMATTER
    before_dependencies: list[PluginName] = [PluginName.MARKDOWN]


class MarkdownPluginConfig(BasePagePluginConfig):
    """Configuration for the markdown plugin.

    Example YAML configuration:
    ```yaml
    page_plugins:
      - name: markdown
        enabled: true
    ```
    """

    name: Literal[PluginName.MARKDOWN] = PluginName.MARKDOWN


class PlainTextPluginConfig(BasePagePluginConfig):
    """Configuration for the plain text plugin, which fills the search text.

    Example YAML configuration:
    ```yaml
    page_plugins:
      - name: plain_text
        enabled: true
    ```
    """

    name: Literal[PluginName.PLAIN_TEXT] = PluginName.PLAIN_TEXT
    after_dependencies: list[PluginName] = [PluginName.FRONTMATTER]


PagePluginConfig = Annotated[
    FrontmatterPluginConfig | MarkdownPluginConfig | PlainTextPluginConfig,
    Field(discriminator="name"),
]


def default_page_plugins() -> list[PagePluginConfig]:
    return [FrontmatterPluginConfig(), MarkdownPluginConfig(), PlainTextPluginConfig()]
