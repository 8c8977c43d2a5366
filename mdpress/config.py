"""Configuration management for mdpress."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

from mdpress.logger import get_logger
from mdpress.page_plugins.config import PagePluginConfig, default_page_plugins
from mdpress.paths import resolve_path

logger = get_logger(__name__)


class RenderLabels(BaseModel):
    """User visible strings emitted by the renderer."""

    copy_button: str = "Copy"
    toc_title: str = "Contents"
    article_not_found: str = "Article not found"
    magazine_not_found: str = "Magazine not found"
    dictionary_not_found: str = "Dictionary entry not found"
    magazine_article_count: str = Field(
        default="{count} articles",
        description="Format string, `{count}` is replaced with the number of articles",
    )
    dictionary_badge: str = "📖 Dictionary"
    nesting_too_deep: str = "Callout nesting is too deep to display"
    callouts: dict[str, str] = Field(
        default_factory=lambda: {
            "NOTE": "Note",
            "TIP": "Tip",
            "IMPORTANT": "Important",
            "WARNING": "Warning",
            "CAUTION": "Caution",
        }
    )


class MdpressConfig(BaseSettings):
    """Main configuration for mdpress."""

    model_config = SettingsConfigDict(
        env_prefix="MDPRESS_",
        case_sensitive=False,
    )

    content_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "content",
        description="Directory holding the posts, topics, magazines and dictionary folders",
    )

    max_callout_depth: int = Field(
        default=10,
        ge=1,
        description="How deep callouts may nest before the body is shown as raw text",
    )
    highlight: bool = Field(
        default=True, description="Syntax highlight fenced code blocks with Pygments"
    )
    index_unlisted: bool = Field(
        default=False, description="Include entries marked `listed: false` in search"
    )

    labels: RenderLabels = Field(default_factory=RenderLabels)

    page_plugins: list[PagePluginConfig] = Field(
        default_factory=default_page_plugins,
        description="Page plugins run when rendering a content file",
    )

    _custom_config_file: Path | None = PrivateAttr(default=None)

    def __init__(self, config_file: Path | None = None, **kwargs: Any) -> None:
        # Values from a config file sit below explicit kwargs
        if config_file is not None and config_file.exists():
            try:
                with open(config_file, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}
                kwargs = {**config_data, **kwargs}
            except yaml.YAMLError as e:
                logger.warning(f"Ignoring unreadable config file {config_file}: {e}")

        super().__init__(**kwargs)

        self._custom_config_file = config_file
        if config_file is not None:
            self.content_dir = resolve_path(self.content_dir, config_file.parent)

    @property
    def config_dir(self) -> Path:
        """Return the .mdpress configuration directory."""
        return Path.home() / ".mdpress"

    @property
    def config_file_path(self) -> Path:
        if self._custom_config_file is not None:
            return self._custom_config_file
        return self.config_dir / "config.yml"

    def save_config(self) -> None:
        """Save current configuration to the YAML config file."""
        config_path = self.config_file_path
        config_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json")

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2, allow_unicode=True)
