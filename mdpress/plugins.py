"""Shared plugin infrastructure and abstract base classes."""

from abc import ABC, abstractmethod
from enum import Enum
from graphlib import CycleError, TopologicalSorter
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from mdpress.logger import get_logger

logger = get_logger(__name__)

ConfigT = TypeVar("ConfigT")
PluginT = TypeVar("PluginT")
PluginNameT = TypeVar("PluginNameT", bound=Enum)


class PluginNameEnum(str, Enum):
    """Base class for plugin name enums."""

    pass


class BasePluginConfig(BaseModel, Generic[PluginNameT]):
    """Base configuration for all plugins."""

    enabled: bool = True
    after_dependencies: list[PluginNameT] = Field(
        default_factory=list,
        description="List of plugins that must run before this plugin",
    )
    before_dependencies: list[PluginNameT] = Field(
        default_factory=list,
        description="List of plugins that must run after this plugin",
    )


class BasePluginManager(ABC, Generic[ConfigT, PluginT]):
    """Base class for plugin managers with dependency resolution."""

    def __init__(self) -> None:
        self.plugins: list[PluginT] = []
        self._plugin_registry: dict[str, type[PluginT]] = {}

    @abstractmethod
    def load_plugin(self, name: str, config: ConfigT) -> PluginT:
        """Load and configure a plugin."""
        pass

    def register_plugin(self, name: str, plugin_class: type[PluginT]) -> None:
        """Register a custom plugin class."""
        self._plugin_registry[name] = plugin_class

    def _resolve_plugin_dependencies(self, plugin_configs: list[ConfigT]) -> list[ConfigT]:
        """Order enabled plugin configs so every dependency runs first."""
        plugin_config_map = {config.name: config for config in plugin_configs if config.enabled}

        for config in plugin_config_map.values():
            for dependency in [*config.after_dependencies, *config.before_dependencies]:
                if dependency not in plugin_config_map:
                    raise ValueError(
                        f"Plugin '{config.name.value}' depends on '{dependency.value}' "
                        f"which is not enabled or doesn't exist"
                    )

        # Edges point from a plugin to the plugins that have to run before it
        graph: dict[str, set[str]] = {}
        for config in plugin_config_map.values():
            graph.setdefault(config.name, set()).update(config.after_dependencies)
            for dependency in config.before_dependencies:
                graph.setdefault(dependency, set()).add(config.name)

        try:
            sorted_names = list(TopologicalSorter(graph).static_order())
        except CycleError as e:
            plugin_type = self.__class__.__name__.replace("Manager", "").lower()
            raise ValueError(f"Circular dependency detected in {plugin_type} plugins: {e}") from e

        return [plugin_config_map[name] for name in sorted_names]

    def load_plugins_from_config(self, plugin_configs: list[ConfigT]) -> None:
        """Load plugins from config in dependency-resolved order."""
        sorted_configs = self._resolve_plugin_dependencies(plugin_configs)

        plugin_type = self.__class__.__name__.replace("Manager", "").lower()
        logger.info(
            f"Loading {plugin_type} plugins in dependency-resolved order: "
            f"{[config.name.value for config in sorted_configs]}"
        )

        for plugin_config in sorted_configs:
            self.plugins.append(self.load_plugin(plugin_config.name, plugin_config))

    def teardown(self) -> None:
        """Teardown all loaded plugins."""
        for plugin in self.plugins:
            plugin.teardown()
        self.plugins.clear()
