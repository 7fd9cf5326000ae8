"""Plugin manager using pluggy for the local apps registry.

This module provides the PluginManager class that handles plugin
discovery and registration, and collects the apps each plugin
contributes into a single ordered table.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any

import pluggy
from pydantic import TypeAdapter, ValidationError

from local_apps.apps.models import LocalApp
from local_apps.hooks import PROJECT_NAME, LocalAppsHookSpec
from local_apps.utils.errors import ConfigurationError

if TYPE_CHECKING:
    from local_apps.apps.models import DeeplinkApp, SnippetApp
    from local_apps.plugin import PluginMetadata

logger = logging.getLogger(__name__)

# Entry point group name for external plugin discovery
PLUGIN_ENTRY_POINT_GROUP = "local_apps.plugins"

_LOCAL_APP_ADAPTER: TypeAdapter[Any] = TypeAdapter(LocalApp)


class PluginManager:
    """Manages plugin discovery, registration, and app collection.

    Core plugins are trusted: a malformed contribution from one of them
    raises ConfigurationError. External plugins loaded from entry points
    are skipped with a warning instead, so one broken package cannot
    take the whole registry down.
    """

    def __init__(self) -> None:
        """Initialize the plugin manager with a pluggy PluginManager."""
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LocalAppsHookSpec)
        self._registered_plugins: dict[str, Any] = {}
        self._external_plugins: set[str] = set()

    @property
    def hook(self) -> Any:
        """Get the pluggy hook caller for invoking hooks."""
        return self._pm.hook

    @property
    def registered_plugins(self) -> dict[str, Any]:
        """Get all registered plugins by name."""
        return self._registered_plugins

    def register_plugin(self, plugin: Any, name: str | None = None) -> str:
        """Register a plugin instance.

        Args:
            plugin: Plugin instance implementing hook methods.
            name: Optional name for the plugin. If not provided,
                  will try to get from plugin metadata.

        Returns:
            The name used to register the plugin.
        """
        if name is None:
            if hasattr(plugin, "local_apps_get_plugin_metadata"):
                meta = plugin.local_apps_get_plugin_metadata()
                name = meta.name
            else:
                name = type(plugin).__name__

        self._pm.register(plugin, name=name)
        self._registered_plugins[name] = plugin
        logger.debug(f"Registered plugin: {name}")
        return name

    def load_core_plugins(self) -> int:
        """Load the plugins shipped with the package.

        Returns:
            Number of plugins loaded.
        """
        from local_apps.apps.plugin import get_core_plugins

        plugins = get_core_plugins()
        for plugin in plugins:
            self.register_plugin(plugin)

        logger.info(f"Loaded {len(plugins)} core plugins")
        return len(plugins)

    def load_entrypoint_plugins(self) -> int:
        """Discover and load external plugins from entry points.

        An entry point may name a plugin instance, a plugin class or a
        zero-argument factory; classes and factories are called to get
        the instance. Entry points that fail to load are skipped with a
        warning.

        Returns:
            Number of plugins loaded.
        """
        count = 0
        for ep in entry_points(group=PLUGIN_ENTRY_POINT_GROUP):
            if ep.name in self._registered_plugins:
                logger.debug(f"Plugin {ep.name} already registered, skipping entry point")
                continue
            try:
                plugin = ep.load()
                if isinstance(plugin, type) or (
                    callable(plugin) and not hasattr(plugin, "local_apps_get_apps")
                ):
                    plugin = plugin()
                self.register_plugin(plugin, name=ep.name)
            except Exception as e:
                logger.warning(
                    f"Failed to load plugin from entry point {ep.name} ({ep.value}): {e}"
                )
                continue

            self._external_plugins.add(ep.name)
            count += 1
            logger.info(f"Loaded external plugin from entry point: {ep.name}")

        logger.info(f"Loaded {count} external plugins from entry points")
        return count

    def get_all_metadata(self) -> list[PluginMetadata]:
        """Collect metadata from all registered plugins.

        Returns:
            List of PluginMetadata from all plugins.
        """
        results = self.hook.local_apps_get_plugin_metadata()
        return [meta for meta in results if meta is not None]

    def collect_apps(self) -> dict[str, DeeplinkApp | SnippetApp]:
        """Collect apps from all registered plugins in registration order.

        Returns:
            Ordered mapping of app key to validated descriptor.

        Raises:
            ConfigurationError: If two plugins contribute the same key, or a
                core plugin contributes a malformed app.
        """
        apps: dict[str, DeeplinkApp | SnippetApp] = {}
        owners: dict[str, str] = {}

        for name, plugin in self._registered_plugins.items():
            if not hasattr(plugin, "local_apps_get_apps"):
                continue
            try:
                contributed = self._validate_contribution(name, plugin.local_apps_get_apps())
            except Exception as e:
                if name not in self._external_plugins:
                    raise
                logger.warning(f"Skipping apps from plugin {name}: {e}")
                continue

            for key, app in contributed.items():
                if key in apps:
                    raise ConfigurationError(
                        f"App '{key}' from plugin '{name}' is already provided by '{owners[key]}'"
                    )
                apps[key] = app
                owners[key] = name

            logger.debug(f"Collected {len(contributed)} apps from plugin {name}")

        return apps

    @staticmethod
    def _validate_contribution(name: str, raw: Any) -> dict[str, DeeplinkApp | SnippetApp]:
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Plugin '{name}' returned {type(raw).__name__} instead of a dict of apps"
            )

        validated: dict[str, DeeplinkApp | SnippetApp] = {}
        for key, value in raw.items():
            if not isinstance(key, str) or not key:
                raise ConfigurationError(f"Plugin '{name}' returned an invalid app key: {key!r}")
            try:
                validated[key] = _LOCAL_APP_ADAPTER.validate_python(value)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid app '{key}' from plugin '{name}': {e}") from e
        return validated
