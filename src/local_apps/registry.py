"""Registry of local apps offered on model pages.

The registry is built once and never changes afterwards. Lookups of
unknown keys return None rather than raising, since callers are
expected to enumerate the registry rather than index it with free-form
input; get_app is available for callers that prefer an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from local_apps.apps.catalog import BUILTIN_APPS, LocalAppKey
from local_apps.apps.models import AppAction, DeeplinkApp, SnippetApp
from local_apps.config import LocalAppsConfig
from local_apps.models.model_data import ModelData
from local_apps.plugin_manager import PluginManager
from local_apps.utils.errors import NotFoundError

logger = logging.getLogger(__name__)

# Parent logger of every module in the package
PACKAGE_LOGGER = "local_apps"

__all__ = [
    "AppRegistry",
    "LOCAL_APPS",
    "LocalAppKey",
    "build_registry",
]


class AppRegistry(Mapping[str, DeeplinkApp | SnippetApp]):
    """Read-only mapping of app key to local app descriptor.

    Iteration follows the order in which apps were added, which is the
    order model pages render them in.
    """

    def __init__(
        self,
        apps: Mapping[str, DeeplinkApp | SnippetApp],
        include_coming_soon: bool = True,
    ) -> None:
        self._apps = MappingProxyType(dict(apps))
        self._keys = tuple(self._apps)
        self._include_coming_soon = include_coming_soon

    def __getitem__(self, key: str) -> DeeplinkApp | SnippetApp:
        return self._apps[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"AppRegistry({list(self._keys)!r})"

    def lookup(self, key: str) -> DeeplinkApp | SnippetApp | None:
        """Get an app by key, or None if the key is unknown."""
        return self._apps.get(key)

    def get_app(self, key: str) -> DeeplinkApp | SnippetApp:
        """Get an app by key.

        Raises:
            NotFoundError: If no app is registered under the key.
        """
        app = self._apps.get(key)
        if app is None:
            raise NotFoundError("Local app", key)
        return app

    def list_keys(self) -> list[str]:
        """List app keys in registry order."""
        return list(self._keys)

    def apps_for_model(
        self,
        model: ModelData,
        include_coming_soon: bool | None = None,
    ) -> list[tuple[str, DeeplinkApp | SnippetApp]]:
        """List the apps to offer on a model's page, in registry order.

        Args:
            model: Model being displayed.
            include_coming_soon: Whether to keep apps marked coming soon.
                Defaults to the registry's setting.
        """
        if include_coming_soon is None:
            include_coming_soon = self._include_coming_soon

        return [
            (key, app)
            for key, app in self._apps.items()
            if (include_coming_soon or not app.coming_soon) and app.display_on_model_page(model)
        ]

    def resolve(self, key: str, model: ModelData) -> AppAction | None:
        """Resolve the link or snippets of one app for a model.

        Returns:
            The action to render, or None if the key is unknown or the app
            does not apply to the model.
        """
        app = self.lookup(key)
        if app is None or not app.display_on_model_page(model):
            return None
        return app.resolve(key, model)

    def actions_for_model(
        self,
        model: ModelData,
        include_coming_soon: bool | None = None,
    ) -> list[AppAction]:
        """Resolve every app offered on a model's page."""
        return [
            app.resolve(key, model)
            for key, app in self.apps_for_model(model, include_coming_soon)
        ]


def build_registry(config: LocalAppsConfig | None = None) -> AppRegistry:
    """Build a registry from core plugins and, optionally, entry-point plugins.

    The level of the package logger is set from config.log_level;
    handlers are left to the embedding application.

    Args:
        config: Registry settings. Defaults to settings read from the
            environment.

    Returns:
        A new, read-only registry.

    Raises:
        ConfigurationError: If plugins contribute conflicting or malformed apps.
    """
    if config is None:
        config = LocalAppsConfig()

    logging.getLogger(PACKAGE_LOGGER).setLevel(config.log_level.value)

    manager = PluginManager()
    manager.load_core_plugins()
    if config.load_entrypoint_plugins:
        manager.load_entrypoint_plugins()

    for meta in manager.get_all_metadata():
        logger.info(f"Using plugin {meta.name} {meta.version}: {meta.description}")

    apps = manager.collect_apps()

    for key in config.disabled_apps:
        if apps.pop(key, None) is None:
            logger.warning(f"Cannot disable unknown app: {key}")
        else:
            logger.debug(f"Disabled app: {key}")

    logger.info(f"Built registry with {len(apps)} apps: {', '.join(apps)}")
    return AppRegistry(apps, include_coming_soon=config.include_coming_soon)


# Built-in apps only; its key set is fixed by apps.catalog.
LOCAL_APPS = AppRegistry(BUILTIN_APPS)
