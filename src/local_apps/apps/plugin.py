"""Plugin contributing the built-in apps table."""

from __future__ import annotations

from typing import Any

from local_apps.hooks import hookimpl
from local_apps.plugin import BasePlugin, PluginMetadata


class BuiltinAppsPlugin(BasePlugin):
    """Plugin for the apps shipped with this package."""

    def __init__(self) -> None:
        super().__init__(
            PluginMetadata(
                name="builtin-apps",
                version="1.0.0",
                description="Local apps shipped with the registry",
                maintainer="local-apps maintainers",
            )
        )

    @hookimpl
    def local_apps_get_apps(self) -> dict[str, Any]:
        from local_apps.apps.catalog import BUILTIN_APPS

        return dict(BUILTIN_APPS)


def get_core_plugins() -> list[BasePlugin]:
    """Return all core plugin instances.

    Returns:
        List of plugin instances shipped with the package.
    """
    return [BuiltinAppsPlugin()]
