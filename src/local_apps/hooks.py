"""Hook specifications for local apps plugins.

Plugins contribute registry entries by implementing these hooks. The
built-in table is itself contributed by a plugin, so third-party
packages extend the registry the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from local_apps.plugin import PluginMetadata

PROJECT_NAME = "local_apps"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class LocalAppsHookSpec:
    """Hooks a local apps plugin may implement."""

    @hookspec
    def local_apps_get_plugin_metadata(self) -> PluginMetadata:  # type: ignore[empty-body]
        """Return metadata identifying the plugin."""

    @hookspec
    def local_apps_get_apps(self) -> dict[str, Any]:  # type: ignore[empty-body]
        """Return the apps this plugin contributes, keyed by app key.

        Values are LocalApp descriptors or plain dicts that validate
        as one (with a 'kind' of 'deeplink' or 'snippet').
        """
