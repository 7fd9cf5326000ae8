"""Plugin interface for local apps providers.

This module defines the plugin base class and metadata that all
plugins use to contribute apps to the registry via pluggy hooks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from local_apps.hooks import hookimpl


@dataclass
class PluginMetadata:
    """Metadata describing a local apps plugin."""

    name: str
    """Unique plugin name, e.g., 'builtin-apps'."""

    version: str
    """Plugin version following semver, e.g., '1.0.0'."""

    description: str
    """Human-readable description of the apps this plugin provides."""

    maintainer: str
    """Maintainer email or team."""


class BasePlugin:
    """Base implementation of a local apps plugin.

    Subclasses override local_apps_get_apps to contribute entries.

    Example entry point in pyproject.toml for external plugins:
        [project.entry-points."local_apps.plugins"]
        my_apps = "my_package.plugin:MyAppsPlugin"

    The entry point may name the class, a zero-argument factory or a
    ready instance.
    """

    def __init__(self, metadata: PluginMetadata) -> None:
        """Initialize the plugin with metadata.

        Args:
            metadata: Plugin metadata.
        """
        self._metadata = metadata

    @property
    def metadata(self) -> PluginMetadata:
        return self._metadata

    @hookimpl
    def local_apps_get_plugin_metadata(self) -> PluginMetadata:
        """Return plugin metadata."""
        return self._metadata

    @hookimpl
    def local_apps_get_apps(self) -> dict[str, Any]:
        """Return contributed apps. Override in subclass."""
        return {}
