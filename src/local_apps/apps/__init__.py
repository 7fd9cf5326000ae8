"""Local app descriptors and the built-in apps table."""

from local_apps.apps.catalog import BUILTIN_APPS, LocalAppKey
from local_apps.apps.models import (
    AppAction,
    BaseLocalApp,
    DeeplinkApp,
    LocalApp,
    SnippetApp,
)

__all__ = [
    "AppAction",
    "BaseLocalApp",
    "BUILTIN_APPS",
    "DeeplinkApp",
    "LocalApp",
    "LocalAppKey",
    "SnippetApp",
]
