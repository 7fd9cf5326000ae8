"""Utility functions and helpers for the local apps registry."""

from local_apps.utils.errors import (
    ConfigurationError,
    LocalAppsError,
    NotFoundError,
)

__all__ = [
    "LocalAppsError",
    "NotFoundError",
    "ConfigurationError",
]
