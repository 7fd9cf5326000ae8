"""Error types for the local apps registry."""


class LocalAppsError(Exception):
    """Base exception for local apps errors."""


class NotFoundError(LocalAppsError):
    """Raised when a requested entry does not exist."""

    def __init__(self, resource_type: str, name: str) -> None:
        self.resource_type = resource_type
        self.name = name
        super().__init__(f"{resource_type} '{name}' not found")


class ConfigurationError(LocalAppsError):
    """Raised when registry entries or settings have an invalid shape."""
