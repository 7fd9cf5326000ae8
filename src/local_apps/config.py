"""Configuration for the local apps registry."""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log level for registry diagnostics."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LocalAppsConfig(BaseSettings):
    """Settings controlling how the registry is assembled.

    Loaded from environment variables with LOCAL_APPS_ prefix
    or from a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOCAL_APPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Log level for registry diagnostics",
    )

    # Plugin settings
    load_entrypoint_plugins: bool = Field(
        default=False,
        description="Also collect apps from packages exposing local_apps.plugins entry points",
    )
    disabled_apps: list[str] = Field(
        default_factory=list,
        description="App keys to leave out of the registry",
    )

    # Listing settings
    include_coming_soon: bool = Field(
        default=True,
        description="Whether apps marked as coming soon are offered on model pages",
    )
