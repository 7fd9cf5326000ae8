"""Registry of local apps that can open models hosted on the hub.

Model pages use the registry to decide which "Use this model" buttons
to show and what each one does: open a deep link or show shell
snippets to copy.
"""

from local_apps.apps.models import AppAction, DeeplinkApp, LocalApp, SnippetApp
from local_apps.config import LocalAppsConfig, LogLevel
from local_apps.models.model_data import ModelData
from local_apps.models.pipelines import PipelineType
from local_apps.registry import LOCAL_APPS, AppRegistry, LocalAppKey, build_registry
from local_apps.utils.errors import ConfigurationError, LocalAppsError, NotFoundError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Registry
    "LOCAL_APPS",
    "AppRegistry",
    "LocalAppKey",
    "build_registry",
    # Descriptors
    "AppAction",
    "DeeplinkApp",
    "LocalApp",
    "SnippetApp",
    # Inputs
    "ModelData",
    "PipelineType",
    # Configuration
    "LocalAppsConfig",
    "LogLevel",
    # Errors
    "LocalAppsError",
    "NotFoundError",
    "ConfigurationError",
]
