"""Models consumed by the local apps registry."""

from local_apps.models.model_data import ModelData
from local_apps.models.pipelines import PipelineType

__all__ = [
    "ModelData",
    "PipelineType",
]
