"""Pydantic model for hosted model metadata.

ModelData is supplied by the model metadata service and is only read
here: predicates, link builders and snippet builders inspect it but
never change it.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from local_apps.models.pipelines import PipelineType


class ModelData(BaseModel):
    """Hosted model representation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Model repository ID (e.g., 'org/name')")
    tags: list[str] = Field(default_factory=list, description="Model tags")
    pipeline_tag: PipelineType | str | None = Field(
        None, description="Task category (e.g., 'text-generation')"
    )
    library_name: str | None = Field(
        None, description="Authoring library (e.g., 'transformers', 'diffusers')"
    )
    config: dict[str, Any] | None = Field(None, description="Raw model config, if available")

    def has_tag(self, tag: str) -> bool:
        """Check if the model carries a tag."""
        return tag in self.tags

    @property
    def quant_method(self) -> str | None:
        """Quantization method declared in the model config, if any."""
        if not isinstance(self.config, dict):
            return None
        quantization_config = self.config.get("quantization_config")
        if not isinstance(quantization_config, dict):
            return None
        method = quantization_config.get("quant_method")
        return method if isinstance(method, str) else None
