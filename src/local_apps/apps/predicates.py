"""Predicates deciding which apps are offered on a model page.

Every predicate is a total function of its ModelData argument: it
never raises and never modifies the model.
"""

from local_apps.models.model_data import ModelData
from local_apps.models.pipelines import PipelineType

DIFFUSERS_LIBRARY = "diffusers"


def is_gguf_model(model: ModelData) -> bool:
    """Check if the model ships GGUF weights."""
    return model.has_tag("gguf")


def is_gptq_model(model: ModelData) -> bool:
    """Check if the model is GPTQ-quantized, by tag or by config."""
    return model.has_tag("gptq") or model.quant_method == "gptq"


def is_awq_model(model: ModelData) -> bool:
    """Check if the model is AWQ-quantized, by tag or by config."""
    return model.has_tag("awq") or model.quant_method == "awq"


def is_gptq_and_awq_model(model: ModelData) -> bool:
    return is_gptq_model(model) and is_awq_model(model)


def is_diffusers_image_model(model: ModelData) -> bool:
    """Check for a diffusers text-to-image pipeline or a diffusers LoRA."""
    return model.library_name == DIFFUSERS_LIBRARY and (
        model.pipeline_tag == PipelineType.TEXT_TO_IMAGE or model.has_tag("lora")
    )


def is_diffusers_text_to_image_model(model: ModelData) -> bool:
    return (
        model.library_name == DIFFUSERS_LIBRARY
        and model.pipeline_tag == PipelineType.TEXT_TO_IMAGE
    )
