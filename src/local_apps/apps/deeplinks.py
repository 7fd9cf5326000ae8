"""Deep link builders for apps that can open a model directly.

Builders only assemble a URL; they never contact the app or the hub.
Model IDs are percent-encoded where the URL needs it, never rejected.
"""

from urllib.parse import quote, urlencode

from pydantic import AnyUrl

from local_apps.models.model_data import ModelData


def open_from_hf_link(scheme: str, model: ModelData) -> AnyUrl:
    """Custom-scheme link carrying the model ID as a query parameter.

    Args:
        scheme: URI scheme registered by the app (e.g., 'lmstudio').
        model: Model to preload.

    Returns:
        URL like ``<scheme>://open_from_hf?model=<id>``.
    """
    query = urlencode({"model": model.id}, quote_via=quote, safe="/")
    return AnyUrl(f"{scheme}://open_from_hf?{query}")


def model_path_link(base_url: str, model: ModelData) -> AnyUrl:
    """Link with the model ID appended as path segments.

    Slashes in the ID are kept so 'org/name' maps to two segments.
    """
    return AnyUrl(f"{base_url.rstrip('/')}/{quote(model.id, safe='/')}")


def lmstudio_link(model: ModelData) -> AnyUrl:
    return open_from_hf_link("lmstudio", model)


def diffusionbee_link(model: ModelData) -> AnyUrl:
    return open_from_hf_link("diffusionbee", model)


def jan_link(model: ModelData) -> AnyUrl:
    return model_path_link("jan://models/huggingface", model)


def backyard_link(model: ModelData) -> AnyUrl:
    return model_path_link("https://backyard.ai/hf/model", model)


def drawthings_link(model: ModelData) -> AnyUrl:
    """Draw Things import link.

    LoRA repos are imported as weights on top of a pipeline, everything
    else as a full pipeline.
    """
    if model.has_tag("lora"):
        loader = "pipeline.load_lora_weights"
    else:
        loader = "pipeline.from_pretrained"
    query = urlencode({"repo_id": model.id}, quote_via=quote, safe="/")
    return AnyUrl(f"https://drawthings.ai/import/diffusers/{loader}?{query}")
