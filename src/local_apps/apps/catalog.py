"""Built-in local apps.

Add your new local app here. Prefer deep links over snippets when the
app supports them, and keep apps as cross-platform as possible.

Order matters: model pages list apps in table order.
"""

from __future__ import annotations

from typing import Literal

from local_apps.apps.deeplinks import (
    backyard_link,
    diffusionbee_link,
    drawthings_link,
    jan_link,
    lmstudio_link,
)
from local_apps.apps.models import DeeplinkApp, SnippetApp
from local_apps.apps.predicates import (
    is_diffusers_image_model,
    is_diffusers_text_to_image_model,
    is_gguf_model,
    is_gptq_and_awq_model,
)
from local_apps.apps.snippets import llamacpp_snippet, ollama_snippet, vllm_snippet
from local_apps.models.pipelines import PipelineType

LocalAppKey = Literal[
    "ollama",
    "llama.cpp",
    "lmstudio",
    "jan",
    "backyard",
    "vllm",
    "drawthings",
    "diffusionbee",
]

BUILTIN_APPS: dict[str, DeeplinkApp | SnippetApp] = {
    "ollama": SnippetApp(
        pretty_label="Ollama",
        docs_url="https://ollama.com/",
        main_task=PipelineType.TEXT_GENERATION,
        display_on_model_page=is_gguf_model,
        snippet=ollama_snippet,
    ),
    "llama.cpp": SnippetApp(
        pretty_label="llama.cpp",
        docs_url="https://github.com/ggerganov/llama.cpp",
        main_task=PipelineType.TEXT_GENERATION,
        display_on_model_page=is_gguf_model,
        snippet=llamacpp_snippet,
    ),
    "lmstudio": DeeplinkApp(
        pretty_label="LM Studio",
        docs_url="https://lmstudio.ai",
        main_task=PipelineType.TEXT_GENERATION,
        display_on_model_page=is_gguf_model,
        deeplink=lmstudio_link,
    ),
    "jan": DeeplinkApp(
        pretty_label="Jan",
        docs_url="https://jan.ai",
        main_task=PipelineType.TEXT_GENERATION,
        display_on_model_page=is_gguf_model,
        deeplink=jan_link,
    ),
    "backyard": DeeplinkApp(
        pretty_label="Backyard AI",
        docs_url="https://backyard.ai",
        main_task=PipelineType.TEXT_GENERATION,
        display_on_model_page=is_gguf_model,
        deeplink=backyard_link,
    ),
    "vllm": SnippetApp(
        pretty_label="vLLM",
        docs_url="https://docs.vllm.ai",
        main_task=PipelineType.TEXT_GENERATION,
        display_on_model_page=is_gptq_and_awq_model,
        snippet=vllm_snippet,
    ),
    "drawthings": DeeplinkApp(
        pretty_label="Draw Things",
        docs_url="https://drawthings.ai",
        main_task=PipelineType.TEXT_TO_IMAGE,
        macos_only=True,
        display_on_model_page=is_diffusers_image_model,
        deeplink=drawthings_link,
    ),
    "diffusionbee": DeeplinkApp(
        pretty_label="DiffusionBee",
        docs_url="https://diffusionbee.com",
        main_task=PipelineType.TEXT_TO_IMAGE,
        macos_only=True,
        coming_soon=True,
        display_on_model_page=is_diffusers_text_to_image_model,
        deeplink=diffusionbee_link,
    ),
}
