"""Pytest fixtures for local apps tests."""

import sys
from collections.abc import Callable, Iterator
from importlib.metadata import EntryPoint
from unittest.mock import patch

import pytest

from local_apps.models.model_data import ModelData
from local_apps.plugin_manager import PLUGIN_ENTRY_POINT_GROUP


@pytest.fixture
def gguf_model() -> ModelData:
    """Sample GGUF text-generation model."""
    return ModelData(
        id="TheBloke/Mistral-7B-Instruct-v0.2-GGUF",
        tags=["gguf", "mistral", "text-generation"],
        pipeline_tag="text-generation",
        library_name="transformers",
    )


@pytest.fixture
def plain_model() -> ModelData:
    """Sample model no app applies to."""
    return ModelData(id="bert-base-uncased", tags=[], pipeline_tag="fill-mask")


@pytest.fixture
def diffusers_model() -> ModelData:
    """Sample diffusers text-to-image pipeline."""
    return ModelData(
        id="stabilityai/stable-diffusion-xl-base-1.0",
        tags=["text-to-image"],
        pipeline_tag="text-to-image",
        library_name="diffusers",
    )


@pytest.fixture
def lora_model() -> ModelData:
    """Sample diffusers LoRA adapter."""
    return ModelData(
        id="nerijs/pixel-art-xl",
        tags=["lora"],
        pipeline_tag="other",
        library_name="diffusers",
    )


@pytest.fixture
def quantized_model() -> ModelData:
    """Sample model published with both GPTQ and AWQ weights."""
    return ModelData(
        id="TheBloke/Llama-2-7B-Chat-quantized",
        tags=["gptq", "awq"],
        pipeline_tag="text-generation",
    )


PLUGIN_MODULE = "extra_local_apps_plugins"

PLUGIN_SOURCE = '''
from pydantic import AnyUrl

from local_apps.hooks import hookimpl
from local_apps.plugin import BasePlugin, PluginMetadata


def _app(label):
    return {
        "kind": "deeplink",
        "pretty_label": label,
        "docs_url": "https://example.com",
        "main_task": "text-generation",
        "display_on_model_page": lambda model: model.has_tag("example"),
        "deeplink": lambda model: AnyUrl(f"example://open?model={model.id}"),
    }


class ExtraAppsPlugin(BasePlugin):
    def __init__(self):
        super().__init__(
            PluginMetadata(
                name="extra-apps",
                version="0.2.0",
                description="Extra apps",
                maintainer="test@example.com",
            )
        )

    @hookimpl
    def local_apps_get_apps(self):
        return {"example": _app("Example")}


class BrokenAppsPlugin(ExtraAppsPlugin):
    @hookimpl
    def local_apps_get_apps(self):
        return {"broken": _app("")}


class FailingAppsPlugin(ExtraAppsPlugin):
    @hookimpl
    def local_apps_get_apps(self):
        raise RuntimeError("boom")


def make_plugin():
    return ExtraAppsPlugin()


instance = ExtraAppsPlugin()
'''


@pytest.fixture
def plugin_module(tmp_path, monkeypatch: pytest.MonkeyPatch) -> str:  # type: ignore[no-untyped-def]
    """Write an importable module of sample plugins and return its name."""
    (tmp_path / f"{PLUGIN_MODULE}.py").write_text(PLUGIN_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, PLUGIN_MODULE, raising=False)
    return PLUGIN_MODULE


@pytest.fixture
def installed_entry_points() -> Iterator[Callable[..., None]]:
    """Replace the installed local_apps.plugins entry points.

    Yields a setter taking (name, "module:attr") pairs.
    """
    installed: list[EntryPoint] = []

    def fake_entry_points(group: str) -> list[EntryPoint]:
        return [ep for ep in installed if ep.group == group]

    def install(*specs: tuple[str, str]) -> None:
        installed.extend(
            EntryPoint(name, value, PLUGIN_ENTRY_POINT_GROUP) for name, value in specs
        )

    with patch("local_apps.plugin_manager.entry_points", side_effect=fake_entry_points):
        yield install
