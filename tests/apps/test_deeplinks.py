"""Tests for deep link builders."""

from pydantic import AnyUrl

from local_apps.apps.deeplinks import (
    backyard_link,
    diffusionbee_link,
    drawthings_link,
    jan_link,
    lmstudio_link,
    model_path_link,
    open_from_hf_link,
)
from local_apps.models.model_data import ModelData


class TestOpenFromHfLink:
    """Test custom-scheme links with a model query parameter."""

    def test_lmstudio_link(self) -> None:
        url = lmstudio_link(ModelData(id="org/name"))

        assert isinstance(url, AnyUrl)
        assert url.scheme == "lmstudio"
        assert str(url) == "lmstudio://open_from_hf?model=org/name"

    def test_diffusionbee_link(self) -> None:
        url = diffusionbee_link(ModelData(id="org/name"))

        assert str(url) == "diffusionbee://open_from_hf?model=org/name"

    def test_reserved_characters_are_encoded(self) -> None:
        """Test IDs needing encoding are encoded instead of rejected."""
        url = open_from_hf_link("lmstudio", ModelData(id="org/a&b=c"))

        assert str(url) == "lmstudio://open_from_hf?model=org/a%26b%3Dc"

    def test_spaces_are_percent_encoded(self) -> None:
        """Test spaces use %20 rather than form-style plus signs."""
        url = open_from_hf_link("lmstudio", ModelData(id="org/my model"))

        assert str(url) == "lmstudio://open_from_hf?model=org/my%20model"


class TestModelPathLink:
    """Test links embedding the model ID as path segments."""

    def test_jan_link(self) -> None:
        assert str(jan_link(ModelData(id="org/name"))) == "jan://models/huggingface/org/name"

    def test_backyard_link(self) -> None:
        url = backyard_link(ModelData(id="org/name"))

        assert url.scheme == "https"
        assert str(url) == "https://backyard.ai/hf/model/org/name"

    def test_path_characters_are_encoded(self) -> None:
        url = model_path_link("https://backyard.ai/hf/model", ModelData(id="org/my model?"))

        assert str(url) == "https://backyard.ai/hf/model/org/my%20model%3F"

    def test_trailing_slash_on_base(self) -> None:
        url = model_path_link("https://backyard.ai/hf/model/", ModelData(id="org/name"))

        assert str(url) == "https://backyard.ai/hf/model/org/name"


class TestDrawThingsLink:
    """Test the Draw Things link, which depends on the lora tag."""

    def test_lora_model(self) -> None:
        url = str(drawthings_link(ModelData(id="org/name", tags=["lora"])))

        assert "load_lora_weights" in url
        assert "from_pretrained" not in url
        assert url.endswith("repo_id=org/name")

    def test_pipeline_model(self) -> None:
        url = str(drawthings_link(ModelData(id="org/name", tags=[])))

        assert "from_pretrained" in url
        assert "load_lora_weights" not in url
        assert url.startswith("https://drawthings.ai/import/diffusers/")

    def test_repo_id_percent_encoded(self) -> None:
        url = str(drawthings_link(ModelData(id="org/my model", tags=["lora"])))

        assert url.endswith("repo_id=org/my%20model")


class TestIdempotence:
    """Test builders return identical links for identical input."""

    def test_same_model_same_link(self) -> None:
        model = ModelData(id="org/name", tags=["lora"])

        for builder in (lmstudio_link, diffusionbee_link, jan_link, backyard_link, drawthings_link):
            assert str(builder(model)) == str(builder(model))
