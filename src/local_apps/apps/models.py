"""Pydantic models for local app descriptors.

A local app is either launched through a deep link or set up by hand
from shell snippets, never both. The two shapes are separate models
joined by a discriminated union, so an entry carrying both builders or
neither fails validation when the table is built.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Literal

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, HttpUrl

from local_apps.models.model_data import ModelData
from local_apps.models.pipelines import PipelineType


class AppAction(BaseModel):
    """What a model page needs to render one app button."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Registry key of the app")
    pretty_label: str = Field(..., description="Button label")
    kind: Literal["deeplink", "snippet"] = Field(..., description="How the app is opened")
    url: str | None = Field(None, description="Deep link to open, for deeplink apps")
    snippets: list[str] = Field(
        default_factory=list, description="Copyable shell blocks, for snippet apps"
    )
    macos_only: bool = Field(False, description="Whether to show a macOS-only pill")
    coming_soon: bool = Field(False, description="Whether the app is listed but not actionable")


class BaseLocalApp(BaseModel):
    """Fields shared by every local app."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pretty_label: str = Field(..., min_length=1, description="Name that appears in buttons")
    docs_url: HttpUrl = Field(..., description="Link to more info about the app")
    main_task: PipelineType = Field(..., description="Main category of the app")
    macos_only: bool = Field(False, description="Whether to display a 'macOS-only' pill")
    coming_soon: bool = Field(False, description="Listed but not yet actionable")
    display_on_model_page: Callable[[ModelData], bool] = Field(
        ..., description="Whether to offer the app on a model page"
    )

    def _action(
        self,
        key: str,
        kind: Literal["deeplink", "snippet"],
        url: str | None = None,
        snippets: list[str] | None = None,
    ) -> AppAction:
        return AppAction(
            key=key,
            pretty_label=self.pretty_label,
            kind=kind,
            url=url,
            snippets=snippets or [],
            macos_only=self.macos_only,
            coming_soon=self.coming_soon,
        )


class DeeplinkApp(BaseLocalApp):
    """App opened through a URL that preloads the model."""

    kind: Literal["deeplink"] = "deeplink"
    deeplink: Callable[[ModelData], AnyUrl] = Field(..., description="Deep link builder")

    def build_url(self, model: ModelData) -> AnyUrl:
        """Build the deep link for a model."""
        return self.deeplink(model)

    def resolve(self, key: str, model: ModelData) -> AppAction:
        return self._action(key, kind="deeplink", url=str(self.build_url(model)))


class SnippetApp(BaseLocalApp):
    """App set up by copying shell commands into a terminal."""

    kind: Literal["snippet"] = "snippet"
    snippet: Callable[[ModelData], str | list[str]] = Field(
        ..., description="Snippet builder returning one or more shell blocks"
    )

    def render(self, model: ModelData) -> list[str]:
        """Render the snippet blocks for a model, always as a list."""
        blocks = self.snippet(model)
        if isinstance(blocks, str):
            return [blocks]
        return list(blocks)

    def resolve(self, key: str, model: ModelData) -> AppAction:
        return self._action(key, kind="snippet", snippets=self.render(model))


LocalApp = Annotated[DeeplinkApp | SnippetApp, Field(discriminator="kind")]
