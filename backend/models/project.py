"""Project models for the studio editor host."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class LoadProjectRequest(BaseModel):
    """What the client sends to PUT /api/projects/{project_id}."""

    model_config = {"extra": "forbid"}

    theme: dict[str, Any] = Field(default_factory=dict)
    team: dict[str, Any] | None = None


class ProjectResponse(BaseModel):
    """What the load endpoint returns."""

    project_id: str
    theme: dict[str, Any]
    inspector_active: bool


class ThemeResponse(BaseModel):
    theme: dict[str, Any]


class InspectorModeRequest(BaseModel):
    """Turn inspector mode on or off."""

    model_config = {"extra": "forbid"}

    active: bool


class InspectorModeResponse(BaseModel):
    active: bool
    selected_id: str | None = None


class ClickRequest(BaseModel):
    """A click in the preview, with the modifier flags the browser reported."""

    model_config = {"extra": "forbid"}

    element_id: str = Field(min_length=1, max_length=64)
    button: int = Field(default=0, ge=0, le=4)
    alt_key: bool = False
    meta_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False


class ClickResponse(BaseModel):
    """Either a selection (metadata) or the element's own action, or neither."""

    selected: bool
    metadata: dict[str, Any] | None = None
    action: str | None = None


class OverrideUpdateRequest(BaseModel):
    """Set one override field. A null value clears the field."""

    model_config = {"extra": "forbid"}

    key: str = Field(min_length=1, max_length=64)
    value: str | bool | int | float | None


class OverrideResponse(BaseModel):
    element_id: str
    overrides: dict[str, Any]
    component_overrides: dict[str, Any]


class LayoutMeasurementRequest(BaseModel):
    """A rendered height reported by the browser's layout observer."""

    model_config = {"extra": "forbid"}

    element_id: str = Field(min_length=1, max_length=64)
    height: float = Field(gt=0)


class LayoutResponse(BaseModel):
    state: Literal["predicted", "measured"]
    predicted_height: float
    effective_height: float
    content_top_padding: float
