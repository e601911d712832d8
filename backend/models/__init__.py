"""
Pydantic models for Club Studio.

All request/response shapes defined here. No imports from repos or routes.
"""

from backend.models.project import (
    ClickRequest,
    ClickResponse,
    InspectorModeRequest,
    InspectorModeResponse,
    LayoutMeasurementRequest,
    LayoutResponse,
    LoadProjectRequest,
    OverrideResponse,
    OverrideUpdateRequest,
    ProjectResponse,
    ThemeResponse,
)

__all__ = [
    "LoadProjectRequest",
    "ProjectResponse",
    "ThemeResponse",
    "InspectorModeRequest",
    "InspectorModeResponse",
    "ClickRequest",
    "ClickResponse",
    "OverrideUpdateRequest",
    "OverrideResponse",
    "LayoutMeasurementRequest",
    "LayoutResponse",
]
