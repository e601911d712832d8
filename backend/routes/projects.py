"""Project editing routes — load, inspector mode, clicks, overrides, layout."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

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
from backend.repos.project_repo import ProjectRecord, project_repo
from studio.kernel.overrides import Command, Reset, Update, overrides_for
from studio.kernel.session import EditorSession
from studio.kernel.types import PointerEvent

router = APIRouter(prefix="/api/projects", tags=["projects"])


async def _open_project(project_id: str) -> tuple[ProjectRecord, EditorSession]:
    record = await project_repo.get(project_id)
    if record is None or record.session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found.")
    return record, record.session


@router.put("/{project_id}", status_code=200)
async def load_project(project_id: str, req: LoadProjectRequest) -> ProjectResponse:
    """Open a project, replacing any session already open for it."""
    record = await project_repo.load(project_id, req.theme, req.team)
    session = record.session
    return ProjectResponse(
        project_id=project_id,
        theme=session.theme,
        inspector_active=session.inspector_active,
    )


@router.delete("/{project_id}", status_code=204)
async def close_project(project_id: str) -> None:
    """Tear down a project's editor session."""
    if not await project_repo.close(project_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found.")


@router.get("/{project_id}/theme", status_code=200)
async def get_theme(project_id: str) -> ThemeResponse:
    """Current theme configuration, including componentOverrides."""
    _, session = await _open_project(project_id)
    return ThemeResponse(theme=session.theme)


@router.post("/{project_id}/inspector", status_code=200)
async def set_inspector_mode(project_id: str, req: InspectorModeRequest) -> InspectorModeResponse:
    """Turn inspector mode on or off. Turning it off closes the panel."""
    _, session = await _open_project(project_id)
    session.set_inspector_active(req.active)
    return InspectorModeResponse(active=session.inspector_active, selected_id=session.selected_id)


@router.post("/{project_id}/click", status_code=200)
async def click_element(project_id: str, req: ClickRequest) -> ClickResponse:
    """
    Deliver a click on a preview element.

    With inspector mode on the click selects the element (unless the
    pass-through modifier is held). Otherwise the element's own action runs.
    """
    record, session = await _open_project(project_id)
    session.render()
    if req.element_id not in session.boundaries:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Element not on this page.")

    record.last_action = None
    event = PointerEvent(
        target_id=req.element_id,
        button=req.button,
        alt_key=req.alt_key,
        meta_key=req.meta_key,
        ctrl_key=req.ctrl_key,
        shift_key=req.shift_key,
    )
    metadata = session.click(event)
    if metadata is not None:
        return ClickResponse(selected=True, metadata=metadata.to_dict())
    return ClickResponse(selected=False, action=record.last_action)


@router.post("/{project_id}/overrides/{element_id}", status_code=200)
async def update_override(project_id: str, element_id: str, req: OverrideUpdateRequest) -> OverrideResponse:
    """Set (or clear, with a null value) one override field."""
    _, session = await _open_project(project_id)
    return _apply(session, element_id, Update(req.key, req.value))


@router.delete("/{project_id}/overrides/{element_id}", status_code=200)
async def reset_overrides(project_id: str, element_id: str) -> OverrideResponse:
    """Clear every override for an element."""
    _, session = await _open_project(project_id)
    return _apply(session, element_id, Reset())


@router.post("/{project_id}/layout", status_code=200)
async def report_layout(project_id: str, req: LayoutMeasurementRequest) -> LayoutResponse:
    """Push a layout measurement (the header's rendered height)."""
    _, session = await _open_project(project_id)
    session.measure(req.element_id, req.height)
    propagator = session.propagator
    return LayoutResponse(
        state=propagator.state.value,
        predicted_height=propagator.predicted,
        effective_height=propagator.effective_height,
        content_top_padding=propagator.content_top_padding,
    )


def _apply(session: EditorSession, element_id: str, command: Command) -> OverrideResponse:
    result = session.apply(element_id, command)
    if not result.accepted:
        raise HTTPException(status_code=422, detail=result.reason)
    return OverrideResponse(
        element_id=element_id,
        overrides=overrides_for(result.store, element_id),
        component_overrides=result.store,
    )
