"""Preview serving — GET /preview/{project_id} renders the simulated phone."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from backend.config import settings
from backend.repos.project_repo import project_repo
from studio.kernel.inspector import DockedInspector, FloatingInspector, InspectorHost
from studio.kernel.markup import render_template

logger = logging.getLogger(__name__)

router = APIRouter(tags=["preview"])

_NOT_FOUND = "<html><body><h1>404 — Project not found</h1></body></html>"

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{team_name}} · Preview</title>
</head>
<body class="studio-preview{{#inspector_active}} studio-inspecting{{/inspector_active}}">
{{{phone}}}
</body>
</html>"""


@router.get("/preview/{project_id}", response_class=HTMLResponse)
async def serve_preview(project_id: str, page: str | None = Query(default=None, max_length=32)) -> HTMLResponse:
    """
    Render one page of the simulated app for an open project.

    The response reflects the session's current inspector mode, selection
    and header height.
    """
    record = await project_repo.get(project_id)
    if record is None or record.session is None:
        return HTMLResponse(content=_NOT_FOUND, status_code=404)

    session = record.session
    result = session.render(page or session.page)
    html = render_template(
        PAGE_TEMPLATE,
        {
            "team_name": session.team.get("name") or "Club",
            "inspector_active": session.inspector_active,
            "phone": result.html,
        },
    )
    logger.debug("preview %s: rendered %s with %d boundaries", project_id, session.page, len(result.boundaries))
    return HTMLResponse(content=html, headers={"Cache-Control": "no-store"})


@router.get("/preview/{project_id}/inspector", response_class=HTMLResponse)
async def serve_inspector(
    project_id: str,
    variant: Literal["docked", "floating"] = "docked",
) -> HTMLResponse:
    """The inspector panel for the current selection, as an HTML fragment."""
    record = await project_repo.get(project_id)
    if record is None or record.session is None:
        return HTMLResponse(content=_NOT_FOUND, status_code=404)

    shell: InspectorHost
    if variant == "floating":
        shell = FloatingInspector(modifier_label=settings.MODIFIER_LABEL)
    else:
        shell = DockedInspector()
    shell.show(record.session.inspector.metadata)
    return HTMLResponse(content=shell.render(), headers={"Cache-Control": "no-store"})
