"""Repository for open editor projects (in-memory, one session per project)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from backend.config import settings
from studio.kernel.inspector import FloatingInspector
from studio.kernel.selectable import ModifierKeySource
from studio.kernel.session import EditorSession

logger = logging.getLogger(__name__)


@dataclass
class ProjectRecord:
    """An open project: its editor session plus what the host observed."""

    project_id: str
    session: EditorSession | None = None
    last_action: str | None = None
    theme_updates: int = 0
    actions: list[tuple[str, str]] = field(default_factory=list)

    def record_action(self, element_id: str, action: str) -> None:
        self.last_action = action
        self.actions.append((element_id, action))

    def record_theme_update(self, partial: dict[str, Any]) -> None:
        self.theme_updates += 1
        logger.debug("project %s: theme update %s", self.project_id, sorted(partial))


class ProjectRepo:
    """All open-project bookkeeping. Loading a project replaces its session."""

    def __init__(self) -> None:
        self._projects: dict[str, ProjectRecord] = {}

    async def load(
        self,
        project_id: str,
        theme: dict[str, Any],
        team: dict[str, Any] | None = None,
    ) -> ProjectRecord:
        """
        Open (or reopen) a project with a fresh editor session.

        Args:
            project_id: Project identifier chosen by the client
            theme: Theme configuration, including componentOverrides
            team: Team identity shown in the preview (defaults when omitted)

        Returns:
            The new ProjectRecord
        """
        record = ProjectRecord(project_id=project_id)
        record.session = EditorSession(
            theme,
            team,
            page=settings.DEFAULT_PAGE,
            modifiers=ModifierKeySource(settings.INSPECTOR_MODIFIER_KEY),
            inspector=FloatingInspector(modifier_label=settings.MODIFIER_LABEL),
            safe_area_top=settings.STANDALONE_SAFE_AREA_PX,
            content_gap=settings.CONTENT_GAP_PX,
            on_theme_update=record.record_theme_update,
            on_element_action=record.record_action,
        )
        previous = self._projects.get(project_id)
        if previous is not None:
            logger.info("project %s: replacing open session", project_id)
        self._projects[project_id] = record
        return record

    async def get(self, project_id: str) -> ProjectRecord | None:
        return self._projects.get(project_id)

    async def close(self, project_id: str) -> bool:
        """Drop a project's session. Returns False if it was not open."""
        return self._projects.pop(project_id, None) is not None

    def clear(self) -> None:
        self._projects.clear()


# Singleton shared by the API and preview routes
project_repo = ProjectRepo()
