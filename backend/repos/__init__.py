"""
Repository layer for Club Studio.

Open project state lives here and ONLY here.
"""

from backend.repos.project_repo import ProjectRecord, ProjectRepo, project_repo

__all__ = [
    "ProjectRecord",
    "ProjectRepo",
    "project_repo",
]
