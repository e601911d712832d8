"""
Pytest configuration and fixtures for Club Studio host tests.
"""

from __future__ import annotations

import httpx
import pytest

from backend.main import app
from backend.repos.project_repo import project_repo

PROJECT_ID = "demo-club"

TEAM = {
    "name": "FC Test",
    "sportType": "Volley",
    "colors": {"primary": "#aa0000", "secondary": "#0000aa"},
}


@pytest.fixture(autouse=True)
def clear_projects():
    """Every test starts with no open projects."""
    project_repo.clear()
    yield
    project_repo.clear()


@pytest.fixture
async def client():
    """Create test client."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def project(client):
    """An open project with the test team and an empty theme."""
    response = await client.put(f"/api/projects/{PROJECT_ID}", json={"theme": {}, "team": TEAM})
    assert response.status_code == 200
    return PROJECT_ID
