"""
Club Studio FastAPI application.

Entry point for the editor host: project editing API plus preview pages.
"""

from __future__ import annotations

from fastapi import FastAPI

from backend.routes import preview as preview_routes
from backend.routes import projects as project_routes

app = FastAPI(
    title="Club Studio",
    docs_url=None,
    redoc_url=None,
)

# Register routes
app.include_router(project_routes.router)
app.include_router(preview_routes.router)


@app.get("/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok"}
