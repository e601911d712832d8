"""
Club Studio configuration — all environment variables in one place.

Read from environment at runtime. The kernel never reads these directly;
the host passes them in when it builds an editor session.
"""

from __future__ import annotations

import os


class Settings:
    """Application settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")

    # Inspector
    INSPECTOR_MODIFIER_KEY: str = os.environ.get("INSPECTOR_MODIFIER_KEY", "alt")

    # Preview
    DEFAULT_PAGE: str = os.environ.get("DEFAULT_PAGE", "home")
    CONTENT_GAP_PX: int = int(os.environ.get("CONTENT_GAP_PX", "20"))
    STANDALONE_SAFE_AREA_PX: int = int(os.environ.get("STANDALONE_SAFE_AREA_PX", "0"))

    @property
    def MODIFIER_LABEL(self) -> str:
        return {"alt": "Alt", "meta": "Cmd", "ctrl": "Ctrl", "shift": "Shift"}.get(
            self.INSPECTOR_MODIFIER_KEY, self.INSPECTOR_MODIFIER_KEY
        )


# Singleton instance
settings = Settings()

if settings.INSPECTOR_MODIFIER_KEY not in ("alt", "meta", "ctrl", "shift"):
    raise RuntimeError("INSPECTOR_MODIFIER_KEY must be one of: alt, meta, ctrl, shift")
