"""
Club Studio Kernel — Markup helpers

HTML escaping and Mustache (chevron) template rendering shared by the
property editor, the inspector shells and the preview renderer.
"""

from __future__ import annotations

from html import escape as _html_escape
from typing import Any

import chevron


def escape(text: Any) -> str:
    """HTML-escape user content."""
    return _html_escape(str(text), quote=True)


def render_template(template: str, context: dict[str, Any]) -> str:
    """Render a Mustache template. chevron escapes {{var}} and leaves {{{var}}} raw."""
    return chevron.render(template, context)


def class_names(*names: str | None) -> str:
    return " ".join(n for n in names if n)
