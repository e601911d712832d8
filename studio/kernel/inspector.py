"""
Club Studio Kernel — Inspector Host

Owns a local copy of the selected element's metadata and keeps it in sync
with edits and resets, so the panel reflects changes without being rebuilt
from a fresh click.

Two shells share one contract:
  DockedInspector   → side panel with a breadcrumb of the element path
  FloatingInspector → overlay card that hints the pass-through modifier

Contract: show(metadata | None), update(key, value), reset(), close(), render().
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from studio.kernel.markup import render_template
from studio.kernel.property_editor import PropertyEditor
from studio.kernel.resolver import clear_values, with_value
from studio.kernel.types import ComponentMetadata, enum_value

logger = logging.getLogger(__name__)

OnUpdate = Callable[[str, Any], bool | None]
OnReset = Callable[[], None]
OnClose = Callable[[], None]


def _noop(*args: Any) -> None:
    return None


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

DOCKED_TEMPLATE = """\
<aside class="studio-inspector studio-inspector-docked">
{{#metadata}}
  <header class="studio-inspector-header">
    <nav class="studio-breadcrumb">
      {{#crumbs}}<span class="studio-crumb">{{.}}</span>{{/crumbs}}
    </nav>
    <h2 class="studio-inspector-title">{{label}}</h2>
    <span class="studio-inspector-type">{{type}}</span>
    <code class="studio-inspector-id">{{id}}</code>
  </header>
  {{{editor}}}
  <footer class="studio-inspector-actions">
    <button type="button" data-action="reset">Reset to default</button>
    <button type="button" data-action="close">Close</button>
  </footer>
{{/metadata}}
{{^metadata}}
  <div class="studio-inspector-empty">
    <p>Select an element</p>
    <p class="studio-inspector-hint">Click any element in the preview to edit it.</p>
  </div>
{{/metadata}}
</aside>"""

FLOATING_TEMPLATE = """\
<div class="studio-inspector studio-inspector-floating" role="dialog">
{{#metadata}}
  <div class="studio-inspector-header">
    <span class="studio-inspector-type">{{type}}</span>
    <h2 class="studio-inspector-title">{{label}}</h2>
    <button type="button" data-action="close" aria-label="Close">&times;</button>
  </div>
  {{{editor}}}
  <div class="studio-inspector-actions">
    <button type="button" data-action="reset">Reset</button>
  </div>
{{/metadata}}
{{^metadata}}
  <div class="studio-inspector-empty">
    <p>Select an element</p>
    <p class="studio-inspector-hint">Hold <kbd>{{modifier}}</kbd> to click through to the app.</p>
  </div>
{{/metadata}}
</div>"""


# ---------------------------------------------------------------------------
# Host
# ---------------------------------------------------------------------------


class InspectorHost:
    """Selection-synced panel state shared by both shells."""

    template = DOCKED_TEMPLATE

    def __init__(
        self,
        on_update: OnUpdate = _noop,
        on_reset: OnReset = _noop,
        on_close: OnClose = _noop,
    ) -> None:
        self.on_update = on_update
        self.on_reset = on_reset
        self.on_close = on_close
        self.metadata: ComponentMetadata | None = None

    @property
    def is_empty(self) -> bool:
        return self.metadata is None

    def show(self, metadata: ComponentMetadata | None) -> None:
        self.metadata = metadata

    def update(self, key: str, value: Any) -> None:
        """
        Forward an edit and mirror it into the local copy. An on_update that
        returns False has refused the edit and the panel keeps its value.
        """
        if self.metadata is None:
            logger.debug("inspector: update %s with nothing selected", key)
            return
        if self.on_update(key, value) is False:
            logger.debug("inspector: update %s refused", key)
            return
        self.metadata = with_value(self.metadata, key, value)

    def reset(self) -> None:
        """Forward a reset and show every property as inheriting."""
        if self.metadata is None:
            return
        self.on_reset()
        self.metadata = clear_values(self.metadata)

    def close(self) -> None:
        self.metadata = None
        self.on_close()

    def editor(self) -> PropertyEditor | None:
        if self.metadata is None:
            return None
        return PropertyEditor(self.metadata.editable_props, self.update)

    def render(self) -> str:
        return render_template(self.template, self.context())

    def context(self) -> dict[str, Any]:
        editor = self.editor()
        if editor is None or self.metadata is None:
            return {"metadata": False}
        return {
            "metadata": {
                "id": self.metadata.id,
                "label": self.metadata.label,
                "type": enum_value(self.metadata.type),
                "editor": editor.render(),
            }
        }


class DockedInspector(InspectorHost):
    template = DOCKED_TEMPLATE

    def context(self) -> dict[str, Any]:
        ctx = super().context()
        if self.metadata is not None:
            ctx["metadata"]["crumbs"] = breadcrumb(self.metadata.path)
        return ctx


class FloatingInspector(InspectorHost):
    template = FLOATING_TEMPLATE

    def __init__(self, *args: Any, modifier_label: str = "Alt", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.modifier_label = modifier_label

    def context(self) -> dict[str, Any]:
        ctx = super().context()
        ctx["modifier"] = self.modifier_label
        return ctx


def breadcrumb(path: str | None) -> list[str]:
    """'Home > Header > Title' → ['Home', 'Header', 'Title']."""
    if not path:
        return []
    return [part.strip() for part in path.split(">") if part.strip()]

