"""
Club Studio Kernel — Editor Session

The per-project context that owns the theme (and its override store), the
inspector mode flag, the current selection and the header propagator.
Created when a project loads, discarded when the operator switches project.

Flow:
  render(page)         → RenderResult; boundaries kept for click routing
  click(event)         → select (inspector on) or pass through to the
                         element's own action
  apply(id, command)   → new store, on_theme_update({"componentOverrides": ...}),
                         inspector copy kept in sync
  measure(id, height)  → header propagator correction

All updates are synchronous and replace the store wholesale.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from studio.kernel import overrides
from studio.kernel.header import HEADER_ELEMENT_ID, HeaderHeightPropagator, PushedLayoutSource
from studio.kernel.inspector import DockedInspector, InspectorHost
from studio.kernel.overrides import Command, OverrideStore, Reset, StoreResult, Update
from studio.kernel.preview import default_team, empty_theme, render_preview
from studio.kernel.resolver import clear_values, with_value
from studio.kernel.selectable import DEFAULT_MODIFIERS, PRIMARY_BUTTON, PointerModifierSource, Selectable
from studio.kernel.types import CONTENT_GAP_PX, ComponentMetadata, PointerEvent, RenderResult

logger = logging.getLogger(__name__)


def _noop(*args: Any) -> None:
    return None


class EditorSession:
    def __init__(
        self,
        theme: dict[str, Any] | None = None,
        team: dict[str, Any] | None = None,
        *,
        page: str = "home",
        modifiers: PointerModifierSource = DEFAULT_MODIFIERS,
        layout_source: PushedLayoutSource | None = None,
        inspector: InspectorHost | None = None,
        safe_area_top: float = 0,
        content_gap: float = CONTENT_GAP_PX,
        on_theme_update: Callable[[dict[str, Any]], None] = _noop,
        on_element_select: Callable[[ComponentMetadata], None] = _noop,
        on_inspector_close: Callable[[], None] = _noop,
        on_element_action: Callable[[str, str], None] = _noop,
    ) -> None:
        self.modifiers = modifiers
        self.on_theme_update = on_theme_update
        self.on_element_select = on_element_select
        self.on_inspector_close = on_inspector_close
        self.on_element_action = on_element_action

        self.inspector = inspector or DockedInspector()
        self.inspector.on_update = self._update_selection
        self.inspector.on_reset = self._reset_selection
        self.inspector.on_close = self._panel_closed

        self.propagator = HeaderHeightPropagator(safe_area_top=safe_area_top, content_gap=content_gap)
        self.layout_source = layout_source or PushedLayoutSource()
        self.propagator.attach(self.layout_source, HEADER_ELEMENT_ID)

        self.inspector_active = False
        self.selected_id: str | None = None
        self.boundaries: dict[str, Selectable] = {}
        self.page = page
        self.theme: dict[str, Any] = empty_theme()
        self.team: dict[str, Any] = default_team()
        self.load(theme, team)

    # -- state --------------------------------------------------------------

    @property
    def store(self) -> OverrideStore:
        return self.theme.get("componentOverrides") or {}

    def load(self, theme: dict[str, Any] | None, team: dict[str, Any] | None = None) -> None:
        """Replace the theme (and optionally the team) wholesale."""
        loaded = dict(theme) if theme else empty_theme()
        loaded["componentOverrides"] = overrides.normalize_store(loaded.get("componentOverrides") or {})
        self.theme = loaded
        if team is not None:
            self.team = team
        self.boundaries = {}
        if self.selected_id is not None:
            self.inspector.close()
        self._clear_selection()
        self.propagator.on_config_change(self.theme, self.page)
        logger.info("session: loaded theme with %d override entries", len(self.store))

    def update_config(self, partial: dict[str, Any]) -> None:
        """Merge a partial theme update (header config, navigation type...)."""
        self.theme = {**self.theme, **partial}
        self.propagator.on_config_change(self.theme, self.page)
        self.on_theme_update(partial)

    def set_page(self, page: str) -> None:
        self.page = page
        self.propagator.on_config_change(self.theme, page)

    def set_inspector_active(self, active: bool) -> None:
        if self.inspector_active == active:
            return
        self.inspector_active = active
        logger.info("session: inspector %s", "on" if active else "off")
        if not active and self.selected_id is not None:
            self.inspector.close()

    def toggle_inspector(self) -> bool:
        self.set_inspector_active(not self.inspector_active)
        return self.inspector_active

    # -- rendering and clicks -----------------------------------------------

    def render(self, page: str | None = None) -> RenderResult:
        if page is not None and page != self.page:
            self.set_page(page)
        result = render_preview(
            self.theme,
            self.team,
            self.page,
            inspector_active=self.inspector_active,
            selected_id=self.selected_id,
            propagator=self.propagator,
        )
        self.boundaries = result.boundaries
        return result

    def click(self, event: PointerEvent) -> ComponentMetadata | None:
        """
        Route a click on a rendered element. Returns the selected metadata,
        or None when the click reached the element itself.
        """
        boundary = self.boundaries.get(event.target_id)
        if boundary is None:
            logger.debug("session: click on unknown element %s", event.target_id)
            return None

        metadata = boundary.handle_click(
            event,
            inspector_active=self.inspector_active,
            override=overrides.overrides_for(self.store, boundary.id),
            modifiers=self.modifiers,
        )
        if metadata is not None:
            self.select(metadata)
            return metadata

        if event.button != PRIMARY_BUTTON:
            return None
        if boundary.action and not event.default_prevented:
            self.on_element_action(boundary.id, boundary.action)
        return None

    def select(self, metadata: ComponentMetadata) -> None:
        self.selected_id = metadata.id
        self.inspector.show(metadata)
        self.on_element_select(metadata)

    def close_inspector(self) -> None:
        self.inspector.close()

    # -- overrides ----------------------------------------------------------

    def apply(self, element_id: str, command: Command) -> StoreResult:
        result = overrides.apply(self.store, element_id, command)
        if not result.accepted:
            logger.warning("session: rejected command for %s: %s", element_id, result.reason)
            return result

        self.theme = {**self.theme, "componentOverrides": result.store}
        self._sync_inspector(element_id, command)
        self.on_theme_update({"componentOverrides": result.store})
        return result

    def update(self, element_id: str, key: str, value: Any) -> StoreResult:
        return self.apply(element_id, Update(key, value))

    def reset(self, element_id: str) -> StoreResult:
        return self.apply(element_id, Reset())

    def measure(self, element_id: str, height: float) -> int:
        """Deliver a layout measurement pushed by the host."""
        return self.layout_source.push(element_id, height)

    # -- internals ----------------------------------------------------------

    def _sync_inspector(self, element_id: str, command: Command) -> None:
        shown = self.inspector.metadata
        if shown is None or shown.id != element_id:
            return
        if isinstance(command, Reset):
            self.inspector.metadata = clear_values(shown)
        else:
            self.inspector.metadata = with_value(shown, command.key, command.value)

    def _update_selection(self, key: str, value: Any) -> bool:
        if self.selected_id is None:
            return False
        return self.apply(self.selected_id, Update(key, value)).accepted

    def _reset_selection(self) -> None:
        if self.selected_id is not None:
            self.apply(self.selected_id, Reset())

    def _panel_closed(self) -> None:
        self.selected_id = None
        self.on_inspector_close()

    def _clear_selection(self) -> None:
        self.selected_id = None
        self.inspector.metadata = None
