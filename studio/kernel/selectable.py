"""
Club Studio Kernel — Selectable Boundary

Wraps any rendered node and turns it into an inspectable target.

  Inert  (inspector off) → plain wrapper, no overlay, clicks never intercepted.
  Active (inspector on)  → overlay + "type: label" tag; a primary click is
                           intercepted and answered with ComponentMetadata,
                           unless the pass-through modifier is held.

The boundary holds no mode of its own: the inspector flag is passed in on
every render and every click.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Protocol

from studio.kernel.markup import escape
from studio.kernel.resolver import build_metadata, is_hidden
from studio.kernel.types import ComponentMetadata, ComponentType, PointerEvent, Trait, enum_value

PRIMARY_BUTTON = 0

_POSITIONED_RE = re.compile(r"\b(absolute|fixed|relative)\b")


# ---------------------------------------------------------------------------
# Host capability
# ---------------------------------------------------------------------------


class PointerModifierSource(Protocol):
    """Tells the boundary whether a click should reach the real element."""

    def is_pass_through(self, event: PointerEvent) -> bool: ...


class ModifierKeySource:
    """Pass-through while a given modifier key is held (Alt by default)."""

    _ATTRS = {
        "alt": "alt_key",
        "meta": "meta_key",
        "ctrl": "ctrl_key",
        "shift": "shift_key",
    }

    def __init__(self, key: str = "alt") -> None:
        if key not in self._ATTRS:
            raise ValueError(f"unsupported modifier key: {key!r}")
        self.key = key
        self._attr = self._ATTRS[key]

    def is_pass_through(self, event: PointerEvent) -> bool:
        return bool(getattr(event, self._attr, False))


DEFAULT_MODIFIERS = ModifierKeySource("alt")


# ---------------------------------------------------------------------------
# Boundary
# ---------------------------------------------------------------------------


@dataclass
class Selectable:
    id: str
    type: ComponentType | str
    label: str
    traits: tuple[Trait | str, ...] = ()
    path: str | None = None
    class_name: str = ""
    style: str = ""
    action: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def metadata(self, override: dict[str, Any] | None = None) -> ComponentMetadata:
        return build_metadata(
            self.id,
            self.type,
            self.traits,
            override,
            label=self.label,
            path=self.path,
        )

    def handle_click(
        self,
        event: PointerEvent,
        *,
        inspector_active: bool,
        override: dict[str, Any] | None = None,
        modifiers: PointerModifierSource = DEFAULT_MODIFIERS,
    ) -> ComponentMetadata | None:
        """
        Returns metadata when the click selects this element, None when the
        click is left alone for the real element underneath.
        """
        if not inspector_active:
            return None
        if event.button != PRIMARY_BUTTON:
            return None
        if modifiers.is_pass_through(event):
            return None

        event.prevent_default()
        event.stop_propagation()
        return self.metadata(override)

    def render(
        self,
        children: str,
        *,
        inspector_active: bool,
        selected: bool = False,
        override: dict[str, Any] | None = None,
    ) -> str:
        style_attr = f' style="{escape(self.style)}"' if self.style else ""

        if not inspector_active:
            class_attr = f' class="{escape(self.class_name)}"' if self.class_name else ""
            return f"<div{class_attr}{style_attr}>{children}</div>"

        hidden = is_hidden(override or {})
        position = "" if _POSITIONED_RE.search(self.class_name) else "relative"
        classes = " ".join(c for c in (position, "group", self.class_name, "cursor-crosshair") if c)

        if selected:
            overlay_state = "border-indigo-500 bg-indigo-500/10"
        elif hidden:
            overlay_state = "border-rose-500/50 border-dashed bg-rose-500/5"
        else:
            overlay_state = "border-transparent group-hover:border-indigo-400/50 group-hover:bg-indigo-400/5"

        tag_color = "bg-rose-500" if hidden else "bg-indigo-500"
        tag_visibility = "" if selected else " opacity-0 group-hover:opacity-100"
        badge = '<span class="studio-hidden-badge">HIDDEN</span>' if hidden else ""

        return (
            f'<div class="{escape(classes)}"{style_attr}'
            f' data-element-id="{escape(self.id)}"'
            f' data-element-type="{escape(enum_value(self.type))}"'
            f'{" data-selected" if selected else ""}>'
            f'<div class="studio-overlay pointer-events-none {overlay_state}"></div>'
            f'<div class="studio-tag pointer-events-none {tag_color}{tag_visibility}">'
            f'<span class="studio-tag-type">{escape(enum_value(self.type))}:</span>'
            f"{escape(self.label)}{badge}"
            f"</div>"
            f"{children}"
            f"</div>"
        )
