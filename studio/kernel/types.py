"""
Club Studio Kernel — Shared Types

Data classes and enums used across the registry, override store, resolver,
selectable boundary, property editor, inspector and preview renderer.
These are the contracts that bind the kernel together.

Key shapes:
- `theme` is a plain JSON-shaped dict (the project's theme configuration).
  Its `componentOverrides` key holds the override store:
  {element_id: {field: scalar}}.
- Override field names are camelCase because they are the persisted wire shape.
- `ComponentMetadata` is the resolved per-instance snapshot handed to the
  inspector.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

ELEMENT_ID_PATTERN = re.compile(r"^[a-z][a-z0-9_]{0,63}$")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ComponentType(str, Enum):
    """Legacy component type. Each member maps to a base descriptor list."""

    TEXT = "text"
    ICON = "icon"
    CARD = "card"
    BUTTON = "button"
    IMAGE = "image"
    CONTAINER = "container"
    NAVIGATION = "navigation"
    HEADER = "header"
    LIST_ITEM = "list-item"
    BADGE = "badge"
    INPUT = "input"
    TAB_BAR = "tab-bar"
    BURGER_MENU = "burger-menu"


class Trait(str, Enum):
    """Reusable bundle of editable properties, attached per instance."""

    CONTENT = "content"
    TYPOGRAPHY = "typography"
    INTERACTION = "interaction"
    BACKGROUND = "background"
    BORDER = "border"
    SPACING = "spacing"
    ICON = "icon"
    LAYOUT = "layout"
    GLASS = "glass"


class PropertyKind(str, Enum):
    TEXT = "text"
    COLOR = "color"
    SLIDER = "slider"
    NUMBER = "number"
    SELECT = "select"
    TOGGLE = "toggle"
    IMAGE = "image"


# ---------------------------------------------------------------------------
# Override fields
# ---------------------------------------------------------------------------

# Every field an override may carry. Values are JSON scalars.
OVERRIDE_FIELDS: set[str] = {
    # Core visual fields
    "textColor",
    "backgroundColor",
    "fontSize",
    "fontWeight",
    "borderColor",
    "text",
    "visible",
    "icon",
    "customIconUrl",
    # Advanced styles
    "borderRadius",
    "customGradientStart",
    "customGradientEnd",
    "backgroundImage",
    "backdropBlur",
    "opacity",
    # Spacing & layout
    "padding",
    "margin",
    "width",
    "height",
}

# Override fields that hold an image URL (fallback icon when unusable)
IMAGE_FIELDS: set[str] = {"customIconUrl", "backgroundImage"}

# Font size tokens → CSS values
FONT_SIZES: dict[str, str] = {
    "2xs": "10px",
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
}

FONT_WEIGHTS: dict[str, str] = {
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "black": "900",
}

RADII: dict[str, str] = {
    "none": "0",
    "sm": "4px",
    "md": "8px",
    "lg": "12px",
    "xl": "16px",
    "2xl": "24px",
    "full": "9999px",
}

SPACING_STEPS: dict[str, str] = {
    "none": "0",
    "xs": "4px",
    "sm": "8px",
    "md": "16px",
    "lg": "24px",
    "xl": "32px",
}

# Gap between the header's bottom edge and the first content row
CONTENT_GAP_PX = 20

# Empty-string sentinel for "no override" in editable values
NO_VALUE = ""


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    One editable property: what the inspector shows and which override key
    it writes. `kind` is usually a PropertyKind; descriptors loaded from data
    may carry a plain string the editor does not know.
    """

    key: str
    label: str
    kind: PropertyKind | str
    options: tuple[Any, ...] = ()
    min: float | None = None
    max: float | None = None
    step: float | None = None
    unit: str = ""
    default: Any = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "type": enum_value(self.kind),
        }
        if self.options:
            d["options"] = list(self.options)
        if self.min is not None:
            d["min"] = self.min
        if self.max is not None:
            d["max"] = self.max
        if self.step is not None:
            d["step"] = self.step
        if self.unit:
            d["unit"] = self.unit
        if self.default is not None:
            d["default"] = self.default
        return d


@dataclass(frozen=True)
class EditableProperty:
    """A descriptor paired with the element's current override value."""

    descriptor: PropertyDescriptor
    value: Any = NO_VALUE

    @property
    def key(self) -> str:
        return self.descriptor.key

    @property
    def kind(self) -> PropertyKind | str:
        return self.descriptor.kind

    def with_value(self, value: Any) -> EditableProperty:
        return replace(self, value=value)

    def to_dict(self) -> dict[str, Any]:
        d = self.descriptor.to_dict()
        d["value"] = self.value
        return d


@dataclass(frozen=True)
class ComponentMetadata:
    """Resolved, per-instance snapshot passed to the inspector."""

    id: str
    type: ComponentType | str
    label: str
    editable_props: tuple[EditableProperty, ...] = ()
    traits: tuple[Trait | str, ...] = ()
    path: str | None = None

    def value_of(self, key: str) -> Any:
        for prop in self.editable_props:
            if prop.key == key:
                return prop.value
        return None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "type": enum_value(self.type),
            "label": self.label,
            "editableProps": [p.to_dict() for p in self.editable_props],
            "traits": [enum_value(t) for t in self.traits],
        }
        if self.path is not None:
            d["path"] = self.path
        return d


@dataclass
class PointerEvent:
    """
    A click delivered to the preview. `alt_key`/`meta_key`/... mirror the
    modifier flags a browser reports; `button` 0 is the primary button.
    """

    target_id: str
    button: int = 0
    alt_key: bool = False
    meta_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass
class RenderResult:
    """HTML output plus every selectable boundary registered while rendering."""

    html: str
    boundaries: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_valid_element_id(value: str) -> bool:
    """Check the element id convention (snake_case, max 64 chars)."""
    return isinstance(value, str) and bool(ELEMENT_ID_PATTERN.match(value))


def is_scalar(value: Any) -> bool:
    """True for values an override may persist (JSON scalars, no null)."""
    return isinstance(value, (str, bool, int, float))


def enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value
