"""
Club Studio Kernel — Resolver

Pure functions that compute an element's effective editable-property set and
current values, plus the render-time helpers every themeable leaf uses.

Precedence at render time is always: override → caller's built-in default.
The store never knows an element's default; the resolver only ever combines
the two at the call site.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from studio.kernel.registry import coerce, merge_descriptors
from studio.kernel.types import (
    FONT_SIZES,
    FONT_WEIGHTS,
    NO_VALUE,
    RADII,
    SPACING_STEPS,
    ComponentMetadata,
    ComponentType,
    EditableProperty,
    Trait,
)

_URL_RE = re.compile(r"^(https?://|data:image/|/)\S+$")


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


def build_metadata(
    element_id: str,
    component_type: ComponentType | str,
    traits: Iterable[Trait | str] = (),
    overrides_for_id: dict[str, Any] | None = None,
    *,
    label: str = "",
    path: str | None = None,
) -> ComponentMetadata:
    """
    Merge type + trait descriptors and attach each one's current value.
    A missing override becomes the "" sentinel so bound controls stay
    controlled; a stored False stays False.
    """
    traits = tuple(traits)
    overrides = overrides_for_id or {}
    editable = []
    for descriptor in merge_descriptors(component_type, traits):
        value = overrides.get(descriptor.key)
        editable.append(EditableProperty(descriptor, NO_VALUE if value is None else value))

    return ComponentMetadata(
        id=element_id,
        type=coerce(ComponentType, component_type) or component_type,
        label=label or element_id,
        editable_props=tuple(editable),
        traits=tuple(coerce(Trait, t) or t for t in traits),
        path=path,
    )


def clear_values(metadata: ComponentMetadata) -> ComponentMetadata:
    """Project metadata back to "no override" for every property."""
    return ComponentMetadata(
        id=metadata.id,
        type=metadata.type,
        label=metadata.label,
        editable_props=tuple(p.with_value(NO_VALUE) for p in metadata.editable_props),
        traits=metadata.traits,
        path=metadata.path,
    )


def with_value(metadata: ComponentMetadata, key: str, value: Any) -> ComponentMetadata:
    """Metadata with one property's value replaced (None → "")."""
    new_value = NO_VALUE if value is None else value
    return ComponentMetadata(
        id=metadata.id,
        type=metadata.type,
        label=metadata.label,
        editable_props=tuple(p.with_value(new_value) if p.key == key else p for p in metadata.editable_props),
        traits=metadata.traits,
        path=metadata.path,
    )


# ---------------------------------------------------------------------------
# Render-time resolution
# ---------------------------------------------------------------------------


def is_hidden(override: dict[str, Any]) -> bool:
    """Only an explicit False hides. True and absence both mean visible."""
    return override.get("visible") is False


def resolve_text(override: dict[str, Any], default: str) -> str:
    return override.get("text") or default


def resolve_image(override: dict[str, Any], key: str) -> str | None:
    """A usable image URL from the override, or None (render the fallback)."""
    value = override.get(key)
    if not isinstance(value, str) or not _URL_RE.match(value.strip()):
        return None
    return value.strip()


def style_for(override: dict[str, Any]) -> str:
    """
    CSS declarations for the override's visual fields. Applied through the
    element's style attribute, on top of its untouched base classes.
    """
    decls: list[str] = []

    def add(prop: str, value: Any) -> None:
        if value is None or value == "":
            return
        decls.append(f"{prop}: {value}")

    add("color", override.get("textColor"))
    add("background-color", override.get("backgroundColor"))
    add("font-size", _token(FONT_SIZES, override.get("fontSize")))
    add("font-weight", _token(FONT_WEIGHTS, override.get("fontWeight")))
    border_color = override.get("borderColor")
    if border_color:
        add("border-color", border_color)
        add("border-style", "solid")
    add("border-radius", _token(RADII, override.get("borderRadius")))
    add("padding", _token(SPACING_STEPS, override.get("padding")))
    add("margin", _token(SPACING_STEPS, override.get("margin")))
    add("width", _length(override.get("width")))
    add("height", _length(override.get("height")))
    add("opacity", override.get("opacity"))
    blur = override.get("backdropBlur")
    if blur not in (None, ""):
        add("backdrop-filter", f"blur({_length(blur)})")
    background_image = resolve_image(override, "backgroundImage")
    if background_image:
        add("background-image", f"url('{background_image}')")
        add("background-size", "cover")

    return "; ".join(decls)


def header_gradient(
    header_override: dict[str, Any],
    theme: dict[str, Any],
    team: dict[str, Any],
) -> tuple[str, str]:
    """
    Gradient stops for the main header.
    start: override → theme header config → team primary
    end:   override → theme header config → team secondary → team primary
    The end stop gets an "dd" alpha suffix when a background image shows through.
    """
    header_config = theme.get("header") or {}
    colors = team.get("colors") or {}
    primary = colors.get("primary") or "#2563eb"

    start = header_override.get("customGradientStart") or header_config.get("customGradientStart") or primary
    end = (
        header_override.get("customGradientEnd")
        or header_config.get("customGradientEnd")
        or colors.get("secondary")
        or primary
    )
    if header_background_image(header_override, theme, team):
        end = f"{end}dd"
    return start, end


def header_background_image(
    header_override: dict[str, Any],
    theme: dict[str, Any],
    team: dict[str, Any],
) -> str | None:
    header_config = theme.get("header") or {}
    branding = team.get("branding") or {}
    return (
        resolve_image(header_override, "backgroundImage")
        or resolve_image(header_config, "backgroundImage")
        or resolve_image(branding, "customHeroImage")
    )


def _token(table: dict[str, str], value: Any) -> Any:
    if value is None or value == "":
        return None
    return table.get(str(value), value)


def _length(value: Any) -> Any:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return f"{value:g}px"
    return value
