"""
Club Studio Kernel — Descriptor Registry

Static lookups: ComponentType → descriptors, Trait → descriptors.
Pure, side-effect free. Unknown keys return an empty tuple, never raise.

Merge contract (used by the resolver):
  type descriptors, then each trait's descriptors in declaration order,
  deduplicated by key. The LAST descriptor for a key wins, so traits shadow
  the type and later traits shadow earlier ones. The key keeps the position
  of its first appearance (insertion-ordered map semantics).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from studio.kernel.types import (
    FONT_SIZES,
    FONT_WEIGHTS,
    RADII,
    SPACING_STEPS,
    ComponentType,
    PropertyDescriptor,
    PropertyKind,
    Trait,
)

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)

D = PropertyDescriptor
K = PropertyKind

_VISIBLE = D("visible", "Visible", K.TOGGLE, default=True)
_FONT_SIZE_OPTIONS = tuple(FONT_SIZES)
_FONT_WEIGHT_OPTIONS = tuple(FONT_WEIGHTS)
_RADIUS_OPTIONS = tuple(RADII)
_SPACING_OPTIONS = tuple(SPACING_STEPS)

# ---------------------------------------------------------------------------
# Component types (legacy, per-type descriptors)
# ---------------------------------------------------------------------------

_TYPE_DESCRIPTORS: dict[ComponentType, tuple[PropertyDescriptor, ...]] = {
    ComponentType.TEXT: (
        D("text", "Text", K.TEXT),
        D("fontSize", "Size", K.SELECT, options=("xs", "sm", "base", "lg", "xl", "2xl")),
        D("fontWeight", "Weight", K.SELECT, options=_FONT_WEIGHT_OPTIONS),
        D("textColor", "Color", K.COLOR),
        _VISIBLE,
    ),
    ComponentType.ICON: (
        D("icon", "Icon (Lucide)", K.TEXT),
        D("textColor", "Color", K.COLOR),
        D("width", "Size", K.SLIDER, min=12, max=48, step=2, unit="px"),
        _VISIBLE,
    ),
    ComponentType.CARD: (
        D("backgroundColor", "Background", K.COLOR),
        D("borderColor", "Border color", K.COLOR),
        D("borderRadius", "Corner radius", K.SELECT, options=_RADIUS_OPTIONS),
        _VISIBLE,
    ),
    ComponentType.BUTTON: (
        D("text", "Label", K.TEXT),
        D("backgroundColor", "Background", K.COLOR),
        D("textColor", "Text color", K.COLOR),
        _VISIBLE,
    ),
    ComponentType.IMAGE: (
        D("backgroundImage", "Image", K.IMAGE),
        D("borderRadius", "Corner radius", K.SELECT, options=_RADIUS_OPTIONS),
        _VISIBLE,
    ),
    ComponentType.CONTAINER: (
        D("backgroundColor", "Background", K.COLOR),
        _VISIBLE,
    ),
    ComponentType.NAVIGATION: (
        D("backgroundColor", "Background", K.COLOR),
        D("textColor", "Label color", K.COLOR),
        _VISIBLE,
    ),
    ComponentType.HEADER: (
        D("customGradientStart", "Gradient start", K.COLOR),
        D("customGradientEnd", "Gradient end", K.COLOR),
        D("backgroundImage", "Background image", K.IMAGE),
    ),
    ComponentType.LIST_ITEM: (
        D("text", "Text", K.TEXT),
        D("textColor", "Text color", K.COLOR),
        _VISIBLE,
    ),
    ComponentType.BADGE: (
        D("text", "Text", K.TEXT),
        D("backgroundColor", "Background", K.COLOR),
        D("textColor", "Text color", K.COLOR),
        _VISIBLE,
    ),
    ComponentType.INPUT: (
        D("text", "Placeholder", K.TEXT),
        D("borderColor", "Border color", K.COLOR),
        _VISIBLE,
    ),
    ComponentType.TAB_BAR: (
        D("backgroundColor", "Background", K.COLOR),
        D("textColor", "Label color", K.COLOR),
    ),
    ComponentType.BURGER_MENU: (
        D("backgroundColor", "Background", K.COLOR),
        D("textColor", "Text color", K.COLOR),
        D("backdropBlur", "Backdrop blur", K.SLIDER, min=0, max=20, step=1, unit="px"),
    ),
}

# ---------------------------------------------------------------------------
# Traits (per-instance descriptor bundles)
# ---------------------------------------------------------------------------

_TRAIT_DESCRIPTORS: dict[Trait, tuple[PropertyDescriptor, ...]] = {
    Trait.CONTENT: (
        D("text", "Content", K.TEXT),
    ),
    Trait.TYPOGRAPHY: (
        D("fontSize", "Font size", K.SELECT, options=_FONT_SIZE_OPTIONS),
        D("fontWeight", "Font weight", K.SELECT, options=_FONT_WEIGHT_OPTIONS),
        D("textColor", "Text color", K.COLOR),
    ),
    Trait.INTERACTION: (
        _VISIBLE,
        D("opacity", "Opacity", K.SLIDER, min=0, max=1, step=0.05),
    ),
    Trait.BACKGROUND: (
        D("backgroundColor", "Background", K.COLOR),
        D("customGradientStart", "Gradient start", K.COLOR),
        D("customGradientEnd", "Gradient end", K.COLOR),
        D("backgroundImage", "Background image", K.IMAGE),
    ),
    Trait.BORDER: (
        D("borderColor", "Border color", K.COLOR),
        D("borderRadius", "Corner radius", K.SELECT, options=_RADIUS_OPTIONS),
    ),
    Trait.SPACING: (
        D("padding", "Padding", K.SELECT, options=_SPACING_OPTIONS),
        D("margin", "Margin", K.SELECT, options=_SPACING_OPTIONS),
    ),
    Trait.ICON: (
        D("icon", "Icon (Lucide)", K.TEXT),
        D("customIconUrl", "Custom icon", K.IMAGE),
    ),
    Trait.LAYOUT: (
        D("width", "Width", K.TEXT),
        D("height", "Height", K.NUMBER, min=0, max=600, step=1, unit="px"),
    ),
    Trait.GLASS: (
        D("backdropBlur", "Glass blur", K.SLIDER, min=0, max=20, step=1, unit="px"),
        D("opacity", "Glass opacity", K.SLIDER, min=0, max=1, step=0.05),
    ),
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def descriptors_for_type(component_type: ComponentType | str) -> tuple[PropertyDescriptor, ...]:
    """Base descriptors for a component type. Unknown type → ()."""
    member = coerce(ComponentType, component_type)
    if member is None:
        logger.debug("registry: unknown component type %r", component_type)
        return ()
    return _TYPE_DESCRIPTORS[member]


def descriptors_for_trait(trait: Trait | str) -> tuple[PropertyDescriptor, ...]:
    """Descriptors contributed by one trait. Unknown trait → ()."""
    member = coerce(Trait, trait)
    if member is None:
        logger.debug("registry: unknown trait %r", trait)
        return ()
    return _TRAIT_DESCRIPTORS[member]


def merge_descriptors(
    component_type: ComponentType | str,
    traits: Iterable[Trait | str] = (),
) -> list[PropertyDescriptor]:
    """
    Type descriptors followed by each trait's descriptors in declaration
    order, deduplicated by key with the last occurrence winning.
    """
    merged: dict[str, PropertyDescriptor] = {}
    for descriptor in descriptors_for_type(component_type):
        merged[descriptor.key] = descriptor
    for trait in traits:
        for descriptor in descriptors_for_trait(trait):
            merged[descriptor.key] = descriptor
    return list(merged.values())


def coerce(enum_cls: type[_E], value: _E | str) -> _E | None:
    """Map a member or its string value onto the enum, None when unknown."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def covered_types() -> set[ComponentType]:
    return set(_TYPE_DESCRIPTORS)


def covered_traits() -> set[Trait]:
    return set(_TRAIT_DESCRIPTORS)
