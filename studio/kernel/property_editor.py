"""
Club Studio Kernel — Property Editor

Stateless: maps each EditableProperty to exactly one typed control and turns
raw control input back into an `on_update(key, value)` call.

Controls: text, color, slider/number, select, toggle, image.
A property whose kind is not recognized renders nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from studio.kernel.markup import render_template
from studio.kernel.registry import coerce
from studio.kernel.types import NO_VALUE, EditableProperty, PropertyKind

logger = logging.getLogger(__name__)

OnUpdate = Callable[[str, Any], None]

# ---------------------------------------------------------------------------
# Control templates
# ---------------------------------------------------------------------------

TEXT_CONTROL = """\
<div class="studio-control studio-control-text">
  <label for="{{id}}">{{label}}</label>
  <input id="{{id}}" name="{{key}}" type="text" value="{{value}}">
</div>"""

COLOR_CONTROL = """\
<div class="studio-control studio-control-color">
  <label for="{{id}}">{{label}}</label>
  <div class="studio-color-row">
    <input id="{{id}}" name="{{key}}" type="color" value="{{swatch}}">
    <input id="{{id}}-text" name="{{key}}" type="text" value="{{value}}" placeholder="#HEX">
  </div>
</div>"""

SLIDER_CONTROL = """\
<div class="studio-control studio-control-slider">
  <label for="{{id}}">{{label}}</label>
  <span class="studio-slider-value">{{display}}{{unit}}</span>
  <input id="{{id}}" name="{{key}}" type="range" min="{{min}}" max="{{max}}" step="{{step}}" value="{{position}}">
</div>"""

SELECT_CONTROL = """\
<div class="studio-control studio-control-select">
  <label for="{{id}}">{{label}}</label>
  <div id="{{id}}" class="studio-button-group" role="radiogroup">
    {{#options}}
    <button type="button" name="{{key}}" value="{{value}}" class="{{#active}}active{{/active}}"\
 aria-checked="{{#active}}true{{/active}}{{^active}}false{{/active}}">{{label}}</button>
    {{/options}}
  </div>
</div>"""

TOGGLE_CONTROL = """\
<div class="studio-control studio-control-toggle">
  <label for="{{id}}">{{label}}</label>
  <button id="{{id}}" name="{{key}}" type="button" role="switch"\
 class="studio-switch{{#on}} on{{/on}}" aria-checked="{{#on}}true{{/on}}{{^on}}false{{/on}}"></button>
</div>"""

IMAGE_CONTROL = """\
<div class="studio-control studio-control-image">
  <label for="{{id}}">{{label}}</label>
  {{#value}}<img class="studio-image-preview" src="{{value}}" alt="{{label}}">{{/value}}
  {{^value}}<div class="studio-image-empty">No image</div>{{/value}}
  <input id="{{id}}" name="{{key}}" type="url" value="{{value}}" placeholder="https://">
</div>"""


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_property_editor(properties: Sequence[EditableProperty]) -> str:
    parts = [render_control(prop) for prop in properties]
    body = "\n".join(p for p in parts if p)
    return f'<div class="studio-property-editor">\n{body}\n</div>'


def render_control(prop: EditableProperty) -> str:
    """One control for one property. Unknown kinds → ""."""
    kind = coerce(PropertyKind, prop.kind)
    renderer = _RENDERERS.get(kind) if kind is not None else None
    if renderer is None:
        logger.debug("property_editor: no control for kind %r (%s)", prop.kind, prop.key)
        return ""
    return renderer(prop)


def _base_context(prop: EditableProperty) -> dict[str, Any]:
    value = prop.value
    return {
        "id": f"prop-{prop.key}",
        "key": prop.key,
        "label": prop.descriptor.label,
        "value": "" if value is None else value,
    }


def _render_text(prop: EditableProperty) -> str:
    return render_template(TEXT_CONTROL, _base_context(prop))


def _render_color(prop: EditableProperty) -> str:
    ctx = _base_context(prop)
    ctx["swatch"] = prop.value or "#ffffff"
    return render_template(COLOR_CONTROL, ctx)


def _render_slider(prop: EditableProperty) -> str:
    d = prop.descriptor
    lo = d.min if d.min is not None else 0
    hi = d.max if d.max is not None else 100
    step = d.step if d.step is not None else 1
    ctx = _base_context(prop)
    has_value = prop.value not in (NO_VALUE, None)
    ctx.update(
        {
            "min": _num(lo),
            "max": _num(hi),
            "step": _num(step),
            "unit": d.unit,
            "display": _num(prop.value) if has_value else "",
            "position": _num(prop.value) if has_value else _num(lo),
        }
    )
    return render_template(SLIDER_CONTROL, ctx)


def _render_select(prop: EditableProperty) -> str:
    ctx = _base_context(prop)
    options = []
    for option in prop.descriptor.options:
        if isinstance(option, dict):
            opt_label, opt_value = option.get("label", ""), option.get("value", "")
        else:
            opt_label, opt_value = option, option
        options.append(
            {
                "label": opt_label,
                "value": opt_value,
                "key": prop.key,
                "active": prop.value == opt_value,
            }
        )
    ctx["options"] = options
    return render_template(SELECT_CONTROL, ctx)


def _render_toggle(prop: EditableProperty) -> str:
    ctx = _base_context(prop)
    ctx["on"] = effective_toggle(prop)
    return render_template(TOGGLE_CONTROL, ctx)


def _render_image(prop: EditableProperty) -> str:
    return render_template(IMAGE_CONTROL, _base_context(prop))


_RENDERERS: dict[PropertyKind, Callable[[EditableProperty], str]] = {
    PropertyKind.TEXT: _render_text,
    PropertyKind.COLOR: _render_color,
    PropertyKind.SLIDER: _render_slider,
    PropertyKind.NUMBER: _render_slider,
    PropertyKind.SELECT: _render_select,
    PropertyKind.TOGGLE: _render_toggle,
    PropertyKind.IMAGE: _render_image,
}


# ---------------------------------------------------------------------------
# Change dispatch
# ---------------------------------------------------------------------------


class PropertyEditor:
    """Binds a property list to an update callback."""

    def __init__(self, properties: Sequence[EditableProperty], on_update: OnUpdate) -> None:
        self.properties = {p.key: p for p in properties}
        self.on_update = on_update

    def render(self) -> str:
        return render_property_editor(list(self.properties.values()))

    def change(self, key: str, raw: Any) -> bool:
        """
        Coerce a raw control value for `key` and dispatch it.
        Returns False when nothing was dispatched.
        """
        prop = self.properties.get(key)
        if prop is None:
            logger.debug("property_editor: change for unknown key %s", key)
            return False

        kind = coerce(PropertyKind, prop.kind)
        if kind is None:
            return False

        try:
            value = _COERCERS[kind](raw)
        except (TypeError, ValueError):
            logger.debug("property_editor: ignoring %r for %s", raw, key)
            return False

        self.on_update(key, value)
        return True

    def toggle(self, key: str) -> bool:
        """Flip a toggle's effective value and dispatch it."""
        prop = self.properties.get(key)
        if prop is None or coerce(PropertyKind, prop.kind) is not PropertyKind.TOGGLE:
            return False
        self.on_update(key, not effective_toggle(prop))
        return True


def effective_toggle(prop: EditableProperty) -> bool:
    """A toggle's shown state: its override, else the descriptor default."""
    if prop.value in (NO_VALUE, None):
        return bool(prop.descriptor.default)
    return bool(prop.value)


def _to_number(raw: Any) -> int | float:
    if isinstance(raw, bool):
        raise TypeError("booleans are not numbers")
    number = float(raw)
    return int(number) if number.is_integer() else number


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in ("true", "on", "1", "yes"):
            return True
        if lowered in ("false", "off", "0", "no", ""):
            return False
        raise ValueError(f"not a boolean: {raw!r}")
    return bool(raw)


def _to_text(raw: Any) -> str:
    return "" if raw is None else str(raw)


_COERCERS: dict[PropertyKind, Callable[[Any], Any]] = {
    PropertyKind.TEXT: _to_text,
    PropertyKind.COLOR: _to_text,
    PropertyKind.SLIDER: _to_number,
    PropertyKind.NUMBER: _to_number,
    PropertyKind.SELECT: _to_text,
    PropertyKind.TOGGLE: _to_bool,
    PropertyKind.IMAGE: _to_text,
}


def _num(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
