"""
Club Studio Property Editor -- Control Rendering and Change Dispatch Tests
"""

import pytest

from studio.kernel.property_editor import PropertyEditor, effective_toggle, render_control, render_property_editor
from studio.kernel.types import EditableProperty, PropertyDescriptor, PropertyKind


def prop(key, kind, value="", **kwargs):
    return EditableProperty(PropertyDescriptor(key, kwargs.pop("label", key.title()), kind, **kwargs), value)


# ============================================================================
# Rendering
# ============================================================================


class TestControls:
    def test_text(self):
        html = render_control(prop("text", PropertyKind.TEXT, "Hello"))
        assert 'type="text"' in html
        assert 'value="Hello"' in html
        assert 'name="text"' in html

    def test_text_value_escaped(self):
        html = render_control(prop("text", PropertyKind.TEXT, '"><script>'))
        assert "<script>" not in html

    def test_color_picker_fallback(self):
        html = render_control(prop("textColor", PropertyKind.COLOR))
        assert 'type="color"' in html
        assert 'value="#ffffff"' in html

    def test_color_with_value(self):
        html = render_control(prop("textColor", PropertyKind.COLOR, "#112233"))
        assert html.count('value="#112233"') == 2

    def test_slider_defaults(self):
        html = render_control(prop("opacity", PropertyKind.SLIDER))
        assert 'min="0"' in html
        assert 'max="100"' in html
        assert 'step="1"' in html

    def test_slider_bounds_and_unit(self):
        html = render_control(prop("backdropBlur", PropertyKind.SLIDER, 8, min=0, max=20, step=1, unit="px"))
        assert 'max="20"' in html
        assert 'value="8"' in html
        assert "8px" in html

    def test_select_string_options(self):
        html = render_control(prop("fontSize", PropertyKind.SELECT, "lg", options=("sm", "lg")))
        assert 'value="sm" class=""' in html
        assert 'value="lg" class="active"' in html

    def test_select_labelled_options(self):
        options = ({"label": "Large", "value": "lg"},)
        html = render_control(prop("fontSize", PropertyKind.SELECT, "", options=options))
        assert ">Large</button>" in html
        assert 'value="lg"' in html

    def test_toggle_uses_default_when_unset(self):
        html = render_control(prop("visible", PropertyKind.TOGGLE, "", default=True))
        assert 'aria-checked="true"' in html

    def test_toggle_shows_stored_false(self):
        html = render_control(prop("visible", PropertyKind.TOGGLE, False, default=True))
        assert 'aria-checked="false"' in html

    def test_image_with_thumbnail(self):
        html = render_control(prop("backgroundImage", PropertyKind.IMAGE, "https://cdn.test/a.png"))
        assert 'src="https://cdn.test/a.png"' in html
        assert "No image" not in html

    def test_image_empty(self):
        html = render_control(prop("backgroundImage", PropertyKind.IMAGE))
        assert "No image" in html

    def test_unknown_kind_renders_nothing(self):
        assert render_control(prop("icon", "icon-picker")) == ""

    def test_list_renders_one_control_each(self):
        html = render_property_editor([
            prop("text", PropertyKind.TEXT),
            prop("textColor", PropertyKind.COLOR),
            prop("icon", "icon-picker"),
        ])
        assert html.count('class="studio-control ') == 2


# ============================================================================
# Change dispatch
# ============================================================================


class TestChanges:
    @pytest.fixture
    def calls(self):
        return []

    @pytest.fixture
    def editor(self, calls):
        props = [
            prop("text", PropertyKind.TEXT),
            prop("opacity", PropertyKind.SLIDER, min=0, max=1, step=0.05),
            prop("height", PropertyKind.NUMBER),
            prop("visible", PropertyKind.TOGGLE, "", default=True),
            prop("mystery", "icon-picker"),
        ]
        return PropertyEditor(props, lambda key, value: calls.append((key, value)))

    def test_text_change(self, editor, calls):
        assert editor.change("text", "Ciao")
        assert calls == [("text", "Ciao")]

    def test_slider_coerced_to_float(self, editor, calls):
        editor.change("opacity", "0.25")
        assert calls == [("opacity", 0.25)]

    def test_number_coerced_to_int(self, editor, calls):
        editor.change("height", "120")
        assert calls == [("height", 120)]

    def test_bad_number_not_dispatched(self, editor, calls):
        assert not editor.change("height", "tall")
        assert calls == []

    def test_toggle_string(self, editor, calls):
        editor.change("visible", "false")
        assert calls == [("visible", False)]

    def test_toggle_flips_effective_value(self, editor, calls):
        assert editor.toggle("visible")
        assert calls == [("visible", False)]

    def test_toggle_non_toggle_is_noop(self, editor, calls):
        assert not editor.toggle("text")
        assert calls == []

    def test_unknown_key_is_noop(self, editor, calls):
        assert not editor.change("nope", "x")
        assert calls == []

    def test_unknown_kind_is_noop(self, editor, calls):
        assert not editor.change("mystery", "x")
        assert calls == []

    def test_effective_toggle(self):
        assert effective_toggle(prop("visible", PropertyKind.TOGGLE, "", default=True)) is True
        assert effective_toggle(prop("visible", PropertyKind.TOGGLE, False, default=True)) is False
        assert effective_toggle(prop("flag", PropertyKind.TOGGLE)) is False
