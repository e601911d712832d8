"""
Club Studio Inspector -- Panel Sync Tests

The inspector keeps its own copy of the selection's metadata: every accepted edit
and every reset is mirrored locally so the panel never needs a fresh click.
"""

import pytest

from studio.kernel.inspector import DockedInspector, FloatingInspector, breadcrumb
from studio.kernel.resolver import build_metadata
from studio.kernel.types import ComponentType, Trait


@pytest.fixture
def metadata():
    return build_metadata(
        "player_name_7",
        ComponentType.TEXT,
        [Trait.CONTENT, Trait.TYPOGRAPHY, Trait.INTERACTION],
        {"text": "Capitano", "textColor": "#ff0000"},
        label="Player name",
        path="Roster > Player 7 > Name",
    )


@pytest.fixture
def events():
    return []


@pytest.fixture
def docked(events):
    return DockedInspector(
        on_update=lambda key, value: events.append(("update", key, value)),
        on_reset=lambda: events.append(("reset",)),
        on_close=lambda: events.append(("close",)),
    )


# ============================================================================
# Sync
# ============================================================================


class TestSync:
    def test_starts_empty(self, docked):
        assert docked.is_empty
        assert docked.editor() is None

    def test_update_forwards_and_mirrors(self, docked, metadata, events):
        docked.show(metadata)
        docked.update("fontSize", "lg")
        assert events == [("update", "fontSize", "lg")]
        assert docked.metadata.value_of("fontSize") == "lg"
        assert docked.metadata.value_of("text") == "Capitano"

    def test_refused_update_keeps_value(self, metadata):
        host = DockedInspector(on_update=lambda key, value: False)
        host.show(metadata)
        host.update("text", "Bomber")
        assert host.metadata.value_of("text") == "Capitano"

    def test_reset_clears_every_value(self, docked, metadata, events):
        docked.show(metadata)
        docked.reset()
        assert events == [("reset",)]
        assert all(p.value == "" for p in docked.metadata.editable_props)
        assert docked.metadata.id == "player_name_7"

    def test_update_without_selection_is_noop(self, docked, events):
        docked.update("text", "x")
        docked.reset()
        assert events == []

    def test_close_clears_selection(self, docked, metadata, events):
        docked.show(metadata)
        docked.close()
        assert docked.is_empty
        assert events == [("close",)]

    def test_editor_edits_flow_through_host(self, docked, metadata, events):
        docked.show(metadata)
        docked.editor().change("text", "Bomber")
        assert events == [("update", "text", "Bomber")]
        assert docked.metadata.value_of("text") == "Bomber"


# ============================================================================
# Render
# ============================================================================


class TestRender:
    def test_docked_empty_state(self, docked):
        html = docked.render()
        assert "Select an element" in html
        assert "studio-property-editor" not in html

    def test_docked_with_selection(self, docked, metadata):
        docked.show(metadata)
        html = docked.render()
        assert "Player name" in html
        assert "studio-property-editor" in html
        assert 'value="Capitano"' in html
        assert 'data-action="reset"' in html
        assert 'data-action="close"' in html
        assert '<span class="studio-crumb">Roster</span>' in html

    def test_render_reflects_reset(self, docked, metadata):
        docked.show(metadata)
        docked.reset()
        assert 'value="Capitano"' not in docked.render()

    def test_floating_empty_state_hints_modifier(self):
        html = FloatingInspector(modifier_label="Alt").render()
        assert "Select an element" in html
        assert "<kbd>Alt</kbd>" in html

    def test_floating_with_selection(self, metadata):
        floating = FloatingInspector()
        floating.show(metadata)
        html = floating.render()
        assert "studio-inspector-floating" in html
        assert "studio-property-editor" in html
        assert "<kbd>" not in html


class TestBreadcrumb:
    def test_split(self):
        assert breadcrumb("Home > Header > Title") == ["Home", "Header", "Title"]

    def test_empty(self):
        assert breadcrumb(None) == []
        assert breadcrumb("") == []
