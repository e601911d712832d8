"""
Tests for preview serving: the simulated phone page and the inspector panel.
"""

from httpx import AsyncClient


class TestPreviewPage:
    async def test_renders_home(self, client: AsyncClient, project: str):
        response = await client.get(f"/preview/{project}")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<title>FC Test · Preview</title>" in response.text
        assert "linear-gradient(135deg, #aa0000, #0000aa)" in response.text

    async def test_unknown_project(self, client: AsyncClient):
        response = await client.get("/preview/nope")
        assert response.status_code == 404

    async def test_gradient_override(self, client: AsyncClient, project: str):
        await client.post(
            f"/api/projects/{project}/overrides/header_main",
            json={"key": "customGradientStart", "value": "#112233"},
        )
        response = await client.get(f"/preview/{project}")
        assert "linear-gradient(135deg, #112233, #0000aa)" in response.text

    async def test_hide_and_reset_shop_button(self, client: AsyncClient, project: str):
        url = f"/api/projects/{project}/overrides/shop_add_0"
        await client.post(url, json={"key": "visible", "value": False})
        hidden = await client.get(f"/preview/{project}?page=shop")
        assert hidden.text.count('data-action="add_to_cart"') == 3

        await client.delete(url)
        shown = await client.get(f"/preview/{project}?page=shop")
        assert shown.text.count('data-action="add_to_cart"') == 4

    async def test_inspector_mode_marks_page(self, client: AsyncClient, project: str):
        await client.post(f"/api/projects/{project}/inspector", json={"active": True})
        response = await client.get(f"/preview/{project}?page=roster")
        assert "studio-inspecting" in response.text
        assert 'data-element-id="player_name_7"' in response.text

    async def test_measured_height_moves_content(self, client: AsyncClient, project: str):
        await client.post(f"/api/projects/{project}/layout", json={"element_id": "header_main", "height": 300})
        response = await client.get(f"/preview/{project}")
        assert "padding-top: 320px" in response.text


class TestInspectorFragment:
    async def test_empty_docked(self, client: AsyncClient, project: str):
        response = await client.get(f"/preview/{project}/inspector")
        assert response.status_code == 200
        assert "Select an element" in response.text

    async def test_empty_floating_hints_modifier(self, client: AsyncClient, project: str):
        response = await client.get(f"/preview/{project}/inspector?variant=floating")
        assert "<kbd>Alt</kbd>" in response.text

    async def test_bad_variant(self, client: AsyncClient, project: str):
        response = await client.get(f"/preview/{project}/inspector?variant=sidebar")
        assert response.status_code == 422

    async def test_shows_selection_and_edits(self, client: AsyncClient, project: str):
        await client.post(f"/api/projects/{project}/inspector", json={"active": True})
        await client.get(f"/preview/{project}?page=roster")
        await client.post(f"/api/projects/{project}/click", json={"element_id": "player_name_7"})
        await client.post(
            f"/api/projects/{project}/overrides/player_name_7",
            json={"key": "text", "value": "Il Bomber"},
        )
        response = await client.get(f"/preview/{project}/inspector")
        assert "studio-property-editor" in response.text
        assert 'value="Il Bomber"' in response.text
        assert '<span class="studio-crumb">Roster</span>' in response.text

    async def test_reset_clears_panel_values(self, client: AsyncClient, project: str):
        await client.post(f"/api/projects/{project}/inspector", json={"active": True})
        await client.post(f"/api/projects/{project}/click", json={"element_id": "header_team_name"})
        url = f"/api/projects/{project}/overrides/header_team_name"
        await client.post(url, json={"key": "text", "value": "Renamed"})
        await client.delete(url)
        response = await client.get(f"/preview/{project}/inspector?variant=floating")
        assert 'value="Renamed"' not in response.text
        assert "studio-property-editor" in response.text
