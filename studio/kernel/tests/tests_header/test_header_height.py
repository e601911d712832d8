"""
Club Studio Header -- Height Prediction and Propagation Tests
"""

import pytest

from studio.kernel.header import (
    HeaderHeightPropagator,
    HeightState,
    PushedLayoutSource,
    header_flags,
    predict_header_height,
)

MENU_THEME = {"header": {"enableUniversalMenu": True, "universalMenuItems": ["news", "shop"]}}


# ============================================================================
# Prediction
# ============================================================================


class TestPrediction:
    @pytest.mark.parametrize(
        "page, menu, tabs, expected",
        [
            ("home", False, False, 230),
            ("home", True, False, 290),
            ("home", False, True, 280),
            ("home", True, True, 340),
            ("roster", False, False, 130),
            ("roster", True, False, 175),
            ("shop", False, True, 180),
            ("shop", True, True, 225),
        ],
    )
    def test_table(self, page, menu, tabs, expected):
        assert predict_header_height(page, menu, tabs) == expected

    def test_safe_area_added(self):
        assert predict_header_height("home", safe_area_top=44) == 274

    def test_flags_need_menu_items(self):
        assert header_flags({"header": {"enableUniversalMenu": True, "universalMenuItems": []}}) == (False, False)
        assert header_flags(MENU_THEME) == (True, False)
        assert header_flags({"navigationType": "header_tabs"}) == (False, True)


# ============================================================================
# Propagator
# ============================================================================


class TestPropagator:
    def test_starts_predicted(self):
        p = HeaderHeightPropagator()
        assert p.state is HeightState.PREDICTED
        assert p.effective_height == 230
        assert p.content_top_padding == 250

    def test_config_change_recomputes_prediction(self):
        p = HeaderHeightPropagator()
        p.on_config_change(MENU_THEME, "home")
        assert p.effective_height == 290

    def test_measured_wins(self):
        p = HeaderHeightPropagator()
        p.on_measure(301.5)
        assert p.state is HeightState.MEASURED
        assert p.effective_height == 301.5
        assert p.content_top_padding == 321.5

    def test_no_rollback_after_config_change(self):
        p = HeaderHeightPropagator()
        p.on_measure(240)
        p.on_config_change({"navigationType": "header_tabs"}, "roster")
        assert p.state is HeightState.MEASURED
        assert p.predicted == 180
        assert p.effective_height == 240

    def test_last_measurement_wins(self):
        p = HeaderHeightPropagator()
        p.on_measure(240)
        p.on_measure(260)
        assert p.effective_height == 260

    def test_non_positive_measure_ignored(self):
        p = HeaderHeightPropagator()
        p.on_measure(0)
        assert p.state is HeightState.PREDICTED

    def test_custom_gap(self):
        assert HeaderHeightPropagator(content_gap=8).content_top_padding == 238


class TestLayoutSource:
    def test_attach_receives_pushes(self):
        source = PushedLayoutSource()
        p = HeaderHeightPropagator()
        p.attach(source)
        assert source.push("header_main", 255) == 1
        assert p.effective_height == 255

    def test_other_elements_ignored(self):
        source = PushedLayoutSource()
        p = HeaderHeightPropagator()
        p.attach(source)
        assert source.push("shop_header", 40) == 0
        assert p.state is HeightState.PREDICTED

    def test_detach(self):
        source = PushedLayoutSource()
        p = HeaderHeightPropagator()
        p.attach(source)
        p.detach()
        source.push("header_main", 255)
        assert p.state is HeightState.PREDICTED

    def test_reattach_replaces_subscription(self):
        source = PushedLayoutSource()
        p = HeaderHeightPropagator()
        p.attach(source)
        p.attach(source)
        assert source.push("header_main", 255) == 1
