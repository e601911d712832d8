"""
Club Studio Kernel — Header Height Propagator

The preview header is absolutely positioned, so the content below it needs
a top padding equal to the header's real height. That height is only known
after layout, so the propagator keeps two values:

  PREDICTED → computed synchronously from the configuration (no flash of
              overlapping content on the first frame)
  MEASURED  → reported later by the host's layout observer; once present it
              always wins over the prediction

Configuration changes recompute the prediction but never drop back from
MEASURED. Measurements are last-write-wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

from studio.kernel.types import CONTENT_GAP_PX

logger = logging.getLogger(__name__)

HEADER_ELEMENT_ID = "header_main"

HOME_PAGE = "home"

# (base, universal menu, header tabs)
_HOME_HEIGHTS = (230, 60, 50)
_PAGE_HEIGHTS = (130, 45, 50)


def predict_header_height(
    page: str,
    universal_menu: bool = False,
    header_tabs: bool = False,
    safe_area_top: float = 0,
) -> float:
    """Predicted header height in px for a page and header configuration."""
    base, menu, tabs = _HOME_HEIGHTS if page == HOME_PAGE else _PAGE_HEIGHTS
    height = base
    if universal_menu:
        height += menu
    if header_tabs:
        height += tabs
    return height + (safe_area_top or 0)


def header_flags(theme: dict[str, Any]) -> tuple[bool, bool]:
    """(universal menu shown, header tabs shown) for a theme configuration."""
    header = theme.get("header") or {}
    universal_menu = bool(header.get("enableUniversalMenu")) and bool(header.get("universalMenuItems"))
    header_tabs = theme.get("navigationType") == "header_tabs"
    return universal_menu, header_tabs


# ---------------------------------------------------------------------------
# Host capability
# ---------------------------------------------------------------------------

Unsubscribe = Callable[[], None]


class LayoutMeasurementSource(Protocol):
    """Reports an element's rendered height whenever it changes."""

    def observe(self, element_id: str, callback: Callable[[float], None]) -> Unsubscribe: ...


class PushedLayoutSource:
    """Measurements pushed in by the host (a browser bridge, a test, an HTTP call)."""

    def __init__(self) -> None:
        self._observers: dict[str, list[Callable[[float], None]]] = {}

    def observe(self, element_id: str, callback: Callable[[float], None]) -> Unsubscribe:
        self._observers.setdefault(element_id, []).append(callback)

        def unsubscribe() -> None:
            callbacks = self._observers.get(element_id, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def push(self, element_id: str, height: float) -> int:
        """Deliver a measurement. Returns how many observers received it."""
        callbacks = list(self._observers.get(element_id, []))
        for callback in callbacks:
            callback(height)
        return len(callbacks)


# ---------------------------------------------------------------------------
# Propagator
# ---------------------------------------------------------------------------


class HeightState(str, Enum):
    PREDICTED = "predicted"
    MEASURED = "measured"


class HeaderHeightPropagator:
    def __init__(self, safe_area_top: float = 0, content_gap: float = CONTENT_GAP_PX) -> None:
        self.safe_area_top = safe_area_top
        self.content_gap = content_gap
        self.state = HeightState.PREDICTED
        self.predicted: float = predict_header_height(HOME_PAGE, safe_area_top=safe_area_top)
        self.measured: float | None = None
        self._unsubscribe: Unsubscribe | None = None

    def on_config_change(self, theme: dict[str, Any], page: str) -> float:
        universal_menu, header_tabs = header_flags(theme)
        self.predicted = predict_header_height(page, universal_menu, header_tabs, self.safe_area_top)
        return self.predicted

    def on_measure(self, height: float) -> None:
        if height is None or height <= 0:
            logger.debug("header: ignoring measurement %r", height)
            return
        self.measured = height
        self.state = HeightState.MEASURED

    @property
    def effective_height(self) -> float:
        return self.measured if self.measured is not None else self.predicted

    @property
    def content_top_padding(self) -> float:
        return self.effective_height + self.content_gap

    def attach(self, source: LayoutMeasurementSource, element_id: str = HEADER_ELEMENT_ID) -> None:
        """Subscribe to a layout source. Replaces any previous subscription."""
        self.detach()
        self._unsubscribe = source.observe(element_id, self.on_measure)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
