"""Gesture bridge: hand-conductor events to scrolling and panel toggles."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .events import HAND_GESTURE_EVENT, HAND_SCROLL_EVENT
from .ports import EventBus, PageScroller, Subscription
from .settings_model import Settings
from .ui_state import OverlayState

logger = logging.getLogger(__name__)

DEFAULT_SCROLL_MULTIPLIER = 2.0


class GestureBridge:
    """Listens for hand-tracking events while the hand conductor is on.

    Both subscriptions are held only while ``settings.enabled`` and the hand
    conductor flag are true. Attaching always releases any previous handles
    first, so repeated on/off cycles never stack listeners.
    """

    def __init__(
        self,
        bus: EventBus,
        scroller: PageScroller,
        state: OverlayState,
        scroll_multiplier: float = DEFAULT_SCROLL_MULTIPLIER,
    ):
        self._bus = bus
        self._scroller = scroller
        self._state = state
        self._scroll_multiplier = scroll_multiplier
        self._subscriptions: list[Subscription] = []

    @property
    def attached(self) -> bool:
        return bool(self._subscriptions)

    @staticmethod
    def should_listen(settings: Settings) -> bool:
        return settings.enabled and settings.visual_aids.hand_conductor.enabled

    def sync(self, settings: Settings) -> None:
        """Attach or detach the listeners to match ``settings``."""
        wanted = self.should_listen(settings)
        if wanted and not self.attached:
            self.attach()
        elif not wanted and self.attached:
            self.detach()

    def attach(self) -> None:
        self.detach()
        self._subscriptions = [
            self._bus.subscribe(HAND_SCROLL_EVENT, self.handle_scroll),
            self._bus.subscribe(HAND_GESTURE_EVENT, self.handle_gesture),
        ]
        logger.debug("Hand conductor listeners attached")

    def detach(self) -> None:
        if not self._subscriptions:
            return
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.release()
        logger.debug("Hand conductor listeners detached")

    def handle_scroll(self, detail: Any) -> None:
        delta_y = _field(detail, "deltaY", "delta_y")
        if isinstance(delta_y, bool) or not isinstance(delta_y, (int, float)):
            logger.debug("Ignoring hand scroll event without deltaY: %r", detail)
            return
        # Immediate scrolling; smooth scrolling lags behind continuous input
        self._scroller.scroll_by(delta_y * self._scroll_multiplier, smooth=False)

    def handle_gesture(self, detail: Any) -> None:
        direction = _field(detail, "direction")
        if direction == "RIGHT":
            self._state.toggle_panel()
        elif direction == "LEFT":
            self._state.close_panel()
        else:
            logger.debug("Ignoring hand gesture: %r", detail)


def _field(detail: Any, *names: str) -> Any:
    for name in names:
        if isinstance(detail, Mapping):
            if name in detail:
                return detail[name]
        elif hasattr(detail, name):
            return getattr(detail, name)
    return None
