"""Inbound message bridge: host runtime messages to transient UI state."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from .events import SUMMARIZE_TEXT
from .ports import MessageChannel, Subscription
from .ui_state import OverlayState

logger = logging.getLogger(__name__)


class MessageBridge:
    """Handles host messages for the whole mounted lifetime.

    Runs regardless of the master switch: a summary request is honored even
    while the reading aids are off.
    """

    def __init__(
        self,
        channel: MessageChannel,
        state: OverlayState,
        on_summary: Callable[[str], None] | None = None,
    ):
        self._channel = channel
        self._state = state
        self._on_summary = on_summary
        self._subscription: Subscription | None = None

    @property
    def attached(self) -> bool:
        return self._subscription is not None

    def attach(self) -> None:
        if self._subscription is not None:
            return
        self._subscription = self._channel.add_listener(self.handle_message)

    def detach(self) -> None:
        if self._subscription is None:
            return
        subscription, self._subscription = self._subscription, None
        subscription.release()

    def handle_message(self, message: Any) -> None:
        kind, payload = _unpack(message)
        if kind != SUMMARIZE_TEXT or not isinstance(payload, str):
            return
        logger.debug("Summary received (%d chars)", len(payload))
        self._state.show_summary(payload)
        if self._on_summary:
            self._on_summary(payload)


def _unpack(message: Any) -> tuple[Any, Any]:
    if isinstance(message, Mapping):
        return message.get("type"), message.get("payload")
    return getattr(message, "type", None), getattr(message, "payload", None)
