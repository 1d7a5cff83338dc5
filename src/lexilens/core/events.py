"""In-process event bus and host message channel.

Listeners are registered through explicit subscription handles. Releasing a
handle is idempotent, and handles work as context managers, so every exit
path can release its listener without tracking whether it already did.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

HAND_SCROLL_EVENT = "LEXILENS_HAND_SCROLL"
HAND_GESTURE_EVENT = "LEXILENS_HAND_GESTURE"

SUMMARIZE_TEXT = "SUMMARIZE_TEXT"


@dataclass(frozen=True)
class ExtensionMessage:
    """Message delivered by the host runtime."""

    type: str
    payload: Any = None


class ListenerHandle:
    """Subscription handle returned by :class:`EventBus` and :class:`LocalMessageChannel`."""

    def __init__(self, release_fn: Callable[[], None]):
        self._release_fn = release_fn
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._release_fn()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


class EventBus:
    """Named structured events, dispatched synchronously in arrival order."""

    def __init__(self):
        self._handlers: dict[str, list[ListenerEntry]] = {}

    def subscribe(self, name: str, handler: Callable[[Any], None]) -> ListenerHandle:
        entry = ListenerEntry(handler)
        self._handlers.setdefault(name, []).append(entry)
        return ListenerHandle(lambda: self._remove(name, entry))

    def dispatch(self, name: str, detail: Any = None) -> int:
        """Deliver ``detail`` to every handler of ``name``; returns the handler count."""
        handlers = list(self._handlers.get(name, ()))
        for handler in handlers:
            handler.deliver(detail, name)
        return len(handlers)

    def listener_count(self, name: str) -> int:
        return len(self._handlers.get(name, ()))

    def _remove(self, name: str, entry) -> None:
        handlers = self._handlers.get(name)
        if not handlers:
            return
        handlers[:] = [h for h in handlers if h is not entry]
        if not handlers:
            del self._handlers[name]


class LocalMessageChannel:
    """Host message channel for a single process."""

    def __init__(self):
        self._listeners: list[ListenerEntry] = []

    def add_listener(self, listener: Callable[[Any], None]) -> ListenerHandle:
        entry = ListenerEntry(listener)
        self._listeners.append(entry)
        return ListenerHandle(lambda: self._remove(entry))

    def send(self, message: Any) -> None:
        for listener in list(self._listeners):
            listener.deliver(message, "message")

    def listener_count(self) -> int:
        return len(self._listeners)

    def _remove(self, entry) -> None:
        self._listeners[:] = [l for l in self._listeners if l is not entry]


class ListenerEntry:
    """Wraps a callback so the same function can be registered twice."""

    __slots__ = ("callback",)

    def __init__(self, callback: Callable[[Any], None]):
        self.callback = callback

    def __call__(self, arg: Any) -> None:
        self.callback(arg)

    def deliver(self, arg: Any, source: str) -> bool:
        """Call the callback, logging instead of raising on failure."""
        try:
            self.callback(arg)
        except Exception:
            logger.exception("Listener for %s failed", source)
            return False
        return True
