"""Core orchestration for LexiLens.

Wires the settings store, the modifier adapters and the two event bridges
together for one mounted overlay, decoupled from the concrete renderers,
hand tracker and host transport via ports.
"""

from __future__ import annotations

import logging

from .config_model import AppConfig
from .diff import is_parameter_only_change
from .gesture_bridge import DEFAULT_SCROLL_MULTIPLIER, GestureBridge
from .message_bridge import MessageBridge
from .orchestrator import LifecycleOrchestrator
from .ports import (
    EventBus,
    MessageChannel,
    ModifierAdapters,
    PageScroller,
    SettingsStore,
    Subscription,
    SummarySurface,
)
from .settings_model import Settings
from .teardown import TeardownController
from .ui_state import OverlayState, OverlayView

logger = logging.getLogger(__name__)


class OverlayController:
    """Owns the lifecycle of one overlay instance (mount -> changes -> unmount)."""

    def __init__(
        self,
        store: SettingsStore,
        adapters: ModifierAdapters,
        bus: EventBus,
        channel: MessageChannel,
        scroller: PageScroller,
        config: AppConfig | None = None,
        summary_surface: SummarySurface | None = None,
    ):
        self._store = store
        self._state = OverlayState()
        self._orchestrator = LifecycleOrchestrator(adapters)
        self._gesture_bridge = GestureBridge(
            bus,
            scroller,
            self._state,
            scroll_multiplier=config.scroll_multiplier if config else DEFAULT_SCROLL_MULTIPLIER,
        )
        self._message_bridge = MessageBridge(
            channel,
            self._state,
            on_summary=summary_surface.show if summary_surface else None,
        )
        self._teardown = TeardownController(adapters, self._gesture_bridge, self._message_bridge)
        self._store_subscription: Subscription | None = None
        self._mounted = False

    @property
    def state(self) -> OverlayState:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def gesture_bridge(self) -> GestureBridge:
        return self._gesture_bridge

    @property
    def message_bridge(self) -> MessageBridge:
        return self._message_bridge

    def mount(self) -> None:
        """Start listening and load settings. Safe to call more than once."""
        if self._mounted or self._teardown.done:
            return
        self._mounted = True
        self._store_subscription = self._store.subscribe(self._on_settings)
        self._message_bridge.attach()
        self._store.initialize()
        self._on_settings(self._store.settings)

    def unmount(self) -> None:
        """Tear everything down. Later calls are no-ops."""
        if not self._mounted:
            return
        self._mounted = False
        if self._store_subscription is not None:
            self._store_subscription.release()
            self._store_subscription = None
        self._teardown.run()
        self._orchestrator.reset()
        self._state.reset()

    def view(self) -> OverlayView | None:
        """View model for the presentation surfaces, or None while loading."""
        if not self._mounted or self._store.is_loading:
            return None
        return OverlayView.from_state(self._state)

    # Presentation callbacks

    def toggle_panel(self) -> None:
        self._state.toggle_panel()

    def close_panel(self) -> None:
        self._state.close_panel()

    def dismiss_summary(self) -> None:
        self._state.dismiss_summary()

    def _on_settings(self, settings: Settings) -> None:
        if not self._mounted or self._store.is_loading:
            return
        if is_parameter_only_change(self._orchestrator.last_applied, settings):
            self._orchestrator.update_parameters(settings)
        else:
            self._orchestrator.sync(settings)
        self._gesture_bridge.sync(settings)

    def __enter__(self):
        self.mount()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.unmount()
        return False
