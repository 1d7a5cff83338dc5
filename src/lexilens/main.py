#!/usr/bin/env python3
"""LexiLens: reading aids overlay. Alt+L toggles the aids, Alt+P the panel"""

import logging
import platform
import signal
import sys
import threading

from .adapters.config_env import load_app_config
from .adapters.modifiers import logging_adapters
from .adapters.scroll import PynputScroller
from .adapters.settings_store import JsonSettingsStore
from .adapters.ui_feedback import NotifySummarySurface
from .config import config
from .core.controller import OverlayController
from .core.events import EventBus, LocalMessageChannel
from .keyboard_handler import KeyboardHandler

IS_WINDOWS = sys.platform == "win32"


class LexiLens:
    """Main application - one overlay controller plus hotkeys"""

    def __init__(self):
        self.app_config = load_app_config()
        config.create_dirs()
        self.store = JsonSettingsStore(self.app_config.settings_path)
        self.bus = EventBus()
        self.channel = LocalMessageChannel()
        surface = NotifySummarySurface() if self.app_config.summary_surface == "notify" else None
        self.controller = OverlayController(
            store=self.store,
            adapters=logging_adapters(),
            bus=self.bus,
            channel=self.channel,
            scroller=PynputScroller(step_pixels=self.app_config.scroll_step_pixels),
            config=self.app_config,
            summary_surface=surface,
        )
        self.keyboard = KeyboardHandler(
            config.HOTKEY_MODIFIER,
            {
                config.HOTKEY_TOGGLE_KEY: self.on_toggle_enabled,
                config.HOTKEY_PANEL_KEY: self.controller.toggle_panel,
            },
        )
        self._shutdown_event = threading.Event()

    def on_toggle_enabled(self):
        """Flip the master switch"""
        enabled = self.store.toggle_enabled()
        print("✓ Reading aids on" if enabled else "⏸ Reading aids off")

    def run(self):
        """Run the application"""
        print("\n" + "=" * 50)
        print("🔍 LexiLens")
        print("=" * 50)
        if self.app_config.debug:
            print(f"Platform: {platform.platform()} / Python {platform.python_version()}")
        print(f"Settings: {self.store.path}")
        print(f"Toggle aids: {config.HOTKEY_MODIFIER}+{config.HOTKEY_TOGGLE_KEY}")
        print(f"Toggle panel: {config.HOTKEY_MODIFIER}+{config.HOTKEY_PANEL_KEY}")
        print("Press Ctrl+C to quit")
        print("=" * 50 + "\n")

        self.controller.mount()
        self.keyboard.start()

        try:
            if IS_WINDOWS:
                self._shutdown_event.wait()
            else:
                signal.pause()
        except KeyboardInterrupt:
            pass

        self.shutdown()

    def shutdown(self):
        """Clean shutdown"""
        print("\nShutting down...")
        self._shutdown_event.set()
        self.keyboard.stop()
        self.controller.unmount()
        print("✓ Done")

    def request_shutdown(self):
        """Request application shutdown (thread-safe)"""
        self._shutdown_event.set()


def main():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = LexiLens()

    def signal_handler(sig, frame):
        app.request_shutdown()

    signal.signal(signal.SIGINT, signal_handler)
    if not IS_WINDOWS:
        signal.signal(signal.SIGTERM, signal_handler)

    app.run()


if __name__ == "__main__":
    main()
