"""Transient UI state shared with the presentation surfaces.

Not part of the settings: it is never persisted and starts closed/empty on
every mount.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class OverlayState:
    panel_open: bool = False
    summary_text: str | None = None

    def toggle_panel(self) -> bool:
        self.panel_open = not self.panel_open
        return self.panel_open

    def open_panel(self) -> None:
        self.panel_open = True

    def close_panel(self) -> None:
        self.panel_open = False

    def show_summary(self, text: str) -> None:
        # Summary display and settings panel are never shown together
        self.summary_text = text
        self.panel_open = False

    def dismiss_summary(self) -> None:
        self.summary_text = None

    def reset(self) -> None:
        self.panel_open = False
        self.summary_text = None


@dataclass(frozen=True)
class OverlayView:
    """What the floating control, panel and summary display render."""

    panel_open: bool
    summary_text: str | None

    @property
    def show_summary(self) -> bool:
        return bool(self.summary_text)

    @classmethod
    def from_state(cls, state: OverlayState) -> "OverlayView":
        return cls(panel_open=state.panel_open, summary_text=state.summary_text)
