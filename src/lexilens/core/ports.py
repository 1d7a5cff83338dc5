"""Core ports (interfaces) for LexiLens.

These protocols define the boundaries between the orchestration core and
the collaborators that actually touch the screen, the settings file, the
hand tracker or the host messaging transport. They are intentionally small
and capability-oriented so the core can be driven by fakes in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .settings_model import Settings


@runtime_checkable
class Subscription(Protocol):
    """Handle for a registered listener."""

    def release(self) -> None:
        """Remove the listener. Safe to call more than once."""


@runtime_checkable
class ToggleableModifier(Protocol):
    """Modifier with an enable/disable lifecycle."""

    def enable(self, params) -> None:
        """Start the modifier with its parameter sub-tree."""

    def disable(self) -> None:
        """Stop the modifier and undo its effect."""


@runtime_checkable
class UpdatableModifier(ToggleableModifier, Protocol):
    """Modifier that can also take new parameters while enabled."""

    def update(self, params) -> None:
        """Apply new parameters to an already enabled modifier."""


@runtime_checkable
class TypographyModifier(Protocol):
    """Typography overrides, applied whenever the overlay is on."""

    def apply(self, params) -> None:
        """(Re)apply typography settings."""

    def remove(self) -> None:
        """Restore the original typography."""


@runtime_checkable
class SettingsStore(Protocol):
    """Persisted settings owner."""

    @property
    def settings(self) -> "Settings":
        """Current snapshot."""

    @property
    def is_loading(self) -> bool:
        """True until the initial load has completed."""

    def initialize(self) -> None:
        """Start loading persisted settings."""

    def subscribe(self, listener: Callable[["Settings"], None]) -> Subscription:
        """Call ``listener`` with every new snapshot."""


@runtime_checkable
class EventBus(Protocol):
    """Structured page-level events (hand tracking output)."""

    def subscribe(self, name: str, handler: Callable[[Any], None]) -> Subscription:
        """Register ``handler`` for events called ``name``."""


@runtime_checkable
class MessageChannel(Protocol):
    """Messages delivered by the host runtime."""

    def add_listener(self, listener: Callable[[Any], None]) -> Subscription:
        """Register ``listener`` for every inbound message."""


@runtime_checkable
class PageScroller(Protocol):
    """Scrolls the reading surface."""

    def scroll_by(self, dy: float, smooth: bool = False) -> None:
        """Scroll vertically by ``dy`` pixels."""


@runtime_checkable
class SummarySurface(Protocol):
    """Displays a summary to the user."""

    def show(self, text: str) -> None:
        """Present ``text``."""


@dataclass(frozen=True)
class ModifierAdapters:
    """The full set of modifier adapters injected into the orchestrator."""

    typography: TypographyModifier
    reading_ruler: UpdatableModifier
    screen_tint: UpdatableModifier
    focus_mode: UpdatableModifier
    bionic_reading: ToggleableModifier
    syllable_splitter: ToggleableModifier
    hand_conductor: UpdatableModifier
    hand_focus: UpdatableModifier
    click_to_read: ToggleableModifier

    def get(self, modifier_id) -> Any:
        """Return the adapter for a ``ModifierId``."""
        return getattr(self, modifier_id.value)
