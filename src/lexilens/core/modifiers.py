"""Modifier identity: the named slots the orchestrator drives.

Each slot declares what its adapter can do and how to read its parameters
and on/off state out of a settings snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Any, Callable

from .settings_model import TINT_PRESET_NONE, Settings


class ModifierId(Enum):
    TYPOGRAPHY = "typography"
    READING_RULER = "reading_ruler"
    SCREEN_TINT = "screen_tint"
    FOCUS_MODE = "focus_mode"
    BIONIC_READING = "bionic_reading"
    SYLLABLE_SPLITTER = "syllable_splitter"
    HAND_CONDUCTOR = "hand_conductor"
    HAND_FOCUS = "hand_focus"
    CLICK_TO_READ = "click_to_read"


class Capability(Flag):
    TOGGLEABLE = auto()
    UPDATABLE = auto()
    APPLICABLE = auto()
    REMOVABLE = auto()


@dataclass(frozen=True)
class ModifierSlot:
    """Declared capabilities and settings accessors for one modifier."""

    id: ModifierId
    capabilities: Capability
    params: Callable[[Settings], Any]
    is_active: Callable[[Settings], bool]

    @property
    def updatable(self) -> bool:
        return Capability.UPDATABLE in self.capabilities


def _tint_active(settings: Settings) -> bool:
    tint = settings.visual_aids.screen_tint
    return tint.enabled and tint.preset != TINT_PRESET_NONE


_TOGGLE = Capability.TOGGLEABLE
_TOGGLE_UPDATE = Capability.TOGGLEABLE | Capability.UPDATABLE

TYPOGRAPHY_SLOT = ModifierSlot(
    id=ModifierId.TYPOGRAPHY,
    capabilities=Capability.APPLICABLE | Capability.REMOVABLE,
    params=lambda s: s.typography,
    # Typography follows the master switch only
    is_active=lambda s: True,
)

MODIFIER_SLOTS: tuple[ModifierSlot, ...] = (
    ModifierSlot(
        id=ModifierId.READING_RULER,
        capabilities=_TOGGLE_UPDATE,
        params=lambda s: s.visual_aids.reading_ruler,
        is_active=lambda s: s.visual_aids.reading_ruler.enabled,
    ),
    ModifierSlot(
        id=ModifierId.SCREEN_TINT,
        capabilities=_TOGGLE_UPDATE,
        params=lambda s: s.visual_aids.screen_tint,
        is_active=_tint_active,
    ),
    ModifierSlot(
        id=ModifierId.FOCUS_MODE,
        capabilities=_TOGGLE_UPDATE,
        params=lambda s: s.visual_aids.focus_mode,
        is_active=lambda s: s.visual_aids.focus_mode.enabled,
    ),
    ModifierSlot(
        id=ModifierId.BIONIC_READING,
        capabilities=_TOGGLE,
        params=lambda s: s.cognitive.bionic_reading,
        is_active=lambda s: s.cognitive.bionic_reading.enabled,
    ),
    ModifierSlot(
        id=ModifierId.SYLLABLE_SPLITTER,
        capabilities=_TOGGLE,
        params=lambda s: s.cognitive.syllable_splitter,
        is_active=lambda s: s.cognitive.syllable_splitter.enabled,
    ),
    ModifierSlot(
        id=ModifierId.HAND_CONDUCTOR,
        capabilities=_TOGGLE_UPDATE,
        params=lambda s: s.visual_aids.hand_conductor,
        is_active=lambda s: s.visual_aids.hand_conductor.enabled,
    ),
    ModifierSlot(
        id=ModifierId.HAND_FOCUS,
        capabilities=_TOGGLE_UPDATE,
        params=lambda s: s.visual_aids.hand_focus,
        is_active=lambda s: s.visual_aids.hand_focus.enabled,
    ),
    ModifierSlot(
        id=ModifierId.CLICK_TO_READ,
        capabilities=_TOGGLE,
        params=lambda s: s.audio,
        is_active=lambda s: s.audio.click_to_read,
    ),
)

SLOTS_BY_ID: dict[ModifierId, ModifierSlot] = {
    slot.id: slot for slot in (TYPOGRAPHY_SLOT, *MODIFIER_SLOTS)
}
