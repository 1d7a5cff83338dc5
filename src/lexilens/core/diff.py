"""Diff engine: classify what each modifier must do for a new snapshot."""

from __future__ import annotations

from enum import Enum

from .modifiers import MODIFIER_SLOTS, TYPOGRAPHY_SLOT, ModifierId, ModifierSlot
from .settings_model import TINT_PRESET_NONE, Settings


class Transition(Enum):
    NOOP = "noop"
    ENABLE = "enable"
    UPDATE = "update"
    DISABLE = "disable"
    APPLY = "apply"
    REMOVE = "remove"


def classify(previous: Settings | None, current: Settings) -> dict[ModifierId, Transition]:
    """Classify the transition of every modifier from ``previous`` to ``current``.

    ``previous`` is the last snapshot that was applied, or None on the first
    evaluation. A previous snapshot with the master switch off counts as
    "everything disabled", since the master sweep disabled every adapter and
    adapters are not expected to keep state across a disable.
    """
    if not current.enabled:
        return _master_off(previous)

    was_on = previous is not None and previous.enabled
    transitions = {
        TYPOGRAPHY_SLOT.id: Transition.APPLY
        if previous != current or not was_on
        else Transition.NOOP
    }
    for slot in MODIFIER_SLOTS:
        transitions[slot.id] = _classify_slot(slot, previous if was_on else None, current)
    return transitions


def _master_off(previous: Settings | None) -> dict[ModifierId, Transition]:
    sweep = previous is None or previous.enabled
    transitions = {
        TYPOGRAPHY_SLOT.id: Transition.REMOVE if sweep else Transition.NOOP,
    }
    for slot in MODIFIER_SLOTS:
        transitions[slot.id] = Transition.DISABLE if sweep else Transition.NOOP
    return transitions


def _classify_slot(
    slot: ModifierSlot, previous: Settings | None, current: Settings
) -> Transition:
    if slot.id is ModifierId.SCREEN_TINT and _tint_forced_off(current):
        # preset "none" wins over the enabled flag
        if previous is not None and slot.params(previous) == slot.params(current):
            return Transition.NOOP
        return Transition.DISABLE

    active = slot.is_active(current)
    was_active = previous is not None and slot.is_active(previous)
    if active and not was_active:
        return Transition.ENABLE
    if was_active and not active:
        return Transition.DISABLE
    if active and slot.updatable and slot.params(previous) != slot.params(current):
        return Transition.UPDATE
    return Transition.NOOP


def _tint_forced_off(settings: Settings) -> bool:
    tint = settings.visual_aids.screen_tint
    return tint.enabled and tint.preset == TINT_PRESET_NONE


def changed_parameters(previous: Settings, current: Settings) -> list[ModifierId]:
    """Updatable modifiers whose parameter sub-tree differs between snapshots."""
    return [
        slot.id
        for slot in MODIFIER_SLOTS
        if slot.updatable and slot.params(previous) != slot.params(current)
    ]


def is_parameter_only_change(previous: Settings | None, current: Settings) -> bool:
    """True when the only differences are parameter tweaks of running modifiers.

    Such changes can skip full classification and go straight to ``update``
    calls (slider drags produce many of them in a row).
    """
    if previous is None or not (previous.enabled and current.enabled):
        return False
    if previous.typography != current.typography:
        return False
    changed = False
    for slot in MODIFIER_SLOTS:
        if slot.params(previous) == slot.params(current):
            continue
        if not slot.updatable:
            return False
        if not (slot.is_active(previous) and slot.is_active(current)):
            return False
        changed = True
    return changed
