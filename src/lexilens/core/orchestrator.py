"""Lifecycle orchestration for the modifier adapters.

Turns classified transitions into adapter calls. Disables always run before
enables and updates within one cycle, so nothing is left enabled when the
master switch goes off. Every adapter call is isolated: a failing modifier
is logged and the rest of the cycle still runs.
"""

from __future__ import annotations

import logging

from .diff import Transition, changed_parameters, classify, is_parameter_only_change
from .modifiers import SLOTS_BY_ID, ModifierId
from .ports import ModifierAdapters
from .settings_model import Settings

logger = logging.getLogger(__name__)

# Order in which transition kinds are applied within a cycle
_PHASES = (
    (Transition.DISABLE, Transition.REMOVE),
    (Transition.ENABLE, Transition.APPLY),
    (Transition.UPDATE,),
)


class LifecycleOrchestrator:
    """Applies settings snapshots to the modifier adapters."""

    def __init__(self, adapters: ModifierAdapters):
        self._adapters = adapters
        self._last_applied: Settings | None = None

    @property
    def last_applied(self) -> Settings | None:
        return self._last_applied

    def sync(self, settings: Settings, is_loading: bool = False) -> list[ModifierId]:
        """Diff ``settings`` against the last applied snapshot and apply it.

        Does nothing while the store is still loading, so defaults never reach
        the adapters before the real settings are known.

        Returns:
            Modifiers whose adapter call raised during this cycle.
        """
        if is_loading:
            return []
        transitions = classify(self._last_applied, settings)
        self._last_applied = settings
        return self.apply(transitions, settings)

    def update_parameters(self, settings: Settings, is_loading: bool = False) -> list[ModifierId]:
        """Push parameter tweaks of running modifiers without re-classifying.

        Only ``update`` is ever called on this path. Snapshots that change
        anything else (master switch, on/off flags, typography, toggle-only
        modifiers) go through :meth:`sync` instead.
        """
        if is_loading:
            return []
        previous = self._last_applied
        if not is_parameter_only_change(previous, settings):
            return self.sync(settings)

        self._last_applied = settings
        failed = []
        for modifier_id in changed_parameters(previous, settings):
            params = SLOTS_BY_ID[modifier_id].params(settings)
            if not self._call(modifier_id, "update", params):
                failed.append(modifier_id)
        return failed

    def apply(self, transitions: dict[ModifierId, Transition], settings: Settings) -> list[ModifierId]:
        """Invoke the adapters for ``transitions`` using ``settings`` as parameters."""
        failed = []
        for phase in _PHASES:
            for modifier_id, transition in transitions.items():
                if transition not in phase:
                    continue
                if not self._run(modifier_id, transition, settings):
                    failed.append(modifier_id)
        if failed:
            logger.warning(
                "Modifiers failed this cycle: %s", ", ".join(m.value for m in failed)
            )
        return failed

    def reset(self) -> None:
        """Forget the last applied snapshot; the next sync starts from scratch."""
        self._last_applied = None

    def _run(self, modifier_id: ModifierId, transition: Transition, settings: Settings) -> bool:
        slot = SLOTS_BY_ID[modifier_id]
        if transition is Transition.DISABLE:
            return self._call(modifier_id, "disable")
        if transition is Transition.REMOVE:
            return self._call(modifier_id, "remove")
        if transition is Transition.ENABLE:
            return self._call(modifier_id, "enable", slot.params(settings))
        if transition is Transition.APPLY:
            return self._call(modifier_id, "apply", slot.params(settings))
        if transition is Transition.UPDATE:
            return self._call(modifier_id, "update", slot.params(settings))
        return True

    def _call(self, modifier_id: ModifierId, method: str, *args) -> bool:
        return invoke_isolated(self._adapters, modifier_id, method, *args)


def invoke_isolated(adapters: ModifierAdapters, modifier_id: ModifierId, method: str, *args) -> bool:
    """Call one adapter method, logging instead of raising on failure."""
    adapter = adapters.get(modifier_id)
    logger.debug("%s.%s", modifier_id.value, method)
    try:
        getattr(adapter, method)(*args)
    except Exception:
        logger.exception("Modifier %s failed to %s", modifier_id.value, method)
        return False
    return True
